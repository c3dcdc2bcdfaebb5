"""Currency schemas"""
from pydantic import BaseModel, Field


class Currency(BaseModel):
    """Supported currency descriptor"""
    code: str = Field(..., min_length=3, max_length=3)
    name: str
    symbol: str

    model_config = {"frozen": True}

    @property
    def label(self) -> str:
        return f"{self.code} - {self.name}"


class CurrencyListResponse(BaseModel):
    """Schema for the supported currencies list"""
    currencies: list[Currency]
