"""Conversion schemas"""
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator


def _normalize_code(value: str) -> str:
    return value.upper().strip()


class RateTable(BaseModel):
    """Rates for one base currency: 1 base = rates[code] units of code"""
    base: str
    rates: dict[str, float]
    date: str | None = None
    fetched_at: datetime

    @property
    def updated_at(self) -> str:
        """Freshness timestamp reported by the service, else fetch time."""
        return self.date or self.fetched_at.isoformat()


class ConversionRequest(BaseModel):
    """Schema for a conversion request"""
    amount: float
    from_currency: str = Field(..., min_length=3, max_length=3)
    to_currency: str = Field(..., min_length=3, max_length=3)

    @field_validator("from_currency", "to_currency")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        return _normalize_code(v)


class ConversionResult(BaseModel):
    """Schema for a conversion result"""
    converted_amount: float
    currency: str
    rate: float
    from_currency: str | None = None


class ConversionResponse(ConversionResult):
    """Schema for the JSON API conversion response"""
    amount: float
    formatted_amount: str
    rate_text: str
    updated_at: str | None = None


class ConverterStatus(str, Enum):
    """Which result panel is visible"""
    IDLE = "idle"
    LOADING = "loading"
    RESULT = "result"
    ERROR = "error"


class ConverterState(BaseModel):
    """Complete converter form and panel state"""
    amount: str
    from_currency: str
    to_currency: str
    amount_error: str | None = None
    status: ConverterStatus = ConverterStatus.IDLE
    result: ConversionResult | None = None
    error: str | None = None
    convert_enabled: bool = True
    last_updated: str | None = None

    model_config = {"frozen": True}
