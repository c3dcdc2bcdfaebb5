"""Pydantic schemas for request/response validation"""
from app.schemas.currency import Currency, CurrencyListResponse
from app.schemas.conversion import (
    RateTable,
    ConversionRequest,
    ConversionResult,
    ConversionResponse,
    ConverterStatus,
    ConverterState,
)


__all__ = [
    "Currency",
    "CurrencyListResponse",
    "RateTable",
    "ConversionRequest",
    "ConversionResult",
    "ConversionResponse",
    "ConverterStatus",
    "ConverterState",
]
