"""Service layer for business logic"""
from app.services import (
    exchange_rate_service,
    converter_service,
)

__all__ = [
    "exchange_rate_service",
    "converter_service",
]
