"""Currencies API endpoints"""
from fastapi import APIRouter

from app.currencies import SUPPORTED_CURRENCIES
from app.schemas.currency import CurrencyListResponse


router = APIRouter(prefix="/currencies", tags=["currencies"])


@router.get("", response_model=CurrencyListResponse)
async def get_currencies():
    """Get list of supported currencies"""
    return {"currencies": list(SUPPORTED_CURRENCIES)}
