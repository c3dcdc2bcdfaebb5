"""Exchange rates API endpoints"""
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.core.deps import get_rate_lookup
from app.services import converter_service
from app.services.exchange_rate_service import RateLookup


router = APIRouter(prefix="/exchange-rates", tags=["exchange-rates"])


@router.get("/rate")
async def get_exchange_rate(
    lookup: Annotated[RateLookup, Depends(get_rate_lookup)],
    from_currency: str = Query(..., min_length=3, max_length=3),
    to_currency: str = Query(..., min_length=3, max_length=3),
) -> dict:
    """Get exchange rate for a currency pair (e.g., 1 USD = X EUR)."""
    from_curr = from_currency.upper()
    to_curr = to_currency.upper()
    rate, updated_at = await converter_service.get_rate(from_curr, to_curr, lookup)
    return {"from": from_curr, "to": to_curr, "rate": rate, "updated_at": updated_at}
