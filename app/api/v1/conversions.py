"""Conversions API endpoints"""
from typing import Annotated

from fastapi import APIRouter, Depends

from app.core.deps import get_rate_lookup
from app.schemas.conversion import ConversionRequest, ConversionResponse
from app.services import converter_service
from app.services.exchange_rate_service import RateLookup
from app.utils.formatting import format_currency, format_rate


router = APIRouter(prefix="/conversions", tags=["conversions"])


@router.post("", response_model=ConversionResponse)
async def create_conversion(
    conversion_data: ConversionRequest,
    lookup: Annotated[RateLookup, Depends(get_rate_lookup)],
):
    """
    Convert an amount between two supported currencies.

    Invalid amounts and unsupported currencies return 422, rate service
    failures return 502.
    """
    result, updated_at = await converter_service.convert_amount(conversion_data, lookup)
    return ConversionResponse(
        **result.model_dump(),
        amount=conversion_data.amount,
        formatted_amount=format_currency(result.converted_amount, result.currency),
        rate_text=format_rate(result.rate, result.from_currency, result.currency),
        updated_at=updated_at,
    )
