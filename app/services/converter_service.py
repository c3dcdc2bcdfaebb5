"""Converter service - form state transitions and conversion flow.

Every operation takes a ``ConverterState`` and returns a new one; the web
layer only renders whatever state comes back.
"""
import logging
import math
from typing import Any

from app.core.exceptions import (
    InvalidAmountError,
    RateLookupError,
    RateNotAvailableError,
    UnsupportedCurrencyError,
)
from app.currencies import (
    DEFAULT_AMOUNT,
    DEFAULT_FROM_CURRENCY,
    DEFAULT_TO_CURRENCY,
    SUPPORTED_CURRENCIES,
    is_supported,
)
from app.schemas.conversion import (
    ConversionRequest,
    ConversionResult,
    ConverterState,
    ConverterStatus,
)
from app.services.exchange_rate_service import RateLookup
from app.utils.formatting import format_currency, format_rate, format_timestamp

logger = logging.getLogger(__name__)

AMOUNT_FIELD_MESSAGE = "Please enter a valid positive number"
INVALID_AMOUNT_MESSAGE = "Please enter a valid amount greater than 0"
CONNECTIVITY_MESSAGE = "Failed to fetch exchange rates. Please check your connection and try again."
OUT_OF_RANGE_MESSAGE = "The converted amount is too large to display"


def initial_state() -> ConverterState:
    """Default form: 100 USD -> EUR, nothing shown."""
    return ConverterState(
        amount=DEFAULT_AMOUNT,
        from_currency=DEFAULT_FROM_CURRENCY,
        to_currency=DEFAULT_TO_CURRENCY,
    )


def parse_amount(value: str | float | None) -> float | None:
    """Parse user input as a real number, None when it is not one."""
    if value is None:
        return None
    if isinstance(value, (int, float)):
        return float(value)
    value = value.strip()
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def validate_amount(value: str | None) -> str | None:
    """Inline field check: message for non-numeric or negative input, else None."""
    if not value or not value.strip():
        return None
    amount = parse_amount(value)
    if amount is None or math.isnan(amount) or amount < 0:
        return AMOUNT_FIELD_MESSAGE
    return None


def require_amount(value: str | float | None) -> float:
    """Submit-time check: amount must be a finite number greater than 0."""
    amount = parse_amount(value)
    if amount is None or not math.isfinite(amount) or amount <= 0:
        raise InvalidAmountError(INVALID_AMOUNT_MESSAGE)
    return amount


def with_amount(state: ConverterState, amount: str) -> ConverterState:
    """Store the typed amount along with its inline validation message."""
    return state.model_copy(update={"amount": amount, "amount_error": validate_amount(amount)})


def show_loading(state: ConverterState) -> ConverterState:
    """Show only the busy indicator and disable the convert action."""
    return state.model_copy(update={
        "status": ConverterStatus.LOADING,
        "result": None,
        "error": None,
        "convert_enabled": False,
    })


def show_result(
    state: ConverterState,
    result: ConversionResult,
    last_updated: str | None = None,
) -> ConverterState:
    """Show the conversion result and remember the rate freshness timestamp."""
    return state.model_copy(update={
        "status": ConverterStatus.RESULT,
        "result": result,
        "error": None,
        "convert_enabled": True,
        "last_updated": last_updated or state.last_updated,
    })


def show_error(state: ConverterState, message: str) -> ConverterState:
    """Show only the error message and re-enable the convert action."""
    return state.model_copy(update={
        "status": ConverterStatus.ERROR,
        "result": None,
        "error": message,
        "convert_enabled": True,
    })


def clear(state: ConverterState) -> ConverterState:
    """Hide every result panel."""
    return state.model_copy(update={
        "status": ConverterStatus.IDLE,
        "result": None,
        "error": None,
        "convert_enabled": True,
    })


def select_currencies(state: ConverterState, from_currency: str, to_currency: str) -> ConverterState:
    """Change the pair; any shown result belongs to the old pair and is cleared."""
    updated = state.model_copy(update={
        "from_currency": from_currency.upper().strip(),
        "to_currency": to_currency.upper().strip(),
    })
    return clear(updated)


def swap(state: ConverterState) -> ConverterState:
    """Exchange source and target. Does not convert."""
    return select_currencies(state, state.to_currency, state.from_currency)


async def get_rate(
    from_currency: str,
    to_currency: str,
    lookup: RateLookup,
) -> tuple[float, str | None]:
    """Rate for one pair plus its freshness timestamp. Same currency is 1 with no lookup."""
    for code in (from_currency, to_currency):
        if not is_supported(code):
            raise UnsupportedCurrencyError(code)

    if from_currency == to_currency:
        return 1.0, None

    table = await lookup.get_rates(from_currency)
    rate = table.rates.get(to_currency)
    if not rate:
        raise RateNotAvailableError(to_currency)
    return rate, table.updated_at


async def convert_amount(
    request: ConversionRequest,
    lookup: RateLookup,
) -> tuple[ConversionResult, str | None]:
    """
    Convert one amount.

    Returns the result and the rate freshness timestamp (None when no lookup
    was needed). Raises InvalidAmountError, UnsupportedCurrencyError or
    RateLookupError.
    """
    amount = require_amount(request.amount)
    from_currency = request.from_currency
    to_currency = request.to_currency

    logger.debug("Converting %s %s to %s", amount, from_currency, to_currency)

    rate, updated_at = await get_rate(from_currency, to_currency, lookup)
    if from_currency == to_currency:
        return ConversionResult(converted_amount=amount, currency=to_currency, rate=rate), None

    converted_amount = amount * rate
    if not math.isfinite(converted_amount):
        raise InvalidAmountError(OUT_OF_RANGE_MESSAGE)

    result = ConversionResult(
        converted_amount=converted_amount,
        currency=to_currency,
        rate=rate,
        from_currency=from_currency,
    )
    return result, updated_at


async def convert(state: ConverterState, lookup: RateLookup) -> ConverterState:
    """Run the convert action from the current form state to a terminal state."""
    try:
        amount = require_amount(state.amount)
    except InvalidAmountError as e:
        return show_error(state, str(e))

    for code in (state.from_currency, state.to_currency):
        if not is_supported(code):
            return show_error(state, str(UnsupportedCurrencyError(code)))

    request = ConversionRequest(
        amount=amount,
        from_currency=state.from_currency,
        to_currency=state.to_currency,
    )
    if request.from_currency != request.to_currency:
        state = show_loading(state)

    try:
        result, updated_at = await convert_amount(request, lookup)
    except InvalidAmountError as e:
        return show_error(state, str(e))
    except RateLookupError as e:
        logger.warning("Conversion %s -> %s failed: %s", request.from_currency, request.to_currency, e)
        return show_error(state, CONNECTIVITY_MESSAGE)
    return show_result(state, result, updated_at)


def render(state: ConverterState) -> dict[str, Any]:
    """Template context for the converter page and its partials."""
    result = state.result
    context: dict[str, Any] = {
        "currencies": SUPPORTED_CURRENCIES,
        "state": state,
        "show_loading": state.status == ConverterStatus.LOADING,
        "show_result": state.status == ConverterStatus.RESULT and result is not None,
        "show_error": state.status == ConverterStatus.ERROR,
        "error_text": state.error,
        "converted_amount": None,
        "result_currency": None,
        "rate_text": None,
        "update_time": format_timestamp(state.last_updated),
    }
    if result is not None:
        context["converted_amount"] = format_currency(result.converted_amount, result.currency)
        context["result_currency"] = result.currency
        context["rate_text"] = format_rate(result.rate, result.from_currency, result.currency)
    return context
