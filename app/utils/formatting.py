"""Display formatting helpers (en-US conventions)"""
from datetime import datetime

from app.currencies import ZERO_DECIMAL_CURRENCIES

NOT_AVAILABLE = "Not available"


def format_number(number: float, decimals: int = 2) -> str:
    """Format with thousands separators and a fixed number of decimals."""
    return f"{number:,.{decimals}f}"


def currency_decimals(currency_code: str) -> int:
    return 0 if currency_code in ZERO_DECIMAL_CURRENCIES else 2


def format_currency(amount: float, currency_code: str) -> str:
    return format_number(amount, currency_decimals(currency_code))


def format_rate(rate: float, from_currency: str | None, to_currency: str) -> str:
    """Unit rate line, e.g. '1 USD = 0.920000 EUR'."""
    if rate == 1:
        return "Same currency - no conversion needed"
    if not from_currency:
        return ""
    return f"1 {from_currency} = {format_number(rate, 6)} {to_currency}"


def _parse_timestamp(value: str) -> datetime | None:
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        pass
    # e.g. "Sat, 19 Oct 2026 00:00:01 GMT"
    try:
        return datetime.strptime(value, "%a, %d %b %Y %H:%M:%S %Z")
    except ValueError:
        return None


def format_timestamp(value: str | None) -> str:
    """Format a freshness timestamp like 'Oct 19, 2026, 11:04 AM'."""
    if not value:
        return NOT_AVAILABLE
    parsed = _parse_timestamp(value)
    if parsed is None:
        return value
    hour = parsed.hour % 12 or 12
    suffix = "AM" if parsed.hour < 12 else "PM"
    return f"{parsed:%b} {parsed.day}, {parsed.year}, {hour:02d}:{parsed:%M} {suffix}"
