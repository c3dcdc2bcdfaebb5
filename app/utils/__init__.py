from app.utils.formatting import (
    format_number,
    format_currency,
    format_rate,
    format_timestamp,
)

__all__ = [
    "format_number",
    "format_currency",
    "format_rate",
    "format_timestamp",
]
