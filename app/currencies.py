"""Static table of supported currencies"""
from app.schemas.currency import Currency

SUPPORTED_CURRENCIES: tuple[Currency, ...] = tuple(
    Currency(code=code, name=name, symbol=symbol)
    for code, name, symbol in (
        ("USD", "US Dollar", "$"),
        ("EUR", "Euro", "€"),
        ("GBP", "British Pound", "£"),
        ("JPY", "Japanese Yen", "¥"),
        ("AUD", "Australian Dollar", "A$"),
        ("CAD", "Canadian Dollar", "C$"),
        ("CHF", "Swiss Franc", "Fr"),
        ("CNY", "Chinese Yuan", "¥"),
        ("INR", "Indian Rupee", "₹"),
        ("KRW", "South Korean Won", "₩"),
        ("BRL", "Brazilian Real", "R$"),
        ("RUB", "Russian Ruble", "₽"),
        ("MXN", "Mexican Peso", "$"),
        ("SGD", "Singapore Dollar", "S$"),
        ("HKD", "Hong Kong Dollar", "HK$"),
        ("NOK", "Norwegian Krone", "kr"),
        ("SEK", "Swedish Krona", "kr"),
        ("DKK", "Danish Krone", "kr"),
        ("PLN", "Polish Zloty", "zł"),
        ("TRY", "Turkish Lira", "₺"),
        ("ZAR", "South African Rand", "R"),
        ("AED", "UAE Dirham", "د.إ"),
        ("SAR", "Saudi Riyal", "﷼"),
        ("THB", "Thai Baht", "฿"),
        ("NZD", "New Zealand Dollar", "NZ$"),
    )
)

CURRENCIES_BY_CODE: dict[str, Currency] = {c.code: c for c in SUPPORTED_CURRENCIES}

DEFAULT_AMOUNT = "100"
DEFAULT_FROM_CURRENCY = "USD"
DEFAULT_TO_CURRENCY = "EUR"

# Quoted without minor units in practice
ZERO_DECIMAL_CURRENCIES = frozenset({"JPY", "KRW"})


def is_supported(code: str) -> bool:
    """True when the code (any case, surrounding spaces ignored) is in the static list."""
    return code.upper().strip() in CURRENCIES_BY_CODE
