"""Converter error taxonomy"""


class ConverterError(Exception):
    """Base class for conversion failures."""


class InvalidAmountError(ConverterError):
    """Amount is not a finite number greater than zero."""


class RateLookupError(ConverterError):
    """The rate service could not provide the requested rate."""


class RateServiceUnavailableError(RateLookupError):
    """Transport failure, non-2xx status or unusable response body."""


class RateNotAvailableError(RateLookupError):
    """The response did not contain a rate for the target currency."""

    def __init__(self, currency: str) -> None:
        self.currency = currency
        super().__init__(f"Exchange rate not available for {currency}")


class UnsupportedCurrencyError(ConverterError):
    """Currency code is not in the supported list."""

    def __init__(self, currency: str) -> None:
        self.currency = currency
        super().__init__(f"Unsupported currency: {currency}")
