"""Dependencies for route handlers"""
from app.services.exchange_rate_service import RateLookup, exchange_rate_service


def get_rate_lookup() -> RateLookup:
    """
    Rate lookup used by conversions.

    Tests override this dependency to avoid the live rate service.
    """
    return exchange_rate_service
