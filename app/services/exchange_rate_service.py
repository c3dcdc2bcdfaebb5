"""Exchange rate service - fetches rates per base currency with an optional in-memory TTL cache."""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Protocol

import httpx

from app.config import settings
from app.core.exceptions import RateServiceUnavailableError
from app.schemas.conversion import RateTable

logger = logging.getLogger(__name__)


class RateLookup(Protocol):
    """Anything that can fetch the rate table for a base currency."""

    async def get_rates(self, base_currency: str) -> RateTable: ...


class ExchangeRateService:
    """Fetches currency exchange rates, one attempt per lookup."""

    def __init__(
        self,
        base_url: str | None = None,
        cache_ttl_seconds: int | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.EXCHANGE_RATE_API_BASE_URL).rstrip("/")
        self.cache_ttl_seconds = (
            settings.EXCHANGE_RATE_CACHE_TTL_SECONDS
            if cache_ttl_seconds is None
            else cache_ttl_seconds
        )
        self.timeout = settings.EXCHANGE_RATE_TIMEOUT_SECONDS if timeout is None else timeout
        self._transport = transport
        self._cache: dict[str, tuple[RateTable, datetime]] = {}
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout, transport=self._transport)
        return self._client

    async def get_rates(self, base_currency: str) -> RateTable:
        """Get all rates for a base currency (cached while fresh)."""
        base = base_currency.upper().strip()
        now = datetime.now(timezone.utc)
        if self.cache_ttl_seconds > 0 and base in self._cache:
            table, expires_at = self._cache[base]
            if expires_at > now:
                logger.debug("Using cached rates for %s", base)
                return table

        table = await self._fetch_rates(base, now)
        if self.cache_ttl_seconds > 0:
            expires_at = now + timedelta(seconds=self.cache_ttl_seconds)
            self._cache[base] = (table, expires_at)
        return table

    async def _fetch_rates(self, base: str, now: datetime) -> RateTable:
        url = f"{self.base_url}/{base}"
        logger.info("Fetching exchange rates for %s", base)
        try:
            response = await self._get_client().get(url, headers={"Accept": "application/json"})
            response.raise_for_status()
            data: dict[str, Any] = response.json()
        except httpx.HTTPError as e:
            logger.warning("Exchange rate request for %s failed: %s", base, e)
            raise RateServiceUnavailableError("Exchange rate service unavailable") from e
        except ValueError as e:
            logger.warning("Exchange rate response for %s is not JSON", base)
            raise RateServiceUnavailableError("Exchange rate service unavailable") from e

        raw_rates = data.get("rates") if isinstance(data, dict) else None
        if not isinstance(raw_rates, dict):
            logger.warning("Exchange rate response for %s has no rates", base)
            raise RateServiceUnavailableError("Exchange rate service unavailable")

        rates = {
            str(code).upper(): float(value)
            for code, value in raw_rates.items()
            if isinstance(value, (int, float)) and not isinstance(value, bool)
        }
        date = data.get("date")
        return RateTable(
            base=base,
            rates=rates,
            date=str(date) if date else None,
            fetched_at=now,
        )

    def clear_cache(self) -> None:
        self._cache.clear()

    async def aclose(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None


exchange_rate_service = ExchangeRateService()
