"""Shared fixtures: fake rate lookup and a test client wired to it"""
import sys
from datetime import datetime, timezone
from pathlib import Path

# Ensure project root is on path so "app" can be imported when pytest runs from elsewhere
_project_root = Path(__file__).resolve().parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import pytest
from fastapi.testclient import TestClient

from app.core.deps import get_rate_lookup
from app.main import app
from app.schemas.conversion import RateTable


class FakeRateLookup:
    """In-memory rate lookup that records every base currency requested."""

    def __init__(
        self,
        rates: dict[str, dict[str, float]] | None = None,
        error: Exception | None = None,
        date: str | None = "2026-10-19",
    ) -> None:
        self.rates = rates or {}
        self.error = error
        self.date = date
        self.calls: list[str] = []

    async def get_rates(self, base_currency: str) -> RateTable:
        self.calls.append(base_currency)
        if self.error is not None:
            raise self.error
        return RateTable(
            base=base_currency,
            rates=self.rates.get(base_currency, {}),
            date=self.date,
            fetched_at=datetime.now(timezone.utc),
        )


@pytest.fixture
def lookup() -> FakeRateLookup:
    return FakeRateLookup({
        "USD": {"USD": 1.0, "EUR": 0.92, "JPY": 149.5, "KRW": 1371.25},
        "EUR": {"EUR": 1.0, "USD": 1.087},
    })


@pytest.fixture
def client(lookup):
    app.dependency_overrides[get_rate_lookup] = lambda: lookup
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
