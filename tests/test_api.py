"""Tests for the JSON API"""
from app.core.exceptions import RateServiceUnavailableError

API_V1 = "/api/v1"


def test_currencies(client):
    response = client.get(f"{API_V1}/currencies")

    assert response.status_code == 200
    currencies = response.json()["currencies"]
    assert len(currencies) == 25
    assert currencies[0] == {"code": "USD", "name": "US Dollar", "symbol": "$"}
    assert [c["code"] for c in currencies][-1] == "NZD"


def test_create_conversion(client, lookup):
    response = client.post(
        f"{API_V1}/conversions",
        json={"amount": 100, "from_currency": "usd", "to_currency": "eur"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["amount"] == 100
    assert data["currency"] == "EUR"
    assert data["from_currency"] == "USD"
    assert data["rate"] == 0.92
    assert data["formatted_amount"] == "92.00"
    assert data["rate_text"] == "1 USD = 0.920000 EUR"
    assert data["updated_at"] == "2026-10-19"
    assert lookup.calls == ["USD"]


def test_create_conversion_same_currency(client, lookup):
    response = client.post(
        f"{API_V1}/conversions",
        json={"amount": 5, "from_currency": "KRW", "to_currency": "KRW"},
    )

    data = response.json()
    assert data["rate"] == 1
    assert data["converted_amount"] == 5
    assert data["formatted_amount"] == "5"
    assert data["updated_at"] is None
    assert lookup.calls == []


def test_create_conversion_invalid_amount(client, lookup):
    response = client.post(
        f"{API_V1}/conversions",
        json={"amount": 0, "from_currency": "USD", "to_currency": "EUR"},
    )

    assert response.status_code == 422
    assert response.json() == {"detail": "Please enter a valid amount greater than 0"}
    assert lookup.calls == []


def test_create_conversion_unsupported_currency(client):
    response = client.post(
        f"{API_V1}/conversions",
        json={"amount": 1, "from_currency": "USD", "to_currency": "XYZ"},
    )

    assert response.status_code == 422
    assert response.json() == {"detail": "Unsupported currency: XYZ"}


def test_create_conversion_missing_rate(client):
    response = client.post(
        f"{API_V1}/conversions",
        json={"amount": 1, "from_currency": "EUR", "to_currency": "GBP"},
    )

    assert response.status_code == 502
    assert response.json() == {"detail": "Exchange rate not available for GBP"}


def test_create_conversion_service_down(client, lookup):
    lookup.error = RateServiceUnavailableError("Exchange rate service unavailable")

    response = client.post(
        f"{API_V1}/conversions",
        json={"amount": 1, "from_currency": "USD", "to_currency": "EUR"},
    )

    assert response.status_code == 502
    assert response.json() == {"detail": "Exchange rate service unavailable"}


def test_get_exchange_rate(client):
    response = client.get(
        f"{API_V1}/exchange-rates/rate",
        params={"from_currency": "usd", "to_currency": "jpy"},
    )

    assert response.status_code == 200
    assert response.json() == {"from": "USD", "to": "JPY", "rate": 149.5, "updated_at": "2026-10-19"}


def test_create_conversion_overflow(client):
    response = client.post(
        f"{API_V1}/conversions",
        json={"amount": 1e308, "from_currency": "USD", "to_currency": "JPY"},
    )

    assert response.status_code == 422
    assert response.json() == {"detail": "The converted amount is too large to display"}
