from decimal import Decimal

import pytest


def _payload(**overrides):
    payload = {
        "asset_id": "HF-GBP",
        "fohf_id": "FOHF-1",
        "currency": "GBP",
        "type": "SUBSCRIPTION",
        "as_of_date": "2011-09-01",
    }
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
@pytest.mark.integration
async def test_subscription_by_amount(client):
    resp = await client.post("/api/v1/figures", json=_payload(amount="100"))
    assert resp.status_code == 200
    data = resp.json()
    assert data["asset_id"] == "HF-GBP"
    assert data["type"] == "SUBSCRIPTION"
    assert data["currency"] == "GBP"
    assert Decimal(data["amount"]) == Decimal("100")
    assert Decimal(data["price"]) == Decimal("5")
    assert Decimal(data["shares"]) == Decimal("20")


@pytest.mark.asyncio
@pytest.mark.integration
async def test_subscription_converts_order_currency(client):
    resp = await client.post("/api/v1/figures", json=_payload(asset_id="HF-USD", amount="100"))
    assert resp.status_code == 200
    data = resp.json()
    assert data["currency"] == "USD"
    assert Decimal(data["amount"]) == Decimal("150")
    assert Decimal(data["shares"]) == Decimal("75")


@pytest.mark.asyncio
@pytest.mark.integration
async def test_redemption_by_percentage(client):
    resp = await client.post(
        "/api/v1/figures",
        json=_payload(type="REDEMPTION", percentage="50", trade_date="2011-09-01"),
    )
    assert resp.status_code == 200
    data = resp.json()
    assert Decimal(data["amount"]) == Decimal("250")
    assert Decimal(data["shares"]) == Decimal("50")


@pytest.mark.asyncio
@pytest.mark.integration
async def test_redemption_of_whole_hedge_fund(client):
    resp = await client.post(
        "/api/v1/figures",
        json=_payload(type="REDEMPTION", whole_hedge_fund=True, trade_date="2011-09-01"),
    )
    assert resp.status_code == 200
    assert Decimal(resp.json()["shares"]) == Decimal("100")


@pytest.mark.asyncio
@pytest.mark.integration
async def test_over_redemption_is_conflict(client):
    resp = await client.post(
        "/api/v1/figures",
        json=_payload(type="REDEMPTION", amount="2000", trade_date="2011-09-01"),
    )
    assert resp.status_code == 409
    assert resp.json()["detail"]["error"] == "insufficient_position"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_ambiguous_quantity_is_invalid(client):
    resp = await client.post("/api/v1/figures", json=_payload(amount="100", shares="20"))
    assert resp.status_code == 422
    assert resp.json()["detail"]["error"] == "invalid_order"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_missing_exchange_rate_is_distinct_error(client):
    resp = await client.post(
        "/api/v1/figures", json=_payload(asset_id="HF-USD", currency="EUR", amount="100")
    )
    assert resp.status_code == 424
    assert resp.json()["detail"]["error"] == "currency_unresolved"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_missing_price_is_lookup_failure(client):
    resp = await client.post("/api/v1/figures", json=_payload(amount="100", as_of_date="2011-08-01"))
    assert resp.status_code == 404
    assert resp.json()["detail"]["error"] == "lookup_failed"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_unknown_asset(client):
    resp = await client.post("/api/v1/figures", json=_payload(asset_id="HF-MISSING", amount="100"))
    assert resp.status_code == 404
    assert resp.json()["detail"] == {
        "error": "unknown_reference",
        "detail": "Unknown asset: HF-MISSING",
    }


@pytest.mark.asyncio
@pytest.mark.integration
async def test_health_and_ready(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"

    resp = await client.get("/ready")
    assert resp.status_code == 200
    assert resp.json()["db_connected"] is True
    assert resp.json()["prices_loaded"] == 2


@pytest.mark.asyncio
@pytest.mark.integration
async def test_unknown_currency_uses_error_shape(client):
    resp = await client.post("/api/v1/figures", json=_payload(currency="JPY", amount="100"))
    assert resp.status_code == 404
    assert resp.json()["detail"]["error"] == "unknown_reference"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_very_large_amount_is_priced(client):
    resp = await client.post("/api/v1/figures", json=_payload(amount="1e23"))
    assert resp.status_code == 200
    assert Decimal(resp.json()["shares"]) == Decimal("2e22")


@pytest.mark.asyncio
@pytest.mark.integration
async def test_amount_beyond_working_precision_is_invalid(client):
    resp = await client.post("/api/v1/figures", json=_payload(amount="1e60"))
    assert resp.status_code == 422
    assert resp.json()["detail"]["error"] == "invalid_order"
