"""Balance Routes — deposits over HTTP, capped by unpaid debt."""

from decimal import Decimal

from tests.services.factories import balance_of


def _as(profile_id) -> dict:
    return {"profile_id": str(profile_id)}


async def test_deposit_within_cap(client, seeded):
    res = await client.post(
        "/api/v1/balances/deposit/1", json={"amount": "251.25"}, headers=_as(1),
    )

    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "deposited"
    assert body["profile_id"] == 1
    assert Decimal(body["balance"]) == Decimal("1401.25")
    assert await balance_of(seeded, 1) == Decimal("1401.25")


async def test_deposit_over_cap_is_409(client, seeded):
    res = await client.post(
        "/api/v1/balances/deposit/4", json={"amount": 250.01}, headers=_as(4),
    )

    assert res.status_code == 409
    assert res.json()["error"]["code"] == "DEPOSIT_CAP_EXCEEDED"
    assert await balance_of(seeded, 4) == Decimal("1.30")


async def test_deposit_without_debt_is_409(client, seeded):
    res = await client.post(
        "/api/v1/balances/deposit/3", json={"amount": 1}, headers=_as(3),
    )
    assert res.status_code == 409


async def test_non_positive_amount_is_400(client, seeded):
    for amount in (0, -5):
        res = await client.post(
            "/api/v1/balances/deposit/1", json={"amount": amount}, headers=_as(1),
        )
        assert res.status_code == 400
        assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_sub_cent_amount_is_400(client, seeded):
    res = await client.post(
        "/api/v1/balances/deposit/1", json={"amount": "1.001"}, headers=_as(1),
    )
    assert res.status_code == 400


async def test_missing_amount_is_400(client, seeded):
    res = await client.post(
        "/api/v1/balances/deposit/1", json={}, headers=_as(1),
    )
    assert res.status_code == 400


async def test_unknown_target_is_404(client, seeded):
    res = await client.post(
        "/api/v1/balances/deposit/999", json={"amount": 1}, headers=_as(1),
    )
    assert res.status_code == 404


async def test_deposit_requires_caller(client, seeded):
    res = await client.post("/api/v1/balances/deposit/1", json={"amount": 1})
    assert res.status_code == 401


async def test_oversized_target_id_is_400(client, seeded):
    res = await client.post(
        f"/api/v1/balances/deposit/{2**31}", json={"amount": 1}, headers=_as(1),
    )
    assert res.status_code == 400
