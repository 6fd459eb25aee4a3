"""Admin Routes — ranking endpoints and window validation."""

AUGUST = {"start": "2020-08-01T00:00:00Z", "end": "2020-09-01T00:00:00Z"}


async def test_best_profession(client, seeded):
    res = await client.get("/api/v1/admin/best-profession", params=AUGUST)

    assert res.status_code == 200
    assert res.json() == {"profession": "Programmer"}


async def test_best_profession_empty_window_is_404(client, seeded):
    res = await client.get(
        "/api/v1/admin/best-profession",
        params={"start": "2021-01-01T00:00:00Z", "end": "2021-02-01T00:00:00Z"},
    )
    assert res.status_code == 404


async def test_best_clients_default_limit(client, seeded):
    res = await client.get("/api/v1/admin/best-clients", params=AUGUST)

    assert res.status_code == 200
    body = res.json()
    assert [c["id"] for c in body] == [4, 1]
    assert body[0]["fullName"] == "Ash Kethcum"
    assert float(body[0]["paid"]) == 2020.0


async def test_best_clients_with_limit(client, seeded):
    res = await client.get(
        "/api/v1/admin/best-clients", params={**AUGUST, "limit": 3},
    )
    assert [c["id"] for c in res.json()] == [4, 1, 2]


async def test_best_clients_empty_window_is_empty_list(client, seeded):
    res = await client.get(
        "/api/v1/admin/best-clients",
        params={"start": "2021-01-01T00:00:00Z", "end": "2021-02-01T00:00:00Z"},
    )

    assert res.status_code == 200
    assert res.json() == []


async def test_inverted_window_is_400(client, seeded):
    res = await client.get(
        "/api/v1/admin/best-clients",
        params={"start": "2020-09-01T00:00:00Z", "end": "2020-08-01T00:00:00Z"},
    )

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_WINDOW"


async def test_empty_window_is_400(client, seeded):
    res = await client.get(
        "/api/v1/admin/best-profession",
        params={"start": "2020-08-01T00:00:00Z", "end": "2020-08-01T00:00:00Z"},
    )
    assert res.status_code == 400


async def test_malformed_date_is_400(client, seeded):
    res = await client.get(
        "/api/v1/admin/best-profession",
        params={"start": "yesterday", "end": "2020-08-01T00:00:00Z"},
    )

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_limit_out_of_range_is_400(client, seeded):
    for limit in (0, 101):
        res = await client.get(
            "/api/v1/admin/best-clients", params={**AUGUST, "limit": limit},
        )
        assert res.status_code == 400


async def test_missing_window_is_400(client, seeded):
    res = await client.get("/api/v1/admin/best-clients")
    assert res.status_code == 400
