"""Health & Readiness — verifies liveness and readiness probes."""


async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"database": "healthy"}}


async def test_readiness_without_database(client, monkeypatch):
    from dating_api.infrastructure import database

    monkeypatch.setattr(database, "db_manager", None)
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["status"] == "not_ready"


async def test_unknown_route_uses_error_envelope(client):
    res = await client.get("/api/v1/nowhere")
    assert res.status_code == 404
    body = res.json()["error"]
    assert body["code"] == "HTTP_ERROR"
    assert body["category"] == "resource_not_found"
