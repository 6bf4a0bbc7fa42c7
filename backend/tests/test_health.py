"""
Health / status endpoint tests + enveloppe d’erreur commune
"""

from auth_utils import ADMIN_CM


async def test_health_endpoint(client):
    response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["storage"] is False


async def test_system_status_reports_db(client):
    response = await client.get("/system/status")
    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    assert data["db"]["ok"] is True
    assert data["upcoming_alerts"] == 0


async def test_request_id_is_echoed(client):
    response = await client.get("/health", headers={"X-Request-Id": "req-123"})
    assert response.headers["X-Request-Id"] == "req-123"


async def test_request_id_generated_when_absent(client):
    response = await client.get("/health")
    assert response.headers.get("X-Request-Id")


async def test_any_origin_allowed(client):
    response = await client.get("/health")
    assert response.headers["Access-Control-Allow-Origin"] == "*"


async def test_cors_preflight(client):
    response = await client.options(
        "/vehicles",
        headers={"Origin": "https://app.example.com", "Access-Control-Request-Method": "PUT"},
    )
    assert response.status_code == 200
    assert response.headers["Access-Control-Allow-Origin"] == "*"


async def test_method_not_allowed(client):
    response = await client.patch("/vehicles", json={}, headers=ADMIN_CM)
    assert response.status_code == 405
    assert response.json() == {"error": "Method not allowed"}


async def test_unknown_route_uses_error_envelope(client):
    response = await client.get("/nonexistent-endpoint")
    assert response.status_code == 404
    assert "error" in response.json()
