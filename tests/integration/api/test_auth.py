"""Integration tests for registration, login and bearer authentication"""


async def test_register_then_login(client):
    register = await client.post(
        "/api/auth/register",
        json={"name": "Grace Hopper", "email": "Grace@Example.com", "password": "cobol-1959"},
    )

    assert register.status_code == 201
    body = register.json()
    assert body["success"] is True
    assert body["data"]["user"]["email"] == "grace@example.com"
    assert body["data"]["token"]

    login = await client.post(
        "/api/auth/login", json={"email": "grace@example.com", "password": "cobol-1959"}
    )

    assert login.status_code == 200
    assert login.json()["data"]["user"]["id"] == body["data"]["user"]["id"]

    token = login.json()["data"]["token"]
    projects = await client.get("/api/projects", headers={"Authorization": f"Bearer {token}"})
    assert projects.status_code == 200
    assert projects.json()["data"]["projects"] == []


async def test_register_duplicate_email_conflicts(client):
    payload = {"name": "Grace", "email": "grace@example.com", "password": "cobol-1959"}
    await client.post("/api/auth/register", json=payload)

    response = await client.post("/api/auth/register", json={**payload, "email": "GRACE@example.com"})

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CONFLICT"


async def test_register_rejects_short_password(client):
    response = await client.post(
        "/api/auth/register", json={"name": "Grace", "email": "grace@example.com", "password": "123"}
    )

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "VALIDATION_ERROR"


async def test_login_with_wrong_password(client):
    await client.post(
        "/api/auth/register", json={"name": "Grace", "email": "grace@example.com", "password": "cobol-1959"}
    )

    response = await client.post(
        "/api/auth/login", json={"email": "grace@example.com", "password": "fortran"}
    )

    assert response.status_code == 401
    assert response.json()["error"] == {
        "code": "AUTHENTICATION_ERROR",
        "message": "Invalid email or password",
    }


async def test_missing_and_invalid_tokens_are_rejected(client):
    missing = await client.get("/api/projects")
    invalid = await client.get("/api/projects", headers={"Authorization": "Bearer not-a-jwt"})

    assert missing.status_code == 401
    assert invalid.status_code == 401
    assert invalid.json()["error"]["code"] == "AUTHENTICATION_ERROR"


async def test_health_reports_degraded_services(client):
    response = await client.get("/api/health")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["status"] == "ok"
    assert data["cache"] == "available"
    assert data["export_mode"] == "inline"
