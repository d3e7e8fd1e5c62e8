"""
Tests for authentication endpoints.
"""


def test_register(client):
    """Test user registration."""
    response = client.post(
        "/api/users/register",
        json={"email": "Test@Example.com", "password": "testpassword123"}
    )
    assert response.status_code == 201
    body = response.json()
    assert body["user"]["email"] == "test@example.com"
    assert body["token"]


def test_register_duplicate_email(client):
    """Test registering the same email twice."""
    payload = {"email": "dup@example.com", "password": "testpassword123"}
    assert client.post("/api/users/register", json=payload).status_code == 201

    response = client.post("/api/users/register", json=payload)
    assert response.status_code == 409
    assert response.json()["error"] == "conflict"


def test_login(client):
    """Test user login."""
    client.post(
        "/api/users/register",
        json={"email": "login@example.com", "password": "testpassword123"}
    )

    response = client.post(
        "/api/users/login",
        json={"email": "login@example.com", "password": "testpassword123"}
    )
    assert response.status_code == 200
    token = response.json()["token"]

    me = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["email"] == "login@example.com"


def test_login_invalid_credentials(client):
    """Test login with invalid credentials."""
    response = client.post(
        "/api/users/login",
        json={"email": "nobody@example.com", "password": "wrongpassword"}
    )
    assert response.status_code == 401
    assert response.json()["error"] == "unauthorized"


def test_protected_route_requires_token(client):
    assert client.get("/api/mood").status_code == 401
    response = client.get("/api/mood", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


def test_register_rejects_malformed_email(client):
    response = client.post(
        "/api/users/register",
        json={"email": "not-an-email", "password": "testpassword123"}
    )
    assert response.status_code == 400
    assert response.json()["error"] == "validation_error"
