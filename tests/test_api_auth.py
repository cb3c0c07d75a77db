"""API tests for registration, login and the profile."""
from factories import register_user


class TestAuth:

    async def test_register_returns_user_without_password(self, client):
        response = await client.post(
            "/api/v1/auth/register",
            json={"username": "asha", "email": "asha@example.com", "password": "secret"},
        )
        assert response.status_code == 201
        body = response.json()
        assert body["username"] == "asha"
        assert body["email"] == "asha@example.com"
        assert "password" not in body
        assert "password_hash" not in body

    async def test_duplicate_email_is_rejected(self, client):
        await register_user(client, "asha@example.com")
        response = await client.post(
            "/api/v1/auth/register",
            json={"username": "other", "email": "asha@example.com", "password": "x"},
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Email already exists"

    async def test_missing_fields_fail_validation(self, client):
        response = await client.post("/api/v1/auth/register", json={"username": "asha"})
        assert response.status_code == 422

    async def test_invalid_email_fails_validation(self, client):
        for email in ("asha@localhost", "asha@.com", "asha@example.", "a,b@example.com"):
            response = await client.post(
                "/api/v1/auth/register",
                json={"username": "asha", "email": email, "password": "secret"},
            )
            assert response.status_code == 422, email

    async def test_login(self, client):
        headers = await register_user(client, "asha@example.com", "secret")
        response = await client.post("/api/v1/auth/login", json={"email": "asha@example.com", "password": "secret"})
        assert response.status_code == 200
        assert str(response.json()["id"]) == headers["User-Id"]

    async def test_login_with_wrong_password(self, client):
        await register_user(client, "asha@example.com", "secret")
        response = await client.post("/api/v1/auth/login", json={"email": "asha@example.com", "password": "nope"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid credentials"

    async def test_login_unknown_email(self, client):
        response = await client.post("/api/v1/auth/login", json={"email": "ghost@example.com", "password": "x"})
        assert response.status_code == 401


class TestSessionContext:

    async def test_missing_header_is_unauthorized(self, client):
        response = await client.get("/api/v1/users/me")
        assert response.status_code == 401

    async def test_unknown_user_is_unauthorized(self, client):
        response = await client.get("/api/v1/users/me", headers={"User-Id": "12345"})
        assert response.status_code == 401

    async def test_malformed_header_is_unauthorized(self, client):
        response = await client.get("/api/v1/transactions/", headers={"User-Id": "abc"})
        assert response.status_code == 401

    async def test_me(self, client, auth_headers):
        response = await client.get("/api/v1/users/me", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["email"] == "asha@example.com"


class TestProfile:

    async def test_update_username_and_email(self, client, auth_headers):
        response = await client.put(
            "/api/v1/users/profile",
            json={"username": "asha.k", "email": "asha.k@example.com"},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["username"] == "asha.k"

        # Old password still works with the new email
        login = await client.post("/api/v1/auth/login", json={"email": "asha.k@example.com", "password": "secret"})
        assert login.status_code == 200

    async def test_change_password(self, client, auth_headers):
        await client.put(
            "/api/v1/users/profile",
            json={"username": "asha", "email": "asha@example.com", "password": "new-secret"},
            headers=auth_headers,
        )
        old = await client.post("/api/v1/auth/login", json={"email": "asha@example.com", "password": "secret"})
        new = await client.post("/api/v1/auth/login", json={"email": "asha@example.com", "password": "new-secret"})
        assert old.status_code == 401
        assert new.status_code == 200

    async def test_email_of_another_user_is_rejected(self, client, auth_headers):
        await register_user(client, "ravi@example.com")
        response = await client.put(
            "/api/v1/users/profile",
            json={"username": "asha", "email": "ravi@example.com"},
            headers=auth_headers,
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Email already in use"

    async def test_keeping_own_email_is_allowed(self, client, auth_headers):
        response = await client.put(
            "/api/v1/users/profile",
            json={"username": "asha2", "email": "asha@example.com"},
            headers=auth_headers,
        )
        assert response.status_code == 200
