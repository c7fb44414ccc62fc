"""End-to-end tests for the authentication flow."""

from fastapi.testclient import TestClient


class TestAuthFlow:
    """Signup, login, logout and the current user endpoint."""

    def test_signup_sets_session_cookie(self, client: TestClient, credentials):
        # Act
        response = client.post("/api/auth/signup", data=credentials)

        # Assert
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "User created"}
        set_cookie = response.headers["set-cookie"]
        assert set_cookie.startswith("auth_session=")
        assert "HttpOnly" in set_cookie
        assert "Path=/" in set_cookie
        assert "samesite=lax" in set_cookie.lower()
        assert len(client.cookies["auth_session"]) == 40

    def test_current_user_after_signup(self, client: TestClient, credentials):
        client.post("/api/auth/signup", data=credentials)

        response = client.get("/api/auth/user")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "User fetched",
            "data": {"username": "alice"},
        }

    def test_duplicate_signup_is_conflict(self, client: TestClient, credentials):
        client.post("/api/auth/signup", data=credentials)

        response = client.post("/api/auth/signup", data=credentials)

        assert response.status_code == 409
        assert response.json() == {
            "success": False,
            "error": "Username already used",
            "isFormError": True,
        }

    def test_login_after_logout(self, client: TestClient, credentials):
        # Arrange
        client.post("/api/auth/signup", data=credentials)

        # Act
        logout = client.post("/api/auth/logout")
        after_logout = client.get("/api/auth/user")
        login = client.post("/api/auth/login", data=credentials)
        after_login = client.get("/api/auth/user")

        # Assert
        assert logout.status_code == 200
        assert logout.json()["message"] == "Logged out"
        assert after_logout.status_code == 401
        assert login.status_code == 200
        assert login.json()["message"] == "Logged in"
        assert after_login.json()["data"]["username"] == "alice"

    def test_wrong_password(self, client: TestClient, credentials):
        client.post("/api/auth/signup", data=credentials)
        client.cookies.clear()

        response = client.post(
            "/api/auth/login", data={"username": "alice", "password": "wrong-one"}
        )

        assert response.status_code == 401
        assert response.json() == {
            "success": False,
            "error": "Incorrect username or password",
            "isFormError": True,
        }

    def test_anonymous_user_and_logout_are_unauthorized(self, client: TestClient):
        user = client.get("/api/auth/user")
        logout = client.post("/api/auth/logout")

        assert user.status_code == 401
        assert user.json() == {
            "success": False,
            "error": "Unauthorized",
            "isFormError": False,
        }
        assert logout.status_code == 401

    def test_unknown_session_cookie_is_anonymous(self, client: TestClient):
        client.cookies.set("auth_session", "f" * 40)

        response = client.get("/api/posts")

        assert response.status_code == 200
        assert 'auth_session=""' in response.headers["set-cookie"]

    def test_invalid_username_is_validation_error(self, client: TestClient):
        response = client.post(
            "/api/auth/signup", data={"username": "a b", "password": "secret123"}
        )

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"]["name"] == "ValidationError"
        assert body["error"]["issues"][0]["path"][:2] == ["body", "username"]


class TestHealth:
    def test_health_is_unprefixed(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
