"""Auth, profile and error-shape tests."""

from cook_mastery.services import auth as auth_service


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_signup(client):
    """Test account creation returns token, user and profile."""
    response = client.post(
        "/api/auth/signup",
        json={
            "email": "newcook@example.com",
            "username": "new_cook",
            "password": "password123",
            "selected_level": "INTERMEDIATE",
        },
    )
    assert response.status_code == 201
    data = response.json()
    assert "access_token" in data
    assert data["user"]["email"] == "newcook@example.com"
    assert data["profile"]["username"] == "new_cook"
    assert data["profile"]["selected_level"] == "INTERMEDIATE"


def test_signup_duplicate_username(client, auth_headers):
    """Test signup with a taken username is a conflict."""
    response = client.post(
        "/api/auth/signup",
        json={
            "email": "someone@example.com",
            "username": auth_headers.username,
            "password": "password123",
            "selected_level": "BEGINNER",
        },
    )
    assert response.status_code == 409
    error = response.json()["error"]
    assert error["code"] == "CONFLICT"
    assert "username" in error["details"]


def test_signup_duplicate_email(client, auth_headers):
    """Test signup with a registered email is a conflict."""
    response = client.post(
        "/api/auth/signup",
        json={
            "email": "test@example.com",
            "username": "another_name",
            "password": "password123",
            "selected_level": "BEGINNER",
        },
    )
    assert response.status_code == 409
    assert "email" in response.json()["error"]["details"]


def _signup_payload(email: str, username: str) -> dict:
    return {
        "email": email,
        "username": username,
        "password": "password123",
        "selected_level": "BEGINNER",
    }


def test_signup_username_race_is_a_conflict(client, auth_headers, monkeypatch):
    """Test a username claimed between the check and the insert still gives 409."""
    real_username_taken = auth_service.username_taken
    calls = []

    def username_taken(db, username):
        calls.append(username)
        # The first check runs before the competing signup commits
        if len(calls) == 1:
            return False
        return real_username_taken(db, username)

    monkeypatch.setattr(auth_service, "username_taken", username_taken)

    response = client.post(
        "/api/auth/signup", json=_signup_payload("racer@example.com", auth_headers.username)
    )
    assert response.status_code == 409
    error = response.json()["error"]
    assert error["code"] == "CONFLICT"
    assert "username" in error["details"]


def test_signup_email_race_is_a_conflict(client, auth_headers, monkeypatch):
    """Test an email registered between the check and the insert still gives 409."""
    monkeypatch.setattr(auth_service, "get_user_by_email", lambda db, email: None)

    response = client.post(
        "/api/auth/signup", json=_signup_payload("test@example.com", "racing_cook")
    )
    assert response.status_code == 409
    assert "email" in response.json()["error"]["details"]

    # The failed attempt left nothing behind
    login = client.post(
        "/api/auth/login", json={"identifier": "racing_cook", "password": "password123"}
    )
    assert login.status_code == 401


def test_signup_invalid_username(client):
    """Test username character rules are enforced."""
    response = client.post(
        "/api/auth/signup",
        json={
            "email": "bad@example.com",
            "username": "bad name!",
            "password": "password123",
            "selected_level": "BEGINNER",
        },
    )
    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert "username" in error["details"]


def test_login_with_email_and_username(client, auth_headers):
    """Test login accepts either email or username."""
    by_email = client.post(
        "/api/auth/login", json={"identifier": "test@example.com", "password": "testpass123"}
    )
    assert by_email.status_code == 200
    assert "access_token" in by_email.json()

    by_username = client.post(
        "/api/auth/login", json={"identifier": auth_headers.username, "password": "testpass123"}
    )
    assert by_username.status_code == 200
    assert by_username.json()["user"]["id"] == auth_headers.user_id


def test_login_errors_are_indistinguishable(client, auth_headers):
    """Test unknown user and wrong password give the same response."""
    wrong_password = client.post(
        "/api/auth/login", json={"identifier": "test@example.com", "password": "wrongpass"}
    )
    unknown_user = client.post(
        "/api/auth/login", json={"identifier": "nobody_here", "password": "testpass123"}
    )
    assert wrong_password.status_code == 401
    assert unknown_user.status_code == 401
    assert wrong_password.json() == unknown_user.json()


def test_session_and_logout(client, auth_headers):
    """Test session lookup and logout."""
    response = client.get("/api/auth/session", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["profile"]["username"] == auth_headers.username

    response = client.post("/api/auth/logout", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["message"] == "Logged out successfully"


def test_unauthorized_access(client):
    """Test that protected endpoints require authentication."""
    for path in ("/api/cookbook", "/api/profile", "/api/progress/summary"):
        response = client.get(path)
        assert response.status_code == 401
        assert response.json()["error"]["code"] == "UNAUTHORIZED"


def test_invalid_token_is_unauthorized(client):
    """Test a garbage bearer token is rejected."""
    response = client.get("/api/profile", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401


def test_get_profile(client, auth_headers):
    """Test reading the current profile."""
    response = client.get("/api/profile", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == auth_headers.user_id
    assert data["selected_level"] == "BEGINNER"
    assert response.headers["cache-control"] == "private, no-cache"


def test_update_profile_level(client, auth_headers):
    """Test changing the selected level."""
    response = client.patch(
        "/api/profile", headers=auth_headers, json={"selected_level": "EXPERIENCED"}
    )
    assert response.status_code == 200
    assert response.json()["selected_level"] == "EXPERIENCED"
    assert response.json()["username"] == auth_headers.username


def test_update_profile_requires_a_field(client, auth_headers):
    """Test an empty profile update is rejected."""
    response = client.patch("/api/profile", headers=auth_headers, json={})
    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert "general" in error["details"]


def test_update_profile_username_conflict(client, auth_headers, other_auth_headers):
    """Test taking another user's username is a conflict."""
    response = client.patch(
        "/api/profile", headers=auth_headers, json={"username": other_auth_headers.username}
    )
    assert response.status_code == 409
    assert response.json()["error"]["details"]["username"]


def test_update_profile_keeps_own_username(client, auth_headers):
    """Test re-submitting your own username is not a conflict."""
    response = client.patch(
        "/api/profile", headers=auth_headers, json={"username": auth_headers.username}
    )
    assert response.status_code == 200


def test_unknown_route_uses_error_shape(client):
    """Test framework errors use the same error body."""
    response = client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"
