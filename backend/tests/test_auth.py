"""Tests for login, token checks and the app-level endpoints."""

from datetime import timedelta

from app.utils.auth import create_access_token

PASSWORD = "password123"


class TestLogin:
    def test_login_returns_bearer_token(self, client, student):
        response = client.post("/auth/login", json={"email": student.email, "password": PASSWORD})
        assert response.status_code == 200
        body = response.json()
        assert body["tokenType"] == "bearer"
        assert body["accessToken"]

    def test_token_from_login_is_accepted(self, client, student):
        token = client.post(
            "/auth/login", json={"email": student.email, "password": PASSWORD}
        ).json()["accessToken"]
        response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200
        assert response.json()["id"] == student.id

    def test_wrong_password_and_unknown_email_look_the_same(self, client, student):
        wrong_password = client.post("/auth/login", json={"email": student.email, "password": "nope-nope"})
        unknown_email = client.post("/auth/login", json={"email": "ghost@example.com", "password": PASSWORD})
        assert wrong_password.status_code == 401
        assert unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json()

    def test_login_validates_body(self, client):
        response = client.post("/auth/login", json={"email": "x"})
        assert response.status_code == 400
        paths = {error["path"] for error in response.json()["errors"]}
        assert "password" in paths


class TestBearerToken:
    def test_missing_token_is_forbidden(self, client):
        response = client.get("/auth/me")
        assert response.status_code == 403
        assert response.json() == {"message": "Não autenticado."}

    def test_garbage_token_is_unauthorized(self, client):
        response = client.get("/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401

    def test_expired_token_is_unauthorized(self, client, student):
        token = create_access_token(
            {"sub": student.id, "role": "STUDENT"}, expires_delta=timedelta(seconds=-5)
        )
        response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_me_never_returns_password(self, client, student):
        body = client.get("/auth/me", headers=student.headers).json()
        assert body["email"] == student.email
        assert "password" not in body
        assert "hashedPassword" not in body

    def test_me_for_deleted_user(self, client, student):
        client.delete(f"/users/{student.id}", headers=student.headers)
        response = client.get("/auth/me", headers=student.headers)
        assert response.status_code == 404


class TestAppEndpoints:
    def test_health_is_public(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_root_reports_name_and_version(self, client):
        body = client.get("/").json()
        assert body["name"]
        assert body["version"]
