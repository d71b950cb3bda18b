"""Integration tests for /auth register and login."""

from __future__ import annotations


def _register(client, **overrides):
    body = {
        "nickname": "monet",
        "email": "monet@gallery.io",
        "contact": "010-1111-2222",
        "password": "giverny",
    }
    body.update(overrides)
    return client.post("/auth/register", json=body)


class TestRegister:
    def test_register(self, client):
        resp = _register(client)
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["nickname"] == "monet"
        assert "password" not in data

    def test_duplicate_email(self, client):
        _register(client)
        resp = _register(client, nickname="claude")
        assert resp.status_code == 400
        assert resp.json() == {"success": False, "message": "User already exists"}

    def test_duplicate_nickname(self, client):
        _register(client)
        resp = _register(client, email="other@gallery.io")
        assert resp.status_code == 400


class TestLogin:
    def test_login_token_opens_protected_routes(self, client):
        _register(client)
        resp = client.post("/auth/login", json={"email": "monet@gallery.io", "password": "giverny"})
        assert resp.status_code == 200
        token = resp.json()["data"]["access_token"]

        mine = client.get("/galleries/myGallery", headers={"Authorization": f"Bearer {token}"})
        assert mine.status_code == 200
        assert mine.json()["data"] == []

    def test_wrong_password(self, client):
        _register(client)
        resp = client.post("/auth/login", json={"email": "monet@gallery.io", "password": "nope"})
        assert resp.status_code == 401
        assert resp.json()["success"] is False


def test_root(client):
    assert client.get("/").json() == {"message": "Backend running successfully"}
