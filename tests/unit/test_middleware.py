"""Tests for the FastAPI CSRF middleware."""

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from csrf_tokens import Tokens
from csrf_tokens.middleware.csrf import CSRFMiddleware

SESSION_SECRET = "per-session-secret"


def make_app(get_secret, **kwargs) -> FastAPI:
    app = FastAPI()
    app.add_middleware(CSRFMiddleware, get_secret=get_secret, **kwargs)

    @app.get("/form")
    def form():
        return {"ok": True}

    @app.post("/submit")
    def submit():
        return {"ok": True}

    @app.post("/auth/login")
    def login():
        return {"ok": True}

    return app


@pytest.fixture
def client():
    return TestClient(make_app(lambda request: SESSION_SECRET, exempt_paths=("/auth/",)))


class TestCSRFMiddleware:
    def test_safe_method_passes(self, client):
        assert client.get("/form").status_code == 200

    def test_missing_token(self, client):
        resp = client.post("/submit")
        assert resp.status_code == 403
        assert "missing" in resp.json()["detail"]

    def test_valid_token(self, client):
        token = Tokens().create(SESSION_SECRET)
        resp = client.post("/submit", headers={"X-CSRF-Token": token})
        assert resp.status_code == 200

    def test_invalid_token(self, client):
        token = Tokens().create("another-secret")
        resp = client.post("/submit", headers={"X-CSRF-Token": token})
        assert resp.status_code == 403
        assert "invalid" in resp.json()["detail"]

    def test_exempt_path(self, client):
        assert client.post("/auth/login").status_code == 200

    def test_no_session_secret(self):
        client = TestClient(make_app(lambda request: None))
        resp = client.post("/submit", headers={"X-CSRF-Token": "abc-def"})
        assert resp.status_code == 403

    def test_async_secret_getter_and_custom_header(self):
        async def get_secret(request: Request):
            return SESSION_SECRET

        client = TestClient(make_app(get_secret, header_name="X-Anti-Forgery"))
        token = Tokens().create(SESSION_SECRET)
        assert client.post("/submit", headers={"X-Anti-Forgery": token}).status_code == 200
        assert client.post("/submit", headers={"X-CSRF-Token": token}).status_code == 403


def test_header_name_from_environment(monkeypatch):
    monkeypatch.setenv("CSRF_TOKENS_HEADER_NAME", "X-Env-Token")
    client = TestClient(make_app(lambda request: SESSION_SECRET))
    token = Tokens().create(SESSION_SECRET)
    assert client.post("/submit", headers={"X-Env-Token": token}).status_code == 200
    assert client.post("/submit", headers={"X-CSRF-Token": token}).status_code == 403
