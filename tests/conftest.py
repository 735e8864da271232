"""Shared fixtures for the session token test suite."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from session_tokens.config import Settings, override_settings
from session_tokens.main import create_app
from session_tokens.store import InMemoryStore


class FakeClock:
    """Manually advanced wall clock (seconds)."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# ── Test Settings ─────────────────────────────────────────────────────────

@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        session_key="test-secret-key-for-sessions",
        expiration_ttl=300,
        session_transport="path",
    )


@pytest.fixture
def cookie_settings(test_settings) -> Settings:
    return test_settings.model_copy(
        update={"session_transport": "cookie", "cookie_domain": "example.com"}
    )


# ── Store ─────────────────────────────────────────────────────────────────

@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock) -> InMemoryStore:
    return InMemoryStore(clock=clock)


# ── App & Client ──────────────────────────────────────────────────────────

@pytest.fixture
def app(test_settings, store):
    override_settings(test_settings)
    return create_app(store=store, settings=test_settings)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def cookie_app(cookie_settings, store):
    override_settings(cookie_settings)
    return create_app(store=store, settings=cookie_settings)


@pytest.fixture
def cookie_client(cookie_app) -> TestClient:
    """TestClient over https so Secure cookies are sent back."""
    return TestClient(cookie_app, base_url="https://example.com", cookies={})


# ── Helper: issued session ────────────────────────────────────────────────

@pytest.fixture
def issued(client) -> tuple[str, str]:
    """Issue a session over the path transport and return (id, token)."""
    resp = client.get("/new")
    assert resp.status_code == 201
    session_id, token = resp.json()
    return session_id, token
