"""Tests for unmatched routes: every one answers 400 without touching the store."""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from session_tokens.main import create_app

UNMATCHED = [
    ("GET", "/"),
    ("GET", "/nope"),
    ("GET", "/new/extra"),
    ("GET", "/docs"),
    ("GET", "/openapi.json"),
    ("POST", "/new"),
    ("PUT", "/new"),
    ("DELETE", "/verify/abc/def"),
    ("POST", "/verify/abc/def"),
]


@pytest.mark.parametrize("method,path", UNMATCHED)
def test_unmatched_route_returns_400(client, store, method, path):
    resp = client.request(method, path)
    assert resp.status_code == 400
    assert resp.json() == {"err": "Bad Request"}
    assert len(store) == 0


@pytest.mark.parametrize("method,path", UNMATCHED)
def test_unmatched_route_never_calls_store(test_settings, method, path):
    store = AsyncMock()
    client = TestClient(create_app(store=store, settings=test_settings))

    client.request(method, path)

    store.put.assert_not_awaited()
    store.get.assert_not_awaited()


def test_cookie_transport_unmatched(cookie_client):
    resp = cookie_client.post("/verify")
    assert resp.status_code == 400
    assert resp.json() == {"err": "Bad Request"}
