from __future__ import annotations

import logging

import pytest

from fastapi.testclient import TestClient

from app.api.routes import API_PREFIX, ROUTES
from app.controllers.user_controller import login_user
from app.main import create_app

FIXED_USER = {"id": 1, "username": "anson", "email": "anson@ansonthedev.com"}


def test_list_users_is_empty(client):
    r = client.get(f"{API_PREFIX}/")
    assert r.status_code == 200
    assert r.json() == []


def test_get_user_by_id_ignores_identifier(client):
    for user_id in ("1", "42", "not-a-number"):
        r = client.get(f"{API_PREFIX}/{user_id}")
        assert r.status_code == 200
        assert r.json() == {}


def test_create_user_returns_fixed_record(client):
    r = client.post(
        f"{API_PREFIX}/",
        json={"username": "someone", "email": "someone@example.com", "password": "pw"},
    )
    assert r.status_code == 201
    assert r.json() == FIXED_USER


def test_create_user_without_body(client):
    r = client.post(f"{API_PREFIX}/?loginAfterCreate=true")
    assert r.status_code == 201
    assert r.json() == FIXED_USER


def test_unmatched_route_is_not_found(client):
    assert client.get("/api/v1/nothing-here").status_code == 404
    assert client.delete(f"{API_PREFIX}/1").status_code == 405


def test_route_table_is_static_and_ordered():
    assert [(e.method, e.path) for e in ROUTES] == [
        ("GET", "/"),
        ("GET", "/{id}"),
        ("POST", "/"),
    ]
    assert all(e.handler is not login_user for e in ROUTES)


def test_health_returns_envelope(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {
        "statusCode": 200,
        "data": {"ok": True},
        "message": "Success",
        "success": True,
    }


def test_request_id_is_echoed_or_minted(client):
    r = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert r.headers["X-Request-ID"] == "abc-123"

    r = client.get("/health")
    assert r.headers["X-Request-ID"]


def test_cors_origin_from_env(monkeypatch):
    monkeypatch.setenv("CORS_ORIGIN", "http://localhost:3000")
    with TestClient(create_app()) as client:
        r = client.options(
            f"{API_PREFIX}/",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "POST",
            },
        )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "http://localhost:3000"
    assert r.headers["access-control-allow-credentials"] == "true"


def test_collection_answers_without_trailing_slash(client):
    r = client.get(API_PREFIX, follow_redirects=False)
    assert r.status_code == 200
    assert r.json() == []

    r = client.post(API_PREFIX, json={"username": "x"}, follow_redirects=False)
    assert r.status_code == 201
    assert r.json() == FIXED_USER


def test_bare_prefix_routes_hidden_from_openapi(client):
    paths = client.get("/openapi.json").json()["paths"]
    assert f"{API_PREFIX}/" in paths
    assert API_PREFIX not in paths


@pytest.mark.asyncio
async def test_login_user_is_a_noop():
    assert await login_user() is None


def test_request_end_logs_matched_route(client, caplog):
    with caplog.at_level(logging.INFO, logger="app"):
        client.get(f"{API_PREFIX}/42")
        client.get("/api/v1/nothing-here")

    ends = [r for r in caplog.records if r.getMessage() == "request.end"]
    assert len(ends) == 2
    assert (ends[0].route, ends[0].summary) == (f"{API_PREFIX}/{{id}}", "Get a user by id")
    assert ends[0].status_code == 200
    assert ends[1].route is None
    assert ends[1].status_code == 404
