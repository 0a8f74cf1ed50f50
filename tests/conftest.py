"""Shared fixtures: a fresh app per test and a TestClient bound to it."""
from __future__ import annotations

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

for _name in ("httpx", "asyncio"):
    logging.getLogger(_name).setLevel(logging.WARNING)

from app.main import create_app  # noqa: E402


@pytest.fixture()
def app(monkeypatch: pytest.MonkeyPatch) -> FastAPI:
    monkeypatch.delenv("CORS_ORIGIN", raising=False)
    return create_app()


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    with TestClient(app) as c:
        yield c
