from __future__ import annotations

import asyncio
import time
from typing import Any

import httpx

from app.api.routes import API_PREFIX
from app.logging_conf import get_logger
from runner.types import RequestFailedError, SmokeError

logger = get_logger("runner.client")


async def wait_for_health(client: httpx.AsyncClient, timeout_s: float = 20.0) -> None:
    """Ping /health until the envelope reports success or raise after a timeout."""
    deadline = time.monotonic() + timeout_s
    while time.monotonic() < deadline:
        try:
            r = await client.get("/health")
            if r.status_code == 200 and r.json().get("success") is True:
                logger.info("health.ok", extra={"event": "health_ok"})
                return
        except httpx.HTTPError as e:
            logger.debug("health.wait", extra={"event": "health_wait", "error": str(e)})
        await asyncio.sleep(0.25)
    raise SmokeError("Health check did not pass within timeout")


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    retries: int = 3,
    **kwargs: Any,
) -> httpx.Response:
    """Send one request, retrying transport errors and 5xx responses."""
    last_err: Exception | None = None
    for attempt in range(retries):
        try:
            r = await client.request(method, url, **kwargs)
            if r.status_code < 500:
                return r
            last_err = httpx.HTTPStatusError(
                f"server error {r.status_code}", request=r.request, response=r
            )
        except httpx.HTTPError as e:  # pragma: no cover - network flakiness
            last_err = e
        logger.warning(
            "request.retry",
            extra={
                "event": "request_retry",
                "method": method,
                "url": url,
                "attempt": attempt + 1,
                "error": str(last_err),
            },
        )
    raise RequestFailedError(f"{method} {url} failed: {last_err}")


async def list_users(client: httpx.AsyncClient, *, retries: int = 3) -> httpx.Response:
    return await request_with_retry(client, "GET", f"{API_PREFIX}/", retries=retries)


async def get_user(client: httpx.AsyncClient, user_id: str, *, retries: int = 3) -> httpx.Response:
    return await request_with_retry(client, "GET", f"{API_PREFIX}/{user_id}", retries=retries)


async def create_user(
    client: httpx.AsyncClient, payload: dict[str, Any], *, retries: int = 3
) -> httpx.Response:
    return await request_with_retry(
        client, "POST", f"{API_PREFIX}/", retries=retries, json=payload
    )
