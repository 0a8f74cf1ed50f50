#!/usr/bin/env python3
"""End-to-end smoke check of a running users API.

Steps:
- wait for server health
- list users, fetch one by id, create one
- compare each response against the expected status and body
- emit a compact JSON summary and exit 0 only if every check passed
"""
from __future__ import annotations

import asyncio
import sys
from typing import Any

import httpx

from app.logging_conf import get_logger, setup_logging
from runner.cli import parse_args
from runner.client import create_user, get_user, list_users, wait_for_health
from runner.types import CheckResult, SmokeError

setup_logging()
logger = get_logger("runner")

EXPECTED_USER = {"id": 1, "username": "anson", "email": "anson@ansonthedev.com"}
NEW_USER = {"username": "anson", "email": "anson@ansonthedev.com", "password": "hunter2"}


def check(name: str, response: httpx.Response, status_code: int, body: Any) -> CheckResult:
    """Compare a response against the expected status code and JSON body."""
    errors: list[str] = []
    try:
        got = response.json()
    except ValueError:
        got = response.text
        errors.append("body is not JSON")
    if response.status_code != status_code:
        errors.append(f"expected status {status_code}, got {response.status_code}")
    if not errors and got != body:
        errors.append(f"expected body {body!r}, got {got!r}")
    return CheckResult(
        name=name, ok=not errors, status_code=response.status_code, body=got, errors=errors
    )


def summarize(results: list[CheckResult]) -> tuple[dict, int]:
    """Build the summary log payload and the process exit code."""
    failed = [r for r in results if not r.ok]
    summary = {
        "component": "runner",
        "event": "summary",
        "checks": len(results),
        "passed": len(results) - len(failed),
        "failed": len(failed),
        "failures": [
            {"check": r.name, "status_code": r.status_code, "errors": r.errors} for r in failed
        ],
    }
    exit_code = 0 if results and not failed else 1
    return summary, exit_code


async def run_smoke(
    *,
    base_url: str,
    health_timeout_s: float = 20.0,
    retries: int = 3,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    async with httpx.AsyncClient(base_url=base_url, timeout=10.0, transport=transport) as client:
        await wait_for_health(client, timeout_s=health_timeout_s)
        results = [
            check("list_users", await list_users(client, retries=retries), 200, []),
            check("get_user", await get_user(client, "1", retries=retries), 200, {}),
            check(
                "create_user",
                await create_user(client, NEW_USER, retries=retries),
                201,
                EXPECTED_USER,
            ),
        ]
    summary, exit_code = summarize(results)
    logger.info("runner.summary", extra=summary)
    return exit_code


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    try:
        code = asyncio.run(
            run_smoke(
                base_url=args.base_url,
                health_timeout_s=args.health_timeout,
                retries=args.retries,
            )
        )
    except SmokeError as e:
        logger.error("runner.aborted", extra={"event": "aborted", "error": str(e)})
        code = 1
    raise SystemExit(code)


if __name__ == "__main__":
    main()
