from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class CheckResult:
    """Outcome of one endpoint check during the smoke run."""

    name: str
    ok: bool
    status_code: int | None = None
    body: Any = None
    errors: list[str] = field(default_factory=list)


class SmokeError(RuntimeError):
    """Raised when the smoke flow cannot proceed (e.g., health never ready)."""


class RequestFailedError(SmokeError):
    """Raised when a request keeps failing after retries."""
