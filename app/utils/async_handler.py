"""Route failures of async handlers to one error continuation.

Usage::

    @async_handler
    async def get_users() -> list[dict]:
        ...

    @async_handler(next_=my_continuation)
    async def other(...):
        ...

The wrapper keeps the wrapped handler's signature, so FastAPI resolves path,
query and body parameters exactly as it would for the bare handler.
"""
from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from typing import Any, TypeVar, overload

from starlette.exceptions import HTTPException as StarletteHTTPException

from ..logging_conf import get_logger
from .api_error import ApiError

__all__ = ["ErrorContinuation", "async_handler", "forward_error"]

logger = get_logger("utils.async_handler")

ErrorContinuation = Callable[[Exception], Any]
H = TypeVar("H", bound=Callable[..., Any])


def forward_error(exc: Exception) -> None:
    """Default continuation: hand the failure to the app-level ApiError handler.

    ``ApiError`` is re-raised untouched. HTTP exceptions keep their status and
    detail. Anything else becomes a 500 chained to the original exception.
    """
    if isinstance(exc, ApiError):
        raise exc
    if isinstance(exc, StarletteHTTPException):
        raise ApiError(exc.status_code, str(exc.detail)) from exc
    raise ApiError(500, "Internal Server Error") from exc


async def _continue(next_: ErrorContinuation, exc: Exception) -> Any:
    result = next_(exc)
    if inspect.isawaitable(result):
        result = await result
    return result


def _adapt(handler: H, next_: ErrorContinuation) -> H:
    @functools.wraps(handler)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            result = handler(*args, **kwargs)
            if inspect.isawaitable(result):
                result = await result
        except Exception as exc:
            logger.debug(
                "handler.failed",
                extra={
                    "event": "handler_failed",
                    "handler": getattr(handler, "__qualname__", repr(handler)),
                    "error": repr(exc),
                },
            )
            return await _continue(next_, exc)
        return result

    return wrapper  # type: ignore[return-value]


@overload
def async_handler(handler: H, *, next_: ErrorContinuation | None = None) -> H: ...


@overload
def async_handler(
    handler: None = None, *, next_: ErrorContinuation | None = None
) -> Callable[[H], H]: ...


def async_handler(
    handler: H | None = None, *, next_: ErrorContinuation | None = None
) -> H | Callable[[H], H]:
    """Wrap ``handler`` so any exception reaches ``next_`` exactly once.

    On success the handler's return value passes through and ``next_`` is not
    called. On failure the wrapper returns whatever ``next_`` returns (awaited
    if needed) and writes nothing itself. ``next_`` defaults to
    :func:`forward_error`.
    """
    continuation = next_ or forward_error

    if handler is None:
        return lambda fn: _adapt(fn, continuation)
    return _adapt(handler, continuation)
