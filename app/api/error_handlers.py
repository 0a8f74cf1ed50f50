"""Centralized error-to-HTTP mapping.

Every failure routed through ``async_handler`` arrives here as an ``ApiError``;
the body is always ``ApiError.to_payload()``.
"""
from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ..logging_conf import get_logger
from ..utils.api_error import ApiError

logger = get_logger("api.errors")


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    extra = {
        "event": "api_error",
        "method": request.method,
        "path": request.url.path,
        "status_code": exc.status_code,
        "error_message": exc.message,
        "request_id": getattr(request.state, "request_id", None),
    }
    if exc.status_code >= 500:
        logger.error("api.error", extra=extra, exc_info=exc.__cause__ or exc)
    else:
        logger.warning("api.error", extra=extra)
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort for exceptions raised outside ``async_handler``."""
    logger.exception(
        "api.unhandled",
        extra={
            "event": "api_unhandled",
            "method": request.method,
            "path": request.url.path,
        },
        exc_info=exc,
    )
    err = ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")
    return JSONResponse(status_code=err.status_code, content=err.to_payload())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_error_handler)
