"""FastAPI app factory, health endpoint, users routes and process bootstrap."""
from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable
from uuid import uuid4

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute

from app.api.routes import router as users_router
from app.api.error_handlers import register_exception_handlers
from app.config import (
    get_app_version_from_env,
    get_cors_origins_from_env,
    get_host_from_env,
    get_log_level_from_env,
    get_port_from_env,
    load_env_file,
)
from app.db import connect_db
from app.logging_conf import get_logger, setup_logging
from app.utils.api_response import ApiResponse

setup_logging()
logger = get_logger("app")


def _route_fields(request: Request) -> dict[str, str | None]:
    """Template path and route-table summary of the route that served ``request``."""
    route = request.scope.get("route")
    if not isinstance(route, APIRoute):
        return {"route": None, "summary": None}
    return {"route": route.path, "summary": route.summary}


async def log_requests(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    """Log each request against the route it matched and echo X-Request-ID.

    A client-supplied X-Request-ID is kept; otherwise one is minted.
    """
    request_id = request.headers.get("X-Request-ID") or str(uuid4())
    request.state.request_id = request_id
    base = {"method": request.method, "path": request.url.path, "request_id": request_id}

    logger.info("request.start", extra={"event": "request_start", **base})
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("request.error", extra={"event": "request_error", **base})
        raise
    elapsed_ms = round((time.perf_counter() - start) * 1000.0, 2)

    response.headers["X-Request-ID"] = request_id
    logger.info(
        "request.end",
        extra={
            "event": "request_end",
            **base,
            **_route_fields(request),
            "status_code": response.status_code,
            "elapsed_ms": elapsed_ms,
        },
    )
    return response


def create_app() -> FastAPI:
    app = FastAPI(
        title="Users API",
        version=get_app_version_from_env(),
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins_from_env(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    async def _on_startup() -> None:
        logger.info("startup", extra={"event": "startup"})

    @app.on_event("shutdown")
    async def _on_shutdown() -> None:
        logger.info("shutdown", extra={"event": "shutdown"})

    app.middleware("http")(log_requests)

    register_exception_handlers(app)

    @app.get("/health", summary="Liveness/readiness check")
    async def health() -> JSONResponse:
        return ApiResponse(status_code=200, data={"ok": True}).to_response()

    app.include_router(users_router)

    return app


def run() -> None:
    """Console entrypoint: load .env, connect the database, then serve."""
    load_env_file()
    setup_logging(get_log_level_from_env())

    try:
        asyncio.run(connect_db())
    except Exception as err:
        logger.error("ERR", extra={"event": "startup_failed", "error": repr(err)}, exc_info=err)
        raise SystemExit(1) from err

    host, port = get_host_from_env(), get_port_from_env()
    logger.info("server.listen", extra={"event": "listen", "url": f"http://localhost:{port}"})
    uvicorn.run(create_app(), host=host, port=port, log_config=None)


# ASGI entrypoint for uvicorn: `uvicorn app.main:app --port 8000`
app = create_app()


if __name__ == "__main__":
    run()
