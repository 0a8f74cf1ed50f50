from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fastapi import APIRouter, status

from ..controllers.user_controller import create_user, get_user_by_id, get_users
from .models import UserResponse

__all__ = ["API_PREFIX", "RouteEntry", "ROUTES", "build_router", "router"]

API_PREFIX = "/api/v1/users"


@dataclass(frozen=True)
class RouteEntry:
    """One (method, path) -> handler registration."""

    method: str
    path: str
    handler: Callable[..., Any]
    status_code: int = status.HTTP_200_OK
    summary: str = ""
    response_model: Any = None


# Registration order is match order.
ROUTES: tuple[RouteEntry, ...] = (
    RouteEntry("GET", "/", get_users, summary="List users"),
    RouteEntry("GET", "/{id}", get_user_by_id, summary="Get a user by id"),
    RouteEntry(
        "POST",
        "/",
        create_user,
        status_code=status.HTTP_201_CREATED,
        summary="Create a user",
        response_model=UserResponse,
    ),
)


def build_router(entries: tuple[RouteEntry, ...] = ROUTES, prefix: str = API_PREFIX) -> APIRouter:
    """Build an APIRouter from a static route table.

    A collection entry at ``"/"`` is also served at the bare prefix, so
    ``/api/v1/users`` answers directly instead of redirecting to the slashed path.
    """
    r = APIRouter(prefix=prefix, tags=["users"])
    for entry in entries:
        paths = [entry.path, ""] if entry.path == "/" and prefix else [entry.path]
        for path in paths:
            r.add_api_route(
                path,
                entry.handler,
                methods=[entry.method],
                status_code=entry.status_code,
                summary=entry.summary or None,
                response_model=entry.response_model,
                include_in_schema=path == entry.path,
            )
    return r


router = build_router()
