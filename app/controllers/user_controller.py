"""Handlers for the users resource.

Bodies are placeholders: no persistence sits behind them yet, so each one
returns a fixed or empty payload.
"""
from typing import Any, Optional

from fastapi import Query

from ..api.models import CreateUserRequest, UserResponse
from ..logging_conf import get_logger
from ..utils.async_handler import async_handler

logger = get_logger("controllers.user")

SAMPLE_USER = UserResponse(id=1, username="anson", email="anson@ansonthedev.com")


@async_handler
async def get_users() -> list[UserResponse]:
    """List users."""
    logger.info("users.list", extra={"event": "users_list"})
    return []


@async_handler
async def get_user_by_id(id: str) -> dict[str, Any]:
    """Fetch one user; the identifier is not looked up."""
    logger.info("users.get", extra={"event": "users_get", "user_id": id})
    return {}


@async_handler
async def create_user(
    req: CreateUserRequest | None = None,
    login_after_create: Optional[bool] = Query(default=None, alias="loginAfterCreate"),
) -> UserResponse:
    """Create a user and return the stored record."""
    logger.info(
        "users.create",
        extra={
            "event": "users_create",
            "has_body": req is not None,
            "login_after_create": login_after_create,
        },
    )
    return SAMPLE_USER


@async_handler
async def login_user() -> None:
    """Log a user in. Not implemented and not routed."""
