from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class CreateUserRequest(BaseModel):
    """Body accepted by POST /api/v1/users/."""
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class UserResponse(BaseModel):
    """Public representation of a user."""
    id: int
    username: str
    email: str
