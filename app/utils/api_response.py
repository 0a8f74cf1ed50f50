"""Uniform envelope for successful responses.

Serialized shape::

    {"statusCode": 201, "data": {...}, "message": "Success", "success": true}
"""
from __future__ import annotations

from typing import Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, computed_field

__all__ = ["ApiResponse"]


class ApiResponse(BaseModel):
    """Immutable response envelope; ``success`` is derived from the status."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status_code: int = Field(..., alias="statusCode")
    data: Any = None
    message: str = "Success"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def success(self) -> bool:
        return self.status_code < 400

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content=self.to_dict())
