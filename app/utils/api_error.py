from __future__ import annotations

import traceback
from typing import Any

__all__ = ["ApiError", "DEFAULT_ERROR_MESSAGE"]

DEFAULT_ERROR_MESSAGE = "Something went wrong"


class ApiError(Exception):
    """The single error kind the API raises for failed requests.

    ``success`` is always False. ``stack`` holds the caller-supplied trace
    text, or the stack at the point of construction when none is given.
    """

    success: bool = False
    data: None = None

    def __init__(
        self,
        status_code: int,
        message: str = DEFAULT_ERROR_MESSAGE,
        stack: str = "",
        *,
        errors: list[Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.errors = list(errors) if errors else []
        self.stack = stack or "".join(traceback.format_stack()[:-1])

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "success":
            raise AttributeError("ApiError.success is always False")
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        return f"ApiError(status_code={self.status_code!r}, message={self.message!r})"

    def to_payload(self) -> dict[str, Any]:
        """JSON-serializable body for an error response."""
        return {
            "statusCode": self.status_code,
            "message": self.message,
            "success": self.success,
            "errors": list(self.errors),
            "data": self.data,
        }
