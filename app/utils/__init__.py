"""Framework-light helpers shared by controllers and the app factory."""
from .api_error import ApiError
from .api_response import ApiResponse
from .async_handler import async_handler, forward_error

__all__ = ["ApiError", "ApiResponse", "async_handler", "forward_error"]
