"""Environment-driven settings.

Values are read on each call so tests can adjust them with ``monkeypatch``.
``load_env_file()`` pulls a ``.env`` file into the process environment first.
"""
from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

__all__ = [
    "DEFAULT_PORT",
    "DEFAULT_HOST",
    "load_env_file",
    "get_port_from_env",
    "get_host_from_env",
    "get_cors_origins_from_env",
    "get_log_level_from_env",
    "get_app_version_from_env",
]

DEFAULT_PORT = 8000
DEFAULT_HOST = "0.0.0.0"


def load_env_file(path: str | Path = ".env") -> bool:
    """Load variables from ``path`` without overriding ones already set.

    Returns True if the file existed and was read.
    """
    env_path = Path(path)
    if not env_path.is_file():
        return False
    return load_dotenv(env_path, override=False)


def get_port_from_env() -> int:
    """Return PORT as an int, defaulting to 8000."""
    raw = os.getenv("PORT")
    if raw is None or raw.strip() == "":
        return DEFAULT_PORT
    try:
        port = int(raw, 10)
    except ValueError as e:
        raise ValueError("PORT must be an integer") from e
    if not (0 < port < 65536):
        raise ValueError("PORT must be in [1,65535]")
    return port


def get_host_from_env() -> str:
    return os.getenv("HOST", DEFAULT_HOST)


def get_cors_origins_from_env() -> list[str]:
    """Return the allowed CORS origins from CORS_ORIGIN.

    Accepts a single origin or a comma-separated list; unset means ``*``.
    """
    raw = os.getenv("CORS_ORIGIN", "*")
    origins = [tok.strip() for tok in raw.split(",") if tok.strip()]
    return origins or ["*"]


def get_log_level_from_env() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_app_version_from_env() -> str:
    return os.getenv("APP_VERSION", "0.1.0")
