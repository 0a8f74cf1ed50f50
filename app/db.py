from __future__ import annotations

from .logging_conf import get_logger

logger = get_logger("db")


async def connect_db() -> None:
    """Open the database connection.

    No database is wired up yet; this only records that startup reached the
    connection step so the bootstrap sequence stays in place.
    """
    logger.info("db.connect", extra={"event": "db_connect", "connected": False})
