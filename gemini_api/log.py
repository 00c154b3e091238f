"""Loguru setup for applications using the client."""

import sys
from typing import Any

from loguru import logger

from gemini_api.config import settings


LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logging(level: str | None = None, sink: Any = sys.stderr) -> int:
    """Route gemini_api logs to ``sink`` (stderr by default).

    The package disables its own logging on import; calling this turns it on.
    Handlers already registered by the application are left in place, and the
    new handler only receives records from this package. Returns the handler
    id, which can be passed to ``logger.remove``.
    """
    handler_id = logger.add(
        sink,
        format=LOG_FORMAT,
        level=level or settings.log_level,
        filter="gemini_api",
    )
    logger.enable("gemini_api")
    return handler_id
