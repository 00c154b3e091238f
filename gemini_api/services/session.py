"""HTTP session management."""

from typing import Any

from curl_cffi.requests import AsyncSession, Session

from gemini_api.config import Settings


def create_session() -> Session:
    """Create a blocking session."""
    return Session()


def create_async_session() -> AsyncSession:
    """Create an asyncio session."""
    return AsyncSession()


def request_options(settings: Settings) -> dict[str, Any]:
    """Keyword arguments shared by every request made with these settings."""
    options: dict[str, Any] = {"timeout": settings.timeout}
    if settings.proxy:
        options["proxy"] = settings.proxy
    if settings.impersonate:
        options["impersonate"] = settings.impersonate
    return options


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300
