"""Exceptions raised by the client."""

from gemini_api.models.error import ErrorDetailItem


class GeminiError(Exception):
    """Base class for every error raised by gemini_api."""


class TransportError(GeminiError):
    """The HTTP exchange itself failed (network, DNS, TLS, timeout)."""


class APIError(GeminiError):
    """The API answered with a non-success status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        code: int | None = None,
        status: str | None = None,
        details: list[ErrorDetailItem] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code if code is not None else status_code
        self.status = status
        self.details = details or []


class UnexpectedResponseError(GeminiError):
    """A success response whose shape the client cannot interpret."""


class ImageSourceError(GeminiError):
    """An image attachment could not be read."""


class ImageDownloadError(ImageSourceError):
    """Fetching a remote image returned a non-success status."""

    def __init__(self, url: str, status_code: int):
        super().__init__(f"Failed to download image, status: {status_code}")
        self.url = url
        self.status_code = status_code


class UnsupportedImageFormatError(ImageSourceError):
    """The image bytes are not a format that can be identified."""
