"""Client for the Google generative language (Gemini) API."""

from loguru import logger

from gemini_api.client import AsyncGemini, Gemini, alist_models, list_models
from gemini_api.config import Settings
from gemini_api.exceptions import (
    APIError,
    GeminiError,
    ImageDownloadError,
    ImageSourceError,
    TransportError,
    UnexpectedResponseError,
    UnsupportedImageFormatError,
)
from gemini_api.language_model import LanguageModel
from gemini_api.log import setup_logging

__version__ = "0.1.0"

# Silent unless the application opts in with setup_logging()
logger.disable("gemini_api")

__all__ = [
    "AsyncGemini",
    "Gemini",
    "LanguageModel",
    "Settings",
    "list_models",
    "alist_models",
    "setup_logging",
    "GeminiError",
    "TransportError",
    "APIError",
    "UnexpectedResponseError",
    "ImageSourceError",
    "ImageDownloadError",
    "UnsupportedImageFormatError",
    "__version__",
]
