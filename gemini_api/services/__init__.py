"""Services for the client."""

from .conversation import Conversation, PendingTurn
from .image import guess_image_format, load_image, aload_image
from .session import create_session, create_async_session

__all__ = [
    "Conversation",
    "PendingTurn",
    "guess_image_format",
    "load_image",
    "aload_image",
    "create_session",
    "create_async_session",
]
