"""Image attachments: reading local or remote images and sniffing their format."""

import io
import warnings
from pathlib import Path
from typing import Any

from curl_cffi.requests import AsyncSession, Session
from curl_cffi.requests.exceptions import RequestException
from loguru import logger
from PIL import Image, UnidentifiedImageError

from gemini_api.exceptions import (
    ImageDownloadError,
    ImageSourceError,
    UnsupportedImageFormatError,
)
from gemini_api.models.request import Part
from gemini_api.services.session import is_success


# Pillow formats without a registered MIME type
_EXTRA_MIME = {
    "PPM": "image/x-portable-anymap",
    "TGA": "image/x-tga",
    "DDS": "image/vnd.ms-dds",
    "ICO": "image/x-icon",
    "HDR": "image/vnd.radiance",
    "AVIF": "image/avif",
    "QOI": "image/x-qoi",
}


def is_remote(source: str | Path) -> bool:
    return isinstance(source, str) and source.startswith(("http://", "https://"))


def _sniff_format(prefix: bytes) -> str | None:
    """Match the header against every registered Pillow format, without decoding."""
    Image.init()
    for image_format in Image.ID:
        _, accept = Image.OPEN[image_format]
        if accept is None:
            continue
        result = accept(prefix)
        # a string means "recognized but unreadable"
        if result and not isinstance(result, str):
            return image_format
    return None


def guess_image_format(data: bytes) -> str:
    """Return the MIME type of an image from its magic bytes.

    Only the header is inspected, so very large images are accepted. Formats
    Pillow cannot recognize from a prefix (such as TGA) fall back to opening
    the image.
    """
    image_format = _sniff_format(data[:16])
    if image_format is None:
        try:
            with warnings.catch_warnings():
                warnings.simplefilter("ignore", Image.DecompressionBombWarning)
                with Image.open(io.BytesIO(data)) as img:
                    image_format = img.format
        except UnidentifiedImageError as e:
            raise UnsupportedImageFormatError("Unrecognized image format") from e
        except (Image.DecompressionBombError, OSError, ValueError) as e:
            raise UnsupportedImageFormatError(f"Could not read image header: {e}") from e

    mime_type = Image.MIME.get(image_format) or _EXTRA_MIME.get(image_format)
    if mime_type is None:
        raise UnsupportedImageFormatError(f"No MIME type known for image format {image_format}")
    return mime_type


def read_local_image(path: str | Path) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as e:
        logger.error(f"Failed to read image {path}: {e}")
        raise ImageSourceError(f"Failed to read image {path}: {e}") from e


def to_part(data: bytes) -> Part:
    """Sniff and base64 encode image bytes into an inline data part."""
    mime_type = guess_image_format(data)
    logger.debug(f"Attaching {mime_type} image ({len(data)} bytes)")
    return Part.from_bytes(data, mime_type)


def _downloaded_bytes(url: str, response) -> bytes:
    if not is_success(response.status_code):
        logger.error(f"Image download failed - url: {url}, status: {response.status_code}")
        raise ImageDownloadError(url, response.status_code)
    return response.content


def load_image(source: str | Path, session: Session, **options: Any) -> Part:
    """Resolve a local path or URL to an inline data part."""
    if not is_remote(source):
        return to_part(read_local_image(source))

    try:
        response = session.get(source, **options)
    except RequestException as e:
        logger.error(f"Image download failed - url: {source}, error: {e}")
        raise ImageSourceError(f"Failed to download image: {e}") from e
    return to_part(_downloaded_bytes(source, response))


async def aload_image(source: str | Path, session: AsyncSession, **options: Any) -> Part:
    """Asyncio variant of ``load_image``. Local files are read synchronously."""
    if not is_remote(source):
        return to_part(read_local_image(source))

    try:
        response = await session.get(source, **options)
    except RequestException as e:
        logger.error(f"Image download failed - url: {source}, error: {e}")
        raise ImageSourceError(f"Failed to download image: {e}") from e
    return to_part(_downloaded_bytes(source, response))
