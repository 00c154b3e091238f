import json
from types import SimpleNamespace

import pytest
from PIL import Image

from gemini_api.config import Settings


BASE_API = "https://generativelanguage.googleapis.com/v1beta"


def make_response(status_code: int, payload=None, *, text: str | None = None, content: bytes = b""):
    """Stand-in for a curl_cffi response."""
    if text is None:
        text = json.dumps(payload) if payload is not None else ""
    return SimpleNamespace(status_code=status_code, text=text, content=content)


def text_reply(text: str) -> dict:
    return {
        "candidates": [
            {
                "content": {"role": "model", "parts": [{"text": text}]},
                "finishReason": "STOP",
                "index": 0,
            }
        ],
        "usageMetadata": {
            "promptTokenCount": 4,
            "candidatesTokenCount": 2,
            "totalTokenCount": 6,
        },
    }


def error_reply(code: int, message: str, status: str = "INVALID_ARGUMENT") -> dict:
    return {"error": {"code": code, "message": message, "status": status}}


@pytest.fixture
def settings() -> Settings:
    """Settings independent of the environment running the tests."""
    return Settings(
        _env_file=None,
        key=None,
        base_api=BASE_API,
        proxy=None,
        timeout=30,
        impersonate=None,
    )


@pytest.fixture
def png_file(tmp_path):
    path = tmp_path / "pixel.png"
    Image.new("RGB", (2, 2), color=(255, 0, 0)).save(path, format="PNG")
    return path


@pytest.fixture
def jpeg_file(tmp_path):
    path = tmp_path / "pixel.jpg"
    Image.new("RGB", (2, 2), color=(0, 255, 0)).save(path, format="JPEG")
    return path
