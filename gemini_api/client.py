"""Blocking and asyncio clients for the generative language API."""

from pathlib import Path
from typing import Any, Iterable, TypeVar

from curl_cffi.requests import AsyncSession, Session
from curl_cffi.requests.exceptions import RequestException
from loguru import logger
from pydantic import ValidationError

from gemini_api.config import Settings, settings as default_settings
from gemini_api.exceptions import TransportError, UnexpectedResponseError
from gemini_api.language_model import LanguageModel
from gemini_api.models.request import Content, GenerationConfig, Part, SafetySetting
from gemini_api.models.response import GenerateContentResponse, ModelsResponse
from gemini_api.services.conversation import Conversation, error_from_response
from gemini_api.services.image import aload_image, load_image
from gemini_api.services.session import (
    create_async_session,
    create_session,
    is_success,
    request_options,
)


JSON_HEADERS = {"Content-Type": "application/json"}

Reply = tuple[str, GenerateContentResponse]

_ClientT = TypeVar("_ClientT", bound="_BaseGemini")


def _models_request(
    key: str, page_size: int | None, page_token: str | None, settings: Settings
) -> tuple[str, dict[str, Any]]:
    params: dict[str, Any] = {"key": key}
    if page_size is not None:
        params["pageSize"] = page_size
    if page_token is not None:
        params["pageToken"] = page_token
    return f"{settings.base_api.rstrip('/')}/models", params


def _parse_models(status_code: int, body: str) -> ModelsResponse:
    if not is_success(status_code):
        error = error_from_response(status_code, body)
        logger.error(f"Listing models failed - status: {status_code}, message: {error.message}")
        raise error
    try:
        return ModelsResponse.model_validate_json(body)
    except ValidationError as e:
        raise UnexpectedResponseError(f"Could not decode model list: {e}") from e


def list_models(
    key: str,
    *,
    page_size: int | None = None,
    page_token: str | None = None,
    session: Session | None = None,
    settings: Settings | None = None,
) -> ModelsResponse:
    """Fetch one page of available models.

    ``nextPageToken`` on the result is not followed; pass it back as
    ``page_token`` to get the next page.
    """
    settings = settings or default_settings
    url, params = _models_request(key, page_size, page_token, settings)
    owns_session = session is None
    session = session or create_session()
    try:
        response = session.get(url, params=params, **request_options(settings))
    except RequestException as e:
        logger.error(f"Listing models failed: {e}")
        raise TransportError(str(e)) from e
    finally:
        if owns_session:
            session.close()
    return _parse_models(response.status_code, response.text)


async def alist_models(
    key: str,
    *,
    page_size: int | None = None,
    page_token: str | None = None,
    session: AsyncSession | None = None,
    settings: Settings | None = None,
) -> ModelsResponse:
    """Asyncio variant of ``list_models``."""
    settings = settings or default_settings
    url, params = _models_request(key, page_size, page_token, settings)
    owns_session = session is None
    session = session or create_async_session()
    try:
        response = await session.get(url, params=params, **request_options(settings))
    except RequestException as e:
        logger.error(f"Listing models failed: {e}")
        raise TransportError(str(e)) from e
    finally:
        if owns_session:
            await session.close()
    return _parse_models(response.status_code, response.text)


class _BaseGemini:
    """Conversation management shared by both clients."""

    def __init__(
        self,
        key: str,
        model: LanguageModel | str = LanguageModel.GEMINI_1_5_FLASH,
        *,
        options: GenerationConfig | None = None,
        system_instruction: str | None = None,
        safety_settings: list[SafetySetting] | None = None,
        settings: Settings | None = None,
    ):
        self.key = key
        self.settings = settings or default_settings
        self.conversation = Conversation(
            LanguageModel.parse(model),
            base_api=self.settings.base_api,
            options=options,
            system_instruction=system_instruction,
            safety_settings=safety_settings,
        )

    @classmethod
    def rebuild(
        cls: type[_ClientT],
        key: str,
        model: LanguageModel | str,
        contents: Iterable[Content],
        options: GenerationConfig | None = None,
        **kwargs: Any,
    ) -> _ClientT:
        """Recreate a client in conversation mode from a saved history."""
        client = cls(key, model, options=options, **kwargs)
        client.start_chat(contents)
        return client

    @property
    def model(self) -> LanguageModel:
        return self.conversation.model

    @property
    def url(self) -> str:
        return self.conversation.url

    @property
    def history(self) -> list[Content]:
        return list(self.conversation.contents)

    @property
    def chatting(self) -> bool:
        return self.conversation.chatting

    @property
    def options(self) -> GenerationConfig:
        return self.conversation.options

    @property
    def system_instruction(self) -> str | None:
        return self.conversation.system_instruction

    def start_chat(self, history: Iterable[Content] | None = None) -> None:
        """Switch to conversation mode, optionally seeding the history."""
        self.conversation.start_chat(history)

    def end_chat(self) -> list[Content]:
        """Leave conversation mode and return the accumulated history."""
        return self.conversation.end_chat()

    def set_system_instruction(self, instruction: str | None) -> None:
        self.conversation.system_instruction = instruction

    def set_options(self, options: GenerationConfig) -> None:
        self.conversation.options = options

    def set_safety_settings(self, safety_settings: list[SafetySetting] | None) -> None:
        self.conversation.safety_settings = safety_settings

    def _post_options(self, body: str) -> dict[str, Any]:
        return {
            "params": {"key": self.key},
            "headers": JSON_HEADERS,
            "data": body,
            **request_options(self.settings),
        }


class Gemini(_BaseGemini):
    """Blocking client.

    Not safe for concurrent use: sends mutate the conversation history.
    """

    def __init__(self, key: str, model: LanguageModel | str = LanguageModel.GEMINI_1_5_FLASH, *,
                 session: Session | None = None, **kwargs: Any):
        super().__init__(key, model, **kwargs)
        self._owns_session = session is None
        self.session = session or create_session()

    def __enter__(self) -> "Gemini":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def _post(self, body: str):
        try:
            return self.session.post(self.url, **self._post_options(body))
        except RequestException as e:
            logger.error(f"Request to {self.model} failed: {e}")
            raise TransportError(str(e)) from e

    def send_message(self, parts: Iterable[Part]) -> Reply:
        """Send one user turn made of ``parts`` and return the reply text."""
        with self.conversation.turn(parts) as turn:
            response = self._post(turn.body)
            return turn.complete(response.status_code, response.text)

    def send_simple_message(self, text: str) -> Reply:
        return self.send_message([Part(text=text)])

    def send_image_message(self, image_source: str | Path, text: str) -> Reply:
        """Send text with an image from a local path or an http(s) URL."""
        image = load_image(image_source, self.session, **request_options(self.settings))
        return self.send_message([Part(text=text), image])

    def list_models(self, page_size: int | None = None, page_token: str | None = None) -> ModelsResponse:
        return list_models(
            self.key,
            page_size=page_size,
            page_token=page_token,
            session=self.session,
            settings=self.settings,
        )


class AsyncGemini(_BaseGemini):
    """Asyncio client.

    Not safe for concurrent use: sends mutate the conversation history.
    """

    def __init__(self, key: str, model: LanguageModel | str = LanguageModel.GEMINI_1_5_FLASH, *,
                 session: AsyncSession | None = None, **kwargs: Any):
        super().__init__(key, model, **kwargs)
        self._owns_session = session is None
        self.session = session or create_async_session()

    async def __aenter__(self) -> "AsyncGemini":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_session:
            await self.session.close()

    async def _post(self, body: str):
        try:
            return await self.session.post(self.url, **self._post_options(body))
        except RequestException as e:
            logger.error(f"Request to {self.model} failed: {e}")
            raise TransportError(str(e)) from e

    async def send_message(self, parts: Iterable[Part]) -> Reply:
        """Send one user turn made of ``parts`` and return the reply text."""
        with self.conversation.turn(parts) as turn:
            response = await self._post(turn.body)
            return turn.complete(response.status_code, response.text)

    async def send_simple_message(self, text: str) -> Reply:
        return await self.send_message([Part(text=text)])

    async def send_image_message(self, image_source: str | Path, text: str) -> Reply:
        """Send text with an image from a local path or an http(s) URL."""
        image = await aload_image(image_source, self.session, **request_options(self.settings))
        return await self.send_message([Part(text=text), image])

    async def list_models(self, page_size: int | None = None, page_token: str | None = None) -> ModelsResponse:
        return await alist_models(
            self.key,
            page_size=page_size,
            page_token=page_token,
            session=self.session,
            settings=self.settings,
        )
