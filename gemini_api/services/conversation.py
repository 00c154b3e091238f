"""Conversation state and the send algorithm shared by the blocking and asyncio clients.

Nothing in this module performs I/O. A client opens a turn, posts
``turn.request`` with whatever transport it owns, then hands the status code
and body back to ``turn.complete``. Any exception raised inside the
turn, cancellation included, removes the pending user message from the history.
"""

from contextlib import contextmanager
from typing import Iterable, Iterator

from loguru import logger
from pydantic import ValidationError

from gemini_api.exceptions import APIError, UnexpectedResponseError
from gemini_api.language_model import LanguageModel
from gemini_api.models.error import ErrorResponse
from gemini_api.models.request import (
    Content,
    GenerateContentRequest,
    GenerationConfig,
    Part,
    SafetySetting,
)
from gemini_api.models.response import GenerateContentResponse
from gemini_api.services.session import is_success


def error_from_response(status_code: int, body: str) -> APIError:
    """Build an APIError from a non-success response body."""
    try:
        envelope = ErrorResponse.model_validate_json(body)
    except ValidationError:
        return APIError(f"HTTP {status_code}: {body[:500]}", status_code=status_code)

    error = envelope.error
    return APIError(
        error.message,
        status_code=status_code,
        code=error.code,
        status=error.status,
        details=error.details,
    )


def extract_text(response: GenerateContentResponse) -> str:
    """Return the text of the first part of the first candidate."""
    if not response.candidates:
        feedback = response.promptFeedback
        if feedback is not None and feedback.blockReason is not None:
            raise UnexpectedResponseError(
                f"Response has no candidates, prompt blocked: {feedback.blockReason.value}"
            )
        raise UnexpectedResponseError("Response has no candidates")

    content = response.candidates[0].content
    if content is None or not content.parts:
        raise UnexpectedResponseError("First candidate has no content")

    text = content.parts[0].text
    if text is None:
        raise UnexpectedResponseError("Unexpected response format")
    return text


class PendingTurn:
    """A user message waiting for the model's reply."""

    def __init__(self, conversation: "Conversation", request: GenerateContentRequest):
        self.conversation = conversation
        self.request = request

    @property
    def body(self) -> str:
        return self.request.to_json()

    def complete(self, status_code: int, body: str) -> tuple[str, GenerateContentResponse]:
        """Interpret the HTTP result; on success record the model's reply."""
        if not is_success(status_code):
            error = error_from_response(status_code, body)
            logger.error(
                f"API request failed - status: {status_code}, message: {error.message}"
            )
            raise error

        try:
            response = GenerateContentResponse.model_validate_json(body)
        except ValidationError as e:
            logger.error(f"Could not decode response: {e}, body: {body[:500]}")
            raise UnexpectedResponseError(f"Could not decode response: {e}") from e

        text = extract_text(response)
        if self.conversation.chatting:
            self.conversation.contents.append(
                Content(role="model", parts=[Part(text=text)])
            )
        return text, response


class Conversation:
    """Accumulated history plus the options sent with every request.

    In stateless mode (the default) each message is sent on its own and the
    history is left alone. After ``start_chat`` every message is appended to
    the history and the full history is sent.
    """

    def __init__(
        self,
        model: LanguageModel,
        *,
        base_api: str,
        options: GenerationConfig | None = None,
        system_instruction: str | None = None,
        safety_settings: list[SafetySetting] | None = None,
    ):
        self.model = model
        self.base_api = base_api.rstrip("/")
        self.options = options or GenerationConfig()
        self.system_instruction = system_instruction
        self.safety_settings = safety_settings
        self.contents: list[Content] = []
        self.chatting = False

    @property
    def url(self) -> str:
        return f"{self.base_api}/{self.model}:generateContent"

    def start_chat(self, history: Iterable[Content] | None = None) -> None:
        self.contents = list(history or [])
        self.chatting = True
        logger.info(f"Conversation started with {len(self.contents)} turns of history")

    def end_chat(self) -> list[Content]:
        history, self.contents = self.contents, []
        self.chatting = False
        logger.info(f"Conversation ended after {len(history)} turns")
        return history

    def build_request(self, contents: list[Content]) -> GenerateContentRequest:
        generation_config = self.options if self.options.model_dump(exclude_none=True) else None
        system_instruction = None
        if self.system_instruction is not None:
            system_instruction = Content(parts=[Part(text=self.system_instruction)])
        return GenerateContentRequest(
            contents=contents,
            generationConfig=generation_config,
            safetySettings=self.safety_settings or None,
            systemInstruction=system_instruction,
        )

    @contextmanager
    def turn(self, parts: Iterable[Part]) -> Iterator[PendingTurn]:
        user_turn = Content(role="user", parts=list(parts))
        if self.chatting:
            self.contents.append(user_turn)
            contents = list(self.contents)
        else:
            contents = [user_turn]

        logger.debug(f"Sending {len(contents)} turns to {self.model}")
        try:
            yield PendingTurn(self, self.build_request(contents))
        except BaseException:
            self._rollback(user_turn)
            raise

    def _rollback(self, user_turn: Content) -> None:
        if self.chatting and self.contents and self.contents[-1] is user_turn:
            self.contents.pop()
            logger.warning("Send failed, removed the unanswered user turn from history")
