import json

import pytest

from gemini_api.exceptions import APIError, UnexpectedResponseError
from gemini_api.language_model import LanguageModel
from gemini_api.models import Content, GenerationConfig, Part
from gemini_api.services.conversation import Conversation, error_from_response

from conftest import BASE_API, error_reply, text_reply


@pytest.fixture
def conversation():
    return Conversation(LanguageModel.GEMINI_1_5_FLASH, base_api=BASE_API + "/")


def exchange(conversation, text, status_code, payload):
    with conversation.turn([Part(text=text)]) as turn:
        body = json.loads(turn.body)
        reply = turn.complete(status_code, json.dumps(payload))
    return body, reply


def test_url(conversation):
    assert conversation.url == f"{BASE_API}/models/gemini-1.5-flash:generateContent"


def test_stateless_turn_sends_only_new_message(conversation):
    body, (text, response) = exchange(conversation, "hi", 200, text_reply("hello"))

    assert body == {"contents": [{"role": "user", "parts": [{"text": "hi"}]}]}
    assert text == "hello"
    assert response.usageMetadata.totalTokenCount == 6
    assert conversation.contents == []


def test_chat_sends_full_history(conversation):
    conversation.start_chat()
    exchange(conversation, "My name is Reine", 200, text_reply("Nice to meet you"))
    body, _ = exchange(conversation, "Who am I?", 200, text_reply("Reine"))

    assert [c["role"] for c in body["contents"]] == ["user", "model", "user"]
    assert [c.role for c in conversation.contents] == ["user", "model", "user", "model"]
    assert conversation.contents[-1].parts[0].text == "Reine"


def test_failed_turn_is_rolled_back(conversation):
    conversation.start_chat()
    exchange(conversation, "first", 200, text_reply("ok"))

    with pytest.raises(APIError, match="quota exceeded"):
        exchange(conversation, "second", 429, error_reply(429, "quota exceeded", "RESOURCE_EXHAUSTED"))

    assert len(conversation.contents) == 2


def test_unexpected_format_is_rolled_back(conversation):
    conversation.start_chat()
    with pytest.raises(UnexpectedResponseError):
        exchange(conversation, "hi", 200, {"candidates": []})
    assert conversation.contents == []


def test_transport_failure_inside_turn_is_rolled_back(conversation):
    conversation.start_chat([Content(role="user", parts=[Part(text="a")]),
                             Content(role="model", parts=[Part(text="b")])])
    with pytest.raises(ConnectionError):
        with conversation.turn([Part(text="c")]):
            raise ConnectionError("down")
    assert len(conversation.contents) == 2


def test_request_includes_options_and_system_instruction(conversation):
    conversation.options = GenerationConfig(temperature=0.5)
    conversation.system_instruction = "You are Reine"
    body, _ = exchange(conversation, "who are you", 200, text_reply("Reine"))

    assert body["generationConfig"] == {"temperature": 0.5}
    assert body["systemInstruction"] == {"parts": [{"text": "You are Reine"}]}


def test_empty_options_are_omitted(conversation):
    body, _ = exchange(conversation, "hi", 200, text_reply("hello"))
    assert "generationConfig" not in body
    assert "systemInstruction" not in body


def test_non_text_part_is_unexpected(conversation):
    payload = {
        "candidates": [
            {"content": {"role": "model", "parts": [{"inlineData": {"mimeType": "image/png", "data": "AA=="}}]}}
        ]
    }
    with pytest.raises(UnexpectedResponseError, match="Unexpected response format"):
        exchange(conversation, "draw", 200, payload)


def test_blocked_prompt_reports_reason(conversation):
    payload = {"promptFeedback": {"blockReason": "SAFETY"}}
    with pytest.raises(UnexpectedResponseError, match="SAFETY"):
        exchange(conversation, "bad", 200, payload)


def test_undecodable_body_is_unexpected(conversation):
    with pytest.raises(UnexpectedResponseError):
        with conversation.turn([Part(text="hi")]) as turn:
            turn.complete(200, "<html>not json</html>")


def test_end_chat_returns_history(conversation):
    conversation.start_chat()
    exchange(conversation, "hi", 200, text_reply("hello"))

    history = conversation.end_chat()

    assert len(history) == 2
    assert conversation.contents == []
    assert not conversation.chatting


class TestErrorFromResponse:
    def test_envelope(self):
        error = error_from_response(400, json.dumps(error_reply(400, "bad key")))
        assert error.message == "bad key"
        assert error.code == 400
        assert error.status == "INVALID_ARGUMENT"
        assert error.status_code == 400

    def test_non_envelope_body(self):
        error = error_from_response(502, "Bad Gateway")
        assert error.status_code == 502
        assert error.code == 502
        assert "Bad Gateway" in error.message
