"""Request models for the generateContent endpoint."""

import base64
from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field, model_validator


class InlineData(BaseModel):
    """Inline binary data, such as an image."""

    mimeType: str = Field(..., description="MIME type of the data")
    data: str = Field(..., description="Base64 encoded data")


class Part(BaseModel):
    """Part of content, either text or inline data."""

    text: str | None = Field(default=None, description="Text content")
    inlineData: InlineData | None = Field(default=None, description="Inline data")

    @model_validator(mode="after")
    def _check_single_variant(self) -> "Part":
        if (self.text is None) == (self.inlineData is None):
            raise ValueError("A part holds exactly one of 'text' or 'inlineData'")
        return self

    @classmethod
    def from_text(cls, text: str) -> "Part":
        return cls(text=text)

    @classmethod
    def from_bytes(cls, data: bytes, mime_type: str) -> "Part":
        """Build an inline data part, base64 encoding the raw bytes."""
        encoded = base64.b64encode(data).decode("ascii")
        return cls(inlineData=InlineData(mimeType=mime_type, data=encoded))


class Content(BaseModel):
    """Content with an optional role and its parts.

    A system instruction is sent as content without a role.
    """

    role: Literal["user", "model"] | None = Field(default=None, description="Role of the content")
    parts: list[Part] = Field(..., description="Parts of the content")


class GenerationConfig(BaseModel):
    """Generation configuration.

    Every option is optional and left out of the request when unset, in which
    case the API applies its own default.
    """

    stopSequences: list[str] | None = Field(default=None, description="Sequences that stop generation")
    responseMimeType: str | None = Field(default=None, description="MIME type of the generated text")
    candidateCount: int | None = Field(default=None, description="Number of candidates to return")
    maxOutputTokens: int | None = Field(default=None, description="Maximum output tokens")
    temperature: float | None = Field(default=None, description="Temperature for generation")
    topP: float | None = Field(default=None, description="Top P for generation")
    topK: int | None = Field(default=None, description="Top K for generation")
    presencePenalty: float | None = Field(default=None, description="Presence penalty")
    frequencyPenalty: float | None = Field(default=None, description="Frequency penalty")
    seed: int | None = Field(default=None, description="Decoding seed")
    responseLogprobs: bool | None = Field(default=None, description="Return logprobs in the response")
    logprobs: int | None = Field(default=None, description="Number of top logprobs to return")

    @classmethod
    def api_defaults(cls) -> "GenerationConfig":
        """The API's documented defaults, spelled out explicitly."""
        return cls(
            responseMimeType="text/plain",
            maxOutputTokens=8192,
            temperature=1.0,
            topP=0.95,
            topK=64,
        )


class HarmCategory(str, Enum):
    """Category of a safety rating or setting."""

    HARM_CATEGORY_UNSPECIFIED = "HARM_CATEGORY_UNSPECIFIED"
    HARM_CATEGORY_DEROGATORY = "HARM_CATEGORY_DEROGATORY"
    HARM_CATEGORY_TOXICITY = "HARM_CATEGORY_TOXICITY"
    HARM_CATEGORY_VIOLENCE = "HARM_CATEGORY_VIOLENCE"
    HARM_CATEGORY_SEXUAL = "HARM_CATEGORY_SEXUAL"
    HARM_CATEGORY_MEDICAL = "HARM_CATEGORY_MEDICAL"
    HARM_CATEGORY_DANGEROUS = "HARM_CATEGORY_DANGEROUS"
    HARM_CATEGORY_HARASSMENT = "HARM_CATEGORY_HARASSMENT"
    HARM_CATEGORY_HATE_SPEECH = "HARM_CATEGORY_HATE_SPEECH"
    HARM_CATEGORY_SEXUALLY_EXPLICIT = "HARM_CATEGORY_SEXUALLY_EXPLICIT"
    HARM_CATEGORY_DANGEROUS_CONTENT = "HARM_CATEGORY_DANGEROUS_CONTENT"
    HARM_CATEGORY_CIVIC_INTEGRITY = "HARM_CATEGORY_CIVIC_INTEGRITY"


class HarmBlockThreshold(str, Enum):
    """Probability level at and above which content is blocked."""

    HARM_BLOCK_THRESHOLD_UNSPECIFIED = "HARM_BLOCK_THRESHOLD_UNSPECIFIED"
    BLOCK_LOW_AND_ABOVE = "BLOCK_LOW_AND_ABOVE"
    BLOCK_MEDIUM_AND_ABOVE = "BLOCK_MEDIUM_AND_ABOVE"
    BLOCK_ONLY_HIGH = "BLOCK_ONLY_HIGH"
    BLOCK_NONE = "BLOCK_NONE"
    OFF = "OFF"


class SafetySetting(BaseModel):
    """Safety setting for content generation."""

    category: HarmCategory = Field(..., description="Safety category")
    threshold: HarmBlockThreshold = Field(..., description="Safety threshold")


class GenerateContentRequest(BaseModel):
    """Request model for generateContent endpoint."""

    contents: list[Content] = Field(..., description="Contents to generate from")
    generationConfig: GenerationConfig | None = Field(
        default=None, description="Generation configuration"
    )
    safetySettings: list[SafetySetting] | None = Field(
        default=None, description="Safety settings"
    )
    systemInstruction: Content | None = Field(
        default=None, description="System instruction"
    )

    def to_json(self) -> str:
        """Serialize to the wire form, leaving out every unset field."""
        return self.model_dump_json(exclude_none=True)
