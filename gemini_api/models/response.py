"""Response models for the generateContent and models endpoints."""

from enum import Enum

from pydantic import BaseModel, Field

from .request import Content, HarmCategory


class FinishReason(str, Enum):
    """Reason the model stopped generating tokens."""

    FINISH_REASON_UNSPECIFIED = "FINISH_REASON_UNSPECIFIED"
    STOP = "STOP"
    MAX_TOKENS = "MAX_TOKENS"
    SAFETY = "SAFETY"
    RECITATION = "RECITATION"
    LANGUAGE = "LANGUAGE"
    OTHER = "OTHER"
    BLOCKLIST = "BLOCKLIST"
    PROHIBITED_CONTENT = "PROHIBITED_CONTENT"
    SPII = "SPII"
    MALFORMED_FUNCTION_CALL = "MALFORMED_FUNCTION_CALL"


class HarmProbability(str, Enum):
    """Probability that a piece of content is harmful."""

    HARM_PROBABILITY_UNSPECIFIED = "HARM_PROBABILITY_UNSPECIFIED"
    NEGLIGIBLE = "NEGLIGIBLE"
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class BlockReason(str, Enum):
    """Reason the prompt was blocked."""

    BLOCK_REASON_UNSPECIFIED = "BLOCK_REASON_UNSPECIFIED"
    SAFETY = "SAFETY"
    OTHER = "OTHER"
    BLOCKLIST = "BLOCKLIST"
    PROHIBITED_CONTENT = "PROHIBITED_CONTENT"


class SafetyRating(BaseModel):
    """Safety rating for one harm category."""

    category: HarmCategory = Field(..., description="Category of the rating")
    probability: HarmProbability = Field(..., description="Probability of harm")
    blocked: bool | None = Field(default=None, description="Whether this rating caused a block")


class CitationSource(BaseModel):
    """A source attributed for a segment of the response."""

    startIndex: int | None = Field(default=None, description="Start of the segment in bytes")
    endIndex: int | None = Field(default=None, description="End of the segment, exclusive")
    uri: str | None = Field(default=None, description="URI of the source")
    license: str | None = Field(default=None, description="License of the source")


class CitationMetadata(BaseModel):
    """Citations for a candidate."""

    citationSources: list[CitationSource] = Field(
        default_factory=list, description="Citation sources"
    )


class LogprobsCandidate(BaseModel):
    """A token and its log probability."""

    token: str | None = Field(default=None, description="Token string")
    tokenId: int | None = Field(default=None, description="Token id")
    logProbability: float | None = Field(default=None, description="Log probability")


class TopCandidates(BaseModel):
    """Top tokens at one decoding step, sorted by log probability."""

    candidates: list[LogprobsCandidate] = Field(default_factory=list)


class LogprobsResult(BaseModel):
    """Log-likelihood scores for the response tokens."""

    topCandidates: list[TopCandidates] = Field(default_factory=list)
    chosenCandidates: list[LogprobsCandidate] = Field(default_factory=list)


class GroundingPassageId(BaseModel):
    """A part within an inline grounding passage."""

    passageId: str = Field(..., description="ID of the matching grounding passage")
    partIndex: int = Field(default=0, description="Index of the part within the passage content")


class SemanticRetrieverChunk(BaseModel):
    """A chunk retrieved through the semantic retriever."""

    source: str = Field(..., description="Retriever source, e.g. corpora/123")
    chunk: str = Field(..., description="Chunk name, e.g. corpora/123/documents/abc/chunks/xyz")


class AttributionSourceId(BaseModel):
    """Identifier of the source behind an attribution. One of the two fields is set."""

    groundingPassage: GroundingPassageId | None = Field(default=None)
    semanticRetrieverChunk: SemanticRetrieverChunk | None = Field(default=None)


class GroundingAttribution(BaseModel):
    """A source that contributed to an answer."""

    sourceId: AttributionSourceId | None = Field(default=None, description="Source identifier")
    content: Content | None = Field(default=None, description="Grounding source content")


class Candidate(BaseModel):
    """Candidate response from the model."""

    content: Content | None = Field(default=None, description="Content of the candidate")
    finishReason: FinishReason | None = Field(default=None, description="Reason for finishing")
    safetyRatings: list[SafetyRating] | None = Field(default=None, description="Safety ratings")
    citationMetadata: CitationMetadata | None = Field(default=None, description="Citation metadata")
    groundingAttributions: list[GroundingAttribution] | None = Field(
        default=None, description="Sources that contributed to a grounded answer"
    )
    tokenCount: int | None = Field(default=None, description="Token count of the candidate")
    index: int | None = Field(default=None, description="Index of the candidate")
    avgLogprobs: float | None = Field(default=None, description="Average log probability")
    logprobsResult: LogprobsResult | None = Field(default=None, description="Logprobs result")


class PromptFeedback(BaseModel):
    """Feedback on the prompt from the content filters."""

    blockReason: BlockReason | None = Field(default=None, description="Reason the prompt was blocked")
    safetyRatings: list[SafetyRating] | None = Field(default=None, description="Safety ratings of the prompt")


class UsageMetadata(BaseModel):
    """Usage metadata for the response."""

    promptTokenCount: int = Field(default=0, description="Prompt token count")
    cachedContentTokenCount: int | None = Field(default=None, description="Cached content token count")
    candidatesTokenCount: int = Field(default=0, description="Candidates token count")
    totalTokenCount: int = Field(default=0, description="Total token count")


class GenerateContentResponse(BaseModel):
    """Response model for generateContent endpoint.

    The API returns either every requested candidate or none. No candidates
    means the prompt was rejected; ``promptFeedback`` carries the reason.
    """

    candidates: list[Candidate] = Field(
        default_factory=list, description="Candidates from generation"
    )
    promptFeedback: PromptFeedback | None = Field(default=None, description="Prompt feedback")
    usageMetadata: UsageMetadata = Field(
        default_factory=UsageMetadata, description="Usage metadata"
    )
    modelVersion: str | None = Field(default=None, description="Model version used")


class Model(BaseModel):
    """Information about a generative language model."""

    name: str = Field(..., description="Resource name, e.g. 'models/gemini-1.5-flash'")
    baseModelId: str | None = Field(default=None, description="Base model id")
    version: str = Field(..., description="Model version")
    displayName: str = Field(..., description="Human readable name")
    description: str | None = Field(default=None, description="Short description")
    inputTokenLimit: int = Field(default=0, description="Maximum input tokens")
    outputTokenLimit: int = Field(default=0, description="Maximum output tokens")
    supportedGenerationMethods: list[str] = Field(
        default_factory=list, description="Supported API methods"
    )
    temperature: float | None = Field(default=None, description="Default temperature")
    maxTemperature: float | None = Field(default=None, description="Maximum temperature")
    topP: float | None = Field(default=None, description="Default top P")
    topK: int | None = Field(default=None, description="Default top K")


class ModelsResponse(BaseModel):
    """One page of the model list."""

    models: list[Model] = Field(default_factory=list, description="Returned models")
    nextPageToken: str | None = Field(
        default=None, description="Token for the next page, absent on the last page"
    )
