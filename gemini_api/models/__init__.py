"""Data models for the generative language API."""

from .request import (
    GenerateContentRequest,
    Content,
    Part,
    InlineData,
    GenerationConfig,
    SafetySetting,
    HarmCategory,
    HarmBlockThreshold,
)
from .response import (
    GenerateContentResponse,
    Candidate,
    FinishReason,
    SafetyRating,
    HarmProbability,
    CitationMetadata,
    CitationSource,
    PromptFeedback,
    BlockReason,
    UsageMetadata,
    LogprobsResult,
    LogprobsCandidate,
    TopCandidates,
    GroundingAttribution,
    AttributionSourceId,
    GroundingPassageId,
    SemanticRetrieverChunk,
    Model,
    ModelsResponse,
)
from .error import ErrorResponse, ErrorDetail, ErrorDetailItem

__all__ = [
    "GenerateContentRequest",
    "Content",
    "Part",
    "InlineData",
    "GenerationConfig",
    "SafetySetting",
    "HarmCategory",
    "HarmBlockThreshold",
    "GenerateContentResponse",
    "Candidate",
    "FinishReason",
    "SafetyRating",
    "HarmProbability",
    "CitationMetadata",
    "CitationSource",
    "PromptFeedback",
    "BlockReason",
    "UsageMetadata",
    "LogprobsResult",
    "LogprobsCandidate",
    "TopCandidates",
    "GroundingAttribution",
    "AttributionSourceId",
    "GroundingPassageId",
    "SemanticRetrieverChunk",
    "Model",
    "ModelsResponse",
    "ErrorResponse",
    "ErrorDetail",
    "ErrorDetailItem",
]
