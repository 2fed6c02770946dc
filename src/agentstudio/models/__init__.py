"""Data models for Agentic Studio."""

from agentstudio.models.assets import AssetPair
from agentstudio.models.errors import (
    AssetGenerationError,
    ConfigurationError,
    ErrorResponse,
    PublishError,
    ScriptEnhancementError,
    ScriptGenerationError,
    StudioError,
    ValidationError,
    VideoRenderError,
)
from agentstudio.models.pipeline import (
    STAGE_DEFINITIONS,
    STAGE_IDS,
    PipelineRequest,
    PipelineResponse,
    PipelineResult,
    Stage,
    StageDefinition,
    StageStatus,
)
from agentstudio.models.publish import VideoMetadata, watch_url

__all__ = [
    "STAGE_DEFINITIONS",
    "STAGE_IDS",
    "AssetGenerationError",
    "AssetPair",
    "ConfigurationError",
    "ErrorResponse",
    "PipelineRequest",
    "PipelineResponse",
    "PipelineResult",
    "PublishError",
    "ScriptEnhancementError",
    "ScriptGenerationError",
    "Stage",
    "StageDefinition",
    "StageStatus",
    "StudioError",
    "ValidationError",
    "VideoMetadata",
    "VideoRenderError",
    "watch_url",
]
