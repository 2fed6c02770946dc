"""Pipeline request, stage and response models."""

from enum import StrEnum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class StageStatus(StrEnum):
    """Lifecycle of a single stage within one run."""

    IDLE = "idle"
    WORKING = "working"
    DONE = "done"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        return self in (StageStatus.DONE, StageStatus.ERROR)


class StageDefinition(NamedTuple):
    id: str
    label: str


# Canonical stage order. Never mutated; each run builds fresh Stage objects from it.
STAGE_DEFINITIONS: tuple[StageDefinition, ...] = (
    StageDefinition("script", "Generate base script"),
    StageDefinition("enhance", "Enhance script"),
    StageDefinition("video", "Render video"),
    StageDefinition("upload", "Publish to YouTube"),
)

STAGE_IDS: tuple[str, ...] = tuple(d.id for d in STAGE_DEFINITIONS)


class Stage(BaseModel):
    """One named unit of pipeline work with observable status."""

    id: str = Field(..., min_length=1)
    label: str
    status: StageStatus = Field(default=StageStatus.IDLE)
    detail: str | None = None


class PipelineRequest(BaseModel):
    """Validated input for one pipeline run."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    topic: str = Field(..., min_length=8, description="Subject of the video")
    tone: str = Field(..., min_length=3, max_length=64)
    duration_seconds: float = Field(
        ..., strict=True, ge=30, le=900, description="Target narration length"
    )
    audience: str = Field(..., min_length=3, max_length=120)
    call_to_action: str = Field(..., min_length=3, max_length=180)


class PipelineResult(BaseModel):
    """Artifacts of a successful run."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    script_draft: str
    enhanced_script: str
    video_asset: str = Field(..., description="Rendered video as a data URL")
    published_url: str


class PipelineResponse(BaseModel):
    """Uniform response for a run; `log` is always the full stage list."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool
    result: PipelineResult | None = None
    error: str | None = None
    log: list[Stage] = Field(default_factory=list)
    error_type: str | None = Field(default=None, exclude=True)

    def to_payload(self) -> dict:
        """JSON-ready body with camelCase keys and absent fields dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
