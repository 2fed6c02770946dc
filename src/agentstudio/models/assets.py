"""Synthesized media asset models."""

from pydantic import BaseModel, ConfigDict, Field


class AssetPair(BaseModel):
    """Narration audio and background still for one video; both required."""

    model_config = ConfigDict(frozen=True)

    audio: bytes = Field(..., min_length=1, description="Encoded speech (mp3)")
    image: bytes = Field(..., min_length=1, description="Encoded still image (png)")
