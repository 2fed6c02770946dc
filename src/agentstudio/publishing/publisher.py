"""Publisher: formats metadata and submits the rendered video."""

import logging
from typing import Protocol

from agentstudio.config import Settings, get_settings
from agentstudio.models.errors import PublishError
from agentstudio.models.publish import VideoMetadata, watch_url

logger = logging.getLogger(__name__)


class VideoUploader(Protocol):
    async def upload(self, video: bytes, metadata: VideoMetadata) -> str | None: ...


def truncate(text: str, max_length: int) -> str:
    return text[:max_length]


class Publisher:
    """Submits video plus metadata as one upload and returns the watch URL.

    Oversized titles and descriptions are cut to the service limits rather
    than rejected.
    """

    def __init__(self, uploader: VideoUploader, settings: Settings | None = None):
        self.uploader = uploader
        self.settings = settings or get_settings()

    def build_metadata(self, title: str, description: str, tags: list[str]) -> VideoMetadata:
        return VideoMetadata(
            title=truncate(title, self.settings.title_max_length),
            description=truncate(description, self.settings.description_max_length),
            tags=list(tags),
            privacy_status=self.settings.youtube_privacy_status,
        )

    async def publish(self, video: bytes, title: str, description: str, tags: list[str]) -> str:
        metadata = self.build_metadata(title, description, tags)
        logger.info(
            "Uploading %d bytes as %r (%s)", len(video), metadata.title, metadata.privacy_status
        )
        video_id = await self.uploader.upload(video, metadata)
        if not video_id:
            raise PublishError("Unable to retrieve YouTube video ID after upload.")
        url = watch_url(video_id)
        logger.info("Published %s", url)
        return url
