"""Publishing metadata models."""

from typing import Literal

from pydantic import BaseModel, Field

PrivacyStatus = Literal["private", "unlisted", "public"]

WATCH_URL_TEMPLATE = "https://www.youtube.com/watch?v={video_id}"


class VideoMetadata(BaseModel):
    """Snippet and status fields submitted alongside the video binary."""

    title: str = Field(..., min_length=1)
    description: str = Field(default="")
    tags: list[str] = Field(default_factory=list)
    privacy_status: PrivacyStatus = Field(default="unlisted")
    made_for_kids: bool = Field(default=False)

    def to_request_body(self) -> dict:
        """Body for the YouTube `videos.insert` call."""
        return {
            "snippet": {
                "title": self.title,
                "description": self.description,
                "tags": self.tags,
            },
            "status": {
                "privacyStatus": self.privacy_status,
                "selfDeclaredMadeForKids": self.made_for_kids,
            },
        }


def watch_url(video_id: str) -> str:
    """Canonical public link for a published video."""
    return WATCH_URL_TEMPLATE.format(video_id=video_id)
