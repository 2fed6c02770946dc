"""YouTube Data API upload client."""

import asyncio
import io
import logging

from google.auth.exceptions import GoogleAuthError
from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from googleapiclient.http import MediaIoBaseUpload

from agentstudio.config import Settings, get_settings
from agentstudio.models.errors import PublishError
from agentstudio.models.publish import VideoMetadata

logger = logging.getLogger(__name__)

YOUTUBE_SCOPES = ["https://www.googleapis.com/auth/youtube.upload"]
UPLOAD_CHUNK_SIZE = 8 * 1024 * 1024


class YouTubeUploader:
    """Uploads a video binary with `videos.insert` using a stored refresh token.

    The google client is blocking, so uploads run in a worker thread.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    def _credentials(self) -> Credentials:
        return Credentials(
            token=None,
            refresh_token=self.settings.google_refresh_token,
            client_id=self.settings.google_client_id,
            client_secret=self.settings.google_client_secret,
            token_uri=self.settings.google_token_uri,
            scopes=YOUTUBE_SCOPES,
        )

    def _insert(self, video: bytes, metadata: VideoMetadata) -> dict:
        service = build("youtube", "v3", credentials=self._credentials(), cache_discovery=False)
        media = MediaIoBaseUpload(
            io.BytesIO(video),
            mimetype="video/mp4",
            chunksize=UPLOAD_CHUNK_SIZE,
            resumable=True,
        )
        request = service.videos().insert(
            part="snippet,status",
            body=metadata.to_request_body(),
            media_body=media,
        )
        response = None
        while response is None:
            status, response = request.next_chunk()
            if status:
                logger.debug("Upload progress: %.0f%%", status.progress() * 100)
        return response

    async def upload(self, video: bytes, metadata: VideoMetadata) -> str | None:
        """Return the new video id, or None when the service omits it."""
        try:
            response = await asyncio.to_thread(self._insert, video, metadata)
        except HttpError as e:
            raise PublishError(
                f"YouTube upload failed: {e.reason}",
                details={"status": e.resp.status},
            ) from e
        except GoogleAuthError as e:
            raise PublishError(f"YouTube authorization failed: {e}") from e
        return (response or {}).get("id")
