"""Application configuration using Pydantic BaseSettings."""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings

REQUIRED_CREDENTIALS = (
    "openai_api_key",
    "google_client_id",
    "google_client_secret",
    "google_refresh_token",
)


class Settings(BaseSettings):
    """Agentic Studio configuration loaded from environment variables."""

    model_config = {"env_file": ".env", "extra": "ignore"}

    # Credentials
    openai_api_key: str = ""
    google_client_id: str = ""
    google_client_secret: str = ""
    google_refresh_token: str = ""
    google_token_uri: str = "https://oauth2.googleapis.com/token"

    # Text generation
    script_model: str = "gpt-4o-mini"
    enhance_model: str = "gpt-4o"

    # Asset generation
    speech_model: str = "gpt-4o-mini-tts"
    speech_voice: str = "alloy"
    image_model: str = "gpt-image-1"
    image_size: str = "1024x1024"

    # Rendering
    ffmpeg_binary: str = "ffmpeg"
    temp_dir: Path | None = None
    output_video_codec: str = "libx264"
    output_video_tune: str = "stillimage"
    output_audio_codec: str = "aac"
    output_audio_bitrate: str = "192k"
    output_pixel_format: str = "yuv420p"

    # Publishing
    youtube_privacy_status: Literal["private", "unlisted", "public"] = "unlisted"
    title_max_length: int = 95
    description_max_length: int = 4800

    # Logging
    log_level: str = "INFO"
    log_format: Literal["structured", "simple"] = "structured"

    def missing_credentials(self) -> list[str]:
        """Environment variable names of required credentials that are unset."""
        return [name.upper() for name in REQUIRED_CREDENTIALS if not getattr(self, name)]


def get_settings() -> Settings:
    """Return a settings instance read from the current environment."""
    return Settings()
