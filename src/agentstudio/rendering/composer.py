"""Media composer: muxes a still image and narration into an MP4 using FFmpeg."""

import asyncio
import logging
import uuid
from pathlib import Path

from agentstudio.config import Settings, get_settings
from agentstudio.models.assets import AssetPair
from agentstudio.models.errors import VideoRenderError
from agentstudio.rendering.ffmpeg_builder import StillImageCommandBuilder
from agentstudio.storage.workspace import scoped_workspace

logger = logging.getLogger(__name__)

STDERR_TAIL_LINES = 30


class MediaComposer:
    """Renders an AssetPair to video bytes inside a throwaway workspace."""

    def __init__(
        self,
        settings: Settings | None = None,
        builder: StillImageCommandBuilder | None = None,
    ):
        self.settings = settings or get_settings()
        self.builder = builder or StillImageCommandBuilder(self.settings)

    async def compose(self, assets: AssetPair) -> bytes:
        """Write inputs, run ffmpeg, read the result back into memory."""
        async with scoped_workspace(self.settings.temp_dir) as workspace:
            image_path = workspace / f"image-{uuid.uuid4()}.png"
            audio_path = workspace / f"audio-{uuid.uuid4()}.mp3"
            video_path = workspace / f"video-{uuid.uuid4()}.mp4"

            await self._write_input(image_path, assets.image)
            await self._write_input(audio_path, assets.audio)

            cmd = self.builder.build_command(image_path, audio_path, video_path)
            await self.run_ffmpeg(cmd)

            video = await self._read_output(video_path)
            logger.info("Rendered video (%d bytes)", len(video))
            return video

    async def run_ffmpeg(self, cmd: list[str]) -> None:
        logger.debug("Running ffmpeg: %s", " ".join(cmd))
        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise VideoRenderError(
                "FFmpeg not found. Please install FFmpeg.",
                details={"command": cmd[0]},
            ) from e
        except OSError as e:
            raise VideoRenderError(
                f"Failed to start FFmpeg: {e}",
                details={"command": cmd[0]},
            ) from e

        _, stderr = await process.communicate()

        if process.returncode != 0:
            stderr_lines = stderr.decode(errors="replace").splitlines() if stderr else []
            stderr_text = "\n".join(stderr_lines[-STDERR_TAIL_LINES:])
            logger.error("FFmpeg failed (code %d): %s", process.returncode, stderr_text)
            raise VideoRenderError(
                f"FFmpeg exited with code {process.returncode}",
                details={"stderr": stderr_text, "command": " ".join(cmd)},
            )

    async def _write_input(self, path: Path, data: bytes) -> None:
        try:
            await asyncio.to_thread(path.write_bytes, data)
        except OSError as e:
            raise VideoRenderError(
                f"Failed to stage render input: {e}",
                details={"path": str(path)},
            ) from e

    async def _read_output(self, path: Path) -> bytes:
        try:
            video = await asyncio.to_thread(path.read_bytes)
        except OSError as e:
            raise VideoRenderError(
                f"Failed to read rendered video: {e}",
                details={"path": str(path)},
            ) from e
        if not video:
            raise VideoRenderError("Rendered video is empty", details={"path": str(path)})
        return video
