"""Shared test fixtures and in-process fakes for the external services."""

import asyncio
import base64
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from agentstudio.config import Settings
from agentstudio.models.assets import AssetPair
from agentstudio.models.publish import VideoMetadata
from agentstudio.pipeline.orchestrator import PipelineOrchestrator
from agentstudio.publishing.publisher import Publisher
from agentstudio.services.assets import AssetSynthesizer
from agentstudio.services.script_writer import ScriptWriter

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image-data"
MP3_BYTES = b"ID3\x03\x00fake-audio-data"
VIDEO_ID = "dQw4w9WgXcQ"

DRAFT_TEXT = "Hook: bridges connect us. Segment one covers Roman arches."
ENHANCED_TEXT = "Bridges have always connected us. From Roman arches onward. Subscribe!"

SCENARIO_A_REQUEST = {
    "topic": "History of bridges",
    "tone": "Educational",
    "durationSeconds": 120,
    "audience": "General",
    "callToAction": "Subscribe!",
}


def make_settings(**overrides) -> Settings:
    """Settings with every credential present, ignoring the real environment."""
    values = {
        "openai_api_key": "sk-test",
        "google_client_id": "client-id",
        "google_client_secret": "client-secret",
        "google_refresh_token": "refresh-token",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class FakeChatCompletions:
    """Returns queued contents in order; queued exceptions are raised."""

    def __init__(self, contents):
        self.contents = list(contents)
        self.calls: list[dict] = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        item = self.contents.pop(0)
        if isinstance(item, Exception):
            raise item
        return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=item))])


class FakeSpeech:
    def __init__(self, audio: bytes = MP3_BYTES, error: Exception | None = None, delay: float = 0):
        self.audio = audio
        self.error = error
        self.delay = delay
        self.calls: list[dict] = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(content=self.audio)


class FakeImages:
    def __init__(
        self,
        payload: str | None = base64.b64encode(PNG_BYTES).decode(),
        error: Exception | None = None,
        delay: float = 0,
        with_data: bool = True,
    ):
        self.payload = payload
        self.error = error
        self.delay = delay
        self.with_data = with_data
        self.calls: list[dict] = []
        self.cancelled = False

    async def generate(self, **kwargs):
        self.calls.append(kwargs)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        if self.error is not None:
            raise self.error
        data = [SimpleNamespace(b64_json=self.payload)] if self.with_data else []
        return SimpleNamespace(data=data)


def make_openai_client(
    contents=(DRAFT_TEXT, ENHANCED_TEXT),
    speech: FakeSpeech | None = None,
    images: FakeImages | None = None,
):
    """Duck-typed stand-in for AsyncOpenAI covering the calls the pipeline makes."""
    return SimpleNamespace(
        chat=SimpleNamespace(completions=FakeChatCompletions(contents)),
        audio=SimpleNamespace(speech=speech or FakeSpeech()),
        images=images or FakeImages(),
    )


class FakeComposer:
    def __init__(self, video: bytes = b"\x00" * 2048, error: Exception | None = None):
        self.video = video
        self.error = error
        self.calls: list[AssetPair] = []

    async def compose(self, assets: AssetPair) -> bytes:
        self.calls.append(assets)
        if self.error is not None:
            raise self.error
        return self.video


class FakeUploader:
    def __init__(self, video_id: str | None = VIDEO_ID, error: Exception | None = None):
        self.video_id = video_id
        self.error = error
        self.uploads: list[tuple[bytes, VideoMetadata]] = []

    async def upload(self, video: bytes, metadata: VideoMetadata) -> str | None:
        self.uploads.append((video, metadata))
        if self.error is not None:
            raise self.error
        return self.video_id


def build_orchestrator(
    settings: Settings | None = None,
    client=None,
    composer: FakeComposer | None = None,
    uploader: FakeUploader | None = None,
) -> PipelineOrchestrator:
    """Orchestrator wired to fakes; no network, no ffmpeg."""
    settings = settings or make_settings()
    client = client or make_openai_client()
    return PipelineOrchestrator(
        settings=settings,
        writer=ScriptWriter(client, settings),
        synthesizer=AssetSynthesizer(client, settings),
        composer=composer or FakeComposer(),
        publisher=Publisher(uploader or FakeUploader(), settings),
    )


def fake_ffmpeg(returncode: int = 0, output: bytes | None = b"rendered-mp4", stderr: bytes = b""):
    """Replacement for asyncio.create_subprocess_exec that mimics ffmpeg.

    Returns (callable, recorded argv list). On success the output path (last
    argv element) is written so the composer can read it back.
    """
    calls: list[tuple[str, ...]] = []

    async def _exec(*cmd, **kwargs):
        calls.append(cmd)
        if returncode == 0 and output is not None:
            Path(cmd[-1]).write_bytes(output)
        process = AsyncMock()
        process.returncode = returncode
        process.communicate = AsyncMock(return_value=(b"", stderr))
        return process

    return _exec, calls


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def work_dir(tmp_path):
    """Temp root handed to the composer so leftover workspaces are observable."""
    d = tmp_path / "work"
    d.mkdir()
    return d


@pytest.fixture
def sample_assets():
    return AssetPair(audio=MP3_BYTES, image=PNG_BYTES)


@pytest.fixture
def scenario_request():
    return dict(SCENARIO_A_REQUEST)
