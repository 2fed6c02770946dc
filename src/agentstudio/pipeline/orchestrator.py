"""Pipeline orchestrator: runs script, enhance, video and upload in order."""

import base64
import logging
from dataclasses import dataclass, field

import pydantic
from openai import AsyncOpenAI

from agentstudio.config import Settings, get_settings
from agentstudio.models.assets import AssetPair
from agentstudio.models.errors import ConfigurationError, StudioError, ValidationError
from agentstudio.models.pipeline import (
    PipelineRequest,
    PipelineResponse,
    PipelineResult,
    StageStatus,
)
from agentstudio.pipeline.tracker import StepTracker
from agentstudio.publishing.publisher import Publisher
from agentstudio.publishing.youtube import YouTubeUploader
from agentstudio.rendering.composer import MediaComposer
from agentstudio.services.assets import AssetSynthesizer
from agentstudio.services.script_writer import ScriptWriter, word_count

logger = logging.getLogger(__name__)

ATTRIBUTION_FOOTER = "Automated by Agentic Studio."
BASE_TAGS = ("AI", "Automation", "YouTube Agent")
TOPIC_TAG_MAX_LENGTH = 60
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."


@dataclass
class PipelineRun:
    """State of one run. Lives only for the duration of a request."""

    tracker: StepTracker = field(default_factory=StepTracker)
    current_stage: str | None = None
    script_draft: str | None = None
    enhanced_script: str | None = None
    assets: AssetPair | None = None
    video: bytes | None = None
    published_url: str | None = None

    def enter(self, stage_id: str, detail: str) -> None:
        self.current_stage = stage_id
        self.tracker.update(stage_id, StageStatus.WORKING, detail)

    def complete(self, detail: str) -> None:
        self.tracker.update(self.current_stage, StageStatus.DONE, detail)
        self.current_stage = None

    def fail(self, detail: str) -> str | None:
        """Mark the in-flight stage as errored; returns its id if there was one."""
        failed = self.current_stage
        if failed is not None:
            self.tracker.update(failed, StageStatus.ERROR, detail)
            self.current_stage = None
        return failed


def build_title(request: PipelineRequest) -> str:
    return f"{request.topic} | {request.tone} explainer"


def build_description(request: PipelineRequest, enhanced_script: str) -> str:
    return (
        f"{enhanced_script}\n"
        "\n"
        "---\n"
        f"Call to action: {request.call_to_action}\n"
        f"Audience: {request.audience}\n"
        f"{ATTRIBUTION_FOOTER}"
    )


def build_tags(request: PipelineRequest) -> list[str]:
    return [*BASE_TAGS, request.topic[:TOPIC_TAG_MAX_LENGTH]]


def format_validation_error(exc: pydantic.ValidationError) -> str:
    messages = []
    for issue in exc.errors():
        location = ".".join(str(part) for part in issue["loc"])
        messages.append(f"{location}: {issue['msg']}" if location else issue["msg"])
    return "; ".join(messages)


def video_data_url(video: bytes) -> str:
    return "data:video/mp4;base64," + base64.b64encode(video).decode("ascii")


class PipelineOrchestrator:
    """Turns a topic request into a published video.

    Collaborators may be injected; any left out are built from settings the
    first time a run passes its preconditions.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        writer: ScriptWriter | None = None,
        synthesizer: AssetSynthesizer | None = None,
        composer: MediaComposer | None = None,
        publisher: Publisher | None = None,
    ):
        self.settings = settings or get_settings()
        self.writer = writer
        self.synthesizer = synthesizer
        self.composer = composer
        self.publisher = publisher

    def check_preconditions(self) -> None:
        missing = self.settings.missing_credentials()
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}",
                details={"missing": missing},
            )

    def validate_request(self, payload: object) -> PipelineRequest:
        try:
            return PipelineRequest.model_validate(payload)
        except pydantic.ValidationError as e:
            raise ValidationError(
                format_validation_error(e),
                details={"issues": e.errors(include_url=False, include_context=False)},
            ) from e

    async def run(self, payload: object) -> PipelineResponse:
        """Execute one run. Never raises; the stage log is always returned."""
        run = PipelineRun()

        try:
            self.check_preconditions()
            request = self.validate_request(payload)
        except StudioError as e:
            # Nothing was attempted, so every stage is still idle
            logger.warning("Run rejected before any stage started: %s", e.message)
            return self._failure(run, e.message, type(e).__name__)

        self._ensure_collaborators()
        logger.info("Starting run for topic %r", request.topic)

        try:
            await self._execute(run, request)
        except Exception as e:
            if isinstance(e, StudioError):
                detail = e.message or UNEXPECTED_ERROR_MESSAGE
                logger.error("Stage %s failed: %s", run.current_stage, detail)
            else:
                detail = str(e) or UNEXPECTED_ERROR_MESSAGE
                logger.exception("Stage %s failed unexpectedly", run.current_stage)
            run.fail(detail)
            return self._failure(run, detail, type(e).__name__)

        return PipelineResponse(
            success=True,
            result=PipelineResult(
                script_draft=run.script_draft,
                enhanced_script=run.enhanced_script,
                video_asset=video_data_url(run.video),
                published_url=run.published_url,
            ),
            log=run.tracker.snapshot(),
        )

    async def _execute(self, run: PipelineRun, request: PipelineRequest) -> None:
        run.enter("script", "Drafting narration...")
        run.script_draft = await self.writer.draft(request)
        run.complete(f"Draft complete ({word_count(run.script_draft)} words).")

        run.enter("enhance", "Polishing presentation...")
        run.enhanced_script = await self.writer.enhance(run.script_draft, request)
        run.complete(f"Enhanced script ready ({word_count(run.enhanced_script)} words).")

        run.enter("video", "Rendering narration and visuals...")
        run.assets = await self.synthesizer.synthesize(run.enhanced_script, request.topic)
        run.video = await self.composer.compose(run.assets)
        size_mb = len(run.video) / (1024 * 1024)
        run.complete(f"Video rendered ({size_mb:.2f} MB).")

        run.enter("upload", "Uploading to YouTube...")
        run.published_url = await self.publisher.publish(
            run.video,
            title=build_title(request),
            description=build_description(request, run.enhanced_script),
            tags=build_tags(request),
        )
        run.complete(f"Published to {run.published_url}.")
        logger.info("Run complete: %s", run.published_url)

    def _ensure_collaborators(self) -> None:
        if self.writer is None or self.synthesizer is None:
            client = AsyncOpenAI(api_key=self.settings.openai_api_key)
            if self.writer is None:
                self.writer = ScriptWriter(client, self.settings)
            if self.synthesizer is None:
                self.synthesizer = AssetSynthesizer(client, self.settings)
        if self.composer is None:
            self.composer = MediaComposer(self.settings)
        if self.publisher is None:
            self.publisher = Publisher(YouTubeUploader(self.settings), self.settings)

    @staticmethod
    def _failure(run: PipelineRun, message: str, error_type: str) -> PipelineResponse:
        return PipelineResponse(
            success=False,
            error=message,
            log=run.tracker.snapshot(),
            error_type=error_type,
        )
