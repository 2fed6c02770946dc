"""Narration drafting and enhancement via the text-generation service."""

import logging

from openai import AsyncOpenAI

from agentstudio.config import Settings, get_settings
from agentstudio.models.errors import ScriptEnhancementError, ScriptGenerationError
from agentstudio.models.pipeline import PipelineRequest
from agentstudio.services.prompts import (
    DRAFT_SYSTEM_PROMPT,
    ENHANCE_SYSTEM_PROMPT,
    build_draft_prompt,
    build_enhance_prompt,
    build_messages,
)

logger = logging.getLogger(__name__)


def word_count(text: str) -> int:
    return len(text.split())


class ScriptWriter:
    """Produces the narration draft and its polished rewrite."""

    def __init__(self, client: AsyncOpenAI, settings: Settings | None = None):
        self.client = client
        self.settings = settings or get_settings()

    async def draft(self, request: PipelineRequest) -> str:
        """First-pass narration with hook, segments and visual cues."""
        prompt = build_draft_prompt(
            topic=request.topic,
            tone=request.tone,
            duration_seconds=request.duration_seconds,
            audience=request.audience,
        )
        content = await self._complete(self.settings.script_model, DRAFT_SYSTEM_PROMPT, prompt)
        if not content:
            raise ScriptGenerationError(
                "Failed to generate script draft.",
                details={"model": self.settings.script_model},
            )
        logger.info("Draft generated (%d words)", word_count(content))
        return content

    async def enhance(self, draft: str, request: PipelineRequest) -> str:
        """Rewrite the draft for flow and close with the call to action."""
        prompt = build_enhance_prompt(
            draft=draft,
            topic=request.topic,
            tone=request.tone,
            audience=request.audience,
            call_to_action=request.call_to_action,
        )
        content = await self._complete(self.settings.enhance_model, ENHANCE_SYSTEM_PROMPT, prompt)
        if not content:
            raise ScriptEnhancementError(
                "Failed to enhance script.",
                details={"model": self.settings.enhance_model},
            )
        logger.info("Script enhanced (%d words)", word_count(content))
        return content

    async def _complete(self, model: str, system_prompt: str, user_prompt: str) -> str | None:
        response = await self.client.chat.completions.create(
            model=model,
            messages=build_messages(system_prompt, user_prompt),
        )
        if not response.choices:
            return None
        content = response.choices[0].message.content
        # Whitespace-only output is as unusable as none
        if content is None or not content.strip():
            return None
        return content
