"""Concurrent speech and image synthesis for one video."""

import asyncio
import base64
import binascii
import logging

from openai import AsyncOpenAI, OpenAIError

from agentstudio.config import Settings, get_settings
from agentstudio.models.assets import AssetPair
from agentstudio.models.errors import AssetGenerationError
from agentstudio.services.prompts import build_image_prompt

logger = logging.getLogger(__name__)


class AssetSynthesizer:
    """Generates narration audio and a background still in parallel.

    Both requests are joined with a TaskGroup: the first failure cancels the
    sibling and no partial pair is ever returned.
    """

    def __init__(self, client: AsyncOpenAI, settings: Settings | None = None):
        self.client = client
        self.settings = settings or get_settings()

    async def synthesize(self, narration: str, topic: str) -> AssetPair:
        try:
            async with asyncio.TaskGroup() as tg:
                audio_task = tg.create_task(self.generate_speech(narration))
                image_task = tg.create_task(self.generate_image(topic))
        except ExceptionGroup as group:
            # Surface the first failure as-is; siblings were cancelled by the group
            raise group.exceptions[0]

        assets = AssetPair(audio=audio_task.result(), image=image_task.result())
        logger.info(
            "Assets ready (audio %d bytes, image %d bytes)", len(assets.audio), len(assets.image)
        )
        return assets

    async def generate_speech(self, narration: str) -> bytes:
        try:
            response = await self.client.audio.speech.create(
                model=self.settings.speech_model,
                voice=self.settings.speech_voice,
                input=narration,
            )
        except OpenAIError as e:
            raise AssetGenerationError(
                f"Speech synthesis failed: {e}",
                details={"model": self.settings.speech_model},
            ) from e

        audio = response.content
        if not audio:
            raise AssetGenerationError(
                "Speech synthesis returned no audio.",
                details={"model": self.settings.speech_model},
            )
        return audio

    async def generate_image(self, topic: str) -> bytes:
        try:
            response = await self.client.images.generate(
                model=self.settings.image_model,
                prompt=build_image_prompt(topic),
                size=self.settings.image_size,
            )
        except OpenAIError as e:
            raise AssetGenerationError(
                f"Image generation failed: {e}",
                details={"model": self.settings.image_model},
            ) from e

        payload = response.data[0].b64_json if response.data else None
        if not payload:
            raise AssetGenerationError(
                "Image generation failed.",
                details={"model": self.settings.image_model, "reason": "empty payload"},
            )
        try:
            image = base64.b64decode(payload, validate=True)
        except binascii.Error as e:
            raise AssetGenerationError(
                "Image generation returned an undecodable payload.",
                details={"model": self.settings.image_model},
            ) from e
        if not image:
            raise AssetGenerationError("Image generation failed.")
        return image
