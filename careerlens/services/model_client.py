"""Hosted text-generation client (Gemini through the OpenAI-compatible API)"""

import asyncio
from dataclasses import dataclass
from typing import Optional, Protocol

from openai import AsyncOpenAI

from careerlens.config import Settings


@dataclass(frozen=True)
class ModelConfig:
    model: str
    api_key: str
    base_url: str
    timeout_seconds: float = 30.0
    temperature: float = 0.7

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key and self.api_key.strip())

    @classmethod
    def from_settings(cls, settings: Settings) -> "ModelConfig":
        return cls(
            model=settings.gemini_model,
            api_key=settings.gemini_api_key,
            base_url=settings.gemini_base_url,
            timeout_seconds=settings.ai_timeout_seconds,
            temperature=settings.ai_temperature,
        )


class TextModelClient(Protocol):
    """Anything that turns a prompt into the model's full text response."""

    async def generate_text(self, prompt: str) -> str:
        ...


class GeminiClient:
    """Single-shot, non-streamed completion against the hosted model.

    The SDK client is built once and shared by every request. SDK retries are
    disabled; the call is bounded by ``config.timeout_seconds``.
    """

    def __init__(self, config: ModelConfig):
        self.config = config
        self._client: Optional[AsyncOpenAI] = None
        if config.has_credential:
            self._client = AsyncOpenAI(
                api_key=config.api_key,
                base_url=config.base_url,
                timeout=config.timeout_seconds,
                max_retries=0,
            )

    async def generate_text(self, prompt: str) -> str:
        if self._client is None:
            raise RuntimeError("Gemini client has no API key configured")

        response = await asyncio.wait_for(
            self._client.chat.completions.create(
                model=self.config.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=self.config.temperature,
            ),
            timeout=self.config.timeout_seconds,
        )
        return response.choices[0].message.content or ""

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
