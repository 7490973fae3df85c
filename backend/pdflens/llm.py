from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from openai import AsyncOpenAI, OpenAIError

from .config import Settings, get_settings
from .errors import ModelConfigurationError, ModelError


logger = logging.getLogger(__name__)


class ChatModelClient:
    """Single-shot chat completions against an OpenAI-compatible API."""

    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.model = model
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._client: Optional[AsyncOpenAI] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "ChatModelClient":
        return cls(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            base_url=settings.openai_base_url,
            timeout=settings.openai_timeout_seconds,
        )

    def _get_client(self) -> AsyncOpenAI:
        if not self._api_key:
            raise ModelConfigurationError("OpenAI API key not configured")
        if self._client is None:
            kwargs = {"api_key": self._api_key}
            if self._base_url:
                kwargs["base_url"] = self._base_url
            if self._timeout is not None:
                kwargs["timeout"] = self._timeout
            self._client = AsyncOpenAI(**kwargs)
        return self._client

    async def complete(self, system: str, prompt: str) -> str:
        client = self._get_client()
        try:
            completion = await client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": prompt},
                ],
            )
        except OpenAIError as exc:
            raise ModelError(str(exc)) from exc

        if not completion.choices:
            raise ModelError("Model returned no completion choices")
        return completion.choices[0].message.content or ""


@lru_cache
def get_model_client() -> ChatModelClient:
    return ChatModelClient.from_settings(get_settings())
