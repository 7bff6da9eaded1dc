"""Completion client: one text prompt in, the provider's raw text out."""

import logging
from typing import Optional, Protocol

from openai import AsyncOpenAI, OpenAIError

from app import config
from app.ai.exceptions import ProviderError

logger = logging.getLogger(__name__)


class CompletionClient(Protocol):
    async def complete(self, prompt: str) -> str:
        ...


class OpenAICompletionClient:
    """Sends a single user message to the chat completions endpoint.

    No retries. Cancelling the awaiting task aborts the outbound request.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        client: Optional[AsyncOpenAI] = None,
    ):
        self.api_key = api_key or config.OPENAI_API_KEY
        self.model = model or config.OPENAI_MODEL
        self.max_tokens = max_tokens or config.OPENAI_MAX_TOKENS
        self.temperature = config.OPENAI_TEMPERATURE if temperature is None else temperature
        self._client = client
        if self._client is None and self.api_key:
            self._client = AsyncOpenAI(api_key=self.api_key)
        if self._client is None:
            logger.warning("No OpenAI API key configured; AI features will use fallbacks")

    async def complete(self, prompt: str) -> str:
        if not prompt or not prompt.strip():
            raise ValueError("prompt must be a non-empty string")
        if self._client is None:
            raise ProviderError("OpenAI API key is not configured")

        try:
            response = await self._client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
        except OpenAIError as exc:
            raise ProviderError(f"{type(exc).__name__}: {exc}") from exc

        if not response.choices:
            raise ProviderError("Provider returned no choices")
        return response.choices[0].message.content or ""


_completion_client: Optional[CompletionClient] = None


def get_completion_client() -> CompletionClient:
    """FastAPI dependency; tests override it with a fake client."""
    global _completion_client
    if _completion_client is None:
        _completion_client = OpenAICompletionClient()
    return _completion_client
