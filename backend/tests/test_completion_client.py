"""Tests for the OpenAI-backed completion client."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from openai import OpenAIError

from app import config
from app.ai.client import OpenAICompletionClient
from app.ai.exceptions import AIServiceError, ProviderError


def _fake_openai(content="hello", error=None):
    fake = MagicMock()
    if error is not None:
        fake.chat.completions.create = AsyncMock(side_effect=error)
    else:
        choice = MagicMock()
        choice.message.content = content
        fake.chat.completions.create = AsyncMock(return_value=MagicMock(choices=[choice]))
    return fake


@pytest.mark.asyncio
class TestOpenAICompletionClient:
    async def test_returns_raw_text(self):
        fake = _fake_openai(content='  {"a": 1} trailing prose ')
        client = OpenAICompletionClient(api_key="sk-test", model="gpt-test", client=fake)

        assert await client.complete("price this") == '  {"a": 1} trailing prose '

        kwargs = fake.chat.completions.create.await_args.kwargs
        assert kwargs["model"] == "gpt-test"
        assert kwargs["messages"] == [{"role": "user", "content": "price this"}]

    async def test_none_content_becomes_empty_string(self):
        client = OpenAICompletionClient(api_key="sk-test", client=_fake_openai(content=None))

        assert await client.complete("hi") == ""

    async def test_provider_failure_is_wrapped(self):
        cause = OpenAIError("rate limited")
        client = OpenAICompletionClient(api_key="sk-test", client=_fake_openai(error=cause))

        with pytest.raises(ProviderError) as excinfo:
            await client.complete("hi")

        assert excinfo.value.__cause__ is cause
        assert excinfo.value.error_code == "provider_error"
        assert "rate limited" in excinfo.value.message

    async def test_missing_api_key(self, monkeypatch):
        monkeypatch.setattr(config, "OPENAI_API_KEY", None)
        client = OpenAICompletionClient()

        with pytest.raises(ProviderError):
            await client.complete("hi")

    async def test_blank_prompt_is_a_programming_error(self):
        fake = _fake_openai()
        client = OpenAICompletionClient(api_key="sk-test", client=fake)

        with pytest.raises(ValueError):
            await client.complete("   ")
        fake.chat.completions.create.assert_not_awaited()


def test_provider_error_is_an_ai_service_error():
    err = ProviderError("timeout")
    assert isinstance(err, AIServiceError)
    assert str(err) == "provider_error: timeout"
