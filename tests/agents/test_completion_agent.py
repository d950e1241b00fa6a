"""Tests for CompletionAgent."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from resume_api.agents.completion import run_completion_agent
from resume_api.agents.errors import AgentError, LLMNotConfiguredError


def _mock_client(text):
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(return_value=MagicMock(text=text))
    return client


@pytest.mark.asyncio
async def test_returns_stripped_text_and_forwards_prompts():
    client = _mock_client("  Quicksort and Hoare logic.\n")

    with patch("resume_api.agents.completion.agent.get_gemini_client", return_value=client):
        result = await run_completion_agent("Be brief.", "What is Hoare known for?")

    assert result == "Quicksort and Hoare logic."
    kwargs = client.aio.models.generate_content.call_args.kwargs
    assert kwargs["contents"] == "What is Hoare known for?"
    assert kwargs["config"].system_instruction == "Be brief."


@pytest.mark.asyncio
async def test_empty_response_raises_agent_error():
    with patch("resume_api.agents.completion.agent.get_gemini_client", return_value=_mock_client(None)):
        with pytest.raises(AgentError):
            await run_completion_agent("Be brief.", "Hello")


@pytest.mark.asyncio
async def test_missing_api_key_raises_value_error():
    with patch("resume_api.agents.completion.agent.get_gemini_client", return_value=None):
        with pytest.raises(LLMNotConfiguredError, match="GOOGLE_API_KEY"):
            await run_completion_agent("Be brief.", "Hello")
