"""
Tests for ResumeAgent.

The Gemini client is replaced by a MagicMock whose async generate_content
returns a canned response.
"""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from resume_api.agents.errors import AgentError, LLMNotConfiguredError
from resume_api.agents.resume import run_resume_agent
from resume_api.agents.resume.prompts import RESUME_AGENT_SYSTEM_PROMPT
from resume_api.schemas.functions import Resume


def _mock_client(text):
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(return_value=MagicMock(text=text))
    return client


class TestRunResumeAgent:
    """Tests for run_resume_agent."""

    @pytest.mark.asyncio
    async def test_returns_validated_resume(self, sample_resume_payload):
        client = _mock_client(json.dumps(sample_resume_payload))

        with patch("resume_api.agents.resume.agent.get_gemini_client", return_value=client):
            result = await run_resume_agent("Tony Hoare is a British computer scientist.")

        assert isinstance(result, Resume)
        assert result.name == "Tony Hoare"
        assert result.skills == sample_resume_payload["skills"]

    @pytest.mark.asyncio
    async def test_sends_text_with_resume_schema(self, sample_resume_payload):
        client = _mock_client(json.dumps(sample_resume_payload))

        with patch("resume_api.agents.resume.agent.get_gemini_client", return_value=client):
            await run_resume_agent("Grace Hopper wrote the first compiler.")

        kwargs = client.aio.models.generate_content.call_args.kwargs
        assert "Grace Hopper wrote the first compiler." in kwargs["contents"]
        assert kwargs["config"].system_instruction == RESUME_AGENT_SYSTEM_PROMPT
        assert kwargs["config"].response_mime_type == "application/json"
        assert kwargs["config"].temperature == 0.0

    @pytest.mark.asyncio
    async def test_missing_api_key_raises_value_error(self):
        with patch("resume_api.agents.resume.agent.get_gemini_client", return_value=None):
            with pytest.raises(LLMNotConfiguredError, match="GOOGLE_API_KEY"):
                await run_resume_agent("anything")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", [None, "", "   "])
    async def test_empty_response_raises_agent_error(self, text):
        with patch("resume_api.agents.resume.agent.get_gemini_client", return_value=_mock_client(text)):
            with pytest.raises(AgentError, match="did not return"):
                await run_resume_agent("anything")

    @pytest.mark.asyncio
    async def test_invalid_json_raises_agent_error(self):
        client = _mock_client("Sure! Here is the resume: {name: Tony")

        with patch("resume_api.agents.resume.agent.get_gemini_client", return_value=client):
            with pytest.raises(AgentError, match="parse"):
                await run_resume_agent("anything")

    @pytest.mark.asyncio
    async def test_schema_mismatch_raises_agent_error(self):
        client = _mock_client(json.dumps({"skills": "not-a-list"}))

        with patch("resume_api.agents.resume.agent.get_gemini_client", return_value=client):
            with pytest.raises(AgentError, match="schema"):
                await run_resume_agent("anything")
