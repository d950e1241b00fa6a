"""
ResumeAgent Runner

Single-shot LLM extraction workflow. Sends the resume text to Gemini with
JSON output constrained to the Resume schema, then validates the result
with pydantic.
"""

import json
import logging

from google.genai import types
from pydantic import ValidationError

from resume_api.agents.errors import AgentError, LLMNotConfiguredError
from resume_api.agents.gemini import get_gemini_client
from resume_api.agents.resume.prompts import (
    RESUME_AGENT_SYSTEM_PROMPT,
    build_resume_agent_user_prompt,
)
from resume_api.config import settings
from resume_api.schemas.functions import Resume

logger = logging.getLogger(__name__)


async def run_resume_agent(resume_text: str) -> Resume:
    """
    Extract a structured Resume from free text using Gemini.

    Args:
        resume_text: Raw resume text (never logged, only its length)

    Returns:
        Validated Resume

    Raises:
        LLMNotConfiguredError: GOOGLE_API_KEY is not configured
        AgentError: Empty response, invalid JSON, or JSON not matching Resume
    """
    logger.info(f"ResumeAgent invoked: resume_chars={len(resume_text)}")

    client = get_gemini_client()
    if client is None:
        raise LLMNotConfiguredError(
            "GOOGLE_API_KEY is not configured. "
            "Please set it in your .env file to use ResumeAgent."
        )

    config = types.GenerateContentConfig(
        system_instruction=RESUME_AGENT_SYSTEM_PROMPT,
        temperature=0.0,  # Deterministic for structured extraction
        response_mime_type="application/json",
        response_schema=Resume,
    )

    response = await client.aio.models.generate_content(
        model=settings.LLM_MODEL,
        contents=build_resume_agent_user_prompt(resume_text),
        config=config,
    )

    response_text = (response.text or "").strip()
    if not response_text:
        logger.error("No response from model")
        raise AgentError("Model did not return a response")

    try:
        result = json.loads(response_text)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse JSON response: {e}")
        raise AgentError("Failed to parse model response") from e

    try:
        resume = Resume.model_validate(result)
    except ValidationError as e:
        logger.error(f"Model response does not match Resume schema: {e.error_count()} errors")
        raise AgentError("Model response does not match Resume schema") from e

    logger.info(
        f"ResumeAgent completed: experience={len(resume.experience)}, skills={len(resume.skills)}"
    )
    return resume
