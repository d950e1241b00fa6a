"""
CompletionAgent Runner

One Gemini call with the caller's system instruction. No JSON mode; the
model's text is returned as-is (stripped).
"""

import logging

from google.genai import types

from resume_api.agents.errors import AgentError, LLMNotConfiguredError
from resume_api.agents.gemini import get_gemini_client
from resume_api.config import settings

logger = logging.getLogger(__name__)


async def run_completion_agent(system_prompt: str, user_prompt: str) -> str:
    """
    Answer user_prompt under system_prompt.

    Raises:
        LLMNotConfiguredError: GOOGLE_API_KEY is not configured
        AgentError: The model returned no text
    """
    logger.info(
        f"CompletionAgent invoked: system_chars={len(system_prompt)}, user_chars={len(user_prompt)}"
    )

    client = get_gemini_client()
    if client is None:
        raise LLMNotConfiguredError(
            "GOOGLE_API_KEY is not configured. "
            "Please set it in your .env file to use CompletionAgent."
        )

    config = types.GenerateContentConfig(
        system_instruction=system_prompt,
        temperature=0.2,
    )

    response = await client.aio.models.generate_content(
        model=settings.LLM_MODEL,
        contents=user_prompt,
        config=config,
    )

    text = (response.text or "").strip()
    if not text:
        logger.error("No response from model")
        raise AgentError("Model did not return a response")

    logger.info(f"CompletionAgent completed: response_chars={len(text)}")
    return text
