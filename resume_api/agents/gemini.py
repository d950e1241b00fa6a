"""
Shared Gemini client.

The client is created lazily on first use and reused for the lifetime of
the process. Callers must check for None (GOOGLE_API_KEY not configured).
"""

import logging
from typing import Optional

from google import genai

from resume_api.config import settings

logger = logging.getLogger(__name__)

_gemini_client: Optional[genai.Client] = None


def get_gemini_client() -> Optional[genai.Client]:
    """
    Lazy initialization of Gemini client.
    Uses the Google Gen AI SDK.
    """
    global _gemini_client

    if _gemini_client is not None:
        return _gemini_client

    if not settings.GOOGLE_API_KEY:
        logger.warning(
            "GOOGLE_API_KEY not configured. Agents will not work. "
            "Please set GOOGLE_API_KEY in your .env file."
        )
        return None

    _gemini_client = genai.Client(api_key=settings.GOOGLE_API_KEY)
    logger.info("Gemini client initialized successfully")
    return _gemini_client
