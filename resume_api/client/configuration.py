"""
Client configuration.

Connection defaults for the remote service. Every field falls back to the
matching setting, so `Configuration()` is enough for local use.
"""

from dataclasses import dataclass, field
from typing import Optional

import httpx

from resume_api.config import settings


@dataclass
class Configuration:
    """Connection defaults (host, optional credentials) for the Resume API."""

    base_path: str = field(default_factory=lambda: settings.RESUME_API_BASE_URL)
    api_key: Optional[str] = field(default_factory=lambda: settings.RESUME_API_KEY)
    timeout_seconds: float = field(default_factory=lambda: settings.RESUME_API_TIMEOUT_SECONDS)
    user_agent: str = "resume-api-client/0.1.0"
    # Custom httpx transport (MockTransport / ASGITransport), None for real network I/O
    transport: Optional[httpx.AsyncBaseTransport] = None
