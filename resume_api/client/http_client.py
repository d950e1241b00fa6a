"""
httpx client builder.

Centralizes base URL, timeout and headers so every call behaves the same.
One client per call: callers use it as an async context manager.
"""

import httpx

from resume_api.client.configuration import Configuration


def build_async_client(configuration: Configuration) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` bound to configuration.base_path."""
    headers = {
        "User-Agent": configuration.user_agent,
        "Accept": "application/json",
    }
    if configuration.api_key:
        headers["Authorization"] = f"Bearer {configuration.api_key}"

    return httpx.AsyncClient(
        base_url=configuration.base_path,
        timeout=httpx.Timeout(configuration.timeout_seconds),
        headers=headers,
        transport=configuration.transport,
    )
