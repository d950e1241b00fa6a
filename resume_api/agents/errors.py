"""Exceptions raised by the agents."""


class AgentError(Exception):
    """The model call succeeded but its output is unusable (empty, not JSON, wrong shape)."""


class LLMNotConfiguredError(Exception):
    """GOOGLE_API_KEY is not set, so no Gemini client can be created."""
