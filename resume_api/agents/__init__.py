"""
AI Components for the Resume API.

Both workflows are single-shot Gemini calls (no tools, no multi-turn):

1. ResumeAgent
   - Extracts a structured Resume from free text
   - JSON output constrained to the Resume schema

2. CompletionAgent
   - Answers a user prompt under a caller-supplied system prompt
   - Returns plain text
"""

from resume_api.agents.completion import run_completion_agent
from resume_api.agents.errors import AgentError, LLMNotConfiguredError
from resume_api.agents.resume import run_resume_agent

__all__ = [
    "run_resume_agent",
    "run_completion_agent",
    "AgentError",
    "LLMNotConfiguredError",
]
