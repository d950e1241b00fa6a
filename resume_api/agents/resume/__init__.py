"""
ResumeAgent Package

Extracts a structured Resume (name, email, experience, skills) from free
text with a single Gemini call.

Usage:
    from resume_api.agents.resume import run_resume_agent

    resume = await run_resume_agent(resume_text="Tony Hoare is ...")
"""

from resume_api.agents.resume.agent import run_resume_agent
from resume_api.agents.resume.prompts import (
    RESUME_AGENT_SYSTEM_PROMPT,
    build_resume_agent_user_prompt,
)

__all__ = [
    "run_resume_agent",
    "RESUME_AGENT_SYSTEM_PROMPT",
    "build_resume_agent_user_prompt",
]
