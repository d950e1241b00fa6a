"""
CompletionAgent Package

Free-form completion: the caller supplies both the system prompt and the
user prompt; the agent returns the model's text.
"""

from resume_api.agents.completion.agent import run_completion_agent

__all__ = ["run_completion_agent"]
