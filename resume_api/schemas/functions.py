"""
Request/response contracts for the callable functions.

- ExtractResume: free-text resume -> structured Resume
- GetResponse: system prompt + user prompt -> completion text (plain str)
"""

from typing import List

from pydantic import BaseModel, Field


# ============================================================================
# REQUEST MODELS
# ============================================================================

class ExtractResumeRequest(BaseModel):
    """Arguments of ExtractResume. Carries a single free-text field."""

    resume: str = Field(
        ...,
        description="Raw resume text (any format: paragraph, pasted CV, bio)",
        examples=[
            "Tony Hoare is a British computer scientist who has made "
            "foundational contributions to programming languages."
        ]
    )


class GetResponseRequest(BaseModel):
    """Arguments of GetResponse."""

    system_prompt: str = Field(
        ...,
        description="Instruction that defines the assistant's role",
        examples=["You are a concise technical assistant."]
    )
    user_prompt: str = Field(
        ...,
        description="The question or task for the assistant",
        examples=["Who invented quicksort?"]
    )


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class Resume(BaseModel):
    """
    Structured resume returned by ExtractResume.

    Fields the model cannot find in the text come back as empty strings or
    empty lists, never omitted.
    """

    name: str = Field(..., description="Full name of the person")
    email: str = Field(..., description="Contact email, empty if not present")
    experience: List[str] = Field(
        default_factory=list,
        description="Roles, positions or notable work, one entry each"
    )
    skills: List[str] = Field(
        default_factory=list,
        description="Skills and areas of expertise"
    )

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "example": {
                "name": "Tony Hoare",
                "email": "",
                "experience": ["Professor at Oxford University"],
                "skills": ["Programming languages", "Algorithms", "Formal verification"]
            }
        }
