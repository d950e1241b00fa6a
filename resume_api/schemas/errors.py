"""
Error body returned by the service.

Routes raise HTTPException with a detail of this shape; FastAPI wraps it
as {"detail": {"error": ..., "details": ...}}.
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Machine-readable error code plus a short human-readable message."""

    error: str = Field(..., description="Error code", examples=["llm_error"])
    details: str = Field(..., description="Short explanation", examples=["Model did not return a response"])
