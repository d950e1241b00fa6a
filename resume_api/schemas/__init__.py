"""
Pydantic schemas for the Resume API.

These models are shared by the FastAPI service and the client: a request
model is exactly the JSON body POSTed to /call/<FunctionName>, and a
response model is exactly what that endpoint returns.
"""

from resume_api.schemas.functions import (
    ExtractResumeRequest,
    GetResponseRequest,
    Resume,
)
from resume_api.schemas.errors import ErrorResponse
from resume_api.schemas.health import HealthResponse

__all__ = [
    "ExtractResumeRequest",
    "GetResponseRequest",
    "Resume",
    "ErrorResponse",
    "HealthResponse",
]
