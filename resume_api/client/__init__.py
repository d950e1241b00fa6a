"""
Async client for the Resume API.

Usage:
    from resume_api.client import Configuration, default_api
    from resume_api.schemas import ExtractResumeRequest

    config = Configuration()
    resume = await default_api.extract_resume(config, ExtractResumeRequest(resume="..."))
"""

from resume_api.client import default_api
from resume_api.client.configuration import Configuration
from resume_api.client.exceptions import (
    ApiDecodeError,
    ApiError,
    ApiResponseError,
    ApiTransportError,
)

__all__ = [
    "default_api",
    "Configuration",
    "ApiError",
    "ApiTransportError",
    "ApiResponseError",
    "ApiDecodeError",
]
