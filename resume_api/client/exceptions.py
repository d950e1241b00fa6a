"""
Client exceptions.

Every failure of a call surfaces as an ApiError subclass:
- ApiTransportError: the request never got a response (DNS, refused, timeout)
- ApiResponseError: the service answered with a non-2xx status
- ApiDecodeError: the body is not JSON or does not match the expected model
"""

from typing import Optional


class ApiError(Exception):
    """Base class for all client errors."""


class ApiTransportError(ApiError):
    """The request could not be completed."""


class ApiResponseError(ApiError):
    """The service returned an error status."""

    def __init__(self, status_code: int, content: str):
        self.status_code = status_code
        self.content = content
        super().__init__(f"HTTP {status_code}: {content[:500]}")


class ApiDecodeError(ApiError):
    """The response body could not be decoded into the expected type."""

    def __init__(self, message: str, content: Optional[str] = None):
        self.content = content
        super().__init__(message)
