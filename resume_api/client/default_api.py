"""
Function calls against the Resume API.

Each function POSTs its request model to /call/<FunctionName> and decodes
the JSON result. Calls are independent: a fresh httpx client per call,
no retries.
"""

import json
import logging
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from resume_api.client.configuration import Configuration
from resume_api.client.exceptions import (
    ApiDecodeError,
    ApiResponseError,
    ApiTransportError,
)
from resume_api.client.http_client import build_async_client
from resume_api.schemas.functions import (
    ExtractResumeRequest,
    GetResponseRequest,
    Resume,
)

logger = logging.getLogger(__name__)


async def _call_function(
    configuration: Configuration,
    function_name: str,
    request: BaseModel,
) -> Any:
    """POST request to /call/{function_name} and return the decoded JSON body."""
    path = f"/call/{function_name}"
    logger.debug(f"POST {configuration.base_path}{path}")

    async with build_async_client(configuration) as client:
        try:
            response = await client.post(path, json=request.model_dump())
        except httpx.HTTPError as e:
            raise ApiTransportError(f"{function_name} request failed: {e}") from e

    if response.is_error:
        logger.debug(f"{function_name} returned HTTP {response.status_code}")
        raise ApiResponseError(response.status_code, response.text)

    try:
        return response.json()
    except json.JSONDecodeError as e:
        raise ApiDecodeError(f"{function_name} returned invalid JSON", response.text) from e


async def extract_resume(
    configuration: Configuration,
    extract_resume_request: ExtractResumeRequest,
) -> Resume:
    """Call ExtractResume and return the structured Resume."""
    payload = await _call_function(configuration, "ExtractResume", extract_resume_request)
    try:
        return Resume.model_validate(payload)
    except ValidationError as e:
        raise ApiDecodeError("ExtractResume returned an unexpected shape", json.dumps(payload)) from e


async def get_response(
    configuration: Configuration,
    get_response_request: GetResponseRequest,
) -> str:
    """Call GetResponse and return the completion text."""
    payload = await _call_function(configuration, "GetResponse", get_response_request)
    if not isinstance(payload, str):
        raise ApiDecodeError("GetResponse did not return a string", json.dumps(payload))
    return payload
