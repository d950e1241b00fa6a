"""
Function call endpoints.

Every callable function is exposed as POST /call/<FunctionName>. The JSON
body holds the function's named arguments and the response body is the
function's return value as JSON.

Flow (per endpoint):
1. Parse/Validate -> FastAPI validates the request model (422 on failure)
2. Call ONE agent
3. Map agent failures -> HTTPException
   - LLMNotConfiguredError (no GOOGLE_API_KEY) -> 503 llm_not_configured
   - AgentError (unusable model output) -> 502 llm_error with its message
   - anything else (Gemini API error, network) -> 502 llm_error
4. Return the agent output unchanged
"""

import logging

from fastapi import APIRouter, HTTPException, status

from resume_api.agents import (
    AgentError,
    LLMNotConfiguredError,
    run_completion_agent,
    run_resume_agent,
)
from resume_api.schemas.errors import ErrorResponse
from resume_api.schemas.functions import (
    ExtractResumeRequest,
    GetResponseRequest,
    Resume,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/call", tags=["functions"])

_ERROR_RESPONSES = {
    status.HTTP_502_BAD_GATEWAY: {"model": ErrorResponse},
    status.HTTP_503_SERVICE_UNAVAILABLE: {"model": ErrorResponse},
}


def _agent_failure(function_name: str, exc: Exception) -> HTTPException:
    """Translate an agent exception into the HTTP error for this service."""
    if isinstance(exc, LLMNotConfiguredError):
        logger.error(f"{function_name} not available: {exc}")
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"error": "llm_not_configured", "details": "LLM provider is not configured"},
        )

    if isinstance(exc, AgentError):
        logger.error(f"{function_name} agent error: {exc}")
        details = str(exc)
    else:
        logger.error(f"{function_name} LLM call failed: {exc}", exc_info=True)
        details = f"LLM call failed ({type(exc).__name__})"

    return HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail={"error": "llm_error", "details": details},
    )


@router.post(
    "/ExtractResume",
    response_model=Resume,
    status_code=status.HTTP_200_OK,
    responses=_ERROR_RESPONSES,
    summary="Extract a structured resume from free text",
)
async def extract_resume(request: ExtractResumeRequest) -> Resume:
    """Run ResumeAgent on request.resume and return the structured Resume."""
    logger.info(f"POST /call/ExtractResume resume_chars={len(request.resume)}")

    try:
        return await run_resume_agent(resume_text=request.resume)
    except Exception as e:
        raise _agent_failure("ExtractResume", e) from e


@router.post(
    "/GetResponse",
    response_model=str,
    status_code=status.HTTP_200_OK,
    responses=_ERROR_RESPONSES,
    summary="Answer a user prompt under a system prompt",
)
async def get_response(request: GetResponseRequest) -> str:
    """Run CompletionAgent and return its text as a JSON string."""
    logger.info("POST /call/GetResponse")

    try:
        return await run_completion_agent(
            system_prompt=request.system_prompt,
            user_prompt=request.user_prompt,
        )
    except Exception as e:
        raise _agent_failure("GetResponse", e) from e
