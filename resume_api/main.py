"""
FastAPI application entry point for the Resume API.

This module creates the FastAPI app instance and registers all routers.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from resume_api.config import settings
from resume_api.routes.functions import router as functions_router
from resume_api.routes.health import router as health_router

# Configure logging (never log resume text, prompts or API keys: sizes and counts only)
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


# Create FastAPI app
app = FastAPI(
    title="Resume API",
    description="Resume extraction and prompt completion functions backed by Gemini",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc"
)


# Custom validation error handler to log detailed errors
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Log validation errors (locations only, never the body: it may hold a resume).
    """
    logger.error(
        f"Validation error on {request.method} {request.url.path}: "
        f"{[error.get('loc') for error in exc.errors()]}"
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "details": jsonable_encoder(exc.errors()),
        }
    )


# Register routers
app.include_router(health_router)
app.include_router(functions_router)

logger.info("FastAPI app initialized successfully")
