"""FastAPI application factory."""

import uuid
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from rfp_assistant import __version__
from rfp_assistant.api.errors import APIError, api_error_handler, validation_error_handler
from rfp_assistant.api.routes import router
from rfp_assistant.config import get_settings
from rfp_assistant.utils.logging import (
    bind_request_context,
    clear_request_context,
    get_logger,
    setup_logging,
)


logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    settings = get_settings()
    logger.info(
        "Starting RFP Assistant API",
        environment=settings.environment,
        openai_configured=settings.openai_api_key is not None,
        gemini_configured=settings.gemini_api_key is not None,
    )
    yield
    logger.info("Shutting down RFP Assistant API")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application.
    """
    settings = get_settings()
    setup_logging(settings.log_level, json_format=settings.log_json or settings.is_production)

    app = FastAPI(
        title="RFP Assistant API",
        description="Document ingestion and LLM analysis for government RFPs",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        bind_request_context(
            request_id=request.headers.get("x-request-id") or uuid.uuid4().hex,
            method=request.method,
            path=request.url.path,
        )
        try:
            return await call_next(request)
        finally:
            clear_request_context()

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # Include routers
    app.include_router(router)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": "RFP Assistant API",
            "version": __version__,
            "docs": "/docs",
            "health": "/api/health",
        }

    return app


# Create app instance for uvicorn
app = create_app()
