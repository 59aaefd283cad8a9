"""
FastAPI Application Setup

Main entry point for the application intake bridge API.

Responsibility:
    - FastAPI app initialization
    - Long-lived collaborators (settings, ClickUp client, option cache)
    - Router registration (apply, cohort, payment method, guarantee, debug)
    - CORS, request logging and request deadline middleware
    - Global exception handlers
    - Health check, root banner and friendly catch-all GET

Architecture Notes:
    - Part of API Layer (Presentation)
    - Entry point for HTTP server (uvicorn src.api.main:app)
    - Centralizes cross-cutting concerns (logging, CORS, error handling)
    - No business logic - pure HTTP orchestration

Contains:
    - create_app() factory function
    - Global exception handlers
    - Middleware
    - GET /health, GET /, GET /{path} (non-API fallback)
"""

import asyncio
import logging
import re
import time
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

from src.api.routers import applications_router, debug_router, guarantee_router, tasks_router
from src.api.routers.applications import validation_error_body
from src.api.schemas.common import ErrorResponse
from src.application.ports.task_tracker import TaskTrackerError, TaskTrackerProtocol
from src.domain.applications.services.option_cache import OptionCache
from src.domain.applications.services.option_matchers import default_matchers
from src.domain.applications.services.option_resolver import OptionResolver
from src.domain.shared.exceptions import (
    ApplicationValidationError,
    ConfigurationError,
    DomainException,
    InvalidCohortError,
    InvalidPaymentMethodError,
    InvalidSignatureError,
    TaskNotFoundError,
)
from src.infrastructure.clickup import ClickUpClient
from src.infrastructure.documents import GuaranteePdfRenderer
from src.infrastructure.file_storage import FileStorageService
from src.shared.config import AppSettings, configure_logging

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
BANNER = "DTCA backend up ✅"


# ============================================================================
# RESPONSE MODELS
# ============================================================================


class HealthCheckResponse(BaseModel):
    """
    Health check response model.

    Attributes:
        status: Health status (always "ok" if endpoint responds)
        version: API version
        timestamp: Unix timestamp of health check
    """

    status: str = "ok"
    version: str = API_VERSION
    timestamp: float


# ============================================================================
# MIDDLEWARE
# ============================================================================


async def request_logging_middleware(request: Request, call_next):
    """
    Request logging middleware.

    Logging Format:
        INFO: "Incoming request: POST /api/apply"
        INFO: "Request completed: POST /api/apply - 200 - 2.481s"
    """
    logger.info(f"Incoming request: {request.method} {request.url.path}")

    start_time = time.time()
    response = await call_next(request)
    duration = time.time() - start_time

    logger.info(
        f"Request completed: {request.method} {request.url.path} - "
        f"{response.status_code} - {duration:.3f}s"
    )

    return response


def request_deadline_middleware(timeout_seconds: float):
    """
    Build a middleware enforcing a blanket per-request deadline.

    Requests running past `timeout_seconds` are answered with
    504 REQUEST_TIMEOUT; the handler coroutine is cancelled.
    """

    async def middleware(request: Request, call_next):
        try:
            return await asyncio.wait_for(call_next(request), timeout=timeout_seconds)
        except asyncio.TimeoutError:
            logger.error(
                f"Request timed out after {timeout_seconds:.0f}s: "
                f"{request.method} {request.url.path}"
            )
            error_response = ErrorResponse(
                code="REQUEST_TIMEOUT",
                message=f"Request exceeded {timeout_seconds:.0f}s deadline",
            )
            return JSONResponse(
                status_code=status.HTTP_504_GATEWAY_TIMEOUT,
                content=error_response.model_dump(),
            )

    return middleware


# ============================================================================
# EXCEPTION HANDLERS
# ============================================================================

# exception type -> (HTTP status, error code)
DOMAIN_ERROR_MAPPING: Dict[type, tuple[int, str]] = {
    InvalidCohortError: (status.HTTP_400_BAD_REQUEST, "INVALID_COHORT"),
    InvalidPaymentMethodError: (status.HTTP_400_BAD_REQUEST, "INVALID_PAYMENT_METHOD"),
    InvalidSignatureError: (status.HTTP_400_BAD_REQUEST, "INVALID_SIGNATURE"),
    TaskNotFoundError: (status.HTTP_400_BAD_REQUEST, "TASK_NOT_FOUND"),
    ConfigurationError: (status.HTTP_500_INTERNAL_SERVER_ERROR, "CONFIGURATION_ERROR"),
}

_DETAIL_ATTRIBUTES = ("field", "cohort", "method", "task_id", "custom_task_id", "setting")


def _error_code(exc: Exception) -> str:
    """InvalidCohortError -> INVALID_COHORT"""
    name = exc.__class__.__name__.replace("Error", "").replace("Exception", "")
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).upper() or "DOMAIN_ERROR"


async def application_validation_handler(request: Request, exc: ApplicationValidationError):
    """
    Apply-form validation failures.

    The storefront form reads the JSON body of every answer, so these are
    HTTP 200 {"status": "validation_error", "field": ..., "message": ...}.
    """
    logger.warning(
        f"Validation error on {exc.field}: {exc.message} - "
        f"Request: {request.method} {request.url.path}"
    )
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=validation_error_body(exc.message, exc.field),
    )


async def domain_exception_handler(request: Request, exc: DomainException):
    """
    Global exception handler for domain layer exceptions.

    Mapping:
        - InvalidCohortError -> 400 INVALID_COHORT
        - InvalidPaymentMethodError -> 400 INVALID_PAYMENT_METHOD
        - InvalidSignatureError -> 400 INVALID_SIGNATURE
        - TaskNotFoundError -> 400 TASK_NOT_FOUND
        - ConfigurationError -> 500 CONFIGURATION_ERROR
        - Other DomainException -> 400 Bad Request
    """
    status_code, error_code = DOMAIN_ERROR_MAPPING.get(
        type(exc), (status.HTTP_400_BAD_REQUEST, _error_code(exc))
    )

    details: Dict[str, Any] = {"exception_type": exc.__class__.__name__}
    for attribute in _DETAIL_ATTRIBUTES:
        value = getattr(exc, attribute, None)
        if value is not None:
            details[attribute] = value

    error_response = ErrorResponse(code=error_code, message=exc.message, details=details)

    log = logger.error if status_code >= 500 else logger.warning
    log(
        f"Domain exception: {exc.__class__.__name__} - {exc.message} - "
        f"Request: {request.method} {request.url.path}"
    )

    return JSONResponse(status_code=status_code, content=error_response.model_dump())


async def task_tracker_exception_handler(request: Request, exc: TaskTrackerError):
    """
    ClickUp rejected a field update (or could not be reached).

    Returns 400 TASK_UPDATE_FAILED with the upstream status and body.
    """
    error_response = ErrorResponse(
        code="TASK_UPDATE_FAILED",
        message=exc.message,
        details={"upstream_status": exc.status_code, "body": exc.body},
    )

    logger.warning(
        f"Task tracker error: {exc} - Request: {request.method} {request.url.path}"
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_response.model_dump(mode="json"),
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler for unexpected exceptions.

    Catches all unhandled exceptions and converts to 500 Internal Server Error.
    Logs full stack trace for debugging.
    """
    error_response = ErrorResponse(
        code="INTERNAL_SERVER_ERROR",
        message="An unexpected error occurred",
        details={"error": str(exc), "type": exc.__class__.__name__},
    )

    logger.error(
        f"Unexpected error: {exc.__class__.__name__} - {str(exc)} - "
        f"Request: {request.method} {request.url.path}",
        exc_info=True,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response.model_dump(),
    )


# ============================================================================
# LIFESPAN
# ============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Warm the option cache at startup; clear it and close the client at shutdown."""
    loaded = await app.state.option_cache.refresh()
    logger.info(f"Startup option cache warm-up: {loaded} dropdown fields")
    try:
        yield
    finally:
        app.state.option_cache.clear()
        if app.state.owns_tracker:
            await app.state.tracker.aclose()
        logger.info("Shutdown complete")


# ============================================================================
# APP FACTORY
# ============================================================================


def create_app(
    settings: Optional[AppSettings] = None,
    tracker: Optional[TaskTrackerProtocol] = None,
) -> FastAPI:
    """
    FastAPI application factory.

    Args:
        settings: Resolved settings (default: AppSettings.from_env())
        tracker: Task tracker implementation (default: ClickUpClient built
            from settings and closed at shutdown)

    Returns:
        Configured FastAPI application instance

    Usage:
        >>> app = create_app()
        >>> # uvicorn src.api.main:app --port 8787

        >>> # Tests
        >>> app = create_app(AppSettings(clickup_list_id="list-1"), tracker=AsyncMock())
    """
    settings = settings or AppSettings.from_env()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="DTCA Application Intake API",
        version=API_VERSION,
        description=(
            "Receives storefront job applications, files them as ClickUp tasks "
            "and records cohort, payment method and signed job guarantee."
        ),
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    owns_tracker = tracker is None
    if tracker is None:
        tracker = ClickUpClient(
            token=settings.clickup_token,
            base_url=settings.clickup_api_url,
            team_id=settings.clickup_team_id,
            timeout=settings.request_timeout_seconds,
        )

    option_cache = OptionCache(tracker, settings.clickup_list_id)
    app.state.settings = settings
    app.state.tracker = tracker
    app.state.owns_tracker = owns_tracker
    app.state.option_cache = option_cache
    app.state.option_resolver = OptionResolver(
        option_cache, default_matchers(settings.fields.work_eligibility)
    )
    app.state.renderer = GuaranteePdfRenderer(title=settings.guarantee_title)
    app.state.file_storage = FileStorageService(settings.temp_dir)

    # Middleware added last runs first: deadline wraps logging
    app.middleware("http")(request_logging_middleware)
    app.middleware("http")(request_deadline_middleware(settings.request_timeout_seconds))
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ApplicationValidationError, application_validation_handler)
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(TaskTrackerError, task_tracker_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.include_router(applications_router, prefix="/api")
    app.include_router(tasks_router, prefix="/api")
    app.include_router(guarantee_router, prefix="/api")
    app.include_router(debug_router)

    @app.get(
        "/health",
        response_model=HealthCheckResponse,
        status_code=status.HTTP_200_OK,
        summary="Health check endpoint",
        tags=["health"],
    )
    async def health_check() -> HealthCheckResponse:
        return HealthCheckResponse(status="ok", version=API_VERSION, timestamp=time.time())

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root() -> str:
        return BANNER

    @app.get("/{path:path}", response_class=PlainTextResponse, include_in_schema=False)
    async def fallback(path: str) -> str:
        """Friendly answer for unknown GETs outside /api and /debug."""
        if path.startswith("api/") or path.startswith("debug/"):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
        return BANNER

    logger.info("FastAPI application created successfully")
    logger.info(
        "Registered routes: POST /api/apply, /api/cohort, /api/payment-method, "
        "/api/guarantee-sign; GET /health, /debug/options"
    )
    if not settings.clickup_list_id:
        logger.warning("CLICKUP_LIST_ID is not set; applications cannot be filed")

    return app


# ============================================================================
# APP INSTANCE (for uvicorn)
# ============================================================================

app = create_app()
