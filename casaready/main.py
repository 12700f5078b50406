# This project was developed with assistance from AI tools.
"""FastAPI application entry point."""

import logging
import uuid
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import log_integration_status, settings
from .integrations.crm import CRMClient
from .integrations.zapier import ZapierClient
from .routes import health, public
from .schemas import FieldError
from .schemas.error import ErrorResponse
from .services.cache import TTLCache
from .services.census import CensusService
from .services.leads import LeadSubmissionService
from .services.rate_limit import FixedWindowRateLimiter
from .services.wizard import WizardIncompleteError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup/shutdown lifecycle. Builds the shared collaborators."""
    logging.getLogger().setLevel(settings.LOG_LEVEL.upper())
    log_integration_status(settings)

    http_client = httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_SECONDS)
    crm = (
        CRMClient(http_client, settings.CRM_API_URL, settings.HTTP_TIMEOUT_SECONDS)
        if settings.CRM_API_URL
        else None
    )
    app.state.http_client = http_client
    app.state.census_service = CensusService(
        http_client, TTLCache(ttl_seconds=settings.CENSUS_CACHE_TTL), settings
    )
    app.state.lead_service = LeadSubmissionService(
        crm, ZapierClient(http_client, settings), settings
    )
    app.state.lead_rate_limiter = FixedWindowRateLimiter(
        settings.LEAD_RATE_LIMIT, settings.LEAD_RATE_WINDOW_SECONDS
    )
    yield
    await http_client.aclose()


app = FastAPI(
    title="CasaReady API",
    description="Bilingual home-buying wizard: affordability, lead classification and reports",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

_HTTP_STATUS_TITLES: dict[int, str] = {
    400: "Bad Request",
    404: "Not Found",
    405: "Method Not Allowed",
    422: "Unprocessable Entity",
    429: "Too Many Requests",
    500: "Internal Server Error",
}


def _build_error(
    status_code: int,
    detail: str,
    request_id: str,
    errors: list[FieldError] | None = None,
) -> ErrorResponse:
    return ErrorResponse(
        type="about:blank",
        title=_HTTP_STATUS_TITLES.get(status_code, "Error"),
        status=status_code,
        detail=detail,
        request_id=request_id,
        errors=errors or [],
    )


def _request_id(request: Request) -> str:
    return request.headers.get("x-request-id", str(uuid.uuid4()))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Convert HTTPException to RFC 7807 Problem Details."""
    body = _build_error(exc.status_code, str(exc.detail), _request_id(request))
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(mode="json"),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Convert Pydantic validation errors to RFC 7807 Problem Details."""
    body = _build_error(422, str(exc.errors()), _request_id(request))
    return JSONResponse(status_code=422, content=body.model_dump(mode="json"))


@app.exception_handler(WizardIncompleteError)
async def wizard_incomplete_handler(request: Request, exc: WizardIncompleteError):
    """Report every bad wizard field at once so the form can mark them all."""
    body = _build_error(422, str(exc), _request_id(request), exc.errors)
    return JSONResponse(status_code=422, content=body.model_dump(mode="json"))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Catch-all for unhandled exceptions -- log and return 500."""
    request_id = _request_id(request)
    logger.exception("Unhandled exception (request_id=%s)", request_id)
    body = _build_error(500, "An unexpected error occurred.", request_id)
    return JSONResponse(status_code=500, content=body.model_dump(mode="json"))


# Include routers
app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(public.router, prefix="/api/public", tags=["public"])


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint"""
    return {"message": "Welcome to CasaReady API"}
