"""Main FastAPI application for the ntools service."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ntools.types import ValidationError

from .config import get_settings
from .logging_config import configure_logging, logger
from .routes import api_router


# Failures are plain text, never the JSON envelope used for successes
def register_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers for 400, HTTP, and 500 errors."""

    @app.exception_handler(RequestValidationError)
    async def _request_validation_handler(request: Request, exc: RequestValidationError):
        logger.debug("validation error", extra={"errors": exc.errors(), "path": str(request.url)})
        messages = "; ".join(
            f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg')}"
            for err in exc.errors()
        )
        return PlainTextResponse(
            messages or "Invalid request", status_code=status.HTTP_400_BAD_REQUEST
        )

    @app.exception_handler(ValidationError)
    async def _validation_handler(request: Request, exc: ValidationError):
        logger.debug("rejected request", extra={"detail": str(exc), "path": str(request.url)})
        return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(StarletteHTTPException)
    async def _http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.debug(
            "http error",
            extra={"detail": exc.detail, "status": exc.status_code, "path": str(request.url)},
        )
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error", extra={"path": str(request.url)})
        return PlainTextResponse(
            str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


# Configure logging early
configure_logging()
_settings = get_settings()

# Create FastAPI app
app = FastAPI(
    title=_settings.app_name,
    version=_settings.app_version,
    docs_url=_settings.resolved_docs_url,
    redoc_url=None,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_allow_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register exception handlers
register_exception_handlers(app)

# Include aggregated router
app.include_router(api_router)


@app.on_event("startup")
async def _startup() -> None:
    logger.info(
        "Starting NTools server",
        extra={"version": _settings.app_version, "env": _settings.env},
    )
    if not _settings.storage_configured:
        logger.warning("S3_ENDPOINT is not set; file URLs will be relative")
    if not _settings.mail_configured:
        logger.warning("MAILERSEND_API_TOKEN is not set; /Mail/sendmail will fail")


@app.on_event("shutdown")
async def _shutdown() -> None:
    logger.info("NTools server shutdown complete")


__all__ = ["app"]
