from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api import api_router
from app.config import settings
from app.dependencies import get_question_router
from app.logging_config import setup_logging
from app.exceptions import AppException, ValidationException, classify_error

# Configure logging
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    Builds the provider router once and logs which providers are usable.
    """
    question_router = app.dependency_overrides.get(get_question_router, get_question_router)()

    logger.info(
        "Application startup",
        extra={
            "google_model": settings.google_model,
            "custom_model": settings.custom_model or "not_set",
        }
    )

    for name in ("google", "custom"):
        provider = question_router.get_provider(name)
        missing = provider.missing_settings()
        if missing:
            logger.warning(
                f"Question generation provider '{name}' is not configured",
                extra={"provider": name, "missing": missing, "status": "unavailable"}
            )
        else:
            logger.info(
                f"Question generation provider '{name}' configured",
                extra={"provider": name, "status": "available"}
            )

    yield

    question_router.close()
    get_question_router.cache_clear()

    logger.info(
        "Application shutdown",
        extra={"timestamp": datetime.now(timezone.utc).isoformat()}
    )


app = FastAPI(
    title="Topic Quiz Generator API",
    description="API for generating multiple-choice questions about a topic using AI providers",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API router
app.include_router(api_router)


def jsonable_errors(exc: RequestValidationError) -> list:
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]


@app.exception_handler(AppException)
async def app_exception_handler(request: Request, exc: AppException):
    """Handle custom application exceptions raised outside the generation route."""
    logger.error(
        f"Application error: {exc.error_code} - {exc.message}",
        extra={"error_code": exc.error_code, "details": exc.details}
    )
    if isinstance(exc, ValidationException):
        return JSONResponse(status_code=400, content={"error": exc.message})

    classified = classify_error(exc)
    return JSONResponse(
        status_code=classified.http_status,
        content=classified.to_response_body()
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle request validation errors."""
    logger.warning(
        "Request validation failed",
        extra={"errors": jsonable_errors(exc)}
    )
    return JSONResponse(
        status_code=422,
        content={
            "error": "Request validation failed",
            "details": jsonable_errors(exc)
        }
    )


@app.get("/")
async def root():
    """Root endpoint returning API status and welcome message."""
    return {
        "message": "Welcome to Topic Quiz Generator API",
        "status": "online",
        "version": "0.1.0",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring service status."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": "topic-quiz-api",
    }
