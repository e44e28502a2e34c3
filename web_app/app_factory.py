"""FastAPI application factory."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api import api_router
from .web import web_router
from .middleware.logging import LoggingMiddleware


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Answer malformed JSON and invalid fields with 400 instead of FastAPI's 422."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "Invalid request")
        messages.append(f"{location}: {message}" if location else message)

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": messages or ["Invalid request body or URL"]},
    )


def create_app(
    db_instance,
    service_instance,
    config,
    logger=None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        db_instance: Database instance (None until the lifespan opens it)
        service_instance: Service instance (None until the lifespan builds it)
        config: Configuration instance
        logger: Optional logger for request logging

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="URL Shortener",
        description="Minimal URL shortening service backed by SQLite",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    # Store instances in app state for access in routes
    app.state.db = db_instance
    app.state.service = service_instance
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware, logger=logger)

    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    app.include_router(api_router, prefix="/api", tags=["API"])
    app.include_router(web_router, tags=["Shortener"])

    return app
