"""FastAPI application entry point."""
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from book_registry.api import api_router
from book_registry.api.books import allowed_methods
from book_registry.config import Settings, get_settings
from book_registry.core.exceptions import AppException, MethodNotSupportedError
from book_registry.core.logging import get_logger, setup_logging
from book_registry.services.registry import BookRegistry

logger = get_logger("main")


def _plain(exc: AppException, headers: Optional[dict[str, str]] = None) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.status_code, headers=headers)


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Translate errors into plain-text responses carrying only a status."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        """Handle application exceptions."""
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code} {exc.message}")
        return _plain(exc)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle routing errors raised by Starlette."""
        if exc.status_code == 405:
            allowed = allowed_methods(request.url.path)
            err = MethodNotSupportedError(request.method, allowed)
            logger.info(f"{request.method} {request.url.path} -> 405")
            return _plain(err, headers={"Allow": ", ".join(allowed)})
        return PlainTextResponse(
            str(exc.detail), status_code=exc.status_code, headers=exc.headers
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        if settings.debug:
            return PlainTextResponse(
                f"{type(exc).__name__}: {exc}", status_code=500
            )
        return PlainTextResponse("Internal server error", status_code=500)


def create_app(
    settings: Optional[Settings] = None,
    registry: Optional[BookRegistry] = None,
) -> FastAPI:
    """Build an application bound to its own registry."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="In-memory book registry",
        version="1.0.0",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
    )
    app.state.settings = settings
    app.state.registry = registry if registry is not None else BookRegistry()

    register_exception_handlers(app, settings)
    app.include_router(api_router)

    logger.debug(f"{settings.app_name} ready")
    return app


app = create_app()
