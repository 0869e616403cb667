"""
Main entrypoint for the Bookshelf API.

This module assembles the FastAPI application: it sets up logging,
creates the book store and service, enables CORS, registers exception
handlers that keep every error inside the response envelope and
includes the versioned router.  ``create_app`` builds the app, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn bookshelf.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.endpoints.books import envelope_response
from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.store import BookStore
from .services.book_service import BookService

logger = logging.getLogger(__name__)

# Starlette reports unknown routes and methods in English.
_HTTP_ERROR_MESSAGES = {
    status.HTTP_404_NOT_FOUND: "Halaman tidak ditemukan",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Metode tidak diizinkan",
}


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Payload tidak valid"
    first = errors[0]
    location = [str(part) for part in first.get("loc", ())]
    # "body.pageCount" reads as "pageCount"; a missing body stays "body".
    field = ".".join(location[1:]) or ".".join(location) or "body"
    return f"Payload tidak valid: {field}: {first.get('msg', 'invalid value')}"


def register_exception_handlers(app: FastAPI) -> None:
    """Convert framework errors into ``fail``/``error`` envelopes."""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = _describe_validation_error(exc)
        logger.info("Invalid request to %s %s: %s", request.method, request.url.path, message)
        return envelope_response(status.HTTP_400_BAD_REQUEST, "fail", message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        outcome = "error" if exc.status_code >= 500 else "fail"
        message = _HTTP_ERROR_MESSAGES.get(exc.status_code, str(exc.detail))
        response = envelope_response(exc.status_code, outcome, message)
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return envelope_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "error", "Terjadi kegagalan pada server"
        )


def create_app(book_service: Optional[BookService] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    book_service : Optional[BookService]
        Service to serve requests from.  When omitted, a service over a
        fresh, empty ``BookStore`` is created, so every application
        instance owns its own collection.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that everything below
    # can safely log messages.  DEBUG only raises the log level; FastAPI's
    # own debug mode replaces the error envelope with a traceback page.
    setup_logging("DEBUG" if settings.debug else settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.book_service = book_service or BookService(BookStore())

    # Browsers on any origin may list and add books.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list(),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(v1_router, prefix=settings.api_prefix)
    logger.debug("Bookshelf routes mounted under %r", settings.api_prefix or "/")
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
