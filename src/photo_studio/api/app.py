"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from photo_studio.api.bookings import router as bookings_router
from photo_studio.api.orders import router as orders_router
from photo_studio.app_logging import configure_logging
from photo_studio.config import parse_cors_origins
from photo_studio.containers import AppContainer
from photo_studio.domain.errors import (
    BookingNotConfirmed,
    BookingNotFound,
    DateInPast,
    DuplicateBooking,
    DuplicateOrder,
    EmailMismatch,
    InternalError,
    InvalidIdentifier,
    NotFound,
    StudioError,
    ValidationFailure,
)

ERROR_STATUS_CODES: dict[type[StudioError], int] = {
    ValidationFailure: status.HTTP_400_BAD_REQUEST,
    DateInPast: status.HTTP_400_BAD_REQUEST,
    DuplicateBooking: status.HTTP_400_BAD_REQUEST,
    InvalidIdentifier: status.HTTP_400_BAD_REQUEST,
    BookingNotConfirmed: status.HTTP_400_BAD_REQUEST,
    EmailMismatch: status.HTTP_403_FORBIDDEN,
    NotFound: status.HTTP_404_NOT_FOUND,
    BookingNotFound: status.HTTP_404_NOT_FOUND,
    DuplicateOrder: status.HTTP_409_CONFLICT,
    InternalError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Photo Studio API")
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(bookings_router)
    app.include_router(orders_router)

    @app.get("/api/health")
    async def health() -> dict[str, object]:
        """Simple health check endpoint."""
        return {"success": True, "status": "ok"}

    @app.exception_handler(StudioError)
    async def studio_error_handler(_: Request, exc: StudioError) -> JSONResponse:
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        _: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return _error_response(_request_validation_failure(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        _: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": str(exc.detail)},
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.exception(
            "Unhandled error",
            extra={"path": request.url.path, "method": request.method},
        )
        return _error_response(
            InternalError(_internal_error_message(container, exc))
        )

    return app


def error_status_code(exc: StudioError) -> int:
    """Return the HTTP status for a domain error, honouring subclasses."""
    for error_type in type(exc).__mro__:
        code = ERROR_STATUS_CODES.get(error_type)
        if code is not None:
            return code
    return status.HTTP_400_BAD_REQUEST


def _error_response(exc: StudioError) -> JSONResponse:
    content: dict[str, object] = {"success": False, "message": exc.message}
    fields = getattr(exc, "fields", None)
    if fields:
        content["fields"] = list(fields)
    return JSONResponse(status_code=error_status_code(exc), content=content)


def _request_validation_failure(exc: RequestValidationError) -> ValidationFailure:
    """Convert FastAPI request errors to the domain validation failure."""
    fields: dict[str, str] = {}
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        fields.setdefault(".".join(location) or "body", str(error.get("msg", "")))
    return ValidationFailure(fields)


def _internal_error_message(container: AppContainer, exc: Exception) -> str:
    """Return a user-facing 500 message with local debug info."""
    fallback = InternalError.default_message
    if container.settings.environment == "local":
        detail = f"{type(exc).__name__}: {exc}".strip()
        if detail:
            return f"{fallback} (debug: {detail})"
    return fallback
