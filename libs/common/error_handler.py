"""Global exception handlers for consistent error responses."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from libs.common.logging import get_logger

logger = get_logger(__name__)


async def client_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Domain validation errors are the caller's fault: answer 422."""
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": str(exc)},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def add_exception_handlers(
    app: FastAPI, client_errors: tuple[type[Exception], ...] = ()
) -> None:
    """Register the shared exception handlers on an app.

    Each class in ``client_errors`` (and its subclasses) maps to a 422.
    """
    for exc_class in client_errors:
        app.add_exception_handler(exc_class, client_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
