"""Exception handlers for the application."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from now_playing.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

INTERNAL_ERROR_BODY = {"error": "Internal Server Error"}


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for anything escaping a route."""
    log_with_context(
        logger,
        "error",
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        method=request.method,
        url=str(request.url),
        event_type="unhandled_error",
    )
    logger.error("Exception traceback:", exc_info=exc)

    # Don't expose internal error details to clients
    return JSONResponse(status_code=500, content=INTERNAL_ERROR_BODY)


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(Exception, general_exception_handler)
