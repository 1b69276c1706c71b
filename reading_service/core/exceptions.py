import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..services.reading.errors import ReadingError, to_http_payload

logger = logging.getLogger(__name__)


def setup_exception_handlers(app: FastAPI):
    """Add custom exception handlers to the FastAPI app."""

    @app.exception_handler(ReadingError)
    async def handle_reading_error(request: Request, exc: ReadingError):
        status, payload = to_http_payload(exc)
        log = logger.error if status >= 500 else logger.warning
        log(
            f"Reading error occurred: {exc.message}",
            extra={"error_type": type(exc).__name__, "code": exc.code, "user_id": exc.user_id},
        )
        return JSONResponse(status_code=int(status), content=payload)

    @app.exception_handler(Exception)
    async def handle_generic_exception(request: Request, exc: Exception):
        logger.error(f"An unexpected error occurred: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": {"code": "internal_error", "message": "An internal server error occurred."}},
        )

    logger.info("Exception handlers configured.")
