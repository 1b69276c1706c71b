import time
import uuid

from fastapi import Request, Response
from fastapi.middleware.cors import CORSMiddleware

from .logging_config import request_id_var, user_id_var

USER_ID_HEADER = "X-User-Id"


async def logging_middleware(request: Request, call_next) -> Response:
    """
    Middleware to add a request_id and the caller's user id to the logging context.
    """
    request_id = str(uuid.uuid4())
    request_id_var.set(request_id)
    user_id_var.set(request.headers.get(USER_ID_HEADER))

    start_time = time.time()
    response = await call_next(request)
    process_time = (time.time() - start_time) * 1000  # in milliseconds

    response.headers["X-Request-ID"] = request_id
    response.headers["X-Process-Time-MS"] = str(process_time)
    return response


def setup_cors_middleware(app, cors_origins: str):
    """
    Setup CORS middleware for the FastAPI app.

    Args:
        app: FastAPI application instance
        cors_origins: Comma-separated list of allowed origins
    """
    origins = [origin.strip() for origin in cors_origins.split(",") if origin.strip()]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
