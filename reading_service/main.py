from fastapi import FastAPI, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from .core.startup import lifespan
from .core.middleware import logging_middleware, setup_cors_middleware
from .core.exceptions import setup_exception_handlers
from .core.settings import Settings

from .api import reading

# Initialize the FastAPI app with the lifespan manager
app = FastAPI(
    title="Reading Service",
    version="1.0.0",
    lifespan=lifespan
)

settings = Settings()

# Setup CORS middleware (must be added before other middleware)
setup_cors_middleware(app, settings.CORS_ORIGINS)

app.middleware("http")(logging_middleware)

setup_exception_handlers(app)

app.include_router(reading.router, prefix="/api/reading", tags=["reading"])

@app.get("/health")
async def health():
    """
    Health check endpoint to confirm the service is running.
    """
    return {"status": "healthy", "service": "reading"}

@app.get("/metrics")
async def metrics():
    """Expose Prometheus metrics from the default registry."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
