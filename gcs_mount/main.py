import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request

from .api import mounts
from .dependencies import get_settings
from .logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    setup_logging(get_settings())
    logging.info("GCS mount API starting up...")
    yield
    # Mounts are owned by the driver processes and outlive the API
    logging.info("GCS mount API shutting down...")


app = FastAPI(
    title="GCS Mount",
    description="Mount Google Cloud Storage buckets through GCSDokan or gcsfuse",
    version="0.1.0",
    lifespan=lifespan,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logging.info(
        f"Incoming request: {request.method} {request.url.path}",
        extra={
            "operation": "http_request",
            "method": request.method,
            "path": request.url.path,
            "client_ip": request.client.host if request.client else "unknown",
        },
    )

    response = await call_next(request)

    logging.info(
        f"Response: {response.status_code}",
        extra={"operation": "http_response", "status_code": response.status_code},
    )
    return response


app.include_router(mounts.router)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "service": "gcs-mount"}


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "gcs_mount.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
