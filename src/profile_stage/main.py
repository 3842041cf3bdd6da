# src/profile_stage/main.py
"""Main entry point for the Profile Stage application."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from profile_stage.api.v1 import profiles_router
from profile_stage.core.settings import settings
from profile_stage.core.storage import storage_buckets

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Profile Stage API",
    description="Profile pages with follow-gated privacy",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Include API routers
app.include_router(profiles_router, prefix="/api/v1")


@app.on_event("startup")
async def on_startup() -> None:
    logger.info("%s %s starting", settings.app_name, settings.app_version)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, object]:
    """Root endpoint with basic information about the API."""
    return {
        "name": "Profile Stage API",
        "version": settings.app_version,
        "description": "Profile pages with follow-gated privacy",
        "storage_buckets": storage_buckets(),
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("profile_stage.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
