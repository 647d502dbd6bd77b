import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from multifetch.api.routes import router
from multifetch.core.config import settings
from multifetch.core.log import configure_logging

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    Validate settings and configure logging on startup, report shutdown.
    """
    # Startup
    settings.validate()
    configure_logging(settings.LOG_LEVEL)
    logger.info(
        "Multi-Fetch Service starting (max concurrency: %s)",
        settings.MAX_CONCURRENCY or "unbounded",
    )

    yield

    # Shutdown
    logger.info("Shutting down Multi-Fetch Service...")

app = FastAPI(
    title="Multi-Fetch Service",
    description="API fetching batches of URLs in parallel",
    version="1.0.0",
    lifespan=lifespan
)

# Include API routes
app.include_router(router)

@app.get("/")
async def root():
    """Root endpoint with basic info"""
    return {
        "service": "Multi-Fetch Service",
        "version": "1.0.0",
        "endpoints": {
            "multi_fetch": "POST /multi-fetch",
            "multi_fetch_detailed": "POST /multi-fetch/detailed",
            "versions": "GET /versions",
            "process": "GET /process",
            "health": "GET /health"
        }
    }

def run():
    """Serve the app on the configured listen address."""
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)

if __name__ == "__main__":
    run()
