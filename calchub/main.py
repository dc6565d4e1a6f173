"""
Calculator Hub API.

Run with ``calchub`` (installed script) or ``python -m calchub.main``.
"""

import logging

import uvicorn
from fastapi import FastAPI

from calchub import __version__
from calchub.api import router as api_router
from calchub.config import get_settings
from calchub.logging_config import setup_logging

settings = get_settings()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    description="Loan, investment, statistics and fitness calculators",
    version=__version__,
    debug=settings.debug,
)

app.include_router(api_router, prefix=settings.api_prefix)


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "version": __version__}


def run():
    """Serve the API with uvicorn."""
    logger.info(f"Starting {settings.app_name} ({settings.app_env}) on {settings.host}:{settings.port}")
    uvicorn.run(
        "calchub.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
