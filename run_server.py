"""
Run script to start the FastAPI server (no reload).
"""
import logging
import uvicorn
import os
import sys

# Add the project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from digital_profile.config import settings, configure_logging

logger = logging.getLogger(__name__)


def main():
    """Start the Uvicorn server."""
    configure_logging()
    logger.info(f"Starting {settings.PROJECT_NAME}...")
    logger.info("API Documentation: http://localhost:8000/docs")

    uvicorn.run(
        "digital_profile.main:app",
        host="0.0.0.0",
        port=int(os.environ.get("PORT", 8000)),
        reload=False,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
