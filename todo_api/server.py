"""
Server entry point.

Runs the application under uvicorn on the configured address.
"""

import uvicorn

from todo_api.config import settings
from todo_api.utils.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def run() -> None:
    """Configure logging and serve the API until interrupted."""
    setup_logging(settings)
    logger.info(f"Listening on {settings.HOST}:{settings.PORT}")
    uvicorn.run(
        "todo_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        log_config=None,
    )


if __name__ == "__main__":
    run()
