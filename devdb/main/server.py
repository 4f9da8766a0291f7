#!/usr/bin/env python3
"""
Server Entry Point - Main Layer

This module serves as the entry point for the HTTP server.
It loads settings, configures logging and runs the FastAPI application
under uvicorn.
"""

import uvicorn

from devdb.main.config import get_settings
from devdb.shared import configure_logging, get_logger, update_logging_from_settings

# Configure logging with basic settings first
configure_logging()

# Load settings
settings = get_settings()

# Update logging with complete settings
update_logging_from_settings(settings)

# Get structured logger
logger = get_logger(__name__)


def main() -> None:
    """Main entry point for the DevDB server."""

    settings = get_settings()

    logger.info(
        "Starting DevDB server",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.server.reload,
        environment=settings.environment.value,
    )

    uvicorn.run(
        "devdb.main.app:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.server.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
