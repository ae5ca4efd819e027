#!/usr/bin/env python
"""
Run the Taskdesk API server.

Usage:
    python run_api.py
    python run_api.py --reload               # Development mode
    python run_api.py --log-level DEBUG      # Verbose logging
"""

import argparse
import logging

import uvicorn

from shared.config import get_settings
from shared.logging_config import configure_logging

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Run the Taskdesk API server")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument("--host", type=str, help="Host to bind to (default: HOST setting)")
    parser.add_argument("--port", type=int, help="Port to bind to (default: PORT setting)")
    parser.add_argument("--log-level", type=str, help="Root log level (default: LOG_LEVEL setting)")
    args = parser.parse_args()

    settings = get_settings()
    log_level = args.log_level or settings.log_level
    configure_logging(log_level)

    if not settings.jwt_secret:
        logger.warning("JWT_SECRET is not set; signup, signin and every protected route will fail")

    uvicorn.run(
        "api:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload or settings.reload,
        log_level=log_level.lower(),
    )


if __name__ == "__main__":
    main()
