"""
Taskdesk API package.

Provides the FastAPI application for the Taskdesk todo service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
