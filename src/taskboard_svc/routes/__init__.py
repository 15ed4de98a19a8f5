"""API routes for the taskboard_svc application.

This package contains all FastAPI route definitions organized by domain.
"""

from .board_routes import board_router
from .status_routes import status_router
from .task_routes import task_router

__all__ = ["board_router", "status_router", "task_router"]
