"""SQLAlchemy ORM models for the taskboard_svc application.

This package contains all database models and the base declarative class.
"""

from .base import Base
from .board import Board
from .status import BoardStatus, DEFAULT_STATUS_COLOR, DEFAULT_STATUSES
from .task import Task, Priority

__all__ = ["Base", "Board", "BoardStatus", "DEFAULT_STATUS_COLOR", "DEFAULT_STATUSES", "Task", "Priority"]
