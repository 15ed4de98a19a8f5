"""Service layer for the taskboard_svc application.

This package contains the business logic for boards, statuses and tasks.
"""

from .board_service import create_board, delete_board, get_board, list_boards, update_board
from .errors import (
    BoardNotFoundError,
    BoardTitleConflictError,
    ConflictError,
    EmptyUpdateError,
    InvalidInputError,
    NotFoundError,
    StatusInUseError,
    StatusKeyConflictError,
    StatusLabelConflictError,
    StatusNotFoundError,
    TaskNotFoundError,
)
from .status_service import create_status, delete_status, list_statuses_for_board, update_status
from .task_service import create_task, delete_task, get_task, list_tasks, list_tasks_for_board, update_task

__all__ = [
    "create_board",
    "delete_board",
    "get_board",
    "list_boards",
    "update_board",
    "create_status",
    "delete_status",
    "list_statuses_for_board",
    "update_status",
    "create_task",
    "delete_task",
    "get_task",
    "list_tasks",
    "list_tasks_for_board",
    "update_task",
    "BoardNotFoundError",
    "BoardTitleConflictError",
    "ConflictError",
    "EmptyUpdateError",
    "InvalidInputError",
    "NotFoundError",
    "StatusInUseError",
    "StatusKeyConflictError",
    "StatusLabelConflictError",
    "StatusNotFoundError",
    "TaskNotFoundError",
]
