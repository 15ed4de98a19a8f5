"""Pydantic schemas for the taskboard_svc application.

This package contains all Pydantic models for request/response validation
and serialization.
"""

from .board import BoardCreate, BoardUpdate, BoardResponse, BoardDetailResponse
from .common import DeleteResponse, ErrorResponse, FieldError
from .fields import RequestModel, normalize_field_names
from .status import StatusCreate, StatusUpdate, StatusResponse
from .task import TaskCreate, TaskUpdate, TaskResponse

__all__ = [
    "BoardCreate", "BoardUpdate", "BoardResponse", "BoardDetailResponse",
    "DeleteResponse", "ErrorResponse", "FieldError",
    "RequestModel", "normalize_field_names",
    "StatusCreate", "StatusUpdate", "StatusResponse",
    "TaskCreate", "TaskUpdate", "TaskResponse",
]
