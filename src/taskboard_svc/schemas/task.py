"""Pydantic schemas for task-related operations.

This module defines the input and output schemas for task operations,
including validation and serialization models.
"""

from typing import ClassVar, Optional

from pydantic import BaseModel, Field, field_validator

from ..models.task import Priority
from .fields import FieldAliases, Position, RecordId, RequestModel

# camelCase first; bare "status" is the legacy spelling and loses to both
TASK_FIELD_ALIASES: FieldAliases = {
    "board_id": ("boardId", "board_id"),
    "status_key": ("statusKey", "status_key", "status"),
}


class TaskCreate(RequestModel):
    """Input schema for creating a new task.

    The status key is not checked against the board's statuses; any key is
    stored as given.
    """
    field_aliases: ClassVar[FieldAliases] = TASK_FIELD_ALIASES

    title: str = Field(..., min_length=1, max_length=255, description="Task title (required)")
    description: Optional[str] = Field(None, max_length=1000, description="Detailed task description")
    status_key: str = Field("todo", max_length=50, description="Key of the status lane")
    priority: Priority = Field(Priority.MEDIUM, description="low, medium or high (any case)")
    board_id: RecordId = Field(..., description="Owning board ID")

    @field_validator('description')
    @classmethod
    def validate_description(cls, v: Optional[str]) -> Optional[str]:
        """Convert empty description to None."""
        return v if v else None

    @field_validator('status_key', mode='before')
    @classmethod
    def default_status_key(cls, v):
        """Missing, null or blank status keys fall back to ``todo``."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return "todo"
        return v

    @field_validator('priority', mode='before')
    @classmethod
    def normalize_priority(cls, v):
        """Case-fold the priority; null means the default."""
        if v is None:
            return Priority.MEDIUM
        return Priority.parse(v)


class TaskUpdate(RequestModel):
    """Partial update of a task. Only supplied fields change."""
    field_aliases: ClassVar[FieldAliases] = TASK_FIELD_ALIASES

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    status_key: Optional[str] = Field(None, min_length=1, max_length=50)
    priority: Optional[Priority] = None
    position: Optional[Position] = None

    @field_validator('title', 'status_key', 'priority', 'position')
    @classmethod
    def reject_null(cls, v, info):
        """Only description may be cleared with an explicit null."""
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v

    @field_validator('description')
    @classmethod
    def validate_description(cls, v: Optional[str]) -> Optional[str]:
        """Convert empty description to None."""
        return v if v else None

    @field_validator('priority', mode='before')
    @classmethod
    def normalize_priority(cls, v):
        if v is None:
            return v
        return Priority.parse(v)


class TaskResponse(BaseModel):
    """Output schema for task responses, including board and status display fields."""
    id: int
    board_id: int
    title: str
    description: Optional[str] = None
    status_key: str
    priority: str
    position: int
    created_at: str
    updated_at: str
    board_title: Optional[str] = None
    status_label: Optional[str] = None
    status_color: Optional[str] = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": 7,
                "board_id": 1,
                "title": "Fix bug",
                "description": None,
                "status_key": "todo",
                "priority": "medium",
                "position": 1,
                "created_at": "2024-01-15T10:30:00+00:00",
                "updated_at": "2024-01-15T10:30:00+00:00",
                "board_title": "Sprint 1",
                "status_label": "To Do",
                "status_color": "#3b82f6"
            }
        }
    }
