"""Pydantic schemas for board operations."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from .fields import RequestModel
from .status import StatusResponse


class BoardCreate(RequestModel):
    """Input schema for creating a board.

    Titles are trimmed before the length check and before the uniqueness
    lookup, so ``" Sprint 1 "`` and ``"Sprint 1"`` name the same board.
    """
    title: str = Field(..., min_length=1, max_length=255, description="Board title (required, unique)")
    description: Optional[str] = Field(None, max_length=1000, description="Board description")

    @field_validator('description')
    @classmethod
    def validate_description(cls, v: Optional[str]) -> Optional[str]:
        """Convert empty description to None."""
        return v if v else None


class BoardUpdate(BoardCreate):
    """Input schema for updating a board; validated exactly like creation."""


class BoardResponse(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    created_at: str
    task_count: int = 0


class BoardDetailResponse(BoardResponse):
    """Board with its statuses in position order."""
    statuses: List[StatusResponse] = Field(default_factory=list)

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": 1,
                "title": "Sprint 1",
                "description": None,
                "created_at": "2024-01-15T10:30:00+00:00",
                "task_count": 0,
                "statuses": [
                    {
                        "id": 1,
                        "board_id": 1,
                        "status_key": "todo",
                        "status_label": "To Do",
                        "status_color": "#3b82f6",
                        "position": 0,
                        "created_at": "2024-01-15T10:30:00+00:00",
                        "updated_at": "2024-01-15T10:30:00+00:00"
                    }
                ]
            }
        }
    }
