"""Pydantic schemas for status (lane) operations."""

from typing import ClassVar, Optional

from pydantic import BaseModel, Field, field_validator

from ..models.status import DEFAULT_STATUS_COLOR
from .fields import FieldAliases, Position, RecordId, RequestModel, camel_aliases

HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class StatusCreate(RequestModel):
    """Input schema for adding a status to an existing board."""
    field_aliases: ClassVar[FieldAliases] = camel_aliases(
        "board_id", "status_key", "status_label", "status_color"
    )

    board_id: RecordId = Field(..., description="Owning board ID")
    status_key: str = Field(..., min_length=1, max_length=50, description="Machine key tasks refer to")
    status_label: str = Field(..., min_length=1, max_length=100, description="Display name")
    status_color: str = Field(DEFAULT_STATUS_COLOR, pattern=HEX_COLOR_PATTERN, description="Hex RGB color")


class StatusUpdate(RequestModel):
    """Partial update of a status. Key and board are fixed once created."""
    field_aliases: ClassVar[FieldAliases] = camel_aliases("status_label", "status_color")

    status_label: Optional[str] = Field(None, min_length=1, max_length=100)
    status_color: Optional[str] = Field(None, pattern=HEX_COLOR_PATTERN)
    position: Optional[Position] = None

    @field_validator('status_label', 'status_color', 'position')
    @classmethod
    def reject_null(cls, v, info):
        """Fields may be omitted but not explicitly set to null."""
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class StatusResponse(BaseModel):
    id: int
    board_id: int
    status_key: str
    status_label: str
    status_color: str
    position: int
    created_at: str
    updated_at: str
