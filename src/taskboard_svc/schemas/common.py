"""Response schemas shared across resources."""

from typing import List, Optional

from pydantic import BaseModel, Field


class DeleteResponse(BaseModel):
    """Body returned after a successful delete."""
    message: str = Field(..., description="Human readable confirmation")
    id: int = Field(..., description="Identifier of the deleted record")


class FieldError(BaseModel):
    field: Optional[str] = Field(None, description="Offending field, if the error is tied to one")
    message: str
    type: str


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx response; ``errors`` is only sent for validation failures."""
    message: str
    errors: Optional[List[FieldError]] = None
