"""Task SQLAlchemy ORM model for the taskboard_svc application.

This module defines the Task model, the Priority enum and the custom
TypeDecorator that stores priorities in their canonical lowercase form.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict

from sqlalchemy import (
    Column, DateTime, ForeignKey, Index, Integer, String, Text, event
)
from sqlalchemy.orm import relationship
from sqlalchemy.types import TypeDecorator, String as SQLString

from .base import Base, utcnow


class Priority(Enum):
    """Enum for task priority levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def parse(cls, value: str) -> "Priority":
        """Case-insensitive lookup, e.g. ``"HIGH"`` or ``" High "`` -> ``Priority.HIGH``.

        Raises:
            ValueError: When the value names no priority.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Invalid priority type: {type(value).__name__}")
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(
                f"Invalid priority '{value}'. Must be one of: {[p.value for p in cls]}"
            )


class PriorityEnumType(TypeDecorator):
    """Custom SQLAlchemy TypeDecorator for Priority enum validation."""
    impl = SQLString
    cache_ok = True

    def process_bind_param(self, value, dialect):
        """Convert Priority enum (or a priority string in any case) for storage."""
        if value is None:
            return None
        if isinstance(value, Priority):
            return value.value
        if isinstance(value, str):
            return Priority.parse(value).value
        raise ValueError(f"Invalid Priority type: {type(value)}. Must be Priority enum or string.")

    def process_result_value(self, value, dialect):
        """Convert string from database to Priority enum."""
        if value is None:
            return None
        try:
            return Priority.parse(value)
        except ValueError:
            raise ValueError(f"Invalid priority value in database: {value}")


class Task(Base):
    """Task ORM model.

    ``status_key`` names a status of the same board by value only; there is
    no foreign key, so a task may keep a key whose status was never created.
    """
    __tablename__ = 'tasks'

    __table_args__ = (
        Index('idx_task_board_position', 'board_id', 'position'),
        Index('idx_task_board_status_key', 'board_id', 'status_key'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    board_id = Column(Integer, ForeignKey('boards.id', ondelete='CASCADE'), nullable=False)
    status_key = Column(String(50), nullable=False, default="todo")
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    priority = Column(PriorityEnumType, nullable=False, default=Priority.MEDIUM)
    position = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    board = relationship("Board", back_populates="tasks")

    def __init__(self, **kwargs):
        """Initialize Task with synchronized timestamps."""
        now = utcnow()
        if 'created_at' not in kwargs:
            kwargs['created_at'] = now
        if 'updated_at' not in kwargs:
            kwargs['updated_at'] = now
        super().__init__(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the Task to a dictionary.

        Returns:
            Dict with the priority as its string value and timestamps in ISO format.
            Board and status display fields are added by the service layer.
        """
        return {
            'id': self.id,
            'board_id': self.board_id,
            'title': self.title,
            'description': self.description,
            'status_key': self.status_key,
            'priority': self.priority.value if self.priority else None,
            'position': self.position,
            'created_at': self.created_at.isoformat(),
            'updated_at': self.updated_at.isoformat(),
        }

    def __repr__(self):
        return f"<Task(id={self.id}, title='{self.title}', status_key='{self.status_key}')>"


@event.listens_for(Task, 'before_update')
def update_task_timestamp(mapper, connection, target):
    """Update updated_at timestamp before updating a Task record."""
    target.updated_at = datetime.now(timezone.utc)
