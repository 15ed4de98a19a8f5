"""BoardStatus SQLAlchemy ORM model.

A status is one lane of a board. Its ``status_key`` is what tasks refer
to; both the key and the human label are unique within a board.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy import (
    Column, DateTime, ForeignKey, Index, Integer, String, UniqueConstraint, event
)
from sqlalchemy.orm import relationship

from .base import Base, utcnow

DEFAULT_STATUS_COLOR = "#6b7280"

# Lanes every new board starts with, in position order
DEFAULT_STATUSES = (
    {"status_key": "todo", "status_label": "To Do", "status_color": "#3b82f6"},
    {"status_key": "in_progress", "status_label": "In Progress", "status_color": "#8b5cf6"},
    {"status_key": "done", "status_label": "Done", "status_color": "#10b981"},
)


class BoardStatus(Base):
    """Status (lane) ORM model, ordered by ``position`` within its board."""
    __tablename__ = 'board_statuses'

    __table_args__ = (
        UniqueConstraint('board_id', 'status_key', name='uq_board_status_key'),
        UniqueConstraint('board_id', 'status_label', name='uq_board_status_label'),
        Index('idx_board_status_position', 'board_id', 'position'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    board_id = Column(Integer, ForeignKey('boards.id', ondelete='CASCADE'), nullable=False)
    status_key = Column(String(50), nullable=False)
    status_label = Column(String(100), nullable=False)
    status_color = Column(String(7), nullable=False, default=DEFAULT_STATUS_COLOR)
    position = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    board = relationship("Board", back_populates="statuses")

    def __init__(self, **kwargs):
        """Initialize with synchronized created/updated timestamps."""
        now = utcnow()
        kwargs.setdefault('created_at', now)
        kwargs.setdefault('updated_at', now)
        super().__init__(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'board_id': self.board_id,
            'status_key': self.status_key,
            'status_label': self.status_label,
            'status_color': self.status_color,
            'position': self.position,
            'created_at': self.created_at.isoformat(),
            'updated_at': self.updated_at.isoformat(),
        }

    def __repr__(self):
        return f"<BoardStatus(id={self.id}, board_id={self.board_id}, key='{self.status_key}', position={self.position})>"


@event.listens_for(BoardStatus, 'before_update')
def update_status_timestamp(mapper, connection, target):
    """Refresh updated_at before a BoardStatus row is updated."""
    target.updated_at = datetime.now(timezone.utc)
