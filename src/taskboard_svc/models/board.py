"""Board SQLAlchemy ORM model.

A board is the top-level container that owns an ordered set of statuses
(lanes) and the tasks filed against them.
"""

from typing import Any, Dict

from sqlalchemy import Column, DateTime, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from .base import Base, utcnow


class Board(Base):
    """Board ORM model.

    Deleting a board removes its statuses and tasks, both through the ORM
    cascade and through ``ON DELETE CASCADE`` on the child foreign keys.
    """
    __tablename__ = 'boards'

    __table_args__ = (
        UniqueConstraint('title', name='uq_board_title'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    statuses = relationship(
        "BoardStatus",
        back_populates="board",
        cascade="all, delete-orphan",
        order_by="BoardStatus.position",
    )
    tasks = relationship(
        "Task",
        back_populates="board",
        cascade="all, delete-orphan",
    )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the board's own columns (no statuses, no counts)."""
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'created_at': self.created_at.isoformat(),
        }

    def __repr__(self):
        return f"<Board(id={self.id}, title='{self.title}')>"
