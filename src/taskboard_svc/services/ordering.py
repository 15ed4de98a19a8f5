"""Per-board position sequencing for statuses and tasks.

Both sequences are computed as ``max(position) + 1`` over the owning
board. Statuses start at 0, tasks start at 1.

Callers lock the board row with :func:`lock_board` first, inside the same
transaction that inserts the new row. On PostgreSQL this serializes
concurrent creates on one board; SQLite ignores ``FOR UPDATE``, so there
two concurrent writers can still compute the same position.
"""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ..models.board import Board
from ..models.status import BoardStatus
from ..models.task import Task
from .errors import BoardNotFoundError

FIRST_STATUS_POSITION = 0
FIRST_TASK_POSITION = 1


def lock_board(db: Session, board_id: int) -> Board:
    """Load the board for update.

    Raises:
        BoardNotFoundError: When the board does not exist.
    """
    board = db.execute(
        select(Board).where(Board.id == board_id).with_for_update()
    ).scalar_one_or_none()
    if board is None:
        raise BoardNotFoundError(board_id)
    return board


def _next_position(db: Session, column, board_column, board_id: int, first: int) -> int:
    current_max = db.execute(
        select(func.max(column)).where(board_column == board_id)
    ).scalar()
    if current_max is None:
        return first
    return current_max + 1


def next_status_position(db: Session, board_id: int) -> int:
    """Next free status position on the board: ``max + 1``, or 0 when it has none."""
    return _next_position(db, BoardStatus.position, BoardStatus.board_id, board_id, FIRST_STATUS_POSITION)


def next_task_position(db: Session, board_id: int) -> int:
    """Next task position on the board: ``max + 1``, or 1 when it has no tasks."""
    return _next_position(db, Task.position, Task.board_id, board_id, FIRST_TASK_POSITION)
