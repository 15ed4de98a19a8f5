"""Board service layer.

Boards own their statuses and tasks. Creating a board also creates the
default lanes; deleting it removes everything it owns.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..models.board import Board
from ..models.status import BoardStatus, DEFAULT_STATUSES
from ..models.task import Task
from ..schemas.board import BoardCreate, BoardUpdate
from .errors import BoardNotFoundError, BoardTitleConflictError, ConflictError, NotFoundError

logger = logging.getLogger(__name__)


def _title_taken(db: Session, title: str, exclude_id: Optional[int] = None) -> bool:
    stmt = select(Board.id).where(Board.title == title)
    if exclude_id is not None:
        stmt = stmt.where(Board.id != exclude_id)
    return db.execute(stmt.limit(1)).first() is not None


def _task_count(db: Session, board_id: int) -> int:
    return db.execute(
        select(func.count(Task.id)).where(Task.board_id == board_id)
    ).scalar_one()


def _board_detail(db: Session, board: Board) -> Dict[str, Any]:
    """Serialize a board with its ordered statuses and task count."""
    statuses = db.execute(
        select(BoardStatus)
        .where(BoardStatus.board_id == board.id)
        .order_by(BoardStatus.position.asc(), BoardStatus.id.asc())
    ).scalars().all()

    data = board.to_dict()
    data['task_count'] = _task_count(db, board.id)
    data['statuses'] = [status.to_dict() for status in statuses]
    return data


def list_boards(db: Session) -> List[Dict[str, Any]]:
    """List every board, newest first, each with its ``task_count``."""
    logger.info("Listing boards")

    task_counts = (
        select(Task.board_id, func.count(Task.id).label('task_count'))
        .group_by(Task.board_id)
        .subquery()
    )
    stmt = (
        select(Board, func.coalesce(task_counts.c.task_count, 0))
        .outerjoin(task_counts, task_counts.c.board_id == Board.id)
        .order_by(Board.created_at.desc(), Board.id.desc())
    )

    boards = []
    for board, task_count in db.execute(stmt).all():
        data = board.to_dict()
        data['task_count'] = task_count
        boards.append(data)

    logger.info(f"Retrieved {len(boards)} boards")
    return boards


def get_board(board_id: int, db: Session) -> Dict[str, Any]:
    """Retrieve a board with its statuses (by position) and task count.

    Raises:
        BoardNotFoundError: When no board has this ID.
    """
    logger.info(f"Retrieving board with ID: {board_id}")

    board = db.get(Board, board_id)
    if board is None:
        raise BoardNotFoundError(board_id)
    return _board_detail(db, board)


def create_board(payload: BoardCreate, db: Session) -> Dict[str, Any]:
    """Create a board together with its default statuses.

    The board and its ``todo``/``in_progress``/``done`` lanes are committed
    in one transaction, at positions 0, 1 and 2.

    Args:
        payload: Validated board fields.
        db: SQLAlchemy database session

    Returns:
        The created board with its statuses and a task count of 0.

    Raises:
        BoardTitleConflictError: When a board with the same trimmed title exists.
    """
    title = payload.title.strip()
    logger.info(f"Creating board with title: {title}")

    try:
        if _title_taken(db, title):
            raise BoardTitleConflictError(f"A board titled '{title}' already exists")

        board = Board(title=title, description=payload.description)
        for position, defaults in enumerate(DEFAULT_STATUSES):
            board.statuses.append(BoardStatus(position=position, **defaults))

        db.add(board)
        db.commit()
        db.refresh(board)
        logger.info(f"Successfully created board with ID: {board.id}")

        return _board_detail(db, board)

    except IntegrityError as e:
        # Lost a race with a concurrent create of the same title
        db.rollback()
        logger.warning(f"Board title conflict on commit: {e}")
        raise BoardTitleConflictError(f"A board titled '{title}' already exists") from e
    except ConflictError as e:
        db.rollback()
        logger.warning(str(e))
        raise
    except Exception:
        db.rollback()
        raise


def update_board(board_id: int, payload: BoardUpdate, db: Session) -> Dict[str, Any]:
    """Rename a board and optionally replace its description.

    Raises:
        BoardNotFoundError: When no board has this ID.
        BoardTitleConflictError: When another board already uses the title.
    """
    title = payload.title.strip()
    logger.info(f"Updating board with ID: {board_id}")

    try:
        board = db.get(Board, board_id)
        if board is None:
            raise BoardNotFoundError(board_id)

        if _title_taken(db, title, exclude_id=board_id):
            raise BoardTitleConflictError(f"A board titled '{title}' already exists")

        board.title = title
        if 'description' in payload.model_fields_set:
            board.description = payload.description

        db.add(board)
        db.commit()
        db.refresh(board)
        logger.info(f"Successfully updated board with ID: {board_id}")

        return _board_detail(db, board)

    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Board title conflict on commit: {e}")
        raise BoardTitleConflictError(f"A board titled '{title}' already exists") from e
    except (ConflictError, NotFoundError) as e:
        db.rollback()
        logger.warning(str(e))
        raise
    except Exception:
        db.rollback()
        raise


def delete_board(board_id: int, db: Session) -> Dict[str, Any]:
    """Delete a board along with all of its statuses and tasks.

    Raises:
        BoardNotFoundError: When no board has this ID.
    """
    logger.info(f"Deleting board with ID: {board_id}")

    try:
        board = db.get(Board, board_id)
        if board is None:
            raise BoardNotFoundError(board_id)

        db.delete(board)
        db.commit()
        logger.info(f"Successfully deleted board with ID: {board_id}")

        return {
            "message": "Board deleted successfully",
            "id": board_id
        }

    except NotFoundError as e:
        db.rollback()
        logger.warning(str(e))
        raise
    except Exception:
        db.rollback()
        raise
