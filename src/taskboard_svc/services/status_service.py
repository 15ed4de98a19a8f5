"""Status (lane) service layer.

Keeps each board's statuses ordered and unique by key and by label, and
refuses to delete a status that tasks still reference.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..models.status import BoardStatus
from ..models.task import Task
from ..schemas.status import StatusCreate, StatusUpdate
from .errors import (
    ConflictError,
    EmptyUpdateError,
    InvalidInputError,
    NotFoundError,
    StatusInUseError,
    StatusKeyConflictError,
    StatusLabelConflictError,
    StatusNotFoundError,
)
from .ordering import lock_board, next_status_position

logger = logging.getLogger(__name__)


def _key_taken(db: Session, board_id: int, status_key: str) -> bool:
    return db.execute(
        select(BoardStatus.id)
        .where(BoardStatus.board_id == board_id, BoardStatus.status_key == status_key)
        .limit(1)
    ).first() is not None


def _label_taken(db: Session, board_id: int, status_label: str, exclude_id: Optional[int] = None) -> bool:
    stmt = select(BoardStatus.id).where(
        BoardStatus.board_id == board_id,
        BoardStatus.status_label == status_label,
    )
    if exclude_id is not None:
        stmt = stmt.where(BoardStatus.id != exclude_id)
    return db.execute(stmt.limit(1)).first() is not None


def _conflict_from_integrity_error(error: IntegrityError, board_id: int, key: str, label: str) -> ConflictError:
    """Map a unique-constraint failure to the matching conflict error."""
    # SQLite names the columns, PostgreSQL names the constraint; both contain "status_key"
    if 'status_key' in str(error.orig):
        return StatusKeyConflictError(f"Status with key '{key}' already exists for board {board_id}")
    return StatusLabelConflictError(f"Status with label '{label}' already exists for board {board_id}")


def list_statuses_for_board(board_id: int, db: Session) -> List[Dict[str, Any]]:
    """List a board's statuses by ascending position.

    An unknown board simply has no statuses.
    """
    logger.info(f"Listing statuses for board ID: {board_id}")

    statuses = db.execute(
        select(BoardStatus)
        .where(BoardStatus.board_id == board_id)
        .order_by(BoardStatus.position.asc(), BoardStatus.id.asc())
    ).scalars().all()
    return [status.to_dict() for status in statuses]


def create_status(payload: StatusCreate, db: Session) -> Dict[str, Any]:
    """Append a status to the end of a board's lanes.

    Args:
        payload: Validated status fields, including the owning board ID.
        db: SQLAlchemy database session

    Returns:
        Dictionary representation of the created status.

    Raises:
        BoardNotFoundError: When the board does not exist.
        StatusKeyConflictError: When the board already has this key.
        StatusLabelConflictError: When the board already has this label.
    """
    board_id = payload.board_id
    logger.info(f"Creating status '{payload.status_key}' on board ID: {board_id}")

    try:
        lock_board(db, board_id)

        if _key_taken(db, board_id, payload.status_key):
            raise StatusKeyConflictError(
                f"Status with key '{payload.status_key}' already exists for board {board_id}"
            )
        if _label_taken(db, board_id, payload.status_label):
            raise StatusLabelConflictError(
                f"Status with label '{payload.status_label}' already exists for board {board_id}"
            )

        status = BoardStatus(
            board_id=board_id,
            status_key=payload.status_key,
            status_label=payload.status_label,
            status_color=payload.status_color,
            position=next_status_position(db, board_id),
        )

        db.add(status)
        db.commit()
        db.refresh(status)
        logger.info(f"Successfully created status with ID: {status.id} at position {status.position}")

        return status.to_dict()

    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Status uniqueness conflict on commit: {e}")
        raise _conflict_from_integrity_error(e, board_id, payload.status_key, payload.status_label) from e
    except (ConflictError, NotFoundError) as e:
        db.rollback()
        logger.warning(str(e))
        raise
    except Exception:
        db.rollback()
        raise


def update_status(status_id: int, payload: StatusUpdate, db: Session) -> Dict[str, Any]:
    """Change a status's label, color and/or position.

    Raises:
        EmptyUpdateError: When the payload supplies no field.
        StatusNotFoundError: When no status has this ID.
        StatusLabelConflictError: When the new label is used by another status of the board.
    """
    logger.info(f"Updating status with ID: {status_id}")

    update_data = payload.model_dump(exclude_unset=True)

    try:
        status = db.get(BoardStatus, status_id)
        if status is None:
            raise StatusNotFoundError(status_id)

        if not update_data:
            raise EmptyUpdateError()

        new_label = update_data.get('status_label')
        if new_label is not None and new_label != status.status_label:
            if _label_taken(db, status.board_id, new_label, exclude_id=status.id):
                raise StatusLabelConflictError(
                    f"Status with label '{new_label}' already exists for board {status.board_id}"
                )

        for field_name, value in update_data.items():
            setattr(status, field_name, value)

        db.add(status)
        db.commit()
        db.refresh(status)
        logger.info(f"Successfully updated status with ID: {status_id}")

        return status.to_dict()

    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Status label conflict on commit: {e}")
        raise StatusLabelConflictError(
            f"Status with label '{update_data.get('status_label')}' already exists for this board"
        ) from e
    except (ConflictError, NotFoundError, InvalidInputError) as e:
        db.rollback()
        logger.warning(str(e))
        raise
    except Exception:
        db.rollback()
        raise


def delete_status(status_id: int, db: Session) -> Dict[str, Any]:
    """Delete a status that no task of its board refers to.

    Tasks are never deleted or re-pointed here; the caller must move or
    delete them first.

    Raises:
        StatusNotFoundError: When no status has this ID.
        StatusInUseError: When tasks of the board still carry this status key.
    """
    logger.info(f"Deleting status with ID: {status_id}")

    try:
        status = db.get(BoardStatus, status_id)
        if status is None:
            raise StatusNotFoundError(status_id)

        task_count = db.execute(
            select(func.count(Task.id)).where(
                Task.board_id == status.board_id,
                Task.status_key == status.status_key,
            )
        ).scalar_one()
        if task_count > 0:
            raise StatusInUseError(status.status_key, task_count)

        db.delete(status)
        db.commit()
        logger.info(f"Successfully deleted status with ID: {status_id}")

        return {
            "message": "Status deleted successfully",
            "id": status_id
        }

    except (ConflictError, NotFoundError) as e:
        db.rollback()
        logger.warning(str(e))
        raise
    except Exception:
        db.rollback()
        raise
