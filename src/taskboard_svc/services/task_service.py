"""Task service layer for business logic and data persistence.

Tasks are numbered per board from 1 upward and carry a status key that
is stored as given. Reads join in the board title and, when a status of
the board has that key, its label and color.
"""

import logging
from typing import Any, Dict, List

from sqlalchemy import and_, select
from sqlalchemy.orm import Session

from ..models.board import Board
from ..models.status import BoardStatus
from ..models.task import Task
from ..schemas.task import TaskCreate, TaskUpdate
from .errors import EmptyUpdateError, InvalidInputError, NotFoundError, TaskNotFoundError
from .ordering import lock_board, next_task_position

logger = logging.getLogger(__name__)

TASK_ORDER = (Task.position.asc(), Task.created_at.desc(), Task.id.desc())


def _joined_task_query():
    """Select tasks with board title and the matching status's label and color."""
    return (
        select(Task, Board.title, BoardStatus.status_label, BoardStatus.status_color)
        .join(Board, Board.id == Task.board_id)
        .outerjoin(
            BoardStatus,
            and_(
                BoardStatus.board_id == Task.board_id,
                BoardStatus.status_key == Task.status_key,
            ),
        )
    )


def _serialize_row(row) -> Dict[str, Any]:
    task, board_title, status_label, status_color = row
    data = task.to_dict()
    data['board_title'] = board_title
    data['status_label'] = status_label
    data['status_color'] = status_color
    return data


def _fetch_task(db: Session, task_id: int) -> Dict[str, Any]:
    row = db.execute(_joined_task_query().where(Task.id == task_id)).first()
    if row is None:
        raise TaskNotFoundError(task_id)
    return _serialize_row(row)


def list_tasks(db: Session) -> List[Dict[str, Any]]:
    """List tasks of every board by position, newest first within a position."""
    logger.info("Listing all tasks")

    rows = db.execute(_joined_task_query().order_by(*TASK_ORDER)).all()
    tasks = [_serialize_row(row) for row in rows]
    logger.info(f"Successfully retrieved {len(tasks)} tasks")
    return tasks


def list_tasks_for_board(board_id: int, db: Session) -> List[Dict[str, Any]]:
    """List one board's tasks, ordered like :func:`list_tasks`."""
    logger.info(f"Listing tasks for board ID: {board_id}")

    rows = db.execute(
        _joined_task_query().where(Task.board_id == board_id).order_by(*TASK_ORDER)
    ).all()
    return [_serialize_row(row) for row in rows]


def get_task(task_id: int, db: Session) -> Dict[str, Any]:
    """Retrieve a task by its ID.

    Raises:
        TaskNotFoundError: When no task has this ID.
    """
    logger.info(f"Retrieving task with ID: {task_id}")
    return _fetch_task(db, task_id)


def create_task(payload: TaskCreate, db: Session) -> Dict[str, Any]:
    """Create a task at the end of its board's sequence.

    Args:
        payload: TaskCreate Pydantic model with validated input data
        db: SQLAlchemy database session

    Returns:
        Dictionary representation of the created task, with board and status display fields

    Raises:
        BoardNotFoundError: When the board does not exist
    """
    logger.info(f"Creating task with title: {payload.title} on board ID: {payload.board_id}")

    try:
        lock_board(db, payload.board_id)

        task = Task(
            board_id=payload.board_id,
            title=payload.title,
            description=payload.description,
            status_key=payload.status_key,
            priority=payload.priority,
            position=next_task_position(db, payload.board_id),
        )

        db.add(task)
        db.commit()
        db.refresh(task)
        logger.info(f"Successfully created task with ID: {task.id} at position {task.position}")

        return _fetch_task(db, task.id)

    except NotFoundError as e:
        db.rollback()
        logger.warning(str(e))
        raise
    except Exception:
        db.rollback()
        raise


def update_task(task_id: int, payload: TaskUpdate, db: Session) -> Dict[str, Any]:
    """Apply a partial update to a task.

    Only fields present in the request body change. Priority arrives
    already normalized by the schema.

    Raises:
        TaskNotFoundError: When no task has this ID
        EmptyUpdateError: When the payload supplies no field
    """
    logger.info(f"Updating task with ID: {task_id}")

    update_data = payload.model_dump(exclude_unset=True)

    try:
        task = db.get(Task, task_id)
        if task is None:
            raise TaskNotFoundError(task_id)

        if not update_data:
            raise EmptyUpdateError()

        for field_name, value in update_data.items():
            setattr(task, field_name, value)

        db.add(task)
        db.commit()  # The before_update event refreshes updated_at
        db.refresh(task)
        logger.info(f"Successfully updated task with ID: {task.id}")

        return _fetch_task(db, task.id)

    except (NotFoundError, InvalidInputError) as e:
        db.rollback()
        logger.warning(str(e))
        raise
    except Exception:
        db.rollback()
        raise


def delete_task(task_id: int, db: Session) -> Dict[str, Any]:
    """Permanently delete a task.

    Raises:
        TaskNotFoundError: When no task has this ID
    """
    logger.info(f"Deleting task with ID: {task_id}")

    try:
        task = db.get(Task, task_id)
        if task is None:
            raise TaskNotFoundError(task_id)

        db.delete(task)
        db.commit()
        logger.info(f"Successfully deleted task with ID: {task_id}")

        return {
            "message": "Task deleted successfully",
            "id": task_id
        }

    except NotFoundError as e:
        db.rollback()
        logger.warning(str(e))
        raise
    except Exception:
        db.rollback()
        raise
