"""FastAPI routes for task-related operations.

This module implements REST API endpoints for task management including
creation, retrieval, updating, and deletion operations.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.common import DeleteResponse
from ..schemas.task import TaskCreate, TaskResponse, TaskUpdate
from ..services import task_service
from ..services.errors import BoardNotFoundError, InvalidInputError, TaskNotFoundError
from .errors import ERROR_RESPONSES, as_validation_error, internal_error
from .params import RecordIdPath

logger = logging.getLogger(__name__)

task_router = APIRouter(tags=["tasks"], responses=ERROR_RESPONSES)


@task_router.get("/tasks", response_model=List[TaskResponse])
async def list_tasks_endpoint(db: Session = Depends(get_db)):
    """List tasks across all boards."""
    try:
        return task_service.list_tasks(db)
    except Exception as e:
        logger.error(f"Error fetching tasks: {e}", exc_info=True)
        raise internal_error()


@task_router.get("/tasks/board/{board_id}", response_model=List[TaskResponse])
async def list_board_tasks_endpoint(board_id: RecordIdPath, db: Session = Depends(get_db)):
    """List the tasks of one board."""
    try:
        return task_service.list_tasks_for_board(board_id, db)
    except Exception as e:
        logger.error(f"Error fetching tasks for board {board_id}: {e}", exc_info=True)
        raise internal_error()


@task_router.get("/tasks/{task_id}", response_model=TaskResponse)
async def get_task_endpoint(task_id: RecordIdPath, db: Session = Depends(get_db)):
    """Get a single task."""
    try:
        return task_service.get_task(task_id, db)
    except TaskNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error fetching task {task_id}: {e}", exc_info=True)
        raise internal_error()


@task_router.post("/tasks", response_model=TaskResponse, status_code=201)
async def create_task_endpoint(payload: TaskCreate, db: Session = Depends(get_db)):
    """Create a task on a board."""
    logger.info(f"POST /tasks request - board_id: {payload.board_id}")

    try:
        return task_service.create_task(payload, db)
    except BoardNotFoundError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error creating task: {e}", exc_info=True)
        raise internal_error()


@task_router.put("/tasks/{task_id}", response_model=TaskResponse)
async def update_task_endpoint(task_id: RecordIdPath, payload: TaskUpdate, db: Session = Depends(get_db)):
    """Partially update a task."""
    logger.info(f"PUT /tasks/{task_id} request")

    try:
        return task_service.update_task(task_id, payload, db)
    except TaskNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidInputError as e:
        raise as_validation_error(e)
    except Exception as e:
        logger.error(f"Error updating task {task_id}: {e}", exc_info=True)
        raise internal_error()


@task_router.delete("/tasks/{task_id}", response_model=DeleteResponse)
async def delete_task_endpoint(task_id: RecordIdPath, db: Session = Depends(get_db)) -> DeleteResponse:
    """Delete a task by ID.

    Raises:
        HTTPException: 404 if task not found, 500 for server errors
    """
    logger.info(f"DELETE /tasks/{task_id} request")

    try:
        result = task_service.delete_task(task_id, db)
        return DeleteResponse(message=result["message"], id=task_id)
    except TaskNotFoundError as e:
        logger.warning(f"Task not found: {e}")
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(e, exc_info=True)
        raise internal_error()
