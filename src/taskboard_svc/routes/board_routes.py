"""FastAPI routes for board operations."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.board import BoardCreate, BoardDetailResponse, BoardResponse, BoardUpdate
from ..schemas.common import DeleteResponse
from ..services import board_service
from ..services.errors import BoardNotFoundError, ConflictError
from .errors import ERROR_RESPONSES, internal_error
from .params import RecordIdPath

logger = logging.getLogger(__name__)

board_router = APIRouter(tags=["boards"], responses=ERROR_RESPONSES)


@board_router.get("/boards", response_model=List[BoardResponse])
async def list_boards_endpoint(db: Session = Depends(get_db)):
    """List all boards, newest first, with their task counts."""
    try:
        return board_service.list_boards(db)
    except Exception as e:
        logger.error(f"Error fetching boards: {e}", exc_info=True)
        raise internal_error()


@board_router.get("/boards/{board_id}", response_model=BoardDetailResponse)
async def get_board_endpoint(board_id: RecordIdPath, db: Session = Depends(get_db)):
    """Get one board with its ordered statuses."""
    try:
        return board_service.get_board(board_id, db)
    except BoardNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error fetching board {board_id}: {e}", exc_info=True)
        raise internal_error()


@board_router.post("/boards", response_model=BoardDetailResponse, status_code=201)
async def create_board_endpoint(payload: BoardCreate, db: Session = Depends(get_db)):
    """Create a board and its default statuses."""
    logger.info(f"POST /boards request - title: {payload.title}")

    try:
        return board_service.create_board(payload, db)
    except ConflictError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error creating board: {e}", exc_info=True)
        raise internal_error()


@board_router.put("/boards/{board_id}", response_model=BoardDetailResponse)
async def update_board_endpoint(board_id: RecordIdPath, payload: BoardUpdate, db: Session = Depends(get_db)):
    """Update a board's title and description."""
    logger.info(f"PUT /boards/{board_id} request")

    try:
        return board_service.update_board(board_id, payload, db)
    except BoardNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error updating board {board_id}: {e}", exc_info=True)
        raise internal_error()


@board_router.delete("/boards/{board_id}", response_model=DeleteResponse)
async def delete_board_endpoint(board_id: RecordIdPath, db: Session = Depends(get_db)):
    """Delete a board with all of its statuses and tasks."""
    logger.info(f"DELETE /boards/{board_id} request")

    try:
        return board_service.delete_board(board_id, db)
    except BoardNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error deleting board {board_id}: {e}", exc_info=True)
        raise internal_error()
