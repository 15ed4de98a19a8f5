"""FastAPI routes for status (lane) operations."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.common import DeleteResponse
from ..schemas.status import StatusCreate, StatusResponse, StatusUpdate
from ..services import status_service
from ..services.errors import BoardNotFoundError, ConflictError, InvalidInputError, StatusNotFoundError
from .errors import ERROR_RESPONSES, as_validation_error, internal_error
from .params import RecordIdPath

logger = logging.getLogger(__name__)

status_router = APIRouter(tags=["statuses"], responses=ERROR_RESPONSES)


@status_router.get("/statuses/board/{board_id}", response_model=List[StatusResponse])
async def list_statuses_endpoint(board_id: RecordIdPath, db: Session = Depends(get_db)):
    """List a board's statuses by position."""
    try:
        return status_service.list_statuses_for_board(board_id, db)
    except Exception as e:
        logger.error(f"Error fetching statuses for board {board_id}: {e}", exc_info=True)
        raise internal_error()


@status_router.post("/statuses", response_model=StatusResponse, status_code=201)
async def create_status_endpoint(payload: StatusCreate, db: Session = Depends(get_db)):
    """Append a status to a board.

    A board ID in the body that does not resolve is a bad request, not a 404.
    """
    logger.info(f"POST /statuses request - board_id: {payload.board_id}, key: {payload.status_key}")

    try:
        return status_service.create_status(payload, db)
    except (BoardNotFoundError, ConflictError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error creating status: {e}", exc_info=True)
        raise internal_error()


@status_router.put("/statuses/{status_id}", response_model=StatusResponse)
async def update_status_endpoint(status_id: RecordIdPath, payload: StatusUpdate, db: Session = Depends(get_db)):
    """Update a status's label, color or position."""
    logger.info(f"PUT /statuses/{status_id} request")

    try:
        return status_service.update_status(status_id, payload, db)
    except StatusNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidInputError as e:
        raise as_validation_error(e)
    except ConflictError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error updating status {status_id}: {e}", exc_info=True)
        raise internal_error()


@status_router.delete("/statuses/{status_id}", response_model=DeleteResponse)
async def delete_status_endpoint(status_id: RecordIdPath, db: Session = Depends(get_db)):
    """Delete a status no task refers to."""
    logger.info(f"DELETE /statuses/{status_id} request")

    try:
        return status_service.delete_status(status_id, db)
    except StatusNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error deleting status {status_id}: {e}", exc_info=True)
        raise internal_error()
