"""FastAPI application for the taskboard_svc API.

This module creates and configures the FastAPI application instance
with all routes and the JSON error handlers.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .. import config
from ..database import check_db_connection, init_db
from ..logging_config import setup_logging
from ..routes import board_router, status_router, task_router
from ..routes.errors import INTERNAL_ERROR_MESSAGE
from ..schemas.common import ErrorResponse, FieldError

logger = logging.getLogger(__name__)

# Request locations that prefix every validation error path
_ERROR_LOCATIONS = {"body", "path", "query", "header", "cookie"}


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(config.LOG_LEVEL)
    if config.AUTO_CREATE_TABLES:
        init_db()
    logger.info("Task board API started")
    yield


app = FastAPI(
    title="Task Board Service API",
    description="REST API for boards, status lanes and tasks",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(board_router, prefix="/api")
app.include_router(status_router, prefix="/api")
app.include_router(task_router, prefix="/api")


def _field_name(loc) -> str | None:
    parts = [str(part) for part in loc]
    if parts and parts[0] in _ERROR_LOCATIONS:
        parts = parts[1:]
    return ".".join(parts) or None


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = [
        FieldError(
            field=_field_name(err.get("loc", ())),
            message=str(err.get("msg", "")),
            type=str(err.get("type", "unknown")),
        )
        for err in exc.errors()
    ]
    logger.warning(f"{request.method} {request.url.path} rejected: {[(e.field, e.message) for e in errors]}")
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(message="Validation failed", errors=errors).model_dump(),
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(message=str(exc.detail)).model_dump(exclude_unset=True),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(message=INTERNAL_ERROR_MESSAGE).model_dump(exclude_unset=True),
    )


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "database": check_db_connection()}
