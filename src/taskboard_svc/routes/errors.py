"""Translation of service exceptions into HTTP errors."""

from fastapi import HTTPException
from fastapi.exceptions import RequestValidationError

from ..schemas.common import ErrorResponse
from ..services.errors import InvalidInputError

INTERNAL_ERROR_MESSAGE = "Internal server error"

# Documented on every router; bodies are built by the handlers in api.app
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Validation failed or the request conflicts with existing data"},
    404: {"model": ErrorResponse, "description": "Resource not found"},
    500: {"model": ErrorResponse, "description": "Unexpected server error"},
}


def as_validation_error(error: InvalidInputError) -> RequestValidationError:
    """Wrap a service-level input error so it renders like a schema validation failure."""
    return RequestValidationError([
        {"loc": ("body",), "msg": str(error), "type": "value_error"}
    ])


def internal_error() -> HTTPException:
    return HTTPException(status_code=500, detail=INTERNAL_ERROR_MESSAGE)
