"""
Maps domain errors to HTTP responses.

Services raise DomainError subclasses and never build HTTP responses; this
module is the only place status codes are chosen. Bodies carry the error
code, the field, and a user-safe message. Internal details stay in the logs.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.core.errors import (
    DependencyUnavailableError,
    DomainError,
    DuplicateKeyError,
    RecordNotFoundError,
    ValidationError,
)
from app.core.logging import get_logger
from app.schemas.error import ErrorResponse

logger = get_logger(__name__)

STATUS_BY_ERROR = {
    ValidationError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    DuplicateKeyError: status.HTTP_409_CONFLICT,
    DependencyUnavailableError: status.HTTP_503_SERVICE_UNAVAILABLE,
    RecordNotFoundError: status.HTTP_404_NOT_FOUND,
}


def status_for(error: DomainError) -> int:
    for error_type, status_code in STATUS_BY_ERROR.items():
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error("request_dependency_failed", code=exc.code.value)
    return JSONResponse(status_code=status_code, content=ErrorResponse(**exc.to_dict()).model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
