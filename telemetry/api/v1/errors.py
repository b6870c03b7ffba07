"""
Maps the domain error taxonomy onto HTTP responses.

Client errors echo the error message; server errors are logged with their
traceback and answered with a generic message so storage details never leak.
"""

# Standard library imports
import logging
from typing import Dict, Type

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Local application imports
from ...domain.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    TelemetryError,
    UnauthorizedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES: Dict[Type[TelemetryError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    UnauthorizedError: status.HTTP_401_UNAUTHORIZED,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
}

INTERNAL_ERROR_MESSAGE = "Internal server error"


def status_code_for(exception: TelemetryError) -> int:
    for error_type in type(exception).__mro__:
        if error_type in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def telemetry_exception_handler(request: Request, exception: TelemetryError) -> JSONResponse:
    status_code = status_code_for(exception)

    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(
            f"{type(exception).__name__} on {request.method} {request.url.path}: {exception.message}",
            exc_info=exception,
        )
        return JSONResponse(status_code=status_code, content={"detail": INTERNAL_ERROR_MESSAGE})

    headers = {"WWW-Authenticate": "Bearer"} if status_code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(status_code=status_code, content={"detail": exception.message}, headers=headers)


async def request_validation_exception_handler(request: Request, exception: RequestValidationError) -> JSONResponse:
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exception.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request", "errors": errors},
    )


def register_exception_handlers(application: FastAPI) -> None:
    application.add_exception_handler(TelemetryError, telemetry_exception_handler)
    application.add_exception_handler(RequestValidationError, request_validation_exception_handler)
