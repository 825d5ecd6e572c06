"""API error type and the handlers that render it as ``{message, error}`` JSON."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from assignment_service.application.schemas import ErrorResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Raised by endpoints to short-circuit with a status code and message."""

    def __init__(self, status_code: int, message: str, error: str | None = None):
        self.status_code = status_code
        self.message = message
        self.error = error
        super().__init__(message)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    body = ErrorResponse(message=exc.message, error=exc.error)
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(exclude_none=True),
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed JSON, wrong field types or a non-integer id are client errors."""
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    body = ErrorResponse(message="Invalid request.", error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump(exclude_none=True),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
