"""Transport-level error type and handlers."""

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from rfp_assistant.models.responses import ErrorResponse
from rfp_assistant.utils.logging import get_logger


logger = get_logger(__name__)

INVALID_REQUEST_MESSAGE = "Invalid request."


class APIError(Exception):
    """A classified failure, rendered as ``{"error": message}``."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    return _error_response(exc.status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Request validation failed", path=request.url.path, errors=exc.errors())
    return _error_response(400, INVALID_REQUEST_MESSAGE)
