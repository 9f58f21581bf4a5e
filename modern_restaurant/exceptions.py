"""Reservation errors and their HTTP translation"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

logger = structlog.get_logger()


class ReservationError(Exception):
    """Base class for errors surfaced to API clients"""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(ReservationError):
    """Client input failed a precondition"""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ReservationError):
    """No reservation matches the identifier"""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "Reservation not found"):
        super().__init__(message)


class StorageError(ReservationError):
    """The underlying read or write failed; message is safe to show clients"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
    )


async def reservation_error_handler(request: Request, exc: ReservationError) -> JSONResponse:
    # StorageError detail is logged where it is raised
    return error_response(exc.status_code, exc.message)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    logger.info("Malformed request", path=request.url.path, errors=str(errors))

    message = "Invalid request"
    if errors:
        loc = errors[0].get("loc", ())
        field = ".".join(str(part) for part in loc if part not in ("body", "path", "query"))
        if field:
            message = f"Invalid value for {field}"
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


EXCEPTION_HANDLERS = {
    ReservationError: reservation_error_handler,
    RequestValidationError: request_validation_error_handler,
    StarletteHTTPException: http_exception_handler,
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
