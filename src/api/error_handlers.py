"""Error mapper: every failure a handler surfaces becomes a JSON body with an `error` key.

- PhonebookError -> 400, discriminated on ErrorKind
- RequestValidationError (bad JSON, wrong field types) -> 400
- unmatched route or method -> 404 "unknown endpoint"
- anything else -> logged, 500
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from phonebook.domain import ErrorKind, PhonebookError

logger = logging.getLogger(__name__)

MALFORMATTED_ID = "malformatted id"
UNKNOWN_ENDPOINT = "unknown endpoint"


def error_body(message: str) -> dict[str, str]:
    return {"error": message}


def phonebook_error_response(exc: PhonebookError) -> JSONResponse:
    if exc.kind is ErrorKind.MALFORMED_ID:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content=error_body(MALFORMATTED_ID)
        )
    if exc.kind is ErrorKind.VALIDATION:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content=error_body(exc.message)
        )
    raise ValueError(f"Unmapped error kind: {exc.kind}")


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(PhonebookError)
    async def phonebook_error_handler(request: Request, exc: PhonebookError):
        logger.info("%s %s: %s", request.method, request.url.path, exc.message)
        return phonebook_error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError
    ):
        errors = exc.errors()
        message = errors[0]["msg"] if errors else "invalid request"
        logger.info("Invalid request body on %s: %s", request.url.path, errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content=error_body(message)
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (
            status.HTTP_404_NOT_FOUND,
            status.HTTP_405_METHOD_NOT_ALLOWED,
        ):
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content=error_body(UNKNOWN_ENDPOINT),
            )
        return JSONResponse(
            status_code=exc.status_code, content=error_body(str(exc.detail))
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("internal server error"),
        )
