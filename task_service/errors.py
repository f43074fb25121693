"""Exception handlers that render errors as plain text."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

METHOD_NOT_ALLOWED_MESSAGE = "Invalid request method"
INVALID_BODY_MESSAGE = "Invalid request body"
INVALID_ID_MESSAGE = "Invalid task ID"


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> PlainTextResponse:
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        logger.warning("Method %s not allowed on %s", request.method, request.url.path)
        return PlainTextResponse(
            METHOD_NOT_ALLOWED_MESSAGE,
            status_code=exc.status_code,
            headers=exc.headers,
        )
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> PlainTextResponse:
    logger.warning("Validation error on %s %s: %s", request.method, request.url.path, exc.errors())
    if any(tuple(error.get("loc", ()))[:1] == ("path",) for error in exc.errors()):
        message = INVALID_ID_MESSAGE
    else:
        message = INVALID_BODY_MESSAGE
    return PlainTextResponse(message, status_code=status.HTTP_400_BAD_REQUEST)


def register_error_handlers(app: FastAPI) -> None:
    """Register plain-text error handlers on the FastAPI app.

    Args:
        app: FastAPI application instance.
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
