"""
Error types and exception handlers.

Routing misses and unsupported methods are answered with the same
small HTML page, which keeps the "anything else is a 404" contract
even where Starlette would normally answer 405.  Problems with a
request body are raised as ``BodyError`` subclasses from the body
reader and turned into JSON responses here.  Any other exception that
escapes a handler is logged and answered with a 500 HTML page so a
single bad request never takes the server down.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)

NOT_FOUND_HTML = "<h1>404 | Not Found</h1>"
SERVER_ERROR_HTML = "<h1>500 | Internal Server Error</h1>"


class BodyError(Exception):
    """Base class for request body problems."""

    status_code = status.HTTP_400_BAD_REQUEST
    status_text = "Bad Request"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidBody(BodyError):
    """The body is not UTF-8 JSON or does not have the expected shape."""


class PayloadTooLarge(BodyError):
    """The body exceeds the configured size limit."""

    status_code = status.HTTP_413_CONTENT_TOO_LARGE
    status_text = "Payload Too Large"


def not_found_response() -> HTMLResponse:
    return HTMLResponse(NOT_FOUND_HTML, status_code=status.HTTP_404_NOT_FOUND)


def server_error_response() -> HTMLResponse:
    return HTMLResponse(SERVER_ERROR_HTML, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Render 404 and 405 as the HTML fallback page."""
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return not_found_response()
    return await http_exception_handler(request, exc)


async def body_error_handler(request: Request, exc: BodyError) -> JSONResponse:
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": exc.status_text, "message": exc.message},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> HTMLResponse:
    logger.error(
        "Unhandled error while serving %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return server_error_response()


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the handlers above to ``app``."""
    app.add_exception_handler(StarletteHTTPException, not_found_handler)
    app.add_exception_handler(BodyError, body_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
