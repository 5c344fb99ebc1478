"""
App-wide exception handlers.

install_exception_handlers() is called once on the application object, so
every route, including ones added later, gets the same translation:

- DomainError -> its own status and message
- request validation failures -> 400 with the BAD_REQUEST message
- HTTP errors raised by routing (404 route, 405 method) -> same status
- anything else -> 500 with a generic message, never the exception text

All error bodies have the shape {"message": str}.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from product_catalog.schemas.enums import ErrorCode
from product_catalog.services.exceptions import DomainError

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the standard error body."""
    return JSONResponse(status_code=status_code, content={"message": message})


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Convert DomainError to a response with the error's status.

    Client errors (4xx) are logged as warnings, store and server errors as
    errors; both keep the exception and its cause chain.
    """
    level = logging.ERROR if exc.status >= 500 else logging.WARNING
    logger.log(
        level,
        f"{request.method} {request.url.path} failed: "
        f"status={int(exc.status)} code={exc.code} message={exc.message!r}",
        exc_info=exc,
    )
    return error_response(int(exc.status), exc.message)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Convert malformed request input to a 400 response."""
    logger.warning(f"{request.method} {request.url.path} rejected: {exc.errors()}")
    code = ErrorCode.BAD_REQUEST
    return error_response(int(code.default_status), code.default_message)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Keep routing errors (unknown path, wrong method) in the standard shape."""
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert any other failure to a generic 500 response."""
    logger.exception(
        f"{request.method} {request.url.path} failed unexpectedly",
        exc_info=exc,
    )
    code = ErrorCode.UNEXPECTED
    return error_response(int(code.default_status), code.default_message)


def install_exception_handlers(app: FastAPI) -> None:
    """Register the handlers above on the whole application."""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
