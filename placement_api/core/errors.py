"""
Error handling - every failure reaches the client as HTTP 500 {"error": ...}.

Store errors carry the database driver's message verbatim. Request parsing
errors use the same body so clients only ever see one error shape.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DBAPIError, SQLAlchemyError

logger = logging.getLogger(__name__)


def store_error_message(exc: SQLAlchemyError) -> str:
    """Return the driver's own message, without SQLAlchemy's statement dump."""
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig).strip()
    return str(exc)


def error_response(message: str) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": message})


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    message = store_error_message(exc)
    logger.error("Store operation failed on %s %s: %s", request.method, request.url.path, message)
    return error_response(message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    logger.error("Invalid request on %s %s: %s", request.method, request.url.path, message)
    return error_response(message)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
