"""Error mapping shared by every router

Every error response carries a single ``error`` key. Validation failures are
reported as 400 rather than FastAPI's default 422.
"""
import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskboard.schemas import ErrorResponse

logger = logging.getLogger(__name__)


@contextmanager
def persistence_guard(db: Session, detail: str, **context) -> Iterator[None]:
    """Turn database failures inside the block into a logged, generic 500.

    ``HTTPException`` raised inside the block passes through untouched.
    """
    try:
        yield
    except SQLAlchemyError:
        db.rollback()
        details = ", ".join(f"{key}={value}" for key, value in context.items())
        logger.exception("%s (%s)", detail, details or "no context")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


def _path_error_message(param: str) -> str:
    entity = param[:-3] if param.endswith("_id") else param
    return f"Invalid {entity.replace('_', ' ')} ID"


def validation_error_message(exc: RequestValidationError) -> str:
    for error in exc.errors():
        loc = error.get("loc") or ()
        if len(loc) >= 2 and loc[0] == "path":
            return _path_error_message(str(loc[1]))
    return "Invalid request body"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = validation_error_message(exc)
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=ErrorResponse(error=message).model_dump())


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error="Internal server error").model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
