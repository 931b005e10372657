"""
Store failures and their translation into HTTP responses.

Service operations that write to the store return a ``StoreFailure``
instead of raising, so the caller decides what to do with it.  Paths
with nothing to return a failure alongside raise ``StoreError``.  At the
HTTP boundary every failure, and every request body that does not match
its schema, goes through ``failure_response``; there is no other place
where these errors become status codes.
"""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

VALIDATION = "validation"
STORE = "store"


@dataclass(frozen=True)
class StoreFailure:
    """Describes why a store operation did not complete.

    ``kind`` is ``"validation"`` when the store rejected the data
    (constraint violation) and ``"store"`` for anything else.
    """

    kind: str
    operation: str
    message: str


class StoreError(Exception):
    """Raised by code paths that cannot return a ``StoreFailure``."""

    def __init__(self, failure: StoreFailure) -> None:
        super().__init__(failure.message)
        self.failure = failure


def failure_from_exception(operation: str, exc: Exception) -> StoreFailure:
    """Classify a database exception raised during ``operation``."""
    if isinstance(exc, sqlite3.IntegrityError):
        return StoreFailure(kind=VALIDATION, operation=operation, message=str(exc))
    return StoreFailure(kind=STORE, operation=operation, message=str(exc))


def failure_from_validation(operation: str, exc: RequestValidationError) -> StoreFailure:
    """Describe a request body that did not match its schema.

    Each problem is reported as ``field: message``; problems are joined
    with ``"; "``.
    """
    problems = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "path", "query")]
        field = ".".join(loc)
        problems.append(f"{field}: {err.get('msg')}" if field else str(err.get("msg")))
    return StoreFailure(kind=VALIDATION, operation=operation, message="; ".join(problems))


def failure_response(failure: StoreFailure) -> JSONResponse:
    """Translate a failure into the JSON error body returned to clients."""
    if failure.kind == VALIDATION:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": failure.message},
        )
    logger.error("Store failure during %s: %s", failure.operation, failure.message)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "internal store error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach the store, request validation and HTTP error handlers.

    Request bodies or path parameters that do not match their schema
    are answered with 400 and an ``{"error": ...}`` body, the same
    shape the store's own rejections use.
    """

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
        return failure_response(exc.failure)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return failure_response(failure_from_validation(request.url.path, exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
            return JSONResponse(
                status_code=exc.status_code,
                content={"error": "unknown endpoint"},
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )
