"""Error Handlers — map store and request failures onto the item API's JSON envelope.

Invariants:
    - NotFoundError → 404, logged at WARNING (caller logic error, not a fault)
    - PersistenceError → 503, logged at ERROR with the failed store operation
    - A malformed item id (path validation) → 400 VALIDATION_ERROR with field details
    - Anything else (e.g. a store never wired by the lifespan) → 500, no internals leaked

Design Decisions:
    - Log extras carry item_id/operation from ErrorContext so JSONFormatter surfaces them
    - Extracted from main.py to keep the entry point small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from itemstore.core.errors import ItemStoreError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register the item API's exception handlers on the FastAPI app."""
    app.add_exception_handler(ItemStoreError, _item_store_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unexpected_error_handler)


async def _item_store_error_handler(request: Request, exc: ItemStoreError):
    level = logging.ERROR if exc.severity == ErrorSeverity.CRITICAL else logging.WARNING
    logger.log(
        level,
        f"{exc.code} on {request.method} {request.url.path}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "item_id": exc.context.item_id,
            "operation": exc.context.operation,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def _validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    logger.warning(
        f"Validation error on {request.url.path}: {errors}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    bad_item_id = any(e["loc"][-1] == "item_id" for e in errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Item id must be a UUID" if bad_item_id else "Invalid request data",
                "category": "validation",
                "severity": ErrorSeverity.ERROR.value,
                "details": [
                    {
                        "field": ".".join(str(loc) for loc in e["loc"]),
                        "message": e["msg"],
                        "type": e["type"],
                    }
                    for e in errors
                ],
            },
        },
    )


async def _unexpected_error_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
                "category": "internal",
                "severity": ErrorSeverity.CRITICAL.value,
            },
        },
    )
