"""Mapping of service exceptions to HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from process_service.core.exceptions import (
    ConcurrentModificationError,
    IllegalTransitionError,
    PersistenceError,
    ProcessNotFoundError,
    ProcessValidationError,
    StoreTimeoutError,
)

logger = logging.getLogger(__name__)


async def _validation_error(request: Request, exc: ProcessValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": str(exc), "errors": exc.errors},
    )


async def _not_found(request: Request, exc: ProcessNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


async def _illegal_transition(request: Request, exc: IllegalTransitionError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={
            "detail": str(exc),
            "from_status": exc.from_status.value,
            "to_status": exc.to_status.value,
        },
    )


async def _concurrent_modification(request: Request, exc: ConcurrentModificationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={
            "detail": str(exc),
            "actual_updated_at": exc.actual_updated_at.isoformat(),
        },
    )


async def _store_timeout(request: Request, exc: StoreTimeoutError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_504_GATEWAY_TIMEOUT, content={"detail": str(exc)})


async def _persistence_error(request: Request, exc: PersistenceError) -> JSONResponse:
    logger.error(f"Persistence failure on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content={"detail": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    """Install handlers for every ProcessServiceError subtype."""
    app.add_exception_handler(ProcessValidationError, _validation_error)
    app.add_exception_handler(ProcessNotFoundError, _not_found)
    app.add_exception_handler(IllegalTransitionError, _illegal_transition)
    app.add_exception_handler(ConcurrentModificationError, _concurrent_modification)
    app.add_exception_handler(StoreTimeoutError, _store_timeout)
    app.add_exception_handler(PersistenceError, _persistence_error)
