# app/core/error_handlers.py
"""
Exception handlers that render application errors as JSON envelopes.

Every error raised below the router surfaces here; nothing is retried
or masked on the way up.
"""
from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.config.logging import get_logger
from app.core.exceptions import BaseAppException, ErrorCode

logger = get_logger(__name__)


def _envelope(body: dict) -> dict:
    return {"success": False, **body}


async def app_exception_handler(request: Request, exc: BaseAppException) -> JSONResponse:
    request_id = getattr(request.state, "request_id", None)
    if exc.status_code >= 500:
        logger.error(
            f"{exc.__class__.__name__} on {request.method} {request.url.path}: {exc.message}",
            exc_info=exc,
            extra={"request_id": request_id},
        )
    else:
        logger.info(
            f"{exc.__class__.__name__} on {request.method} {request.url.path}: {exc.message}",
            extra={"request_id": request_id},
        )
    return JSONResponse(status_code=exc.status_code, content=_envelope(exc.to_dict()))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    field_errors: dict[str, list[str]] = {}
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        field_errors.setdefault(location or "body", []).append(error.get("msg", "Invalid value"))

    body = {
        "error": {
            "message": "Validation failed",
            "code": ErrorCode.VALIDATION_ERROR.value,
            "details": {"field_errors": field_errors},
            "type": "ValidationError",
        }
    }
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=_envelope(body))


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the application exception handlers to the FastAPI app."""
    app.add_exception_handler(BaseAppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
