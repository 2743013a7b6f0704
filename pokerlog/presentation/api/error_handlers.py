"""
PokerLog – API Error Handlers
===============================
Traduce excepciones a respuestas HTTP con cuerpo
{"error": <code>, "message": <texto>}.

    ValidationError / body inválido → 400
    NotFoundError                   → 404
    ConflictError                   → 409
    cualquier otra cosa             → 500 (opaco, se loguea con traceback)
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pokerlog.domain.exceptions.domain_errors import (
    ConflictError,
    DomainError,
    InternalFault,
    NotFoundError,
    ValidationError,
)
from pokerlog.shared.logging.logger import get_logger

logger = get_logger("api.errors")

_STATUS_BY_ERROR = {
    ValidationError: 400,
    NotFoundError: 404,
    ConflictError: 409,
    InternalFault: 500,
}


def status_for(exc: DomainError) -> int:
    for error_type, status in _STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return status
    return 400


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status = status_for(exc)
    if status >= 500:
        logger.error("%s %s → %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=status, content=InternalFault().to_dict())
    return JSONResponse(status_code=status, content=exc.to_dict())


async def request_validation_handler(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Request inválido"
    error = ValidationError(message)
    logger.warning("%s %s → 400 %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content=error.to_dict())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Error inesperado en %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=InternalFault().to_dict())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
