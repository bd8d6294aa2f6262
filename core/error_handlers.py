"""
Handlers globales de excepciones.

Todas las respuestas de error tienen la forma ``{"error": "<mensaje>"}``; las
rutas no necesitan try/except propios.
"""

import logging
from typing import Any, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.exceptions import AppException

logger = logging.getLogger(__name__)

_LOCATIONS = {"body", "query", "path", "header", "cookie"}
INTERNAL_ERROR = "Internal server error"


def _field_name(loc: Sequence[Any]) -> str:
    parts = [str(part) for part in loc if part not in _LOCATIONS]
    return ".".join(parts)


def validation_message(errors: Sequence[dict]) -> str:
    """
    Mensaje legible para un RequestValidationError.

    Los campos faltantes se agrupan ("Missing required fields: a, b"); si no
    falta ninguno se usa el primer error ("field: msg").
    """
    missing = [_field_name(e.get("loc", ())) for e in errors if e.get("type") == "missing"]
    missing = [name for name in missing if name]
    if missing:
        return f"Missing required fields: {', '.join(missing)}"
    if any(e.get("type") == "missing" for e in errors):
        return "Request body is required"
    if not errors:
        return "Invalid request"

    first = errors[0]
    field = _field_name(first.get("loc", ()))
    msg = first.get("msg", "Invalid value")
    return f"{field}: {msg}" if field else msg


def _internal_error_message(exc: Exception, debug: bool) -> str:
    # el detalle interno solo se expone en modo debug
    if debug:
        detail = getattr(exc, "message", exc)
        return f"{INTERNAL_ERROR}: {detail}"
    return INTERNAL_ERROR


def register_exception_handlers(app: FastAPI, debug: bool = False) -> None:
    """Registra los handlers en la app."""

    @app.exception_handler(AppException)
    async def handle_app_exception(request: Request, exc: AppException):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path}: {exc.message} {exc.details}")
            return JSONResponse(
                status_code=exc.status_code, content={"error": _internal_error_message(exc, debug)}
            )
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        message = validation_message(exc.errors())
        logger.info(f"Validation error on {request.method} {request.url.path}: {message}")
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(status_code=500, content={"error": _internal_error_message(exc, debug)})
