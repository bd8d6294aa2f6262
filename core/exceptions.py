"""
Excepciones personalizadas para la aplicación.

Estas excepciones proporcionan una forma estructurada de manejar errores de lógica de negocio
y mapearlos a códigos de estado HTTP apropiados en la capa de API. Los handlers globales
de main.py las renderizan como ``{"error": message}``.
"""

from typing import Optional, Any


class AppException(Exception):
    """Excepción base para todos los errores de la aplicación."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(AppException):
    """Entrada faltante o mal formada."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        if field:
            details = details or {}
            details["field"] = field
        super().__init__(message=message, status_code=400, details=details)


class NotFoundException(AppException):
    """Excepción cuando un recurso referenciado no existe."""

    def __init__(
        self,
        resource: str,
        identifier: Optional[Any] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        message = f"{resource} not found"
        if identifier is not None:
            message += f": {identifier}"
        super().__init__(message=message, status_code=404, details=details)


class ConflictException(AppException):
    """Violación de unicidad (email ya registrado, favorito duplicado)."""

    def __init__(
        self,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ):
        # 400 y no 409: es lo que el frontend espera para duplicados
        super().__init__(message=message, status_code=400, details=details)


class InvalidStateException(ConflictException):
    """El recurso existe pero su estado no permite la operación."""


class UnauthorizedException(AppException):
    """Excepción cuando la autenticación es requerida o falla."""

    def __init__(
        self,
        message: str = "Not authenticated",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message=message, status_code=401, details=details)


class DatabaseException(AppException):
    """Excepción para errores de base de datos."""

    def __init__(
        self,
        message: str = "Database error",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message=message, status_code=500, details=details)
