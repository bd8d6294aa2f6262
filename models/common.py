"""
Modelos comunes de respuesta para la API.

Las respuestas exitosas son objetos o arreglos JSON sin envoltura; los errores
siempre tienen la forma ``{"error": "..."}``.
"""
from datetime import datetime, timezone
from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Respuesta simple con mensaje."""
    message: str = Field(..., description="Mensaje descriptivo de la operación")


class ErrorResponse(BaseModel):
    """Respuesta estándar de error."""
    error: str = Field(..., description="Mensaje de error legible")


class HealthCheckResponse(BaseModel):
    """Respuesta del health check."""
    status: str = Field(..., description="Estado general (healthy/unhealthy)")
    service: str = Field(..., description="Nombre del servicio")
    version: str = Field(..., description="Versión de la API")
    database: str = Field(..., description="Estado de la base de datos")
    environment: str = Field(..., description="Entorno (production/development)")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


def normalize_email(value: str) -> str:
    """Normaliza un email (trim + minúsculas) y hace una validación mínima."""
    email = value.strip().lower()
    local, _, domain = email.partition("@")
    if not local or not domain or " " in email:
        raise ValueError("must be a valid email address")
    return email


def blank_to_none(value):
    """Un query param vacío ("?status=") cuenta como ausente."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def strip_text(value):
    if isinstance(value, str):
        return value.strip()
    return value


# respuestas documentadas en OpenAPI para los códigos de error comunes
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Datos inválidos o conflicto"},
    404: {"model": ErrorResponse, "description": "Recurso no encontrado"},
}
