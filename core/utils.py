"""
Funciones de utilidad generales.
"""

from typing import Any
from enum import Enum as PyEnum


def enum_to_value(value: Any) -> Any:
    """
    Convierte un Enum a su valor, o devuelve el valor sin cambios.

    Args:
        value: Valor a convertir

    Returns:
        Enum.value si value es un Enum, de lo contrario el valor sin cambios
    """
    if isinstance(value, PyEnum):
        return value.value
    return value


def mask_database_url(url: str) -> str:
    """
    Oculta las credenciales de una URL de base de datos para logs.

    Args:
        url: URL completa

    Returns:
        URL sin usuario/contraseña
    """
    if "@" in url:
        scheme, rest = url.split("://", 1) if "://" in url else ("", url)
        host = rest.split("@", 1)[1]
        return f"{scheme}://***@{host}" if scheme else f"***@{host}"
    return url
