""" Utilidades principales y componentes compartidos para la aplicación.

Este paquete contiene:

- Excepciones personalizadas
- Hashing y verificación de contraseñas
- Composición de consultas con filtros opcionales
- Funciones auxiliares
"""

from .exceptions import (
    AppException,
    ValidationException,
    NotFoundException,
    ConflictException,
    InvalidStateException,
    UnauthorizedException,
    DatabaseException,
)
from .security import (
    hash_password,
    verify_password,
)
from .query_filters import (
    compose_filtered_query,
    apply_filters,
    apply_pagination,
    is_present,
    equals,
    iequals,
    search,
)
from .utils import (
    enum_to_value,
    mask_database_url,
)

__all__ = [
    # Excepciones
    "AppException",
    "ValidationException",
    "NotFoundException",
    "ConflictException",
    "InvalidStateException",
    "UnauthorizedException",
    "DatabaseException",
    # seguridad
    "hash_password",
    "verify_password",
    # filtros
    "compose_filtered_query",
    "apply_filters",
    "apply_pagination",
    "is_present",
    "equals",
    "iequals",
    "search",
    # utils
    "enum_to_value",
    "mask_database_url",
]
