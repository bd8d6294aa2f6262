"""
Capa de servicios: lógica de negocio.

Los servicios coordinan repositorios, aplican las reglas del dominio y
convierten entidades ORM en modelos de respuesta.
"""

from .base_service import BaseService
from .user_service import UserService
from .pet_service import PetService
from .favorite_service import FavoriteService
from .adoption_service import AdoptionService

__all__ = [
    "BaseService",
    "UserService",
    "PetService",
    "FavoriteService",
    "AdoptionService",
]
