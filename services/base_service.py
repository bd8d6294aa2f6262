"""
Servicio base con operaciones de lógica de negocio comunes.
Esta clase proporciona una base para las clases de servicio que implementan
la lógica de negocio y coordinan las operaciones del repositorio.
"""

from typing import TypeVar, Generic
import logging

logger = logging.getLogger(__name__)

# Type variables
T = TypeVar('T')  # ORM Model
R = TypeVar('R')  # Repository


class BaseService(Generic[T, R]):
    """
    Servicio base que proporciona operaciones lógicas de negocio comunes.
    Esta clase debe ser heredada por servicios de entidades específicas.
    """

    def __init__(self, repository: R):
        """
        Inicializa el servicio.

        Args:
            repository: The repository instance for data access
        """
        self.repository = repository

    def get_by_id_or_fail(self, id: int) -> T:
        """
        Obtiene una entidad por su ID o lanza una excepción si no se encuentra.

        Raises:
            NotFoundException: If entity is not found
        """
        return self.repository.get_by_id_or_fail(id)

    def delete(self, id: int) -> None:
        """
        Elimina físicamente una entidad y hace commit.

        Raises:
            NotFoundException: If entity is not found
        """
        entity = self.get_by_id_or_fail(id)
        self.repository.delete(entity)
        self.repository.commit()
        logger.info(f"{self.repository.resource_name} {id} deleted")
