"""
Repositorio base con operaciones CRUD comunes:
Este repositorio genérico proporciona operaciones de base de datos estándar
que se pueden reutilizar en todos los repositorios de entidades
"""

from typing import TypeVar, Generic, Optional, Type
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
import logging

from core.exceptions import NotFoundException, DatabaseException, ConflictException

logger = logging.getLogger(__name__)

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Repositorio genérico proporciona operaciones CRUD estándar

    Esta clase debe ser heredada por repositorios de entidades específicos.
    """

    def __init__(self, db: Session, model_class: Type[T], resource_name: str):
        """
        Inicializa el repositorio.

        Args:
            db: Sesión SQLAlchemy
            model_class: Clase del modelo ORM para este repositorio
            resource_name: Nombre legible del recurso para mensajes de error
        """
        self.db = db
        self.model_class = model_class
        self.resource_name = resource_name

    def get_by_id(self, id: int) -> Optional[T]:
        """
        Obtiene una entidad por su ID.

        Args:
            id: ID de la entidad

        Returns:
            La entidad o None si no existe
        """
        try:
            return self.db.get(self.model_class, id)
        except SQLAlchemyError as e:
            logger.error(f"Error getting {self.resource_name} by id {id}: {e}")
            raise DatabaseException(f"Error loading {self.resource_name}")

    def get_by_id_or_fail(self, id: int) -> T:
        """
        Obtiene una entidad por su ID o lanza una excepción si no se encuentra.

        Raises:
            NotFoundException: Si la entidad no existe
        """
        entity = self.get_by_id(id)
        if entity is None:
            raise NotFoundException(resource=self.resource_name)
        return entity

    def count(self) -> int:
        """Cuenta todas las entidades de la tabla."""
        try:
            return self.db.query(self.model_class).count()
        except SQLAlchemyError as e:
            logger.error(f"Error counting {self.resource_name}: {e}")
            raise DatabaseException(f"Error counting {self.resource_name}")

    def create(self, entity: T) -> T:
        """
        Crea una nueva entidad (flush, sin commit).

        Raises:
            ConflictException: Si se viola una restricción de unicidad
            DatabaseException: Ante cualquier otro error de base de datos
        """
        try:
            self.db.add(entity)
            self.db.flush()
            self.db.refresh(entity)
            return entity
        except IntegrityError as e:
            logger.warning(f"Integrity error creating {self.resource_name}: {e.orig}")
            self.db.rollback()
            raise ConflictException(f"{self.resource_name} already exists")
        except SQLAlchemyError as e:
            logger.error(f"Error creating {self.resource_name}: {e}")
            self.db.rollback()
            raise DatabaseException(f"Error creating {self.resource_name}")

    def update(self, entity: T) -> T:
        """
        Persiste los cambios de una entidad existente (flush, sin commit).
        """
        try:
            self.db.add(entity)
            self.db.flush()
            self.db.refresh(entity)
            return entity
        except IntegrityError as e:
            logger.warning(f"Integrity error updating {self.resource_name}: {e.orig}")
            self.db.rollback()
            raise ConflictException(f"{self.resource_name} violates a uniqueness constraint")
        except SQLAlchemyError as e:
            logger.error(f"Error updating {self.resource_name}: {e}")
            self.db.rollback()
            raise DatabaseException(f"Error updating {self.resource_name}")

    def delete(self, entity: T) -> None:
        """
        Elimina físicamente una entidad. Las filas dependientes caen por
        ON DELETE CASCADE / SET NULL en la base de datos.
        """
        try:
            self.db.delete(entity)
            self.db.flush()
        except SQLAlchemyError as e:
            logger.error(f"Error deleting {self.resource_name}: {e}")
            self.db.rollback()
            raise DatabaseException(f"Error deleting {self.resource_name}")

    def exists(self, id: int) -> bool:
        """
        Verifica si una entidad existe por su ID.
        """
        return self.get_by_id(id) is not None

    def commit(self) -> None:
        """Realiza el commit de la transacción actual."""
        try:
            self.db.commit()
        except IntegrityError as e:
            logger.warning(f"Integrity error on commit ({self.resource_name}): {e.orig}")
            self.db.rollback()
            raise ConflictException(f"{self.resource_name} already exists")
        except SQLAlchemyError as e:
            logger.error(f"Error committing transaction: {e}")
            self.db.rollback()
            raise DatabaseException("Error saving changes to the database")

    def rollback(self) -> None:
        """Realiza el rollback de la transacción actual."""
        self.db.rollback()

    def refresh(self, entity: T) -> T:
        """
        Refresca una entidad desde la base de datos.
        """
        self.db.refresh(entity)
        return entity
