"""
Repositorio para la entidad User.
Gestiona todas las operaciones de base de datos relacionadas con los usuarios.
"""

from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from repositories.base_repository import BaseRepository
from database.models import UserORM
from core.exceptions import DatabaseException
import logging

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[UserORM]):
    """Repositorio para la gestión de usuarios."""

    def __init__(self, db: Session):
        """
        Inicializa el repositorio de usuarios.

        Args:
            db: SQLAlchemy session
        """
        super().__init__(db, UserORM, "User")

    def find_by_email(self, email: str) -> Optional[UserORM]:
        """
        Busca un usuario por email.

        Args:
            email: Email normalizado

        Returns:
            UserORM o None si no se encuentra
        """
        try:
            return self.db.query(UserORM).filter(
                UserORM.email == email
            ).one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error finding user by email: {e}")
            raise DatabaseException("Error looking up user")

    def exists_email(self, email: str) -> bool:
        """
        Verifica si un email ya está registrado (chequeo consultivo; la
        restricción UNIQUE es la fuente de verdad).
        """
        try:
            return self.db.query(UserORM.id).filter(
                UserORM.email == email
            ).first() is not None
        except SQLAlchemyError as e:
            logger.error(f"Error checking email: {e}")
            raise DatabaseException("Error checking email")
