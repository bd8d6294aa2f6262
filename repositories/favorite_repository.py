"""
Repositorio para la entidad Favorite (par usuario/pet).
"""

from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from repositories.base_repository import BaseRepository
from database.models import FavoriteORM, PetORM
from core.exceptions import DatabaseException
import logging

logger = logging.getLogger(__name__)


class FavoriteRepository(BaseRepository[FavoriteORM]):
    """Repositorio de favoritos."""

    def __init__(self, db: Session):
        super().__init__(db, FavoriteORM, "Favorite")

    def find(self, user_id: int, pet_id: int) -> Optional[FavoriteORM]:
        """Busca el favorito de un par (user_id, pet_id)."""
        try:
            return self.db.query(FavoriteORM).filter(
                FavoriteORM.user_id == user_id,
                FavoriteORM.pet_id == pet_id,
            ).one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error finding favorite ({user_id}, {pet_id}): {e}")
            raise DatabaseException("Error looking up favorite")

    def is_favorite(self, user_id: int, pet_id: int) -> bool:
        return self.find(user_id, pet_id) is not None

    def find_pets_by_user(self, user_id: int) -> List[PetORM]:
        """
        Pets favoritos de un usuario, del favorito más reciente al más antiguo.
        """
        try:
            return (
                self.db.query(PetORM)
                .join(FavoriteORM, FavoriteORM.pet_id == PetORM.id)
                .filter(FavoriteORM.user_id == user_id)
                .order_by(FavoriteORM.created_at.desc(), FavoriteORM.id.desc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error listing favorites of user {user_id}: {e}")
            raise DatabaseException("Error listing favorites")

    def find_pet_ids_by_user(self, user_id: int) -> List[int]:
        try:
            rows = (
                self.db.query(FavoriteORM.pet_id)
                .filter(FavoriteORM.user_id == user_id)
                .order_by(FavoriteORM.created_at.desc(), FavoriteORM.id.desc())
                .all()
            )
            return [pet_id for (pet_id,) in rows]
        except SQLAlchemyError as e:
            logger.error(f"Error listing favorite ids of user {user_id}: {e}")
            raise DatabaseException("Error listing favorites")

    def count_by_pet(self, pet_id: int) -> int:
        try:
            return self.db.query(FavoriteORM).filter(FavoriteORM.pet_id == pet_id).count()
        except SQLAlchemyError as e:
            logger.error(f"Error counting favorites of pet {pet_id}: {e}")
            raise DatabaseException("Error counting favorites")
