"""
Repositorio para la entidad AdoptionInterest.
Gestiona las operaciones de base de datos de los interesados en adoptar.
"""

from typing import Any, Dict, List, Mapping, Optional
from sqlalchemy import case, func
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from repositories.base_repository import BaseRepository
from database.models import AdoptionInterestORM
from core.exceptions import DatabaseException
from core.query_filters import compose_filtered_query, equals
import logging

logger = logging.getLogger(__name__)

INTEREST_FILTERS = {
    "status": equals(AdoptionInterestORM.status),
}

MOST_RECENT_FIRST = (AdoptionInterestORM.created_at.desc(), AdoptionInterestORM.id.desc())


class AdoptionInterestRepository(BaseRepository[AdoptionInterestORM]):
    """Repositorio de intereses de adopción."""

    def __init__(self, db: Session):
        """
        Inicializa el repositorio.

        Args:
            db: SQLAlchemy session
        """
        super().__init__(db, AdoptionInterestORM, "Adoption interest")

    def find_all(self, filters: Optional[Mapping[str, Any]] = None) -> List[AdoptionInterestORM]:
        """
        Lista intereses con filtro opcional por estado y limit/offset.
        """
        try:
            query = compose_filtered_query(
                self.db.query(AdoptionInterestORM), filters, INTEREST_FILTERS, MOST_RECENT_FIRST
            )
            return query.all()
        except SQLAlchemyError as e:
            logger.error(f"Error listing adoption interests: {e}")
            raise DatabaseException("Error listing adoption interests")

    def find_by_pet(self, pet_id: int) -> List[AdoptionInterestORM]:
        try:
            return (
                self.db.query(AdoptionInterestORM)
                .filter(AdoptionInterestORM.pet_id == pet_id)
                .order_by(*MOST_RECENT_FIRST)
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error listing interests of pet {pet_id}: {e}")
            raise DatabaseException("Error listing adoption interests")

    def find_by_user(self, user_id: int) -> List[AdoptionInterestORM]:
        try:
            return (
                self.db.query(AdoptionInterestORM)
                .filter(AdoptionInterestORM.user_id == user_id)
                .order_by(*MOST_RECENT_FIRST)
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error listing interests of user {user_id}: {e}")
            raise DatabaseException("Error listing adoption interests")

    def get_stats(self) -> Dict[str, int]:
        """Totales de intereses por estado."""
        def by_status(value: str):
            return func.sum(case((AdoptionInterestORM.status == value, 1), else_=0))

        try:
            row = self.db.query(
                func.count(AdoptionInterestORM.id),
                by_status("pending"),
                by_status("contacted"),
                by_status("approved"),
                by_status("rejected"),
            ).one()
        except SQLAlchemyError as e:
            logger.error(f"Error computing interest stats: {e}")
            raise DatabaseException("Error computing adoption stats")

        total, pending, contacted, approved, rejected = row
        return {
            "total_interests": total or 0,
            "pending": pending or 0,
            "contacted": contacted or 0,
            "approved": approved or 0,
            "rejected": rejected or 0,
        }
