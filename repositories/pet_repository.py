"""
Repositorio para la entidad Pet.
Gestiona todas las operaciones de base de datos relacionadas con pets.
"""

from typing import Any, Dict, List, Mapping, Optional
from sqlalchemy import case, func
from sqlalchemy.orm import Query, Session
from sqlalchemy.exc import SQLAlchemyError

from repositories.base_repository import BaseRepository
from database.models import PetORM
from core.exceptions import DatabaseException
from core.query_filters import compose_filtered_query, equals, iequals, search
import logging

logger = logging.getLogger(__name__)

# orden de los fragmentos = orden de los parámetros en la consulta
PET_FILTERS = {
    "species": iequals(PetORM.species),
    "status": equals(PetORM.status),
    "gender": equals(PetORM.gender),
    "size": equals(PetORM.size),
    "search": search(PetORM.name, PetORM.breed, PetORM.description),
}

MOST_RECENT_FIRST = (PetORM.created_at.desc(), PetORM.id.desc())


class PetRepository(BaseRepository[PetORM]):
    """Repositorio para la entidad Pet."""

    def __init__(self, db: Session):
        """
        Inicializa el repositorio de pets.

        Args:
            db: SQLAlchemy session
        """
        super().__init__(db, PetORM, "Pet")

    def build_find_all_query(self, filters: Optional[Mapping[str, Any]] = None) -> Query:
        """Consulta del listado sin ejecutar (species, status, gender, size, search, limit, offset)."""
        return compose_filtered_query(
            self.db.query(PetORM), filters, PET_FILTERS, MOST_RECENT_FIRST
        )

    def find_all(self, filters: Optional[Mapping[str, Any]] = None) -> List[PetORM]:
        """
        Lista pets aplicando solo los filtros presentes.

        Args:
            filters: Filtros opcionales; claves desconocidas se ignoran

        Returns:
            Pets ordenados del más reciente al más antiguo
        """
        try:
            return self.build_find_all_query(filters).all()
        except SQLAlchemyError as e:
            logger.error(f"Error listing pets with filters {dict(filters or {})}: {e}")
            raise DatabaseException("Error listing pets")

    def count_available_by_species(self) -> List[Dict[str, Any]]:
        """
        Cuenta los pets disponibles agrupados por especie.

        Returns:
            Lista de {species, count} ordenada por count descendente
        """
        try:
            count = func.count(PetORM.id).label("count")
            rows = (
                self.db.query(PetORM.species, count)
                .filter(PetORM.status == "available")
                .group_by(PetORM.species)
                .order_by(count.desc(), PetORM.species.asc())
                .all()
            )
            return [{"species": species, "count": total} for species, total in rows]
        except SQLAlchemyError as e:
            logger.error(f"Error counting pets by species: {e}")
            raise DatabaseException("Error counting pets by species")

    def get_stats(self) -> Dict[str, int]:
        """Totales globales de pets por estado."""
        def by_status(value: str):
            return func.sum(case((PetORM.status == value, 1), else_=0))

        try:
            row = self.db.query(
                func.count(PetORM.id),
                by_status("available"),
                by_status("adopted"),
                by_status("in_process"),
            ).one()
        except SQLAlchemyError as e:
            logger.error(f"Error computing pet stats: {e}")
            raise DatabaseException("Error computing pet stats")

        total, available, adopted, in_process = row
        return {
            "total_pets": total or 0,
            "available_pets": available or 0,
            "adopted_pets": adopted or 0,
            "in_process_pets": in_process or 0,
        }
