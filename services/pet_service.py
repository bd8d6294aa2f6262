"""
Service for Pet business logic.

Handles all business operations related to pets listed for adoption.
"""

from typing import Any, Dict, List, Optional
import logging

from services.base_service import BaseService
from repositories.pet_repository import PetRepository
from repositories.user_repository import UserRepository
from database.models import PetORM
from models.pets import (
    PetCreate,
    PetUpdate,
    Pet,
    PetFilters,
    PetStatus,
    SpeciesCount,
    PetStats,
)
from core.exceptions import NotFoundException
from core.utils import enum_to_value
from config import settings

logger = logging.getLogger(__name__)


class PetService(BaseService[PetORM, PetRepository]):
    """Service for managing pet business logic."""

    def __init__(self, repository: PetRepository, user_repository: UserRepository):
        """
        Initialize pet service.

        Args:
            repository: PetRepository instance
            user_repository: UserRepository instance (creator lookups)
        """
        super().__init__(repository)
        self.user_repo = user_repository

    def list_pets(self, filters: PetFilters) -> List[Pet]:
        """
        List pets with optional filters.

        When no status is given only available pets are listed. A limit above
        MAX_PAGE_SIZE is lowered to it.
        """
        criteria = self._filters_to_dict(filters)
        pets = self.repository.find_all(criteria)
        return [self._to_response_model(p) for p in pets]

    def get_pet(self, pet_id: int) -> Pet:
        """
        Get a pet by ID.

        Raises:
            NotFoundException: If pet not found
        """
        pet = self.repository.get_by_id_or_fail(pet_id)
        return self._to_response_model(pet)

    def create_pet(self, data: PetCreate, creator_id: Optional[int] = None) -> Pet:
        """
        Create a new pet.

        Args:
            data: Pet creation data
            creator_id: Authenticated user id; takes precedence over data.created_by

        Raises:
            NotFoundException: If the explicit creator does not exist
        """
        values = data.model_dump(exclude={"created_by"})
        created_by = creator_id if creator_id is not None else data.created_by
        if created_by is not None and not self.user_repo.exists(created_by):
            raise NotFoundException("User", created_by)

        pet = PetORM(
            **{key: enum_to_value(value) for key, value in values.items()},
            created_by=created_by,
        )
        created = self.repository.create(pet)
        self.repository.commit()

        logger.info(f"Pet {created.id} created (created_by={created_by})")
        return self._to_response_model(created)

    def update_pet(self, pet_id: int, data: PetUpdate) -> Pet:
        """
        Partially update a pet: only the fields sent are changed.

        Raises:
            NotFoundException: If pet not found
        """
        pet = self.repository.get_by_id_or_fail(pet_id)

        changes = data.model_dump(exclude_unset=True)
        for field, value in changes.items():
            if value is None and field in _NOT_NULL_FIELDS:
                continue
            setattr(pet, field, enum_to_value(value))

        updated = self.repository.update(pet)
        self.repository.commit()

        logger.info(f"Pet {pet_id} updated: {sorted(changes)}")
        return self._to_response_model(updated)

    def delete_pet(self, pet_id: int) -> None:
        """
        Delete a pet; its favorites and interests go with it.

        Raises:
            NotFoundException: If pet not found
        """
        self.delete(pet_id)

    def species_counts(self) -> List[SpeciesCount]:
        return [SpeciesCount(**row) for row in self.repository.count_available_by_species()]

    def get_stats(self) -> PetStats:
        return PetStats(**self.repository.get_stats())

    def _filters_to_dict(self, filters: PetFilters) -> Dict[str, Any]:
        criteria = {key: enum_to_value(value) for key, value in filters.model_dump().items()}
        if criteria.get("status") is None:
            criteria["status"] = PetStatus.available.value
        if criteria.get("limit") is not None:
            criteria["limit"] = min(criteria["limit"], settings.max_page_size)
        return criteria

    def _to_response_model(self, pet: PetORM) -> Pet:
        return pet_to_response(pet)


def pet_to_response(pet: PetORM) -> Pet:
    """
    Convert PetORM to Pet response model, with the creator's contact data.
    """
    creator = pet.creator
    return Pet(
        id=pet.id,
        name=pet.name,
        species=pet.species,
        breed=pet.breed,
        age=pet.age,
        age_unit=pet.age_unit,
        gender=pet.gender,
        size=pet.size,
        weight=pet.weight,
        description=pet.description,
        health_info=pet.health_info,
        temperament=pet.temperament,
        location=pet.location,
        status=pet.status,
        is_vaccinated=bool(pet.is_vaccinated),
        is_dewormed=bool(pet.is_dewormed),
        is_neutered=bool(pet.is_neutered),
        image_url=pet.image_url,
        additional_images=list(pet.additional_images or []),
        created_by=pet.created_by,
        creator_name=creator.name if creator else None,
        creator_email=creator.email if creator else None,
        creator_phone=creator.phone if creator else None,
        created_at=pet.created_at,
        updated_at=pet.updated_at,
    )


# columnas NOT NULL: un null explícito en la actualización se ignora
_NOT_NULL_FIELDS = {
    "name",
    "species",
    "age_unit",
    "gender",
    "size",
    "status",
    "is_vaccinated",
    "is_dewormed",
    "is_neutered",
}
