"""
Service for AdoptionInterest business logic.

Handles interest registration against available pets and the status
workflow (pending -> contacted -> approved/rejected).
"""

from typing import List
import logging

from services.base_service import BaseService
from repositories.adoption_repository import AdoptionInterestRepository
from repositories.pet_repository import PetRepository
from repositories.user_repository import UserRepository
from database.models import AdoptionInterestORM
from models.adoption import (
    AdoptionInterestCreate,
    InterestStatusUpdate,
    AdoptionInterest,
    InterestFilters,
    InterestStatus,
    InterestStats,
)
from models.pets import PetStatus
from core.exceptions import InvalidStateException, NotFoundException
from core.utils import enum_to_value
from config import settings

logger = logging.getLogger(__name__)


class AdoptionService(BaseService[AdoptionInterestORM, AdoptionInterestRepository]):
    """Service for managing adoption interests."""

    def __init__(
        self,
        repository: AdoptionInterestRepository,
        pet_repository: PetRepository,
        user_repository: UserRepository,
    ):
        """
        Initialize adoption service.

        Args:
            repository: AdoptionInterestRepository instance
            pet_repository: PetRepository instance
            user_repository: UserRepository instance
        """
        super().__init__(repository)
        self.pet_repo = pet_repository
        self.user_repo = user_repository

    def register_interest(self, data: AdoptionInterestCreate) -> AdoptionInterestORM:
        """
        Register interest in adopting a pet.

        Raises:
            NotFoundException: If the pet (or the given user) does not exist
            InvalidStateException: If the pet is not available
        """
        pet = self.pet_repo.get_by_id_or_fail(data.pet_id)
        if pet.status != PetStatus.available.value:
            raise InvalidStateException("This pet is not available for adoption")
        if data.user_id is not None and not self.user_repo.exists(data.user_id):
            raise NotFoundException("User")

        interest = AdoptionInterestORM(
            pet_id=data.pet_id,
            user_id=data.user_id,
            user_name=data.user_name,
            user_email=data.user_email,
            user_phone=data.user_phone,
            message=data.message,
        )
        created = self.repository.create(interest)
        self.repository.commit()

        logger.info(f"Adoption interest {created.id} registered for pet {data.pet_id}")
        return created

    def update_status(self, interest_id: int, data: InterestStatusUpdate) -> AdoptionInterest:
        """
        Change the status of an interest.

        Approving moves the pet from available to in_process; both changes
        are committed together.

        Raises:
            NotFoundException: If interest not found
        """
        interest = self.repository.get_by_id_or_fail(interest_id)
        new_status = enum_to_value(data.status)

        interest.status = new_status
        interest.notes = data.notes

        if new_status == InterestStatus.approved.value:
            pet = interest.pet
            if pet is not None and pet.status == PetStatus.available.value:
                pet.status = PetStatus.in_process.value
                logger.info(f"Pet {pet.id} moved to in_process by interest {interest_id}")

        # un solo commit para el interés y el pet
        self.repository.update(interest)
        self.repository.commit()
        self.repository.refresh(interest)
        logger.info(f"Adoption interest {interest_id} set to {new_status}")
        return self._to_response_model(interest)

    def get_interest(self, interest_id: int) -> AdoptionInterest:
        interest = self.repository.get_by_id_or_fail(interest_id)
        return self._to_response_model(interest)

    def list_interests(self, filters: InterestFilters) -> List[AdoptionInterest]:
        criteria = {key: enum_to_value(value) for key, value in filters.model_dump().items()}
        if criteria.get("limit") is not None:
            criteria["limit"] = min(criteria["limit"], settings.max_page_size)
        return [self._to_response_model(i) for i in self.repository.find_all(criteria)]

    def list_by_pet(self, pet_id: int) -> List[AdoptionInterest]:
        return [self._to_response_model(i) for i in self.repository.find_by_pet(pet_id)]

    def list_by_user(self, user_id: int) -> List[AdoptionInterest]:
        return [self._to_response_model(i) for i in self.repository.find_by_user(user_id)]

    def get_stats(self) -> InterestStats:
        return InterestStats(**self.repository.get_stats())

    def _to_response_model(self, interest: AdoptionInterestORM) -> AdoptionInterest:
        """Convierte AdoptionInterestORM a AdoptionInterest, con nombre e imagen del pet."""
        pet = interest.pet
        return AdoptionInterest(
            id=interest.id,
            pet_id=interest.pet_id,
            user_id=interest.user_id,
            user_name=interest.user_name,
            user_email=interest.user_email,
            user_phone=interest.user_phone,
            message=interest.message,
            status=interest.status,
            notes=interest.notes,
            pet_name=pet.name if pet else None,
            pet_image=pet.image_url if pet else None,
            created_at=interest.created_at,
            updated_at=interest.updated_at,
        )
