"""
Service for Favorite business logic.
"""

from typing import List
import logging

from services.base_service import BaseService
from services.pet_service import pet_to_response
from repositories.favorite_repository import FavoriteRepository
from repositories.pet_repository import PetRepository
from repositories.user_repository import UserRepository
from database.models import FavoriteORM
from models.favorites import FavoriteCreate, FavoriteCheck, FavoriteCount
from models.pets import Pet
from core.exceptions import ConflictException, NotFoundException

logger = logging.getLogger(__name__)

ALREADY_FAVORITE = "Pet is already in favorites"


class FavoriteService(BaseService[FavoriteORM, FavoriteRepository]):
    """Service for managing favorites."""

    def __init__(
        self,
        repository: FavoriteRepository,
        pet_repository: PetRepository,
        user_repository: UserRepository,
    ):
        super().__init__(repository)
        self.pet_repo = pet_repository
        self.user_repo = user_repository

    def add_favorite(self, data: FavoriteCreate) -> FavoriteORM:
        """
        Add a pet to a user's favorites.

        Raises:
            NotFoundException: If the pet or the user does not exist
            ConflictException: If the pair already exists
        """
        if not self.pet_repo.exists(data.pet_id):
            raise NotFoundException("Pet")
        if not self.user_repo.exists(data.user_id):
            raise NotFoundException("User")
        if self.repository.is_favorite(data.user_id, data.pet_id):
            raise ConflictException(ALREADY_FAVORITE)

        try:
            favorite = self.repository.create(
                FavoriteORM(user_id=data.user_id, pet_id=data.pet_id)
            )
            self.repository.commit()
        except ConflictException:
            # otra petición insertó el mismo par entre el chequeo y el flush
            raise ConflictException(ALREADY_FAVORITE)

        logger.info(f"User {data.user_id} favorited pet {data.pet_id}")
        return favorite

    def remove_favorite(self, user_id: int, pet_id: int) -> None:
        """
        Raises:
            NotFoundException: If the pair is not a favorite
        """
        favorite = self.repository.find(user_id, pet_id)
        if favorite is None:
            raise NotFoundException("Favorite")
        self.repository.delete(favorite)
        self.repository.commit()
        logger.info(f"User {user_id} removed pet {pet_id} from favorites")

    def list_user_favorites(self, user_id: int) -> List[Pet]:
        """Pets favoritos del usuario, el más reciente primero."""
        pets = self.repository.find_pets_by_user(user_id)
        return [pet_to_response(p) for p in pets]

    def list_favorite_ids(self, user_id: int) -> List[int]:
        return self.repository.find_pet_ids_by_user(user_id)

    def check_favorite(self, user_id: int, pet_id: int) -> FavoriteCheck:
        return FavoriteCheck(is_favorite=self.repository.is_favorite(user_id, pet_id))

    def count_for_pet(self, pet_id: int) -> FavoriteCount:
        return FavoriteCount(pet_id=pet_id, count=self.repository.count_by_pet(pet_id))
