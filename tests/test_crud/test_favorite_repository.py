"""
Tests for FavoriteRepository and the favorite guards.
"""

import pytest
from sqlalchemy.orm import Session

from database.models import UserORM, PetORM, FavoriteORM
from repositories.favorite_repository import FavoriteRepository
from repositories.pet_repository import PetRepository
from repositories.user_repository import UserRepository
from services.favorite_service import FavoriteService
from models.favorites import FavoriteCreate
from core.exceptions import ConflictException, NotFoundException


@pytest.fixture
def favorite_repository(db_session: Session) -> FavoriteRepository:
    return FavoriteRepository(db_session)


@pytest.fixture
def favorite_service(db_session: Session, favorite_repository: FavoriteRepository) -> FavoriteService:
    return FavoriteService(
        favorite_repository, PetRepository(db_session), UserRepository(db_session)
    )


class TestFavoriteRepository:

    def test_find_and_is_favorite(
        self, favorite_repository: FavoriteRepository, favorite: FavoriteORM, user: UserORM, pet: PetORM
    ):
        assert favorite_repository.find(user.id, pet.id).id == favorite.id
        assert favorite_repository.is_favorite(user.id, pet.id) is True
        assert favorite_repository.is_favorite(user.id, 9999) is False

    def test_unique_pair_constraint(
        self, favorite_repository: FavoriteRepository, favorite: FavoriteORM, user: UserORM, pet: PetORM
    ):
        with pytest.raises(ConflictException):
            favorite_repository.create(FavoriteORM(user_id=user.id, pet_id=pet.id))

    def test_count_by_pet(
        self,
        favorite_repository: FavoriteRepository,
        favorite: FavoriteORM,
        other_user: UserORM,
        pet: PetORM,
    ):
        favorite_repository.create(FavoriteORM(user_id=other_user.id, pet_id=pet.id))
        favorite_repository.commit()

        assert favorite_repository.count_by_pet(pet.id) == 2
        assert favorite_repository.count_by_pet(9999) == 0

    def test_cascade_on_user_delete(
        self, db_session: Session, favorite_repository: FavoriteRepository, favorite: FavoriteORM, user: UserORM
    ):
        user_id = user.id
        db_session.delete(user)
        db_session.commit()
        db_session.expire_all()

        assert favorite_repository.find_pet_ids_by_user(user_id) == []


class TestFavoriteService:

    def test_add_for_missing_pet(self, favorite_service: FavoriteService, user: UserORM):
        with pytest.raises(NotFoundException):
            favorite_service.add_favorite(FavoriteCreate(user_id=user.id, pet_id=9999))

    def test_add_duplicate(
        self, favorite_service: FavoriteService, favorite: FavoriteORM, user: UserORM, pet: PetORM
    ):
        with pytest.raises(ConflictException) as exc:
            favorite_service.add_favorite(FavoriteCreate(user_id=user.id, pet_id=pet.id))
        assert exc.value.status_code == 400

    def test_add_and_check(self, favorite_service: FavoriteService, user: UserORM, pet: PetORM):
        favorite_service.add_favorite(FavoriteCreate(user_id=user.id, pet_id=pet.id))

        assert favorite_service.check_favorite(user.id, pet.id).is_favorite is True
        assert [p.id for p in favorite_service.list_user_favorites(user.id)] == [pet.id]
