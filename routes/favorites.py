"""
Favorite routes: relación usuario <-> pet.
"""

from typing import List
from fastapi import APIRouter, Depends, status
import logging

from models.favorites import FavoriteCreate, FavoriteCheck, FavoriteCount
from models.pets import Pet
from models.common import MessageResponse, ERROR_RESPONSES
from services.favorite_service import FavoriteService
from dependencies import get_favorite_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/favorites", tags=["favorites"], responses=ERROR_RESPONSES)


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def add_favorite(
    data: FavoriteCreate,
    service: FavoriteService = Depends(get_favorite_service),
):
    """
    Agrega un pet a los favoritos.

    404 si el pet o el usuario no existen; 400 si ya es favorito.
    """
    service.add_favorite(data)
    return MessageResponse(message="Pet added to favorites")


@router.delete("/{user_id}/{pet_id}", response_model=MessageResponse)
def remove_favorite(
    user_id: int,
    pet_id: int,
    service: FavoriteService = Depends(get_favorite_service),
):
    service.remove_favorite(user_id, pet_id)
    return MessageResponse(message="Pet removed from favorites")


@router.get("/user/{user_id}", response_model=List[Pet])
def user_favorites(user_id: int, service: FavoriteService = Depends(get_favorite_service)):
    """Pets favoritos del usuario, el favorito más reciente primero."""
    return service.list_user_favorites(user_id)


@router.get("/ids/{user_id}", response_model=List[int])
def user_favorite_ids(user_id: int, service: FavoriteService = Depends(get_favorite_service)):
    return service.list_favorite_ids(user_id)


@router.get("/check/{user_id}/{pet_id}", response_model=FavoriteCheck)
def check_favorite(
    user_id: int,
    pet_id: int,
    service: FavoriteService = Depends(get_favorite_service),
):
    return service.check_favorite(user_id, pet_id)


@router.get("/count/{pet_id}", response_model=FavoriteCount)
def favorite_count(pet_id: int, service: FavoriteService = Depends(get_favorite_service)):
    return service.count_for_pet(pet_id)
