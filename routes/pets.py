"""
Pet routes (Controllers) - Layered Architecture.

This module handles HTTP requests/responses for pet endpoints.
All business logic is delegated to the PetService layer; errors raised
there are rendered by the global exception handlers.
"""

from typing import Annotated, List, Optional
from fastapi import APIRouter, Depends, Query, status
import logging

from models.pets import (
    Pet,
    PetCreate,
    PetUpdate,
    PetFilters,
    PetMutationResponse,
    SpeciesCount,
    PetStats,
)
from models.common import MessageResponse, ERROR_RESPONSES
from services.pet_service import PetService
from dependencies import get_pet_service
from database import UserORM
from auth import get_optional_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pets", tags=["pets"], responses=ERROR_RESPONSES)


@router.get("", response_model=List[Pet])
def list_pets(
    filters: Annotated[PetFilters, Query()],
    service: PetService = Depends(get_pet_service),
):
    """
    List pets, most recent first.

    Filters: species, status (default: available), gender, size,
    search (name/breed/description), limit, offset.
    """
    return service.list_pets(filters)


@router.get("/species", response_model=List[SpeciesCount])
def species_counts(service: PetService = Depends(get_pet_service)):
    """Especies con pets disponibles y cuántos hay de cada una."""
    return service.species_counts()


@router.get("/stats", response_model=PetStats)
def pet_stats(service: PetService = Depends(get_pet_service)):
    return service.get_stats()


@router.get("/{pet_id}", response_model=Pet)
def get_pet(pet_id: int, service: PetService = Depends(get_pet_service)):
    return service.get_pet(pet_id)


@router.post("", response_model=PetMutationResponse, status_code=status.HTTP_201_CREATED)
def create_pet(
    pet: PetCreate,
    current_user: Optional[UserORM] = Depends(get_optional_user),
    service: PetService = Depends(get_pet_service),
):
    """
    Create a new pet.

    With a bearer token the authenticated user becomes the creator;
    otherwise `created_by` from the body is used, if any.
    """
    creator_id = current_user.id if current_user else None
    created = service.create_pet(pet, creator_id=creator_id)
    return PetMutationResponse(message="Pet created successfully", pet=created)


@router.put("/{pet_id}", response_model=PetMutationResponse)
def update_pet(
    pet_id: int,
    pet: PetUpdate,
    service: PetService = Depends(get_pet_service),
):
    """Actualización parcial de un pet."""
    updated = service.update_pet(pet_id, pet)
    return PetMutationResponse(message="Pet updated successfully", pet=updated)


@router.delete("/{pet_id}", response_model=MessageResponse)
def delete_pet(pet_id: int, service: PetService = Depends(get_pet_service)):
    service.delete_pet(pet_id)
    return MessageResponse(message="Pet deleted successfully")
