"""
Adoption routes - interés de adopción y su flujo de estados.

This module handles HTTP requests/responses for adoption endpoints.
All business logic is delegated to the AdoptionService layer.
"""

from typing import Annotated, List
from fastapi import APIRouter, Depends, Query, status
import logging

from models.adoption import (
    AdoptionInterest,
    AdoptionInterestCreate,
    InterestStatusUpdate,
    InterestFilters,
    InterestCreatedResponse,
    InterestUpdateResponse,
    InterestStats,
)
from models.common import ERROR_RESPONSES
from services.adoption_service import AdoptionService
from dependencies import get_adoption_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/adoption", tags=["adoption"], responses=ERROR_RESPONSES)


@router.post("/interest", response_model=InterestCreatedResponse, status_code=status.HTTP_201_CREATED)
def register_interest(
    data: AdoptionInterestCreate,
    service: AdoptionService = Depends(get_adoption_service),
):
    """
    Registra interés en adoptar un pet.

    404 si el pet no existe; 400 si el pet no está disponible.
    """
    interest = service.register_interest(data)
    return InterestCreatedResponse(
        message="Interest registered successfully",
        interest_id=interest.id,
    )


@router.put("/{interest_id}/status", response_model=InterestUpdateResponse)
def update_interest_status(
    interest_id: int,
    data: InterestStatusUpdate,
    service: AdoptionService = Depends(get_adoption_service),
):
    """
    Cambia el estado de un interés.

    Aprobar un interés pasa el pet de available a in_process.
    """
    interest = service.update_status(interest_id, data)
    return InterestUpdateResponse(message="Status updated successfully", interest=interest)


@router.get("/", response_model=List[AdoptionInterest])
def list_interests(
    filters: Annotated[InterestFilters, Query()],
    service: AdoptionService = Depends(get_adoption_service),
):
    return service.list_interests(filters)


@router.get("/stats", response_model=InterestStats)
def interest_stats(service: AdoptionService = Depends(get_adoption_service)):
    return service.get_stats()


@router.get("/pet/{pet_id}", response_model=List[AdoptionInterest])
def interests_by_pet(pet_id: int, service: AdoptionService = Depends(get_adoption_service)):
    return service.list_by_pet(pet_id)


@router.get("/user/{user_id}", response_model=List[AdoptionInterest])
def interests_by_user(user_id: int, service: AdoptionService = Depends(get_adoption_service)):
    return service.list_by_user(user_id)


@router.get("/interest/{interest_id}", response_model=AdoptionInterest)
def get_interest(interest_id: int, service: AdoptionService = Depends(get_adoption_service)):
    return service.get_interest(interest_id)
