from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime
from enum import Enum

from models.common import blank_to_none


class AgeUnit(str, Enum):
    months = "months"
    years = "years"


class Gender(str, Enum):
    M = "M"
    F = "F"


class PetSize(str, Enum):
    small = "small"
    medium = "medium"
    large = "large"


class PetStatus(str, Enum):
    available = "available"
    adopted = "adopted"
    in_process = "in_process"


class PetBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    species: str = Field(..., min_length=1, max_length=50)
    breed: Optional[str] = Field(None, max_length=100)
    age: Optional[int] = Field(None, ge=0, le=600)
    age_unit: AgeUnit = AgeUnit.months
    gender: Gender
    size: PetSize
    weight: Optional[float] = Field(None, gt=0)
    description: Optional[str] = None
    health_info: Optional[str] = None
    temperament: Optional[str] = Field(None, max_length=100)
    location: Optional[str] = Field(None, max_length=200)
    status: PetStatus = PetStatus.available
    is_vaccinated: bool = False
    is_dewormed: bool = False
    is_neutered: bool = False
    image_url: Optional[str] = Field(None, max_length=500)
    additional_images: List[str] = Field(default_factory=list)


class PetCreate(PetBase):
    """Modelo de entrada para crear un pet.

    `created_by` solo se usa cuando la petición no trae un token válido;
    con token, el creador es el usuario autenticado.
    """
    created_by: Optional[int] = Field(None, ge=1)


class PetUpdate(BaseModel):
    """Actualización parcial: solo se modifican los campos enviados."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    species: Optional[str] = Field(None, min_length=1, max_length=50)
    breed: Optional[str] = Field(None, max_length=100)
    age: Optional[int] = Field(None, ge=0, le=600)
    age_unit: Optional[AgeUnit] = None
    gender: Optional[Gender] = None
    size: Optional[PetSize] = None
    weight: Optional[float] = Field(None, gt=0)
    description: Optional[str] = None
    health_info: Optional[str] = None
    temperament: Optional[str] = Field(None, max_length=100)
    location: Optional[str] = Field(None, max_length=200)
    status: Optional[PetStatus] = None
    is_vaccinated: Optional[bool] = None
    is_dewormed: Optional[bool] = None
    is_neutered: Optional[bool] = None
    image_url: Optional[str] = Field(None, max_length=500)
    additional_images: Optional[List[str]] = None


class Pet(PetBase):
    id: int
    created_by: Optional[int] = None
    creator_name: Optional[str] = None
    creator_email: Optional[str] = None
    creator_phone: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class PetFilters(BaseModel):
    """Filtros opcionales del listado de pets."""
    species: Optional[str] = None
    status: Optional[PetStatus] = None
    gender: Optional[Gender] = None
    size: Optional[PetSize] = None
    search: Optional[str] = None
    limit: Optional[int] = Field(None, ge=0)
    offset: Optional[int] = Field(None, ge=0)

    @field_validator("*", mode="before")
    @classmethod
    def empty_means_absent(cls, v):
        return blank_to_none(v)


class PetMutationResponse(BaseModel):
    message: str
    pet: Pet


class SpeciesCount(BaseModel):
    species: str
    count: int


class PetStats(BaseModel):
    total_pets: int
    available_pets: int
    adopted_pets: int
    in_process_pets: int
