from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime
from enum import Enum

from models.common import blank_to_none, normalize_email, strip_text


class InterestStatus(str, Enum):
    pending = "pending"
    contacted = "contacted"
    approved = "approved"
    rejected = "rejected"


class AdoptionInterestCreate(BaseModel):
    """Registro de interés; puede venir de un visitante sin cuenta (sin user_id)."""
    pet_id: int = Field(..., ge=1)
    user_id: Optional[int] = Field(None, ge=1)
    user_name: str = Field(..., min_length=1, max_length=100)
    user_email: str = Field(..., min_length=3, max_length=100)
    user_phone: Optional[str] = Field(None, max_length=20)
    message: Optional[str] = None

    @field_validator("user_email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return normalize_email(v)

    @field_validator("user_name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return strip_text(v)


class InterestStatusUpdate(BaseModel):
    status: InterestStatus
    notes: Optional[str] = None


class AdoptionInterest(BaseModel):
    id: int
    pet_id: int
    user_id: Optional[int] = None
    user_name: str
    user_email: str
    user_phone: Optional[str] = None
    message: Optional[str] = None
    status: InterestStatus
    notes: Optional[str] = None
    pet_name: Optional[str] = None
    pet_image: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class InterestFilters(BaseModel):
    status: Optional[InterestStatus] = None
    limit: Optional[int] = Field(None, ge=0)
    offset: Optional[int] = Field(None, ge=0)

    @field_validator("*", mode="before")
    @classmethod
    def empty_means_absent(cls, v):
        return blank_to_none(v)


class InterestCreatedResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    interest_id: int = Field(..., alias="interestId")


class InterestUpdateResponse(BaseModel):
    message: str
    interest: AdoptionInterest


class InterestStats(BaseModel):
    total_interests: int
    pending: int
    contacted: int
    approved: int
    rejected: int
