from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime

from models.common import normalize_email, strip_text


class UserRegister(BaseModel):
    """Modelo para el registro público de usuarios."""
    email: str = Field(..., min_length=3, max_length=100)
    password: str = Field(..., min_length=6)
    name: str = Field(..., min_length=1, max_length=100)
    phone: Optional[str] = Field(None, max_length=20)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return normalize_email(v)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return strip_text(v)


class UserLogin(BaseModel):
    email: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return v.strip().lower()


class User(BaseModel):
    """Usuario tal como se devuelve al cliente (sin digest)."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str
    phone: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class AuthResponse(BaseModel):
    message: str
    user: User
    access_token: str
    token_type: str = "bearer"


class UserProfileUpdate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    phone: Optional[str] = Field(None, max_length=20)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return strip_text(v)


class UserProfileResponse(BaseModel):
    message: str
    user: User


class PasswordChange(BaseModel):
    """Cambio de contraseña: exige la contraseña actual."""
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=6)
