"""
Auth routes: registration, login and profile maintenance.

Login and registration return the user (without digest) plus a bearer token.
"""

from fastapi import APIRouter, Depends, status
import logging

from models.users import (
    UserRegister,
    UserLogin,
    User,
    AuthResponse,
    UserProfileUpdate,
    UserProfileResponse,
    PasswordChange,
)
from models.common import MessageResponse, ErrorResponse, ERROR_RESPONSES
from services.user_service import UserService
from dependencies import get_user_service
from database import UserORM
from auth import get_current_user_dep, issue_token_for

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"], responses=ERROR_RESPONSES)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    data: UserRegister,
    service: UserService = Depends(get_user_service),
):
    """
    Registro público de usuarios.

    Responde 400 si faltan campos o si el email ya está registrado.
    """
    user = service.register(data)
    return AuthResponse(
        message="User registered successfully",
        user=User.model_validate(user),
        access_token=issue_token_for(user),
    )


@router.post("/login", response_model=AuthResponse, responses={401: {"model": ErrorResponse, "description": "Invalid credentials"}})
def login(
    credentials: UserLogin,
    service: UserService = Depends(get_user_service),
):
    """
    Login con email y contraseña (JSON).

    Email desconocido y contraseña incorrecta responden exactamente igual (401).
    """
    user = service.authenticate(credentials)
    return AuthResponse(
        message="Login successful",
        user=User.model_validate(user),
        access_token=issue_token_for(user),
    )


@router.get("/me", response_model=User)
def me(current_user: UserORM = Depends(get_current_user_dep)):
    """Usuario autenticado por el bearer token."""
    return User.model_validate(current_user)


@router.get("/profile/{user_id}", response_model=User)
def get_profile(user_id: int, service: UserService = Depends(get_user_service)):
    return service.get_profile(user_id)


@router.put("/profile/{user_id}", response_model=UserProfileResponse)
def update_profile(
    user_id: int,
    data: UserProfileUpdate,
    service: UserService = Depends(get_user_service),
):
    user = service.update_profile(user_id, data)
    return UserProfileResponse(message="Profile updated successfully", user=user)


@router.put("/profile/{user_id}/password", response_model=MessageResponse)
def change_password(
    user_id: int,
    data: PasswordChange,
    service: UserService = Depends(get_user_service),
):
    """Cambia la contraseña; exige la contraseña actual."""
    service.change_password(user_id, data)
    return MessageResponse(message="Password changed successfully")
