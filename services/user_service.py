"""
Service for User business logic.

Handles registration, login (credential check) and profile maintenance.
"""

import logging

from services.base_service import BaseService
from repositories.user_repository import UserRepository
from database.models import UserORM
from models.users import (
    UserRegister,
    UserLogin,
    User,
    UserProfileUpdate,
    PasswordChange,
)
from core.exceptions import (
    ConflictException,
    UnauthorizedException,
    ValidationException,
)
from core.security import hash_password, verify_password

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"

# emails inexistentes se verifican contra este digest: todo login fallido pasa por PBKDF2
_DUMMY_DIGEST = hash_password("not-a-real-password")


class UserService(BaseService[UserORM, UserRepository]):
    """Service for managing user business logic."""

    def __init__(self, repository: UserRepository):
        """
        Initialize user service.

        Args:
            repository: UserRepository instance
        """
        super().__init__(repository)

    def register(self, data: UserRegister) -> UserORM:
        """
        Register a new user.

        Args:
            data: Registration data (email already normalized)

        Returns:
            The created UserORM (the route issues the token from it)

        Raises:
            ConflictException: If the email is already registered
        """
        if self.repository.exists_email(data.email):
            raise ConflictException("Email already registered")

        user = UserORM(
            email=data.email,
            password_digest=hash_password(data.password),
            name=data.name,
            phone=data.phone,
        )
        try:
            created = self.repository.create(user)
            self.repository.commit()
        except ConflictException:
            # carrera con otro registro del mismo email
            raise ConflictException("Email already registered")

        logger.info(f"User {created.id} registered")
        return created

    def authenticate(self, credentials: UserLogin) -> UserORM:
        """
        Check an email/password pair.

        Unknown email and wrong password raise the same exception with the
        same message, and both run the password hash.

        Raises:
            UnauthorizedException: If the credentials do not match
        """
        user = self.repository.find_by_email(credentials.email)
        digest = user.password_digest if user is not None else _DUMMY_DIGEST
        if not verify_password(credentials.password, digest) or user is None:
            logger.info("Failed login attempt")
            raise UnauthorizedException(INVALID_CREDENTIALS)
        return user

    def get_profile(self, user_id: int) -> User:
        user = self.repository.get_by_id_or_fail(user_id)
        return self._to_response_model(user)

    def update_profile(self, user_id: int, data: UserProfileUpdate) -> User:
        """
        Update name and phone of a user.

        Raises:
            NotFoundException: If user not found
        """
        user = self.repository.get_by_id_or_fail(user_id)
        user.name = data.name
        user.phone = data.phone
        updated = self.repository.update(user)
        self.repository.commit()
        logger.info(f"User {user_id} profile updated")
        return self._to_response_model(updated)

    def change_password(self, user_id: int, data: PasswordChange) -> None:
        """
        Replace the password digest after checking the current password.

        Raises:
            NotFoundException: If user not found
            ValidationException: If the current password is wrong
        """
        user = self.repository.get_by_id_or_fail(user_id)
        if not verify_password(data.current_password, user.password_digest):
            raise ValidationException("Current password is incorrect", field="current_password")

        user.password_digest = hash_password(data.new_password)
        self.repository.update(user)
        self.repository.commit()
        logger.info(f"User {user_id} changed password")

    def _to_response_model(self, user: UserORM) -> User:
        """Convierte UserORM a User (sin el digest)."""
        return User.model_validate(user)
