"""
Dependency injection for services and repositories.

This module provides FastAPI dependencies for injecting services
and repositories into route handlers. Every dependency is built on the
request-scoped session from ``get_db``.
"""

from typing import Optional
from sqlalchemy.orm import Session
from fastapi import Depends

from database.db import Database, get_db
from repositories.user_repository import UserRepository
from repositories.pet_repository import PetRepository
from repositories.favorite_repository import FavoriteRepository
from repositories.adoption_repository import AdoptionInterestRepository
from services.user_service import UserService
from services.pet_service import PetService
from services.favorite_service import FavoriteService
from services.adoption_service import AdoptionService


# ==================== Service Dependencies ====================

def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """
    Get UserService instance.

    Example:
        ```python
        @router.post("/login")
        def login(service: UserService = Depends(get_user_service)):
            ...
        ```
    """
    return UserService(UserRepository(db))


def get_pet_service(db: Session = Depends(get_db)) -> PetService:
    """
    Get PetService instance.

    Args:
        db: Database session (injected by FastAPI)
    """
    return PetService(PetRepository(db), UserRepository(db))


def get_favorite_service(db: Session = Depends(get_db)) -> FavoriteService:
    return FavoriteService(FavoriteRepository(db), PetRepository(db), UserRepository(db))


def get_adoption_service(db: Session = Depends(get_db)) -> AdoptionService:
    """
    Get AdoptionService instance with injected repositories.
    """
    return AdoptionService(AdoptionInterestRepository(db), PetRepository(db), UserRepository(db))


# ==================== Context Manager for Services ====================

class ServiceContext:
    """
    Context manager for service layer with automatic transaction management,
    for use outside a request (seed script, maintenance tasks).

    Usage:
        ```python
        with ServiceContext(database) as ctx:
            pet = ctx.pet_service.create_pet(...)
            # Automatically commits on success
        # Automatically rollbacks on exception
        ```
    """

    def __init__(self, database: Database):
        """Initialize the service context on its own session."""
        self.db: Session = database.session()

        self._user_repo: Optional[UserRepository] = None
        self._pet_repo: Optional[PetRepository] = None

        self._user_service: Optional[UserService] = None
        self._pet_service: Optional[PetService] = None
        self._adoption_service: Optional[AdoptionService] = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit the context and cleanup."""
        if exc_type is not None:
            self.db.rollback()
        else:
            self.db.commit()

        # Always close the session
        self.db.close()

    @property
    def user_repo(self) -> UserRepository:
        if self._user_repo is None:
            self._user_repo = UserRepository(self.db)
        return self._user_repo

    @property
    def pet_repo(self) -> PetRepository:
        if self._pet_repo is None:
            self._pet_repo = PetRepository(self.db)
        return self._pet_repo

    @property
    def user_service(self) -> UserService:
        """Get or create UserService instance."""
        if self._user_service is None:
            self._user_service = UserService(self.user_repo)
        return self._user_service

    @property
    def pet_service(self) -> PetService:
        """Get or create PetService instance."""
        if self._pet_service is None:
            self._pet_service = PetService(self.pet_repo, self.user_repo)
        return self._pet_service

    @property
    def adoption_service(self) -> AdoptionService:
        """Get or create AdoptionService instance."""
        if self._adoption_service is None:
            self._adoption_service = AdoptionService(
                AdoptionInterestRepository(self.db), self.pet_repo, self.user_repo
            )
        return self._adoption_service
