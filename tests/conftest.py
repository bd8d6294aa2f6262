"""
Configuración de fixtures para pytest.

Este módulo contiene fixtures reutilizables para todos los tests.
"""

import pytest
import os
from typing import Generator, Dict, Any, List

# Configurar antes de importar la app: BD en memoria y hashing barato
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["PASSWORD_HASH_ITERATIONS"] = "1000"
os.environ["JWT_SECRET_KEY"] = "test-secret-key-with-at-least-32-characters!"

from sqlalchemy.orm import Session
from fastapi.testclient import TestClient

from main import create_app
from database.db import Database, get_db
from database.models import UserORM, PetORM, AdoptionInterestORM, FavoriteORM
from core.security import hash_password
from auth import create_access_token


# ==================== Database Fixtures ====================

@pytest.fixture(scope="function")
def database() -> Generator[Database, None, None]:
    """In-memory SQLite database (StaticPool, foreign keys on)."""
    db = Database("sqlite://")
    db.create_tables()
    yield db
    db.drop_tables()
    db.dispose()


@pytest.fixture(scope="function")
def db_session(database: Database) -> Generator[Session, None, None]:
    """Create a new database session for a test."""
    session = database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def app(database: Database):
    return create_app(database=database)


@pytest.fixture(scope="function")
def client(app, db_session: Session) -> Generator[TestClient, None, None]:
    """Create a test client with database session override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


# ==================== User Fixtures ====================

@pytest.fixture
def user_data() -> Dict[str, Any]:
    """Sample user data for testing."""
    return {
        "email": "ana@example.com",
        "password": "secret123",
        "name": "Ana Souza",
        "phone": "(11) 91234-5678",
    }


def _create_user(session: Session, email: str, password: str, name: str, phone=None) -> UserORM:
    user = UserORM(
        email=email,
        password_digest=hash_password(password),
        name=name,
        phone=phone,
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
def user(db_session: Session, user_data: Dict[str, Any]) -> UserORM:
    """Create a user in the database."""
    return _create_user(db_session, **user_data)


@pytest.fixture
def other_user(db_session: Session) -> UserORM:
    return _create_user(db_session, "bruno@example.com", "password456", "Bruno Lima")


@pytest.fixture
def user_token(user: UserORM) -> str:
    """Generate a valid JWT token for the user."""
    return create_access_token(data={"sub": user.id})


@pytest.fixture
def auth_headers(user_token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {user_token}"}


# ==================== Pet Fixtures ====================

@pytest.fixture
def pet_data() -> Dict[str, Any]:
    """Sample pet payload for POST /pets."""
    return {
        "name": "Thor",
        "species": "Dog",
        "breed": "Labrador",
        "age": 3,
        "age_unit": "years",
        "gender": "M",
        "size": "large",
        "weight": 28.0,
        "description": "Very friendly and loves children.",
        "location": "Rio de Janeiro, RJ",
        "is_vaccinated": True,
    }


def make_pet(session: Session, **overrides) -> PetORM:
    """Inserta un pet con valores por defecto razonables."""
    values = {
        "name": "Luna",
        "species": "Cat",
        "breed": "Siamese",
        "age": 2,
        "age_unit": "years",
        "gender": "F",
        "size": "small",
        "status": "available",
    }
    values.update(overrides)
    pet = PetORM(**values)
    session.add(pet)
    session.commit()
    session.refresh(pet)
    return pet


@pytest.fixture
def pet(db_session: Session, user: UserORM) -> PetORM:
    """An available pet created by the user."""
    return make_pet(db_session, created_by=user.id, image_url="https://img.example.com/luna.jpg")


@pytest.fixture
def adopted_pet(db_session: Session) -> PetORM:
    return make_pet(db_session, name="Bolt", species="Dog", breed="Beagle", status="adopted")


@pytest.fixture
def pets_catalog(db_session: Session) -> List[PetORM]:
    """Catálogo variado para probar filtros (en orden de creación)."""
    rows = [
        dict(name="Luna", species="Cat", breed="Siamese", gender="F", size="small",
             description="Gentle and playful"),
        dict(name="Thor", species="Dog", breed="Labrador", gender="M", size="large",
             description="Loves children"),
        dict(name="Mimi", species="Cat", breed="Persian", gender="F", size="small",
             description="Calm lap cat"),
        dict(name="Rex", species="Dog", breed="Mixed breed", gender="M", size="medium",
             description="Energetic and playful"),
        dict(name="Nina", species="Dog", breed="Poodle", gender="F", size="small",
             description="Smart", status="adopted"),
        dict(name="Mel", species="Cat", breed="Mixed breed", gender="F", size="small",
             description="Curious kitten", status="in_process"),
    ]
    return [make_pet(db_session, **row) for row in rows]


# ==================== Adoption Fixtures ====================

@pytest.fixture
def interest(db_session: Session, pet: PetORM) -> AdoptionInterestORM:
    """A pending interest on the available pet."""
    item = AdoptionInterestORM(
        pet_id=pet.id,
        user_name="Maria Silva",
        user_email="maria@email.com",
        user_phone="(11) 98888-7777",
        message="I loved Luna!",
    )
    db_session.add(item)
    db_session.commit()
    db_session.refresh(item)
    return item


@pytest.fixture
def favorite(db_session: Session, user: UserORM, pet: PetORM) -> FavoriteORM:
    item = FavoriteORM(user_id=user.id, pet_id=pet.id)
    db_session.add(item)
    db_session.commit()
    db_session.refresh(item)
    return item
