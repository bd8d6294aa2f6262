from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import declarative_base, relationship

from utils.datetime_utils import get_local_now

Base = declarative_base()


def get_current_time():
    """Hora local configurada, sin tzinfo (las columnas son naive)."""
    return get_local_now().replace(tzinfo=None)


#ORM: Usuarios
class UserORM(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(100), nullable=False, unique=True)
    # nunca se expone en respuestas
    password_digest = Column(String(255), nullable=False)
    name = Column(String(100), nullable=False)
    phone = Column(String(20), nullable=True)
    created_at = Column(DateTime, default=get_current_time, nullable=False)
    updated_at = Column(DateTime, default=get_current_time, onupdate=get_current_time, nullable=False)


#ORM: Pets
class PetORM(Base):
    __tablename__ = "pets"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    species = Column(String(50), nullable=False, index=True)
    breed = Column(String(100))
    age = Column(Integer)
    age_unit = Column(String(10), nullable=False, default="months")
    gender = Column(String(1), nullable=False)
    size = Column(String(10), nullable=False)
    weight = Column(Float)
    description = Column(Text)
    health_info = Column(Text)
    temperament = Column(String(100))
    location = Column(String(200))
    status = Column(String(20), nullable=False, default="available", index=True)
    is_vaccinated = Column(Boolean, nullable=False, default=False)
    is_dewormed = Column(Boolean, nullable=False, default=False)
    is_neutered = Column(Boolean, nullable=False, default=False)
    image_url = Column(String(500))
    additional_images = Column(JSON, nullable=True)
    created_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime, default=get_current_time, nullable=False)
    updated_at = Column(DateTime, default=get_current_time, onupdate=get_current_time, nullable=False)

    creator = relationship("UserORM", lazy="select")


#ORM: Favoritos (tabla puente usuario <-> pet)
class FavoriteORM(Base):
    __tablename__ = "favorites"
    __table_args__ = (
        UniqueConstraint("user_id", "pet_id", name="uq_favorites_user_pet"),
    )
    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    pet_id = Column(Integer, ForeignKey("pets.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, default=get_current_time, nullable=False)

    pet = relationship("PetORM", lazy="select")


#ORM: Interés de adopción
class AdoptionInterestORM(Base):
    __tablename__ = "adoption_interest"
    id = Column(Integer, primary_key=True, autoincrement=True)
    pet_id = Column(Integer, ForeignKey("pets.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    user_name = Column(String(100), nullable=False)
    user_email = Column(String(100), nullable=False)
    user_phone = Column(String(20))
    message = Column(Text)
    status = Column(String(20), nullable=False, default="pending", index=True)
    notes = Column(Text)
    created_at = Column(DateTime, default=get_current_time, nullable=False)
    updated_at = Column(DateTime, default=get_current_time, onupdate=get_current_time, nullable=False)

    pet = relationship("PetORM", lazy="select")
    user = relationship("UserORM", lazy="select")


__all__ = [
    "Base",
    "UserORM",
    "PetORM",
    "FavoriteORM",
    "AdoptionInterestORM",
]
