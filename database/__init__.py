from .db import (
    Database,
    get_db,
)
from .models import (
    Base,
    UserORM,
    PetORM,
    FavoriteORM,
    AdoptionInterestORM,
)

__all__ = [
    "Database",
    "get_db",
    "Base",
    "UserORM",
    "PetORM",
    "FavoriteORM",
    "AdoptionInterestORM",
]
