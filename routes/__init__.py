from .auth import router as auth_router
from .pets import router as pets_router
from .favorites import router as favorites_router
from .adoption import router as adoption_router

__all__ = [
    "auth_router",
    "pets_router",
    "favorites_router",
    "adoption_router",
]
