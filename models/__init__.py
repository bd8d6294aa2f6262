from .users import (
    User,
    UserRegister,
    UserLogin,
    AuthResponse,
    UserProfileUpdate,
    UserProfileResponse,
    PasswordChange,
)
from .pets import (
    Pet,
    PetCreate,
    PetUpdate,
    PetFilters,
    PetMutationResponse,
    PetStats,
    SpeciesCount,
    AgeUnit,
    Gender,
    PetSize,
    PetStatus,
)
from .favorites import FavoriteCreate, FavoriteCheck, FavoriteCount
from .adoption import (
    AdoptionInterest,
    AdoptionInterestCreate,
    InterestStatusUpdate,
    InterestFilters,
    InterestCreatedResponse,
    InterestUpdateResponse,
    InterestStats,
    InterestStatus,
)
from .common import (
    MessageResponse,
    ErrorResponse,
    HealthCheckResponse,
    ERROR_RESPONSES,
)

__all__ = [
    # Usuarios
    "User", "UserRegister", "UserLogin", "AuthResponse", "UserProfileUpdate",
    "UserProfileResponse", "PasswordChange",
    # Pets
    "Pet", "PetCreate", "PetUpdate", "PetFilters", "PetMutationResponse", "PetStats",
    "SpeciesCount", "AgeUnit", "Gender", "PetSize", "PetStatus",
    # Favoritos
    "FavoriteCreate", "FavoriteCheck", "FavoriteCount",
    # Adopción
    "AdoptionInterest", "AdoptionInterestCreate", "InterestStatusUpdate", "InterestFilters",
    "InterestCreatedResponse", "InterestUpdateResponse", "InterestStats", "InterestStatus",
    # Common responses
    "MessageResponse", "ErrorResponse", "HealthCheckResponse", "ERROR_RESPONSES",
]
