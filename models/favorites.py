from pydantic import BaseModel, ConfigDict, Field


class FavoriteCreate(BaseModel):
    """Cuerpo de POST /favorites; el frontend envía camelCase."""
    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(..., alias="userId", ge=1)
    pet_id: int = Field(..., alias="petId", ge=1)


class FavoriteCheck(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_favorite: bool = Field(..., alias="isFavorite")


class FavoriteCount(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    pet_id: int = Field(..., alias="petId")
    count: int
