from pydantic import BaseModel


class ToggleFavoriteResponse(BaseModel):
    recipe_id: int
    is_favorite: bool
    favorite_count: int
