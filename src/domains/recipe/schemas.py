from pydantic import BaseModel, ConfigDict, Field, field_validator

# Cuisine labels offered by the client; Recipe.type itself is stored free-form.
FOOD_TYPES: tuple[str, ...] = (
    "Japonesa",
    "Italiana",
    "Mexicana",
    "Brasileira",
    "Chinesa",
    "Indiana",
    "Mediterrânea",
    "Francesa",
    "Alemã",
    "Americana",
    "Tailandesa",
    "Coreana",
    "Árabe",
    "Espanhola",
    "Vietnamita",
    "Caribenha",
    "Grega",
    "Doces",
    "Vegetariana",
    "Low Carb",
)


# --- Request ---
class UsedIngredientRequest(BaseModel):
    name: str = Field(..., min_length=1, examples=["Tomato"])
    quantity: str = Field("", examples=["2 cups"])

    model_config = ConfigDict(str_strip_whitespace=True)


class CreateRecipeRequest(BaseModel):
    name: str = Field(..., min_length=1, examples=["Pasta"])
    description: str = Field(..., min_length=1)
    method: str = Field(..., min_length=1)
    type: str = Field(..., examples=["Italiana"])
    calories: int = Field(0, ge=0)
    # URL returned by the image storage; falls back to the food type label
    image_ref: str | None = None
    ingredients: list[UsedIngredientRequest] = Field(default_factory=list)

    @field_validator("ingredients")
    @classmethod
    def check_unique_ingredients(cls, ingredients: list[UsedIngredientRequest]):
        names = [item.name for item in ingredients]
        if len(names) != len(set(names)):
            raise ValueError("Each ingredient may be listed only once.")
        return ingredients


# --- Response ---
class RecipeResponse(BaseModel):
    id: int
    name: str
    description: str
    method: str
    owner_user_id: str
    type: str
    calories: int
    image_ref: str

    model_config = ConfigDict(from_attributes=True)


class RecipeSummaryResponse(RecipeResponse):
    average_rating: float = 0.0
    favorite_count: int = 0


class UsedIngredientResponse(BaseModel):
    ingredient_id: int
    name: str
    quantity: str


class RecipeDetailResponse(RecipeSummaryResponse):
    ingredients: list[UsedIngredientResponse] = Field(default_factory=list)
    is_favorite: bool = False
