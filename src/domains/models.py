from domains.comment.models import Comment
from domains.favorite.models import Favorite
from domains.ingredient.models import Ingredient, UsedIngredient
from domains.recipe.models import Recipe
from domains.user.models import User

__all__ = [
    "Comment",
    "Favorite",
    "Ingredient",
    "Recipe",
    "UsedIngredient",
    "User",
]
