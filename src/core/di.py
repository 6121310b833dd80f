from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from core.database import get_db
from domains.comment.repository import CommentRepository
from domains.comment.service import CommentService
from domains.favorite.repository import FavoriteRepository
from domains.favorite.service import FavoriteService
from domains.ingredient.repository import IngredientRepository
from domains.ingredient.service import IngredientService
from domains.recipe.repository import RecipeRepository
from domains.recipe.service import RecipeService
from domains.user.repository import UserRepository
from domains.user.service import UserService


# --- repositories ---
def get_user_repo(session: AsyncSession = Depends(get_db)) -> UserRepository:
    return UserRepository(session)


def get_recipe_repo(session: AsyncSession = Depends(get_db)) -> RecipeRepository:
    return RecipeRepository(session)


def get_ingredient_repo(
    session: AsyncSession = Depends(get_db),
) -> IngredientRepository:
    return IngredientRepository(session)


def get_comment_repo(session: AsyncSession = Depends(get_db)) -> CommentRepository:
    return CommentRepository(session)


def get_favorite_repo(session: AsyncSession = Depends(get_db)) -> FavoriteRepository:
    return FavoriteRepository(session)


# --- services ---
def get_user_service(user_repo: UserRepository = Depends(get_user_repo)) -> UserService:
    return UserService(user_repo)


def get_ingredient_service(
    ingredient_repo: IngredientRepository = Depends(get_ingredient_repo),
) -> IngredientService:
    return IngredientService(ingredient_repo=ingredient_repo)


def get_recipe_service(
    recipe_repo: RecipeRepository = Depends(get_recipe_repo),
    ingredient_repo: IngredientRepository = Depends(get_ingredient_repo),
    ingredient_service: IngredientService = Depends(get_ingredient_service),
    comment_repo: CommentRepository = Depends(get_comment_repo),
    favorite_repo: FavoriteRepository = Depends(get_favorite_repo),
) -> RecipeService:
    return RecipeService(
        recipe_repo=recipe_repo,
        ingredient_repo=ingredient_repo,
        ingredient_service=ingredient_service,
        comment_repo=comment_repo,
        favorite_repo=favorite_repo,
    )


def get_favorite_service(
    favorite_repo: FavoriteRepository = Depends(get_favorite_repo),
    recipe_repo: RecipeRepository = Depends(get_recipe_repo),
) -> FavoriteService:
    return FavoriteService(favorite_repo=favorite_repo, recipe_repo=recipe_repo)


def get_comment_service(
    comment_repo: CommentRepository = Depends(get_comment_repo),
    recipe_repo: RecipeRepository = Depends(get_recipe_repo),
) -> CommentService:
    return CommentService(comment_repo=comment_repo, recipe_repo=recipe_repo)
