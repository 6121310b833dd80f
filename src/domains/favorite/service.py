import logging

from core.exception.exceptions import ConstraintViolationException
from domains.favorite.models import Favorite
from domains.favorite.repository import FavoriteRepository
from domains.favorite.schemas import ToggleFavoriteResponse
from domains.recipe.exceptions import RecipeNotFoundException
from domains.recipe.repository import RecipeRepository

logger = logging.getLogger("recipes_finder.favorite")


class FavoriteService:
    def __init__(self, favorite_repo: FavoriteRepository, recipe_repo: RecipeRepository):
        self.favorite_repo = favorite_repo
        self.recipe_repo = recipe_repo

    async def toggle_favorite(self, user_id: str, recipe_id: int) -> ToggleFavoriteResponse:
        if not await self.recipe_repo.get_recipe_by_id(recipe_id):
            raise RecipeNotFoundException()

        existing = await self.favorite_repo.get_favorite(user_id, recipe_id)

        if existing:
            await self.favorite_repo.delete_favorite(user_id, recipe_id)
            is_favorite = False
        else:
            is_favorite = await self._add(user_id, recipe_id)

        return ToggleFavoriteResponse(
            recipe_id=recipe_id,
            is_favorite=is_favorite,
            favorite_count=await self.favorite_repo.count_favorites(recipe_id),
        )

    async def _add(self, user_id: str, recipe_id: int) -> bool:
        try:
            await self.favorite_repo.add_favorite(Favorite(user_id=user_id, recipe_id=recipe_id))
            return True
        except ConstraintViolationException:
            # a concurrent toggle already inserted the same row
            logger.info("favorite (%s, %s) inserted concurrently, re-reading", user_id, recipe_id)
            if await self.favorite_repo.get_favorite(user_id, recipe_id) is None:
                raise
            return True

