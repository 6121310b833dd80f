import logging

from domains.ingredient.exceptions import (
    DuplicateIngredientException,
    IngredientNotFoundException,
)
from domains.ingredient.models import Ingredient
from domains.ingredient.repository import IngredientRepository
from domains.ingredient.schemas import IngredientResponse

logger = logging.getLogger("recipes_finder.ingredient")


class IngredientService:
    """Resolves free-text ingredient names against the stored ingredients."""

    def __init__(self, ingredient_repo: IngredientRepository):
        self.ingredient_repo = ingredient_repo

    async def find_by_exact_name(self, name: str) -> IngredientResponse:
        ingredient = await self.ingredient_repo.get_ingredient_by_name(name)

        if not ingredient:
            raise IngredientNotFoundException(detail=f"Ingredient '{name}' does not exist.")
        return IngredientResponse.model_validate(ingredient)

    async def get_ingredient(self, ingredient_id: int) -> IngredientResponse:
        ingredient = await self.ingredient_repo.get_ingredient_by_id(ingredient_id)

        if not ingredient:
            raise IngredientNotFoundException()
        return IngredientResponse.model_validate(ingredient)

    async def search_by_name_fragment(self, fragment: str) -> list[IngredientResponse]:
        ingredients = await self.ingredient_repo.search_ingredients(fragment)
        return [IngredientResponse.model_validate(ing) for ing in ingredients]

    async def get_ingredients(self) -> list[IngredientResponse]:
        ingredients = await self.ingredient_repo.get_ingredients()
        return [IngredientResponse.model_validate(ing) for ing in ingredients]

    async def find_or_create(self, name: str) -> int:
        name = name.strip()
        ingredient = await self.ingredient_repo.get_ingredient_by_name(name)
        if ingredient:
            return ingredient.id

        try:
            created = await self.ingredient_repo.add_ingredient(Ingredient(name=name))
            return created.id
        except DuplicateIngredientException:
            # another writer inserted the same name between our read and insert
            logger.info("ingredient %r was created concurrently, re-reading", name)
            ingredient = await self.ingredient_repo.get_ingredient_by_name(name)
            if not ingredient:
                raise
            return ingredient.id

    async def resolve_names(self, fragments: list[str]) -> list[str]:
        """Stored ingredient names containing any of ``fragments``.

        Blank fragments are skipped. A fragment without matches adds nothing,
        and names reached through several fragments appear once.
        """
        resolved: dict[str, None] = {}

        for fragment in fragments:
            fragment = fragment.strip()
            if not fragment:
                continue
            for ingredient in await self.ingredient_repo.search_ingredients(fragment):
                resolved.setdefault(ingredient.name, None)

        return list(resolved)
