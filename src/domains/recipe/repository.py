import logging

from sqlalchemy import select, exists
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exception.exceptions import DatabaseException
from domains.favorite.models import Favorite
from domains.ingredient.exceptions import DuplicateUsedIngredientException
from domains.ingredient.models import Ingredient, UsedIngredient
from domains.recipe.exceptions import DuplicateRecipeNameException
from domains.recipe.models import Recipe

logger = logging.getLogger("recipes_finder.recipe")


class RecipeRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def save_recipe(
        self, recipe: Recipe, used_ingredients: list[UsedIngredient] | None = None
    ) -> Recipe:
        """Inserts the recipe and its used ingredients in one commit.

        Either every row is stored or none is. ``recipe_id`` of each used
        ingredient is filled in from the new recipe.
        """
        name = recipe.name
        used_ingredients = used_ingredients or []
        ingredient_ids = [used.ingredient_id for used in used_ingredients]
        try:
            self.session.add(recipe)
            await self.session.flush()

            for used in used_ingredients:
                used.recipe_id = recipe.id
            self.session.add_all(used_ingredients)

            await self.session.commit()
            return recipe
        except IntegrityError as e:
            await self.session.rollback()
            raise await self._classify_integrity_error(name, ingredient_ids, e)
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.warning("recipe insert failed: %s", e)
            raise DatabaseException(detail=f"Recipe save failed: {str(e)}")

    async def _classify_integrity_error(
        self, name: str, ingredient_ids: list[int], error: IntegrityError
    ) -> Exception:
        # the transaction is rolled back, so a row with this name belongs to another writer
        if await self.get_recipe_by_name(name):
            return DuplicateRecipeNameException(
                detail=f"A recipe named '{name}' already exists."
            )
        if len(ingredient_ids) != len(set(ingredient_ids)):
            return DuplicateUsedIngredientException()

        logger.warning("recipe insert rejected by the store: %s", error)
        return DatabaseException(detail=f"Recipe save failed: {str(error.orig)}")

    async def _get_one(self, *where_conditions) -> Recipe | None:
        try:
            stmt = (
                select(Recipe)
                .where(*where_conditions)
                .order_by(Recipe.name.asc())
                .limit(1)
            )
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise DatabaseException(detail=f"Recipe lookup failed: {str(e)}")

    async def _get_many(self, stmt) -> list[Recipe]:
        try:
            result = await self.session.execute(stmt)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise DatabaseException(detail=f"Recipe list failed: {str(e)}")

    async def get_recipe_by_id(self, recipe_id: int) -> Recipe | None:
        return await self._get_one(Recipe.id == recipe_id)

    async def get_recipe_by_name(self, name: str) -> Recipe | None:
        return await self._get_one(Recipe.name == name)

    async def get_recipe_by_name_fragment(self, fragment: str) -> Recipe | None:
        return await self._get_one(Recipe.name.icontains(fragment, autoescape=True))

    async def get_recipes_by_user(self, user_id: str) -> list[Recipe]:
        stmt = (
            select(Recipe)
            .where(Recipe.owner_user_id == user_id)
            .order_by(Recipe.name.asc())
        )
        return await self._get_many(stmt)

    async def get_recipes_by_type(self, recipe_type: str) -> list[Recipe]:
        stmt = (
            select(Recipe)
            .where(Recipe.type == recipe_type)
            .order_by(Recipe.name.asc())
        )
        return await self._get_many(stmt)

    async def get_favorite_recipes(self, user_id: str) -> list[Recipe]:
        stmt = (
            select(Recipe)
            .join(Favorite, Favorite.recipe_id == Recipe.id)
            .where(Favorite.user_id == user_id)
            .order_by(Recipe.name.asc())
        )
        return await self._get_many(stmt)

    async def filter_recipes(
        self,
        name: str | None = None,
        types: list[str] | None = None,
        max_calories: int = 0,
        ingredient_names: list[str] | None = None,
    ) -> list[Recipe]:
        """Recipes satisfying every active predicate, sorted by name.

        A predicate is inactive when its input is empty: no ``name``, no
        ``types``, ``max_calories == 0`` or no ``ingredient_names``. The
        ingredient predicate matches when at least one used ingredient of the
        recipe is named in ``ingredient_names``; it is an EXISTS so a recipe
        reached through several ingredients is returned once.
        """
        stmt = select(Recipe)

        if name:
            stmt = stmt.where(Recipe.name.icontains(name, autoescape=True))

        if types:
            stmt = stmt.where(Recipe.type.in_(types))

        # 0 means "no limit", so a 0 kcal ceiling cannot be expressed
        if max_calories != 0:
            stmt = stmt.where(Recipe.calories <= max_calories)

        if ingredient_names:
            uses_ingredient = (
                exists()
                .where(UsedIngredient.recipe_id == Recipe.id)
                .where(UsedIngredient.ingredient_id == Ingredient.id)
                .where(Ingredient.name.in_(ingredient_names))
            )
            stmt = stmt.where(uses_ingredient)

        stmt = stmt.order_by(Recipe.name.asc(), Recipe.id.asc())
        return await self._get_many(stmt)
