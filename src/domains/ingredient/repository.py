import logging

from sqlalchemy import Row, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exception.exceptions import DatabaseException
from domains.ingredient.exceptions import (
    DuplicateIngredientException,
    DuplicateUsedIngredientException,
)
from domains.ingredient.models import Ingredient, UsedIngredient

logger = logging.getLogger("recipes_finder.ingredient")


class IngredientRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def _get_one(self, *where_conditions) -> Ingredient | None:
        try:
            stmt = select(Ingredient).where(*where_conditions)
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise DatabaseException(detail=f"Ingredient lookup failed: {str(e)}")

    async def get_ingredient_by_name(self, name: str) -> Ingredient | None:
        return await self._get_one(Ingredient.name == name)

    async def get_ingredient_by_id(self, ingredient_id: int) -> Ingredient | None:
        return await self._get_one(Ingredient.id == ingredient_id)

    async def search_ingredients(self, fragment: str) -> list[Ingredient]:
        try:
            stmt = (
                select(Ingredient)
                .where(Ingredient.name.icontains(fragment, autoescape=True))
                .order_by(Ingredient.name.asc())
            )
            result = await self.session.execute(stmt)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise DatabaseException(detail=f"Ingredient search failed: {str(e)}")

    async def get_ingredients(self) -> list[Ingredient]:
        try:
            stmt = select(Ingredient).order_by(Ingredient.name.asc())
            result = await self.session.execute(stmt)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise DatabaseException(detail=f"Ingredient list failed: {str(e)}")

    async def add_ingredient(self, ingredient: Ingredient) -> Ingredient:
        name = ingredient.name
        try:
            self.session.add(ingredient)
            await self.session.commit()
            return ingredient
        except IntegrityError as e:
            await self.session.rollback()
            if await self.get_ingredient_by_name(name):
                raise DuplicateIngredientException(
                    detail=f"Ingredient '{name}' already exists."
                )
            logger.warning("ingredient insert rejected by the store: %s", e)
            raise DatabaseException(detail=f"Ingredient save failed: {str(e.orig)}")
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.warning("ingredient insert failed: %s", e)
            raise DatabaseException(detail=f"Ingredient save failed: {str(e)}")

    # --- used ingredients (recipe <-> ingredient) ---
    async def add_used_ingredient(self, used_ingredient: UsedIngredient) -> UsedIngredient:
        recipe_id, ingredient_id = used_ingredient.recipe_id, used_ingredient.ingredient_id
        try:
            self.session.add(used_ingredient)
            await self.session.commit()
            return used_ingredient
        except IntegrityError as e:
            await self.session.rollback()
            if await self.get_used_ingredient(recipe_id, ingredient_id):
                raise DuplicateUsedIngredientException()
            # e.g. a foreign key pointing at a missing recipe or ingredient
            logger.warning("used ingredient insert rejected by the store: %s", e)
            raise DatabaseException(detail=f"Used ingredient save failed: {str(e.orig)}")
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.warning("used ingredient insert failed: %s", e)
            raise DatabaseException(detail=f"Used ingredient save failed: {str(e)}")

    async def get_used_ingredient(self, recipe_id: int, ingredient_id: int) -> Row | None:
        try:
            stmt = select(UsedIngredient.recipe_id, UsedIngredient.ingredient_id).where(
                UsedIngredient.recipe_id == recipe_id,
                UsedIngredient.ingredient_id == ingredient_id,
            )
            result = await self.session.execute(stmt)
            return result.one_or_none()
        except SQLAlchemyError as e:
            raise DatabaseException(detail=f"Used ingredient lookup failed: {str(e)}")

    async def get_used_ingredients_by_recipe(self, recipe_id: int) -> list[Row]:
        """Rows of (ingredient_id, name, quantity) for one recipe."""
        try:
            stmt = (
                select(
                    UsedIngredient.ingredient_id,
                    Ingredient.name,
                    UsedIngredient.quantity,
                )
                .join(Ingredient, UsedIngredient.ingredient_id == Ingredient.id)
                .where(UsedIngredient.recipe_id == recipe_id)
                .order_by(Ingredient.name.asc())
            )
            result = await self.session.execute(stmt)
            return list(result.all())
        except SQLAlchemyError as e:
            raise DatabaseException(detail=f"Used ingredient list failed: {str(e)}")

