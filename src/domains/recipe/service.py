import logging

from domains.comment.repository import CommentRepository
from domains.favorite.repository import FavoriteRepository
from domains.ingredient.models import UsedIngredient
from domains.ingredient.repository import IngredientRepository
from domains.ingredient.service import IngredientService
from domains.recipe.exceptions import DuplicateRecipeNameException, RecipeNotFoundException
from domains.recipe.models import Recipe
from domains.recipe.repository import RecipeRepository
from domains.recipe.schemas import (
    CreateRecipeRequest,
    RecipeDetailResponse,
    RecipeResponse,
    RecipeSummaryResponse,
    UsedIngredientResponse,
)

logger = logging.getLogger("recipes_finder.recipe")


class RecipeService:
    def __init__(
        self,
        recipe_repo: RecipeRepository,
        ingredient_repo: IngredientRepository,
        ingredient_service: IngredientService,
        comment_repo: CommentRepository,
        favorite_repo: FavoriteRepository,
    ):
        self.recipe_repo = recipe_repo
        self.ingredient_repo = ingredient_repo
        self.ingredient_service = ingredient_service
        self.comment_repo = comment_repo
        self.favorite_repo = favorite_repo

    # --- mutations ---
    async def create_recipe(self, recipe: Recipe) -> int:
        saved = await self.recipe_repo.save_recipe(recipe)
        logger.info("recipe %s created as id=%s", saved.name, saved.id)
        return saved.id

    async def add_used_ingredient(
        self, recipe_id: int, ingredient_name: str, quantity: str
    ) -> UsedIngredientResponse:
        ingredient_name = ingredient_name.strip()
        await self.get_recipe(recipe_id)

        ingredient_id = await self.ingredient_service.find_or_create(ingredient_name)
        await self.ingredient_repo.add_used_ingredient(
            UsedIngredient(
                recipe_id=recipe_id,
                ingredient_id=ingredient_id,
                quantity=quantity,
            )
        )

        return UsedIngredientResponse(
            ingredient_id=ingredient_id, name=ingredient_name, quantity=quantity
        )

    async def create_recipe_with_ingredients(
        self, request: CreateRecipeRequest, owner_user_id: str
    ) -> RecipeDetailResponse:
        if await self.recipe_repo.get_recipe_by_name(request.name):
            raise DuplicateRecipeNameException(
                detail=f"A recipe named '{request.name}' already exists."
            )

        # ingredients are shared vocabulary and may outlive a failed recipe insert
        used_ingredients = [
            UsedIngredient(
                ingredient_id=await self.ingredient_service.find_or_create(item.name),
                quantity=item.quantity,
            )
            for item in request.ingredients
        ]

        recipe = Recipe(
            name=request.name,
            description=request.description,
            method=request.method,
            owner_user_id=owner_user_id,
            type=request.type,
            calories=request.calories,
            image_ref=request.image_ref or request.type,
        )
        saved = await self.recipe_repo.save_recipe(recipe, used_ingredients)
        logger.info(
            "recipe %s created as id=%s with %d ingredients",
            saved.name,
            saved.id,
            len(used_ingredients),
        )

        return await self.get_recipe_detail(saved.id, user_id=owner_user_id)

    # --- filter query ---
    async def filter_recipes(
        self,
        name: str | None = None,
        types: set[str] | list[str] | None = None,
        max_calories: int = 0,
        ingredient_fragments: list[str] | None = None,
    ) -> list[Recipe]:
        resolved_names: list[str] = []
        if ingredient_fragments:
            resolved_names = await self.ingredient_service.resolve_names(ingredient_fragments)

        return await self.recipe_repo.filter_recipes(
            name=name,
            types=sorted(set(types)) if types else None,
            max_calories=max_calories,
            ingredient_names=resolved_names,
        )

    async def search_recipes(
        self,
        name: str | None = None,
        types: list[str] | None = None,
        max_calories: int = 0,
        ingredient_fragments: list[str] | None = None,
    ) -> list[RecipeSummaryResponse]:
        recipes = await self.filter_recipes(
            name=name,
            types=types,
            max_calories=max_calories,
            ingredient_fragments=ingredient_fragments,
        )
        return [await self._summarize(recipe) for recipe in recipes]

    # --- point reads ---
    async def get_recipe(self, recipe_id: int) -> Recipe:
        recipe = await self.recipe_repo.get_recipe_by_id(recipe_id)

        if not recipe:
            raise RecipeNotFoundException()
        return recipe

    async def get_recipe_by_name(self, name: str, exact: bool = True) -> RecipeResponse:
        if exact:
            recipe = await self.recipe_repo.get_recipe_by_name(name)
        else:
            recipe = await self.recipe_repo.get_recipe_by_name_fragment(name)

        if not recipe:
            raise RecipeNotFoundException(detail=f"No recipe matches '{name}'.")
        return RecipeResponse.model_validate(recipe)

    async def get_recipe_detail(
        self, recipe_id: int, user_id: str | None = None
    ) -> RecipeDetailResponse:
        recipe = await self.get_recipe(recipe_id)
        summary = await self._summarize(recipe)

        ingredients = await self._used_ingredients(recipe_id)

        is_favorite = False
        if user_id:
            is_favorite = await self.favorite_repo.get_favorite(user_id, recipe_id) is not None

        return RecipeDetailResponse(
            **summary.model_dump(),
            ingredients=ingredients,
            is_favorite=is_favorite,
        )

    async def get_used_ingredients(self, recipe_id: int) -> list[UsedIngredientResponse]:
        await self.get_recipe(recipe_id)
        return await self._used_ingredients(recipe_id)

    # --- listings ---
    async def get_recipes_by_user(self, user_id: str) -> list[RecipeSummaryResponse]:
        recipes = await self.recipe_repo.get_recipes_by_user(user_id)
        return [await self._summarize(recipe) for recipe in recipes]

    async def get_recipes_by_type(self, recipe_type: str) -> list[RecipeSummaryResponse]:
        recipes = await self.recipe_repo.get_recipes_by_type(recipe_type)
        return [await self._summarize(recipe) for recipe in recipes]

    async def get_favorite_recipes(self, user_id: str) -> list[RecipeSummaryResponse]:
        recipes = await self.recipe_repo.get_favorite_recipes(user_id)
        return [await self._summarize(recipe) for recipe in recipes]

    # --- aggregates ---
    async def average_rating(self, recipe_id: int) -> float:
        return await self.comment_repo.get_average_rating(recipe_id)

    async def favorite_count(self, recipe_id: int) -> int:
        return await self.favorite_repo.count_favorites(recipe_id)

    async def _summarize(self, recipe: Recipe) -> RecipeSummaryResponse:
        return RecipeSummaryResponse(
            **RecipeResponse.model_validate(recipe).model_dump(),
            average_rating=await self.average_rating(recipe.id),
            favorite_count=await self.favorite_count(recipe.id),
        )

    async def _used_ingredients(self, recipe_id: int) -> list[UsedIngredientResponse]:
        rows = await self.ingredient_repo.get_used_ingredients_by_recipe(recipe_id)
        return [
            UsedIngredientResponse(
                ingredient_id=row.ingredient_id,
                name=row.name,
                quantity=row.quantity,
            )
            for row in rows
        ]
