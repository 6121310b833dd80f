from fastapi import APIRouter, Depends, Query

from core.di import get_comment_service, get_favorite_service, get_recipe_service
from core.exception.exceptions import UnauthorizedException
from core.security import get_current_user_id, get_required_user_id
from domains.comment.schemas import AddCommentRequest, CommentResponse
from domains.comment.service import CommentService
from domains.favorite.schemas import ToggleFavoriteResponse
from domains.favorite.service import FavoriteService
from domains.ingredient.exceptions import DuplicateUsedIngredientException
from domains.recipe.exceptions import DuplicateRecipeNameException, RecipeNotFoundException
from domains.recipe.schemas import (
    FOOD_TYPES,
    CreateRecipeRequest,
    RecipeDetailResponse,
    RecipeResponse,
    RecipeSummaryResponse,
    UsedIngredientRequest,
    UsedIngredientResponse,
)
from domains.recipe.service import RecipeService
from util.docs import create_error_response

router = APIRouter()


@router.get(
    "",
    status_code=200,
    summary="Search recipes",
    response_model=list[RecipeSummaryResponse],
)
async def search_recipes(
    name: str | None = None,
    types: list[str] = Query([]),
    max_calories: int = Query(0, ge=0),
    ingredients: list[str] = Query([]),
    service: RecipeService = Depends(get_recipe_service),
):
    """
    Every supplied filter must hold; inside `types` and `ingredients` any value may match.
    - `name`: substring of the recipe name (case-insensitive)
    - `types`: food types, repeat the parameter for several
    - `max_calories`: upper bound, `0` means no limit
    - `ingredients`: ingredient name fragments, expanded against stored ingredients
    """
    return await service.search_recipes(
        name=name,
        types=types,
        max_calories=max_calories,
        ingredient_fragments=ingredients,
    )


@router.post(
    "",
    status_code=201,
    summary="Create a recipe with its ingredients",
    response_model=RecipeDetailResponse,
    responses=create_error_response(UnauthorizedException, DuplicateRecipeNameException),
)
async def create_recipe(
    request: CreateRecipeRequest,
    user_id: str = Depends(get_required_user_id),
    service: RecipeService = Depends(get_recipe_service),
):
    return await service.create_recipe_with_ingredients(request, owner_user_id=user_id)


@router.get("/food-types", status_code=200, summary="Food type vocabulary", response_model=list[str])
async def get_food_types():
    return list(FOOD_TYPES)


@router.get(
    "/lookup",
    status_code=200,
    summary="Find one recipe by name",
    response_model=RecipeResponse,
    responses=create_error_response(RecipeNotFoundException),
)
async def lookup_recipe(
    name: str = Query(..., min_length=1),
    exact: bool = True,
    service: RecipeService = Depends(get_recipe_service),
):
    """
    `exact=false` returns a single recipe whose name contains `name`.
    Use the search endpoint when every match is needed.
    """
    return await service.get_recipe_by_name(name, exact=exact)


@router.get(
    "/types/{recipe_type}",
    status_code=200,
    summary="Recipes of one food type",
    response_model=list[RecipeSummaryResponse],
)
async def get_recipes_by_type(
    recipe_type: str,
    service: RecipeService = Depends(get_recipe_service),
):
    return await service.get_recipes_by_type(recipe_type)


@router.get(
    "/{recipe_id}",
    status_code=200,
    summary="Recipe detail",
    response_model=RecipeDetailResponse,
    responses=create_error_response(RecipeNotFoundException),
)
async def get_recipe(
    recipe_id: int,
    user_id: str | None = Depends(get_current_user_id),
    service: RecipeService = Depends(get_recipe_service),
):
    return await service.get_recipe_detail(recipe_id, user_id=user_id)


@router.get(
    "/{recipe_id}/ingredients",
    status_code=200,
    summary="Ingredients used by a recipe",
    response_model=list[UsedIngredientResponse],
    responses=create_error_response(RecipeNotFoundException),
)
async def get_used_ingredients(
    recipe_id: int,
    service: RecipeService = Depends(get_recipe_service),
):
    return await service.get_used_ingredients(recipe_id)


@router.post(
    "/{recipe_id}/ingredients",
    status_code=201,
    summary="Add an ingredient to a recipe",
    response_model=UsedIngredientResponse,
    responses=create_error_response(
        UnauthorizedException, RecipeNotFoundException, DuplicateUsedIngredientException
    ),
)
async def add_used_ingredient(
    recipe_id: int,
    request: UsedIngredientRequest,
    user_id: str = Depends(get_required_user_id),
    service: RecipeService = Depends(get_recipe_service),
):
    return await service.add_used_ingredient(recipe_id, request.name, request.quantity)


@router.get(
    "/{recipe_id}/comments",
    status_code=200,
    summary="Comments of a recipe",
    response_model=list[CommentResponse],
    responses=create_error_response(RecipeNotFoundException),
)
async def get_comments(
    recipe_id: int,
    service: CommentService = Depends(get_comment_service),
):
    return await service.get_comments_by_recipe(recipe_id)


@router.post(
    "/{recipe_id}/comments",
    status_code=201,
    summary="Comment and rate a recipe",
    response_model=CommentResponse,
    responses=create_error_response(UnauthorizedException, RecipeNotFoundException),
)
async def add_comment(
    recipe_id: int,
    request: AddCommentRequest,
    user_id: str = Depends(get_required_user_id),
    service: CommentService = Depends(get_comment_service),
):
    return await service.add_comment(user_id, recipe_id, request)


@router.post(
    "/{recipe_id}/favorite",
    status_code=200,
    summary="Favorite / unfavorite a recipe (toggle)",
    response_model=ToggleFavoriteResponse,
    responses=create_error_response(UnauthorizedException, RecipeNotFoundException),
)
async def toggle_favorite(
    recipe_id: int,
    user_id: str = Depends(get_required_user_id),
    service: FavoriteService = Depends(get_favorite_service),
):
    return await service.toggle_favorite(user_id, recipe_id)
