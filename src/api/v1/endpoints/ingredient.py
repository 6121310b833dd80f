from fastapi import APIRouter, Depends

from core.di import get_ingredient_service
from domains.ingredient.exceptions import IngredientNotFoundException
from domains.ingredient.schemas import IngredientResponse
from domains.ingredient.service import IngredientService
from util.docs import create_error_response

router = APIRouter()


@router.get(
    "",
    summary="List or search ingredients",
    status_code=200,
    response_model=list[IngredientResponse],
)
async def get_ingredients(
    q: str | None = None,
    service: IngredientService = Depends(get_ingredient_service),
):
    """
    - `q` given: ingredients whose name contains `q` (case-insensitive)
    - `q` missing: every ingredient
    """
    if q:
        return await service.search_by_name_fragment(q)
    return await service.get_ingredients()


@router.get(
    "/by-name/{name}",
    summary="Ingredient by exact name",
    status_code=200,
    response_model=IngredientResponse,
    responses=create_error_response(IngredientNotFoundException),
)
async def get_ingredient_by_name(
    name: str,
    service: IngredientService = Depends(get_ingredient_service),
):
    return await service.find_by_exact_name(name)


@router.get(
    "/{ingredient_id}",
    summary="Ingredient by id",
    status_code=200,
    response_model=IngredientResponse,
    responses=create_error_response(IngredientNotFoundException),
)
async def get_ingredient(
    ingredient_id: int,
    service: IngredientService = Depends(get_ingredient_service),
):
    return await service.get_ingredient(ingredient_id)
