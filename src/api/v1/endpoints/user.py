from fastapi import APIRouter, Depends

from core.di import get_comment_service, get_recipe_service, get_user_service
from core.exception.exceptions import UnauthorizedException
from core.security import get_required_user_id
from domains.comment.schemas import CommentResponse
from domains.comment.service import CommentService
from domains.recipe.schemas import RecipeSummaryResponse
from domains.recipe.service import RecipeService
from domains.user.exceptions import (
    DuplicateEmailException,
    DuplicateUserException,
    InvalidProfileImageException,
    UserNotFoundException,
)
from domains.user.schemas import (
    PROFILE_IMAGES,
    ChangeProfileImageRequest,
    RegisterRequest,
    UserResponse,
)
from domains.user.service import UserService
from util.docs import create_error_response

router = APIRouter()


@router.post(
    "",
    status_code=201,
    summary="Register the identified user",
    response_model=UserResponse,
    responses=create_error_response(
        UnauthorizedException,
        DuplicateUserException,
        DuplicateEmailException,
        InvalidProfileImageException,
    ),
)
async def register(
    request: RegisterRequest,
    user_id: str = Depends(get_required_user_id),
    service: UserService = Depends(get_user_service),
):
    return await service.register(user_id, request)


@router.get("/profile-images", status_code=200, summary="Profile image keys", response_model=list[str])
async def get_profile_images():
    return list(PROFILE_IMAGES)


@router.get(
    "/me",
    status_code=200,
    summary="My profile",
    response_model=UserResponse,
    responses=create_error_response(UnauthorizedException, UserNotFoundException),
)
async def get_me(
    user_id: str = Depends(get_required_user_id),
    service: UserService = Depends(get_user_service),
):
    return await service.get_user(user_id)


@router.patch(
    "/me/image",
    status_code=200,
    summary="Change my profile image",
    response_model=UserResponse,
    responses=create_error_response(
        UnauthorizedException, UserNotFoundException, InvalidProfileImageException
    ),
)
async def change_profile_image(
    request: ChangeProfileImageRequest,
    user_id: str = Depends(get_required_user_id),
    service: UserService = Depends(get_user_service),
):
    return await service.change_profile_image(user_id, request)


@router.get(
    "/me/recipes",
    status_code=200,
    summary="Recipes I created",
    response_model=list[RecipeSummaryResponse],
    responses=create_error_response(UnauthorizedException),
)
async def get_my_recipes(
    user_id: str = Depends(get_required_user_id),
    service: RecipeService = Depends(get_recipe_service),
):
    return await service.get_recipes_by_user(user_id)


@router.get(
    "/me/favorites",
    status_code=200,
    summary="My favorite recipes",
    response_model=list[RecipeSummaryResponse],
    responses=create_error_response(UnauthorizedException),
)
async def get_my_favorites(
    user_id: str = Depends(get_required_user_id),
    service: RecipeService = Depends(get_recipe_service),
):
    return await service.get_favorite_recipes(user_id)


@router.get(
    "/me/comments",
    status_code=200,
    summary="Comments I wrote",
    response_model=list[CommentResponse],
    responses=create_error_response(UnauthorizedException),
)
async def get_my_comments(
    user_id: str = Depends(get_required_user_id),
    service: CommentService = Depends(get_comment_service),
):
    return await service.get_comments_by_user(user_id)
