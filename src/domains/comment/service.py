from domains.comment.models import Comment
from domains.comment.repository import CommentRepository
from domains.comment.schemas import AddCommentRequest, CommentResponse
from domains.recipe.exceptions import RecipeNotFoundException
from domains.recipe.repository import RecipeRepository


class CommentService:
    def __init__(self, comment_repo: CommentRepository, recipe_repo: RecipeRepository):
        self.comment_repo = comment_repo
        self.recipe_repo = recipe_repo

    async def add_comment(
        self, user_id: str, recipe_id: int, request: AddCommentRequest
    ) -> CommentResponse:
        if not await self.recipe_repo.get_recipe_by_id(recipe_id):
            raise RecipeNotFoundException()

        saved = await self.comment_repo.add_comment(
            Comment(
                rating=request.rating,
                text=request.text,
                user_id=user_id,
                recipe_id=recipe_id,
            )
        )
        return CommentResponse.model_validate(saved)

    async def get_comments_by_recipe(self, recipe_id: int) -> list[CommentResponse]:
        if not await self.recipe_repo.get_recipe_by_id(recipe_id):
            raise RecipeNotFoundException()

        comments = await self.comment_repo.get_comments_by_recipe(recipe_id)
        return [CommentResponse.model_validate(c) for c in comments]

    async def get_comments_by_user(self, user_id: str) -> list[CommentResponse]:
        comments = await self.comment_repo.get_comments_by_user(user_id)
        return [CommentResponse.model_validate(c) for c in comments]

