from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exception.exceptions import DatabaseException
from domains.comment.models import Comment


class CommentRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def add_comment(self, comment: Comment) -> Comment:
        try:
            self.session.add(comment)
            await self.session.commit()
            await self.session.refresh(comment)
            return comment
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseException(detail=f"Comment save failed: {str(e)}")

    async def get_comments_by_recipe(self, recipe_id: int) -> list[Comment]:
        try:
            stmt = (
                select(Comment)
                .where(Comment.recipe_id == recipe_id)
                .order_by(Comment.id.desc())
            )
            result = await self.session.execute(stmt)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise DatabaseException(detail=f"Comment list failed: {str(e)}")

    async def get_comments_by_user(self, user_id: str) -> list[Comment]:
        try:
            stmt = (
                select(Comment)
                .where(Comment.user_id == user_id)
                .order_by(Comment.id.desc())
            )
            result = await self.session.execute(stmt)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise DatabaseException(detail=f"Comment list failed: {str(e)}")

    async def get_average_rating(self, recipe_id: int) -> float:
        try:
            stmt = select(func.avg(Comment.rating)).where(Comment.recipe_id == recipe_id)
            result = await self.session.execute(stmt)
            average = result.scalar_one_or_none()
            # AVG over zero rows is NULL
            return float(average) if average is not None else 0.0
        except SQLAlchemyError as e:
            raise DatabaseException(detail=f"Average rating failed: {str(e)}")
