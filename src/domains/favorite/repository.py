from sqlalchemy import select, delete, func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exception.exceptions import ConstraintViolationException, DatabaseException
from domains.favorite.models import Favorite


class FavoriteRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_favorite(self, user_id: str, recipe_id: int) -> Favorite | None:
        try:
            stmt = select(Favorite).where(
                Favorite.user_id == user_id,
                Favorite.recipe_id == recipe_id,
            )
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise DatabaseException(detail=f"Favorite lookup failed: {str(e)}")

    async def add_favorite(self, favorite: Favorite) -> Favorite:
        try:
            self.session.add(favorite)
            await self.session.commit()
            return favorite
        except IntegrityError:
            await self.session.rollback()
            raise ConstraintViolationException(
                detail="This recipe is already a favorite of the user.",
                code="DUPLICATE_FAVORITE",
            )
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseException(detail=f"Favorite save failed: {str(e)}")

    async def delete_favorite(self, user_id: str, recipe_id: int) -> bool:
        try:
            stmt = delete(Favorite).where(
                Favorite.user_id == user_id,
                Favorite.recipe_id == recipe_id,
            )
            result = await self.session.execute(stmt)
            await self.session.commit()
            return result.rowcount > 0
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseException(detail=f"Favorite delete failed: {str(e)}")

    async def count_favorites(self, recipe_id: int) -> int:
        try:
            stmt = select(func.count()).select_from(Favorite).where(
                Favorite.recipe_id == recipe_id
            )
            result = await self.session.execute(stmt)
            return result.scalar_one()
        except SQLAlchemyError as e:
            raise DatabaseException(detail=f"Favorite count failed: {str(e)}")

