from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio.session import AsyncSession

from core.exception.exceptions import DatabaseException, UnexpectedException
from domains.user.exceptions import DuplicateEmailException, DuplicateUserException
from domains.user.models import User


class UserRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def save_user(self, user: User) -> User:
        external_id, email = user.external_id, user.email
        try:
            self.session.add(user)
            await self.session.commit()
            await self.session.refresh(user)
            return user
        except IntegrityError as e:
            await self.session.rollback()
            if await self.get_user_by_external_id(external_id):
                raise DuplicateUserException()
            if await self.get_user_by_email(email):
                raise DuplicateEmailException()
            raise DatabaseException(detail=f"User save failed: {str(e.orig)}")
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseException(detail=f"User save failed: {str(e)}")

    async def _get_one(self, *where_conditions) -> User | None:
        try:
            stmt = select(User).where(*where_conditions)
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise DatabaseException(detail=f"User lookup failed: {str(e)}")
        except Exception as e:
            raise UnexpectedException(detail=f"Unexpected error: {str(e)}")

    async def get_user_by_external_id(self, external_id: str) -> User | None:
        return await self._get_one(User.external_id == external_id)

    async def get_user_by_email(self, email: str) -> User | None:
        return await self._get_one(User.email == email)

    async def update_user(self, user: User) -> None:
        try:
            self.session.add(user)
            await self.session.commit()
            await self.session.refresh(user)
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseException(detail=f"User update failed: {str(e)}")
