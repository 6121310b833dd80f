import pytest

from core.exception.exceptions import DatabaseException
from domains.user.exceptions import DuplicateEmailException, DuplicateUserException
from domains.user.models import User
from domains.user.repository import UserRepository


def _user(external_id="user-1", email="one@example.com") -> User:
    return User(
        external_id=external_id,
        first_name="Ana",
        last_name="Silva",
        nickname="ana",
        email=email,
        image_ref="profile1",
    )


@pytest.mark.asyncio
async def test_save_user(db_session):
    """[Repository] saving assigns an id"""
    repo = UserRepository(db_session)

    saved_user = await repo.save_user(_user())

    assert saved_user.id is not None
    assert (await repo.get_user_by_external_id("user-1")).email == "one@example.com"


@pytest.mark.asyncio
async def test_save_user_duplicate_email(db_session):
    repo = UserRepository(db_session)
    await repo.save_user(_user())

    with pytest.raises(DuplicateEmailException):
        await repo.save_user(_user(external_id="user-2"))


@pytest.mark.asyncio
async def test_save_user_duplicate_external_id(db_session):
    repo = UserRepository(db_session)
    await repo.save_user(_user())

    with pytest.raises(DuplicateUserException):
        await repo.save_user(_user(email="two@example.com"))


@pytest.mark.asyncio
async def test_save_user_other_integrity_error(db_session):
    """[Repository] a rejected insert that collides with no user is a store failure"""
    repo = UserRepository(db_session)
    user = _user()
    user.nickname = None

    with pytest.raises(DatabaseException):
        await repo.save_user(user)


@pytest.mark.asyncio
async def test_get_user_missing(db_session):
    repo = UserRepository(db_session)

    assert await repo.get_user_by_external_id("nobody") is None
    assert await repo.get_user_by_email("nobody@example.com") is None
