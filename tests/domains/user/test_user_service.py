import pytest
from unittest.mock import AsyncMock

from domains.user.exceptions import (
    DuplicateEmailException,
    DuplicateUserException,
    InvalidProfileImageException,
    UserNotFoundException,
)
from domains.user.models import User
from domains.user.repository import UserRepository
from domains.user.schemas import PROFILE_IMAGES, ChangeProfileImageRequest, RegisterRequest
from domains.user.service import UserService


def _request(**overrides) -> RegisterRequest:
    data = {
        "first_name": "Ana",
        "last_name": "Silva",
        "nickname": "ana",
        "email": "ana@example.com",
    }
    data.update(overrides)
    return RegisterRequest(**data)


def _saved(user: User) -> User:
    user.id = 1
    return user


@pytest.mark.asyncio
class TestUserService:
    @pytest.fixture
    def mock_repo(self):
        return AsyncMock()

    @pytest.fixture
    def service(self, mock_repo):
        return UserService(mock_repo)

    async def test_register_picks_profile_image(self, service, mock_repo):
        mock_repo.get_user_by_external_id.return_value = None
        mock_repo.get_user_by_email.return_value = None
        mock_repo.save_user.side_effect = _saved

        result = await service.register("user-123", _request())

        assert result.external_id == "user-123"
        assert result.image_ref in PROFILE_IMAGES
        mock_repo.save_user.assert_awaited_once()

    async def test_register_keeps_given_url(self, service, mock_repo):
        mock_repo.get_user_by_external_id.return_value = None
        mock_repo.get_user_by_email.return_value = None
        mock_repo.save_user.side_effect = _saved

        result = await service.register("user-123", _request(image_ref="https://img.example.com/a.png"))

        assert result.image_ref == "https://img.example.com/a.png"

    async def test_register_duplicate_user(self, service, mock_repo):
        mock_repo.get_user_by_external_id.return_value = User(id=1)

        with pytest.raises(DuplicateUserException):
            await service.register("user-123", _request())
        mock_repo.save_user.assert_not_called()

    async def test_register_duplicate_email(self, service, mock_repo):
        mock_repo.get_user_by_external_id.return_value = None
        mock_repo.get_user_by_email.return_value = User(id=2)

        with pytest.raises(DuplicateEmailException):
            await service.register("user-123", _request())

    async def test_register_invalid_image(self, service, mock_repo):
        mock_repo.get_user_by_external_id.return_value = None
        mock_repo.get_user_by_email.return_value = None

        with pytest.raises(InvalidProfileImageException):
            await service.register("user-123", _request(image_ref="profile99"))

    async def test_get_user_missing(self, service, mock_repo):
        mock_repo.get_user_by_external_id.return_value = None

        with pytest.raises(UserNotFoundException):
            await service.get_user("nobody")


@pytest.mark.asyncio
async def test_change_profile_image(db_session, test_user):
    service = UserService(UserRepository(db_session))

    result = await service.change_profile_image(
        test_user.external_id, ChangeProfileImageRequest(image_ref="profile7")
    )

    assert result.image_ref == "profile7"
    assert (await service.get_user(test_user.external_id)).image_ref == "profile7"
