import random

from domains.user.exceptions import (
    DuplicateEmailException,
    DuplicateUserException,
    InvalidProfileImageException,
    UserNotFoundException,
)
from domains.user.models import User
from domains.user.repository import UserRepository
from domains.user.schemas import (
    PROFILE_IMAGES,
    ChangeProfileImageRequest,
    RegisterRequest,
    UserResponse,
)


class UserService:
    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def register(self, external_id: str, request: RegisterRequest) -> UserResponse:
        if await self.user_repo.get_user_by_external_id(external_id):
            raise DuplicateUserException()

        if await self.user_repo.get_user_by_email(request.email):
            raise DuplicateEmailException()

        image_ref = request.image_ref or random.choice(PROFILE_IMAGES)
        self._check_image_ref(image_ref)

        user = User(
            external_id=external_id,
            first_name=request.first_name,
            last_name=request.last_name,
            nickname=request.nickname,
            email=request.email,
            image_ref=image_ref,
        )
        saved_user = await self.user_repo.save_user(user)
        return UserResponse.model_validate(saved_user)

    async def get_user(self, external_id: str) -> UserResponse:
        user = await self.user_repo.get_user_by_external_id(external_id)

        if not user:
            raise UserNotFoundException()
        return UserResponse.model_validate(user)

    async def change_profile_image(
        self, external_id: str, request: ChangeProfileImageRequest
    ) -> UserResponse:
        user = await self.user_repo.get_user_by_external_id(external_id)
        if not user:
            raise UserNotFoundException()

        self._check_image_ref(request.image_ref)

        user.image_ref = request.image_ref
        await self.user_repo.update_user(user)
        return UserResponse.model_validate(user)

    @staticmethod
    def _check_image_ref(image_ref: str) -> None:
        # a bundled profile picture key, or a URL handed back by the image storage
        if image_ref in PROFILE_IMAGES:
            return
        if image_ref.startswith(("http://", "https://")):
            return
        raise InvalidProfileImageException(detail=f"Unknown profile image '{image_ref}'.")
