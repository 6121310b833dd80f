from core.exception.exceptions import (
    BaseCustomException,
    ConstraintViolationException,
    NotFoundException,
)


class UserNotFoundException(NotFoundException):
    def __init__(self, detail="User does not exist."):
        super().__init__(detail=detail, code="USER_NOT_FOUND")


class DuplicateUserException(ConstraintViolationException):
    def __init__(self, detail="This user is already registered."):
        super().__init__(detail=detail, code="DUPLICATE_USER")


class DuplicateEmailException(ConstraintViolationException):
    def __init__(self, detail="This email is already in use."):
        super().__init__(detail=detail, code="DUPLICATE_EMAIL")


class InvalidProfileImageException(BaseCustomException):
    def __init__(self, detail="Unknown profile image."):
        super().__init__(status_code=400, detail=detail, code="INVALID_PROFILE_IMAGE")
