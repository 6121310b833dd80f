# src/core/exception/exceptions.py
from pydantic import BaseModel, Field
from typing import Any


class BaseCustomException(Exception):
    def __init__(self, status_code: int, code: str, detail: str):
        self.status_code = status_code
        self.code = code
        self.detail = detail
        super().__init__(detail)


class NotFoundException(BaseCustomException):
    """A single-row point lookup found nothing."""

    def __init__(self, detail: str = "Requested data does not exist.", code: str = "NOT_FOUND"):
        super().__init__(status_code=404, code=code, detail=detail)


class ConstraintViolationException(BaseCustomException):
    """A uniqueness constraint rejected an insert."""

    def __init__(
        self,
        detail: str = "A row with the same unique key already exists.",
        code: str = "CONSTRAINT_VIOLATION",
    ):
        super().__init__(status_code=409, code=code, detail=detail)


class DatabaseException(BaseCustomException):
    """Any other store failure (the query-failure kind)."""

    def __init__(self, detail: str = "Database error"):
        super().__init__(status_code=500, code="DB_ERROR", detail=detail)


class UnexpectedException(BaseCustomException):
    def __init__(self, detail: str = "Internal server error"):
        super().__init__(status_code=500, code="SERVER_ERROR", detail=detail)


class UnauthorizedException(BaseCustomException):
    def __init__(self, detail: str = "An identified user is required for this action."):
        super().__init__(status_code=401, code="UNAUTHORIZED", detail=detail)


class GlobalErrorResponse(BaseModel):
    status_code: int = Field(..., examples=[409])
    code: str = Field(..., examples=["ERROR_CODE_STRING"])
    detail: str = Field(..., examples=["Detailed error message."])
    errors: list[Any] | None = Field(None, description="Validation error details")
