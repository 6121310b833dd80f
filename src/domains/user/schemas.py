from pydantic import BaseModel, EmailStr, Field, ConfigDict

PROFILE_IMAGES: tuple[str, ...] = tuple(f"profile{i}" for i in range(1, 21))


class RegisterRequest(BaseModel):
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    nickname: str = Field(..., min_length=1)
    email: EmailStr
    image_ref: str | None = None


class ChangeProfileImageRequest(BaseModel):
    image_ref: str = Field(..., examples=["profile7"])


class UserResponse(BaseModel):
    id: int
    external_id: str
    first_name: str
    last_name: str
    nickname: str
    email: str
    image_ref: str

    model_config = ConfigDict(from_attributes=True)
