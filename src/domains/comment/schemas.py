from pydantic import BaseModel, ConfigDict, Field


class AddCommentRequest(BaseModel):
    # 1.0 - 5.0 is what the client offers; the store does not enforce it
    rating: float = Field(..., examples=[4.5])
    text: str = ""


class CommentResponse(BaseModel):
    id: int
    rating: float
    text: str
    user_id: str
    recipe_id: int

    model_config = ConfigDict(from_attributes=True)
