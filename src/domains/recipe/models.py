from sqlalchemy import Column, Integer, String, Text, DateTime, CheckConstraint
from sqlalchemy.sql import func

from core.database import Base


class Recipe(Base):
    __tablename__ = "recipes"
    __table_args__ = (
        CheckConstraint("calories >= 0", name="ck_recipes_calories_non_negative"),
    )

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(120), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=False, default="")
    method = Column(Text, nullable=False, default="")
    # external user id, intentionally not a foreign key
    owner_user_id = Column(String(128), nullable=False, default="", index=True)
    type = Column(String(45), nullable=False, default="", index=True)
    calories = Column(Integer, nullable=False, default=0)
    image_ref = Column(String(512), nullable=False, default="")
    created_at = Column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
