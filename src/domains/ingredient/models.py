from sqlalchemy import Column, Integer, String, ForeignKey

from core.database import Base


class Ingredient(Base):
    __tablename__ = "ingredients"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    # exact (case-sensitive) uniqueness; fragment search is case-insensitive
    name = Column(String(120), nullable=False, unique=True, index=True)


class UsedIngredient(Base):
    __tablename__ = "used_ingredients"

    recipe_id = Column(
        Integer, ForeignKey("recipes.id", ondelete="CASCADE"), primary_key=True
    )
    ingredient_id = Column(
        Integer, ForeignKey("ingredients.id", ondelete="RESTRICT"), primary_key=True
    )
    quantity = Column(String(60), nullable=False, default="")
