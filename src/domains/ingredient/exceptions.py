from core.exception.exceptions import ConstraintViolationException, NotFoundException


class IngredientNotFoundException(NotFoundException):
    def __init__(self, detail="Ingredient does not exist."):
        super().__init__(detail=detail, code="INGREDIENT_NOT_FOUND")


class DuplicateIngredientException(ConstraintViolationException):
    def __init__(self, detail="An ingredient with this name already exists."):
        super().__init__(detail=detail, code="DUPLICATE_INGREDIENT")


class DuplicateUsedIngredientException(ConstraintViolationException):
    def __init__(self, detail="This ingredient is already part of the recipe."):
        super().__init__(detail=detail, code="DUPLICATE_USED_INGREDIENT")
