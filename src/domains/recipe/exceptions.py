from core.exception.exceptions import ConstraintViolationException, NotFoundException


class RecipeNotFoundException(NotFoundException):
    def __init__(self, detail: str = "Recipe does not exist."):
        super().__init__(detail=detail, code="RECIPE_NOT_FOUND")


class DuplicateRecipeNameException(ConstraintViolationException):
    def __init__(self, detail: str = "A recipe with this name already exists."):
        super().__init__(detail=detail, code="DUPLICATE_RECIPE_NAME")
