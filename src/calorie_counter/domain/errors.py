"""Domain errors."""


class InvalidArgumentError(ValueError):
    """Raised when a value is outside the range the domain accepts."""


class NotFoundError(LookupError):
    """Raised when an id has no matching record."""

    kind = "Record"

    def __init__(self, record_id: int) -> None:
        super().__init__(f"{self.kind} {record_id} not found")
        self.record_id = record_id


class PersonaNotFoundError(NotFoundError):
    kind = "Persona"


class IngredientNotFoundError(NotFoundError):
    kind = "Ingredient"


class RecipeNotFoundError(NotFoundError):
    kind = "Recipe"
