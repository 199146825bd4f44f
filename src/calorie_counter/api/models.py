"""Pydantic models for API payloads."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from calorie_counter.domain.models import Persona
from calorie_counter.domain.recipes import (
    Cooking,
    CookedRecipe,
    CookedRecipeIngredient,
    CookedRecipeRequest,
    Ingredient,
    Recipe,
)
from calorie_counter.domain.servings import (
    CalorieSummary,
    QuickServing,
    Serving,
    ServingListEntry,
)
from calorie_counter.services.recipes import (
    recipe_calories_per_100g,
    recipe_total_calories,
    serving_total_calories,
    serving_total_weight,
)

# to_camel would turn the trailing "100g" into "100G".
DENSITY_ALIAS = "caloriesPer100g"


class ApiModel(BaseModel):
    """Base model exposing camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PersonaIn(ApiModel):
    """Persona create or update payload."""

    name: str = Field(min_length=1)
    target_daily_calories: int = Field(ge=0)


class PersonaOut(ApiModel):
    """Persona response."""

    id: int
    name: str
    target_daily_calories: int | None

    @classmethod
    def from_domain(cls, persona: Persona) -> "PersonaOut":
        return cls(
            id=persona.id,
            name=persona.name,
            target_daily_calories=persona.target_daily_calories,
        )


class CalorieSummaryOut(ApiModel):
    """Consumed, target and remaining calories."""

    consumed_calories: int
    target_calories: int
    remaining_calories: int

    @classmethod
    def from_domain(cls, summary: CalorieSummary) -> "CalorieSummaryOut":
        return cls(
            consumed_calories=summary.consumed_calories,
            target_calories=summary.target_calories,
            remaining_calories=summary.remaining_calories,
        )


class ServingListEntryOut(ApiModel):
    """Row of the merged servings listing."""

    id: int
    name: str | None
    calories: int
    created_at: datetime
    is_quick_serving: bool

    @classmethod
    def from_domain(cls, entry: ServingListEntry) -> "ServingListEntryOut":
        return cls(
            id=entry.id,
            name=entry.name,
            calories=entry.calories,
            created_at=entry.created_at,
            is_quick_serving=entry.is_quick_serving,
        )


class IngredientIn(ApiModel):
    """Ingredient create or update payload."""

    name: str = Field(min_length=1)
    calories_per_100g: int = Field(ge=0, alias=DENSITY_ALIAS)
    category: str


class IngredientOut(ApiModel):
    """Ingredient response."""

    id: int
    name: str
    calories_per_100g: int = Field(alias=DENSITY_ALIAS)
    category: str

    @classmethod
    def from_domain(cls, ingredient: Ingredient) -> "IngredientOut":
        return cls(
            id=ingredient.id,
            name=ingredient.name,
            calories_per_100g=ingredient.calories_per_100g,
            category=ingredient.category,
        )


class RecipeIngredientIn(ApiModel):
    """Ingredient amount a recipe calls for."""

    ingredient_id: int
    quantity_grams: int = Field(ge=0)


class RecipeIn(ApiModel):
    """Recipe create payload."""

    name: str = Field(min_length=1)
    description: str = ""
    category: str
    ingredients: list[RecipeIngredientIn]


class RecipeIngredientOut(ApiModel):
    """Recipe ingredient with the current ingredient values."""

    ingredient: IngredientOut
    quantity_grams: int


class RecipeOut(ApiModel):
    """Recipe response."""

    id: int
    name: str
    description: str
    category: str
    ingredients: list[RecipeIngredientOut]

    @classmethod
    def from_domain(cls, recipe: Recipe) -> "RecipeOut":
        return cls(
            id=recipe.id,
            name=recipe.name,
            description=recipe.description,
            category=recipe.category,
            ingredients=[
                RecipeIngredientOut(
                    ingredient=IngredientOut.from_domain(item.ingredient),
                    quantity_grams=item.quantity_grams,
                )
                for item in recipe.ingredients
            ],
        )


class CookedRecipeIngredientIn(ApiModel):
    """Ingredient amount for a cooked recipe.

    A density given here replaces the ingredient's current value.
    """

    ingredient_id: int
    quantity_grams: int = Field(ge=0)
    calories_per_100g: int | None = Field(default=None, ge=0, alias=DENSITY_ALIAS)


class CookedRecipeIn(ApiModel):
    """Cooked recipe payload."""

    name: str = Field(min_length=1)
    final_weight_grams: int = Field(gt=0)
    recipe_id: int | None = None
    cooked_recipe_ingredients: list[CookedRecipeIngredientIn]


class CookingIn(ApiModel):
    """Cooking create payload."""

    name: str = Field(min_length=1)
    cooked_recipes: list[CookedRecipeIn]


class CookedRecipeDraftOut(ApiModel):
    """Cooked recipe pre-filled from a recipe, ready to edit and submit."""

    name: str
    final_weight_grams: int
    recipe_id: int | None
    cooked_recipe_ingredients: list[CookedRecipeIngredientIn]

    @classmethod
    def from_domain(cls, draft: CookedRecipeRequest) -> "CookedRecipeDraftOut":
        return cls(
            name=draft.name,
            final_weight_grams=draft.final_weight_grams,
            recipe_id=draft.recipe_id,
            cooked_recipe_ingredients=[
                CookedRecipeIngredientIn(
                    ingredient_id=item.ingredient_id,
                    quantity_grams=item.quantity_grams,
                    calories_per_100g=item.calories_per_100g,
                )
                for item in draft.ingredients
            ],
        )


class CookedRecipeIngredientOut(ApiModel):
    """Ingredient values stored with a cooked recipe."""

    ingredient_id: int
    quantity_grams: int
    calories_per_100g: int = Field(alias=DENSITY_ALIAS)

    @classmethod
    def from_domain(
        cls, item: CookedRecipeIngredient
    ) -> "CookedRecipeIngredientOut":
        return cls(
            ingredient_id=item.ingredient_id,
            quantity_grams=item.quantity_grams,
            calories_per_100g=item.calories_per_100g,
        )


class CookedRecipeOut(ApiModel):
    """Cooked recipe with its calorie figures."""

    id: int
    name: str
    final_weight_grams: int
    recipe_id: int | None
    calories_per_100g: int | None = Field(alias=DENSITY_ALIAS)
    total_calories: int
    cooked_recipe_ingredients: list[CookedRecipeIngredientOut]

    @classmethod
    def from_domain(cls, recipe: CookedRecipe) -> "CookedRecipeOut":
        # Rows stored before final weights were required may still hold zero.
        density = (
            recipe_calories_per_100g(recipe) if recipe.final_weight_grams > 0 else None
        )
        return cls(
            id=recipe.id,
            name=recipe.name,
            final_weight_grams=recipe.final_weight_grams,
            recipe_id=recipe.recipe_id,
            calories_per_100g=density,
            total_calories=recipe_total_calories(recipe),
            cooked_recipe_ingredients=[
                CookedRecipeIngredientOut.from_domain(item)
                for item in recipe.ingredients
            ],
        )


class CookingOut(ApiModel):
    """Cooking response."""

    id: int
    name: str
    created_at: datetime
    cooked_recipes: list[CookedRecipeOut]

    @classmethod
    def from_domain(cls, cooking: Cooking) -> "CookingOut":
        return cls(
            id=cooking.id,
            name=cooking.name,
            created_at=cooking.created_at,
            cooked_recipes=[
                CookedRecipeOut.from_domain(recipe) for recipe in cooking.cooked_recipes
            ],
        )


class PortionIn(ApiModel):
    """Serving portion payload."""

    cooked_recipe_id: int
    weight_grams: int = Field(ge=0)


class ServingIn(ApiModel):
    """Serving create payload."""

    persona_id: int
    cooking_id: int | None = None
    name: str | None = None
    portions: list[PortionIn]


class ServingOut(ApiModel):
    """Serving with its totals."""

    id: int
    persona_id: int
    cooking_id: int | None
    name: str | None
    created_at: datetime
    total_calories: int
    total_weight_grams: int

    @classmethod
    def from_domain(cls, serving: Serving) -> "ServingOut":
        return cls(
            id=serving.id,
            persona_id=serving.persona_id,
            cooking_id=serving.cooking_id,
            name=serving.name,
            created_at=serving.created_at,
            total_calories=serving_total_calories(serving),
            total_weight_grams=serving_total_weight(serving),
        )


class QuickServingIn(ApiModel):
    """Quick serving payload."""

    persona_id: int
    name: str
    calories: int = Field(ge=0)


class QuickServingOut(ApiModel):
    """Quick serving response."""

    id: int
    persona_id: int
    name: str
    calories: int
    created_at: datetime

    @classmethod
    def from_domain(cls, quick: QuickServing) -> "QuickServingOut":
        return cls(
            id=quick.id,
            persona_id=quick.persona_id,
            name=quick.name,
            calories=quick.calories,
            created_at=quick.created_at,
        )
