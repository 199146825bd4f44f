"""Domain models for ingredients, recipes and cookings."""

from dataclasses import dataclass, field
from datetime import datetime

INGREDIENT_CATEGORIES = (
    "Baking & Cooking Ingredients",
    "Canned & Packaged Foods",
    "Dairy",
    "Drinks & Liquids",
    "Fruit",
    "Meat",
    "Nuts & Seeds",
    "Oat & Muesli",
    "Oils & Fats",
    "Pasta & Rice",
    "Spices & Herbs",
    "Sweets & Snackies",
    "Vegetable",
    "Other",
)

RECIPE_CATEGORIES = (
    "Dessert",
    "Main Dish",
    "Salad",
    "Side",
    "Snack",
    "Soup",
    "Other",
)


@dataclass(frozen=True)
class Ingredient:
    """Base ingredient with its current calorie density."""

    id: int
    name: str
    calories_per_100g: int
    category: str = "Other"


@dataclass(frozen=True)
class RecipeIngredient:
    """Ingredient with the quantity a recipe calls for."""

    ingredient: Ingredient
    quantity_grams: int


@dataclass(frozen=True)
class Recipe:
    """Reusable named composition of ingredients."""

    id: int
    name: str
    description: str
    category: str
    ingredients: list[RecipeIngredient] = field(default_factory=list)


@dataclass(frozen=True)
class CookedRecipeIngredient:
    """Ingredient values copied at cook time."""

    ingredient_id: int
    quantity_grams: int
    calories_per_100g: int


@dataclass(frozen=True)
class CookedRecipe:
    """A recipe as prepared in one cooking, with its measured final weight."""

    id: int
    name: str
    final_weight_grams: int
    ingredients: list[CookedRecipeIngredient] = field(default_factory=list)
    recipe_id: int | None = None


@dataclass(frozen=True)
class IngredientQuantity:
    """Ingredient amount submitted for a cooked recipe.

    ``calories_per_100g`` overrides the ingredient's current density when set.
    """

    ingredient_id: int
    quantity_grams: int
    calories_per_100g: int | None = None


@dataclass(frozen=True)
class CookedRecipeRequest:
    """Cooked recipe as submitted, before ingredient values are copied."""

    name: str
    final_weight_grams: int
    ingredients: list[IngredientQuantity]
    recipe_id: int | None = None


@dataclass(frozen=True)
class CookedRecipeDraft:
    """Unsaved cooked recipe submitted when creating a cooking."""

    name: str
    final_weight_grams: int
    ingredients: list[CookedRecipeIngredient]
    recipe_id: int | None = None


@dataclass(frozen=True)
class Cooking:
    """A cooking session producing one or more cooked recipes."""

    id: int
    name: str
    created_at: datetime
    cooked_recipes: list[CookedRecipe] = field(default_factory=list)
