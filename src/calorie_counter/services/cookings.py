"""Cooking sessions and ingredient snapshots."""

import logging
from dataclasses import dataclass
from typing import Protocol

from calorie_counter.domain.errors import InvalidArgumentError
from calorie_counter.domain.recipes import (
    Cooking,
    CookedRecipe,
    CookedRecipeDraft,
    CookedRecipeIngredient,
    CookedRecipeRequest,
    Ingredient,
    IngredientQuantity,
    Recipe,
)

logger = logging.getLogger(__name__)


class IngredientLookup(Protocol):
    """Read interface for base ingredients by id."""

    def get_ingredients(self, ingredient_ids: list[int]) -> list[Ingredient]:
        """Return the ingredients matching the given ids."""


class CookingRepository(Protocol):
    """Persistence interface for cookings."""

    def create_cooking(self, name: str, drafts: list[CookedRecipeDraft]) -> Cooking:
        """Create a cooking with its cooked recipes and return it."""

    def get_cooking(self, cooking_id: int) -> Cooking | None:
        """Return a cooking with its cooked recipes, if present."""

    def list_cookings(self) -> list[Cooking]:
        """Return all cookings, newest first."""

    def get_cooked_recipes(self, cooked_recipe_ids: list[int]) -> list[CookedRecipe]:
        """Return the cooked recipes matching the given ids."""


def snapshot_ingredient(
    ingredient: Ingredient,
    quantity_grams: int,
    calories_per_100g: int | None = None,
) -> CookedRecipeIngredient:
    """Copy an ingredient's values for use in a cooked recipe."""
    density = (
        ingredient.calories_per_100g if calories_per_100g is None else calories_per_100g
    )
    if quantity_grams < 0:
        raise InvalidArgumentError("quantity_grams must not be negative")
    if density < 0:
        raise InvalidArgumentError("calories_per_100g must not be negative")
    return CookedRecipeIngredient(
        ingredient_id=ingredient.id,
        quantity_grams=quantity_grams,
        calories_per_100g=density,
    )


def draft_from_recipe(recipe: Recipe) -> CookedRecipeRequest:
    """Pre-fill a cooked recipe from a recipe's target quantities.

    The final weight starts as the raw ingredient weight and is meant to be
    replaced by the weight measured after cooking.
    """
    return CookedRecipeRequest(
        name=recipe.name,
        final_weight_grams=sum(item.quantity_grams for item in recipe.ingredients),
        ingredients=[
            IngredientQuantity(
                ingredient_id=item.ingredient.id,
                quantity_grams=item.quantity_grams,
                calories_per_100g=item.ingredient.calories_per_100g,
            )
            for item in recipe.ingredients
        ],
        recipe_id=recipe.id,
    )


@dataclass
class CookingService:
    """Service that records cookings with snapshotted ingredient values."""

    ingredient_repository: IngredientLookup
    repository: CookingRepository

    def create_cooking(
        self, name: str, cooked_recipes: list[CookedRecipeRequest]
    ) -> Cooking:
        """Snapshot ingredient values and persist the cooking."""
        cleaned = name.strip()
        if not cleaned:
            raise InvalidArgumentError("name must not be empty")
        ingredient_ids = sorted(
            {
                item.ingredient_id
                for recipe in cooked_recipes
                for item in recipe.ingredients
            }
        )
        ingredients = {
            ingredient.id: ingredient
            for ingredient in self.ingredient_repository.get_ingredients(ingredient_ids)
        }
        drafts = [_build_draft(recipe, ingredients) for recipe in cooked_recipes]
        cooking = self.repository.create_cooking(cleaned, drafts)
        logger.info(
            "Created cooking",
            extra={"cooking_id": cooking.id, "cooked_recipes": len(drafts)},
        )
        return cooking

    def get_cooking(self, cooking_id: int) -> Cooking | None:
        """Return a cooking by id."""
        return self.repository.get_cooking(cooking_id)

    def list_cookings(self) -> list[Cooking]:
        return self.repository.list_cookings()


def _build_draft(
    request: CookedRecipeRequest, ingredients: dict[int, Ingredient]
) -> CookedRecipeDraft:
    if not request.name.strip():
        raise InvalidArgumentError("cooked recipe name must not be empty")
    if request.final_weight_grams <= 0:
        raise InvalidArgumentError("final_weight_grams must be positive")
    snapshots = []
    for item in request.ingredients:
        ingredient = ingredients.get(item.ingredient_id)
        if ingredient is None:
            raise InvalidArgumentError(f"Unknown ingredient {item.ingredient_id}")
        snapshots.append(
            snapshot_ingredient(ingredient, item.quantity_grams, item.calories_per_100g)
        )
    return CookedRecipeDraft(
        name=request.name.strip(),
        final_weight_grams=request.final_weight_grams,
        ingredients=snapshots,
        recipe_id=request.recipe_id,
    )
