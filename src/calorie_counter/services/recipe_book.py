"""Reusable recipes and cooking drafts built from them."""

import logging
from dataclasses import dataclass
from typing import Protocol

from calorie_counter.domain.errors import InvalidArgumentError, RecipeNotFoundError
from calorie_counter.domain.recipes import (
    RECIPE_CATEGORIES,
    CookedRecipeRequest,
    IngredientQuantity,
    Recipe,
)
from calorie_counter.services.cookings import IngredientLookup, draft_from_recipe

logger = logging.getLogger(__name__)


class RecipeRepository(Protocol):
    """Persistence interface for recipes."""

    def create_recipe(
        self,
        name: str,
        description: str,
        category: str,
        ingredients: list[IngredientQuantity],
    ) -> int:
        """Create a recipe with its ingredient rows and return its id."""

    def get_recipe(self, recipe_id: int) -> Recipe | None:
        """Return a recipe with its ingredients, if present."""

    def list_recipes(self) -> list[Recipe]:
        """Return all recipes, most recently updated first."""


@dataclass
class RecipeService:
    """Application service for recipes."""

    repository: RecipeRepository
    ingredient_repository: IngredientLookup

    def create_recipe(
        self,
        name: str,
        description: str,
        category: str,
        ingredients: list[IngredientQuantity],
    ) -> Recipe:
        """Validate and persist a recipe."""
        cleaned = name.strip()
        if not cleaned:
            raise InvalidArgumentError("name must not be empty")
        if category not in RECIPE_CATEGORIES:
            raise InvalidArgumentError(f"Unknown recipe category: {category}")
        for item in ingredients:
            if item.quantity_grams < 0:
                raise InvalidArgumentError("quantity_grams must not be negative")
        requested = {item.ingredient_id for item in ingredients}
        known = {
            ingredient.id
            for ingredient in self.ingredient_repository.get_ingredients(
                sorted(requested)
            )
        }
        missing = sorted(requested - known)
        if missing:
            raise InvalidArgumentError(f"Unknown ingredient {missing[0]}")

        recipe_id = self.repository.create_recipe(
            cleaned, description.strip(), category, ingredients
        )
        recipe = self.repository.get_recipe(recipe_id)
        if recipe is None:
            raise RuntimeError("Failed to load created recipe")
        logger.info("Created recipe", extra={"recipe_id": recipe_id})
        return recipe

    def get_recipe(self, recipe_id: int) -> Recipe:
        recipe = self.repository.get_recipe(recipe_id)
        if recipe is None:
            raise RecipeNotFoundError(recipe_id)
        return recipe

    def list_recipes(self) -> list[Recipe]:
        return self.repository.list_recipes()

    def cooking_draft(self, recipe_id: int) -> CookedRecipeRequest:
        """Return a cooked recipe pre-filled from a stored recipe."""
        return draft_from_recipe(self.get_recipe(recipe_id))
