"""Ingredient catalog management."""

import logging
from dataclasses import dataclass
from typing import Protocol

from calorie_counter.domain.errors import IngredientNotFoundError, InvalidArgumentError
from calorie_counter.domain.recipes import INGREDIENT_CATEGORIES, Ingredient

logger = logging.getLogger(__name__)

SEARCH_LIMIT = 10


class IngredientRepository(Protocol):
    """Persistence interface for base ingredients."""

    def create_ingredient(
        self, name: str, calories_per_100g: int, category: str
    ) -> Ingredient:
        """Create and return an ingredient."""

    def update_ingredient(
        self, ingredient_id: int, name: str, calories_per_100g: int, category: str
    ) -> Ingredient | None:
        """Update an ingredient and return it, or None when it does not exist."""

    def delete_ingredient(self, ingredient_id: int) -> None:
        """Delete an ingredient."""

    def get_ingredients(self, ingredient_ids: list[int]) -> list[Ingredient]:
        """Return the ingredients matching the given ids."""

    def list_ingredients(self) -> list[Ingredient]:
        """Return all ingredients, most recently updated first."""

    def search_ingredients(self, name: str, limit: int) -> list[Ingredient]:
        """Return up to ``limit`` ingredients whose name contains ``name``."""


@dataclass
class IngredientService:
    """Application service for the ingredient catalog.

    Edits here never reach cooked recipes, which keep the values copied
    when they were cooked.
    """

    repository: IngredientRepository

    def create_ingredient(
        self, name: str, calories_per_100g: int, category: str
    ) -> Ingredient:
        """Validate and create an ingredient."""
        cleaned = _validate(name, calories_per_100g, category)
        ingredient = self.repository.create_ingredient(
            cleaned, calories_per_100g, category
        )
        logger.info("Created ingredient", extra={"ingredient_id": ingredient.id})
        return ingredient

    def update_ingredient(
        self, ingredient_id: int, name: str, calories_per_100g: int, category: str
    ) -> Ingredient:
        """Validate and update an ingredient."""
        cleaned = _validate(name, calories_per_100g, category)
        ingredient = self.repository.update_ingredient(
            ingredient_id, cleaned, calories_per_100g, category
        )
        if ingredient is None:
            raise IngredientNotFoundError(ingredient_id)
        return ingredient

    def delete_ingredient(self, ingredient_id: int) -> None:
        """Delete an ingredient."""
        self.repository.delete_ingredient(ingredient_id)
        logger.info("Deleted ingredient", extra={"ingredient_id": ingredient_id})

    def list_ingredients(self) -> list[Ingredient]:
        return self.repository.list_ingredients()

    def search_ingredients(self, name: str) -> list[Ingredient]:
        """Return at most ten ingredients matching part of a name."""
        return self.repository.search_ingredients(name.strip(), SEARCH_LIMIT)


def _validate(name: str, calories_per_100g: int, category: str) -> str:
    cleaned = name.strip()
    if not cleaned:
        raise InvalidArgumentError("name must not be empty")
    if calories_per_100g < 0:
        raise InvalidArgumentError("calories_per_100g must not be negative")
    if category not in INGREDIENT_CATEGORIES:
        raise InvalidArgumentError(f"Unknown ingredient category: {category}")
    return cleaned
