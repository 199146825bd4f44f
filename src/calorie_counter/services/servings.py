"""Serving and quick serving recording."""

import logging
from dataclasses import dataclass
from typing import Protocol

from calorie_counter.domain.errors import InvalidArgumentError
from calorie_counter.domain.recipes import CookedRecipe
from calorie_counter.domain.servings import PortionRequest, QuickServing, Serving

logger = logging.getLogger(__name__)


class ServingWriteRepository(Protocol):
    """Persistence interface for recording and browsing servings."""

    def create_serving(
        self,
        persona_id: int,
        cooking_id: int | None,
        name: str | None,
        portions: list[PortionRequest],
    ) -> int:
        """Create a serving with its portions and return its id."""

    def get_serving(self, serving_id: int) -> Serving | None:
        """Return a serving with portions and cooked recipes, if present."""

    def delete_serving(self, serving_id: int) -> None:
        """Delete a serving and its portions."""

    def list_cooking_servings(self, cooking_id: int) -> list[Serving]:
        """Return the servings cut from one cooking, newest first."""

    def list_all_servings(self) -> list[Serving]:
        """Return every serving, newest first."""


class CookedRecipeLookup(Protocol):
    """Read interface for cooked recipes by id."""

    def get_cooked_recipes(self, cooked_recipe_ids: list[int]) -> list[CookedRecipe]:
        """Return the cooked recipes matching the given ids."""


class QuickServingRepository(Protocol):
    """Persistence interface for quick servings."""

    def create_quick_serving(
        self, persona_id: int, name: str, calories: int
    ) -> QuickServing:
        """Create and return a quick serving."""

    def delete_quick_serving(self, quick_serving_id: int) -> None:
        """Delete a quick serving."""


@dataclass
class ServingService:
    """Service for recording servings cut from cooked recipes."""

    repository: ServingWriteRepository
    cooked_recipe_repository: CookedRecipeLookup

    def create_serving(
        self,
        persona_id: int,
        cooking_id: int | None,
        name: str | None,
        portions: list[PortionRequest],
    ) -> Serving:
        """Persist a serving, skipping portions with no weight.

        Every remaining portion must point at a stored cooked recipe with a
        positive final weight, so the serving's calories can be computed.
        """
        for portion in portions:
            if portion.weight_grams < 0:
                raise InvalidArgumentError("weight_grams must not be negative")
        kept = [portion for portion in portions if portion.weight_grams]
        self._check_cooked_recipes(kept)
        serving_id = self.repository.create_serving(
            persona_id=persona_id,
            cooking_id=cooking_id,
            name=name.strip() if name and name.strip() else None,
            portions=kept,
        )
        serving = self.repository.get_serving(serving_id)
        if serving is None:
            raise RuntimeError("Failed to load created serving")
        logger.info(
            "Recorded serving",
            extra={"serving_id": serving_id, "persona_id": persona_id},
        )
        return serving

    def get_serving(self, serving_id: int) -> Serving | None:
        """Return a serving by id."""
        return self.repository.get_serving(serving_id)

    def delete_serving(self, serving_id: int) -> None:
        """Delete a serving."""
        self.repository.delete_serving(serving_id)

    def list_cooking_servings(self, cooking_id: int) -> list[Serving]:
        return self.repository.list_cooking_servings(cooking_id)

    def list_all_servings(self) -> list[Serving]:
        return self.repository.list_all_servings()

    def _check_cooked_recipes(self, portions: list[PortionRequest]) -> None:
        requested = sorted({portion.cooked_recipe_id for portion in portions})
        if not requested:
            return
        found = {
            recipe.id: recipe
            for recipe in self.cooked_recipe_repository.get_cooked_recipes(requested)
        }
        for cooked_recipe_id in requested:
            recipe = found.get(cooked_recipe_id)
            if recipe is None:
                raise InvalidArgumentError(f"Unknown cooked recipe {cooked_recipe_id}")
            if recipe.final_weight_grams <= 0:
                raise InvalidArgumentError(
                    f"Cooked recipe {cooked_recipe_id} has no final weight"
                )


@dataclass
class QuickServingService:
    """Service for quick servings logged by calorie count."""

    repository: QuickServingRepository

    def create_quick_serving(
        self, persona_id: int, name: str, calories: int
    ) -> QuickServing:
        """Validate and persist a quick serving."""
        if calories < 0:
            raise InvalidArgumentError("calories must not be negative")
        quick = self.repository.create_quick_serving(persona_id, name.strip(), calories)
        logger.info(
            "Recorded quick serving",
            extra={"quick_serving_id": quick.id, "persona_id": persona_id},
        )
        return quick

    def delete_quick_serving(self, quick_serving_id: int) -> None:
        """Delete a quick serving."""
        self.repository.delete_quick_serving(quick_serving_id)
