"""Supabase repository for cookings and cooked recipes."""

from dataclasses import dataclass

from supabase import Client

from calorie_counter.adapters.supabase_rows import (
    COOKED_RECIPE_COLUMNS,
    COOKING_COLUMNS,
    parse_cooked_recipe,
    parse_cooking,
    parse_datetime,
)
from calorie_counter.domain.recipes import Cooking, CookedRecipe, CookedRecipeDraft
from calorie_counter.services.cookings import CookingRepository
from calorie_counter.services.servings import CookedRecipeLookup


@dataclass
class SupabaseCookingRepository(CookingRepository, CookedRecipeLookup):
    """Supabase implementation for cookings and cooked recipes."""

    client: Client

    def create_cooking(self, name: str, drafts: list[CookedRecipeDraft]) -> Cooking:
        """Insert a cooking, its cooked recipes and their ingredient snapshots."""
        response = self.client.table("cookings").insert({"name": name}).execute()
        if not response.data:
            raise RuntimeError("Failed to create cooking")
        cooking_row = response.data[0]
        cooking_id = int(cooking_row["id"])

        cooked_recipes = []
        for draft in drafts:
            recipe_response = (
                self.client.table("cooked_recipes")
                .insert(
                    {
                        "cooking_id": cooking_id,
                        "recipe_id": draft.recipe_id,
                        "name": draft.name,
                        "final_weight_grams": draft.final_weight_grams,
                    }
                )
                .execute()
            )
            if not recipe_response.data:
                raise RuntimeError("Failed to create cooked recipe")
            cooked_recipe_id = int(recipe_response.data[0]["id"])
            payload = [
                {
                    "cooked_recipe_id": cooked_recipe_id,
                    "ingredient_id": item.ingredient_id,
                    "quantity_grams": item.quantity_grams,
                    "calories_per_100g": item.calories_per_100g,
                }
                for item in draft.ingredients
            ]
            if payload:
                self.client.table("cooked_recipe_ingredients").insert(
                    payload
                ).execute()
            cooked_recipes.append(
                CookedRecipe(
                    id=cooked_recipe_id,
                    name=draft.name,
                    final_weight_grams=draft.final_weight_grams,
                    ingredients=list(draft.ingredients),
                    recipe_id=draft.recipe_id,
                )
            )

        return Cooking(
            id=cooking_id,
            name=str(cooking_row.get("name") or name),
            created_at=parse_datetime(cooking_row.get("created_at")),
            cooked_recipes=cooked_recipes,
        )

    def get_cooking(self, cooking_id: int) -> Cooking | None:
        """Return a cooking with nested cooked recipes."""
        response = (
            self.client.table("cookings")
            .select(COOKING_COLUMNS)
            .eq("id", cooking_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_cooking(response.data[0])

    def list_cookings(self) -> list[Cooking]:
        response = (
            self.client.table("cookings")
            .select(COOKING_COLUMNS)
            .order("created_at", desc=True)
            .execute()
        )
        return [parse_cooking(row) for row in response.data or []]

    def get_cooked_recipes(self, cooked_recipe_ids: list[int]) -> list[CookedRecipe]:
        if not cooked_recipe_ids:
            return []
        response = (
            self.client.table("cooked_recipes")
            .select(COOKED_RECIPE_COLUMNS)
            .in_("id", cooked_recipe_ids)
            .execute()
        )
        return [parse_cooked_recipe(row) for row in response.data or []]
