"""Supabase repository for recipes."""

from dataclasses import dataclass

from supabase import Client

from calorie_counter.adapters.supabase_rows import RECIPE_COLUMNS, parse_recipe
from calorie_counter.domain.recipes import IngredientQuantity, Recipe
from calorie_counter.services.recipe_book import RecipeRepository


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase implementation for recipes and their ingredient rows."""

    client: Client

    def create_recipe(
        self,
        name: str,
        description: str,
        category: str,
        ingredients: list[IngredientQuantity],
    ) -> int:
        response = (
            self.client.table("recipes")
            .insert({"name": name, "description": description, "category": category})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create recipe")
        recipe_id = int(response.data[0]["id"])
        payload = [
            {
                "recipe_id": recipe_id,
                "ingredient_id": item.ingredient_id,
                "quantity_grams": item.quantity_grams,
            }
            for item in ingredients
        ]
        if payload:
            self.client.table("recipe_ingredients").insert(payload).execute()
        return recipe_id

    def get_recipe(self, recipe_id: int) -> Recipe | None:
        response = (
            self.client.table("recipes")
            .select(RECIPE_COLUMNS)
            .eq("id", recipe_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_recipe(response.data[0])

    def list_recipes(self) -> list[Recipe]:
        response = (
            self.client.table("recipes")
            .select(RECIPE_COLUMNS)
            .order("updated_at", desc=True)
            .execute()
        )
        return [parse_recipe(row) for row in response.data or []]
