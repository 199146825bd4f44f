"""Supabase repository for base ingredients."""

from dataclasses import dataclass

from supabase import Client

from calorie_counter.adapters.supabase_rows import INGREDIENT_COLUMNS, parse_ingredient
from calorie_counter.domain.recipes import Ingredient
from calorie_counter.services.ingredients import IngredientRepository


@dataclass
class SupabaseIngredientRepository(IngredientRepository):
    """Supabase implementation for the ingredient catalog."""

    client: Client

    def create_ingredient(
        self, name: str, calories_per_100g: int, category: str
    ) -> Ingredient:
        response = (
            self.client.table("ingredients")
            .insert(
                {
                    "name": name,
                    "calories_per_100g": calories_per_100g,
                    "category": category,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create ingredient")
        return parse_ingredient(response.data[0])

    def update_ingredient(
        self, ingredient_id: int, name: str, calories_per_100g: int, category: str
    ) -> Ingredient | None:
        response = (
            self.client.table("ingredients")
            .update(
                {
                    "name": name,
                    "calories_per_100g": calories_per_100g,
                    "category": category,
                }
            )
            .eq("id", ingredient_id)
            .execute()
        )
        if not response.data:
            return None
        return parse_ingredient(response.data[0])

    def delete_ingredient(self, ingredient_id: int) -> None:
        self.client.table("ingredients").delete().eq("id", ingredient_id).execute()

    def get_ingredients(self, ingredient_ids: list[int]) -> list[Ingredient]:
        """Return ingredients by id."""
        if not ingredient_ids:
            return []
        response = (
            self.client.table("ingredients")
            .select(INGREDIENT_COLUMNS)
            .in_("id", ingredient_ids)
            .execute()
        )
        return [parse_ingredient(row) for row in response.data or []]

    def list_ingredients(self) -> list[Ingredient]:
        response = (
            self.client.table("ingredients")
            .select(INGREDIENT_COLUMNS)
            .order("updated_at", desc=True)
            .execute()
        )
        return [parse_ingredient(row) for row in response.data or []]

    def search_ingredients(self, name: str, limit: int) -> list[Ingredient]:
        """Return ingredients whose name contains ``name``, ignoring case."""
        response = (
            self.client.table("ingredients")
            .select(INGREDIENT_COLUMNS)
            .ilike("name", f"%{name}%")
            .order("updated_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [parse_ingredient(row) for row in response.data or []]
