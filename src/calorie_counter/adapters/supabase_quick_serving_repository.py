"""Supabase repository for quick servings."""

from dataclasses import dataclass

from supabase import Client

from calorie_counter.adapters.supabase_rows import parse_quick_serving
from calorie_counter.domain.servings import QuickServing
from calorie_counter.services.servings import QuickServingRepository


@dataclass
class SupabaseQuickServingRepository(QuickServingRepository):
    """Supabase implementation for quick servings."""

    client: Client

    def create_quick_serving(
        self, persona_id: int, name: str, calories: int
    ) -> QuickServing:
        """Insert a quick serving row and return it."""
        response = (
            self.client.table("quick_servings")
            .insert({"persona_id": persona_id, "name": name, "calories": calories})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create quick serving")
        return parse_quick_serving(response.data[0])

    def delete_quick_serving(self, quick_serving_id: int) -> None:
        """Delete a quick serving row."""
        self.client.table("quick_servings").delete().eq(
            "id", quick_serving_id
        ).execute()
