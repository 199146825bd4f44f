"""Supabase repository for servings."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from calorie_counter.adapters.supabase_rows import (
    QUICK_SERVING_COLUMNS,
    SERVING_COLUMNS,
    parse_quick_serving,
    parse_serving,
)
from calorie_counter.domain.servings import PortionRequest, QuickServing, Serving
from calorie_counter.services.calories import ServingRepository
from calorie_counter.services.servings import ServingWriteRepository


@dataclass
class SupabaseServingRepository(ServingRepository, ServingWriteRepository):
    """Supabase implementation for serving reads and writes."""

    client: Client

    def list_servings(
        self, persona_id: int, start: datetime, end: datetime
    ) -> list[Serving]:
        """Return servings created within the closed window."""
        response = (
            self.client.table("servings")
            .select(SERVING_COLUMNS)
            .eq("persona_id", persona_id)
            .gte("created_at", start.isoformat())
            .lte("created_at", end.isoformat())
            .order("created_at", desc=True)
            .execute()
        )
        return [parse_serving(row) for row in response.data or []]

    def list_quick_servings(
        self, persona_id: int, start: datetime, end: datetime
    ) -> list[QuickServing]:
        """Return quick servings created within the closed window."""
        response = (
            self.client.table("quick_servings")
            .select(QUICK_SERVING_COLUMNS)
            .eq("persona_id", persona_id)
            .gte("created_at", start.isoformat())
            .lte("created_at", end.isoformat())
            .order("created_at", desc=True)
            .execute()
        )
        return [parse_quick_serving(row) for row in response.data or []]

    def create_serving(
        self,
        persona_id: int,
        cooking_id: int | None,
        name: str | None,
        portions: list[PortionRequest],
    ) -> int:
        """Create a serving row with its portion rows."""
        response = (
            self.client.table("servings")
            .insert({"persona_id": persona_id, "cooking_id": cooking_id, "name": name})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create serving")
        serving_id = int(response.data[0]["id"])
        payload = [
            {
                "serving_id": serving_id,
                "cooked_recipe_id": portion.cooked_recipe_id,
                "weight_grams": portion.weight_grams,
            }
            for portion in portions
        ]
        if payload:
            self.client.table("serving_portions").insert(payload).execute()
        return serving_id

    def get_serving(self, serving_id: int) -> Serving | None:
        """Return a serving with nested portions."""
        response = (
            self.client.table("servings")
            .select(SERVING_COLUMNS)
            .eq("id", serving_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_serving(response.data[0])

    def delete_serving(self, serving_id: int) -> None:
        """Delete a serving; portions cascade in the database."""
        self.client.table("servings").delete().eq("id", serving_id).execute()

    def list_cooking_servings(self, cooking_id: int) -> list[Serving]:
        response = (
            self.client.table("servings")
            .select(SERVING_COLUMNS)
            .eq("cooking_id", cooking_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [parse_serving(row) for row in response.data or []]

    def list_all_servings(self) -> list[Serving]:
        response = (
            self.client.table("servings")
            .select(SERVING_COLUMNS)
            .order("created_at", desc=True)
            .execute()
        )
        return [parse_serving(row) for row in response.data or []]
