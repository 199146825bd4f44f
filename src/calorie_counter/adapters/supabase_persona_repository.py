"""Supabase repository for personas."""

from dataclasses import dataclass

from supabase import Client

from calorie_counter.domain.models import Persona
from calorie_counter.services.personas import PersonaRepository

_COLUMNS = "id, name, target_daily_calories"


@dataclass
class SupabasePersonaRepository(PersonaRepository):
    """Supabase implementation for personas."""

    client: Client

    def create_persona(self, name: str, target_daily_calories: int) -> Persona:
        """Insert a persona row and return it."""
        response = (
            self.client.table("personas")
            .insert({"name": name, "target_daily_calories": target_daily_calories})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create persona")
        return _parse_row(response.data[0])

    def update_persona(
        self, persona_id: int, name: str, target_daily_calories: int
    ) -> Persona | None:
        """Update a persona row and return it."""
        response = (
            self.client.table("personas")
            .update({"name": name, "target_daily_calories": target_daily_calories})
            .eq("id", persona_id)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def delete_persona(self, persona_id: int) -> None:
        """Delete a persona row."""
        self.client.table("personas").delete().eq("id", persona_id).execute()

    def get_persona(self, persona_id: int) -> Persona | None:
        """Return a persona by id."""
        response = (
            self.client.table("personas")
            .select(_COLUMNS)
            .eq("id", persona_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def list_personas(self) -> list[Persona]:
        """Return all personas."""
        response = (
            self.client.table("personas")
            .select(_COLUMNS)
            .order("name", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> Persona:
    target = row.get("target_daily_calories")
    return Persona(
        id=int(row["id"]),
        name=str(row.get("name") or ""),
        target_daily_calories=int(target) if target is not None else None,
    )
