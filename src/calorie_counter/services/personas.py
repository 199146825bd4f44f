"""Persona management."""

import logging
from dataclasses import dataclass
from typing import Protocol

from calorie_counter.domain.errors import InvalidArgumentError, PersonaNotFoundError
from calorie_counter.domain.models import Persona

logger = logging.getLogger(__name__)


class PersonaRepository(Protocol):
    """Persistence interface for personas."""

    def create_persona(self, name: str, target_daily_calories: int) -> Persona:
        """Create and return a persona."""

    def update_persona(
        self, persona_id: int, name: str, target_daily_calories: int
    ) -> Persona | None:
        """Update a persona and return it, or None when it does not exist."""

    def delete_persona(self, persona_id: int) -> None:
        """Delete a persona."""

    def get_persona(self, persona_id: int) -> Persona | None:
        """Return a persona by id, if present."""

    def list_personas(self) -> list[Persona]:
        """Return all personas."""


@dataclass
class PersonaService:
    """Application service for persona lifecycle actions."""

    repository: PersonaRepository

    def create_persona(self, name: str, target_daily_calories: int) -> Persona:
        """Validate and create a persona."""
        cleaned = _validate(name, target_daily_calories)
        persona = self.repository.create_persona(cleaned, target_daily_calories)
        logger.info("Created persona", extra={"persona_id": persona.id})
        return persona

    def update_persona(
        self, persona_id: int, name: str, target_daily_calories: int
    ) -> Persona:
        """Validate and update a persona."""
        cleaned = _validate(name, target_daily_calories)
        persona = self.repository.update_persona(
            persona_id, cleaned, target_daily_calories
        )
        if persona is None:
            raise PersonaNotFoundError(persona_id)
        return persona

    def delete_persona(self, persona_id: int) -> None:
        """Delete a persona."""
        self.repository.delete_persona(persona_id)
        logger.info("Deleted persona", extra={"persona_id": persona_id})

    def get_persona(self, persona_id: int) -> Persona:
        """Return a persona or raise when it does not exist."""
        persona = self.repository.get_persona(persona_id)
        if persona is None:
            raise PersonaNotFoundError(persona_id)
        return persona

    def list_personas(self) -> list[Persona]:
        """Return personas sorted by name."""
        return sorted(self.repository.list_personas(), key=lambda p: p.name.lower())


def _validate(name: str, target_daily_calories: int) -> str:
    cleaned = name.strip()
    if not cleaned:
        raise InvalidArgumentError("name must not be empty")
    if target_daily_calories < 0:
        raise InvalidArgumentError("target_daily_calories must not be negative")
    return cleaned
