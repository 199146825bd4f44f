"""Domain models for the calorie counter."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Persona:
    """A tracked individual with a daily calorie target."""

    id: int
    name: str
    target_daily_calories: int | None
