"""Calorie aggregation for personas."""

from dataclasses import dataclass
from datetime import UTC, datetime, time, timedelta
from typing import Protocol
from zoneinfo import ZoneInfo

from calorie_counter.domain.models import Persona
from calorie_counter.domain.servings import (
    CalorieSummary,
    QuickServing,
    Serving,
    ServingListEntry,
)
from calorie_counter.services.recipes import serving_total_calories


class ServingRepository(Protocol):
    """Read interface for servings within a time window."""

    def list_servings(
        self, persona_id: int, start: datetime, end: datetime
    ) -> list[Serving]:
        """Return servings with portions and cooked recipes for the window."""

    def list_quick_servings(
        self, persona_id: int, start: datetime, end: datetime
    ) -> list[QuickServing]:
        """Return quick servings for the window."""


class PersonaLookup(Protocol):
    """Read interface for personas."""

    def get_persona(self, persona_id: int) -> Persona | None:
        """Return a persona by id, if present."""


def summarize_calories(
    servings: list[Serving],
    quick_servings: list[QuickServing],
    target_daily_calories: int | None,
) -> CalorieSummary:
    """Compare calories eaten against a daily target.

    Rows are expected to be in the requested window already.
    """
    consumed = sum(serving_total_calories(serving) for serving in servings)
    consumed += sum(quick.calories for quick in quick_servings)
    target = target_daily_calories or 0
    return CalorieSummary(
        consumed_calories=consumed,
        target_calories=target,
        remaining_calories=max(0, target - consumed),
    )


def merge_servings(
    servings: list[Serving], quick_servings: list[QuickServing]
) -> list[ServingListEntry]:
    """Return servings and quick servings as one list, newest first."""
    entries = [
        ServingListEntry(
            id=serving.id,
            name=serving.name,
            calories=serving_total_calories(serving),
            created_at=serving.created_at,
            is_quick_serving=False,
        )
        for serving in servings
    ]
    entries.extend(
        ServingListEntry(
            id=quick.id,
            name=quick.name,
            calories=quick.calories,
            created_at=quick.created_at,
            is_quick_serving=True,
        )
        for quick in quick_servings
    )
    return sorted(entries, key=lambda entry: entry.created_at, reverse=True)


def today_window(
    timezone_name: str, now: datetime | None = None
) -> tuple[datetime, datetime]:
    """Return the first and last instant of the current day in UTC."""
    tz = ZoneInfo(timezone_name)
    local_now = (now or datetime.now(tz=UTC)).astimezone(tz)
    start = datetime.combine(local_now.date(), time.min, tzinfo=tz)
    end = start + timedelta(days=1) - timedelta(microseconds=1)
    return start.astimezone(UTC), end.astimezone(UTC)


@dataclass
class CalorieService:
    """Service that loads persona servings and aggregates calories."""

    serving_repository: ServingRepository
    persona_repository: PersonaLookup

    def get_persona_calories(
        self, persona_id: int, start: datetime, end: datetime
    ) -> CalorieSummary:
        """Return consumed and remaining calories in a closed window.

        A persona without a stored target, or without a record at all,
        counts as a target of zero.
        """
        persona = self.persona_repository.get_persona(persona_id)
        servings = self.serving_repository.list_servings(persona_id, start, end)
        quick_servings = self.serving_repository.list_quick_servings(
            persona_id, start, end
        )
        return summarize_calories(
            servings,
            quick_servings,
            persona.target_daily_calories if persona else None,
        )

    def list_persona_servings(
        self, persona_id: int, start: datetime, end: datetime
    ) -> list[ServingListEntry]:
        """Return the merged servings listing for a closed window."""
        servings = self.serving_repository.list_servings(persona_id, start, end)
        quick_servings = self.serving_repository.list_quick_servings(
            persona_id, start, end
        )
        return merge_servings(servings, quick_servings)

    def get_today(
        self, persona_id: int, timezone_name: str, now: datetime | None = None
    ) -> CalorieSummary:
        """Return today's calories in the given timezone."""
        start, end = today_window(timezone_name, now)
        return self.get_persona_calories(persona_id, start, end)
