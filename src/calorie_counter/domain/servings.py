"""Domain models for servings and calorie summaries."""

from dataclasses import dataclass, field
from datetime import datetime

from calorie_counter.domain.recipes import CookedRecipe


@dataclass(frozen=True)
class ServingPortion:
    """Weighed slice of a cooked recipe eaten as part of a serving."""

    weight_grams: int
    cooked_recipe: CookedRecipe
    id: int | None = None


@dataclass(frozen=True)
class Serving:
    """A recorded act of eating one or more cooked recipes."""

    id: int
    persona_id: int
    created_at: datetime
    portions: list[ServingPortion] = field(default_factory=list)
    name: str | None = None
    cooking_id: int | None = None


@dataclass(frozen=True)
class QuickServing:
    """Food logged directly by calorie count."""

    id: int
    persona_id: int
    name: str
    calories: int
    created_at: datetime


@dataclass(frozen=True)
class PortionRequest:
    """Portion submitted when recording a serving."""

    cooked_recipe_id: int
    weight_grams: int


@dataclass(frozen=True)
class ServingListEntry:
    """Row of the merged servings listing."""

    id: int
    name: str | None
    calories: int
    created_at: datetime
    is_quick_serving: bool


@dataclass(frozen=True)
class CalorieSummary:
    """Consumed and remaining calories for a persona over a window."""

    consumed_calories: int
    target_calories: int
    remaining_calories: int
