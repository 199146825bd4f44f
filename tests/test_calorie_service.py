"""Tests for calorie aggregation."""

from datetime import UTC, datetime, timedelta

from calorie_counter.domain.servings import QuickServing, Serving, ServingPortion
from calorie_counter.services.calories import (
    CalorieService,
    merge_servings,
    summarize_calories,
    today_window,
)
from tests.conftest import (
    InMemoryPersonaRepository,
    InMemoryServingRepository,
    make_cooked_recipe,
)

NOON = datetime(2024, 5, 1, 12, tzinfo=UTC)


def _serving(serving_id: int, created_at: datetime, weight: int = 150) -> Serving:
    return Serving(
        id=serving_id,
        persona_id=1,
        created_at=created_at,
        portions=[
            ServingPortion(weight_grams=weight, cooked_recipe=make_cooked_recipe())
        ],
        name=f"Serving {serving_id}",
    )


def _quick(quick_id: int, created_at: datetime, calories: int = 300) -> QuickServing:
    return QuickServing(
        id=quick_id,
        persona_id=1,
        name="Snack",
        calories=calories,
        created_at=created_at,
    )


def _service() -> tuple[
    CalorieService, InMemoryPersonaRepository, InMemoryServingRepository
]:
    personas = InMemoryPersonaRepository()
    servings = InMemoryServingRepository()
    return (
        CalorieService(serving_repository=servings, persona_repository=personas),
        personas,
        servings,
    )


def test_summary_combines_servings_and_quick_servings() -> None:
    summary = summarize_calories([_serving(1, NOON)], [_quick(2, NOON)], 2000)

    assert summary.consumed_calories == 540
    assert summary.target_calories == 2000
    assert summary.remaining_calories == 1460


def test_summary_clamps_remaining_at_zero() -> None:
    summary = summarize_calories([], [_quick(1, NOON, calories=800)], 500)

    assert summary.consumed_calories == 800
    assert summary.remaining_calories == 0


def test_summary_without_data() -> None:
    summary = summarize_calories([], [], 1800)

    assert summary.consumed_calories == 0
    assert summary.remaining_calories == 1800


def test_summary_without_target() -> None:
    summary = summarize_calories([_serving(1, NOON)], [], None)

    assert summary.target_calories == 0
    assert summary.remaining_calories == 0


def test_serving_without_portions_counts_zero() -> None:
    empty = Serving(id=1, persona_id=1, created_at=NOON)

    assert summarize_calories([empty], [], 100).consumed_calories == 0


def test_merge_servings_sorts_newest_first() -> None:
    entries = merge_servings(
        [_serving(1, NOON - timedelta(hours=3)), _serving(2, NOON)],
        [_quick(3, NOON - timedelta(hours=1))],
    )

    assert [entry.id for entry in entries] == [2, 3, 1]
    assert [entry.is_quick_serving for entry in entries] == [False, True, False]
    assert entries[0].calories == 240
    assert entries[1].calories == 300


def test_merge_servings_keeps_order_for_equal_timestamps() -> None:
    entries = merge_servings([_serving(1, NOON)], [_quick(2, NOON)])

    assert [entry.id for entry in entries] == [1, 2]


def test_today_window_uses_timezone() -> None:
    now = datetime(2024, 5, 1, 23, 30, tzinfo=UTC)

    start, end = today_window("Europe/Berlin", now)

    # 01:30 on May 2nd in Berlin (UTC+2).
    assert start == datetime(2024, 5, 1, 22, tzinfo=UTC)
    assert end == datetime(2024, 5, 2, 21, 59, 59, 999999, tzinfo=UTC)


def test_service_reads_persona_target() -> None:
    service, personas, servings = _service()
    persona = personas.create_persona("Ada", 2000)
    servings.add_serving(_serving(1, NOON))
    servings.add_quick_serving(_quick(2, NOON))

    summary = service.get_persona_calories(
        persona.id, NOON - timedelta(hours=12), NOON + timedelta(hours=12)
    )

    assert summary.consumed_calories == 540
    assert summary.remaining_calories == 1460


def test_service_treats_unknown_persona_as_zero_target() -> None:
    service, _, servings = _service()
    servings.add_quick_serving(_quick(1, NOON, calories=120))

    summary = service.get_persona_calories(1, NOON, NOON)

    assert summary.consumed_calories == 120
    assert summary.target_calories == 0
    assert summary.remaining_calories == 0


def test_service_uses_closed_window() -> None:
    service, personas, servings = _service()
    persona = personas.create_persona("Ada", 1000)
    servings.add_quick_serving(_quick(1, NOON, calories=100))
    servings.add_quick_serving(_quick(2, NOON + timedelta(hours=1), calories=200))
    servings.add_quick_serving(_quick(3, NOON + timedelta(hours=2), calories=400))

    summary = service.get_persona_calories(
        persona.id, NOON, NOON + timedelta(hours=1)
    )

    assert summary.consumed_calories == 300


def test_service_get_today() -> None:
    service, personas, servings = _service()
    persona = personas.create_persona("Ada", 1800)
    servings.add_serving(_serving(1, NOON))
    servings.add_serving(_serving(2, NOON - timedelta(days=1)))

    summary = service.get_today(persona.id, "UTC", now=NOON + timedelta(hours=2))

    assert summary.consumed_calories == 240
    assert summary.remaining_calories == 1560


def test_service_lists_servings() -> None:
    service, personas, servings = _service()
    persona = personas.create_persona("Ada", 1800)
    servings.add_serving(_serving(1, NOON - timedelta(hours=2)))
    servings.add_quick_serving(_quick(2, NOON))

    entries = service.list_persona_servings(
        persona.id, NOON - timedelta(days=1), NOON + timedelta(days=1)
    )

    assert [entry.id for entry in entries] == [2, 1]
    assert entries[1].name == "Serving 1"
