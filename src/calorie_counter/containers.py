"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from calorie_counter.adapters.supabase_cooking_repository import (
    SupabaseCookingRepository,
)
from calorie_counter.adapters.supabase_ingredient_repository import (
    SupabaseIngredientRepository,
)
from calorie_counter.adapters.supabase_persona_repository import (
    SupabasePersonaRepository,
)
from calorie_counter.adapters.supabase_quick_serving_repository import (
    SupabaseQuickServingRepository,
)
from calorie_counter.adapters.supabase_recipe_repository import (
    SupabaseRecipeRepository,
)
from calorie_counter.adapters.supabase_serving_repository import (
    SupabaseServingRepository,
)
from calorie_counter.config import Settings
from calorie_counter.services.calories import CalorieService
from calorie_counter.services.cookings import CookingService
from calorie_counter.services.ingredients import IngredientService
from calorie_counter.services.personas import PersonaService
from calorie_counter.services.recipe_book import RecipeService
from calorie_counter.services.servings import QuickServingService, ServingService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    persona_service: PersonaService
    calorie_service: CalorieService
    ingredient_service: IngredientService
    recipe_service: RecipeService
    cooking_service: CookingService
    serving_service: ServingService
    quick_serving_service: QuickServingService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    persona_repository = SupabasePersonaRepository(supabase_client)
    serving_repository = SupabaseServingRepository(supabase_client)
    quick_serving_repository = SupabaseQuickServingRepository(supabase_client)
    ingredient_repository = SupabaseIngredientRepository(supabase_client)
    recipe_repository = SupabaseRecipeRepository(supabase_client)
    cooking_repository = SupabaseCookingRepository(supabase_client)

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=resolved_settings,
        persona_service=PersonaService(persona_repository),
        calorie_service=CalorieService(
            serving_repository=serving_repository,
            persona_repository=persona_repository,
        ),
        ingredient_service=IngredientService(ingredient_repository),
        recipe_service=RecipeService(
            repository=recipe_repository,
            ingredient_repository=ingredient_repository,
        ),
        cooking_service=CookingService(
            ingredient_repository=ingredient_repository,
            repository=cooking_repository,
        ),
        serving_service=ServingService(
            repository=serving_repository,
            cooked_recipe_repository=cooking_repository,
        ),
        quick_serving_service=QuickServingService(quick_serving_repository),
        close_resources=close_resources,
    )
