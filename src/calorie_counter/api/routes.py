"""Calorie tracking API endpoints with simple token auth."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, Response, status

from calorie_counter.api.models import (
    CalorieSummaryOut,
    CookedRecipeDraftOut,
    CookingIn,
    CookingOut,
    IngredientIn,
    IngredientOut,
    PersonaIn,
    PersonaOut,
    QuickServingIn,
    QuickServingOut,
    RecipeIn,
    RecipeOut,
    ServingIn,
    ServingListEntryOut,
    ServingOut,
)
from calorie_counter.config import parse_timezone
from calorie_counter.domain.errors import InvalidArgumentError
from calorie_counter.domain.recipes import CookedRecipeRequest, IngredientQuantity
from calorie_counter.domain.servings import PortionRequest
from calorie_counter.services.calories import today_window

if TYPE_CHECKING:
    from calorie_counter.containers import AppContainer


def _get_api_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.api_token


async def require_token(
    x_api_token: str | None = Header(default=None),
    api_token: str = Depends(_get_api_token),
) -> None:
    """Ensure requests include a valid API token."""
    if not x_api_token or x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


router = APIRouter(dependencies=[Depends(require_token)])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def _explicit_window(
    start: datetime | None, end: datetime | None
) -> tuple[datetime, datetime] | None:
    """Return the requested window in UTC, or None when neither bound is given."""
    if start is None and end is None:
        return None
    if start is None or end is None:
        raise InvalidArgumentError("start and end must be given together")
    start, end = _as_utc(start), _as_utc(end)
    if start > end:
        raise InvalidArgumentError("start must not be after end")
    return start, end


def _timezone(container: AppContainer, timezone: str | None) -> str:
    return parse_timezone(timezone or container.settings.default_timezone)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


@router.get("/personas")
async def list_personas(request: Request) -> list[PersonaOut]:
    """Return all personas."""
    personas = _container(request).persona_service.list_personas()
    return [PersonaOut.from_domain(persona) for persona in personas]


@router.post("/personas", status_code=status.HTTP_201_CREATED)
async def create_persona(payload: PersonaIn, request: Request) -> PersonaOut:
    """Create a persona."""
    persona = _container(request).persona_service.create_persona(
        payload.name, payload.target_daily_calories
    )
    return PersonaOut.from_domain(persona)


@router.get("/personas/{persona_id}")
async def get_persona(persona_id: int, request: Request) -> PersonaOut:
    """Return a persona."""
    persona = _container(request).persona_service.get_persona(persona_id)
    return PersonaOut.from_domain(persona)


@router.put("/personas/{persona_id}")
async def update_persona(
    persona_id: int, payload: PersonaIn, request: Request
) -> PersonaOut:
    """Update a persona's name and target."""
    persona = _container(request).persona_service.update_persona(
        persona_id, payload.name, payload.target_daily_calories
    )
    return PersonaOut.from_domain(persona)


@router.delete("/personas/{persona_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_persona(persona_id: int, request: Request) -> Response:
    """Delete a persona."""
    _container(request).persona_service.delete_persona(persona_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/personas/{persona_id}/calories")
async def persona_calories(
    persona_id: int,
    request: Request,
    start: datetime | None = None,
    end: datetime | None = None,
    timezone: str | None = None,
) -> CalorieSummaryOut:
    """Return consumed and remaining calories for a window, default today."""
    container = _container(request)
    window = _explicit_window(start, end)
    if window is None:
        summary = container.calorie_service.get_today(
            persona_id, _timezone(container, timezone)
        )
    else:
        summary = container.calorie_service.get_persona_calories(persona_id, *window)
    return CalorieSummaryOut.from_domain(summary)


@router.get("/personas/{persona_id}/servings")
async def persona_servings(
    persona_id: int,
    request: Request,
    start: datetime | None = None,
    end: datetime | None = None,
    timezone: str | None = None,
) -> list[ServingListEntryOut]:
    """Return servings and quick servings for a window, newest first."""
    container = _container(request)
    window = _explicit_window(start, end) or today_window(
        _timezone(container, timezone)
    )
    entries = container.calorie_service.list_persona_servings(persona_id, *window)
    return [ServingListEntryOut.from_domain(entry) for entry in entries]


@router.get("/ingredients")
async def list_ingredients(request: Request) -> list[IngredientOut]:
    """Return all ingredients, most recently updated first."""
    ingredients = _container(request).ingredient_service.list_ingredients()
    return [IngredientOut.from_domain(ingredient) for ingredient in ingredients]


@router.get("/ingredients/search")
async def search_ingredients(name: str, request: Request) -> list[IngredientOut]:
    """Return up to ten ingredients whose name contains the query."""
    ingredients = _container(request).ingredient_service.search_ingredients(name)
    return [IngredientOut.from_domain(ingredient) for ingredient in ingredients]


@router.post("/ingredients", status_code=status.HTTP_201_CREATED)
async def create_ingredient(payload: IngredientIn, request: Request) -> IngredientOut:
    """Create an ingredient."""
    ingredient = _container(request).ingredient_service.create_ingredient(
        payload.name, payload.calories_per_100g, payload.category
    )
    return IngredientOut.from_domain(ingredient)


@router.put("/ingredients/{ingredient_id}")
async def update_ingredient(
    ingredient_id: int, payload: IngredientIn, request: Request
) -> IngredientOut:
    """Update an ingredient; cooked recipes keep their copied values."""
    ingredient = _container(request).ingredient_service.update_ingredient(
        ingredient_id, payload.name, payload.calories_per_100g, payload.category
    )
    return IngredientOut.from_domain(ingredient)


@router.delete("/ingredients/{ingredient_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_ingredient(ingredient_id: int, request: Request) -> Response:
    """Delete an ingredient."""
    _container(request).ingredient_service.delete_ingredient(ingredient_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/recipes")
async def list_recipes(request: Request) -> list[RecipeOut]:
    """Return all recipes."""
    recipes = _container(request).recipe_service.list_recipes()
    return [RecipeOut.from_domain(recipe) for recipe in recipes]


@router.post("/recipes", status_code=status.HTTP_201_CREATED)
async def create_recipe(payload: RecipeIn, request: Request) -> RecipeOut:
    """Create a recipe from ingredient quantities."""
    recipe = _container(request).recipe_service.create_recipe(
        payload.name,
        payload.description,
        payload.category,
        [
            IngredientQuantity(
                ingredient_id=item.ingredient_id, quantity_grams=item.quantity_grams
            )
            for item in payload.ingredients
        ],
    )
    return RecipeOut.from_domain(recipe)


@router.get("/recipes/{recipe_id}")
async def get_recipe(recipe_id: int, request: Request) -> RecipeOut:
    """Return a recipe."""
    recipe = _container(request).recipe_service.get_recipe(recipe_id)
    return RecipeOut.from_domain(recipe)


@router.get("/recipes/{recipe_id}/cooking-draft")
async def recipe_cooking_draft(
    recipe_id: int, request: Request
) -> CookedRecipeDraftOut:
    """Return a cooked recipe pre-filled from a recipe's ingredients."""
    draft = _container(request).recipe_service.cooking_draft(recipe_id)
    return CookedRecipeDraftOut.from_domain(draft)


@router.get("/cookings")
async def list_cookings(request: Request) -> list[CookingOut]:
    """Return all cookings, newest first."""
    cookings = _container(request).cooking_service.list_cookings()
    return [CookingOut.from_domain(cooking) for cooking in cookings]


@router.post("/cookings", status_code=status.HTTP_201_CREATED)
async def create_cooking(payload: CookingIn, request: Request) -> CookingOut:
    """Record a cooking and snapshot its ingredient values."""
    cooking = _container(request).cooking_service.create_cooking(
        payload.name,
        [
            CookedRecipeRequest(
                name=recipe.name,
                final_weight_grams=recipe.final_weight_grams,
                recipe_id=recipe.recipe_id,
                ingredients=[
                    IngredientQuantity(
                        ingredient_id=item.ingredient_id,
                        quantity_grams=item.quantity_grams,
                        calories_per_100g=item.calories_per_100g,
                    )
                    for item in recipe.cooked_recipe_ingredients
                ],
            )
            for recipe in payload.cooked_recipes
        ],
    )
    return CookingOut.from_domain(cooking)


@router.get("/cookings/{cooking_id}")
async def get_cooking(cooking_id: int, request: Request) -> CookingOut:
    """Return a cooking with per-recipe calorie densities."""
    cooking = _container(request).cooking_service.get_cooking(cooking_id)
    if cooking is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return CookingOut.from_domain(cooking)


@router.get("/cookings/{cooking_id}/servings")
async def list_cooking_servings(cooking_id: int, request: Request) -> list[ServingOut]:
    """Return the servings cut from a cooking."""
    servings = _container(request).serving_service.list_cooking_servings(cooking_id)
    return [ServingOut.from_domain(serving) for serving in servings]


@router.get("/servings")
async def list_servings(request: Request) -> list[ServingOut]:
    """Return every serving, newest first."""
    servings = _container(request).serving_service.list_all_servings()
    return [ServingOut.from_domain(serving) for serving in servings]


@router.post("/servings", status_code=status.HTTP_201_CREATED)
async def create_serving(payload: ServingIn, request: Request) -> ServingOut:
    """Record a serving of one or more cooked recipes."""
    serving = _container(request).serving_service.create_serving(
        persona_id=payload.persona_id,
        cooking_id=payload.cooking_id,
        name=payload.name,
        portions=[
            PortionRequest(
                cooked_recipe_id=portion.cooked_recipe_id,
                weight_grams=portion.weight_grams,
            )
            for portion in payload.portions
        ],
    )
    return ServingOut.from_domain(serving)


@router.get("/servings/{serving_id}")
async def get_serving(serving_id: int, request: Request) -> ServingOut:
    """Return a serving with its totals."""
    serving = _container(request).serving_service.get_serving(serving_id)
    if serving is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return ServingOut.from_domain(serving)


@router.delete("/servings/{serving_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_serving(serving_id: int, request: Request) -> Response:
    """Delete a serving."""
    _container(request).serving_service.delete_serving(serving_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/quick-servings", status_code=status.HTTP_201_CREATED)
async def create_quick_serving(
    payload: QuickServingIn, request: Request
) -> QuickServingOut:
    """Record a quick serving."""
    quick = _container(request).quick_serving_service.create_quick_serving(
        payload.persona_id, payload.name, payload.calories
    )
    return QuickServingOut.from_domain(quick)


@router.delete(
    "/quick-servings/{quick_serving_id}", status_code=status.HTTP_204_NO_CONTENT
)
async def delete_quick_serving(quick_serving_id: int, request: Request) -> Response:
    """Delete a quick serving."""
    _container(request).quick_serving_service.delete_quick_serving(quick_serving_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
