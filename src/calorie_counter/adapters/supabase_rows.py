"""Row parsing shared by the Supabase repositories."""

import logging
from datetime import UTC, datetime

from calorie_counter.domain.recipes import (
    Cooking,
    CookedRecipe,
    CookedRecipeIngredient,
    Ingredient,
    Recipe,
    RecipeIngredient,
)
from calorie_counter.domain.servings import QuickServing, Serving, ServingPortion

logger = logging.getLogger(__name__)

INGREDIENT_COLUMNS = "id, name, calories_per_100g, category"
RECIPE_COLUMNS = (
    "id, name, description, category, "
    f"recipe_ingredients(quantity_grams, ingredients({INGREDIENT_COLUMNS}))"
)
COOKED_RECIPE_COLUMNS = (
    "id, name, final_weight_grams, recipe_id, "
    "cooked_recipe_ingredients(ingredient_id, quantity_grams, calories_per_100g)"
)
COOKING_COLUMNS = f"id, name, created_at, cooked_recipes({COOKED_RECIPE_COLUMNS})"
SERVING_COLUMNS = (
    "id, persona_id, cooking_id, name, created_at, "
    f"serving_portions(id, weight_grams, cooked_recipes({COOKED_RECIPE_COLUMNS}))"
)
QUICK_SERVING_COLUMNS = "id, persona_id, name, calories, created_at"


def parse_datetime(raw: object) -> datetime:
    """Parse an ISO timestamp, assuming UTC when no offset is present."""
    if isinstance(raw, datetime):
        value = raw
    elif isinstance(raw, str) and raw:
        value = datetime.fromisoformat(raw)
    else:
        return datetime.min.replace(tzinfo=UTC)
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value


def parse_cooked_recipe(row: dict[str, object]) -> CookedRecipe:
    ingredients = row.get("cooked_recipe_ingredients") or []
    return CookedRecipe(
        id=int(row["id"]),
        name=str(row.get("name") or ""),
        final_weight_grams=int(row.get("final_weight_grams") or 0),
        ingredients=[
            CookedRecipeIngredient(
                ingredient_id=int(item["ingredient_id"]),
                quantity_grams=int(item.get("quantity_grams") or 0),
                calories_per_100g=int(item.get("calories_per_100g") or 0),
            )
            for item in ingredients
        ],
        recipe_id=int(row["recipe_id"]) if row.get("recipe_id") is not None else None,
    )


def parse_serving(row: dict[str, object]) -> Serving:
    portions = []
    for portion in row.get("serving_portions") or []:
        cooked_recipe = portion.get("cooked_recipes")
        if not isinstance(cooked_recipe, dict):
            logger.warning(
                "Skipping serving portion without cooked recipe",
                extra={"serving_id": row.get("id"), "portion_id": portion.get("id")},
            )
            continue
        portions.append(
            ServingPortion(
                id=int(portion["id"]) if portion.get("id") is not None else None,
                weight_grams=int(portion.get("weight_grams") or 0),
                cooked_recipe=parse_cooked_recipe(cooked_recipe),
            )
        )
    return Serving(
        id=int(row["id"]),
        persona_id=int(row["persona_id"]),
        created_at=parse_datetime(row.get("created_at")),
        portions=portions,
        name=row.get("name"),
        cooking_id=(
            int(row["cooking_id"]) if row.get("cooking_id") is not None else None
        ),
    )


def parse_quick_serving(row: dict[str, object]) -> QuickServing:
    return QuickServing(
        id=int(row["id"]),
        persona_id=int(row["persona_id"]),
        name=str(row.get("name") or ""),
        calories=int(row.get("calories") or 0),
        created_at=parse_datetime(row.get("created_at")),
    )


def parse_ingredient(row: dict[str, object]) -> Ingredient:
    return Ingredient(
        id=int(row["id"]),
        name=str(row.get("name") or ""),
        calories_per_100g=int(row.get("calories_per_100g") or 0),
        category=str(row.get("category") or "Other"),
    )


def parse_recipe(row: dict[str, object]) -> Recipe:
    ingredients = []
    for item in row.get("recipe_ingredients") or []:
        ingredient = item.get("ingredients")
        if not isinstance(ingredient, dict):
            logger.warning(
                "Skipping recipe ingredient without ingredient row",
                extra={"recipe_id": row.get("id")},
            )
            continue
        ingredients.append(
            RecipeIngredient(
                ingredient=parse_ingredient(ingredient),
                quantity_grams=int(item.get("quantity_grams") or 0),
            )
        )
    return Recipe(
        id=int(row["id"]),
        name=str(row.get("name") or ""),
        description=str(row.get("description") or ""),
        category=str(row.get("category") or "Other"),
        ingredients=ingredients,
    )


def parse_cooking(row: dict[str, object]) -> Cooking:
    return Cooking(
        id=int(row["id"]),
        name=str(row.get("name") or ""),
        created_at=parse_datetime(row.get("created_at")),
        cooked_recipes=[
            parse_cooked_recipe(item) for item in row.get("cooked_recipes") or []
        ],
    )
