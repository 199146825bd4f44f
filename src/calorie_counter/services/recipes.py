"""Calorie density of cooked recipes and the portions cut from them."""

import math

from calorie_counter.domain.errors import InvalidArgumentError
from calorie_counter.domain.recipes import CookedRecipe, CookedRecipeIngredient
from calorie_counter.domain.servings import Serving, ServingPortion


def round_half_up(value: float) -> int:
    """Round half up to the nearest integer.

    Every rounded figure in the package goes through this helper so that
    densities, portions and totals agree with each other.
    """
    return math.floor(value + 0.5)


def ingredient_calories(ingredient: CookedRecipeIngredient) -> float:
    """Return the unrounded calories an ingredient contributes to a recipe."""
    if ingredient.quantity_grams < 0:
        raise InvalidArgumentError("quantity_grams must not be negative")
    if ingredient.calories_per_100g < 0:
        raise InvalidArgumentError("calories_per_100g must not be negative")
    return ingredient.quantity_grams * ingredient.calories_per_100g / 100


def calories_per_100g(
    final_weight_grams: int, ingredients: list[CookedRecipeIngredient]
) -> int:
    """Return kcal per 100g of a finished recipe."""
    if final_weight_grams <= 0:
        raise InvalidArgumentError("final_weight_grams must be positive")
    total = sum(ingredient_calories(ingredient) for ingredient in ingredients)
    return round_half_up(total / final_weight_grams * 100)


def recipe_calories_per_100g(recipe: CookedRecipe) -> int:
    """Return kcal per 100g of a cooked recipe."""
    return calories_per_100g(recipe.final_weight_grams, recipe.ingredients)


def recipe_total_calories(recipe: CookedRecipe) -> int:
    """Return the rounded calories of all ingredients in a cooked recipe."""
    return round_half_up(
        sum(ingredient_calories(ingredient) for ingredient in recipe.ingredients)
    )


def portion_calories(weight_grams: int, density_per_100g: int) -> int:
    """Return kcal for a portion of the given weight and density."""
    if weight_grams < 0:
        raise InvalidArgumentError("weight_grams must not be negative")
    if density_per_100g < 0:
        raise InvalidArgumentError("density_per_100g must not be negative")
    return round_half_up(weight_grams * density_per_100g / 100)


def serving_portion_calories(portion: ServingPortion) -> int:
    """Return kcal for a serving portion using its cooked recipe density."""
    return portion_calories(
        portion.weight_grams, recipe_calories_per_100g(portion.cooked_recipe)
    )


def serving_total_calories(serving: Serving) -> int:
    """Return kcal across all portions of a serving."""
    return sum(serving_portion_calories(portion) for portion in serving.portions)


def serving_total_weight(serving: Serving) -> int:
    """Return grams across all portions of a serving."""
    return round_half_up(sum(portion.weight_grams for portion in serving.portions))
