"""Turning a cookware, ingredients and heat into a dish."""

import logging
from typing import Sequence, Union

from emoji_kitchen.cooking.heat import HeatLevel, HeatOverride, classify
from emoji_kitchen.cooking.outcome import (
    BURNT_DISH,
    UNDERCOOKED_DISH,
    Outcome,
    OutcomeKind,
)
from emoji_kitchen.ingredients.naming import fallback_name
from emoji_kitchen.recipes.models import Cookware, DishResult
from emoji_kitchen.recipes.registry import RecipeRegistry

logger = logging.getLogger(__name__)


def fallback_dish(
    cookware: Cookware, items: Sequence[str], heat_label: str
) -> DishResult:
    """Build the dish for an unmatched combination.

    The emoji is fixed per cookware; the name is generated from the
    ingredients and the heat label.
    """
    return DishResult(
        emoji=cookware.fallback_emoji, name=fallback_name(items, heat_label)
    )


def resolve(
    cookware: Cookware,
    items: Sequence[str],
    heat: Union[int, HeatLevel],
    registry: RecipeRegistry,
) -> Outcome:
    """Cook the ingredients and report what comes out.

    Each step can end resolution: an empty combination is invalid, extreme
    heat burns or undercooks the dish whatever is in it, a known recipe is
    matched, and anything else gets a generated fallback dish. The registry
    is only read.

    Args:
        cookware: Cookware the ingredients are in.
        items: Ingredient tokens in entry order.
        heat: Heat level, as an int or a HeatLevel.
        registry: Recipe registry to match against.

    Returns:
        The Outcome of cooking.
    """
    reading = classify(int(heat))

    if not items:
        logger.debug("Nothing to cook")
        return Outcome(kind=OutcomeKind.INVALID_INPUT, heat_band=reading.band)

    if reading.override is HeatOverride.BURNT:
        logger.debug(f"Heat {reading.heat} burnt the dish")
        return Outcome(
            kind=OutcomeKind.BURNT, heat_band=reading.band, dish=BURNT_DISH
        )
    if reading.override is HeatOverride.UNDERCOOKED:
        logger.debug(f"Heat {reading.heat} left the dish undercooked")
        return Outcome(
            kind=OutcomeKind.UNDERCOOKED, heat_band=reading.band, dish=UNDERCOOKED_DISH
        )

    recipe = registry.find_match(cookware, items)
    if recipe is not None:
        logger.debug(f"Matched recipe '{recipe.result.name}'")
        return Outcome(
            kind=OutcomeKind.MATCHED,
            heat_band=reading.band,
            dish=recipe.result,
            recipe=recipe,
        )

    return Outcome(
        kind=OutcomeKind.FALLBACK,
        heat_band=reading.band,
        dish=fallback_dish(cookware, items, reading.label),
    )
