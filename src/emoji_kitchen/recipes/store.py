"""Saving user-named recipes into the registry."""

import dataclasses
import enum
import logging
from typing import Optional, Sequence, Tuple

from emoji_kitchen.data import KITCHEN_DATA
from emoji_kitchen.recipes.models import Cookware, DishResult, Recipe
from emoji_kitchen.recipes.registry import RecipeRegistry

logger = logging.getLogger(__name__)

CUSTOM_RECIPE_EMOJI: str = KITCHEN_DATA["custom_recipe_emoji"]


class RejectReason(enum.Enum):
    BLANK_NAME = "blank_name"
    NO_INGREDIENTS = "no_ingredients"


@dataclasses.dataclass(frozen=True)
class SaveResult:
    """Result of a save attempt.

    A declined save is a normal result: ``accepted`` is False, ``reason``
    says why and ``custom_recipes`` is the unchanged table.
    """

    accepted: bool
    custom_recipes: Tuple[Recipe, ...]
    recipe: Optional[Recipe] = None
    reason: Optional[RejectReason] = None

    def __bool__(self) -> bool:
        return self.accepted


def save_recipe(
    name: str,
    cookware: Cookware,
    items: Sequence[str],
    registry: RecipeRegistry,
) -> SaveResult:
    """Save the current combination as a custom recipe.

    The name is stored trimmed and the ingredients are stored in the order
    they were entered. Saving a combination that already exists adds another
    entry; the earlier recipe keeps winning matches.

    Args:
        name: User-supplied dish name.
        cookware: Cookware the ingredients are in.
        items: Ingredient tokens in entry order.
        registry: Registry whose custom table receives the recipe.

    Returns:
        A SaveResult holding the new recipe and custom table, or the reason
        the save was declined.
    """
    trimmed = name.strip()
    if not trimmed:
        logger.info("Declined to save recipe with a blank name")
        return SaveResult(
            accepted=False,
            custom_recipes=registry.custom_recipes,
            reason=RejectReason.BLANK_NAME,
        )
    if not items:
        logger.info(f"Declined to save '{trimmed}' without ingredients")
        return SaveResult(
            accepted=False,
            custom_recipes=registry.custom_recipes,
            reason=RejectReason.NO_INGREDIENTS,
        )

    recipe = Recipe(
        cookware=cookware,
        items=tuple(items),
        result=DishResult(emoji=CUSTOM_RECIPE_EMOJI, name=trimmed),
        custom=True,
    )
    custom_recipes = registry.add_custom(recipe)
    logger.info(
        f"Saved custom recipe '{trimmed}' ({cookware.value}: {' '.join(items)})"
    )
    return SaveResult(accepted=True, custom_recipes=custom_recipes, recipe=recipe)
