"""Built-in and custom recipe lookup."""

import logging
import threading
from typing import Iterable, List, Optional, Sequence, Tuple

from emoji_kitchen.data import KITCHEN_DATA, load_kitchen_data
from emoji_kitchen.ingredients.canonical import canonical_key
from emoji_kitchen.recipes.models import Cookware, Recipe

logger = logging.getLogger(__name__)

BUILTIN_RECIPES: Tuple[Recipe, ...] = tuple(
    Recipe.from_dict(entry) for entry in KITCHEN_DATA["recipes"]
)


def find_match(
    cookware: Cookware,
    items: Sequence[str],
    custom_recipes: Iterable[Recipe],
    builtin_recipes: Optional[Iterable[Recipe]] = None,
) -> Optional[Recipe]:
    """Find the first recipe made from these ingredients in this cookware.

    Built-in recipes are searched before custom ones and the first match wins,
    so a custom recipe never shadows a built-in with the same combination.

    Args:
        cookware: Cookware the ingredients are in.
        items: Ingredient tokens in any order.
        custom_recipes: User-saved recipes, searched after the built-ins.
        builtin_recipes: Built-in table. Defaults to the bundled recipes.

    Returns:
        The matching recipe, or None if nothing matches.
    """
    if builtin_recipes is None:
        builtin_recipes = BUILTIN_RECIPES
    search_key = (cookware, canonical_key(items))
    for recipes in (builtin_recipes, custom_recipes):
        for recipe in recipes:
            if recipe.key == search_key:
                return recipe
    return None


class RecipeRegistry:
    """Holds the built-in recipe table and the recipes saved this session.

    The built-in table is fixed when the registry is created. Custom recipes
    are append-only: each save swaps in a new tuple under a lock, so readers
    always see a complete snapshot without locking.

    Attributes:
        builtin_recipes (tuple): Recipes loaded at start-up, never modified.
        custom_recipes (tuple): Recipes saved by the user, in save order.
    """

    def __init__(
        self,
        builtin_recipes: Optional[Iterable[Recipe]] = None,
        custom_recipes: Optional[Iterable[Recipe]] = None,
    ):
        self._builtin: Tuple[Recipe, ...] = (
            BUILTIN_RECIPES if builtin_recipes is None else tuple(builtin_recipes)
        )
        self._custom: Tuple[Recipe, ...] = tuple(custom_recipes or ())
        self._lock = threading.Lock()

    @classmethod
    def from_data_file(cls, data_file: str) -> "RecipeRegistry":
        """Create a registry whose built-ins come from a kitchen data file."""
        data = load_kitchen_data(data_file)
        recipes = [Recipe.from_dict(entry) for entry in data["recipes"]]
        logger.info(f"Loaded {len(recipes)} built-in recipes from {data_file}")
        return cls(builtin_recipes=recipes)

    @property
    def builtin_recipes(self) -> Tuple[Recipe, ...]:
        return self._builtin

    @property
    def custom_recipes(self) -> Tuple[Recipe, ...]:
        return self._custom

    def all_recipes(self) -> List[Recipe]:
        """Return built-ins followed by custom recipes, in search order."""
        return list(self._builtin) + list(self._custom)

    def find_match(self, cookware: Cookware, items: Sequence[str]) -> Optional[Recipe]:
        recipe = find_match(
            cookware, items, self._custom, builtin_recipes=self._builtin
        )
        if recipe is None:
            logger.debug(f"No recipe for {cookware.value} with {canonical_key(items)}")
        return recipe

    def add_custom(self, recipe: Recipe) -> Tuple[Recipe, ...]:
        """Append a custom recipe and return the new custom table.

        No duplicate check is made. A recipe whose combination is already
        known stays in the table but can never be matched.
        """
        with self._lock:
            self._custom = self._custom + (recipe,)
            return self._custom

    def __len__(self) -> int:
        return len(self._builtin) + len(self._custom)

    def __repr__(self) -> str:
        return (
            f"<RecipeRegistry(builtin={len(self._builtin)}, "
            f"custom={len(self._custom)})>"
        )
