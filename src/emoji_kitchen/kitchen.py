"""A cooking session: what is in each cookware, the burner and the last dish."""

import logging
from typing import Dict, List, Optional

from emoji_kitchen.cooking.heat import DEFAULT_HEAT, HeatLevel, HeatReading
from emoji_kitchen.cooking.outcome import Outcome
from emoji_kitchen.cooking.resolve import resolve
from emoji_kitchen.ingredients.canonical import is_pantry_token
from emoji_kitchen.recipes.models import Cookware, Recipe
from emoji_kitchen.recipes.registry import RecipeRegistry
from emoji_kitchen.recipes.store import SaveResult, save_recipe

logger = logging.getLogger(__name__)


class Kitchen:
    """Session state for one cook.

    Each cookware keeps its own ingredient list, so switching between the pan
    and the pot does not lose what is in either. Any change to the active
    ingredients clears the last dish.

    Attributes:
        registry (RecipeRegistry): Recipes the session cooks against and
            saves into.
        selected (Cookware): The cookware ingredients are added to.
        heat (HeatLevel): Burner setting shared by both cookware.
        last_outcome (Outcome): Result of the most recent cook, or None.
    """

    def __init__(
        self,
        registry: Optional[RecipeRegistry] = None,
        cookware: Cookware = Cookware.PAN,
        heat: int = DEFAULT_HEAT,
    ):
        self.registry = registry if registry is not None else RecipeRegistry()
        self.selected = cookware
        self.heat = HeatLevel(heat)
        self.last_outcome: Optional[Outcome] = None
        self._items: Dict[Cookware, List[str]] = {c: [] for c in Cookware}

    @property
    def items(self) -> List[str]:
        """Copy of the ingredients in the selected cookware, in entry order."""
        return list(self._items[self.selected])

    def items_in(self, cookware: Cookware) -> List[str]:
        return list(self._items[cookware])

    def select(self, cookware: Cookware) -> None:
        self.selected = cookware

    def add_item(self, token: str) -> bool:
        """Add a pantry ingredient to the selected cookware.

        Returns:
            True if the token was added, False if it is not in the pantry.
        """
        if not is_pantry_token(token):
            logger.warning(f"'{token}' is not in the pantry")
            return False
        self.last_outcome = None
        self._items[self.selected].append(token)
        return True

    def remove_item(self, index: int) -> Optional[str]:
        """Remove the ingredient at a position; returns it, or None if out of range."""
        active = self._items[self.selected]
        if not 0 <= index < len(active):
            return None
        self.last_outcome = None
        return active.pop(index)

    def clear(self) -> None:
        self.last_outcome = None
        self._items[self.selected] = []

    def increase_heat(self) -> int:
        return self.heat.increment()

    def decrease_heat(self) -> int:
        return self.heat.decrement()

    def reset_heat(self) -> int:
        return self.heat.reset()

    @property
    def reading(self) -> HeatReading:
        return self.heat.reading()

    @property
    def can_cook(self) -> bool:
        return bool(self._items[self.selected])

    @property
    def cooking_message(self) -> str:
        return self.selected.cooking_message

    def cook(self) -> Outcome:
        """Resolve the selected cookware's ingredients at the current heat."""
        self.last_outcome = resolve(
            self.selected, self._items[self.selected], self.heat, self.registry
        )
        logger.debug(f"Cooked {self.selected.value}: {self.last_outcome.kind.value}")
        return self.last_outcome

    def can_save(self, name: str) -> bool:
        return bool(name.strip()) and self.can_cook

    def save_custom(self, name: str) -> SaveResult:
        """Save the selected cookware's ingredients as a named recipe."""
        return save_recipe(
            name, self.selected, self._items[self.selected], self.registry
        )

    def load_recipe(self, recipe: Recipe) -> None:
        """Put a recipe's ingredients into its cookware and select it."""
        self.selected = recipe.cookware
        self._items[recipe.cookware] = list(recipe.items)
        self.last_outcome = None

    def __repr__(self) -> str:
        return (
            f"<Kitchen(selected={self.selected.value}, items={self.items}, "
            f"heat={self.heat.value})>"
        )
