import dataclasses
import enum
from typing import Optional

from emoji_kitchen.cooking.heat import HeatBand
from emoji_kitchen.data import KITCHEN_DATA
from emoji_kitchen.recipes.models import DishResult, Recipe


class OutcomeKind(enum.Enum):
    MATCHED = "matched"
    FALLBACK = "fallback"
    BURNT = "burnt"
    UNDERCOOKED = "undercooked"
    INVALID_INPUT = "invalid_input"


BURNT_DISH = DishResult(**KITCHEN_DATA["failures"]["burnt"])
UNDERCOOKED_DISH = DishResult(**KITCHEN_DATA["failures"]["undercooked"])


@dataclasses.dataclass(frozen=True)
class Outcome:
    """What came out of the cookware.

    ``dish`` is set for every kind except INVALID_INPUT. ``recipe`` is only
    set for MATCHED.
    """

    kind: OutcomeKind
    heat_band: HeatBand
    dish: Optional[DishResult] = None
    recipe: Optional[Recipe] = None

    @property
    def emoji(self) -> Optional[str]:
        return self.dish.emoji if self.dish else None

    @property
    def name(self) -> Optional[str]:
        return self.dish.name if self.dish else None

    @property
    def is_failure(self) -> bool:
        return self.kind in (OutcomeKind.BURNT, OutcomeKind.UNDERCOOKED)

    @property
    def is_dish(self) -> bool:
        return self.kind in (OutcomeKind.MATCHED, OutcomeKind.FALLBACK)
