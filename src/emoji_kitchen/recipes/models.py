import dataclasses
import enum
from typing import Any, Dict, Sequence, Tuple

from emoji_kitchen.data import KITCHEN_DATA
from emoji_kitchen.ingredients.canonical import canonical_key


class Cookware(enum.Enum):
    """The cooking context a combination is made in."""

    PAN = "pan"
    POT = "pot"

    @classmethod
    def from_id(cls, cookware_id: str) -> "Cookware":
        """Look up cookware by its id, ignoring case and surrounding space.

        Raises:
            ValueError: If the id names no known cookware.
        """
        try:
            return cls(cookware_id.strip().lower())
        except ValueError:
            known = ", ".join(c.value for c in cls)
            raise ValueError(
                f"Unknown cookware '{cookware_id}', expected one of: {known}"
            ) from None

    @property
    def display_name(self) -> str:
        return KITCHEN_DATA["cookware"][self.value]["name"]

    @property
    def fallback_emoji(self) -> str:
        return KITCHEN_DATA["cookware"][self.value]["fallback_emoji"]

    @property
    def cooking_message(self) -> str:
        return KITCHEN_DATA["cookware"][self.value]["cooking_message"]


@dataclasses.dataclass(frozen=True)
class DishResult:
    emoji: str
    name: str

    def __str__(self) -> str:
        return f"{self.emoji} {self.name}"


@dataclasses.dataclass(frozen=True)
class Recipe:
    """A combination of ingredients in a cookware and the dish it makes."""

    cookware: Cookware
    items: Tuple[str, ...]
    result: DishResult
    custom: bool = False

    @property
    def key(self) -> Tuple[Cookware, str]:
        return self.cookware, canonical_key(self.items)

    def matches(self, cookware: Cookware, items: Sequence[str]) -> bool:
        return self.key == (cookware, canonical_key(items))

    @classmethod
    def from_dict(cls, data: Dict[str, Any], custom: bool = False) -> "Recipe":
        """Build a recipe from its JSON form.

        Args:
            data: Mapping with "cookware", "items" and a "result" holding
                "emoji" and "name".
            custom: Whether the recipe was saved by a user.

        Raises:
            ValueError: If a key is missing, the cookware is unknown or the
                recipe has no ingredients.
        """
        try:
            cookware = Cookware.from_id(data["cookware"])
            items = tuple(data["items"])
            result = DishResult(
                emoji=data["result"]["emoji"], name=data["result"]["name"]
            )
        except KeyError as e:
            raise ValueError(f"Recipe entry is missing {e}: {data}") from e
        if not items:
            raise ValueError(f"Recipe '{result.name}' has no ingredients")
        return cls(cookware=cookware, items=items, result=result, custom=custom)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cookware": self.cookware.value,
            "items": list(self.items),
            "result": {"emoji": self.result.emoji, "name": self.result.name},
        }
