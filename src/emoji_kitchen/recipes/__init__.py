"""Recipe models, lookup and the custom recipe store."""

from .models import Cookware, DishResult, Recipe
from .registry import BUILTIN_RECIPES, RecipeRegistry, find_match
from .store import CUSTOM_RECIPE_EMOJI, RejectReason, SaveResult, save_recipe

__all__ = [
    "Cookware",
    "DishResult",
    "Recipe",
    "BUILTIN_RECIPES",
    "RecipeRegistry",
    "find_match",
    "CUSTOM_RECIPE_EMOJI",
    "RejectReason",
    "SaveResult",
    "save_recipe",
]
