"""Emoji Kitchen - Resolve emoji ingredients, cookware and heat into dishes."""

__version__ = "0.1.0"

from . import analysis, cooking, ingredients, kitchen, recipes
from .cooking import HeatLevel, Outcome, OutcomeKind, classify, resolve
from .kitchen import Kitchen
from .recipes import Cookware, DishResult, Recipe, RecipeRegistry, save_recipe

__all__ = [
    "analysis",
    "cooking",
    "ingredients",
    "kitchen",
    "recipes",
    "Cookware",
    "DishResult",
    "HeatLevel",
    "Kitchen",
    "Outcome",
    "OutcomeKind",
    "Recipe",
    "RecipeRegistry",
    "classify",
    "resolve",
    "save_recipe",
]
