"""Tabular views of a recipe book."""

from typing import Iterable

import pandas as pd

from emoji_kitchen.recipes.models import Recipe


def recipe_ingredient_matrix(
    recipes: Iterable[Recipe], matrix_type: str = "count"
) -> pd.DataFrame:
    """Create a recipe-ingredient matrix.

    Args:
        recipes: Recipes to tabulate, e.g. ``registry.all_recipes()``.
        matrix_type: "count" for how many of each token a recipe uses,
            "boolean" for presence only.

    Returns:
        DataFrame with recipes as rows, indexed by position, cookware and dish name,
        and ingredient tokens as sorted columns. Empty if there are no recipes.

    Raises:
        ValueError: If matrix_type is not "count" or "boolean".
    """
    if matrix_type not in ("count", "boolean"):
        raise ValueError(f"Unknown matrix type: {matrix_type}")

    rows = [
        {
            "recipe_id": recipe_id,
            "cookware": recipe.cookware.value,
            "recipe_name": recipe.result.name,
            "token": token,
        }
        for recipe_id, recipe in enumerate(recipes)
        for token in recipe.items
    ]
    if not rows:
        return pd.DataFrame()

    long_df = pd.DataFrame(rows)
    matrix_df = (
        long_df.groupby(["recipe_id", "cookware", "recipe_name", "token"])
        .size()
        .unstack("token", fill_value=0)
    )

    if matrix_type == "boolean":
        matrix_df = matrix_df > 0

    matrix_df.columns.name = None
    return matrix_df.sort_index(axis=1)


def ingredient_usage(recipes: Iterable[Recipe]) -> pd.DataFrame:
    """Count how many recipes use each ingredient token.

    Returns:
        DataFrame with "token" and "recipe_count" columns, most used first.
    """
    matrix_df = recipe_ingredient_matrix(recipes, matrix_type="boolean")
    if matrix_df.empty:
        return pd.DataFrame(columns=["token", "recipe_count"])
    usage = matrix_df.sum(axis=0).astype(int)
    usage_df = usage.rename("recipe_count").rename_axis("token").reset_index()
    return usage_df.sort_values(
        ["recipe_count", "token"], ascending=[False, True]
    ).reset_index(drop=True)
