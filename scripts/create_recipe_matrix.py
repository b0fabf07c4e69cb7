#!/usr/bin/env python3
"""
Create a recipe-ingredient matrix from the built-in recipe book.
Outputs counts of each ingredient per recipe, or binary presence, to CSV.
"""

import argparse
import datetime
import logging
import pathlib

from emoji_kitchen.analysis import ingredient_usage, recipe_ingredient_matrix
from emoji_kitchen.recipes import RecipeRegistry

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    """Main function to create the recipe-ingredient matrix."""
    parser = argparse.ArgumentParser(
        description="Create a recipe-ingredient matrix from the recipe book"
    )
    parser.add_argument(
        "--data-file",
        type=str,
        default=None,
        help="Kitchen data JSON file (defaults to the bundled recipes)",
    )
    parser.add_argument(
        "--matrix-type",
        type=str,
        choices=["count", "boolean"],
        default="count",
        help="Type of matrix to create: count (multiplicity) or boolean (presence)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default="data",
        help="Output directory for matrix files",
    )
    args = parser.parse_args()

    if args.data_file:
        registry = RecipeRegistry.from_data_file(args.data_file)
    else:
        registry = RecipeRegistry()

    matrix_df = recipe_ingredient_matrix(
        registry.all_recipes(), matrix_type=args.matrix_type
    )
    if matrix_df.empty:
        logger.error("No recipes found. Exiting.")
        return

    output_dir = pathlib.Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
    output_file = output_dir / f"recipe_matrix_{args.matrix_type}_{timestamp}.csv"
    matrix_df.to_csv(output_file, index=True)

    usage_df = ingredient_usage(registry.all_recipes())
    print("Successfully created recipe matrix:")
    print(f"  - File: {output_file}")
    print(f"  - Type: {args.matrix_type}")
    print(f"  - Recipes: {len(matrix_df)}")
    print(f"  - Ingredient columns: {len(matrix_df.columns)}")
    print("Most used ingredients:")
    for row in usage_df.head(5).itertuples(index=False):
        print(f"  {row.token} {row.recipe_count}")


if __name__ == "__main__":
    main()
