#!/usr/bin/env python3
"""
Cook a combination of emoji ingredients from the command line.
Optionally saves the combination as a custom recipe and cooks it again.
"""

import argparse
import logging

from emoji_kitchen import Cookware, Kitchen, OutcomeKind
from emoji_kitchen.ingredients import PANTRY


def print_recipe_book(kitchen: Kitchen) -> None:
    """Print every recipe in search order, built-ins first."""
    for recipe in kitchen.registry.all_recipes():
        source = "custom" if recipe.custom else "built-in"
        print(
            f"{recipe.result.emoji} {recipe.result.name:<28} "
            f"{recipe.cookware.display_name:<4} {' '.join(recipe.items)}  ({source})"
        )


def print_outcome(kitchen: Kitchen) -> None:
    reading = kitchen.reading
    outcome = kitchen.cook()
    if outcome.kind is OutcomeKind.INVALID_INPUT:
        print(f"The {kitchen.selected.value} is empty.")
        return
    print(kitchen.cooking_message)
    print(f"{outcome.emoji} {outcome.name}")
    print(f"Heat: {reading.heat} ({reading.label}) {reading.mood}")


def main():
    """Main function to cook a combination."""
    parser = argparse.ArgumentParser(
        description="Cook emoji ingredients in a pan or pot at a given heat"
    )
    parser.add_argument(
        "ingredients",
        nargs="*",
        help="Ingredient emoji, in the order they go into the cookware",
    )
    parser.add_argument(
        "--cookware",
        type=str,
        choices=[c.value for c in Cookware],
        default=Cookware.PAN.value,
        help="Cookware to cook in",
    )
    parser.add_argument(
        "--heat",
        type=int,
        default=5,
        help="Heat level from 0 to 10 (values outside are clamped)",
    )
    parser.add_argument(
        "--save",
        type=str,
        metavar="NAME",
        help="Save the combination as a custom recipe before cooking",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print the recipe book and the pantry, then exit",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    kitchen = Kitchen(cookware=Cookware.from_id(args.cookware), heat=args.heat)

    if args.list:
        print_recipe_book(kitchen)
        print(f"\nPantry ({len(PANTRY)}): {' '.join(PANTRY)}")
        return

    for token in args.ingredients:
        if not kitchen.add_item(token):
            print(f"Skipping '{token}': not in the pantry")

    if args.save is not None:
        result = kitchen.save_custom(args.save)
        if result:
            print(f"Saved {result.recipe.result}")
        else:
            print(f"Not saved: {result.reason.value}")

    print_outcome(kitchen)


if __name__ == "__main__":
    main()
