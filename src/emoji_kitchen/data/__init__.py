"""Static kitchen configuration bundled with the package."""

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = os.path.join(os.path.dirname(__file__), "kitchen.json")

REQUIRED_KEYS = (
    "pantry",
    "cookware",
    "fallback_words",
    "failures",
    "custom_recipe_emoji",
    "recipes",
)


def load_kitchen_data(data_file: Optional[str] = None) -> Dict[str, Any]:
    """Load the kitchen configuration from a JSON file.

    The file holds the pantry vocabulary, per-cookware display data, the
    fallback word table, the failure dishes and the built-in recipe table.

    Args:
        data_file: Path to the JSON file. Defaults to the bundled kitchen.json.

    Returns:
        The parsed configuration as a dictionary.

    Raises:
        ValueError: If a required top-level key is missing.
    """
    data_file = data_file or DEFAULT_DATA_FILE
    with open(data_file, "r", encoding="utf-8") as f:
        data = json.load(f)

    missing = [key for key in REQUIRED_KEYS if key not in data]
    if missing:
        raise ValueError(f"Kitchen data file {data_file} is missing keys: {missing}")

    logger.debug(
        f"Loaded kitchen data from {data_file}: "
        f"{len(data['pantry'])} pantry items, {len(data['recipes'])} recipes"
    )
    return data


KITCHEN_DATA = load_kitchen_data()
