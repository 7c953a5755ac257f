"""Ingredient normalization for free-text user input.

Maps transliterated Hindi and everyday English ingredient tokens to canonical
English names, drops noise tokens and removes duplicates.

Example:
    >>> normalize_ingredients("aloo, pyaz, PYAZ, tamatar")
    ['Potato', 'Onion', 'Tomato']
"""

import re

from src.utils.logger import logger


INGREDIENT_CORRECTIONS: dict[str, str] = {
    "aloo": "Potato",
    "aaloo": "Potato",
    "alu": "Potato",
    "potato": "Potato",
    "pyaz": "Onion",
    "pyaaz": "Onion",
    "onion": "Onion",
    "tamatar": "Tomato",
    "tamaatar": "Tomato",
    "tomato": "Tomato",
    "chawal": "Rice",
    "rice": "Rice",
    "atta": "Wheat Flour",
    "flour": "Wheat Flour",
    "daal": "Lentils",
    "dal": "Lentils",
    "lentils": "Lentils",
    "sabzi": "Vegetables",
    "vegetables": "Vegetables",
    "masala": "Spices",
    "spices": "Spices",
    "namak": "Salt",
    "salt": "Salt",
    "tel": "Oil",
    "oil": "Oil",
    "pani": "Water",
    "water": "Water",
    "doodh": "Milk",
    "milk": "Milk",
    "dahi": "Yogurt",
    "yogurt": "Yogurt",
    "ghee": "Clarified Butter",
    "krela": "Karela",
    "karela": "Karela",
    "bhindi": "Okra",
    "okra": "Okra",
    "shimla": "Bell Pepper",
    "adrak": "Ginger",
    "ginger": "Ginger",
    "lehsun": "Garlic",
    "garlic": "Garlic",
    "palak": "Spinach",
    "spinach": "Spinach",
    "matar": "Peas",
    "peas": "Peas",
    "gobi": "Cauliflower",
    "cauliflower": "Cauliflower",
    "baingan": "Eggplant",
    "eggplant": "Eggplant",
}

# Injected on the fallback path only, never into the model prompt
FILLER_INGREDIENTS: tuple[str, ...] = ("onion", "tomato", "spices")
MIN_INGREDIENTS = 3

_TOKEN_SPLIT = re.compile(r"[,\s]+")


def _canonicalize(token: str) -> str:
    """Map one lower-cased token to its canonical name ("" when dropped)."""
    if token in INGREDIENT_CORRECTIONS:
        return INGREDIENT_CORRECTIONS[token]
    if len(token) > 2:
        return token[0].upper() + token[1:]
    return ""


def normalize_ingredients(text: str) -> list[str]:
    """Parse free-text ingredients into unique canonical names.

    Args:
        text: Raw user input, e.g. "aloo, pyaz  tamatar".

    Returns:
        Canonical names longer than 2 characters, deduplicated
        case-insensitively in first-seen order.
    """
    seen: set[str] = set()
    result: list[str] = []

    for raw_token in _TOKEN_SPLIT.split((text or "").lower()):
        name = _canonicalize(raw_token.strip())
        if len(name) <= 2:
            continue
        key = name.lower()
        if key in seen:
            continue
        seen.add(key)
        result.append(name)

    logger.debug(f"Normalized ingredients: {text!r} -> {result}")
    return result


def with_filler_ingredients(ingredients: list[str]) -> list[str]:
    """Append generic filler ingredients when fewer than three are available."""
    if len(ingredients) >= MIN_INGREDIENTS:
        return list(ingredients)
    return [*ingredients, *FILLER_INGREDIENTS]
