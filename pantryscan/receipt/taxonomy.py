"""Grocery category taxonomy for receipt item names.

Maps an item name to the first category, in declared order, whose keyword
set appears in the name (case-insensitive substring match). There is no
scoring: when a name matches keywords from several categories, the category
declared first wins. For example "APPLE JUICE" is fruits, not beverages, and
"EGGPLANT" is vegetables even though "egg" is a dairy keyword.

To add keywords:
1. Find the category below and extend its tuple, or
2. Ship a TOML layer (see build_category_taxonomy) without touching code.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from pantryscan.domain.receipt import Category, CategoryTag, OtherCategory

CATEGORY_KEYWORDS: tuple[tuple[Category, tuple[str, ...]], ...] = (
    (
        Category.FRUITS,
        (
            "fruit",
            "apple",
            "banana",
            "orange",
            "grape",
            "berry",
            "berries",
            "lemon",
            "lime",
            "mango",
            "pear",
            "peach",
            "plum",
            "cherr",
            "melon",
            "kiwi",
            "avocado",
        ),
    ),
    (
        Category.VEGETABLES,
        (
            "vegetable",
            "veggie",
            "eggplant",
            "tomato",
            "potato",
            "onion",
            "carrot",
            "lettuce",
            "spinach",
            "broccoli",
            "cucumber",
            "bell pepper",
            "celery",
            "cabbage",
            "garlic",
            "mushroom",
            "zucchini",
            "squash",
            "kale",
        ),
    ),
    (
        Category.DAIRY,
        ("dairy", "milk", "cheese", "yogurt", "yoghurt", "butter", "cream", "egg"),
    ),
    (
        Category.MEAT,
        ("meat", "chicken", "beef", "pork", "steak", "bacon", "sausage", "turkey", "lamb"),
    ),
    (
        Category.SEAFOOD,
        ("seafood", "fish", "salmon", "tuna", "shrimp", "prawn", "crab", "lobster", "tilapia"),
    ),
    (
        Category.BAKERY,
        ("bakery", "bread", "bagel", "baguette", "croissant", "muffin", "buns", "cake", "donut", "tortilla", "pita"),
    ),
    (
        Category.BEVERAGES,
        ("beverage", "drink", "juice", "water", "soda", "coffee", "tea", "coke", "pepsi", "beer", "wine"),
    ),
    (
        Category.SNACKS,
        ("snack", "chips", "crisps", "cookie", "cracker", "candy", "chocolate", "popcorn", "pretzel", "nuts"),
    ),
    # Pantry categories come after the fresh ones so "Frozen Spinach" stays a
    # vegetable and "Canned Tuna" stays seafood.
    (
        Category.GRAINS,
        ("cereal", "grain", "pasta", "rice", "flour", "oats", "noodle", "spaghetti", "macaroni", "quinoa"),
    ),
    (
        Category.CONDIMENTS,
        ("condiment", "sauce", "dressing", "ketchup", "mustard", "mayo", "vinegar", "salsa"),
    ),
    (
        Category.SPICES,
        ("spice", "seasoning", "herb", "salt", "cinnamon", "paprika", "oregano", "cumin"),
    ),
    (
        Category.CANNED,
        ("canned", "tinned", "preserved"),
    ),
    (
        Category.FROZEN,
        ("frozen",),
    ),
)


CategoryRule = tuple[CategoryTag, tuple[str, ...]]


@dataclass(frozen=True)
class CategoryTaxonomy:
    """Ordered category rules; earlier rules win ties."""

    rules: tuple[CategoryRule, ...]


def _normalize_keywords(raw: Any) -> tuple[str, ...]:
    """Normalize keywords value from TOML into a tuple of lowercase strings."""
    if isinstance(raw, str):
        value = raw.strip().lower()
        return (value,) if value else tuple()
    if isinstance(raw, list):
        return tuple(str(v).strip().lower() for v in raw if str(v).strip())
    return tuple()


def _category_tag(name: str) -> CategoryTag:
    try:
        return Category(name)
    except ValueError:
        return OtherCategory(name)


def build_category_taxonomy(configs: Sequence[Mapping[str, Any]] | None = None) -> CategoryTaxonomy:
    """Build the taxonomy from the built-in table plus in-memory config layers.

    Each config may hold ``[[categories]]`` entries with ``name`` and
    ``keywords``. Keywords for a known category are appended to that
    category, which keeps its position. Unknown names are appended after
    the built-in categories in the order they are first seen.
    """
    order: list[CategoryTag] = []
    keywords: dict[CategoryTag, list[str]] = {}
    for category, words in CATEGORY_KEYWORDS:
        order.append(category)
        keywords[category] = list(words)

    for config in configs or ():
        for entry in config.get("categories", []):
            if not isinstance(entry, Mapping):
                continue
            name = str(entry.get("name") or "").strip().lower()
            if not name:
                continue
            extra = _normalize_keywords(entry.get("keywords"))
            if not extra:
                continue
            tag = _category_tag(name)
            if tag not in keywords:
                order.append(tag)
                keywords[tag] = []
            for word in extra:
                if word not in keywords[tag]:
                    keywords[tag].append(word)

    return CategoryTaxonomy(rules=tuple((tag, tuple(keywords[tag])) for tag in order))


@lru_cache(maxsize=1)
def default_taxonomy() -> CategoryTaxonomy:
    """Built-in-only taxonomy (no file I/O)."""
    return build_category_taxonomy()


def categorize_item(name: str, taxonomy: CategoryTaxonomy | None = None) -> CategoryTag:
    """
    Return the category for an item name.

    Args:
        name: Item name as extracted from the receipt (e.g., "Bananas")
        taxonomy: Preloaded taxonomy; the built-in table when omitted

    Returns:
        First matching category in declared order, or Category.OTHER
    """
    layers = taxonomy or default_taxonomy()
    lowered = name.lower()
    for category, words in layers.rules:
        if any(word in lowered for word in words):
            return category
    return Category.OTHER
