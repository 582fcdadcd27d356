"""
Recipe Formatter.

This module converts an extracted recipe into the record the app stores,
filling gaps the extractors leave: a placeholder image, default servings,
an inferred difficulty and tags guessed from the title.
"""
from __future__ import annotations

import logging
from typing import Any

from ..const import DEFAULT_SERVINGS
from ..models.recipe import ScrapedRecipe
from ..parsers.normalizers import dedupe

_LOGGER = logging.getLogger(__name__)

DEFAULT_EMOJI = "🍽️"

# First matching keyword wins
TITLE_EMOJIS = (
    (("cookie",), "🍪"),
    (("pancake",), "🥞"),
    (("cake", "cupcake"), "🧁"),
    (("pasta", "spaghetti"), "🍝"),
    (("pizza",), "🍕"),
    (("burger",), "🍔"),
    (("salad",), "🥗"),
    (("soup",), "🍲"),
    (("chicken",), "🍗"),
    (("fish",), "🐟"),
    (("bread",), "🍞"),
    (("curry",), "🍛"),
)

# Every matching keyword group contributes its tags
TITLE_TAGS = (
    (("cookie", "biscuit"), ("cookies", "dessert", "baking")),
    (("cake", "cupcake"), ("cake", "dessert", "baking")),
    (("pancake", "waffle"), ("breakfast", "pancakes")),
    (("pasta", "spaghetti"), ("pasta", "dinner", "italian")),
    (("chicken",), ("chicken", "protein", "dinner")),
    (("salad",), ("salad", "healthy", "lunch")),
    (("soup",), ("soup", "comfort food", "dinner")),
    (("easy", "simple"), ("easy", "quick")),
    (("curry",), ("curry", "spicy", "dinner", "asian")),
)


def emoji_for_title(title: str) -> str:
    lower_title = title.lower()
    for keywords, emoji in TITLE_EMOJIS:
        if any(keyword in lower_title for keyword in keywords):
            return emoji
    return DEFAULT_EMOJI


def tags_from_title(title: str) -> list[str]:
    """Guess tags from keywords in a recipe title."""
    lower_title = title.lower()
    tags: list[str] = []
    for keywords, group_tags in TITLE_TAGS:
        if any(keyword in lower_title for keyword in keywords):
            tags.extend(group_tags)
    return dedupe(tags)


def infer_difficulty(recipe: ScrapedRecipe) -> str:
    """Rate a recipe by how many steps and ingredients it has.

    Returns:
        'Easy' for at most 5 steps and 8 ingredients, 'Medium' for at most
        10 steps and 15 ingredients, otherwise 'Hard'
    """
    instruction_count = len(recipe.instructions)
    ingredient_count = len(recipe.ingredients)

    if instruction_count <= 5 and ingredient_count <= 8:
        return "Easy"
    if instruction_count <= 10 and ingredient_count <= 15:
        return "Medium"
    return "Hard"


def format_recipe_record(recipe: ScrapedRecipe) -> dict[str, Any]:
    """Build the stored recipe record from an extracted recipe.

    Args:
        recipe: A successfully extracted recipe

    Returns:
        Dictionary with camelCase keys, every optional field filled in
    """
    record = {
        "title": recipe.title,
        "description": recipe.description or "",
        "image": recipe.image or emoji_for_title(recipe.title),
        "prepTime": recipe.prep_time or "",
        "cookTime": recipe.cook_time or "",
        "totalTime": recipe.total_time or "",
        "servings": recipe.servings or DEFAULT_SERVINGS,
        "difficulty": recipe.difficulty or infer_difficulty(recipe),
        "ingredients": list(recipe.ingredients),
        "instructions": list(recipe.instructions),
        "sourceUrl": recipe.source_url,
        "tags": (list(recipe.tags) if recipe.tags is not None
                 else tags_from_title(recipe.title)),
        "kidVersionId": None,
    }
    _LOGGER.debug("Formatted record for '%s' (difficulty %s, %d tags)",
                  recipe.title, record["difficulty"], len(record["tags"]))
    return record
