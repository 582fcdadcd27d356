"""
JSON-LD Recipe Parser.

This module handles extraction of structured recipe data embedded in
<script type="application/ld+json"> blocks using the Schema.org Recipe
vocabulary.
"""
from __future__ import annotations

import json
import logging
from typing import Any

from bs4 import BeautifulSoup

from ..const import METHOD_JSONLD
from ..models.recipe import PartialRecipe
from .base_parser import BaseRecipeParser
from .normalizers import (
    dedupe,
    extract_array,
    extract_instructions,
    extract_text,
    format_duration,
    none_if_empty,
    parse_number,
)

_LOGGER = logging.getLogger(__name__)

RECIPE_TYPE = "Recipe"


def is_recipe(item: Any) -> bool:
    """Check if a JSON-LD item represents a Recipe."""
    if not isinstance(item, dict):
        return False
    item_type = item.get("@type")
    if isinstance(item_type, str):
        return item_type == RECIPE_TYPE
    if isinstance(item_type, list):
        return RECIPE_TYPE in item_type
    return False


def find_recipe(data: Any) -> dict[str, Any] | None:
    """Search a deserialized JSON-LD value for the first Recipe object.

    Lists are searched element by element, a Recipe-typed object matches
    directly, and an '@graph' wrapper is searched recursively. Scalars never
    match.
    """
    if isinstance(data, list):
        for item in data:
            recipe = find_recipe(item)
            if recipe is not None:
                return recipe
        return None

    if isinstance(data, dict):
        if is_recipe(data):
            return data
        if data.get("@graph"):
            return find_recipe(data["@graph"])

    return None


def _extract_image(image: Any) -> str:
    if isinstance(image, list):
        return _extract_image(image[0]) if image else ""
    if isinstance(image, dict) and isinstance(image.get("url"), str):
        return image["url"]
    return extract_text(image)


class JSONLDRecipeParser(BaseRecipeParser):
    """Extracts recipes from Schema.org JSON-LD blocks.

    The first block (in document order) that contains a Recipe wins. Blocks
    that fail to deserialize are skipped.
    """

    method = METHOD_JSONLD

    def parse_recipe(self, soup: BeautifulSoup) -> PartialRecipe | None:
        """Find and map the first JSON-LD Recipe in the document.

        Args:
            soup: The parsed page

        Returns:
            PartialRecipe mapped from the Recipe object, or None if no block
            contains one
        """
        json_lds = soup.find_all("script", type="application/ld+json")
        _LOGGER.debug("Found %d JSON-LD scripts", len(json_lds))

        for idx, json_ld in enumerate(json_lds):
            content = json_ld.string or json_ld.get_text()
            if not content or not content.strip():
                continue

            # Pathologically nested blocks exhaust the stack in either step
            try:
                data = json.loads(content, strict=False)
                recipe = find_recipe(data)
            except (ValueError, RecursionError) as e:
                _LOGGER.debug("Failed to parse JSON-LD script %d: %s", idx, e)
                continue

            if recipe is not None:
                _LOGGER.debug("Found recipe data in JSON-LD script %d", idx)
                return self.map_recipe(recipe)

        return None

    def map_recipe(self, recipe: dict[str, Any]) -> PartialRecipe:
        """Map a Schema.org Recipe object onto the normalized fields.

        The title is taken from 'name' exactly as published.
        """
        tags = extract_array(recipe.get("recipeCategory")) + \
            extract_array(recipe.get("recipeCuisine"))

        return PartialRecipe(
            title=none_if_empty(extract_text(recipe.get("name"))),
            description=none_if_empty(extract_text(recipe.get("description"))),
            image=none_if_empty(_extract_image(recipe.get("image"))),
            prep_time=none_if_empty(format_duration(recipe.get("prepTime"))),
            cook_time=none_if_empty(format_duration(recipe.get("cookTime"))),
            total_time=none_if_empty(format_duration(recipe.get("totalTime"))),
            servings=parse_number(
                recipe.get("recipeYield") or recipe.get("yield")),
            ingredients=[
                ingredient.strip()
                for ingredient in extract_array(recipe.get("recipeIngredient"))
                if ingredient.strip()
            ],
            instructions=extract_instructions(recipe.get("recipeInstructions")),
            tags=dedupe(tags),
        )
