"""
Microdata Recipe Parser.

Reads recipes marked up inline with Schema.org microdata attributes
(itemscope / itemtype / itemprop).
"""
from __future__ import annotations

import logging

from bs4 import BeautifulSoup, Tag

from ..const import METHOD_MICRODATA
from ..models.recipe import PartialRecipe
from .base_parser import BaseRecipeParser
from .normalizers import clean_instruction, clean_text, format_duration, parse_number

_LOGGER = logging.getLogger(__name__)

RECIPE_ITEMTYPE_SELECTOR = '[itemtype*="schema.org/Recipe"]'


def _read_property(element: Tag) -> str:
    """Return an element's text, falling back to its content attribute."""
    text = clean_text(element.get_text())
    if text:
        return text
    content = element.get("content")
    return content.strip() if isinstance(content, str) else ""


def _read_image(element: Tag) -> str | None:
    for attribute in ("src", "content", "href"):
        value = element.get(attribute)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


class MicrodataRecipeParser(BaseRecipeParser):
    """Extracts recipes from Schema.org microdata."""

    method = METHOD_MICRODATA

    def parse_recipe(self, soup: BeautifulSoup) -> PartialRecipe | None:
        recipe_element = soup.select_one(RECIPE_ITEMTYPE_SELECTOR)
        if recipe_element is None:
            return None

        def extract_prop(prop: str) -> list[str]:
            values = []
            for element in recipe_element.select(f'[itemprop~="{prop}"]'):
                value = _read_property(element)
                if value:
                    values.append(value)
            return values

        def first(prop: str) -> str | None:
            values = extract_prop(prop)
            return values[0] if values else None

        title = first("name")
        if not title:
            _LOGGER.debug("Microdata recipe element has no name")
            return None

        image = None
        image_element = recipe_element.select_one('[itemprop~="image"]')
        if image_element is not None:
            image = _read_image(image_element)

        instructions = [
            step for step in (
                clean_instruction(text)
                for text in extract_prop("recipeInstructions"))
            if step
        ]

        return PartialRecipe(
            title=title,
            description=first("description"),
            image=image,
            prep_time=format_duration(first("prepTime")) or None,
            cook_time=format_duration(first("cookTime")) or None,
            total_time=format_duration(first("totalTime")) or None,
            servings=parse_number(first("recipeYield")),
            ingredients=extract_prop("recipeIngredient"),
            instructions=instructions,
        )
