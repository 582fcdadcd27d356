"""
Heuristic Selector Parser.

Last-resort strategy for pages without structured data: tries CSS class and
tag patterns common on recipe sites, most specific first.
"""
from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from ..const import METHOD_SELECTORS
from ..models.recipe import PartialRecipe
from .base_parser import BaseRecipeParser
from .normalizers import clean_instruction, clean_text

_LOGGER = logging.getLogger(__name__)

TITLE_SELECTORS = (
    ".recipe-title",
    ".entry-title",
    "h1.recipe-name",
    ".recipe-header h1",
    '[class*="recipe-title"]',
    '[class*="recipe-name"]',
)

INGREDIENT_SELECTORS = (
    ".recipe-ingredient",
    ".ingredient",
    ".recipe-ingredients li",
    '[class*="ingredient"]',
    ".ingredients li",
)

INSTRUCTION_SELECTORS = (
    ".recipe-instruction",
    ".instruction",
    ".recipe-instructions li",
    ".recipe-method li",
    '[class*="instruction"]',
    ".directions li",
)


def find_text_by_selectors(soup: BeautifulSoup, selectors: tuple[str, ...]) -> str:
    """Return the text of the first selector whose first match is non-empty."""
    for selector in selectors:
        element = soup.select_one(selector)
        if element is not None:
            text = clean_text(element.get_text())
            if text:
                return text
    return ""


def find_multiple_text_by_selectors(soup: BeautifulSoup, selectors: tuple[str, ...]) -> list[str]:
    """Return every non-empty text matched by the first productive selector.

    Results are never merged across selectors: once one selector yields a
    non-empty element, its matches are the answer.
    """
    for selector in selectors:
        texts = [
            text for text in (
                clean_text(element.get_text())
                for element in soup.select(selector))
            if text
        ]
        if texts:
            _LOGGER.debug("Selector %r matched %d elements",
                          selector, len(texts))
            return texts
    return []


class SelectorRecipeParser(BaseRecipeParser):
    """Extracts recipes by guessing common CSS conventions."""

    method = METHOD_SELECTORS

    def __init__(
        self,
        title_selectors: tuple[str, ...] = TITLE_SELECTORS,
        ingredient_selectors: tuple[str, ...] = INGREDIENT_SELECTORS,
        instruction_selectors: tuple[str, ...] = INSTRUCTION_SELECTORS,
    ) -> None:
        self.title_selectors = title_selectors
        self.ingredient_selectors = ingredient_selectors
        self.instruction_selectors = instruction_selectors

    def parse_recipe(self, soup: BeautifulSoup) -> PartialRecipe | None:
        title = find_text_by_selectors(soup, self.title_selectors)
        if not title:
            return None

        ingredients = find_multiple_text_by_selectors(
            soup, self.ingredient_selectors)
        instructions = [
            step for step in (
                clean_instruction(text)
                for text in find_multiple_text_by_selectors(
                    soup, self.instruction_selectors))
            if step
        ]

        # A title alone is not evidence of a recipe page
        if not ingredients and not instructions:
            _LOGGER.debug("Title '%s' found but no ingredients or instructions",
                          title)
            return None

        return PartialRecipe(
            title=title,
            ingredients=ingredients,
            instructions=instructions,
        )
