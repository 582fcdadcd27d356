"""
Base Recipe Parser.

This module defines the base interface that all extraction strategies must
implement.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from bs4 import BeautifulSoup

from ..models.recipe import PartialRecipe


class BaseRecipeParser(ABC):
    """Abstract base class for recipe extraction strategies.

    Parsers hold no per-document state, so one instance can serve any number
    of concurrent extractions. A page that does not match a strategy is a
    normal outcome and is reported by returning None, never by raising.
    """

    method: str = ""

    @abstractmethod
    def parse_recipe(self, soup: BeautifulSoup) -> PartialRecipe | None:
        """Parse recipe information from a parsed HTML document.

        Args:
            soup: The parsed page

        Returns:
            The fields this strategy could read, or None if the page does not
            match the strategy
        """
        pass
