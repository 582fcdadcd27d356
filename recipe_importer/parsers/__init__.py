"""Extraction strategies, in priority order."""
from .base_parser import BaseRecipeParser
from .jsonld_parser import JSONLDRecipeParser
from .microdata_parser import MicrodataRecipeParser
from .selector_parser import SelectorRecipeParser


def default_parsers() -> list[BaseRecipeParser]:
    """Return the strategies in the order they should be tried."""
    return [
        JSONLDRecipeParser(),
        MicrodataRecipeParser(),
        SelectorRecipeParser(),
    ]


__all__ = [
    "BaseRecipeParser",
    "JSONLDRecipeParser",
    "MicrodataRecipeParser",
    "SelectorRecipeParser",
    "default_parsers",
]
