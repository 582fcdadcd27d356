"""
KidChef Recipe Importer.

Extracts structured recipe data from recipe web pages using JSON-LD,
microdata, or heuristic CSS selectors, in that order.
"""
from __future__ import annotations

from .config import ImporterConfig, load_config
from .exceptions import (
    ExtractionCancelledError,
    FetchError,
    FetchTimeoutError,
    HostUnreachableError,
    IncompleteRecipeError,
    InvalidUrlError,
    MissingIngredientsError,
    MissingInstructionsError,
    NoRecipeFoundError,
    PageNotFoundError,
    RecipeImportError,
)
from .models import ImportErrorInfo, ImportResult, ScrapedRecipe
from .services import (
    extract_recipe,
    extract_recipe_from_html,
    format_recipe_record,
    handle_scrape_request,
    import_recipe,
)

__version__ = "1.0.0"

__all__ = [
    "ExtractionCancelledError",
    "FetchError",
    "FetchTimeoutError",
    "HostUnreachableError",
    "ImportErrorInfo",
    "ImportResult",
    "ImporterConfig",
    "IncompleteRecipeError",
    "InvalidUrlError",
    "MissingIngredientsError",
    "MissingInstructionsError",
    "NoRecipeFoundError",
    "PageNotFoundError",
    "RecipeImportError",
    "ScrapedRecipe",
    "extract_recipe",
    "extract_recipe_from_html",
    "format_recipe_record",
    "handle_scrape_request",
    "import_recipe",
    "load_config",
]
