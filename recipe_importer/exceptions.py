"""
Recipe importer exceptions.

Every failure an import can end in maps to one exception class carrying a
stable, machine-readable error code. Strategies that simply do not match a
page return None instead of raising.
"""
from __future__ import annotations

from .const import (
    ERROR_CANCELLED,
    ERROR_CONFIG,
    ERROR_INVALID_URL,
    ERROR_MISSING_INGREDIENTS,
    ERROR_MISSING_INSTRUCTIONS,
    ERROR_NETWORK,
    ERROR_NO_RECIPE_FOUND,
    ERROR_PAGE_NOT_FOUND,
    ERROR_TIMEOUT,
)

RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


class RecipeImportError(Exception):
    """Base class for all recipe import failures."""

    code = ERROR_NETWORK
    retryable = False
    can_enter_manually = False

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigError(RecipeImportError):
    """Raised when importer configuration is invalid."""

    code = ERROR_CONFIG


class InvalidUrlError(RecipeImportError):
    """Raised for malformed or non-HTTP(S) URLs, before any network call."""

    code = ERROR_INVALID_URL


class FetchError(RecipeImportError):
    """Raised when the recipe page cannot be fetched."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

    @property
    def retryable(self) -> bool:
        return self.status_code in RETRYABLE_STATUS_CODES


class HostUnreachableError(FetchError):
    """Raised on DNS resolution or connection failures."""

    @property
    def retryable(self) -> bool:
        return False


class PageNotFoundError(FetchError):
    """Raised when the server answers 404."""

    code = ERROR_PAGE_NOT_FOUND

    def __init__(self, message: str = "Recipe page not found") -> None:
        super().__init__(message, status_code=404)


class FetchTimeoutError(FetchError):
    """Raised when the page does not arrive within the timeout."""

    code = ERROR_TIMEOUT

    def __init__(self, message: str = "Request timed out") -> None:
        super().__init__(message)

    @property
    def retryable(self) -> bool:
        return True


class NoRecipeFoundError(RecipeImportError):
    """Raised when no extraction strategy produced a usable recipe."""

    code = ERROR_NO_RECIPE_FOUND
    can_enter_manually = True

    def __init__(self, message: str = "No recipe data found on this page") -> None:
        super().__init__(message)


class IncompleteRecipeError(NoRecipeFoundError):
    """Raised when a title was found but neither ingredients nor instructions."""

    def __init__(self, title: str) -> None:
        super().__init__(
            f"Found recipe '{title}' but no ingredients or instructions")
        self.title = title


class MissingIngredientsError(RecipeImportError):
    """Raised when an extracted recipe has no ingredients but they are required."""

    code = ERROR_MISSING_INGREDIENTS
    can_enter_manually = True


class MissingInstructionsError(RecipeImportError):
    """Raised when an extracted recipe has no instructions but they are required."""

    code = ERROR_MISSING_INSTRUCTIONS
    can_enter_manually = True


class ExtractionCancelledError(RecipeImportError):
    """Raised when the caller cancels an extraction between strategies."""

    code = ERROR_CANCELLED

    def __init__(self, message: str = "Extraction cancelled") -> None:
        super().__init__(message)
