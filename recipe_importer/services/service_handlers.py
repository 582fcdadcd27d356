"""
Service Handlers.

This module contains the request handler the app calls to scrape a recipe.
It validates the request payload, runs the import and shapes a JSON-ready
response.
"""
from __future__ import annotations

import logging
from typing import Any, Callable

import voluptuous as vol

from ..config import ImporterConfig
from ..const import (
    DATA_ERROR,
    DATA_EXTRACTION_METHOD,
    DATA_RECIPE,
    DATA_TIMEOUT,
    DATA_URL,
    ERROR_INVALID_URL,
    ERROR_SUGGESTIONS,
)
from ..models.import_result import ImportErrorInfo
from .import_service import import_recipe
from .recipe_service import EventCallback

_LOGGER = logging.getLogger(__name__)

SERVICE_SCRAPE_SCHEMA = vol.Schema(
    {
        vol.Required(DATA_URL): vol.All(str, vol.Strip, vol.Length(min=1)),
        vol.Optional(DATA_TIMEOUT): vol.All(
            vol.Coerce(float), vol.Range(min=0.1, max=120)),
    },
    extra=vol.REMOVE_EXTRA,
)


def _invalid_request(message: str) -> dict[str, Any]:
    error = ImportErrorInfo(
        code=ERROR_INVALID_URL,
        message=message,
        suggestion=ERROR_SUGGESTIONS[ERROR_INVALID_URL],
    )
    return {DATA_ERROR: error.model_dump(by_alias=True)}


def handle_scrape_request(
    payload: Any,
    config: ImporterConfig | None = None,
    event_callback: EventCallback | None = None,
    **import_kwargs: Any,
) -> dict[str, Any]:
    """Handle a scrape request.

    Args:
        payload: Request data, {"url": ...} with an optional "timeout"
        config: Importer settings
        event_callback: Receives progress events for this request
        **import_kwargs: Passed through to import_recipe (session, sleep, ...)

    Returns:
        {"recipe": ..., "extractionMethod": ...} on success, or
        {"error": {...}} describing the failure
    """
    try:
        data = SERVICE_SCRAPE_SCHEMA(payload)
    except vol.Invalid as e:
        _LOGGER.warning("Rejected scrape request: %s", e)
        if e.path and e.path[0] == DATA_URL:
            return _invalid_request("URL is required")
        return _invalid_request(f"Invalid request: {e}")

    if config is None:
        config = ImporterConfig()
    if DATA_TIMEOUT in data:
        config = config.model_copy(update={"timeout": data[DATA_TIMEOUT]})

    url = data[DATA_URL]
    _LOGGER.info("Scraping recipe from %s", url)

    result = import_recipe(
        url, config=config, event_callback=event_callback, **import_kwargs)

    if result.success and result.recipe is not None:
        return {
            DATA_RECIPE: result.recipe.to_dict(),
            DATA_EXTRACTION_METHOD: result.extraction_method,
        }

    _LOGGER.warning("Recipe scrape failed for %s: %s",
                    url, result.error.message if result.error else "unknown error")
    return {DATA_ERROR: result.error.model_dump(by_alias=True) if result.error else None}
