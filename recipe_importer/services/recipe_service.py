"""
Recipe Extraction Service.

This module orchestrates the extraction of recipe data from URLs, trying
JSON-LD, then microdata, then heuristic CSS selectors, and accepting the
first strategy that yields a usable recipe.
"""
from __future__ import annotations

import logging
from typing import Any, Callable

import requests
from bs4 import BeautifulSoup

from ..const import (
    DEFAULT_MAX_RESPONSE_SIZE,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    EVENT_METHOD_DETECTED,
    EVENT_PHASE_CHANGED,
    METHOD_JSONLD,
    METHOD_MICRODATA,
    METHOD_SELECTORS,
)
from ..exceptions import ExtractionCancelledError, IncompleteRecipeError, NoRecipeFoundError
from ..extractors.scraper import fetch_page, validate_url
from ..models.import_result import ExtractionPhase
from ..models.recipe import ScrapedRecipe
from ..parsers import BaseRecipeParser, default_parsers

_LOGGER = logging.getLogger(__name__)

EventCallback = Callable[[str, dict[str, Any]], None]

STRATEGY_PHASES = {
    METHOD_JSONLD: ExtractionPhase.STRUCTURED_DATA,
    METHOD_MICRODATA: ExtractionPhase.MICRODATA,
    METHOD_SELECTORS: ExtractionPhase.SELECTOR,
}


def _emit(event_callback: EventCallback | None, event_type: str, event_data: dict[str, Any]) -> None:
    if event_callback is not None:
        event_callback(event_type, event_data)


def _enter_phase(event_callback: EventCallback | None, url: str, phase: ExtractionPhase) -> None:
    _LOGGER.debug("Extraction of %s entering phase %s", url, phase.value)
    _emit(event_callback, EVENT_PHASE_CHANGED, {"url": url, "phase": phase.value})


def extract_recipe_from_html(
    html: str | bytes,
    url: str,
    event_callback: EventCallback | None = None,
    should_cancel: Callable[[], bool] | None = None,
    parsers: list[BaseRecipeParser] | None = None,
) -> ScrapedRecipe:
    """Run the extraction strategies over markup that is already in hand.

    Args:
        html: Raw page markup
        url: Source URL, echoed as sourceUrl
        event_callback: Optional callback receiving (event_type, event_data)
        should_cancel: Optional callable checked before each strategy
        parsers: Strategies in priority order (defaults to all three)

    Returns:
        The recipe from the first strategy with a title and at least one
        ingredient or instruction

    Raises:
        NoRecipeFoundError: If no strategy produced a usable recipe
        IncompleteRecipeError: If a title was found but never any content
        ExtractionCancelledError: If should_cancel returned True
    """
    _enter_phase(event_callback, url, ExtractionPhase.PARSING)
    soup = BeautifulSoup(html, features="html.parser")

    incomplete_title = None
    for parser in parsers if parsers is not None else default_parsers():
        if should_cancel is not None and should_cancel():
            _LOGGER.info("Extraction of %s cancelled", url)
            raise ExtractionCancelledError()

        phase = STRATEGY_PHASES.get(parser.method)
        if phase is not None:
            _enter_phase(event_callback, url, phase)

        result = parser.parse_recipe(soup)
        if result is None:
            _LOGGER.debug("Strategy %s found nothing on %s", parser.method, url)
            continue

        if not result.has_title():
            _LOGGER.warning(
                "Strategy %s matched %s without a title, trying next", parser.method, url)
            continue

        if not result.has_content():
            _LOGGER.warning(
                "Strategy %s found '%s' on %s without ingredients or instructions, trying next",
                parser.method, result.title, url)
            incomplete_title = incomplete_title or result.title
            continue

        _LOGGER.info(
            "Extracted recipe '%s' from %s using %s (%d ingredients, %d instructions)",
            result.title, url, parser.method,
            len(result.ingredients), len(result.instructions))
        _emit(event_callback, EVENT_METHOD_DETECTED, {
            "url": url,
            "extraction_method": parser.method,
        })
        return ScrapedRecipe.from_partial(result, url)

    if incomplete_title:
        raise IncompleteRecipeError(incomplete_title)
    raise NoRecipeFoundError()


def extract_recipe(
    url: str,
    session: requests.Session | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    max_response_size: int = DEFAULT_MAX_RESPONSE_SIZE,
    user_agent: str = DEFAULT_USER_AGENT,
    event_callback: EventCallback | None = None,
    should_cancel: Callable[[], bool] | None = None,
) -> ScrapedRecipe:
    """Extract a recipe from a URL.

    This function orchestrates the extraction process:
    1. Validates the URL
    2. Fetches the page markup
    3. Parses it and tries JSON-LD, microdata and CSS selectors in order
    4. Returns the normalized recipe of the first strategy that succeeds

    Args:
        url: Recipe website URL
        session: Optional HTTP session to fetch with
        timeout: Fetch timeout in seconds
        max_response_size: Largest page accepted, in bytes
        user_agent: User agent for a newly created session
        event_callback: Optional callback to fire phase events during extraction
        should_cancel: Optional callable checked before each strategy

    Returns:
        The normalized recipe

    Raises:
        InvalidUrlError: If the URL is not a valid http(s) URL
        FetchError: If fetching fails (subclasses name the cause)
        NoRecipeFoundError: If no strategy produced a usable recipe
    """
    _enter_phase(event_callback, url, ExtractionPhase.VALIDATING)
    url = validate_url(url)

    _enter_phase(event_callback, url, ExtractionPhase.FETCHING)
    html = fetch_page(
        url,
        session=session,
        timeout=timeout,
        max_response_size=max_response_size,
        user_agent=user_agent,
    )

    return extract_recipe_from_html(
        html, url, event_callback=event_callback, should_cancel=should_cancel)
