"""
Recipe Import Service.

This module wraps the extraction service for callers: it retries transient
failures with exponential backoff, applies the completeness policy, reports
progress, and turns every failure into a typed ImportErrorInfo instead of
raising.
"""
from __future__ import annotations

import logging
import time
from typing import Any, Callable

import requests

from ..config import ImporterConfig
from ..const import EVENT_METHOD_DETECTED, EVENT_PHASE_CHANGED, EVENT_RETRY
from ..exceptions import (
    MissingIngredientsError,
    MissingInstructionsError,
    RecipeImportError,
)
from ..models.import_result import ExtractionPhase, ImportErrorInfo, ImportResult
from ..models.recipe import ScrapedRecipe
from .recipe_service import EventCallback, extract_recipe

_LOGGER = logging.getLogger(__name__)

RetryCallback = Callable[[int, RecipeImportError], None]


def check_completeness(recipe: ScrapedRecipe, config: ImporterConfig) -> None:
    """Enforce the caller's requirements on an extracted recipe.

    Raises:
        MissingIngredientsError: If ingredients are required but absent
        MissingInstructionsError: If instructions are required but absent
    """
    if config.require_ingredients and not recipe.ingredients:
        raise MissingIngredientsError(
            f"Found '{recipe.title}' but could not read its ingredients")
    if config.require_instructions and not recipe.instructions:
        raise MissingInstructionsError(
            f"Found '{recipe.title}' but could not read its instructions")


def import_recipe(
    url: str,
    config: ImporterConfig | None = None,
    session: requests.Session | None = None,
    on_retry: RetryCallback | None = None,
    event_callback: EventCallback | None = None,
    should_cancel: Callable[[], bool] | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> ImportResult:
    """Import a recipe from a URL, retrying transient failures.

    Args:
        url: Recipe website URL
        config: Importer settings (defaults apply when omitted)
        session: Optional HTTP session shared by all attempts
        on_retry: Called with (attempt, error) before each retry
        event_callback: Receives (event_type, event_data) progress events
        should_cancel: Checked before each extraction strategy
        sleep: Used to wait between attempts

    Returns:
        ImportResult with the recipe on success or a typed error on failure
    """
    if config is None:
        config = ImporterConfig()

    detected: dict[str, Any] = {}

    def forward_event(event_type: str, event_data: dict[str, Any]) -> None:
        if event_type == EVENT_METHOD_DETECTED:
            detected["method"] = event_data.get("extraction_method")
        if event_callback is not None:
            event_callback(event_type, event_data)

    attempt = 0
    while True:
        attempt += 1
        try:
            _LOGGER.debug("Importing %s (attempt %d/%d)",
                          url, attempt, config.max_retries + 1)
            recipe = extract_recipe(
                url,
                session=session,
                timeout=config.timeout,
                max_response_size=config.max_response_size,
                user_agent=config.user_agent,
                event_callback=forward_event,
                should_cancel=should_cancel,
            )
            check_completeness(recipe, config)
        except RecipeImportError as e:
            if e.retryable and attempt <= config.max_retries:
                wait_time = config.backoff * 2 ** (attempt - 1)
                _LOGGER.warning(
                    "Error importing %s: %s, retrying after %.1fs", url, e, wait_time)
                if on_retry is not None:
                    on_retry(attempt, e)
                forward_event(EVENT_RETRY, {
                    "url": url,
                    "attempt": attempt,
                    "code": e.code,
                    "message": e.message,
                })
                sleep(wait_time)
                continue

            _LOGGER.warning("Import of %s failed with %s: %s", url, e.code, e)
            forward_event(EVENT_PHASE_CHANGED, {
                "url": url,
                "phase": ExtractionPhase.ERROR.value,
                "code": e.code,
            })
            return ImportResult(
                success=False,
                error=ImportErrorInfo.from_exception(e),
                extraction_method=detected.get("method"),
                attempts=attempt,
            )

        forward_event(EVENT_PHASE_CHANGED, {
            "url": url,
            "phase": ExtractionPhase.COMPLETE.value,
        })
        _LOGGER.info("Imported '%s' from %s in %d attempt(s)",
                     recipe.title, url, attempt)
        return ImportResult(
            success=True,
            recipe=recipe,
            extraction_method=detected.get("method"),
            attempts=attempt,
        )
