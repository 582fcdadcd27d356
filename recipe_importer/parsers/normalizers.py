"""Normalization helpers shared by the extraction strategies."""
from __future__ import annotations

import math
import re
from typing import Any, Iterable

_DURATION_PATTERN = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?")
_LEADING_INT_PATTERN = re.compile(r"^\s*([+-]?\d+)")
_ORDINAL_PATTERN = re.compile(r"^\d+\.\s+")


def extract_text(value: Any) -> str:
    """Unwrap a linked-data text value.

    Handles:
        - Plain strings
        - Objects with a 'text' field (HowToStep)
        - Objects with an '@value' field (JSON-LD value objects)

    Anything else yields an empty string.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        text = value.get("text")
        if isinstance(text, str) and text:
            return text
        text = value.get("@value")
        if isinstance(text, str) and text:
            return text
    return ""


def extract_array(value: Any) -> list[str]:
    """Normalize a scalar-or-list field to a list of non-empty strings."""
    if not value:
        return []
    if not isinstance(value, list):
        value = [value]
    return [text for text in (extract_text(item) for item in value) if text]


def extract_instructions(value: Any) -> list[str]:
    """Flatten recipeInstructions into cleaned step strings.

    Handles:
        - A single string (split on line breaks)
        - Lists of strings or HowToStep objects
        - HowToSection objects whose itemListElement holds the steps
    """
    if not value:
        return []
    if isinstance(value, str):
        value = value.splitlines()
    elif not isinstance(value, list):
        value = [value]

    steps = []
    for item in value:
        if isinstance(item, dict) and item.get("itemListElement"):
            steps.extend(extract_instructions(item["itemListElement"]))
            continue
        cleaned = clean_instruction(extract_text(item))
        if cleaned:
            steps.append(cleaned)
    return steps


def format_duration(duration: Any) -> str:
    """Convert an ISO 8601 duration (PT#H#M) to a compact human string.

    Examples:
        PT1H15M -> "1h 15min"
        PT45M -> "45min"
        PT2H -> "2h"
        bogus -> "bogus"
    """
    if not duration:
        return ""
    if isinstance(duration, str):
        match = _DURATION_PATTERN.search(duration)
        if match:
            hours = int(match.group(1) or 0)
            minutes = int(match.group(2) or 0)
            if hours and minutes:
                return f"{hours}h {minutes}min"
            if hours:
                return f"{hours}h"
            if minutes:
                return f"{minutes}min"
    return extract_text(duration)


def parse_number(value: Any) -> int | None:
    """Loosely coerce a yield value to an integer.

    Native numbers are truncated; strings contribute their leading integer
    ("4 servings" -> 4). Lists use their first entry. Anything else is absent.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, list):
        return parse_number(value[0]) if value else None
    if isinstance(value, str):
        match = _LEADING_INT_PATTERN.match(value)
        if match:
            return int(match.group(1))
    return None


def clean_instruction(text: str) -> str:
    """Strip surrounding whitespace and a leading '1. ' style ordinal."""
    return _ORDINAL_PATTERN.sub("", text.strip()).strip()


def clean_text(text: str) -> str:
    """Collapse runs of whitespace in text read from HTML."""
    return " ".join(text.split())


def dedupe(values: Iterable[str]) -> list[str]:
    """Remove duplicates while keeping first-seen order."""
    seen = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


def none_if_empty(value: str | None) -> str | None:
    return value or None
