"""
Recipe data models for the recipe importer.

This module defines the Pydantic models used to carry recipe data between
the extraction strategies, the orchestrator and callers.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PartialRecipe(BaseModel):
    """Fields one extraction strategy managed to read from a page.

    Every field is optional; the orchestrator decides whether the result is
    good enough to become a ScrapedRecipe.
    """

    title: str | None = None
    description: str | None = None
    image: str | None = None
    prep_time: str | None = None
    cook_time: str | None = None
    total_time: str | None = None
    servings: int | None = None
    difficulty: str | None = None
    ingredients: list[str] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    tags: list[str] | None = None

    def has_title(self) -> bool:
        return bool(self.title and self.title.strip())

    def has_content(self) -> bool:
        """Return True when there is at least one ingredient or instruction."""
        return bool(self.ingredients or self.instructions)

    def is_usable(self) -> bool:
        return self.has_title() and self.has_content()


class ScrapedRecipe(BaseModel):
    """The normalized recipe returned by a successful extraction.

    Attributes use snake_case; serialization uses the camelCase field names
    the app expects (prepTime, sourceUrl, ...).
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1, description="The recipe title")
    description: str | None = None
    image: str | None = Field(default=None, description="Image URL")
    prep_time: str | None = Field(
        default=None, alias="prepTime", description="e.g. '15min'")
    cook_time: str | None = Field(
        default=None, alias="cookTime", description="e.g. '1h 15min'")
    total_time: str | None = Field(
        default=None, alias="totalTime", description="e.g. '1h 30min'")
    servings: int | None = None
    difficulty: str | None = None
    ingredients: list[str] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    source_url: str = Field(alias="sourceUrl")
    tags: list[str] | None = Field(
        default=None, description="None when the page carries no tag fields")

    @model_validator(mode="after")
    def _check_content(self) -> ScrapedRecipe:
        if not self.title.strip():
            raise ValueError("title must not be blank")
        if not self.ingredients and not self.instructions:
            raise ValueError(
                "a recipe needs at least one ingredient or instruction")
        return self

    @classmethod
    def from_partial(cls, partial: PartialRecipe, source_url: str) -> ScrapedRecipe:
        """Build a recipe from a strategy result that passed is_usable()."""
        return cls(source_url=source_url, **partial.model_dump())

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready representation with camelCase field names."""
        return self.model_dump(by_alias=True)
