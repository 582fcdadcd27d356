"""Result models returned by the import service."""
from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..const import ERROR_SUGGESTIONS
from ..exceptions import RecipeImportError
from .recipe import ScrapedRecipe


class ExtractionPhase(str, Enum):
    """Phases an extraction passes through, reported to progress callbacks."""

    VALIDATING = "validating"
    FETCHING = "fetching"
    PARSING = "parsing"
    STRUCTURED_DATA = "structured_data"
    MICRODATA = "microdata"
    SELECTOR = "selector"
    COMPLETE = "complete"
    ERROR = "error"


class ImportErrorInfo(BaseModel):
    """A typed failure the app can turn into a message and a next step."""

    model_config = ConfigDict(populate_by_name=True)

    code: str
    message: str
    suggestion: str | None = None
    can_retry: bool = Field(default=False, alias="canRetry")
    can_enter_manually: bool = Field(default=False, alias="canEnterManually")

    @classmethod
    def from_exception(cls, error: RecipeImportError) -> ImportErrorInfo:
        return cls(
            code=error.code,
            message=error.message,
            suggestion=ERROR_SUGGESTIONS.get(error.code),
            can_retry=error.retryable,
            can_enter_manually=error.can_enter_manually,
        )


class ImportResult(BaseModel):
    """Outcome of one import request, including retries."""

    success: bool
    recipe: ScrapedRecipe | None = None
    error: ImportErrorInfo | None = None
    extraction_method: str | None = None
    attempts: int = 0

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
