"""Models package."""
from .import_result import ExtractionPhase, ImportErrorInfo, ImportResult
from .recipe import PartialRecipe, ScrapedRecipe

__all__ = [
    "ExtractionPhase",
    "ImportErrorInfo",
    "ImportResult",
    "PartialRecipe",
    "ScrapedRecipe",
]
