"""Services package."""
from .import_service import import_recipe
from .recipe_formatter import format_recipe_record
from .recipe_service import extract_recipe, extract_recipe_from_html
from .service_handlers import handle_scrape_request

__all__ = [
    "extract_recipe",
    "extract_recipe_from_html",
    "format_recipe_record",
    "handle_scrape_request",
    "import_recipe",
]
