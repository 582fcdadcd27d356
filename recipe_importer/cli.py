"""
Recipe importer command line.

Imports a recipe from a URL (or a saved HTML page) and prints it as JSON.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from .config import load_config
from .exceptions import RecipeImportError
from .models.import_result import ImportErrorInfo
from .services.import_service import check_completeness, import_recipe
from .services.recipe_formatter import format_recipe_record
from .services.recipe_service import extract_recipe_from_html

logger = logging.getLogger(__name__)


def _safe_filename(title: str) -> str:
    safe_title = "".join(c for c in title if c.isalnum() or c in (' ', '-', '_')).rstrip()
    safe_title = safe_title.replace(' ', '_').lower()
    return safe_title or "recipe"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="recipe-import",
        description="Extract a recipe from a web page into structured JSON"
    )
    parser.add_argument(
        "url",
        type=str,
        help="URL of the recipe page (used as sourceUrl with --html-file)"
    )
    parser.add_argument(
        "--html-file",
        type=Path,
        help="Read the page from this file instead of fetching the URL"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Fetch timeout in seconds (default: RECIPE_IMPORT_TIMEOUT or 10)"
    )
    parser.add_argument(
        "--retries",
        type=int,
        help="Retries for transient failures (default: RECIPE_IMPORT_MAX_RETRIES or 3)"
    )
    parser.add_argument(
        "--record",
        action="store_true",
        help="Print the stored recipe record (defaults and inferred fields filled in)"
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Also save the JSON to this directory, named after the recipe title"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the recipe importer."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )
    load_dotenv()

    try:
        config = load_config()
    except RecipeImportError as e:
        logger.error("%s", e)
        return 2

    overrides = {}
    if args.timeout is not None:
        overrides["timeout"] = args.timeout
    if args.retries is not None:
        overrides["max_retries"] = max(args.retries, 0)
    if overrides:
        config = config.model_copy(update=overrides)

    if args.html_file is not None:
        try:
            html = args.html_file.read_bytes()
            recipe = extract_recipe_from_html(html, args.url)
            check_completeness(recipe, config)
        except OSError as e:
            logger.error("Could not read %s: %s", args.html_file, e)
            return 2
        except RecipeImportError as e:
            error = ImportErrorInfo.from_exception(e)
            print(json.dumps({"error": error.model_dump(by_alias=True)}, indent=2))
            return 1
    else:
        result = import_recipe(args.url, config=config)
        if not result.success or result.recipe is None:
            error = result.error.model_dump(by_alias=True) if result.error else None
            print(json.dumps({"error": error}, indent=2))
            return 1
        recipe = result.recipe

    output = format_recipe_record(recipe) if args.record else recipe.to_dict()
    text = json.dumps(output, indent=2, ensure_ascii=False)
    print(text)

    if args.output_dir is not None:
        args.output_dir.mkdir(parents=True, exist_ok=True)
        json_file = args.output_dir / f"{_safe_filename(recipe.title)}.json"
        logger.info("Saving structured recipe to: %s", json_file)
        json_file.write_text(text, encoding="utf-8")

    return 0


if __name__ == "__main__":
    sys.exit(main())
