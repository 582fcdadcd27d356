"""Tests for the command line entry point."""

import json
from unittest.mock import patch

from conftest import MICRODATA_BODY, PLAIN_BODY, page
from recipe_importer.cli import main
from recipe_importer.models.import_result import ImportErrorInfo, ImportResult
from recipe_importer.models.recipe import ScrapedRecipe

URL = "https://example.com/pancakes"


def test_html_file_prints_recipe(tmp_path, capsys):
    html_file = tmp_path / "page.html"
    html_file.write_text(page(body=MICRODATA_BODY), encoding="utf-8")

    assert main([URL, "--html-file", str(html_file)]) == 0

    output = json.loads(capsys.readouterr().out)
    assert output["title"] == "Microdata Pancakes"
    assert output["sourceUrl"] == URL


def test_html_file_without_recipe_fails(tmp_path, capsys):
    html_file = tmp_path / "page.html"
    html_file.write_text(page(body=PLAIN_BODY), encoding="utf-8")

    assert main([URL, "--html-file", str(html_file)]) == 1

    output = json.loads(capsys.readouterr().out)
    assert output["error"]["code"] == "NO_RECIPE_FOUND"


def test_missing_html_file(tmp_path):
    assert main([URL, "--html-file", str(tmp_path / "missing.html")]) == 2


def test_record_output_and_save(tmp_path, capsys):
    recipe = ScrapedRecipe(title="Quick Pasta", ingredients=["pasta"],
                           instructions=["Boil"], source_url=URL)
    result = ImportResult(success=True, recipe=recipe, attempts=1)

    with patch("recipe_importer.cli.import_recipe", return_value=result) as importer:
        code = main([URL, "--record", "--retries", "1", "--output-dir", str(tmp_path)])

    assert code == 0
    assert importer.call_args.kwargs["config"].max_retries == 1
    output = json.loads(capsys.readouterr().out)
    assert output["difficulty"] == "Easy"
    assert output["servings"] == 4
    saved = json.loads((tmp_path / "quick_pasta.json").read_text(encoding="utf-8"))
    assert saved == output


def test_import_failure_exit_code(capsys):
    result = ImportResult(
        success=False,
        error=ImportErrorInfo(code="TIMEOUT", message="Request timed out", can_retry=True),
        attempts=4,
    )

    with patch("recipe_importer.cli.import_recipe", return_value=result):
        assert main([URL]) == 1

    output = json.loads(capsys.readouterr().out)
    assert output["error"]["canRetry"] is True


def test_invalid_env_config(monkeypatch):
    monkeypatch.setenv("RECIPE_IMPORT_TIMEOUT", "never")

    with patch("recipe_importer.cli.load_dotenv"):
        assert main([URL]) == 2
