"""
Pytest configuration and fixtures for recipe importer tests.
"""

import json

import pytest
from unittest.mock import MagicMock

from bs4 import BeautifulSoup


JSONLD_RECIPE = {
    "@context": "https://schema.org",
    "@type": "Recipe",
    "name": "Classic Chocolate Chip Cookies",
    "description": "Chewy cookies with crisp edges.",
    "image": {"@type": "ImageObject", "url": "https://example.com/cookies.jpg"},
    "prepTime": "PT15M",
    "cookTime": "PT1H15M",
    "totalTime": "PT2H",
    "recipeYield": "24 cookies",
    "recipeCategory": ["dessert", "dessert"],
    "recipeCuisine": "italian",
    "recipeIngredient": ["2 cups flour", "1 cup butter", "", "1 cup chocolate chips"],
    "recipeInstructions": [
        {"@type": "HowToStep", "text": "1. Preheat the oven"},
        {"@type": "HowToStep", "text": "  Mix well  "},
        "Bake for 12 minutes",
    ],
}


def page(head: str = "", body: str = "") -> str:
    """Wrap fragments in a minimal HTML document."""
    return f"<html><head>{head}</head><body>{body}</body></html>"


def jsonld_script(data) -> str:
    payload = data if isinstance(data, str) else json.dumps(data)
    return f'<script type="application/ld+json">{payload}</script>'


MICRODATA_BODY = """
<div itemscope itemtype="http://schema.org/Recipe">
  <h1 itemprop="name">Microdata Pancakes</h1>
  <p itemprop="description">Fluffy   pancakes</p>
  <img itemprop="image" src="https://example.com/pancakes.jpg">
  <meta itemprop="prepTime" content="PT10M">
  <meta itemprop="cookTime" content="PT20M">
  <span itemprop="recipeYield">4 servings</span>
  <ul>
    <li itemprop="recipeIngredient">1 cup flour</li>
    <li itemprop="recipeIngredient">1 egg</li>
    <li itemprop="recipeIngredient"></li>
  </ul>
  <ol>
    <li itemprop="recipeInstructions">1. Whisk everything</li>
    <li itemprop="recipeInstructions">Fry in a pan</li>
  </ol>
</div>
"""

SELECTOR_BODY = """
<h1 class="recipe-title">Grandma's Soup</h1>
<ul class="recipe-ingredients">
  <li>1 onion</li>
  <li>2 carrots</li>
  <li>1 l stock</li>
</ul>
<div class="recipe-instructions">
  <ol>
    <li>1. Chop the vegetables</li>
    <li>Simmer for 30 minutes</li>
  </ol>
</div>
"""

PLAIN_BODY = """
<h1>My holiday</h1>
<p>We went to the beach and it was lovely.</p>
"""


def soup_of(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, features="html.parser")


@pytest.fixture
def jsonld_recipe():
    """A fresh copy of the Schema.org recipe used across tests."""
    return json.loads(json.dumps(JSONLD_RECIPE))


@pytest.fixture
def make_response():
    """Build a mock streamed response usable as a context manager."""
    def _make(body: bytes = b"", status_code: int = 200,
              content_type: str = "text/html; charset=utf-8"):
        response = MagicMock()
        response.status_code = status_code
        response.headers = {"content-type": content_type}
        response.iter_content.return_value = [body] if body else []
        response.__enter__.return_value = response
        response.__exit__.return_value = False
        return response
    return _make


@pytest.fixture
def mock_session(make_response):
    """Mock HTTP session serving a JSON-LD recipe page."""
    session = MagicMock()
    html = page(head=jsonld_script(JSONLD_RECIPE)).encode("utf-8")
    session.get.return_value = make_response(html)
    return session
