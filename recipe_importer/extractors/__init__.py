"""Extractors package."""
from .scraper import create_session, fetch_page, validate_url

__all__ = ["create_session", "fetch_page", "validate_url"]
