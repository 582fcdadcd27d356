"""Tests for URL validation and page fetching."""

import pytest
import requests
from unittest.mock import MagicMock, patch

from cloudscraper.exceptions import CloudflareChallengeError
from urllib3.exceptions import ReadTimeoutError

from recipe_importer.const import DEFAULT_USER_AGENT
from recipe_importer.exceptions import (
    FetchError,
    FetchTimeoutError,
    HostUnreachableError,
    InvalidUrlError,
    PageNotFoundError,
)
from recipe_importer.extractors.scraper import create_session, fetch_page, validate_url

URL = "https://example.com/recipe"


class TestValidateUrl:
    """Tests for URL validation."""

    def test_accepts_http_and_https(self):
        assert validate_url("http://example.com/a") == "http://example.com/a"
        assert validate_url("  https://example.com/a ") == "https://example.com/a"

    @pytest.mark.parametrize("url", [
        "",
        "   ",
        None,
        "example.com/recipe",
        "ftp://example.com/recipe",
        "javascript:alert(1)",
        "https://",
    ])
    def test_rejects_invalid(self, url):
        with pytest.raises(InvalidUrlError):
            validate_url(url)

    def test_rejects_private_ips(self):
        with pytest.raises(InvalidUrlError):
            validate_url("http://127.0.0.1/admin")
        with pytest.raises(InvalidUrlError):
            validate_url("http://192.168.1.10/recipe")

    def test_private_ips_allowed_when_requested(self):
        assert validate_url("http://127.0.0.1:8000/r", allow_private_hosts=True)


class TestFetchPage:
    """Tests for fetch_page error mapping."""

    def test_returns_body_and_sends_headers(self, make_response):
        session = MagicMock()
        session.get.return_value = make_response(b"<html>ok</html>")

        assert fetch_page(URL, session=session, timeout=5) == b"<html>ok</html>"

        kwargs = session.get.call_args.kwargs
        assert kwargs["timeout"] == 5
        assert kwargs["stream"] is True
        assert "text/html" in kwargs["headers"]["Accept"]

    def test_404_raises_page_not_found(self, make_response):
        session = MagicMock()
        session.get.return_value = make_response(status_code=404)

        with pytest.raises(PageNotFoundError) as exc_info:
            fetch_page(URL, session=session)

        assert exc_info.value.code == "PAGE_NOT_FOUND"
        assert not exc_info.value.retryable

    def test_other_status_raises_fetch_error(self, make_response):
        session = MagicMock()
        session.get.return_value = make_response(status_code=403)

        with pytest.raises(FetchError) as exc_info:
            fetch_page(URL, session=session)

        assert exc_info.value.status_code == 403
        assert exc_info.value.code == "NETWORK_ERROR"
        assert not exc_info.value.retryable

    def test_server_error_is_retryable(self, make_response):
        session = MagicMock()
        session.get.return_value = make_response(status_code=503)

        with pytest.raises(FetchError) as exc_info:
            fetch_page(URL, session=session)

        assert exc_info.value.retryable

    def test_timeout(self):
        session = MagicMock()
        session.get.side_effect = requests.exceptions.ReadTimeout("slow")

        with pytest.raises(FetchTimeoutError) as exc_info:
            fetch_page(URL, session=session)

        assert exc_info.value.code == "TIMEOUT"
        assert exc_info.value.retryable

    def test_connect_timeout_is_a_timeout(self):
        session = MagicMock()
        session.get.side_effect = requests.exceptions.ConnectTimeout("slow")

        with pytest.raises(FetchTimeoutError):
            fetch_page(URL, session=session)

    def test_connection_error(self):
        session = MagicMock()
        session.get.side_effect = requests.exceptions.ConnectionError("dns")

        with pytest.raises(HostUnreachableError) as exc_info:
            fetch_page(URL, session=session)

        assert exc_info.value.code == "NETWORK_ERROR"
        assert not exc_info.value.retryable

    def test_unexpected_content_type_is_still_returned(self, make_response):
        session = MagicMock()
        session.get.return_value = make_response(b"<html>plain</html>", content_type="text/plain")

        assert fetch_page(URL, session=session) == b"<html>plain</html>"

    def test_stalled_body_is_a_timeout(self, make_response):
        session = MagicMock()
        response = make_response()
        response.iter_content.side_effect = requests.exceptions.ConnectionError(
            ReadTimeoutError(None, URL, "Read timed out."))
        session.get.return_value = response

        with pytest.raises(FetchTimeoutError) as exc_info:
            fetch_page(URL, session=session, timeout=0.5)

        assert exc_info.value.code == "TIMEOUT"
        assert exc_info.value.retryable

    def test_dropped_body_is_unreachable(self, make_response):
        session = MagicMock()
        response = make_response()
        response.iter_content.side_effect = requests.exceptions.ConnectionError("reset")
        session.get.return_value = response

        with pytest.raises(HostUnreachableError):
            fetch_page(URL, session=session)

    def test_cloudflare_challenge_is_a_fetch_error(self):
        session = MagicMock()
        session.get.side_effect = CloudflareChallengeError("challenge detected")

        with pytest.raises(FetchError) as exc_info:
            fetch_page(URL, session=session)

        assert exc_info.value.code == "NETWORK_ERROR"
        assert not exc_info.value.retryable

    def test_rejects_oversized_body(self, make_response):
        session = MagicMock()
        session.get.return_value = make_response(b"x" * 2048)

        with pytest.raises(FetchError):
            fetch_page(URL, session=session, max_response_size=1024)

    def test_creates_and_closes_own_session(self, make_response):
        session = MagicMock()
        session.get.return_value = make_response(b"<html></html>")

        with patch("recipe_importer.extractors.scraper.create_session",
                   return_value=session) as factory:
            fetch_page(URL)

        factory.assert_called_once_with(DEFAULT_USER_AGENT)
        session.close.assert_called_once()


def test_create_session_identifies_bot():
    session = create_session()

    assert session.headers["User-Agent"] == DEFAULT_USER_AGENT
    assert "text/html" in session.headers["Accept"]
