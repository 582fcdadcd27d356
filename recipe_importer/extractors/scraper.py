"""
Page fetching for recipe extraction.

This module validates recipe URLs and downloads page markup. It performs no
retries: the import service owns the retry policy.
"""
from __future__ import annotations

import ipaddress
import logging
from urllib.parse import urlparse

import cloudscraper
import requests
from cloudscraper.exceptions import CloudflareException
from urllib3.exceptions import ReadTimeoutError

from ..const import (
    DEFAULT_ACCEPT,
    DEFAULT_MAX_REDIRECTS,
    DEFAULT_MAX_RESPONSE_SIZE,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
)
from ..exceptions import (
    FetchError,
    FetchTimeoutError,
    HostUnreachableError,
    InvalidUrlError,
    PageNotFoundError,
)

_LOGGER = logging.getLogger(__name__)

ALLOWED_CONTENT_TYPES = ("text/html", "application/xhtml", "application/xml", "text/xml")


def validate_url(url: str, allow_private_hosts: bool = False) -> str:
    """Validate a recipe URL and return it stripped of whitespace.

    Args:
        url: The URL to validate
        allow_private_hosts: Permit literal private, loopback and link-local IPs

    Returns:
        The stripped URL

    Raises:
        InvalidUrlError: If the URL is empty, malformed or not HTTP(S)
    """
    if not url or not isinstance(url, str) or not url.strip():
        raise InvalidUrlError("URL is required")

    url = url.strip()
    try:
        parsed = urlparse(url)
        hostname = parsed.hostname
    except ValueError as e:
        raise InvalidUrlError(f"Invalid URL format: {e}") from e

    if parsed.scheme not in ("http", "https"):
        raise InvalidUrlError("URL must use http or https protocol")
    if not parsed.netloc or not hostname:
        raise InvalidUrlError("Invalid URL format")

    if not allow_private_hosts:
        try:
            ip = ipaddress.ip_address(hostname)
        except ValueError:
            ip = None  # Hostname is not an IP
        if ip is not None and (ip.is_private or ip.is_loopback or ip.is_link_local):
            raise InvalidUrlError("Cannot access internal IP addresses")

    return url


def create_session(user_agent: str = DEFAULT_USER_AGENT) -> requests.Session:
    """Create an HTTP session that identifies itself as the recipe bot.

    Uses cloudscraper so pages behind simple anti-bot challenges still load.
    """
    session = cloudscraper.create_scraper(
        browser={
            'browser': 'chrome',
            'platform': 'windows',
            'desktop': True
        }
    )
    session.max_redirects = DEFAULT_MAX_REDIRECTS
    session.headers.update({
        "User-Agent": user_agent,
        "Accept": DEFAULT_ACCEPT,
    })
    return session


def _read_body(response: requests.Response, url: str, max_response_size: int) -> bytes:
    """Download a streamed response body, enforcing the size limit."""
    content_length = response.headers.get('content-length')
    if content_length and content_length.isdigit() and int(content_length) > max_response_size:
        _LOGGER.warning("Response too large for %s: %s bytes",
                        url, content_length)
        raise FetchError(
            f"Response size ({content_length} bytes) exceeds maximum allowed size ({max_response_size} bytes)",
            status_code=response.status_code)

    content = b''
    try:
        for chunk in response.iter_content(chunk_size=8192):
            content += chunk
            if len(content) > max_response_size:
                _LOGGER.warning(
                    "Response exceeded size limit while downloading from %s", url)
                raise FetchError(
                    f"Response size exceeds maximum allowed size ({max_response_size} bytes)",
                    status_code=response.status_code)
    except requests.exceptions.ConnectionError as e:
        # requests re-raises a stalled body read as ConnectionError
        if e.args and isinstance(e.args[0], ReadTimeoutError):
            _LOGGER.warning("Timeout reading body from %s: %s", url, e)
            raise FetchTimeoutError() from e
        raise
    return content


def fetch_page(
    url: str,
    session: requests.Session | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    max_response_size: int = DEFAULT_MAX_RESPONSE_SIZE,
    user_agent: str = DEFAULT_USER_AGENT,
) -> bytes:
    """Fetch raw page markup.

    Args:
        url: An already validated http(s) URL
        session: Session to use; a new recipe-bot session is created if omitted
        timeout: Seconds to wait for the connection and for each read
        max_response_size: Largest body accepted, in bytes
        user_agent: User agent for a newly created session

    Returns:
        Response body as bytes

    Raises:
        FetchTimeoutError: If the request times out
        HostUnreachableError: If the host cannot be resolved or connected to
        PageNotFoundError: If the server answers 404
        FetchError: For other non-2xx statuses, oversized bodies or
            anti-bot challenges that could not be solved
    """
    owns_session = session is None
    if session is None:
        session = create_session(user_agent)

    _LOGGER.debug("Fetching %s (timeout %ss)", url, timeout)
    try:
        with session.get(
            url,
            timeout=timeout,
            allow_redirects=True,
            stream=True,
            headers={"Accept": DEFAULT_ACCEPT},
        ) as response:
            status = response.status_code
            if status == 404:
                raise PageNotFoundError()
            if not 200 <= status < 300:
                raise FetchError(
                    f"Failed to fetch page: HTTP {status}", status_code=status)

            content_type = response.headers.get('content-type', '').lower()
            if content_type and not any(allowed in content_type for allowed in ALLOWED_CONTENT_TYPES):
                _LOGGER.warning(
                    "Unexpected content type for %s: %s, parsing anyway", url, content_type)

            html = _read_body(response, url, max_response_size)
    except CloudflareException as e:
        _LOGGER.warning("Anti-bot challenge blocked %s: %s", url, e)
        raise FetchError(f"Failed to fetch page: {e}") from e
    except requests.exceptions.Timeout as e:
        _LOGGER.warning("Timeout fetching %s: %s", url, e)
        raise FetchTimeoutError() from e
    except requests.exceptions.ConnectionError as e:
        _LOGGER.warning("Could not reach %s: %s", url, e)
        raise HostUnreachableError(f"Website not found: {url}") from e
    except requests.exceptions.RequestException as e:
        _LOGGER.warning("Error fetching %s: %s", url, e)
        raise FetchError(f"Failed to fetch page: {e}") from e
    finally:
        if owns_session:
            session.close()

    _LOGGER.info("Fetched %d bytes from %s", len(html), url)
    return html
