import logging
from typing import Optional

import httpx

from multifetch.core.config import settings
from .base import FetchError

logger = logging.getLogger(__name__)

def build_client(**kwargs) -> httpx.AsyncClient:
    """Client shared by the fetches of one batch. No timeout is enforced."""
    kwargs.setdefault("headers", {"User-Agent": settings.USER_AGENT})
    kwargs.setdefault("timeout", None)
    kwargs.setdefault("follow_redirects", True)
    return httpx.AsyncClient(**kwargs)

async def fetch(url: str, client: Optional[httpx.AsyncClient] = None) -> str:
    """
    GET a URL and return the full response body as text.

    The status code is not inspected: a 404 or 500 body is returned like any
    other. Raises FetchError when the request cannot be sent or the body
    cannot be read completely.
    """
    if client is None:
        async with build_client() as own_client:
            return await _fetch_with(own_client, url)
    return await _fetch_with(client, url)

# idna raises UnicodeError subclasses for malformed hosts such as "xn--.com"
_REQUEST_ERRORS = (httpx.HTTPError, httpx.InvalidURL, UnicodeError)

async def _fetch_with(client: httpx.AsyncClient, url: str) -> str:
    try:
        request = client.build_request("GET", url)
        response = await client.send(request, stream=True)
    except _REQUEST_ERRORS as e:
        raise FetchError(url, f"GET request failed: {_describe(e)}") from e

    try:
        await response.aread()
    except httpx.HTTPError as e:
        raise FetchError(url, f"reading body failed: {_describe(e)}") from e
    finally:
        await response.aclose()

    logger.debug("GET %s -> %s (%d bytes)", url, response.status_code, len(response.content))
    return response.text

def _describe(exc: Exception) -> str:
    # some httpx errors carry an empty message
    return str(exc) or type(exc).__name__
