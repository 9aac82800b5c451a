"""
Shared HTTP client and request gateway for the providers

SharedHTTPClient keeps one lazily created httpx.AsyncClient for the process.
fetch_json performs a single GET, checks the status and decodes JSON,
turning every failure into an ApiError subclass.
"""
import logging
from typing import Any, Optional

import httpx

from cryptoapi.core.config import Settings, settings as default_settings
from cryptoapi.core.errors import DecodeError, RequestError, TransportError

logger = logging.getLogger("HTTPGateway")


def build_async_client(settings: Optional[Settings] = None) -> httpx.AsyncClient:
    settings = settings or default_settings
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.HTTP_TIMEOUT),
        follow_redirects=settings.HTTP_FOLLOW_REDIRECTS,
        transport=httpx.AsyncHTTPTransport(retries=settings.HTTP_RETRIES),
    )


class SharedHTTPClient:

    _client: Optional[httpx.AsyncClient] = None

    @classmethod
    def get_client(cls) -> httpx.AsyncClient:

        if cls._client is None or cls._client.is_closed:
            cls._client = build_async_client()
        return cls._client

    @classmethod
    async def close(cls):

        if cls._client is not None:
            await cls._client.aclose()
            cls._client = None


async def fetch_json(
    url: str,
    operation: str,
    client: Optional[httpx.AsyncClient] = None,
) -> Any:
    """
    GET an absolute URL and return the decoded JSON body unmodified

    Args:
        url: Fully formed request URL
        operation: Human readable operation name used in the failure log
        client: Client to send the request with (shared client by default)

    Raises:
        TransportError: the request could not be completed (incl. redirect loops)
        RequestError: the provider answered with a non-2xx status
        DecodeError: the body cannot be decoded or is not valid JSON
    """
    if client is None:
        client = SharedHTTPClient.get_client()

    try:
        response = await client.get(url)
    except httpx.DecodingError as e:
        # corrupt Content-Encoding body
        logger.error(f"Error {operation}: undecodable body from {url}: {e!r}")
        raise DecodeError(e, url, operation) from e
    except httpx.RequestError as e:
        # network, timeout, protocol and redirect-loop failures
        logger.error(f"Error {operation}: request to {url} failed: {e!r}")
        raise TransportError(e, url, operation) from e

    if not response.is_success:
        logger.error(f"Error {operation}: HTTP error! status: {response.status_code} ({url})")
        raise RequestError(response.status_code, url, operation)

    try:
        return response.json()
    except ValueError as e:
        # json.JSONDecodeError and UnicodeDecodeError are both ValueError
        logger.error(f"Error {operation}: invalid JSON from {url}: {e}")
        raise DecodeError(e, url, operation) from e
