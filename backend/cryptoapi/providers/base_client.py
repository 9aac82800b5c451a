"""
Common HTTP plumbing for the provider clients

Turns an Endpoint plus call arguments into a URL and hands it to the
request gateway.
"""
import logging
from typing import Any, Optional

import httpx

from cryptoapi.providers.endpoints import Endpoint
from cryptoapi.utils.http_client import fetch_json

logger = logging.getLogger("ProviderClient")


class BaseProviderClient:

    def __init__(self, base_url: str, http_client: Optional[httpx.AsyncClient] = None):
        self.base_url = base_url
        # None means the process-wide SharedHTTPClient
        self.http_client = http_client

    async def get(self, endpoint: Endpoint, operation: str, **kwargs) -> Any:
        """
        Request one endpoint

        Args:
            endpoint: Endpoint descriptor
            operation: Name used in the failure log
            **kwargs: path_params / query / enabled, see Endpoint.url
        """
        url = endpoint.url(self.base_url, **kwargs)
        logger.debug(f"{type(self).__name__}: GET {url} ({operation})")
        return await fetch_json(url, operation, client=self.http_client)
