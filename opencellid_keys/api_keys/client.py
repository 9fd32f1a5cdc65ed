"""
HTTP client for the OpenCelliD key generator endpoint.
"""

import logging
from typing import Optional

import httpx

from ..exceptions import KeyRequestError

logger = logging.getLogger(__name__)


class KeyGeneratorClient:
    """
    Requests freshly generated API keys from the server.

    One plain GET per call: no body, no auth headers, no retries.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None
    ):
        """
        Initialize key generator client.

        Args:
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.timeout = timeout
        self._transport = transport
        self._http_client: Optional[httpx.Client] = None

    def _get_http_client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.Client(
                timeout=self.timeout,
                transport=self._transport,
                follow_redirects=True,
            )
        return self._http_client

    def close(self) -> None:
        """Close HTTP client."""
        if self._http_client:
            self._http_client.close()
            self._http_client = None

    def __enter__(self) -> "KeyGeneratorClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def request_key(self, url: str) -> str:
        """
        Ask the server to generate a new API key.

        Args:
            url: Full key generator URL

        Returns:
            Response body decoded as text

        Raises:
            KeyRequestError: On any non-200 status or transport failure
        """
        client = self._get_http_client()
        logger.debug(f"Connecting to {url} for a new API key...")

        try:
            response = client.get(url)
            if response.status_code != 200:
                raise KeyRequestError(
                    f"Returned {response.status_code} {response.reason_phrase}",
                    status_code=response.status_code,
                    reason_phrase=response.reason_phrase,
                )
            # .text reads the whole body before decoding
            return response.text

        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise KeyRequestError(f"Key generator request to {url} failed: {e}") from e
