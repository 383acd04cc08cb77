"""HTTPS retrieval of the simplestreams catalog."""

import logging

import httpx

from simplestream.core.errors import FetchError

logger = logging.getLogger(__name__)


class HttpDocumentSource:
    """Fetch the catalog over HTTPS with certificate verification.

    Implements the ``DocumentSource`` protocol. Failures are not retried.
    """

    def __init__(self, url: str, timeout: float = 30.0, transport: httpx.BaseTransport | None = None) -> None:
        self._url = url
        self._timeout = timeout
        self._transport = transport

    def fetch(self) -> str:
        logger.info("Fetching %s", self._url)
        try:
            with httpx.Client(follow_redirects=True, timeout=self._timeout, transport=self._transport) as client:
                response = client.get(self._url)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(self._url, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise FetchError(self._url, str(e) or type(e).__name__) from e
        logger.debug("Fetched %d bytes from %s", len(response.content), self._url)
        return response.text
