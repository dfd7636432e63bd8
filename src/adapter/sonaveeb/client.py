"""HTTP client for the Sõnaveeb website (www.sonaveeb.ee).

Fetches raw HTML only; parsing lives in ``adapter.sonaveeb.parser``.
Transient network failures are retried here so callers never have to.
"""

import logging
from urllib.parse import quote

import httpx
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from utils.settings import API_TIMEOUT_SECONDS, SONAVEEB_BASE_URL

logger = logging.getLogger(__name__)

# Search in all datasets, all languages
SEARCH_PATH = "/search/unif/dlall/dsall/{word}/1"
WORD_DETAILS_PATH = "/worddetails/unif/{word_id}"


class SonaVeebClient:
    """Low-level Sõnaveeb site client.

    Methods return the page HTML, or None when the site answers 404.
    Other HTTP errors are raised as ``httpx.HTTPError``.
    """

    def __init__(
        self,
        base_url: str = SONAVEEB_BASE_URL,
        timeout: float = API_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def search(self, word: str) -> str | None:
        """Fetch the search result page for ``word``."""
        path = SEARCH_PATH.format(word=quote(word, safe=""))
        return await self._get_html(path, extra={"word": word})

    async def word_details(self, word_id: str) -> str | None:
        """Fetch the details fragment (meanings, morphology) of one homonym."""
        path = WORD_DETAILS_PATH.format(word_id=quote(word_id, safe=""))
        return await self._get_html(path, extra={"wordId": word_id})

    async def _get_html(self, path: str, extra: dict) -> str | None:
        url = f"{self.base_url}{path}"
        async with httpx.AsyncClient(
            timeout=self.timeout,
            transport=self._transport,
            follow_redirects=True,
        ) as client:
            response = await _fetch_with_retry(client, url)

        if response.status_code == 404:
            logger.debug("Sõnaveeb page not found", extra={**extra, "url": url})
            return None

        response.raise_for_status()
        logger.debug(
            "Sõnaveeb page fetched",
            extra={**extra, "url": url, "bytes": len(response.content)},
        )
        return response.text


@retry(
    retry=retry_if_exception_type((httpx.TimeoutException, httpx.ConnectError)),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=4),
    reraise=True,
)
async def _fetch_with_retry(client: httpx.AsyncClient, url: str) -> httpx.Response:
    """Fetch URL with automatic retry on transient failures."""
    return await client.get(url)
