"""HTTP utilities for fetching documents with retry logic."""

from __future__ import annotations

import asyncio
from typing import Final

import httpx

from mdguide.config import (
    MDGUIDE_FETCH_BACKOFF_S,
    MDGUIDE_FETCH_MAX_RETRIES,
    MDGUIDE_FETCH_TIMEOUT_S,
    MDGUIDE_USER_AGENT,
)
from mdguide.exceptions import FetchError, RateLimitError
from mdguide.utils.logging_config import get_logger

logger = get_logger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


async def fetch_with_retries(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    on_404: type[Exception] | None = None,
    on_404_message: str | None = None,
) -> str:
    """GET a document, backing off on 429 and 5xx responses.

    A 404 is raised immediately as ``on_404`` (FetchError by default). Pass
    ``client`` to reuse an existing httpx client; otherwise one is opened with
    the configured timeout, user agent, and redirect limit.

    Raises:
        RateLimitError: If the host kept answering 429 until retries ran out.
        FetchError (or custom on_404 exception): If the fetch fails after all
            retries or returns 404.
    """
    timeout = httpx.Timeout(MDGUIDE_FETCH_TIMEOUT_S)
    headers = {"User-Agent": MDGUIDE_USER_AGENT}
    last_exc: Exception | None = None
    not_found_exc_class = on_404 or FetchError

    async def do_fetch(http_client: httpx.AsyncClient) -> str:
        nonlocal last_exc

        for attempt in range(MDGUIDE_FETCH_MAX_RETRIES + 1):
            try:
                response = await http_client.get(url)

                if response.status_code == 404:
                    message = on_404_message or f"Resource not found at {url}"
                    raise not_found_exc_class(message)

                if response.status_code == 429:
                    last_exc = RateLimitError(f"HTTP 429 from {url}")
                elif response.status_code in RETRY_STATUS_CODES:
                    last_exc = FetchError(f"HTTP {response.status_code} from {url}")
                else:
                    response.raise_for_status()
                    return response.text
            except (httpx.RequestError, httpx.HTTPStatusError) as exc:
                last_exc = exc

            if attempt < MDGUIDE_FETCH_MAX_RETRIES:
                backoff = MDGUIDE_FETCH_BACKOFF_S * (2**attempt)
                logger.debug(
                    "Retrying fetch",
                    extra={"url": url, "attempt": attempt + 1, "backoff_s": backoff},
                )
                await asyncio.sleep(backoff)

        if isinstance(last_exc, RateLimitError):
            raise last_exc
        raise FetchError(f"Failed to fetch {url}: {last_exc}")

    if client is not None:
        return await do_fetch(client)

    async with httpx.AsyncClient(
        timeout=timeout,
        headers=headers,
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    ) as new_client:
        return await do_fetch(new_client)
