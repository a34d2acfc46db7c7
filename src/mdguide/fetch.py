"""Fetch and cache remote Markdown documents."""

from __future__ import annotations

from mdguide.cache_utils import (
    cache_dir_for,
    is_cache_fresh,
    mkdir_async,
    read_text_async,
    write_text_async,
)
from mdguide.config import (
    MDGUIDE_CACHE_PATH,
    MDGUIDE_CACHE_TTL_SECONDS,
    MDGUIDE_MAX_DOCUMENT_BYTES,
)
from mdguide.exceptions import DocumentNotFoundError, DocumentTooLargeError
from mdguide.http_utils import fetch_with_retries
from mdguide.utils.logging_config import get_logger

logger = get_logger(__name__)

_CACHE_FILENAME = "document.md"


async def fetch_document_text(url: str, *, use_cache: bool = True) -> str:
    """Fetch a Markdown document and cache it locally.

    Args:
        url: URL of the raw Markdown document.
        use_cache: Whether to use a cached copy if it is still fresh.

    Returns:
        The document text.

    Raises:
        DocumentNotFoundError: If the URL returns 404.
        DocumentTooLargeError: If the body exceeds the configured size limit.
        FetchError: If a network error occurs after retries.
    """
    cache_dir = cache_dir_for(url, MDGUIDE_CACHE_PATH)
    cached_path = cache_dir / _CACHE_FILENAME

    if use_cache and is_cache_fresh(cached_path, MDGUIDE_CACHE_TTL_SECONDS):
        logger.debug("Using cached document", extra={"url": url, "path": str(cached_path)})
        return await read_text_async(cached_path)

    text = await fetch_with_retries(
        url,
        on_404=DocumentNotFoundError,
        on_404_message=f"No document found at {url}",
    )
    check_document_size(text, source=url)

    await mkdir_async(cache_dir, parents=True, exist_ok=True)
    await write_text_async(cached_path, text)
    return text


def check_document_size(text: str, *, source: str) -> None:
    """Raise DocumentTooLargeError when text exceeds the configured limit."""
    size = len(text.encode("utf-8"))
    if size > MDGUIDE_MAX_DOCUMENT_BYTES:
        raise DocumentTooLargeError(
            f"{source} is {size} bytes; the limit is {MDGUIDE_MAX_DOCUMENT_BYTES} bytes"
        )
