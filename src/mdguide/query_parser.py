"""Classify ingestion input as a remote URL or a local file."""

from __future__ import annotations

import uuid
from pathlib import Path
from urllib.parse import urlsplit

from mdguide.config import MDGUIDE_CACHE_PATH
from mdguide.schemas import DocumentQuery

_ALLOWED_SCHEMES = {"http", "https"}


def parse_source_input(input_text: str) -> DocumentQuery:
    """Parse user input into a DocumentQuery.

    Args:
        input_text: A ``http(s)`` URL or a filesystem path to a Markdown file.

    Returns:
        The classified query with a fresh id and cache directory.

    Raises:
        ValueError: If the input is empty, uses an unsupported scheme, or
            embeds credentials in the URL.
    """
    text = input_text.strip()
    if not text:
        raise ValueError("Input cannot be empty")

    query_id = uuid.uuid4()
    cache_dir = MDGUIDE_CACHE_PATH / str(query_id)

    if "://" in text:
        return DocumentQuery(
            input_text=input_text,
            kind="url",
            url=_normalize_url(text),
            id=query_id,
            cache_dir=cache_dir,
        )

    return DocumentQuery(
        input_text=input_text,
        kind="path",
        path=Path(text).expanduser().resolve(),
        id=query_id,
        cache_dir=cache_dir,
    )


def _normalize_url(text: str) -> str:
    parts = urlsplit(text)
    if parts.scheme.lower() not in _ALLOWED_SCHEMES:
        raise ValueError(f"Unsupported URL scheme: {parts.scheme!r}")
    if parts.username or parts.password:
        raise ValueError("URLs with credentials are not allowed")
    if not parts.hostname:
        raise ValueError(f"URL has no host: {text!r}")
    return parts._replace(scheme=parts.scheme.lower(), fragment="").geturl()
