"""Ingestion pipeline for Markdown guides."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Literal

from mdguide.fetch import check_document_size, fetch_document_text
from mdguide.output_formatter import document_title, format_document
from mdguide.parser import parse_document
from mdguide.query_parser import parse_source_input
from mdguide.schemas import DocumentQuery, IngestionResult
from mdguide.sections import filter_sections
from mdguide.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class IngestionOptions:
    """Options for document ingestion.

    Attributes:
        remove_toc: If True, exclude table of contents from output.
        toc_title: Optional heading line placed above the contents list.
        section_filter_mode: Mode for section filtering ("include" or "exclude").
        sections: List of section titles to include or exclude.
        use_cache: Whether fetched documents may be served from the local cache.
    """

    remove_toc: bool = False
    toc_title: str | None = None
    section_filter_mode: Literal["include", "exclude"] = "exclude"
    sections: list[str] = field(default_factory=list)
    use_cache: bool = True


async def ingest_document(
    *,
    input_text: str,
    options: IngestionOptions | None = None,
) -> tuple[IngestionResult, dict[str, str | int | list[str] | None]]:
    """Load, parse, filter, and re-render a Markdown guide.

    Args:
        input_text: A URL or local path to the Markdown document.
        options: Processing options for ingestion. Uses defaults if None.

    Returns:
        Tuple of (result, metadata) where metadata includes the title, source,
        section count, and code languages.

    Raises:
        ValueError: If the input cannot be classified.
        FetchError: If a remote document cannot be fetched.
        ParseError: If the document has an unterminated code fence.
    """
    query = parse_source_input(input_text)
    return await ingest_query(query, options=options)


async def ingest_query(
    query: DocumentQuery,
    *,
    options: IngestionOptions | None = None,
) -> tuple[IngestionResult, dict[str, str | int | list[str] | None]]:
    """Run ingestion for an already classified query."""
    opts = options or IngestionOptions()
    text = await load_source_text(query, use_cache=opts.use_cache)

    document = parse_document(text)
    filtered = filter_sections(document, mode=opts.section_filter_mode, selected=opts.sections)

    result = format_document(
        filtered,
        source=query.source,
        include_toc=not opts.remove_toc,
        toc_title=opts.toc_title,
    )

    metadata: dict[str, str | int | list[str] | None] = {
        "title": document_title(document),
        "source": query.source,
        "kind": query.kind,
        "sections": len(filtered.sections),
        "languages": filtered.languages(),
    }
    logger.info(
        "Ingested document",
        extra={"source": query.source, "sections": len(filtered.sections)},
    )
    return result, metadata


async def load_source_text(query: DocumentQuery, *, use_cache: bool = True) -> str:
    """Read the raw Markdown for a query from the network or disk.

    Raises:
        FileNotFoundError: If a local path does not point to a file.
    """
    if query.kind == "url":
        return await fetch_document_text(query.url or "", use_cache=use_cache)

    path = query.path
    if path is None or not path.is_file():
        raise FileNotFoundError(f"Markdown file not found: {query.input_text}")
    text = await asyncio.to_thread(path.read_text, encoding="utf-8")
    check_document_size(text, source=str(path))
    return text
