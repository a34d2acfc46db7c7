"""Process an ingest request by classifying input and generating a summary."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from mdguide.ingestion import IngestionOptions, ingest_query
from mdguide.query_parser import parse_source_input
from mdguide.utils.logging_config import get_logger
from server.models import IngestErrorResponse, IngestResponse, IngestSuccessResponse
from server.server_config import LOCAL_INGEST_ROOT, MAX_DISPLAY_SIZE

logger = get_logger(__name__)

if TYPE_CHECKING:
    from mdguide.schemas.query import DocumentQuery

DIGEST_FILENAME = "digest.txt"


def _store_digest_content(
    query: "DocumentQuery",
    digest_content: str,
) -> None:
    """Store digest content locally under the query's cache directory.

    Parameters
    ----------
    query : DocumentQuery
        The query object holding the cache directory.
    digest_content : str
        The complete digest content to store.

    """
    query.cache_dir.mkdir(parents=True, exist_ok=True)
    local_txt_file = query.cache_dir / DIGEST_FILENAME
    with local_txt_file.open("w", encoding="utf-8") as f:
        f.write(digest_content)


def _is_allowed_local_path(query: "DocumentQuery") -> bool:
    """Local files are served only from inside LOCAL_INGEST_ROOT."""
    if LOCAL_INGEST_ROOT is None or query.path is None:
        return False
    return query.path.resolve().is_relative_to(LOCAL_INGEST_ROOT)


def _generate_digest_url(query: "DocumentQuery") -> str:
    return f"/api/download/file/{query.id}"


async def process_query(
    input_text: str,
    *,
    remove_toc: bool = False,
    toc_title: str | None = None,
    section_filter_mode: str = "exclude",
    sections: list[str] | None = None,
) -> IngestResponse:
    """Ingest a Markdown guide and return a summary response."""
    try:
        query = parse_source_input(input_text)
    except ValueError as exc:
        logger.warning("Failed to parse ingest input", extra={"input_text": input_text, "error": str(exc)})
        return IngestErrorResponse(error=str(exc))

    if query.kind == "path" and not _is_allowed_local_path(query):
        logger.warning("Rejected local path", extra={"input_text": input_text})
        return IngestErrorResponse(error="Local paths are not accepted by this server")

    options = IngestionOptions(
        remove_toc=remove_toc,
        toc_title=toc_title,
        section_filter_mode="include" if section_filter_mode == "include" else "exclude",
        sections=sections or [],
    )

    try:
        result, metadata = await ingest_query(query, options=options)
        summary = result.summary
        tree = result.sections_tree
        content = result.content
        _store_digest_content(query, tree + "\n" + content)
    except Exception as exc:
        _print_error(query.source, exc, section_filter_mode, options.sections)
        return IngestErrorResponse(error=f"{exc!s}")

    if len(content) > MAX_DISPLAY_SIZE:
        content = (
            f"(Content cropped to {int(MAX_DISPLAY_SIZE / 1_000)}k characters, "
            "download full ingest to see more)\n" + content[:MAX_DISPLAY_SIZE]
        )

    _print_success(query.source, section_filter_mode, options.sections, summary)

    return IngestSuccessResponse(
        title=cast("str | None", metadata.get("title")),
        source=query.source,
        summary=summary,
        digest_url=_generate_digest_url(query),
        tree=tree,
        content=content,
        remove_toc=remove_toc,
        section_filter_mode=section_filter_mode,
        sections=options.sections,
    )


def _print_error(source: str, exc: Exception, section_filter_mode: str, sections: list[str]) -> None:
    """Log a failed ingestion.

    Parameters
    ----------
    source : str
        The URL or path that was being ingested.
    exc : Exception
        The exception raised during ingestion.
    section_filter_mode : str
        Either "include" or "exclude".
    sections : list[str]
        Section titles that were being filtered.

    """
    logger.error(
        "Query processing failed",
        extra={
            "source": source,
            "section_filter_mode": section_filter_mode,
            "sections": sections,
            "error": str(exc),
        },
    )


def _print_success(source: str, section_filter_mode: str, sections: list[str], summary: str) -> None:
    estimated_tokens = None
    token_marker = "Estimated tokens:"
    if token_marker in summary:
        estimated_tokens = summary.split(token_marker, 1)[1].strip().splitlines()[0].strip()
    logger.info(
        "Query processing completed successfully",
        extra={
            "source": source,
            "section_filter_mode": section_filter_mode,
            "sections": sections,
            "estimated_tokens": estimated_tokens,
        },
    )
