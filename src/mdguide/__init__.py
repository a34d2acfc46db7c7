"""mdguide: parse, index, and re-render Markdown guides."""

from mdguide.exceptions import (
    AnchorCollisionWarning,
    DocumentNotFoundError,
    DocumentTooLargeError,
    FetchError,
    MdguideError,
    ParseError,
    RateLimitError,
)
from mdguide.ingestion import IngestionOptions, ingest_document
from mdguide.parser import parse_document
from mdguide.renderer import render_document
from mdguide.schemas import (
    CodeBlock,
    Document,
    IngestionResult,
    ProseBlock,
    RenderOptions,
    Section,
    TocEntry,
)
from mdguide.toc import build_toc, resolve_anchor, slugify

__all__ = [
    "AnchorCollisionWarning",
    "CodeBlock",
    "Document",
    "DocumentNotFoundError",
    "DocumentTooLargeError",
    "FetchError",
    "IngestionOptions",
    "IngestionResult",
    "MdguideError",
    "ParseError",
    "ProseBlock",
    "RateLimitError",
    "RenderOptions",
    "Section",
    "TocEntry",
    "build_toc",
    "ingest_document",
    "parse_document",
    "render_document",
    "resolve_anchor",
    "slugify",
]
