"""Query model for document ingestion."""

from __future__ import annotations

from pathlib import Path
from typing import Literal
from uuid import UUID

from pydantic import BaseModel


class DocumentQuery(BaseModel):
    """Parsed ingestion source details.

    Contains the classified input and where its results are cached. Processing
    options are handled separately by IngestionOptions.

    Attributes:
        input_text: The original input text provided by the user.
        kind: Whether the source is a remote URL or a local file path.
        url: Normalized URL when kind is "url".
        path: Resolved file path when kind is "path".
        id: Unique identifier for this query (used for caching).
        cache_dir: Directory path for caching this query's results.
    """

    input_text: str
    kind: Literal["url", "path"]
    url: str | None = None
    path: Path | None = None
    id: UUID
    cache_dir: Path

    @property
    def source(self) -> str:
        """Human readable source location."""
        return self.url if self.kind == "url" else str(self.path)
