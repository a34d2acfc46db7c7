"""Pydantic models for the API."""

from __future__ import annotations

from enum import Enum
from typing import Union

from pydantic import BaseModel, Field, field_validator

from mdguide.schemas import TocEntry
from server.server_config import MAX_RENDER_INPUT_CHARS


class SectionFilterMode(str, Enum):
    """Enumeration for section filtering modes."""

    INCLUDE = "include"
    EXCLUDE = "exclude"


class RenderRequest(BaseModel):
    """Request model for the /api/render endpoint.

    Attributes
    ----------
    markdown : str
        The Markdown document to parse and re-render.
    include_toc : bool
        Prepend a generated table of contents.
    toc_title : str | None
        Optional bold line shown above the contents list.
    toc_max_level : int
        Deepest heading level listed in the contents.

    """

    markdown: str = Field(..., max_length=MAX_RENDER_INPUT_CHARS, description="Markdown source")
    include_toc: bool = Field(default=True, description="Prepend a table of contents")
    toc_title: str | None = Field(default=None, description="Line shown above the contents list")
    toc_max_level: int = Field(default=6, ge=1, le=6, description="Deepest level listed in the contents")


class RenderResponse(BaseModel):
    """Response model for the /api/render endpoint.

    Attributes
    ----------
    content : str
        Rendered Markdown.
    toc : list[TocEntry]
        One entry per section, in document order.
    anchor_collisions : dict[str, list[int]]
        Anchors shared by more than one section, mapped to section indexes.

    """

    content: str = Field(..., description="Rendered Markdown")
    toc: list[TocEntry] = Field(default_factory=list, description="Table of contents entries")
    anchor_collisions: dict[str, list[int]] = Field(
        default_factory=dict, description="Duplicate anchors and the sections that share them"
    )


class IngestRequest(BaseModel):
    """Request model for the /api/ingest endpoint.

    Attributes
    ----------
    input_text : str
        URL or server-local path of the Markdown document.
    remove_toc : bool
        Remove table of contents from the output.
    toc_title : str | None
        Optional bold line shown above the contents list.
    section_filter_mode : SectionFilterMode
        Section filtering mode (include or exclude).
    sections : list[str]
        Section titles to include or exclude.

    """

    input_text: str = Field(..., description="URL or path to ingest")
    remove_toc: bool = Field(default=False, description="Remove table of contents from output")
    toc_title: str | None = Field(default=None, description="Line shown above the contents list")
    section_filter_mode: SectionFilterMode = Field(
        default=SectionFilterMode.EXCLUDE,
        description="Section filtering mode",
    )
    sections: list[str] = Field(default_factory=list, description="Section titles to include or exclude")

    @field_validator("input_text")
    @classmethod
    def validate_input_text(cls, v: str) -> str:
        """Validate that ``input_text`` is not empty."""
        if not v.strip():
            err = "input_text cannot be empty"
            raise ValueError(err)
        return v.strip()

    @field_validator("sections", mode="before")
    @classmethod
    def normalize_sections(cls, v: str | list[str] | None) -> list[str]:
        """Normalize section inputs from comma-separated strings or lists."""
        if not v:
            return []
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        return [item.strip() for item in v if item.strip()]


class IngestSuccessResponse(BaseModel):
    """Success response model for the /api/ingest endpoint.

    Attributes
    ----------
    title : str | None
        The first level-1 heading of the document.
    source : str
        The URL or path that was ingested.
    summary : str
        Summary of the ingestion including counts and token estimates.
    digest_url : str
        URL to download the full digest content from the local cache.
    tree : str
        Section tree structure of the document.
    content : str
        Rendered Markdown, cropped for display.
    remove_toc : bool
        Whether the table of contents was removed.
    section_filter_mode : str
        Section filtering mode.
    sections : list[str]
        Sections included or excluded.

    """

    title: str | None = Field(default=None, description="Document title")
    source: str = Field(..., description="Ingested URL or path")
    summary: str = Field(..., description="Ingestion summary with token estimates")
    digest_url: str = Field(..., description="URL to download the full digest content")
    tree: str = Field(..., description="Section tree structure")
    content: str = Field(..., description="Rendered Markdown")
    remove_toc: bool = Field(default=False, description="TOC removed")
    section_filter_mode: str = Field(default=SectionFilterMode.EXCLUDE.value, description="Section filter mode")
    sections: list[str] = Field(default_factory=list, description="Sections included or excluded")


class IngestErrorResponse(BaseModel):
    """Error response model for the /api/ingest endpoint.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.

    """

    error: str = Field(..., description="Error message")


# Union type for API responses
IngestResponse = Union[IngestSuccessResponse, IngestErrorResponse]
