"""Rendering options."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RenderOptions(BaseModel):
    """Options controlling how a document is serialized back to Markdown.

    Attributes:
        include_toc: Prepend a generated table of contents.
        toc_title: Optional bold line placed above the contents list.
        toc_max_level: Deepest section level listed in the contents block.
    """

    model_config = ConfigDict(frozen=True)

    include_toc: bool = True
    toc_title: str | None = None
    toc_max_level: int = Field(default=6, ge=1, le=6)
