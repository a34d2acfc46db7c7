"""Table of contents models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TocEntry(BaseModel):
    """A derived table of contents entry for one section."""

    model_config = ConfigDict(frozen=True)

    title: str
    level: int = Field(..., ge=1, le=6)
    anchor: str
