"""Anchor generation and table of contents construction."""

from __future__ import annotations

import re
import warnings

from mdguide.exceptions import AnchorCollisionWarning
from mdguide.schemas import Document, Section, TocEntry
from mdguide.utils.logging_config import get_logger

logger = get_logger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


def slugify(title: str) -> str:
    """Turn a section title into a URL-safe anchor.

    The title is lower-cased, whitespace runs become a single hyphen, and any
    character that is not a letter, digit, or hyphen is removed.
    """
    hyphenated = _WHITESPACE_RE.sub("-", title.strip().lower())
    return "".join(char for char in hyphenated if char.isalnum() or char == "-")


def build_toc(document: Document) -> list[TocEntry]:
    """Build one entry per section, in document order.

    Duplicate anchors are kept as-is; each repeat triggers an
    ``AnchorCollisionWarning`` and anchor lookups resolve to the first section.
    """
    entries: list[TocEntry] = []
    first_seen: dict[str, str] = {}
    for section in document.sections:
        anchor = slugify(section.title)
        if anchor in first_seen:
            _report_collision(anchor, first_seen[anchor], section.title)
        else:
            first_seen[anchor] = section.title
        entries.append(TocEntry(title=section.title, level=section.level, anchor=anchor))
    return entries


def find_anchor_collisions(document: Document) -> dict[str, list[int]]:
    """Map each anchor produced by more than one section to those section indexes."""
    positions: dict[str, list[int]] = {}
    for index, section in enumerate(document.sections):
        positions.setdefault(slugify(section.title), []).append(index)
    return {anchor: indexes for anchor, indexes in positions.items() if len(indexes) > 1}


def resolve_anchor(document: Document, anchor: str) -> Section | None:
    """Return the first section whose anchor matches, or None."""
    for section in document.sections:
        if slugify(section.title) == anchor:
            return section
    return None


def _report_collision(anchor: str, first_title: str, duplicate_title: str) -> None:
    logger.info(
        "Duplicate section anchor",
        extra={"anchor": anchor, "first_title": first_title, "duplicate_title": duplicate_title},
    )
    warnings.warn(
        f"Anchor {anchor!r} for section {duplicate_title!r} already used by "
        f"{first_title!r}; links resolve to the first occurrence",
        AnchorCollisionWarning,
        stacklevel=3,
    )
