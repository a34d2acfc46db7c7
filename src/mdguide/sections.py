"""Section filtering and tree utilities."""

from __future__ import annotations

import re
from typing import Iterable

from mdguide.schemas import Document, SectionNode
from mdguide.toc import slugify


def normalize_section_title(title: str) -> str:
    """Normalize section titles for comparison."""
    title = title.strip().lower()
    title = re.sub(r"^(?:\d+(?:\.\d+)*\.?|[a-z]\.)\s+", "", title)
    return re.sub(r"\s+", " ", title)


def filter_sections(
    document: Document,
    *,
    mode: str = "exclude",
    selected: Iterable[str] | None = None,
) -> Document:
    """Filter sections by title using include or exclude mode.

    Subsections follow their parent: excluding a section drops everything nested
    under it, and including a section keeps its subsections together with the
    ancestors needed to reach it.
    """
    if mode not in {"include", "exclude"}:
        raise ValueError(f"Unknown section filter mode: {mode!r}")

    selected_titles = {normalize_section_title(title) for title in (selected or []) if title.strip()}
    if not selected_titles:
        return document

    keep: set[int] = set()
    # (level, index, inside a selected subtree)
    stack: list[tuple[int, int, bool]] = []
    for index, section in enumerate(document.sections):
        while stack and stack[-1][0] >= section.level:
            stack.pop()
        inherited = bool(stack) and stack[-1][2]
        hit = inherited or normalize_section_title(section.title) in selected_titles
        stack.append((section.level, index, hit))

        if mode == "exclude":
            if not hit:
                keep.add(index)
        elif hit:
            keep.update(position for _, position, _ in stack)

    sections = tuple(section for index, section in enumerate(document.sections) if index in keep)
    return document.model_copy(update={"sections": sections})


def build_section_tree(document: Document) -> list[SectionNode]:
    """Nest the flat section list by heading level."""
    roots: list[SectionNode] = []
    stack: list[SectionNode] = []

    for index, section in enumerate(document.sections):
        node = SectionNode(
            title=section.title,
            level=section.level,
            anchor=slugify(section.title),
            index=index,
        )

        while stack and stack[-1].level >= section.level:
            stack.pop()

        if stack:
            stack[-1].children.append(node)
        else:
            roots.append(node)

        stack.append(node)

    return roots


def count_sections(sections: Iterable[SectionNode]) -> int:
    """Count total sections in the tree."""
    total = 0
    for section in sections:
        total += 1
        total += count_sections(section.children)
    return total
