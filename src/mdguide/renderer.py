"""Serialize the document model back to Markdown."""

from __future__ import annotations

import re

from mdguide.parser import TOC_END_MARKER, TOC_START_MARKER
from mdguide.schemas import Block, CodeBlock, Document, RenderOptions, Section, TocEntry
from mdguide.toc import build_toc

_BACKTICK_RUN_RE = re.compile(r"`+")
_TRAILING_HASHES_RE = re.compile(r"[ \t]#+$")
_MIN_FENCE_LENGTH = 3


def render_document(document: Document, options: RenderOptions | None = None) -> str:
    """Render a Document as Markdown.

    Parsing the output with ``parse_document`` yields the same Document, whether
    or not the table of contents is included.

    Args:
        document: The document to render.
        options: Rendering options. Uses defaults (table of contents on) if None.

    Returns:
        Markdown text ending in a single newline, or an empty string when there
        is nothing to render.
    """
    opts = options or RenderOptions()
    blocks: list[str] = []

    if opts.include_toc:
        toc = render_toc(build_toc(document), title=opts.toc_title, max_level=opts.toc_max_level)
        if toc:
            blocks.append(toc)

    blocks.extend(_render_block(block) for block in document.preamble)
    for section in document.sections:
        blocks.extend(_render_section(section))

    content = "\n\n".join(block for block in blocks if block)
    return content + "\n" if content else ""


def render_toc(entries: list[TocEntry], *, title: str | None = None, max_level: int = 6) -> str:
    """Render ToC entries as a marker-delimited bullet list of anchor links."""
    listed = [entry for entry in entries if entry.level <= max_level]
    if not listed:
        return ""

    base_level = min(entry.level for entry in listed)
    lines = [TOC_START_MARKER]
    if title:
        lines.append(f"**{title}**")
    for entry in listed:
        indent = "  " * (entry.level - base_level)
        lines.append(f"{indent}- [{entry.title}](#{entry.anchor})")
    lines.append(TOC_END_MARKER)
    return "\n".join(lines)


def _render_section(section: Section) -> list[str]:
    marker = "#" * section.level
    heading = f"{marker} {section.title}"
    if _TRAILING_HASHES_RE.search(section.title):
        # A title ending in hashes needs an explicit closing sequence.
        heading = f"{heading} {marker}"
    blocks = [heading]
    blocks.extend(_render_block(block) for block in section.blocks)
    return blocks


def _render_block(block: Block) -> str:
    if isinstance(block, CodeBlock):
        fence = _fence_for(block.content)
        if not block.content:
            return f"{fence}{block.language}\n{fence}"
        return f"{fence}{block.language}\n{block.content}\n{fence}"
    return block.text


def _fence_for(content: str) -> str:
    longest = max((len(run) for run in _BACKTICK_RUN_RE.findall(content)), default=0)
    return "`" * max(_MIN_FENCE_LENGTH, longest + 1)
