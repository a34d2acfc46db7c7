"""Parse guide-style Markdown into the document model."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from mdguide.exceptions import ParseError
from mdguide.schemas import Block, CodeBlock, Document, ProseBlock, Section
from mdguide.utils.logging_config import get_logger

logger = get_logger(__name__)

_HEADING_RE = re.compile(r"^(#{1,6})[ \t]+(.+?)(?:[ \t]+#+)?[ \t]*$")
_FENCE_OPEN_RE = re.compile(r"^(`{3,})[ \t]*([^`\s]*)[^`]*$")
_FENCE_CLOSE_RE = re.compile(r"^(`{3,})[ \t]*$")
# Lines the renderer writes between the contents markers.
_TOC_LINE_RE = re.compile(r"^(?:[ ]*- \[.*\]\(#[^)\s]*\)|\*\*.+\*\*)$")

TOC_START_MARKER = "<!-- toc -->"
TOC_END_MARKER = "<!-- tocstop -->"


@dataclass
class _SectionDraft:
    title: str
    level: int
    blocks: list[Block] = field(default_factory=list)

    def freeze(self) -> Section:
        return Section(title=self.title, level=self.level, blocks=tuple(self.blocks))


def parse_document(text: str) -> Document:
    """Parse Markdown text into a Document.

    Headings (``#`` to ``######``) open sections, blank lines separate prose
    blocks, and triple-backtick fences delimit code blocks whose content is kept
    verbatim. A generated table of contents between ``<!-- toc -->`` and
    ``<!-- tocstop -->`` is dropped so rendered output parses back to the same
    document.

    Args:
        text: The raw Markdown text.

    Returns:
        The parsed Document.

    Raises:
        ParseError: If a code fence is still open at the end of the input.
    """
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")

    preamble: list[Block] = []
    drafts: list[_SectionDraft] = []
    prose: list[str] = []

    def current_blocks() -> list[Block]:
        return drafts[-1].blocks if drafts else preamble

    def flush_prose() -> None:
        if prose:
            current_blocks().append(ProseBlock(text="\n".join(prose)))
            prose.clear()

    index = 0
    while index < len(lines):
        line = lines[index]

        if line.strip() == TOC_START_MARKER:
            end = _find_toc_end(lines, index + 1)
            if end is not None:
                flush_prose()
                index = end + 1
                continue

        fence = _FENCE_OPEN_RE.match(line)
        if fence:
            flush_prose()
            block, index = _read_code_block(lines, index, fence)
            current_blocks().append(block)
            continue

        heading = _HEADING_RE.match(line)
        if heading:
            flush_prose()
            drafts.append(
                _SectionDraft(title=heading.group(2).strip(), level=len(heading.group(1)))
            )
        elif line.strip():
            prose.append(line)
        else:
            flush_prose()
        index += 1

    flush_prose()
    document = Document(
        preamble=tuple(preamble), sections=tuple(draft.freeze() for draft in drafts)
    )
    logger.debug(
        "Parsed document",
        extra={"sections": len(document.sections), "lines": len(lines)},
    )
    return document


def _read_code_block(
    lines: list[str], start: int, fence: re.Match[str]
) -> tuple[CodeBlock, int]:
    """Consume a fenced block starting at ``start``; return it and the next line index."""
    fence_length = len(fence.group(1))
    language = fence.group(2)
    content: list[str] = []
    for index in range(start + 1, len(lines)):
        closing = _FENCE_CLOSE_RE.match(lines[index])
        if closing and len(closing.group(1)) >= fence_length:
            return CodeBlock(language=language, content="\n".join(content)), index + 1
        content.append(lines[index])
    raise ParseError(f"Unterminated code fence opened on line {start + 1}")


def _find_toc_end(lines: list[str], start: int) -> int | None:
    """Return the index of the closing marker if only contents lines precede it."""
    for index in range(start, len(lines)):
        line = lines[index]
        if line.strip() == TOC_END_MARKER:
            return index
        if not _TOC_LINE_RE.match(line):
            return None
    return None
