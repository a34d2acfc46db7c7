"""Format parsed documents into summary, tree, and content outputs."""

from __future__ import annotations

try:
    import tiktoken
except ImportError:  # pragma: no cover - optional dependency
    tiktoken = None

from mdguide.renderer import render_document
from mdguide.schemas import Document, IngestionResult, RenderOptions, SectionNode
from mdguide.sections import build_section_tree, count_sections


def format_document(
    document: Document,
    *,
    source: str | None,
    include_toc: bool,
    toc_title: str | None = None,
) -> IngestionResult:
    """Create summary, section tree, and content."""
    nodes = build_section_tree(document)
    tree = "Sections:\n" + _create_sections_tree(nodes)
    content = render_document(
        document, RenderOptions(include_toc=include_toc, toc_title=toc_title)
    )

    summary_lines = []
    title = document_title(document)
    if title:
        summary_lines.append(f"Title: {title}")
    if source:
        summary_lines.append(f"Source: {source}")
    summary_lines.append(f"Sections: {count_sections(nodes)}")
    summary_lines.append(f"Code blocks: {sum(1 for _ in document.code_blocks())}")
    languages = document.languages()
    if languages:
        summary_lines.append(f"Languages: {', '.join(languages)}")

    token_estimate = _format_token_count(tree + "\n" + content)
    if token_estimate:
        summary_lines.append(f"Estimated tokens: {token_estimate}")

    summary = "\n".join(summary_lines)

    return IngestionResult(summary=summary, sections_tree=tree, content=content)


def document_title(document: Document) -> str | None:
    """Return the first level-1 heading, if any."""
    for section in document.sections:
        if section.level == 1:
            return section.title
    return None


def _create_sections_tree(sections: list[SectionNode], indent: int = 0) -> str:
    lines: list[str] = []
    for section in sections:
        lines.append(" " * (indent * 4) + section.title)
        if section.children:
            lines.append(_create_sections_tree(section.children, indent + 1))
    return "\n".join(lines)


def _format_token_count(text: str) -> str | None:
    if not tiktoken:
        return None
    try:
        encoding = tiktoken.get_encoding("o200k_base")
        total_tokens = len(encoding.encode(text, disallowed_special=()))
    except Exception:
        # Encoding files are downloaded on first use; offline hosts skip the estimate.
        return None

    if total_tokens >= 1_000_000:
        return f"{total_tokens / 1_000_000:.1f}M"
    if total_tokens >= 1_000:
        return f"{total_tokens / 1_000:.1f}k"
    return str(total_tokens)
