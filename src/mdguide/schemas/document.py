"""Document, section, and block models."""

from __future__ import annotations

from typing import Annotated, Iterator, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class ProseBlock(BaseModel):
    """Free text between headings and code fences."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["prose"] = "prose"
    text: str


class CodeBlock(BaseModel):
    """A fenced code sample. The content is kept verbatim and never executed."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["code"] = "code"
    language: str = ""
    content: str = ""


Block = Annotated[Union[ProseBlock, CodeBlock], Field(discriminator="kind")]


class Section(BaseModel):
    """A titled, leveled subdivision of a document."""

    model_config = ConfigDict(frozen=True)

    title: str
    level: int = Field(..., ge=1, le=6)
    blocks: tuple[Block, ...] = ()


class Document(BaseModel):
    """Parsed representation of a Markdown guide.

    Attributes:
        preamble: Blocks that appear before the first heading.
        sections: Sections in authored order.
    """

    model_config = ConfigDict(frozen=True)

    preamble: tuple[Block, ...] = ()
    sections: tuple[Section, ...] = ()

    def code_blocks(self) -> Iterator[tuple[Section | None, CodeBlock]]:
        """Yield every code block with its owning section (None for the preamble)."""
        for block in self.preamble:
            if isinstance(block, CodeBlock):
                yield None, block
        for section in self.sections:
            for block in section.blocks:
                if isinstance(block, CodeBlock):
                    yield section, block

    def languages(self) -> list[str]:
        """Return distinct, non-empty code languages in first-seen order."""
        seen: list[str] = []
        for _, block in self.code_blocks():
            if block.language and block.language not in seen:
                seen.append(block.language)
        return seen
