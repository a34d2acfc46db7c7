"""Shared schemas for mdguide."""

from mdguide.schemas.document import Block, CodeBlock, Document, ProseBlock, Section
from mdguide.schemas.ingestion import IngestionResult
from mdguide.schemas.query import DocumentQuery
from mdguide.schemas.render import RenderOptions
from mdguide.schemas.sections import SectionNode
from mdguide.schemas.toc import TocEntry

__all__ = [
    "Block",
    "CodeBlock",
    "Document",
    "DocumentQuery",
    "IngestionResult",
    "ProseBlock",
    "RenderOptions",
    "Section",
    "SectionNode",
    "TocEntry",
]
