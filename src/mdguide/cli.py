"""Command line interface for mdguide."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from mdguide.exceptions import MdguideError, ParseError
from mdguide.ingestion import IngestionOptions, ingest_document
from mdguide.parser import parse_document
from mdguide.renderer import render_document
from mdguide.schemas import Document, RenderOptions
from mdguide.sections import filter_sections
from mdguide.toc import build_toc, find_anchor_collisions
from mdguide.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        output = args.handler(args)
    except ParseError as exc:
        print(f"parse error: {exc}", file=sys.stderr)
        return 1
    except (MdguideError, OSError, ValueError) as exc:
        logger.error("Command failed", extra={"command": args.command, "error": str(exc)})
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if output is None:
        return 0
    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdguide", description="Parse, index, and re-render Markdown guides."
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: MDGUIDE_LOG_LEVEL)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    render = subparsers.add_parser("render", help="Re-render a document, optionally with a table of contents")
    _add_source_argument(render)
    _add_filter_arguments(render)
    render.add_argument("--no-toc", action="store_true", help="Do not prepend a table of contents")
    render.add_argument("--toc-title", default=None, help="Bold line shown above the contents list")
    render.add_argument("--toc-max-level", type=int, default=6, help="Deepest heading level listed in the contents")
    render.add_argument("--output", "-o", help="Write to this file instead of stdout")
    render.set_defaults(handler=_run_render)

    toc = subparsers.add_parser("toc", help="List sections with their anchors")
    _add_source_argument(toc)
    toc.add_argument("--output", "-o", help="Write to this file instead of stdout")
    toc.set_defaults(handler=_run_toc)

    check = subparsers.add_parser("check", help="Parse only and report problems")
    _add_source_argument(check)
    check.set_defaults(handler=_run_check, output=None)

    ingest = subparsers.add_parser("ingest", help="Fetch or read a document and print summary, tree, and content")
    ingest.add_argument("input_text", help="URL or path of the Markdown document")
    _add_filter_arguments(ingest)
    ingest.add_argument("--no-toc", action="store_true", help="Do not prepend a table of contents")
    ingest.add_argument("--toc-title", default=None, help="Bold line shown above the contents list")
    ingest.add_argument("--no-cache", action="store_true", help="Always refetch remote documents")
    ingest.add_argument("--output", "-o", help="Write to this file instead of stdout")
    ingest.set_defaults(handler=_run_ingest)

    return parser


def _add_source_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("source", help="Markdown file to read, or - for stdin")


def _add_filter_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--include", action="append", default=[], metavar="SECTION", help="Keep only these sections")
    group.add_argument("--exclude", action="append", default=[], metavar="SECTION", help="Drop these sections")


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _load_document(args: argparse.Namespace) -> Document:
    return parse_document(_read_source(args.source))


def _filter(document: Document, args: argparse.Namespace) -> Document:
    if args.include:
        return filter_sections(document, mode="include", selected=args.include)
    return filter_sections(document, mode="exclude", selected=args.exclude)


def _run_render(args: argparse.Namespace) -> str:
    document = _filter(_load_document(args), args)
    options = RenderOptions(
        include_toc=not args.no_toc,
        toc_title=args.toc_title,
        toc_max_level=args.toc_max_level,
    )
    return render_document(document, options)


def _run_toc(args: argparse.Namespace) -> str:
    entries = build_toc(_load_document(args))
    lines = [f"{'  ' * (entry.level - 1)}{entry.title}  #{entry.anchor}" for entry in entries]
    return "\n".join(lines) + "\n" if lines else ""


def _run_check(args: argparse.Namespace) -> None:
    document = _load_document(args)
    collisions = find_anchor_collisions(document)
    for anchor, indexes in collisions.items():
        print(f"duplicate anchor #{anchor} (sections {', '.join(str(i) for i in indexes)})", file=sys.stderr)
    code_blocks = sum(1 for _ in document.code_blocks())
    print(f"ok: {len(document.sections)} sections, {code_blocks} code blocks", file=sys.stderr)


def _run_ingest(args: argparse.Namespace) -> str:
    options = IngestionOptions(
        remove_toc=args.no_toc,
        toc_title=args.toc_title,
        section_filter_mode="include" if args.include else "exclude",
        sections=args.include or args.exclude,
        use_cache=not args.no_cache,
    )
    result, _ = asyncio.run(ingest_document(input_text=args.input_text, options=options))
    return "\n\n".join([result.summary, result.sections_tree, result.content]).rstrip("\n") + "\n"


if __name__ == "__main__":
    raise SystemExit(main())
