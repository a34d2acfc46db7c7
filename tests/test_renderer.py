"""Tests for rendering documents back to Markdown."""

from __future__ import annotations

import pytest

from mdguide.parser import parse_document
from mdguide.renderer import render_document, render_toc
from mdguide.schemas import CodeBlock, Document, ProseBlock, RenderOptions, Section, TocEntry
from mdguide.toc import build_toc

GUIDE = """\
Intro before any heading.

# Python for Newcomers

Python is dynamically typed.
Names are bound, not declared.

## Lists

```python
items = [1, 2, 3]
items.append(4)
```

## The GIL

Only one thread runs bytecode at a time.

### Workarounds

```
multiprocessing
```
"""

NO_TOC = RenderOptions(include_toc=False)


class TestRenderDocument:
    """Tests for render_document function."""

    def test_without_toc_reproduces_normalized_input(self) -> None:
        """Rendering without contents gives back the authored text."""
        assert render_document(parse_document(GUIDE), NO_TOC) == GUIDE

    def test_default_includes_toc(self) -> None:
        """The contents block is on by default and lists every section."""
        output = render_document(parse_document(GUIDE))

        assert output.startswith(
            "<!-- toc -->\n"
            "- [Python for Newcomers](#python-for-newcomers)\n"
            "  - [Lists](#lists)\n"
            "  - [The GIL](#the-gil)\n"
            "    - [Workarounds](#workarounds)\n"
            "<!-- tocstop -->\n\n"
            "Intro before any heading.\n"
        )

    @pytest.mark.parametrize("include_toc", [True, False])
    def test_round_trip(self, include_toc: bool) -> None:
        """Parsing rendered output yields the same document."""
        document = parse_document(GUIDE)
        rendered = render_document(document, RenderOptions(include_toc=include_toc))

        assert parse_document(rendered) == document

    def test_render_is_stable(self) -> None:
        """Rendering twice through a parse gives identical bytes."""
        once = render_document(parse_document(GUIDE))
        twice = render_document(parse_document(once))

        assert once == twice

    def test_cosmetic_whitespace_is_normalized(self) -> None:
        """Extra blank lines collapse to a single separator."""
        messy = "# A\n\n\n\ntext\n\n\n```sh\nls\n```\n\n\n# B\n"

        assert render_document(parse_document(messy), NO_TOC) == "# A\n\ntext\n\n```sh\nls\n```\n\n# B\n"

    def test_empty_document(self) -> None:
        """Nothing to render gives an empty string."""
        assert render_document(Document()) == ""
        assert render_document(Document(), NO_TOC) == ""

    def test_fence_grows_past_inner_backticks(self) -> None:
        """Content with a backtick run gets a longer fence."""
        document = Document(
            sections=(Section(title="Fences", level=1, blocks=(CodeBlock(language="md", content="```\nx\n```"),)),)
        )

        output = render_document(document, NO_TOC)

        assert output == "# Fences\n\n````md\n```\nx\n```\n````\n"
        assert parse_document(output) == document

    def test_empty_code_block_round_trips(self) -> None:
        """A code block without content survives rendering."""
        document = Document(preamble=(CodeBlock(language="text"),))

        assert parse_document(render_document(document)) == document

    @pytest.mark.parametrize("heading", ["# C # #", "## Issue #", "### Sharps ## ###", "# #"])
    def test_titles_ending_in_hashes_round_trip(self, heading: str) -> None:
        """Trailing hashes that belong to the title survive a round-trip."""
        document = parse_document(heading + "\n")

        for include_toc in (True, False):
            rendered = render_document(document, RenderOptions(include_toc=include_toc))
            assert parse_document(rendered) == document

    def test_title_ending_in_hash_gets_closing_sequence(self) -> None:
        """The renderer closes a heading whose title ends in hashes."""
        document = Document(sections=(Section(title="C #", level=1),))

        assert render_document(document, NO_TOC) == "# C # #\n"

    def test_toc_title(self) -> None:
        """The contents title is a bold line inside the markers."""
        document = Document(sections=(Section(title="A", level=1),))

        output = render_document(document, RenderOptions(toc_title="Contents"))

        assert output == "<!-- toc -->\n**Contents**\n- [A](#a)\n<!-- tocstop -->\n\n# A\n"

    def test_toc_max_level_hides_deep_entries(self) -> None:
        """Deep sections are left out of the contents but still rendered."""
        document = parse_document("# A\n## B\n### C\n")

        output = render_document(document, RenderOptions(toc_max_level=2))

        assert "[C](#c)" not in output
        assert "### C" in output
        assert parse_document(output) == document

    def test_duplicate_titles_link_to_same_anchor(self) -> None:
        """Duplicate sections share an anchor in the contents."""
        document = parse_document("# Setup\n# Setup\n")

        with pytest.warns(UserWarning):
            output = render_document(document)

        assert output.count("(#setup)") == 2


class TestRenderToc:
    """Tests for render_toc function."""

    def test_indents_relative_to_shallowest_level(self) -> None:
        """A document starting at level 2 has unindented top entries."""
        entries = [TocEntry(title="B", level=2, anchor="b"), TocEntry(title="C", level=3, anchor="c")]

        assert render_toc(entries) == "<!-- toc -->\n- [B](#b)\n  - [C](#c)\n<!-- tocstop -->"

    def test_empty_entries(self) -> None:
        """No entries render to nothing."""
        assert render_toc([]) == ""

    def test_matches_build_toc_count(self) -> None:
        """One bullet per section."""
        document = parse_document(GUIDE)
        bullets = [line for line in render_toc(build_toc(document)).splitlines() if line.lstrip().startswith("- [")]

        assert len(bullets) == len(document.sections)


def test_prose_with_markdown_links_is_kept() -> None:
    document = Document(sections=(Section(title="Links", level=2, blocks=(ProseBlock(text="See [docs](https://docs.python.org)."),)),))

    assert render_document(document, NO_TOC) == "## Links\n\nSee [docs](https://docs.python.org).\n"
