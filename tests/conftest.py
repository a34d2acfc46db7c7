"""Test setup for mdguide."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running integration tests selectively:
        pytest -m integration       # run only integration tests
        pytest -m "not integration" # skip integration tests
    """
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (spawn the CLI in a subprocess)",
    )


@pytest.fixture(autouse=True)
def offline_token_estimate() -> Iterator[None]:
    """Keep tiktoken from downloading encodings during tests."""
    with patch("mdguide.output_formatter.tiktoken", None):
        yield
