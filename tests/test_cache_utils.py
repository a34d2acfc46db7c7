"""Tests for cache utilities module."""

from __future__ import annotations

import os
import time
from datetime import datetime, timezone
from pathlib import Path

import pytest

from mdguide.cache_utils import (
    cache_dir_for,
    is_cache_fresh,
    mkdir_async,
    read_text_async,
    write_text_async,
)


class TestIsCacheFresh:
    """Tests for is_cache_fresh function."""

    def test_returns_false_when_path_missing(self, tmp_path: Path) -> None:
        """Returns False when file does not exist."""
        path = tmp_path / "nonexistent"
        assert not is_cache_fresh(path, ttl_seconds=86400)

    def test_returns_true_when_file_is_new(self, tmp_path: Path) -> None:
        """Returns True when file is within TTL."""
        path = tmp_path / "cache_file"
        path.write_text("test content")

        assert is_cache_fresh(path, ttl_seconds=86400)

    def test_returns_false_when_file_is_old(self, tmp_path: Path) -> None:
        """Returns False when file is older than TTL."""
        path = tmp_path / "cache_file"
        path.write_text("test content")

        # Set mtime to be very old
        old_time = time.time() - 100000
        os.utime(path, (old_time, old_time))

        assert not is_cache_fresh(path, ttl_seconds=1)

    def test_returns_true_when_ttl_is_zero(self, tmp_path: Path) -> None:
        """Returns True when TTL is 0 (cache forever)."""
        path = tmp_path / "cache_file"
        path.write_text("test content")

        # Set mtime to be very old
        old_time = time.time() - 100000
        os.utime(path, (old_time, old_time))

        assert is_cache_fresh(path, ttl_seconds=0)

    def test_returns_true_when_ttl_is_negative(self, tmp_path: Path) -> None:
        """Returns True when TTL is negative (cache forever)."""
        path = tmp_path / "cache_file"
        path.write_text("test content")

        # Set mtime to be very old
        old_time = time.time() - 100000
        os.utime(path, (old_time, old_time))

        assert is_cache_fresh(path, ttl_seconds=-1)


class TestCacheDirFor:
    """Tests for cache_dir_for function."""

    def test_prefixes_host(self, tmp_path: Path) -> None:
        """Directory name starts with the URL host."""
        result = cache_dir_for("https://example.com/guide.md", tmp_path)
        assert result.parent == tmp_path
        assert result.name.startswith("example.com__")

    def test_is_stable(self, tmp_path: Path) -> None:
        """The same URL always maps to the same directory."""
        url = "https://example.com/guide.md"
        assert cache_dir_for(url, tmp_path) == cache_dir_for(url, tmp_path)

    def test_different_paths_do_not_share(self, tmp_path: Path) -> None:
        """Two documents on one host get separate directories."""
        first = cache_dir_for("https://example.com/a.md", tmp_path)
        second = cache_dir_for("https://example.com/b.md", tmp_path)
        assert first != second

    def test_port_is_not_in_name(self, tmp_path: Path) -> None:
        """Only the hostname is used, so no colon appears."""
        result = cache_dir_for("http://localhost:8080/guide.md", tmp_path)
        assert ":" not in result.name
        assert result.name.startswith("localhost__")


class TestReadTextAsync:
    """Tests for read_text_async function."""

    @pytest.mark.asyncio
    async def test_reads_text_content(self, tmp_path: Path) -> None:
        """Reads text content from file."""
        path = tmp_path / "test.txt"
        path.write_text("Hello, World!", encoding="utf-8")

        result = await read_text_async(path)

        assert result == "Hello, World!"

    @pytest.mark.asyncio
    async def test_respects_encoding(self, tmp_path: Path) -> None:
        """Respects specified encoding."""
        path = tmp_path / "test.txt"
        content = "Cafe"
        path.write_text(content, encoding="latin-1")

        result = await read_text_async(path, encoding="latin-1")

        assert result == content


class TestWriteTextAsync:
    """Tests for write_text_async function."""

    @pytest.mark.asyncio
    async def test_writes_text_content(self, tmp_path: Path) -> None:
        """Writes text content to file."""
        path = tmp_path / "test.txt"

        await write_text_async(path, "Hello, World!")

        assert path.read_text(encoding="utf-8") == "Hello, World!"

    @pytest.mark.asyncio
    async def test_respects_encoding(self, tmp_path: Path) -> None:
        """Respects specified encoding."""
        path = tmp_path / "test.txt"

        await write_text_async(path, "Cafe", encoding="latin-1")

        assert path.read_text(encoding="latin-1") == "Cafe"


class TestMkdirAsync:
    """Tests for mkdir_async function."""

    @pytest.mark.asyncio
    async def test_creates_directory(self, tmp_path: Path) -> None:
        """Creates a new directory."""
        path = tmp_path / "new_dir"

        await mkdir_async(path)

        assert path.exists()
        assert path.is_dir()

    @pytest.mark.asyncio
    async def test_creates_parent_directories(self, tmp_path: Path) -> None:
        """Creates parent directories when parents=True."""
        path = tmp_path / "a" / "b" / "c"

        await mkdir_async(path, parents=True)

        assert path.exists()
        assert path.is_dir()

    @pytest.mark.asyncio
    async def test_raises_when_parents_not_exist(self, tmp_path: Path) -> None:
        """Raises when parents don't exist and parents=False."""
        path = tmp_path / "a" / "b" / "c"

        with pytest.raises(FileNotFoundError):
            await mkdir_async(path)

    @pytest.mark.asyncio
    async def test_exists_ok_ignores_existing(self, tmp_path: Path) -> None:
        """Does not raise when directory exists and exist_ok=True."""
        path = tmp_path / "existing"
        path.mkdir()

        # Should not raise
        await mkdir_async(path, exist_ok=True)

        assert path.exists()

    @pytest.mark.asyncio
    async def test_raises_when_exists_and_not_ok(self, tmp_path: Path) -> None:
        """Raises when directory exists and exist_ok=False."""
        path = tmp_path / "existing"
        path.mkdir()

        with pytest.raises(FileExistsError):
            await mkdir_async(path)
