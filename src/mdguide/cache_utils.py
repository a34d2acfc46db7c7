"""On-disk cache helpers for fetched documents."""

from __future__ import annotations

import asyncio
import hashlib
from datetime import datetime, timezone
from pathlib import Path
from urllib.parse import urlsplit


def is_cache_fresh(path: Path, ttl_seconds: int) -> bool:
    """Return True if ``path`` exists and is younger than ``ttl_seconds``.

    A non-positive TTL keeps cached documents forever.
    """
    if not path.exists():
        return False
    if ttl_seconds <= 0:
        return True
    mtime = datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)
    age_seconds = (datetime.now(timezone.utc) - mtime).total_seconds()
    return age_seconds <= ttl_seconds


def cache_dir_for(url: str, base_path: Path) -> Path:
    """Return ``base_path/<host>__<sha256 prefix of url>`` for a remote document."""
    host = urlsplit(url).hostname or "local"
    digest = hashlib.sha256(url.encode("utf-8")).hexdigest()[:16]
    key = f"{host}__{digest}".replace("/", "_").replace(":", "_")
    return base_path / key


async def read_text_async(path: Path, encoding: str = "utf-8") -> str:
    """Read a cached document without blocking the event loop."""
    return await asyncio.to_thread(path.read_text, encoding=encoding)


async def write_text_async(path: Path, content: str, encoding: str = "utf-8") -> None:
    await asyncio.to_thread(path.write_text, content, encoding=encoding)


async def mkdir_async(
    path: Path, parents: bool = False, exist_ok: bool = False
) -> None:
    await asyncio.to_thread(path.mkdir, parents=parents, exist_ok=exist_ok)
