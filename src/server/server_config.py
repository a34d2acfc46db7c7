"""Server configuration."""

from __future__ import annotations

import os
from pathlib import Path

MAX_DISPLAY_SIZE = int(os.getenv("MDGUIDE_MAX_DISPLAY_SIZE", "300000"))
MAX_RENDER_INPUT_CHARS = int(os.getenv("MDGUIDE_MAX_RENDER_INPUT_CHARS", str(2 * 1024 * 1024)))

# Directory that local paths sent to /api/ingest must stay inside. Unset disables local paths.
_local_root = os.getenv("MDGUIDE_LOCAL_INGEST_ROOT")
LOCAL_INGEST_ROOT = Path(_local_root).expanduser().resolve() if _local_root else None
