"""Path helpers for on-disk application state."""

import os
import tempfile
from pathlib import Path


def temp_dir() -> Path:
    """Return the system temporary directory as a Path."""
    return Path(tempfile.gettempdir())


def cache_dir(name: str) -> Path:
    """
    Return the directory used for a named disk cache.

    ``TRAVEL_CONSOLE_CACHE_DIR`` overrides the root; otherwise caches live
    under the system temp directory.

    Args:
        name: Cache name, used as the leaf directory.
    """
    root = os.getenv("TRAVEL_CONSOLE_CACHE_DIR")
    base = Path(root) if root else temp_dir() / "travel_console"
    return base / name
