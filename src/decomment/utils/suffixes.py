from __future__ import annotations
"""Extension utilities for the `--extensions` filter.

Tokens are accepted with or without the leading dot and in any case:

    normalize_extensions(["js", ".TS", " css "]) -> {".js", ".ts", ".css"}

Matching compares the lower-cased final suffix of a path (`Path.suffix`), so
'app.min.js' has extension '.js'; exclusion of such files is the job of the
ignore patterns, not of this filter.
"""

from pathlib import Path
from typing import Sequence


def normalize_extensions(extensions: Sequence[str] | None) -> set[str]:
    """Normalize extension tokens from the CLI.

    Args:
        extensions: Raw tokens, e.g. ["js", ".ts"]. Empty tokens are dropped.

    Returns:
        A set of lower-cased extensions, each with a leading dot.
    """
    out: set[str] = set()
    for raw in extensions or ():
        s = (raw or "").strip().lower()
        if not s:
            continue
        out.add(s if s.startswith(".") else f".{s}")
    return out


def extension_of(path: Path) -> str:
    return path.suffix.lower()


def is_extension_allowed(path: Path, allowed: set[str]) -> bool:
    """Return True if *path* has one of the *allowed* extensions."""
    return extension_of(path) in allowed
