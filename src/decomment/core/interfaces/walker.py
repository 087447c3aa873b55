from __future__ import annotations
from pathlib import Path
from typing import Iterator, Protocol, runtime_checkable


@runtime_checkable
class WalkerProtocol(Protocol):
    """Abstract project tree walker."""

    def iter_files(self) -> Iterator[Path]:
        """Yield candidate files under the root, honoring ignore rules."""
        ...
