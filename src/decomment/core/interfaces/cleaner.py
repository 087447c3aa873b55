from __future__ import annotations
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class CleanerProtocol(Protocol):
    """Stateless comment cleaner for one language family."""

    def strip(self, source: str, *, filename: Optional[str] = None) -> str:
        """Return *source* without its removable comments."""
        ...
