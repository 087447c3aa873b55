from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Optional

# Outcome of processing one file.
FileStatus = Literal['skipped', 'unchanged', 'changed', 'written', 'error']


@dataclass(frozen=True)
class FileOutcome:
    path: Path
    status: FileStatus
    message: Optional[str] = None

    @property
    def modified(self) -> bool:
        """True when comments were (or, in a dry run, would be) removed."""
        return self.status in ('changed', 'written')


@dataclass(frozen=True)
class TransformResult:
    content: str
    changed: bool
