from __future__ import annotations

"""
Run report for one decomment invocation.

Counters are filled by the CLI from the FileOutcome of every file the walker
yields; `to_json` is what `--report` prints.
"""

import json
import time
from dataclasses import dataclass, field
from typing import List

from decomment.core.models import FileOutcome


@dataclass
class RunReport:
    started_at: float = field(default_factory=time.perf_counter)
    finished_at: float | None = None
    duration_s: float | None = None

    root: str = ''
    dry_run: bool = False

    files_seen: int = 0
    files_skipped: int = 0
    files_unchanged: int = 0
    files_changed: int = 0
    files_written: int = 0

    changed_paths: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    def record(self, outcome: FileOutcome) -> None:
        self.files_seen += 1
        if outcome.status == 'skipped':
            self.files_skipped += 1
        elif outcome.status == 'unchanged':
            self.files_unchanged += 1
        elif outcome.status == 'error':
            self.add_error(f'{outcome.path}: {outcome.message or "unknown error"}')
        else:
            self.files_changed += 1
            self.changed_paths.append(str(outcome.path))
            if outcome.status == 'written':
                self.files_written += 1

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def finish(self) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = (
            self.finished_at - self.started_at if self.finished_at else None
        )

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(
            {
                "root": self.root,
                "dry_run": self.dry_run,
                "duration_s": self.duration_s,
                "files_seen": self.files_seen,
                "files_skipped": self.files_skipped,
                "files_unchanged": self.files_unchanged,
                "files_changed": self.files_changed,
                "files_written": self.files_written,
                "changed_paths": self.changed_paths,
                "errors": self.errors,
            },
            indent=indent,
            ensure_ascii=False,
        )
