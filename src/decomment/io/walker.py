from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

import pathspec

from decomment.constants import GITIGNORE_NAME
from decomment.core.interfaces import WalkerProtocol
from decomment.logging.helpers import get_logger


def build_ignore_spec(
    exclude_dirs: Sequence[str],
    exclude_files: Sequence[str],
    gitignore_lines: Sequence[str] = (),
) -> pathspec.GitIgnoreSpec:
    """Compile directory names, file globs and .gitignore lines into one spec."""
    lines: List[str] = [f'{d.rstrip("/")}/' for d in exclude_dirs if d]
    lines.extend(p for p in exclude_files if p)
    lines.extend(gitignore_lines)
    return pathspec.GitIgnoreSpec.from_lines(lines)


class TreeWalker(WalkerProtocol):
    """Recursive walker over a project root honoring gitignore-style rules.

    Paths are matched relative to *root*, in POSIX form; directories are
    matched with a trailing '/' so 'node_modules/' style rules apply.
    """

    def __init__(
        self,
        root: Path,
        *,
        exclude_dirs: Sequence[str] = (),
        exclude_files: Sequence[str] = (),
        use_gitignore: bool = True,
        verbose: bool = False,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._root = Path(root)
        self._exclude_dir_names = {d.rstrip('/') for d in exclude_dirs if d}
        self._verbose = verbose
        self._log = logger or get_logger('io.walker')
        self.gitignore_loaded = False
        gitignore_lines = self._load_gitignore() if use_gitignore else []
        self._spec = build_ignore_spec(exclude_dirs, exclude_files, gitignore_lines)

    @property
    def root(self) -> Path:
        return self._root

    def _load_gitignore(self) -> List[str]:
        path = self._root / GITIGNORE_NAME
        try:
            text = path.read_text(encoding='utf-8')
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError) as exc:
            self._log.warning('⚠  cannot read %s: %s', path, exc)
            return []
        self.gitignore_loaded = True
        return text.splitlines()

    def _relative(self, path: Path) -> str:
        return path.relative_to(self._root).as_posix()

    def _report_ignored(self, rel: str, reason: str) -> None:
        level = logging.INFO if self._verbose else logging.DEBUG
        self._log.log(level, '-- ignored (%s): %s', reason, rel)

    def is_ignored(self, rel: str, *, is_dir: bool = False) -> bool:
        return self._spec.match_file(f'{rel}/' if is_dir else rel)

    def _on_walk_error(self, exc: OSError) -> None:
        where = exc.filename or self._root
        if isinstance(exc, PermissionError):
            self._log.warning('⚠  no access to directory: %s', where)
        else:
            self._log.error('❌ cannot read directory %s: %s', where, exc)

    def iter_files(self) -> Iterator[Path]:
        for dirpath, dirnames, filenames in os.walk(self._root, onerror=self._on_walk_error):
            current = Path(dirpath)
            kept: List[str] = []
            for d in sorted(dirnames):
                rel = self._relative(current / d)
                if self.is_ignored(rel, is_dir=True):
                    self._report_ignored(f'{rel}/', 'rule')
                elif d in self._exclude_dir_names:
                    # Excluded names win over gitignore negations.
                    self._report_ignored(f'{rel}/', 'default')
                else:
                    kept.append(d)
            dirnames[:] = kept

            for fn in sorted(filenames):
                fp = current / fn
                rel = self._relative(fp)
                if self.is_ignored(rel):
                    self._report_ignored(rel, 'rule')
                    continue
                yield fp
