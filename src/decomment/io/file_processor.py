from __future__ import annotations
"""Per-file driver around the comment cleaners.

`transform` is the pure part (extension + content in, content + changed
flag out); `process` adds reading, dry-run reporting and writing. I/O
errors never propagate: they are logged and returned as an 'error' outcome
so one bad file does not abort the run.
"""
import logging
import os
from pathlib import Path
from typing import Optional

from decomment.core.models import FileOutcome, TransformResult
from decomment.logging.helpers import get_logger
from decomment.processing.cleaner_registry import LanguageCleanerRegistry
from decomment.processing.text_ops import collapse_blank_lines, finalize_output
from decomment.utils.suffixes import extension_of, is_extension_allowed


def _read_text(path: Path) -> str:
    # newline='' keeps '\r\n' as-is.
    with open(path, encoding='utf-8', newline='') as fh:
        return fh.read()


def _write_text(path: Path, text: str) -> None:
    with open(path, 'w', encoding='utf-8', newline='') as fh:
        fh.write(text)


def _context(rel: str, status: str) -> dict:
    # Surfaces as "ctx" in JSON logs.
    return {"context": {"path": rel, "status": status}}


class FileProcessor:
    def __init__(
        self,
        *,
        allowed_extensions: set[str],
        root: Optional[Path] = None,
        dry_run: bool = False,
        cleaner_registry: Optional[LanguageCleanerRegistry] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._allowed = set(allowed_extensions)
        self._root = root
        self._dry_run = dry_run
        self._cleaners = cleaner_registry or LanguageCleanerRegistry.default()
        self._log = logger or get_logger('io.processor')

    def _display(self, path: Path) -> str:
        if self._root is None:
            return str(path)
        return os.path.relpath(path, self._root)

    def transform(self, extension: str, raw: str, *, filename: Optional[str] = None) -> TransformResult:
        """Strip comments from *raw* using the cleaner bound to *extension*.

        Unknown extensions are returned unchanged. Blank-line runs left by
        removed comments are collapsed afterwards.
        """
        cleaner = self._cleaners.for_suffix(extension)
        if cleaner is None:
            return TransformResult(content=raw, changed=False)
        content = collapse_blank_lines(cleaner.strip(raw, filename=filename))
        return TransformResult(content=content, changed=content != raw)

    def process(self, path: Path) -> FileOutcome:
        ext = extension_of(path)
        if not is_extension_allowed(path, self._allowed):
            return FileOutcome(path, 'skipped')

        rel = self._display(path)
        try:
            raw = _read_text(path)
        except IsADirectoryError:
            return FileOutcome(path, 'skipped')
        except PermissionError:
            self._log.warning('⚠  no access to file: %s', rel, extra=_context(rel, 'error'))
            return FileOutcome(path, 'error', 'permission denied')
        except FileNotFoundError:
            self._log.warning('⚠  file not found (removed during the run?): %s', rel, extra=_context(rel, 'error'))
            return FileOutcome(path, 'error', 'file not found')
        except (OSError, UnicodeDecodeError) as exc:
            self._log.error('❌ cannot process %s: %s', rel, exc, extra=_context(rel, 'error'))
            return FileOutcome(path, 'error', str(exc))

        result = self.transform(ext, raw, filename=str(path))
        if not result.changed:
            return FileOutcome(path, 'unchanged')

        if self._dry_run:
            self._log.info('[DRY RUN] 🧹 comments would be removed from: %s', rel, extra=_context(rel, 'changed'))
            return FileOutcome(path, 'changed')

        try:
            _write_text(path, finalize_output(result.content))
        except OSError as exc:
            self._log.error('❌ cannot write %s: %s', rel, exc, extra=_context(rel, 'error'))
            return FileOutcome(path, 'error', f'write failed: {exc}')
        self._log.info('🧹 comments removed from: %s', rel, extra=_context(rel, 'written'))
        return FileOutcome(path, 'written')
