from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence

from decomment.core.report import RunReport
from decomment.io.file_processor import FileProcessor
from decomment.io.walker import TreeWalker
from decomment.logging.factory import DefaultLoggerFactory
from decomment.logging.helpers import get_logger
from decomment.parsing.parser import _build_parser
from decomment.processing.cleaner_registry import LanguageCleanerRegistry
from decomment.utils.suffixes import normalize_extensions


logger = get_logger('decomment')


def _configure_logging(enable_json: bool) -> None:
    """Configure process-wide logging, either JSON or plain text."""
    factory = DefaultLoggerFactory(json_logs=enable_json)
    global logger
    logger = factory.get_logger('decomment')


def _fatal(msg: str, code: int = 1) -> NoReturn:
    """Exit the process with a logged error."""
    logger.error(msg)
    sys.exit(code)


def _log_banner(ns: argparse.Namespace, root: Path, extensions: set[str], walker: TreeWalker) -> None:
    logger.info('--- decomment ---')
    logger.info('directory: %s', root)
    logger.info('extensions: %s', ', '.join(sorted(extensions)))
    logger.info('excluded directories: %s', ', '.join(ns.exclude_dirs))
    logger.info('excluded files/patterns: %s', ', '.join(ns.exclude_files))
    if walker.gitignore_loaded:
        logger.info('ℹ️  using rules from .gitignore')
    if ns.dry_run:
        logger.warning('⚠️  DRY RUN: files will not be modified')


class Decomment:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str], *, registry: Optional[LanguageCleanerRegistry] = None) -> RunReport:
        """Parse *argv*, process the tree and return the run report."""
        ns = _build_parser().parse_args(list(argv))
        _configure_logging(ns.json_logs or os.getenv('DECOMMENT_JSON_LOGS') == '1')

        root = Path(ns.dir).resolve()
        if not root.is_dir():
            _fatal(f'directory {root} not found')

        extensions = normalize_extensions(ns.extensions)
        walker = TreeWalker(
            root,
            exclude_dirs=ns.exclude_dirs,
            exclude_files=ns.exclude_files,
            use_gitignore=ns.use_gitignore,
            verbose=ns.verbose,
            logger=get_logger('io.walker'),
        )
        processor = FileProcessor(
            allowed_extensions=extensions,
            root=root,
            dry_run=ns.dry_run,
            cleaner_registry=registry,
            logger=get_logger('io.processor'),
        )

        _log_banner(ns, root, extensions, walker)
        report = RunReport(root=str(root), dry_run=ns.dry_run)
        for path in walker.iter_files():
            report.record(processor.process(path))
        report.finish()

        logger.info(
            '✅ done: %d changed, %d unchanged, %d errors',
            report.files_changed,
            report.files_unchanged,
            len(report.errors),
        )
        if ns.dry_run:
            logger.info('ℹ️  no file was modified (--dry-run)')
        if ns.report:
            sys.stdout.write(report.to_json() + '\n')
        return report


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for the `decomment` script and `python -m decomment`."""
    try:
        Decomment.run(sys.argv[1:] if argv is None else argv)
        raise SystemExit(0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
