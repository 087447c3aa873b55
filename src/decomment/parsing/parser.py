# decomment/parsing/parser.py
from __future__ import annotations

import argparse

from decomment.constants import DEFAULT_EXCLUDE_DIRS, DEFAULT_EXCLUDE_FILES, DEFAULT_EXTENSIONS


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - List options take one or more values (`--ext js ts`) and replace
          the defaults entirely.
        - Short aliases mirror the historical ones (-d, --ed, --ef, --ext,
          --dr, -v).
    """
    p = argparse.ArgumentParser(
        prog="decomment",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "decomment – strip comments from a project tree\n"
            "Strings, template literals and regex literals are left untouched; "
            "JSDoc-style /** ... */ blocks are kept."
        ),
        epilog="Files are rewritten in place unless --dry-run is given.",
    )

    g_loc = p.add_argument_group("Discovery")
    g_run = p.add_argument_group("Execution")
    g_log = p.add_argument_group("Logging & report")

    # -----------------------
    # Discovery
    # -----------------------
    g_loc.add_argument(
        "-d",
        "--dir",
        metavar="DIR",
        dest="dir",
        default=".",
        help="Root directory to process (default: current directory).",
    )
    g_loc.add_argument(
        "--exclude-dirs",
        "--ed",
        metavar="NAME",
        nargs="+",
        dest="exclude_dirs",
        default=list(DEFAULT_EXCLUDE_DIRS),
        help=(
            "Directory names to skip at any depth.\n"
            f"Default: {' '.join(DEFAULT_EXCLUDE_DIRS)}"
        ),
    )
    g_loc.add_argument(
        "--exclude-files",
        "--ef",
        metavar="GLOB",
        nargs="+",
        dest="exclude_files",
        default=list(DEFAULT_EXCLUDE_FILES),
        help=(
            "File patterns to skip (gitignore syntax).\n"
            f"Default: {' '.join(DEFAULT_EXCLUDE_FILES)}"
        ),
    )
    g_loc.add_argument(
        "--extensions",
        "--ext",
        metavar="EXT",
        nargs="+",
        dest="extensions",
        default=list(DEFAULT_EXTENSIONS),
        help="File extensions to process, with or without the dot.",
    )
    g_loc.add_argument(
        "--no-gitignore",
        action="store_false",
        dest="use_gitignore",
        help="Do not read the root .gitignore.",
    )

    # -----------------------
    # Execution
    # -----------------------
    g_run.add_argument(
        "--dry-run",
        "--dr",
        action="store_true",
        dest="dry_run",
        help="Report the files that would change without writing them.",
    )

    # -----------------------
    # Logging & report
    # -----------------------
    g_log.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        dest="verbose",
        help="Also log every ignored path.",
    )
    g_log.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit logs as JSON lines (also DECOMMENT_JSON_LOGS=1).",
    )
    g_log.add_argument(
        "--report",
        action="store_true",
        dest="report",
        help="Print a JSON run report to stdout when done.",
    )

    return p
