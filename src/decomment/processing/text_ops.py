"""Text normalization applied after comment stripping.

These helpers are independent of the lexical scanner: the scanner never
touches blank lines, the file processor calls them afterwards.
"""
import re

_BLANK_RUN_RE = re.compile(r'(\r?\n)(?:[ \t]*\r?\n){2,}')


def collapse_blank_lines(text: str) -> str:
    """Collapse runs of three or more newlines down to exactly two.

    Lines holding only spaces or tabs count as part of the run, so an
    indented comment-only line that was emptied collapses too. The newline
    style of the first newline in the run is kept.
    """
    return _BLANK_RUN_RE.sub(lambda m: m.group(1) * 2, text)


def finalize_output(text: str) -> str:
    """Return *text* trimmed, ending with exactly one newline ('' stays '').

    The final newline is '\\r\\n' when the text already uses CRLF.
    """
    body = text.strip()
    if not body:
        return ''
    return body + ('\r\n' if '\r\n' in body else '\n')
