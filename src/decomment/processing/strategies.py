"""
strategies – Per-language comment stripping strategies for decomment.

Each strategy is a pure ``str -> str`` function without shared state. The
JS family goes through the lexical scanner (js_scanner); every other
language uses a small regex pass:

  • css      – /* ... */ blocks                 (CSS, SCSS, Less)
  • html     – <!-- ... --> blocks              (HTML, XML, Vue, Svelte, Markdown)
  • hash     – '#' up to end of line            (Python, Ruby, YAML)
  • c_style  – '//' up to end of line, then /* ... */  (Java, C#, Go, Swift, Kotlin)
  • php      – c_style followed by hash
  • passthrough – no change                     (JSON has no comments)

The regex strategies are not string-aware: a '#' or '//' inside a literal
is treated as a comment.
"""

import re
from typing import Callable, Dict, Optional, Pattern

from decomment.processing.js_scanner import strip_js_comments

Strategy = Callable[[str], str]

_BLOCK_COMMENT_RE: Pattern[str] = re.compile(r"/\*[\s\S]*?\*/")
_HTML_COMMENT_RE: Pattern[str] = re.compile(r"<!--[\s\S]*?-->")
_HASH_COMMENT_RE: Pattern[str] = re.compile(r"#[^\r\n]*")
_LINE_COMMENT_RE: Pattern[str] = re.compile(r"//[^\r\n]*")


def strip_css_comments(source: str) -> str:
    return _BLOCK_COMMENT_RE.sub("", source)


def strip_html_comments(source: str) -> str:
    return _HTML_COMMENT_RE.sub("", source)


def strip_hash_comments(source: str) -> str:
    return _HASH_COMMENT_RE.sub("", source)


def strip_c_style_comments(source: str) -> str:
    """Remove '//' line comments first, then '/* ... */' blocks."""
    return _BLOCK_COMMENT_RE.sub("", _LINE_COMMENT_RE.sub("", source))


def strip_php_comments(source: str) -> str:
    return strip_hash_comments(strip_c_style_comments(source))


def passthrough(source: str) -> str:
    return source


STRATEGIES: Dict[str, Strategy] = {
    "js": strip_js_comments,
    "css": strip_css_comments,
    "html": strip_html_comments,
    "hash": strip_hash_comments,
    "c_style": strip_c_style_comments,
    "php": strip_php_comments,
    "passthrough": passthrough,
}

EXTENSION_STRATEGIES: Dict[str, str] = {
    ".js": "js",
    ".jsx": "js",
    ".ts": "js",
    ".tsx": "js",
    ".mjs": "js",
    ".cjs": "js",

    ".css": "css",
    ".scss": "css",
    ".less": "css",

    ".html": "html",
    ".vue": "html",
    ".svelte": "html",
    ".xml": "html",
    ".svg": "html",
    ".md": "html",

    ".py": "hash",
    ".rb": "hash",
    ".yml": "hash",
    ".yaml": "hash",

    ".java": "c_style",
    ".cs": "c_style",
    ".go": "c_style",
    ".swift": "c_style",
    ".kt": "c_style",

    ".php": "php",

    ".json": "passthrough",
}


def strategy_for_extension(extension: str) -> Optional[Strategy]:
    """Return the strategy bound to *extension* (case-insensitive), or None."""
    name = EXTENSION_STRATEGIES.get((extension or "").lower())
    return STRATEGIES[name] if name else None
