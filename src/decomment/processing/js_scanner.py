from __future__ import annotations
"""JS/TS comment stripper.

This utility removes line ('// ...') and block ('/* ... */') comments from
JavaScript-family sources (.js, .jsx, .ts, .tsx, .mjs, .cjs) while keeping
every lexically significant character untouched:

    * single and double quoted strings, with escaping;
    * template literals, treated as one opaque span (including `${...}`);
    * regex literals, detected with a punctuator lookback heuristic;
    * doc comments ('/** ... */'), copied verbatim up to their closer.

Notes:
    - The scanner is a single left-to-right pass over characters, no tokens
      or AST are built. It never raises; unterminated constructs simply keep
      the scanner in their state until end of input.
    - The regex/division decision looks at the nearest preceding
      non-whitespace character of the *source* (comments included). It is a
      heuristic and will misjudge some inputs, e.g. a regex right after ')'.
    - Backticks toggle the template state. A template nested inside an
      interpolation (`a ${`b`} c`) is therefore scanned as several adjacent
      templates; the text survives, but comments between them would be seen
      as code.
"""

from enum import Enum, auto


class ScanState(Enum):
    CODE = auto()
    LINE_COMMENT = auto()
    BLOCK_COMMENT = auto()
    SINGLE_QUOTE_STRING = auto()
    DOUBLE_QUOTE_STRING = auto()
    TEMPLATE_LITERAL = auto()
    REGEX_LITERAL = auto()


# Characters after which an expression is expected, so '/' opens a regex.
REGEX_PRECEDERS = frozenset("(,=:[!&|?{};\n")

_OPENERS = {
    "'": ScanState.SINGLE_QUOTE_STRING,
    '"': ScanState.DOUBLE_QUOTE_STRING,
    "`": ScanState.TEMPLATE_LITERAL,
}

_CLOSERS = {
    ScanState.SINGLE_QUOTE_STRING: "'",
    ScanState.DOUBLE_QUOTE_STRING: '"',
    ScanState.TEMPLATE_LITERAL: "`",
}


def is_doc_comment_start(source: str, i: int) -> bool:
    """Return True if *source* holds a doc-comment opener ('/**') at *i*.

    The degenerate empty block comment '/**/' is not a doc comment.
    """
    return source.startswith("/**", i) and source[i + 3:i + 4] != "/"


def strip_js_comments(source: str) -> str:
    """Strip removable comments from a JS/TS source.

    Args:
        source: Full content of one file. It does not need to be valid code.

    Returns:
        The source with line and block comments removed. The newline that
        ends a line comment is kept, doc comments are kept verbatim and no
        character is ever inserted or reordered.
    """
    out: list[str] = []
    state = ScanState.CODE
    escaped = False
    in_class = False
    last_significant = ""
    i = 0
    n = len(source)

    while i < n:
        ch = source[i]
        nxt = source[i + 1:i + 2]
        step = 1

        if state is ScanState.LINE_COMMENT:
            # Drop everything but the terminating newline.
            if ch == "\n":
                out.append(ch)
                state = ScanState.CODE
            elif ch == "\r" and nxt == "\n":
                out.append("\r\n")
                state = ScanState.CODE
                step = 2

        elif state is ScanState.BLOCK_COMMENT:
            if ch == "*" and nxt == "/":
                state = ScanState.CODE
                step = 2

        elif escaped:
            out.append(ch)
            escaped = False

        elif ch == "\\":
            out.append(ch)
            escaped = True

        elif state is ScanState.CODE:
            if ch == "/" and nxt == "*":
                if is_doc_comment_start(source, i):
                    # Copied verbatim up to and including '*/'; no quote,
                    # comment or regex detection runs inside the body.
                    end = source.find("*/", i + 3)
                    end = n if end == -1 else end + 2
                    out.append(source[i:end])
                    step = end - i
                else:
                    state = ScanState.BLOCK_COMMENT
                    step = 2
            elif ch == "/" and nxt == "/":
                state = ScanState.LINE_COMMENT
                step = 2
            elif ch == "/" and (not last_significant or last_significant in REGEX_PRECEDERS):
                out.append(ch)
                state = ScanState.REGEX_LITERAL
                in_class = False
            else:
                out.append(ch)
                state = _OPENERS.get(ch, ScanState.CODE)

        elif state is ScanState.REGEX_LITERAL:
            out.append(ch)
            if ch == "[":
                in_class = True
            elif ch == "]":
                in_class = False
            elif ch == "/" and not in_class:
                state = ScanState.CODE

        else:
            # Quoted strings and template literals: opaque until the closer.
            out.append(ch)
            if ch == _CLOSERS[state]:
                state = ScanState.CODE

        for k in range(i, min(i + step, n)):
            if not source[k].isspace():
                last_significant = source[k]
        i += step

    return "".join(out)
