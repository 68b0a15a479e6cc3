# -*- encoding: utf-8 -*-
# @File   : grammar.py
# @Time   : 2026/10/12 21:22:31

"""Line recognizers.

Everything here works on a single line already stripped of
surrounding blanks, and keeps no state between calls.
"""

from .consts import (
    ARRAY_KEY_PATTERN,
    COMMENT_MARK,
    HEADER_PATTERN,
    QUOTE_CHARS,
    QUOTED_TEXT_PATTERN,
    SPLIT_PATTERN,
    LineKind
)


def match_header(line: str) -> str | None:
    """Get the raw section name of `[name]`, not yet split by delimiter."""
    if (m := HEADER_PATTERN.match(line)) is None:
        return None
    return m['header']


def classify(line: str) -> LineKind:
    if not line:
        return LineKind.BLANK
    if line[0] == COMMENT_MARK:
        return LineKind.COMMENT
    if match_header(line) is not None:
        return LineKind.HEADER
    return LineKind.PAIR


def split_pair(line: str) -> tuple[str, str]:
    """`key = value` => `('key', 'value')`.

    A line without `=` is still a key, only with an empty value.
    """
    parts = SPLIT_PATTERN.split(line, maxsplit=1)
    if len(parts) < 2:
        parts.append('')
    return parts[0], parts[1]


def match_array_key(key: str) -> tuple[str, str | None] | None:
    """Recognize `name[]` and `name[index]`.

    Returns:
        - `(name, None)` for the append form,
        - `(name, index)` for the associative form,
        - `None` if `key` is just a plain key.
    """
    if (m := ARRAY_KEY_PATTERN.match(key)) is None:
        return None
    return m['name'], m['index']


def is_quoted(text: str) -> bool:
    return QUOTED_TEXT_PATTERN.match(text) is not None


def opens_quote(text: str) -> bool:
    # a lone quote char opens, anything longer must not close on this line.
    if not text or text[0] not in QUOTE_CHARS:
        return False
    return len(text) == 1 or not closes_quote(text)


def closes_quote(text: str) -> bool:
    return bool(text) and text[-1] in QUOTE_CHARS
