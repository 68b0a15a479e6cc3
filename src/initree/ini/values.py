# -*- encoding: utf-8 -*-
# @File   : values.py
# @Time   : 2026/10/12 22:03:56

"""Turns raw value tokens into python values.

Checked in order:
1. fully quoted text, i.e. `'abc'` or `"a\\"bc"` => `str`
2. an unclosed quote => `str` across the following lines
3. numbers => `float` if dotted, else `int`
4. `true` / `false` in any case => `bool`
5. anything else => the token itself
"""

from decimal import Decimal

from ..abstract import LineSupplier
from .consts import (
    ESCAPED_QUOTE_PATTERN,
    INT64_MAX,
    INT64_MIN,
    NUMERIC_PATTERN,
    QUOTED_TEXT_PATTERN
)
from .errors import InvalidIniRecord
from .grammar import closes_quote, is_quoted, opens_quote

type IniValue = (
    str | int | float | bool | list[IniValue] | dict[str, IniValue])


def unquote(text: str) -> str:
    """`'quoted\\'text'` => `quoted'text`."""
    m = QUOTED_TEXT_PATTERN.match(text)
    if m is None:
        raise ValueError(f'not a quoted text: {text}')
    return ESCAPED_QUOTE_PATTERN.sub(r'\1', m[2])


def coerce_number(text: str) -> int | float | None:
    token = text.strip()
    if not NUMERIC_PATTERN.match(token):
        return None
    if '.' in token:
        return float(token)
    # `1e3` has no dot, yet `int()` refuses it.
    exact = Decimal(token)
    if exact.is_zero() or exact.adjusted() < 0:
        return 0
    # beyond 64 bits the token stays text.
    if exact.adjusted() > 18:
        return None
    num = int(exact)
    if not INT64_MIN <= num <= INT64_MAX:
        return None
    return num


def coerce_bool(text: str) -> bool | None:
    match text.lower():
        case 'true':
            return True
        case 'false':
            return False
        case _:
            return None


def read_multiline(seed: str, lines: LineSupplier) -> str:
    """Consume `lines` until one of them ends with a quote char.

    Every line which does not close keeps its own trailing `\\n`
    before all fragments get joined with `\\n`.

    Raises:
        InvalidIniRecord: `lines` ran out before the quote closed.
    """
    fragments = [seed] if seed else []
    while lines.next():
        line = lines.current
        if closes_quote(line):
            fragments.append(line[:-1])
            return '\n'.join(fragments)
        fragments.append(f'{line}\n')
    raise InvalidIniRecord('Unterminated quoted value.')


def coerce_value(text: str, lines: LineSupplier) -> IniValue:
    """Convert a raw value token.

    `lines` is only touched when `text` opens a multiline value.
    """
    if is_quoted(text):
        return unquote(text)
    if opens_quote(text):
        return read_multiline(text[1:], lines)
    if (num := coerce_number(text)) is not None:
        return num
    if (flag := coerce_bool(text)) is not None:
        return flag
    return text
