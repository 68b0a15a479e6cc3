import pytest

from initree.ini.consts import LineKind
from initree.ini.grammar import (
    classify,
    closes_quote,
    is_quoted,
    match_array_key,
    match_header,
    opens_quote,
    split_pair
)


def test_inline_semicolon_is_not_a_comment() -> None:
    assert classify('key = value ; not a comment') is LineKind.PAIR


def test_classify() -> None:
    assert classify('') is LineKind.BLANK
    assert classify('; hi') is LineKind.COMMENT
    assert classify('[section]') is LineKind.HEADER
    assert classify('key = value') is LineKind.PAIR
    # headers must start with a letter.
    assert classify('[1section]') is LineKind.PAIR


def test_match_header_keeps_name_verbatim() -> None:
    assert match_header('[section:sub]') == 'section:sub'
    assert match_header('[a b-c.d]') == 'a b-c.d'
    assert match_header('[s]') == 's'
    assert match_header('[]') is None
    assert match_header('[section] trailing') is None


@pytest.mark.parametrize(('line', 'expected'), [
    ('key = value', ('key', 'value')),
    ('key=value', ('key', 'value')),
    ('key =value', ('key', 'value')),
    ('key = a = b', ('key', 'a = b')),
    ('key', ('key', '')),
    ('key  =  value', ('key ', ' value')),
])
def test_split_pair(line: str, expected: tuple[str, str]) -> None:
    assert split_pair(line) == expected


def test_match_array_key() -> None:
    assert match_array_key('items[]') == ('items', None)
    assert match_array_key('items[k1]') == ('items', 'k1')
    assert match_array_key('items[a b.c]') == ('items', 'a b.c')
    assert match_array_key('items') is None
    assert match_array_key('1items[]') is None
    assert match_array_key('it-ems[]') is None


def test_quote_recognizers() -> None:
    assert is_quoted("'quoted text'")
    assert is_quoted('"quoted\\"text"')
    assert is_quoted('""')
    assert not is_quoted('"mixed\'')
    assert not is_quoted("'a'b'")
    assert not is_quoted("'escaped at end\\'")

    assert opens_quote('"quoted')
    assert opens_quote('"')
    assert not opens_quote('"closed"')
    assert not opens_quote('plain')

    assert closes_quote('text"')
    assert closes_quote("text'")
    assert not closes_quote('text')
    assert not closes_quote('')
