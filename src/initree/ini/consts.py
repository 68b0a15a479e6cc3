# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2026/10/12 21:15:44

from enum import Enum
from re import ASCII
from re import compile as regex

DEFAULT_DELIMITER = ':'
COMMENT_MARK = ';'
QUOTE_CHARS = '\'"'
INT64_MIN, INT64_MAX = -2 ** 63, 2 ** 63 - 1

# `key = value`, at most one blank each side.
SPLIT_PATTERN = regex(r' ?= ?')
HEADER_PATTERN = regex(r'^\[(?P<header>[a-zA-Z][^\]]*)\]$')
ARRAY_KEY_PATTERN = regex(r'^(?P<name>[a-zA-Z]\w*)\[(?P<index>[^\]]+)?\]$')
# opening quote, then escaped chars or anything but that quote.
QUOTED_TEXT_PATTERN = regex(r'^([\'"])((?:\\.|(?!\1)[^\\])*)\1$')
ESCAPED_QUOTE_PATTERN = regex(r'\\([\'"])')
NUMERIC_PATTERN = regex(
    r'^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$', ASCII)


class LineKind(str, Enum):
    BLANK = 'blank'
    COMMENT = 'comment'
    HEADER = 'header'
    PAIR = 'pair'
