# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/12 22:41:10

"""
Section accumulator, section tree helpers and the parsed document.
"""

import logging
from collections.abc import Mapping, MutableMapping
from copy import deepcopy
from typing import Iterator, Sequence
from warnings import warn

from .grammar import match_array_key
from .values import IniValue

logger = logging.getLogger(__name__)


class SectionValues(MutableMapping[str, IniValue]):
    """... is a dict, just maintaining pairs of ONE section, within `[]`.

    `self['key[]'] = v` appends `v` to the list `self['key']`,
    while `self['key[id]'] = v` sets `self['key']['id']`.
    Any other key simply gets overwritten, last write wins.
    """
    def __init__(self) -> None:
        self.__raw: dict[str, IniValue] = {}

    def __setitem__(self, key: str, value: IniValue) -> None:
        key = key.strip()
        if (array_key := match_array_key(key)) is None:
            self.__raw[key] = value
            return

        name, index = array_key
        if index is None:
            self.__container(name, list).append(value)
        else:
            self.__container(name, dict)[index] = value

    def __container(self, name: str, kind: type) -> list | dict:
        current = self.__raw.get(name)
        if isinstance(current, kind):
            return current
        if name in self.__raw:
            warn(f'"{name}" was {type(current).__name__} '
                 f'and now gets replaced by a {kind.__name__}.')
        self.__raw[name] = kind()
        return self.__raw[name]

    def __getitem__(self, key: str) -> IniValue:
        return self.__raw[key]

    def __delitem__(self, key: str) -> None:
        del self.__raw[key]

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __repr__(self) -> str:
        return self.__raw.__repr__()

    def to_dict(self) -> dict[str, IniValue]:
        """The underlying dict itself, NOT a copy."""
        return self.__raw


def wrap_section(
    path: Sequence[str], values: dict[str, IniValue]
) -> dict[str, IniValue]:
    """`('a', 'b'), {'k': 1}` => `{'a': {'b': {'k': 1}}}`.

    A single segment still wraps once.
    """
    tree = values
    for segment in reversed(path):
        tree = {segment: tree}
    return tree


def merge_deep(
    document: dict[str, IniValue], incoming: dict[str, IniValue]
) -> dict[str, IniValue]:
    """Merge `incoming` into `document` (in place) level by level.

    Dicts on both sides merge, anything else is overwritten by `incoming`.
    """
    stack = [(document, incoming)]
    while stack:
        dst, src = stack.pop()
        for key, val in src.items():
            old = dst.get(key)
            if isinstance(old, dict) and isinstance(val, dict):
                stack.append((old, val))
            else:
                dst[key] = val
    return document


def merge_shallow(
    document: dict[str, IniValue], incoming: dict[str, IniValue]
) -> dict[str, IniValue]:
    """Only top level keys of `incoming` overwrite those of `document`.

    Used for the very last section of a file, thus a section declared
    again at the end REPLACES the earlier one instead of merging.
    """
    document.update(incoming)
    return document


class IniDocument(Mapping[str, IniValue]):
    """... is a read only nested dict, representing a whole INI file.

    Use `get('a.b.key')` to go down through nested sections.
    """
    def __init__(self, data: dict[str, IniValue] | None = None) -> None:
        self._data: dict[str, IniValue] = {} if data is None else data

    def __getitem__(self, key: str) -> IniValue:
        return deepcopy(self._data[key])

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._data!r})'

    def get(self, key: str | None = None, default=None):
        """Get a value by dot path.

        - no `key`: the whole document.
        - `key` is a top level key as is (dots included): its value.
        - otherwise walk `key.split('.')` down, and fallback to `default`
          once a segment is missing or the node is not a section.
        """
        if key is None:
            return self.to_dict()
        if key in self._data:
            return deepcopy(self._data[key])

        node: IniValue = self._data
        for segment in key.split('.'):
            if not isinstance(node, dict) or segment not in node:
                logger.debug('"%s" not found at "%s".', key, segment)
                return default
            node = node[segment]
        return deepcopy(node)

    def to_dict(self) -> dict[str, IniValue]:
        return deepcopy(self._data)
