# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/12 23:18:35

"""Parse an INI-like file into a nested, typed `IniDocument`.

Supported forms:

    ```ini
    ; comment
    key = value             ; global section, stays on top level.
    [section]
    integer = 123
    text = "quoted\\"text"
    multiline = "first line
    second line"
    [section:sub]           ; => {'section': {'sub': {...}}}
    list[] = 1
    list[] = 2
    map[one] = 1
    ```
"""

import logging
import os
from dataclasses import dataclass, field
from io import BufferedReader, StringIO, TextIOBase, TextIOWrapper
from os.path import isfile

from chardet import detect as guess_codec

from ..abstract import FileHandler, LineSupplier
from .consts import DEFAULT_DELIMITER, LineKind
from .errors import IniParseError, IniResourceError, InvalidIniRecord
from .grammar import classify, match_header, split_pair
from .model import (
    IniDocument,
    SectionValues,
    merge_deep,
    merge_shallow,
    wrap_section
)
from .values import IniValue, coerce_value

logger = logging.getLogger(__name__)


class StreamLines(LineSupplier):
    """Line cursor over a text stream, counting lines from 1."""

    def __init__(self, buf: TextIOBase, name: str = '<stream>') -> None:
        self._buf = buf
        self._name = name
        self._line = ''
        self._lineno = 0

    def next(self) -> bool:
        raw = self._buf.readline()
        if not raw:
            return False
        self._line = raw.strip()
        self._lineno += 1
        return True

    @property
    def current(self) -> str:
        return self._line

    @property
    def lineno(self) -> int:
        return self._lineno

    def __str__(self) -> str:
        return f'{self._name}:{self._lineno}'


@dataclass
class ParserState:
    """The section being filled, and everything flushed before it.

    `path is None` means we're still in the global section.
    """
    delimiter: str = DEFAULT_DELIMITER
    document: dict[str, IniValue] = field(default_factory=dict)
    path: tuple[str, ...] | None = None
    values: SectionValues = field(default_factory=SectionValues)

    def enter_section(self, name: str) -> None:
        self.flush()
        self.path = tuple(name.split(self.delimiter))
        self.values = SectionValues()
        logger.debug('Entering section %s.', self.path)

    def assign(self, key: str, value: IniValue) -> None:
        self.values[key] = value

    def flush(self, final: bool = False) -> None:
        """Move the pending section into `document`.

        The global section replaces the document as a whole.
        Others get merged recursively, except the `final` one,
        which only overwrites top level keys.
        """
        if self.path is None:
            self.document = self.values.to_dict()
            return
        tree = wrap_section(self.path, self.values.to_dict())
        if final:
            merge_shallow(self.document, tree)
        else:
            merge_deep(self.document, tree)
        logger.debug('Flushed section %s (final=%s).', self.path, final)


def scan(lines: LineSupplier, delimiter: str = DEFAULT_DELIMITER) -> ParserState:
    """Run all `lines` through a fresh `ParserState`.

    Raises:
        IniParseError: the first structural error, with its line number.
    """
    state = ParserState(delimiter)
    try:
        while lines.next():
            line = lines.current
            match classify(line):
                case LineKind.BLANK | LineKind.COMMENT:
                    continue
                case LineKind.HEADER:
                    state.enter_section(match_header(line))
                case LineKind.PAIR:
                    key, raw = split_pair(line)
                    state.assign(key, coerce_value(raw, lines))
    except (InvalidIniRecord, UnicodeDecodeError) as ex:
        raise IniParseError(str(ex), lines.lineno) from ex
    state.flush(final=True)
    return state


def _check_delimiter(delimiter: str) -> None:
    if len(delimiter) != 1:
        raise ValueError(
            f'Section delimiter must be a single char, got {delimiter!r}.')


class IniParser(FileHandler[IniDocument]):
    """Reads ONE INI file, ONCE.

    The file is opened right here in `__init__`, and closed as soon as
    `read()` finishes (or fails). Use `with` or `close()` if you'd
    like to give up before reading.

    With `encoding=None` the codec is guessed by `chardet`.
    """
    def __init__(
        self, filename: str | os.PathLike[str],
        delimiter: str = DEFAULT_DELIMITER, *,
        encoding: str | None = 'utf-8'
    ) -> None:
        super().__init__(os.fspath(filename))
        _check_delimiter(delimiter)
        self._delimiter = delimiter
        self._fp: TextIOBase | None = None
        if not isfile(self._fn) or not os.access(self._fn, os.R_OK):
            raise IniResourceError(f'{self._fn} is invalid.')
        try:
            self._fp = self._open(self._fn, encoding)
        except (OSError, LookupError) as e:
            raise IniResourceError(
                f'Error opening [{self._fn}] for read.') from e
        self._codec = self._fp.encoding

    @staticmethod
    def _open(filename: str, encoding: str | None) -> TextIOBase:
        if encoding is not None:
            return open(filename, 'r', encoding=encoding)

        raw: BufferedReader = open(filename, 'rb')
        try:
            codec = guess_codec(raw.read())
            raw.seek(0)
        except OSError:
            raw.close()
            raise
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}
        logger.debug('Guessed %s as %s.', filename, codec['encoding'])
        try:
            return TextIOWrapper(raw, encoding=codec['encoding'])
        except LookupError:
            raw.close()
            raise

    @property
    def closed(self) -> bool:
        return self._fp is None

    @staticmethod
    def readstream(
        buf: TextIOBase, delimiter: str = DEFAULT_DELIMITER
    ) -> IniDocument:
        """Parse an already decoded text stream, e.g. a `StringIO`.

        The stream is NOT closed afterwards.
        """
        _check_delimiter(delimiter)
        state = scan(StreamLines(buf, getattr(buf, 'name', '<stream>')),
                     delimiter)
        return IniDocument(state.document)

    def read(self) -> IniDocument:
        if self._fp is None:
            raise ValueError(f'{self._fn} has been closed.')
        try:
            state = scan(StreamLines(self._fp, self._fn), self._delimiter)
        finally:
            self.close()
        return IniDocument(state.document)

    def close(self) -> None:
        if self._fp is not None:
            self._fp.close()
            self._fp = None
            logger.debug('Released %s.', self._fn)

    def __enter__(self) -> 'IniParser':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __del__(self) -> None:
        # `__init__` may fail before `_fp` exists.
        if getattr(self, '_fp', None) is not None:
            self.close()

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"


class IniFile(IniDocument):
    """`IniDocument` read from `filename` right away.

    ```python
    conf = IniFile('app.ini')
    conf.get('database.port', 5432)
    ```
    """
    def __init__(
        self, filename: str | os.PathLike[str],
        delimiter: str = DEFAULT_DELIMITER, *,
        encoding: str | None = 'utf-8'
    ) -> None:
        with IniParser(filename, delimiter, encoding=encoding) as parser:
            super().__init__(parser.read()._data)
        self.filename = os.fspath(filename)


def loads(text: str, delimiter: str = DEFAULT_DELIMITER) -> IniDocument:
    """Parse INI text held in memory."""
    return IniParser.readstream(StringIO(text), delimiter)
