# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2026/10/12 21:04:17

from abc import ABCMeta, abstractmethod
from typing import TypeVar

T = TypeVar('T')


class LineSupplier(metaclass=ABCMeta):
    """Cursor over the lines of some backing text resource.

    `next()` moves to the following line and tells whether there was one;
    `current` is the line the cursor stands on, already stripped.
    """

    @abstractmethod
    def next(self) -> bool:
        raise NotImplementedError

    @property
    @abstractmethod
    def current(self) -> str:
        raise NotImplementedError

    @property
    @abstractmethod
    def lineno(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def __str__(self) -> str:
        raise NotImplementedError


class FileHandler[T](metaclass=ABCMeta):
    def __init__(self, filename: str) -> None:
        self._fn = filename

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def close(self) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
