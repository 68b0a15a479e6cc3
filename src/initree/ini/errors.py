# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/10/12 21:40:02


class IniError(Exception):
    """Base of everything `initree` raises on purpose."""
    pass


class IniResourceError(IniError, ValueError):
    """The INI file is missing or unreadable. Raised before parsing."""
    pass


class InvalidIniRecord(IniError):
    """To record structural errors found while scanning lines."""
    pass


class IniParseError(IniError, RuntimeError):
    """Wraps an `InvalidIniRecord` with the line where the scan stopped."""

    def __init__(self, reason: str, lineno: int) -> None:
        super().__init__(f'{reason} Line: {lineno}.')
        self.reason = reason
        self.lineno = lineno
