# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/12 20:47:55

import logging

from .ini import (
    IniDocument,
    IniError,
    IniFile,
    IniParseError,
    IniParser,
    IniResourceError,
    loads
)

__all__ = [
    'IniDocument', 'IniFile', 'IniParser', 'loads',
    'IniError', 'IniParseError', 'IniResourceError'
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
