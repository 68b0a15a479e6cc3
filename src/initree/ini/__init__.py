# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/12 23:52:08

from .errors import IniError, IniParseError, IniResourceError, InvalidIniRecord
from .model import IniDocument, SectionValues
from .parser import IniFile, IniParser, ParserState, StreamLines, loads
