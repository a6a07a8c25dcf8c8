# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/10 01:16:53
# @Author : pyinifile contributors

from .convert import IniJsonParser, IniYamlParser
from .escape import escape, unescape
from .formatter import IniFormatter, dumps
from .model import (
    BaseIniClass,
    FrozenIniClass,
    FrozenIniError,
    FrozenIniSection,
    IniClass,
    IniConfig,
    IniSection,
    MergeTypeError,
    SectionMapping,
)
from .parser import IniParser, dump, load
from .scanner import IniScanner, ParseError, loads
