# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2023/11/14 20:01:52
# @Author : pyinifile contributors

import logging

from .ini import (
    FrozenIniClass, FrozenIniError, IniClass, IniConfig, IniSection,
    IniFormatter, IniParser, IniScanner, IniJsonParser, IniYamlParser,
    MergeTypeError, ParseError,
    dump, dumps, escape, load, loads, unescape
)

__version__ = '0.4.1'

__all__ = [
    'IniClass', 'IniSection', 'IniConfig', 'FrozenIniClass',
    'IniScanner', 'IniFormatter', 'IniParser',
    'IniJsonParser', 'IniYamlParser',
    'ParseError', 'MergeTypeError', 'FrozenIniError',
    'load', 'loads', 'dump', 'dumps', 'escape', 'unescape'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
