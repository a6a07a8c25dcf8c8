# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/10/10 01:15:56
# @Author : pyinifile contributors

DEFAULT_COMMENT = ';#'
DEFAULT_SEPARATOR = '='
DEFAULT_SECTION = 'global'

QUOTE = '"'
BACKSLASH = '\\'
SECTION_OPEN = '['
SECTION_CLOSE = ']'

# characters a separator or comment char can never be,
# since the scanner gives them a meaning of their own.
RESERVED_CHARS = frozenset(
    (QUOTE, BACKSLASH, SECTION_OPEN, SECTION_CLOSE, '\n', '\r'))

# literal char -> two-char escape sequence (without the backslash).
ESCAPES = {
    '\0': '0',
    '\n': 'n',
    '\r': 'r',
    '\t': 't',
    BACKSLASH: BACKSLASH,
}
