# -*- encoding: utf-8 -*-
# @File   : escape.py
# @Time   : 2024/10/12 21:40:07
# @Author : pyinifile contributors

"""Value escaping.

`unescape()` understands `\\0`, `\\n`, `\\r`, `\\t` and `\\\\`,
while any other backslash sequence is kept as it is
(so Windows paths like `C:\\Games` survive a plain read).

`escape()` doubles *every* backslash rather than only those before
`0`, `n`, `r` or `t`. Otherwise a backslash in front of a control char,
e.g. `'\\\\' + '\\n'`, would be read back as a different string.
"""

from re import compile as regex

from .consts import BACKSLASH, ESCAPES

__all__ = ['escape', 'unescape']

_ESCAPE_TABLE = str.maketrans(
    {char: BACKSLASH + seq for char, seq in ESCAPES.items()})
_UNESCAPES = {seq: char for char, seq in ESCAPES.items()}
_SEQUENCE = regex(r'\\([0nrt\\])')


def escape(value: str) -> str:
    """Turn NUL, LF, CR, TAB and backslash into two-char sequences."""
    return value.translate(_ESCAPE_TABLE)


def unescape(value: str) -> str:
    """The inverse of `escape()`. Unknown sequences pass through."""
    if BACKSLASH not in value:
        return value
    return _SEQUENCE.sub(lambda m: _UNESCAPES[m[1]], value)
