# -*- encoding: utf-8 -*-
# @File   : formatter.py
# @Time   : 2024/10/12 23:18:26
# @Author : pyinifile contributors

from collections.abc import Mapping
from warnings import warn

from .consts import BACKSLASH, QUOTE, SECTION_CLOSE, SECTION_OPEN
from .model import BaseIniClass, IniConfig

__all__ = ['IniFormatter', 'dumps']


class IniFormatter:
    """Turn an INI document back into text.

    Values are never quoted again. With escape mode on,
    a value read from `"line1\\nline2"` is written as `line1\\nline2`
    (backslash + `n`), which reads back to the same string.
    """
    def __init__(self, *, blank_lines: int = 1) -> None:
        self._blank_lines = blank_lines

    @staticmethod
    def _escapes(chars: str) -> dict[int, str]:
        return str.maketrans({c: BACKSLASH + c for c in chars})

    def __output_section(
        self, name: str, pairs: Mapping[str, str], config: IniConfig
    ) -> str:
        sep = config.separator
        names = self._escapes(
            SECTION_OPEN + SECTION_CLOSE + QUOTE + sep + config.comment)
        values = self._escapes(QUOTE + config.comment)
        # chars a raw value can't carry through a round trip.
        lossy = set('\n\r' + QUOTE + config.comment)
        ret = f'[{name}]\n'
        for k, v in pairs.items():
            if config.escape:
                k = config.escape_value(k).translate(names)
                v = config.escape_value(v).translate(values)
            elif (lossy.intersection(k + v) or sep in k
                    or v.endswith(BACKSLASH)):
                warn(
                    f'"{k}" in [{name}] needs escaping but escaping is off, '
                    'it can not be read back as is.')
            ret += f'{k} {sep} {v}\n'
        return ret

    def format(self, doc: BaseIniClass) -> str:
        """Sections and parameters come out in insertion order,
        each section followed by `blank_lines` empty lines."""
        return ''.join(
            self.__output_section(name, pairs, doc.config)
            + '\n' * self._blank_lines
            for name, pairs in doc.items()
        )


def dumps(doc: BaseIniClass, *, blank_lines: int = 1) -> str:
    return IniFormatter(blank_lines=blank_lines).format(doc)
