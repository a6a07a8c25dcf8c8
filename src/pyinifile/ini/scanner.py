# -*- encoding: utf-8 -*-
# @File   : scanner.py
# @Time   : 2024/10/12 20:03:51
# @Author : pyinifile contributors

"""Turn INI text into an `IniClass`.

At each position the scanner tries, in order:

1. an escaped special char, e.g. `\\;` or `\\"` -> the char itself.
2. a quoted run `"..."`, which may span lines and keeps its whitespace.
3. a comment (`;` / `#` up to the end of line), which is dropped.
4. the separator, splitting name from value (only the first one per line).
5. a `[section]` header, only at the start of a line.
6. anything else, copied as is.

A trailing `\\` continues the value on the next line.
Parameters before any header go to `IniConfig.default_section`.
"""

import logging
from re import DOTALL
from re import compile as regex
from re import escape as re_escape
from typing import NoReturn

from .consts import BACKSLASH, QUOTE
from .model import IniClass, IniConfig, IniSection

__all__ = ['ParseError', 'IniScanner', 'loads']


class ParseError(ValueError):
    """Malformed INI text, raised with the offending line."""
    def __init__(self, reason: str, lineno: int, line: str) -> None:
        super().__init__(f'{reason} (line {lineno}: {line!r})')
        self.reason = reason
        self.lineno = lineno
        self.line = line


class _Property:
    """Pending `name = value`, collected chunk by chunk.

    Verbatim chunks (quoted runs, escaped chars) are never trimmed.
    """
    def __init__(self) -> None:
        self.name: str | None = None
        self.chunks: list[tuple[str, bool]] = []
        self.continued = False

    def push(self, text: str, verbatim: bool = False) -> None:
        self.chunks.append((text, verbatim))

    def break_line(self) -> None:
        if self.chunks and not self.chunks[-1][1]:
            text, _ = self.chunks.pop()
            self.chunks.append((text.rstrip(), False))
        self.chunks.append(('\n', True))
        self.continued = True

    @property
    def blank(self) -> bool:
        return all(not v and not t.strip() for t, v in self.chunks)

    def take(self) -> str:
        texts = [t for t, _ in self.chunks]
        i = 0
        while i < len(texts) and not self.chunks[i][1]:
            texts[i] = texts[i].lstrip()
            if texts[i]:
                break
            i += 1
        i = len(texts) - 1
        while i >= 0 and not self.chunks[i][1]:
            texts[i] = texts[i].rstrip()
            if texts[i]:
                break
            i -= 1
        self.chunks.clear()
        return ''.join(texts)


class IniScanner:
    def __init__(self, config: IniConfig | None = None) -> None:
        self._cfg = config if config is not None else IniConfig()
        sep, cmt = self._cfg.separator, self._cfg.comment
        comment = f'[{re_escape(cmt)}]' if cmt else '(?!)'
        specials = re_escape('[]' + QUOTE + sep + cmt)

        self._rgxp_escaped = regex(rf'\\([{specials}])')
        self._rgxp_continuation = regex(r'\\[ \t]*(?=\n|\Z)')
        self._rgxp_quote = regex(r'"((?:[^"\\]|\\.)*)"', DOTALL)
        self._rgxp_inner_quote = regex(r'\\(.)', DOTALL)
        self._rgxp_comment = regex(rf'{comment}[^\n]*')
        self._rgxp_section = regex(
            rf'[ \t]*\[([^\]\n\r]*)\][ \t]*(?:{comment}[^\n]*)?(?=\n|\Z)')
        self._rgxp_header = regex(r'[ \t]*\[')
        self._rgxp_indent = regex(r'[ \t]*')
        self._rgxp_literal = regex(
            rf'[^\\"\n{re_escape(sep + cmt)}]+')

        self._text = ''
        self._doc = IniClass(self._cfg)
        self._section: IniSection | None = None
        self._prop = _Property()

    @property
    def config(self) -> IniConfig:
        return self._cfg

    def parse(self, text: str) -> IniClass:
        """Scan `text` into a new `IniClass`.

        Raises `ParseError` on malformed input,
        in which case no document is returned at all.
        """
        self._text = text = text.replace('\r\n', '\n')
        self._doc = IniClass(self._cfg)
        self._section = None
        self._prop = _Property()

        pos, end = 0, len(text)
        bol = True
        while pos < end:
            if bol:
                bol = False
                if self._prop.continued:
                    self._prop.continued = False
                    pos = self._rgxp_indent.match(text, pos).end()
                    continue
                if m := self._rgxp_section.match(text, pos):
                    self._open_section(m[1], pos)
                    pos = m.end()
                    continue
                if self._rgxp_header.match(text, pos):
                    self._fail('malformed section header', pos)

            char = text[pos]
            if char == '\n':
                self._finalize(pos)
                pos += 1
                bol = True
            elif m := self._rgxp_escaped.match(text, pos):
                self._prop.push(m[1], verbatim=True)
                pos = m.end()
            elif m := self._rgxp_continuation.match(text, pos):
                if self._prop.name is None:
                    self._fail('line continuation outside of a value', pos)
                self._prop.break_line()
                # swallow the newline, the property is not done yet.
                pos = m.end() + 1
                bol = True
            elif char == BACKSLASH:
                # left for unescaping, e.g. `\n` or `\\`.
                self._prop.push(text[pos:pos + 2])
                pos += 2
            elif char == QUOTE:
                if not (m := self._rgxp_quote.match(text, pos)):
                    self._fail('unmatched quote', pos)
                self._prop.push(
                    self._rgxp_inner_quote.sub(self._unquote, m[1]),
                    verbatim=True)
                pos = m.end()
            elif m := self._rgxp_comment.match(text, pos):
                pos = m.end()
            elif char == self._cfg.separator:
                self._split_name(pos)
                pos += 1
            else:
                m = self._rgxp_literal.match(text, pos)
                self._prop.push(m[0])
                pos = m.end()

        self._finalize(end)
        return self._doc

    @staticmethod
    def _unquote(m) -> str:
        return m[1] if m[1] == QUOTE else m[0]

    def _open_section(self, name: str, pos: int) -> None:
        name = name.strip()
        if not name:
            self._fail('empty section name', pos)
        if name in self._doc:
            logging.debug(f'[{name}] declared again, merging into it.')
        self._section = self._doc.section(name)

    def _split_name(self, pos: int) -> None:
        if self._prop.name is not None:
            # `a = b = c`: only the first separator counts.
            self._prop.push(self._cfg.separator)
            return
        # names are escaped on output just like values.
        name = self._cfg.unescape_value(self._prop.take()).strip()
        if not name:
            self._fail('missing property name before separator', pos)
        self._prop.name = name

    def _finalize(self, pos: int) -> None:
        prop, self._prop = self._prop, _Property()
        if prop.name is None:
            if not prop.blank:
                self._fail('could not parse line', pos)
            return
        value = self._cfg.unescape_value(prop.take())
        if self._section is None:
            self._section = self._doc.section(self._cfg.default_section)
        self._section[prop.name] = value

    def _fail(self, reason: str, pos: int) -> NoReturn:
        text = self._text
        start = text.rfind('\n', 0, pos) + 1
        stop = text.find('\n', pos)
        if stop < 0:
            stop = len(text)
        raise ParseError(reason, text.count('\n', 0, pos) + 1,
                         text[start:stop])


def loads(text: str, config: IniConfig | None = None) -> IniClass:
    """Parse INI text with a one-off `IniScanner`."""
    return IniScanner(config).parse(text)
