# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/10 01:04:45
# @Author : pyinifile contributors

"""Read and write INI files.

The handlers here only move text between the disk and
`IniScanner` / `IniFormatter`. A missing or unreadable file
is logged and reported as `None` (or `False` on writing),
never raised, while malformed content still raises `ParseError`.
"""

import logging
from io import TextIOBase

import chardet

from ..abstract import FileHandler
from .formatter import IniFormatter
from .model import IniClass, IniConfig
from .scanner import IniScanner

__all__ = ['IniParser', 'load', 'dump']

DEFAULT_ENCODING = 'utf-8'
FALLBACK_ENCODING = 'latin-1'


class IniParser(FileHandler[IniClass]):
    def __init__(
        self, filename: str,
        config: IniConfig | None = None,
        encoding: str | None = None, *,
        blank_lines: int = 1
    ) -> None:
        super().__init__(filename, encoding)
        self._config = config if config is not None else IniConfig()
        self._formatter = IniFormatter(blank_lines=blank_lines)

    @property
    def config(self) -> IniConfig:
        return self._config

    @staticmethod
    def readstream(
        buf: TextIOBase, config: IniConfig | None = None
    ) -> IniClass:
        """读取解码好的字符串流。

        如没有特殊需求，直接调用`self.read()`便是。
        """
        return IniScanner(config).parse(buf.read())

    @staticmethod
    def _decode_file(filename: str) -> str:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        guess = chardet.detect(raw)
        if guess['encoding'] is not None and guess['confidence'] >= 0.8:
            try:
                buf = raw.decode(guess['encoding'])
            except (UnicodeDecodeError, LookupError):
                pass
            else:
                logging.info(f'{filename} seems to be {guess["encoding"]}.')
                return buf
        # latin-1 maps every byte, so this never fails.
        logging.info(f'{filename} decoded as {FALLBACK_ENCODING}.')
        return raw.decode(FALLBACK_ENCODING)

    def _load_text(self) -> str | None:
        try:
            try:
                with open(self._fn, 'r',
                          encoding=self._codec or DEFAULT_ENCODING) as fp:
                    return fp.read()
            except UnicodeDecodeError:
                # wrong encoding given, just fallback to `chardet`.
                return self._decode_file(self._fn)
        except OSError as e:
            logging.warning(f'INI file not loaded:\n  {e}')
            return None

    def read(self) -> IniClass | None:
        """读取`IniParser`实例指定的文件。

        Returns `None` if the file can't be opened.
        """
        text = self._load_text()
        if text is None:
            return None
        return IniScanner(self._config).parse(text)

    def restore(self, instance: IniClass) -> bool:
        """Reload the file into `instance`, dropping unsaved changes.

        The file is scanned with `instance.config`.
        `instance` stays untouched if reading or scanning fails.
        """
        text = self._load_text()
        if text is None:
            return False
        fresh = IniScanner(instance.config).parse(text)
        instance.clear()
        instance.update(fresh)
        return True

    def write(self, instance: IniClass) -> bool:
        """保存到*一个* INI 文件。

        Sections are separated by `blank_lines` empty lines.
        Returns `False` if the file can't be written.
        """
        text = self._formatter.format(instance)
        try:
            with open(self._fn, 'w',
                      encoding=self._codec or DEFAULT_ENCODING) as fp:
                fp.write(text)
        except OSError as e:
            logging.warning(f'INI file not saved:\n  {e}')
            return False
        return True

    def __str__(self) -> str:
        return f'INI file: {super().__str__()} ({self._codec})'


def load(
    filename: str,
    config: IniConfig | None = None,
    encoding: str | None = None
) -> IniClass | None:
    """Open `filename` and parse it, `None` if it can't be read."""
    return IniParser(filename, config, encoding).read()


def dump(
    doc: IniClass, filename: str, encoding: str | None = None
) -> bool:
    return IniParser(filename, doc.config, encoding).write(doc)
