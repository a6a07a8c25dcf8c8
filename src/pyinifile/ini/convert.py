# -*- encoding: utf-8 -*-
# @File   : convert.py
# @Time   : 2024/10/13 15:26:40
# @Author : pyinifile contributors

"""Import / export INI documents as JSON or YAML.

Both keep the plain `{section: {key: value}}` shape of `IniClass.to_dict()`.
Scalars other than strings (say `port: 8080` in a hand written YAML)
are stored with `str()`, and `null` becomes an empty string.
"""

import json
import logging
from abc import abstractmethod
from collections.abc import Mapping
from typing import Any

import yaml

from ..abstract import FileHandler
from .model import IniClass, IniConfig, MergeTypeError

__all__ = ['IniJsonParser', 'IniYamlParser']


def _stringify(value: Any) -> str:
    return '' if value is None else str(value)


def _to_ini(data: Any, config: IniConfig) -> IniClass:
    if not isinstance(data, Mapping):
        raise MergeTypeError(
            f"cannot build INI from '{type(data).__name__}'")
    ret = IniClass(config)
    for name, pairs in data.items():
        if pairs is None:  # `[section]` without any pairs in YAML
            pairs = {}
        if not isinstance(pairs, Mapping):
            raise MergeTypeError(
                f"section '{name}' is a '{type(pairs).__name__}', "
                'not a mapping')
        ret.section(str(name)).update(
            {str(k): _stringify(v) for k, v in pairs.items()})
    return ret


class _IniMappingParser(FileHandler[IniClass]):
    def __init__(
        self, filename: str,
        config: IniConfig | None = None,
        encoding: str = 'utf-8'
    ) -> None:
        super().__init__(filename, encoding)
        self._config = config if config is not None else IniConfig()

    @abstractmethod
    def _load(self, fp) -> Any:
        raise NotImplementedError

    @abstractmethod
    def _dump(self, data: dict[str, dict[str, str]], fp) -> None:
        raise NotImplementedError

    def read(self) -> IniClass | None:
        try:
            with open(self._fn, 'r', encoding=self._codec) as fp:
                data = self._load(fp)
        except OSError as e:
            logging.warning(f'{self._fn} not loaded:\n  {e}')
            return None
        return _to_ini(data, self._config)

    def write(self, instance: IniClass) -> bool:
        try:
            with open(self._fn, 'w', encoding=self._codec) as fp:
                self._dump(instance.to_dict(), fp)
        except OSError as e:
            logging.warning(f'{self._fn} not saved:\n  {e}')
            return False
        return True


class IniJsonParser(_IniMappingParser):
    def __init__(
        self, filename: str,
        config: IniConfig | None = None,
        encoding: str = 'utf-8', *,
        indent: int = 2
    ) -> None:
        super().__init__(filename, config, encoding)
        self._indent = indent

    def _load(self, fp) -> Any:
        return json.load(fp)

    def _dump(self, data: dict[str, dict[str, str]], fp) -> None:
        json.dump(data, fp, ensure_ascii=False, indent=self._indent)


class IniYamlParser(_IniMappingParser):
    """An empty YAML file reads as an empty document."""

    def _load(self, fp) -> Any:
        data = yaml.safe_load(fp)
        return {} if data is None else data

    def _dump(self, data: dict[str, dict[str, str]], fp) -> None:
        yaml.safe_dump(data, fp, allow_unicode=True, sort_keys=False)
