# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/10 00:57:10
# @Author : pyinifile contributors

"""
Basically INI structure: an ordered dict of sections,
each of them an ordered dict of `str: str` parameters.

```ini
key = val        ; goes to `IniConfig.default_section`

[section]
key233 = val666
[section]        ; declared again, so merged into the one above
key233 = val114514
```
"""

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from dataclasses import dataclass
from re import Pattern
from re import compile as regex
from typing import Protocol

from .consts import (
    DEFAULT_COMMENT,
    DEFAULT_SECTION,
    DEFAULT_SEPARATOR,
    RESERVED_CHARS,
    SECTION_CLOSE,
)
from .escape import escape, unescape


class MergeTypeError(TypeError):
    """Raised when merging something that is not a section mapping."""
    pass


class FrozenIniError(TypeError):
    """Raised on any attempt to change a frozen INI document."""
    pass


def _check_section_name(name: str) -> None:
    # it has to come back from a `[name]` line as is.
    if not isinstance(name, str):
        raise TypeError(f'section name should be str, got {name!r}')
    if (not name or name != name.strip()
            or any(i in name for i in (SECTION_CLOSE, '\n', '\r'))):
        raise ValueError(f'{name!r} can not be a section name')


def _check_pair(key: str, value: str) -> None:
    if not isinstance(key, str) or not isinstance(value, str):
        raise TypeError(
            f'parameters should be `str: str`, got {key!r}: {value!r}')
    if not key or key != key.strip():
        raise ValueError(f'{key!r} can not be a parameter name')


@dataclass(frozen=True, kw_only=True)
class IniConfig:
    """Options shared by scanning and formatting.

    - `comment`: chars starting a line comment.
    - `separator`: the single char between parameter and value.
    - `escape`: whether values go through `escape()` / `unescape()`.
    - `default_section`: where parameters before any `[section]` go.
    """
    comment: str = DEFAULT_COMMENT
    separator: str = DEFAULT_SEPARATOR
    escape: bool = True
    default_section: str = DEFAULT_SECTION

    def __post_init__(self) -> None:
        if len(self.separator) != 1:
            raise ValueError(
                f'separator should be a single char, got {self.separator!r}')
        if self.separator.isspace() or self.separator in RESERVED_CHARS:
            raise ValueError(f'{self.separator!r} can not be a separator')
        if self.separator in self.comment:
            raise ValueError(
                f'separator {self.separator!r} is also a comment char')
        for i in self.comment:
            if i.isspace() or i in RESERVED_CHARS:
                raise ValueError(f'{i!r} can not be a comment char')
        _check_section_name(self.default_section)

    def escape_value(self, value: str) -> str:
        return escape(value) if self.escape else value

    def unescape_value(self, value: str) -> str:
        return unescape(value) if self.escape else value


class SectionMapping(Protocol):
    """Anything exposing section names and per-section pairs,
    e.g. another `IniClass` or a plain `dict[str, dict[str, str]]`."""
    def keys(self) -> Iterable[str]: ...

    def __getitem__(self, key: str, /) -> Mapping[str, str]: ...


def _section_pairs(other: SectionMapping) -> list[tuple[str, dict[str, str]]]:
    # take a full snapshot first, so nothing gets merged
    # if `other` turns out to be broken halfway.
    try:
        ret = [(name, dict(other[name].items())) for name in other.keys()]
    except (AttributeError, TypeError, KeyError, ValueError) as e:
        raise MergeTypeError(
            f"cannot merge contents from '{type(other).__name__}'") from e
    for name, pairs in ret:
        _check_section_name(name)
        for key, value in pairs.items():
            _check_pair(key, value)
    return ret


class IniSection(MutableMapping[str, str]):
    """Parameters of one section, in insertion order.

    Both parameters and values must be `str`, otherwise `TypeError`.
    Parameter names can't be empty or carry edge whitespace,
    since neither would be read back as is.
    """
    def __init__(
        self, name: str, pairs: Mapping[str, str] | None = None
    ) -> None:
        _check_section_name(name)
        self._name = name
        self._data: dict[str, str] = {}
        if pairs:
            self.update(pairs)

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        _check_pair(key, value)
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return f'[{self._name}]'

    def __repr__(self) -> str:
        return f'[{self._name}] {self._data!r}'

    def to_dict(self) -> dict[str, str]:
        return self._data.copy()


class BaseIniClass(Mapping[str, Mapping[str, str]]):
    """Read-only operations shared by `IniClass` and `FrozenIniClass`."""
    _config: IniConfig
    _sections: dict[str, Mapping[str, str]]

    @property
    def config(self) -> IniConfig:
        return self._config

    def __getitem__(self, name: str) -> Mapping[str, str]:
        return self._sections[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __contains__(self, name: object) -> bool:
        return name in self._sections

    def __eq__(self, other: object) -> bool:
        # order and config don't matter, only the resolved content.
        if not isinstance(other, BaseIniClass):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.sections()!r})'

    def has_section(self, name: str) -> bool:
        return name in self._sections

    def sections(self) -> list[str]:
        """Section names, in the order they were declared."""
        return list(self._sections)

    def walk(self) -> Iterator[tuple[str, str, str]]:
        """Yield each `(section, parameter, value)` in turn."""
        for name, section in self._sections.items():
            for key, value in section.items():
                yield name, key, value

    def match(self, pattern: str | Pattern[str]) -> dict[str, dict[str, str]]:
        """Copy out the sections whose names match `pattern` (`re.search`).

        The result is a snapshot, editing it won't touch the document.
        """
        rgx = regex(pattern)
        return {
            name: dict(section.items())
            for name, section in self._sections.items()
            if rgx.search(name)
        }

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {
            name: dict(section.items())
            for name, section in self._sections.items()
        }

    def copy(self) -> 'IniClass':
        """An independent, mutable duplicate with the same config."""
        ret = IniClass(self._config)
        ret.update(self)
        return ret

    def merge(self, other: SectionMapping) -> 'IniClass':
        """Return a copy of self with `other` merged into it.

        See `IniClass.update()` for the merging rules.
        """
        ret = self.copy()
        ret.update(other)
        return ret


class IniClass(BaseIniClass, MutableMapping[str, IniSection]):
    """... is simply a group of dict, representing a whole INI file.

    Note `doc[name]` raises `KeyError` for absent sections,
    use `doc.section(name)` to get one created on demand.
    """
    _sections: dict[str, IniSection]

    def __init__(self, config: IniConfig | None = None) -> None:
        """Init an empty INI document."""
        self._config = config if config is not None else IniConfig()
        self._sections = {}

    def __getitem__(self, name: str) -> IniSection:
        return self._sections[name]

    def __setitem__(self, name: str, value: Mapping[str, str]) -> None:
        # shouldn't keep ptr to external dict in section setting.
        self._sections[name] = IniSection(name, value)

    def __delitem__(self, name: str) -> None:
        del self._sections[name]

    def section(self, name: str) -> IniSection:
        """Get the section named `name`, creating an empty one if absent.

        Raises `ValueError` if `name` is empty, has edge whitespace,
        or holds `]` or a line break: such a header can't be read back.
        """
        if name not in self._sections:
            self._sections[name] = IniSection(name)
        return self._sections[name]

    def delete_section(self, name: str) -> IniSection | None:
        """Remove a section. Returns it, or `None` if there was none."""
        return self._sections.pop(name, None)

    def update(self, other: SectionMapping) -> None:  # type: ignore[override]
        """To merge `other` into self.

        Sections of `other` missing here are appended in order.
        For shared sections, existing keys keep their place,
        new keys are appended and `other` wins on collisions.
        """
        for name, pairs in _section_pairs(other):
            self.section(name).update(pairs)

    def clear(self) -> None:
        self._sections.clear()

    def freeze(self) -> 'FrozenIniClass':
        return FrozenIniClass(self)


def _reject(self, *args, **kwargs):
    raise FrozenIniError(f'{self!s} is frozen and can not be modified')


class FrozenIniSection(Mapping[str, str]):
    """Read-only snapshot of an `IniSection`."""
    def __init__(self, name: str, pairs: Mapping[str, str]) -> None:
        self._name = name
        self._data: dict[str, str] = dict(pairs.items())

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return f'[{self._name}]'

    def __repr__(self) -> str:
        return f'[{self._name}] {self._data!r}'

    def to_dict(self) -> dict[str, str]:
        return self._data.copy()

    __setitem__ = __delitem__ = _reject
    update = setdefault = pop = popitem = clear = _reject


class FrozenIniClass(BaseIniClass):
    """A read-only INI document, made by `IniClass.freeze()`.

    Every mutating call raises `FrozenIniError`.
    Use `thaw()` (or `copy()`) for an editable duplicate.
    """
    _sections: dict[str, FrozenIniSection]

    def __init__(self, source: BaseIniClass) -> None:
        self._config = source.config
        self._sections = {
            name: FrozenIniSection(name, section)
            for name, section in source.items()
        }

    def __getitem__(self, name: str) -> FrozenIniSection:
        return self._sections[name]

    def __str__(self) -> str:
        return 'frozen INI document'

    def section(self, name: str) -> FrozenIniSection:
        if name not in self._sections:
            _reject(self)
        return self._sections[name]

    def freeze(self) -> 'FrozenIniClass':
        return self

    def thaw(self) -> IniClass:
        return self.copy()

    __setitem__ = __delitem__ = _reject
    delete_section = update = setdefault = pop = popitem = clear = _reject
