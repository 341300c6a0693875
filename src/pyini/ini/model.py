# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/13 00:27:45
# @Author : Kariko Lin

"""
Basically INI structure: a dict of sections, each a dict of `str: str`.

Pairs placed before any `[...]` header live in the section named `''`,
which is also what an explicit `[]` header refers to.
Neither sections nor keys promise any particular order.
"""

from collections.abc import Iterator, Mapping, MutableMapping
from re import compile as regex

from .consts import ROOT_SECTION
from .diagnostics import IniIntegerError, IniLookupError, LookupResult

_INTEGER = regex(r'[+-]?[0-9]+')


class IniSection(MutableMapping[str, str]):
    """View over the pairs of one section.

    The underlying dict is shared with the owning `IniDocument`,
    so writes through the view land in the document.
    """

    def __init__(self, section_name: str, /, this_dict: dict[str, str]) -> None:
        self._name = section_name
        self._data = this_dict

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def to_dict(self) -> dict[str, str]:
        return self._data.copy()


class IniDocument(MutableMapping[str, IniSection]):
    """A whole INI file, in memory.

    Lookups never raise or log: `get_value()` and `get_int()` return a
    `LookupResult`, it's up to the caller to report `result.error`.
    Item access (`doc['a']['b']`) behaves like plain dicts and raises
    `KeyError` instead.
    """

    def __init__(
        self, sections: Mapping[str, Mapping[str, str]] | None = None
    ) -> None:
        self.__raw_dicts: dict[str, dict[str, str]] = {}
        if sections:
            for name, pairs in sections.items():
                self[name] = pairs

    @property
    def sections(self) -> dict[str, dict[str, str]]:
        """Copy of every section and its pairs, detached from the document."""
        return {k: v.copy() for k, v in self.__raw_dicts.items()}

    @property
    def header(self) -> IniSection:
        """Pairs not belonging to any named section."""
        return self.setdefault(ROOT_SECTION, {})

    def __getitem__(self, key: str) -> IniSection:
        return IniSection(key, self.__raw_dicts[key])

    def __setitem__(
        self,
        key: str,
        value: IniSection | Mapping[str, str]
    ) -> None:
        # shouldn't keep ptr to external dict in key setting operation.
        self.__raw_dicts[key] = (
            value.to_dict()
            if isinstance(value, IniSection)
            else dict(value)
        )

    def __delitem__(self, key: str) -> None:
        del self.__raw_dicts[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw_dicts

    def __len__(self) -> int:
        return len(self.__raw_dicts)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw_dicts)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.__raw_dicts!r})'

    def setdefault(
        self, key: str, default: IniSection | Mapping[str, str] = {},
    ) -> IniSection:
        if key not in self:
            self[key] = default
        return self[key]

    def get_value(self, section: str, key: str) -> LookupResult:
        pairs = self.__raw_dicts.get(section)
        if pairs is None or key not in pairs:
            return LookupResult(error=IniLookupError(section, key))
        return LookupResult(value=pairs[key])

    def get_int(self, section: str, key: str) -> LookupResult:
        found = self.get_value(section, key)
        if not found.ok:
            return found
        if not _INTEGER.fullmatch(found.value):
            return LookupResult(
                error=IniIntegerError(section, key, found.value))
        return LookupResult(value=int(found.value, 10))

    def set_value(self, section: str, key: str, value: str) -> None:
        self.__raw_dicts.setdefault(section, {})[key] = value

    def merge(self, another: Mapping[str, Mapping[str, str]]) -> None:
        """Merge `another` into self, pair by pair. Latter wins."""
        for name, pairs in another.items():
            self.__raw_dicts.setdefault(name, {}).update(pairs)

    @staticmethod
    def __section2str(
        name: str, pairs: dict[str, str], delimiter: str = '='
    ) -> str:
        ret = '' if name == ROOT_SECTION else f'[{name}]\n'
        for k, v in pairs.items():
            ret += f'{k}{delimiter}{v}\n'
        return ret

    def dumps(self, *, delimiter: str = '=', blank_lines: int = 1) -> str:
        """Serialize to INI text.

        Headless pairs come first. Sections without pairs are dropped.
        Nothing gets escaped, so keys or values holding `=`, `[`, `;`, `#`
        or newlines won't survive a round trip.
        """
        names = sorted(self.__raw_dicts, key=lambda x: x != ROOT_SECTION)
        return ''.join(
            self.__section2str(i, self.__raw_dicts[i], delimiter)
            + '\n' * blank_lines
            for i in names if self.__raw_dicts[i]
        )

    def __str__(self) -> str:
        return self.dumps()
