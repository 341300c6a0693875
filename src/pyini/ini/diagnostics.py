# -*- encoding: utf-8 -*-
# @File   : diagnostics.py
# @Time   : 2024/10/12 21:30:58
# @Author : Kariko Lin

"""Problems found while scanning an INI buffer or querying a document.

Parse problems are *reported*, never raised: the driver collects
`Diagnostic` records and keeps going wherever it can.
Document lookups hand back a `LookupResult` carrying either the value
or an exception instance the caller may raise at will.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple


class DiagnosticKind(Enum):
    MISSING_SECTION_TERMINATOR = 'expected ] for section end'
    MISSING_ASSIGNMENT_OPERATOR = 'expected = for variable assignment'
    UNRECOGNIZED_CHARACTER = 'unknown character'

    @property
    def recoverable(self) -> bool:
        return self is not DiagnosticKind.UNRECOGNIZED_CHARACTER


@dataclass(frozen=True, kw_only=True)
class Diagnostic:
    kind: DiagnosticKind
    line: int
    # the offending source text; for header/assignment problems
    # it's the partial token scanned before giving up.
    text: str = ''

    @property
    def recoverable(self) -> bool:
        return self.kind.recoverable

    @property
    def message(self) -> str:
        if self.kind is DiagnosticKind.UNRECOGNIZED_CHARACTER:
            return f'At line {self.line}: {self.kind.value} {self.text!r}'
        return f'At line {self.line}: {self.kind.value}'

    def __str__(self) -> str:
        return self.message


def _describe(section: str, key: str) -> str:
    ret = f'"{key}"'
    if section:
        ret += f' in section "{section}"'
    return ret


class IniLookupError(KeyError):
    """Requested section or key does not exist."""

    def __init__(self, section: str, key: str) -> None:
        super().__init__(section, key)
        self.section = section
        self.key = key

    def __str__(self) -> str:
        return f'Variable {_describe(self.section, self.key)} does not exist'


class IniIntegerError(ValueError):
    """A value was found but it is not a base-10 integer."""

    def __init__(self, section: str, key: str, value: str) -> None:
        super().__init__(section, key, value)
        self.section = section
        self.key = key
        self.value = value

    def __str__(self) -> str:
        return (
            'Failed to parse integer variable '
            f'{_describe(self.section, self.key)}: {self.value!r}')


class LookupResult(NamedTuple):
    value: Any = None
    error: IniLookupError | IniIntegerError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        if self.error is not None:
            raise self.error
        return self.value
