# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 20:38:02
# @Author : Kariko Lin

import logging
from io import TextIOBase

from .ini import (
    Diagnostic,
    DiagnosticKind,
    IniDocument,
    IniIntegerError,
    IniLookupError,
    IniParser,
    IniSection,
    IniYamlParser,
    LookupResult,
    ParseResult,
    parse
)

__all__ = [
    'IniDocument', 'IniSection', 'IniParser', 'IniYamlParser',
    'ParseResult', 'Diagnostic', 'DiagnosticKind', 'LookupResult',
    'IniLookupError', 'IniIntegerError',
    'parse', 'load', 'loads', 'dump', 'dumps'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')


def loads(text: str) -> ParseResult:
    """Parse INI `text`. See `ParseResult.ok` for well-formedness."""
    return parse(text)


def load(fp: TextIOBase) -> ParseResult:
    """Parse an INI text stream, e.g. a file opened in text mode."""
    return IniParser.readstream(fp)


def dumps(doc: IniDocument, **kwargs) -> str:
    """Serialize `doc`. Keywords go to `IniDocument.dumps()`."""
    return doc.dumps(**kwargs)


def dump(doc: IniDocument, fp: TextIOBase, **kwargs) -> None:
    fp.write(doc.dumps(**kwargs))
