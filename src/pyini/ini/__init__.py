# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 20:49:16
# @Author : Kariko Lin

from .cursor import Cursor
from .diagnostics import (
    Diagnostic,
    DiagnosticKind,
    IniIntegerError,
    IniLookupError,
    LookupResult
)
from .export import IniYamlParser
from .model import IniDocument, IniSection
from .parser import IniParser, ParseResult, parse
from .scanner import read_section_name, read_variable, skip_comment
