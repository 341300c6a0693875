# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/10/12 20:52:40
# @Author : Kariko Lin

import string
from enum import Enum


class IniMark(str, Enum):
    SECTION_BEGIN = '['
    SECTION_END = ']'
    ASSIGN = '='
    COMMENT = ';'
    COMMENT_ALT = '#'
    NEWLINE = '\n'
    SPACE = ' '
    TAB = '\t'


COMMENT_MARKS = frozenset((IniMark.COMMENT.value, IniMark.COMMENT_ALT.value))
BLANK_MARKS = frozenset((IniMark.SPACE.value, IniMark.TAB.value))

# only ASCII, like C `isalpha()` / `isspace()` in the default locale.
IDENTIFIER_START = frozenset(string.ascii_letters)
TRIM_CHARS = string.whitespace

# the implicit section holding pairs before any `[...]` header.
ROOT_SECTION = ''
