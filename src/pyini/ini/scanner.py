# -*- encoding: utf-8 -*-
# @File   : scanner.py
# @Time   : 2024/10/12 22:14:36
# @Author : Kariko Lin

"""Token producers for the INI driver.

Each producer takes the cursor sitting on the first character of its token,
consumes up to (but not including) the terminating newline,
and returns either the token or a `Diagnostic`.
None of them touches the document, and none of them raises.
"""

from .consts import IniMark, TRIM_CHARS
from .cursor import Cursor
from .diagnostics import Diagnostic, DiagnosticKind


def skip_comment(cursor: Cursor) -> None:
    """Consume a `;` or `#` comment. The newline is left for the driver."""
    while not cursor.eof and cursor.current != IniMark.NEWLINE:
        cursor.advance()


def read_section_name(cursor: Cursor) -> str | Diagnostic:
    """Read `[name]` with the cursor on `[`.

    On success the cursor stops on `]`, otherwise on the newline
    (or end of input) which cut the header short.
    The name is returned verbatim, `[]` gives an empty name.
    """
    cursor.advance()  # [
    begin = cursor.position
    while not cursor.eof and cursor.current not in (
        IniMark.SECTION_END, IniMark.NEWLINE
    ):
        cursor.advance()

    if cursor.current != IniMark.SECTION_END:
        return Diagnostic(
            kind=DiagnosticKind.MISSING_SECTION_TERMINATOR,
            line=cursor.line,
            text=cursor.slice(begin))
    return cursor.slice(begin)


def read_variable(cursor: Cursor) -> tuple[str, str] | Diagnostic:
    """Read `key = value` with the cursor on the first key letter.

    Both sides get trimmed of ASCII whitespace.
    Everything after the first `=` belongs to the value,
    so `a = b = c` gives `('a', 'b = c')`.
    """
    begin = cursor.position
    while not cursor.eof and cursor.current not in (
        IniMark.ASSIGN, IniMark.NEWLINE
    ):
        cursor.advance()

    if cursor.current != IniMark.ASSIGN:
        return Diagnostic(
            kind=DiagnosticKind.MISSING_ASSIGNMENT_OPERATOR,
            line=cursor.line,
            text=cursor.slice(begin).strip(TRIM_CHARS))
    name = cursor.slice(begin)

    cursor.advance()  # =
    begin = cursor.position
    while not cursor.eof and cursor.current != IniMark.NEWLINE:
        cursor.advance()
    value = cursor.slice(begin)

    return name.strip(TRIM_CHARS), value.strip(TRIM_CHARS)
