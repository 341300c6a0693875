# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/13 01:05:12
# @Author : Kariko Lin

"""Read and write plain INI files.

Syntax understood by `parse()`, line by line:

    ; comment           # also a comment
    [section]
    key = value

Lines may be indented with spaces or tabs. A key must start with an
ASCII letter; a line opening with anything else (digits, `=`, `]` ...)
stops the parse right there.

Problems never raise. They are logged and collected into
`ParseResult.diagnostics`, and whatever was understood so far
is still handed back as a document.
"""

import logging
from dataclasses import dataclass, field
from io import StringIO, TextIOBase

import chardet

from ..abstract import FileHandler
from .consts import (
    BLANK_MARKS,
    COMMENT_MARKS,
    IDENTIFIER_START,
    ROOT_SECTION,
    IniMark
)
from .cursor import Cursor
from .diagnostics import Diagnostic, DiagnosticKind
from .model import IniDocument
from .scanner import read_section_name, read_variable, skip_comment


@dataclass
class ParseResult:
    document: IniDocument
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Well-formedness: `False` once anything went wrong."""
        return not self.diagnostics

    def report(self, diag: Diagnostic) -> None:
        logging.error(diag.message)
        self.diagnostics.append(diag)


def parse(text: str) -> ParseResult:
    ret = ParseResult(IniDocument())
    cursor = Cursor(text)
    section = ROOT_SECTION

    while not cursor.eof:
        match cursor.current:
            case c if c in COMMENT_MARKS:
                skip_comment(cursor)
            case IniMark.NEWLINE:
                cursor.advance()
            case c if c in BLANK_MARKS:
                cursor.advance()
            case IniMark.SECTION_BEGIN:
                match read_section_name(cursor):
                    case Diagnostic() as diag:
                        ret.report(diag)
                        # a broken header still switches away
                        # from the previous section.
                        section = ROOT_SECTION
                    case name:
                        section = name
                cursor.advance()  # `]`, or the newline cutting it short.
            case c if c in IDENTIFIER_START:
                match read_variable(cursor):
                    case Diagnostic() as diag:
                        ret.report(diag)
                    case (key, value):
                        ret.document.set_value(section, key, value)
            case c:
                ret.report(Diagnostic(
                    kind=DiagnosticKind.UNRECOGNIZED_CHARACTER,
                    line=cursor.line,
                    text=c))
                cursor.advance()
                break

    return ret


class IniParser(FileHandler[IniDocument]):
    def __init__(self, filename: str, encoding: str | None = None) -> None:
        super().__init__(filename)
        self._codec = encoding

    @staticmethod
    def readstream(buf: TextIOBase) -> ParseResult:
        """读取解码好的字符串流。

        如没有特殊需求，直接调用`self.read()`便是。
        """
        text = buf.read().replace('\r\n', '\n').replace('\r', '\n')
        return parse(text)

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}
        logging.info(f'Decoding "{filename}" as {codec["encoding"]}')

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            buf = raw.decode('gbk')
        return StringIO(buf)

    def read_result(self) -> ParseResult:
        """Like `read()`, but keeps the diagnostics too."""
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            with open(self._fn, 'r', encoding=self._codec) as fp:
                return self.readstream(fp)
        except UnicodeDecodeError:
            return self.readstream(self._decode_file(self._fn))
        except OSError as e:
            logging.error(f'Failed to open file "{self._fn}": {e}')
            raise

    def read(self) -> IniDocument:
        """读取`IniParser`实例指定的文件。

        Malformed files still give a (partial) document.
        Check `read_result().ok` if that matters.
        """
        return self.read_result().document

    def readfiles(self, *others: str) -> ParseResult:
        """Read this file, then each of `others` on top of it.

        Pairs read later override earlier ones;
        diagnostics of all files are kept, in reading order.
        """
        ret = self.read_result()
        for i in others:
            cur = IniParser(i, self._codec).read_result()
            ret.document.merge(cur.document)
            ret.diagnostics.extend(cur.diagnostics)
        return ret

    def write(
        self, instance: IniDocument, *,
        delimiter: str = '=',
        blank_lines: int = 1
    ) -> None:
        """保存到*一个* INI 文件。

        注：注释、键值对顺序不会保留。
        """
        with open(self._fn, 'w', encoding=self._codec) as fp:
            fp.write(instance.dumps(
                delimiter=delimiter, blank_lines=blank_lines))

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"
