import pytest

from pyini.ini import (
    Cursor,
    Diagnostic,
    DiagnosticKind,
    read_section_name,
    read_variable,
    skip_comment,
)


def cursor_at(text: str, offset: int) -> Cursor:
    cur = Cursor(text)
    for _ in range(offset):
        cur.advance()
    return cur


class TestSkipComment:
    @pytest.mark.parametrize("text", ["; note\nk=v", "# note\nk=v"])
    def test_stops_on_newline(self, text: str) -> None:
        cur = Cursor(text)

        skip_comment(cur)

        assert cur.current == "\n"
        assert cur.position == 6
        assert cur.line == 1

    def test_runs_to_end_of_input(self) -> None:
        cur = Cursor("; trailing")

        skip_comment(cur)

        assert cur.eof


class TestReadSectionName:
    def test_reads_name_and_stops_on_bracket(self) -> None:
        cur = Cursor("[General]\n")

        assert read_section_name(cur) == "General"
        assert cur.current == "]"

    def test_name_is_not_trimmed(self) -> None:
        assert read_section_name(Cursor("[ a b ]")) == " a b "

    def test_empty_header(self) -> None:
        assert read_section_name(Cursor("[]")) == ""

    def test_newline_before_bracket(self) -> None:
        cur = Cursor("[broken\nk=v")

        result = read_section_name(cur)

        assert isinstance(result, Diagnostic)
        assert result.kind is DiagnosticKind.MISSING_SECTION_TERMINATOR
        assert result.line == 1
        assert result.text == "broken"
        assert result.recoverable
        assert cur.current == "\n"

    def test_end_of_input_before_bracket(self) -> None:
        cur = Cursor("[broken")

        result = read_section_name(cur)

        assert isinstance(result, Diagnostic)
        assert cur.eof

    def test_reports_line_of_given_cursor(self) -> None:
        cur = cursor_at("\n\n[x", 2)

        result = read_section_name(cur)

        assert isinstance(result, Diagnostic)
        assert result.line == 3
        assert str(result) == "At line 3: expected ] for section end"


class TestReadVariable:
    def test_trims_both_sides(self) -> None:
        cur = Cursor("k =  v  \n")

        assert read_variable(cur) == ("k", "v")
        assert cur.current == "\n"

    def test_value_keeps_later_equals_signs(self) -> None:
        assert read_variable(Cursor("a = b = c")) == ("a", "b = c")

    def test_empty_value(self) -> None:
        cur = Cursor("k=")

        assert read_variable(cur) == ("k", "")
        assert cur.eof

    def test_trims_tabs_and_carriage_return(self) -> None:
        assert read_variable(Cursor("k\t=\tv\r\n")) == ("k", "v")

    def test_inline_comment_belongs_to_value(self) -> None:
        assert read_variable(Cursor("k = v ; c")) == ("k", "v ; c")

    def test_missing_assignment(self) -> None:
        cur = Cursor("x 1\ny=2")

        result = read_variable(cur)

        assert isinstance(result, Diagnostic)
        assert result.kind is DiagnosticKind.MISSING_ASSIGNMENT_OPERATOR
        assert result.text == "x 1"
        assert result.line == 1
        assert str(result) == "At line 1: expected = for variable assignment"
        assert cur.current == "\n"

    def test_starts_from_any_cursor(self) -> None:
        cur = cursor_at("junk\nname = value", 5)

        assert read_variable(cur) == ("name", "value")
        assert cur.line == 2
        assert cur.eof
