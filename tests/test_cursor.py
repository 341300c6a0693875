from pyini.ini import Cursor


class TestCursor:
    def test_starts_on_first_character(self) -> None:
        cur = Cursor("ab")

        assert cur.current == "a"
        assert cur.position == 0
        assert cur.line == 1
        assert not cur.eof

    def test_empty_buffer_is_eof(self) -> None:
        cur = Cursor("")

        assert cur.eof
        assert cur.current is None

    def test_line_counts_each_newline_once(self) -> None:
        cur = Cursor("a\n\nb")

        cur.advance()
        assert cur.current == "\n"
        assert cur.line == 1  # sitting on the newline, not past it

        cur.advance()
        assert cur.line == 2
        cur.advance()
        assert cur.current == "b"
        assert cur.line == 3

    def test_advancing_past_end_is_harmless(self) -> None:
        cur = Cursor("x")

        cur.advance()
        cur.advance()
        cur.advance()

        assert cur.eof
        assert cur.current is None
        assert cur.position == 3
        assert cur.line == 1

    def test_slice_uses_recorded_offsets(self) -> None:
        cur = Cursor("hello world")
        for _ in range(5):
            cur.advance()

        assert cur.slice(0) == "hello"
        assert cur.slice(6, 11) == "world"

    def test_reset_seek(self) -> None:
        cur = Cursor("a\nb")
        cur.advance()
        cur.advance()

        cur.reset_seek()

        assert cur.seekable
        assert cur.position == 0
        assert cur.line == 1
        assert cur.current == "a"
