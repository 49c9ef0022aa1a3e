import io

from s3al.terminal.lineinput import LineInput


def _make(prompt="$ "):
    stream = io.StringIO()
    return LineInput(stream, (lambda: prompt) if prompt is not None else None), stream


def test_display_cursor_at_end():
    line, stream = _make()
    line.display("abc", 3)
    assert stream.getvalue() == "\r\x1b[2K$ abc"


def test_display_cursor_inside_moves_cursor():
    line, stream = _make()
    line.display("abc", 1)
    assert stream.getvalue() == "\r\x1b[2K$ abc\r\x1b[3C"


def test_display_without_prompt():
    line, stream = _make(prompt=None)
    line.display("abc", 0)
    assert stream.getvalue() == "\r\x1b[2Kabc"


def test_start_reading_resets_state():
    line, _ = _make()
    line.update("old", 2)
    line.start_reading()
    assert line.snapshot() == ("", 0)
    assert line.is_reading is True
    line.stop_reading()
    assert line.is_reading is False


def test_char_input_inserts_at_cursor():
    line, stream = _make()
    result = line.handle_char_input("x", "ab", 1)
    assert result == ("axb", 2)
    assert line.snapshot() == result
    assert stream.getvalue().startswith("\r\x1b[2K$ axb")


def test_backspace_removes_before_cursor():
    line, _ = _make()
    assert line.handle_backspace("abc", 3) == ("ab", 2)
    assert line.snapshot() == ("ab", 2)


def test_backspace_at_start_does_nothing():
    line, stream = _make()
    assert line.handle_backspace("abc", 0) is None
    assert line.handle_backspace("", 0) is None
    assert stream.getvalue() == ""


def test_cursor_movement():
    line, stream = _make()
    line.update("abc", 2)
    assert line.handle_cursor_movement("D", 2, 3) == 1
    assert stream.getvalue() == "\x1b[D"
    assert line.snapshot() == ("abc", 1)
    assert line.handle_cursor_movement("C", 1, 3) == 2
    assert line.snapshot() == ("abc", 2)


def test_cursor_movement_at_bounds():
    line, stream = _make()
    assert line.handle_cursor_movement("C", 3, 3) is None
    assert line.handle_cursor_movement("D", 0, 3) is None
    assert line.handle_cursor_movement("Z", 1, 3) is None
    assert stream.getvalue() == ""


def test_redraw_and_clear_only_while_reading():
    line, stream = _make()
    line.update("ls", 2)
    line.redraw()
    line.clear_line()
    assert stream.getvalue() == ""

    line.start_reading()
    line.update("ls", 2)
    line.clear_line()
    line.redraw()
    assert stream.getvalue() == "\r\x1b[2K\r\x1b[2K$ ls"