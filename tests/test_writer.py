import io
import re

import pytest

from powertools.textformat import format_float
from powertools.writer import (
    CallbackWriter,
    ConsoleWriter,
    NullWriter,
    get_log_writer,
    pp,
    set_log_writer,
)


def _capture():
    stream = io.StringIO()
    writer = ConsoleWriter(stream)
    writer.flag_write_trailer = False
    return writer, stream


class Thing:
    def to_writer(self, writer):
        writer.sprintf("thing{$}", 7)


class Named:
    def to_string(self):
        return "named"


@pytest.fixture
def console():
    stream = io.StringIO()
    writer = ConsoleWriter(stream)
    ConsoleWriter.set_write_header(False)
    previous = set_log_writer(writer)
    yield writer, stream
    set_log_writer(previous)


def test_line_endings():
    w, stream = _capture()
    w.write_lf()
    w.write_crlf()
    assert stream.getvalue() == "\n\r\n"


def test_write_char_and_spaces():
    w, stream = _capture()
    w.write_char("x")
    w.write_spaces(4)
    w.write_spaces(0)
    assert stream.getvalue() == "x" + " " * 4
    with pytest.raises(ValueError):
        w.write_char("xy")


def test_write_values():
    w, stream = _capture()
    w.write(True)
    w.write(False)
    w.write(None)
    assert stream.getvalue() == "truefalsenullptr"


def test_write_numbers_match_formatter():
    w, stream = _capture()
    w.write(3.14159)
    w.write(2.5, 3)
    w.write(42)
    assert stream.getvalue() == format_float(3.14159, 2) + format_float(2.5, 3) + str(42)


def test_write_objects():
    w, stream = _capture()
    w.write(Named())
    w.write(Thing())
    assert stream.getvalue() == "named" + "thing{7}"


def test_sprintf_pinned():
    w, stream = _capture()
    w.sprintf("x:$ y:$", 1, "b")
    assert stream.getvalue() == "x:1 y:b"


def test_sprintf_without_args_is_literal():
    w, stream = _capture()
    w.sprintf("cost $5 and $")
    assert stream.getvalue() == "cost $5 and $"


def test_sprintf_missing_args_keep_placeholder():
    w, stream = _capture()
    w.sprintf("$-$", "a")
    assert stream.getvalue() == "a-$"


def test_sprint_lf_and_crlf():
    w, stream = _capture()
    w.sprint_lf("a$", "b")
    w.sprint_crlf()
    assert stream.getvalue() == "ab\n\r\n"


def test_null_writer_counts_bytes():
    w = NullWriter()
    w.write_text("abc")
    w.write("ä")
    assert w.count_bytes_written == 3 + len("ä".encode("utf-8"))


def test_callback_writer():
    sent = []
    w = CallbackWriter()
    w.write_text("lost")
    assert sent == []
    w.set_context("conn", lambda conn, data: sent.append((conn, data)))
    w.sprintf("v=$", 5)
    assert b"".join(d for _, d in sent) == b"v=5"
    assert all(conn == "conn" for conn, _ in sent)


def test_console_trailer_counts():
    w = ConsoleWriter(io.StringIO())
    first = w.update_trailer()
    second = w.update_trailer()
    assert re.sub(r"\d", "0", first) == "[000000] "
    assert int(second[1:7]) == int(first[1:7]) + 1
    assert w.trailer == second


def test_console_trailer_with_time():
    w = ConsoleWriter(io.StringIO())
    w.flag_write_time = True
    trailer = w.update_trailer()
    assert re.sub(r"\d", "0", trailer) == "[000000] [00:00:00,000] "


def test_console_header_written_once():
    stream = io.StringIO()
    w = ConsoleWriter(stream)
    ConsoleWriter.set_write_header(True)
    try:
        w.write_trailer()
        w.write_trailer()
    finally:
        ConsoleWriter.set_write_header(False)
    assert stream.getvalue().count("PID:") == 1


def test_console_no_trailer():
    stream = io.StringIO()
    w = ConsoleWriter(stream)
    w.flag_write_trailer = False
    w.write_trailer()
    w.write_text("plain")
    assert stream.getvalue() == "plain"


def test_pp_format(console):
    writer, stream = console
    pp("hello $", 5)
    assert re.sub(r"\d", "0", stream.getvalue()) == "[000000] hello 0\n"
    assert stream.getvalue().endswith("] hello 5\n")


def test_pp_indent_and_empty(console):
    writer, stream = console
    writer.flag_write_trailer = False
    pp(4, "x")
    pp()
    assert stream.getvalue() == "    x\n\n"


def test_pp_rejects_non_text(console):
    writer, stream = console
    with pytest.raises(TypeError):
        pp(5)
    assert stream.getvalue() == ""


def test_set_log_writer_returns_previous(console):
    writer, _ = console
    other, other_stream = _capture()
    previous = set_log_writer(other)
    try:
        assert previous is writer
        assert get_log_writer() is other
        pp("a$", 1)
        assert other_stream.getvalue() == "a1\n"
    finally:
        set_log_writer(previous)