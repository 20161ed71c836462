"""Character writers with a type-safe ``$`` formatter and the ``pp`` logger."""

from __future__ import annotations

import datetime
import os
import sys
import threading
import time
from abc import ABC, abstractmethod
from typing import Any, Callable, TextIO

from .textformat import format_float, split_time

_START = time.monotonic()


def _milliseconds() -> int:
    return int((time.monotonic() - _START) * 1000)


class Writer(ABC):
    """Base class for everything that characters can be written to."""

    @abstractmethod
    def write_text(self, text: str) -> None:
        """Write a run of characters."""

    def write_char(self, ch: str) -> None:
        if len(ch) != 1:
            raise ValueError("write_char takes exactly one character")
        self.write_text(ch)

    def write_spaces(self, count: int) -> None:
        if count > 0:
            self.write_text(" " * count)

    def write_lf(self) -> None:
        self.write_text("\n")

    def write_crlf(self) -> None:
        self.write_text("\r\n")

    def write_trailer(self) -> None:
        """Hook written before each log line; plain writers add nothing."""

    def write(self, value: Any, decimals: int = 2) -> None:
        """Write any value: text, numbers, booleans, or objects that know how."""
        if value is None:
            self.write_text("nullptr")
        elif isinstance(value, bool):
            self.write_text("true" if value else "false")
        elif isinstance(value, str):
            self.write_text(value)
        elif isinstance(value, int):
            self.write_text(str(value))
        elif isinstance(value, float):
            self.write_text(format_float(value, decimals))
        elif callable(getattr(value, "to_writer", None)):
            value.to_writer(self)
        elif callable(getattr(value, "to_string", None)):
            self.write_text(value.to_string())
        else:
            self.write_text(str(value))

    def sprintf(self, fmt: str, *args: Any) -> None:
        """Write ``fmt`` with each ``$`` replaced by the next argument."""
        if not args:
            self.write_text(fmt)
            return
        values = iter(args)
        first, *pieces = fmt.split("$")
        if first:
            self.write_text(first)
        for piece in pieces:
            try:
                value = next(values)
            except StopIteration:
                self.write_text("$")
            else:
                self.write(value)
            if piece:
                self.write_text(piece)

    def sprint_lf(self, fmt: str = "", *args: Any) -> None:
        self.sprintf(fmt, *args)
        self.write_lf()

    def sprint_crlf(self, fmt: str = "", *args: Any) -> None:
        self.sprintf(fmt, *args)
        self.write_crlf()


class NullWriter(Writer):
    """Discards output but counts the UTF-8 bytes it would have written."""

    def __init__(self) -> None:
        self.count_bytes_written = 0

    def write_text(self, text: str) -> None:
        self.count_bytes_written += len(text.encode("utf-8"))


TxFunc = Callable[[Any, bytes], None]


class CallbackWriter(Writer):
    """Hands encoded output to a transmit function together with a connection."""

    def __init__(self, conn: Any = None, tx_func: TxFunc | None = None) -> None:
        self.conn = conn
        self.tx_func = tx_func
        self._lock = threading.Lock()

    def set_context(self, conn: Any, tx_func: TxFunc | None) -> None:
        self.conn = conn
        self.tx_func = tx_func

    def write_text(self, text: str) -> None:
        with self._lock:
            if self.tx_func is not None and self.conn is not None:
                self.tx_func(self.conn, text.encode("utf-8"))


class ConsoleWriter(Writer):
    """Writes to a text stream, prefixing log lines with a numbered trailer."""

    _header_written = False

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._lock = threading.Lock()
        self.flag_write_trailer = True
        self.flag_write_time = False
        self.counter = 0
        self.trailer = ""

    @classmethod
    def set_write_header(cls, flag: bool = True) -> None:
        """Choose whether the next trailer is preceded by a header line."""
        cls._header_written = not flag

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write_text(self, text: str) -> None:
        with self._lock:
            self.stream.write(text)

    def update_trailer(self) -> str:
        """Advance the message counter and build the next trailer."""
        self.counter += 1
        parts = [f"[{self.counter:06d}"]
        if self.flag_write_time:
            t = split_time(_milliseconds())
            parts.append(f"] [{t.hours:02d}:{t.minutes:02d}:{t.seconds:02d},{t.msec:03d}")
        parts.append("] ")
        self.trailer = "".join(parts)
        return self.trailer

    def write_trailer(self) -> None:
        if not self.flag_write_trailer:
            return
        if not ConsoleWriter._header_written:
            ConsoleWriter._header_written = True
            self._write_header()
        self.write_text(self.update_trailer())

    def _write_header(self) -> None:
        stamp = datetime.datetime.now().strftime("%Y-%m-%d, %H:%M:%S")
        self.write_text(self.update_trailer())
        self.write_text(f"powertools, {stamp}, PID:{os.getpid()}\n")


_log_writer: Writer = ConsoleWriter()


def set_log_writer(writer: Writer) -> Writer:
    """Install the writer used by :func:`pp` and return the previous one."""
    global _log_writer
    previous, _log_writer = _log_writer, writer
    return previous


def get_log_writer() -> Writer:
    return _log_writer


def pp(*args: Any) -> None:
    """Log one line: ``pp()``, ``pp(fmt, *values)`` or ``pp(space, fmt, *values)``."""
    writer = _log_writer
    if args:
        first = args[0]
        indented = (
            isinstance(first, int)
            and not isinstance(first, bool)
            and len(args) >= 2
            and isinstance(args[1], str)
        )
        if not indented and not isinstance(first, str):
            raise TypeError("pp() needs a format string")
    writer.write_trailer()
    if args:
        if indented:
            writer.write_spaces(args[0])
            writer.sprintf(args[1], *args[2:])
        else:
            writer.sprintf(args[0], *args[1:])
    writer.write_lf()