"""Event handlers for a SAX-like JSON scanner."""

from __future__ import annotations

from typing import Any

from .writer import Writer, get_log_writer


class Handler:
    """Receives the events of a JSON scan; every event is ignored by default."""

    def start_object(self) -> None:
        """An object begins."""

    def end_object(self) -> None:
        """An object ends."""

    def start_array(self) -> None:
        """An array begins."""

    def end_array(self) -> None:
        """An array ends."""

    def key(self, text: str) -> None:
        """A member name of an object was read."""

    def string_value(self, text: str) -> None:
        """A string value was read."""

    def number_value(self, text: str) -> None:
        """A number was read; ``text`` holds it as written."""

    def boolean_value(self, value: bool) -> None:
        """A ``true`` or ``false`` literal was read."""

    def null_value(self) -> None:
        """A ``null`` literal was read."""

    def error(self, message: str, position: int) -> None:
        """The scan failed at ``position`` for the reason in ``message``."""


class SimpleHandler(Handler):
    """Logs every event, indented four spaces per level of nesting."""

    def __init__(self, writer: Writer | None = None) -> None:
        self.writer = writer
        self.depth = 0

    def _line(self, fmt: str, *args: Any) -> None:
        target = self.writer if self.writer is not None else get_log_writer()
        target.write_trailer()
        target.write_spaces(self.depth * 4)
        target.sprintf(fmt, *args)
        target.write_lf()

    def _info(self, label: str, text: str) -> None:
        target = self.writer if self.writer is not None else get_log_writer()
        target.write_trailer()
        target.write_spaces(self.depth * 4)
        target.write_text(label)
        target.write_text(text)
        target.write_lf()

    def start_object(self) -> None:
        self._line("start_object")
        self.depth += 1

    def end_object(self) -> None:
        self.depth -= 1
        self._line("end_object")

    def start_array(self) -> None:
        self._line("start_array")
        self.depth += 1

    def end_array(self) -> None:
        self.depth -= 1
        self._line("end_array")

    def key(self, text: str) -> None:
        self._info("key:", text)

    def string_value(self, text: str) -> None:
        self._info("val(string):", text)

    def number_value(self, text: str) -> None:
        self._info("val (number):", text)

    def boolean_value(self, value: bool) -> None:
        self._line("val (boolean): $", bool(value))

    def null_value(self) -> None:
        self._line("val (null_value)")

    def error(self, message: str, position: int) -> None:
        self._line("ERROR at $: $", position, message)