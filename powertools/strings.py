"""Read-only text views, growable text buffers and fixed-capacity buffers."""

from __future__ import annotations

import random
import re
import string
from abc import ABC, abstractmethod
from typing import Union

from .textformat import is_flag, is_string
from .writer import Writer

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

TextLike = Union[str, "AbstractText"]


def _plain(other: TextLike | None) -> str | None:
    if other is None or isinstance(other, str):
        return other
    return other.data


class AbstractText(ABC):
    """Search, compare and convert operations shared by all text types."""

    @property
    @abstractmethod
    def data(self) -> str | None:
        """The characters held, or None if there is no text at all."""

    @property
    def size(self) -> int:
        return len(self.data or "")

    def is_valid(self) -> bool:
        return self.data is not None

    def empty(self) -> bool:
        return not self.data

    def __len__(self) -> int:
        return self.size

    def __bool__(self) -> bool:
        return self.is_valid()

    def __str__(self) -> str:
        return self.data or ""

    def starts_with(self, part: str) -> bool:
        return self.data is not None and part is not None and self.data.startswith(part)

    def contains(self, part: str) -> bool:
        return self.data is not None and part is not None and part in self.data

    def find(self, search: str, pos: int = 0) -> int:
        """Index of ``search`` at or after ``pos``, or -1."""
        if self.data is None or search is None:
            return -1
        if pos >= self.size:
            return -1
        return self.data.find(search, pos)

    def find_backwards(self, search: str) -> int:
        """Index of the last occurrence of ``search``, or -1."""
        if self.data is None or search is None:
            return -1
        return self.data.rfind(search)

    def find_first_of(self, chars: str, pos: int = 0) -> int:
        """Index of the first character at or after ``pos`` that is in ``chars``."""
        if chars is None or self.data is None or pos >= self.size:
            return -1
        return next(
            (i for i, ch in enumerate(self.data[pos:], start=pos) if ch in chars), -1
        )

    def find_first_not_of(self, chars: str, pos: int = 0) -> int:
        """Index of the first character at or after ``pos`` not in ``chars``."""
        if chars is None or self.data is None or pos >= self.size:
            return -1
        return next(
            (i for i, ch in enumerate(self.data[pos:], start=pos) if ch not in chars), -1
        )

    def equals(self, other: TextLike | None) -> bool:
        text = _plain(other)
        if text is None:
            return False
        return (self.data or "") == text

    def equals_ignore_case(self, other: TextLike | None) -> bool:
        text = _plain(other)
        if text is None:
            return False
        return (self.data or "").lower() == text.lower()

    def _part(self, pos: int, length: int | None) -> str | None:
        if not self.data or pos >= self.size:
            return None
        end = None if length is None else pos + length
        return self.data[pos:end]

    def to_int(self, pos: int = 0, length: int | None = None) -> int:
        """Leading integer of the part; -1 if the position is out of range."""
        part = self._part(pos, length)
        if part is None:
            return -1
        match = _INT_PREFIX.match(part)
        return int(match.group()) if match else 0

    def to_float(self, pos: int = 0, length: int | None = None) -> float:
        """Leading number of the part; -1.0 if the position is out of range."""
        part = self._part(pos, length)
        if part is None:
            return -1.0
        match = _FLOAT_PREFIX.match(part)
        return float(match.group()) if match else 0.0

    def to_bool(self, pos: int = 0, length: int | None = None) -> bool:
        part = self._part(pos, length)
        return part is not None and is_flag(part)

    def get_view(self, pos: int = 0, count: int | None = None) -> StringView:
        """A view of up to ``count`` characters from ``pos``."""
        if pos >= self.size:
            return StringView()
        end = None if count is None else pos + count
        return StringView((self.data or "")[pos:end])

    def find_view(self, search: str) -> StringView:
        """A view from the first occurrence of ``search`` to the end."""
        pos = self.find(search)
        if pos < 0:
            return StringView()
        return StringView((self.data or "")[pos:])

    def file_extension(self) -> StringView:
        """The text after the last dot, or an empty view."""
        pos = self.find_backwards(".")
        if pos > 0:
            return self.get_view(pos + 1)
        return StringView()

    def is_file_extension(self, *args: str) -> bool:
        return is_string(self.data, *args)

    def to_writer(self, writer: Writer) -> None:
        if self.data is None:
            writer.write_text("nullptr")
        else:
            writer.write_text(self.data)


class StringView(AbstractText):
    """An immutable piece of text; a view without text is invalid."""

    __slots__ = ("_data",)

    def __init__(self, text: str | None = None, size: int | None = None) -> None:
        if text is not None and size is not None:
            text = text[:size]
        self._data = text

    @property
    def data(self) -> str | None:
        return self._data

    @classmethod
    def up_to_line_end(cls, text: str | None) -> StringView:
        """A view of ``text`` up to its first CR or LF."""
        if text is None:
            return cls()
        return cls(re.split(r"[\r\n]", text, maxsplit=1)[0])

    def to_buffer(self) -> TextBuffer:
        buffer = TextBuffer()
        buffer.write_text(self.data or "")
        return buffer

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StringView) and other.data is None and self.data is None:
            return True
        if isinstance(other, (str, AbstractText)):
            return self.equals(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.data)

    def __repr__(self) -> str:
        return f"StringView({self.data!r})"


class TextBuffer(AbstractText, Writer):
    """A growable text that is also a writer; empty until first written."""

    def __init__(self, text: str | None = None) -> None:
        self._data: str | None = None
        if text:
            self.write_text(text)

    @property
    def data(self) -> str | None:
        return self._data

    def _store(self, text: str) -> None:
        self._data = text

    def write_text(self, text: str) -> None:
        if text:
            self._store((self._data or "") + text)

    def assign(self, text: str) -> None:
        if text is None:
            raise TypeError("cannot assign None")
        self._data = None
        self._store(text)

    def append(self, text: str) -> None:
        if text is None:
            raise TypeError("cannot append None")
        self._store((self._data or "") + text)

    def clear(self) -> None:
        self._data = None

    def insert_at(self, pos: int, part: str) -> None:
        current = self._data or ""
        if pos < 0 or pos > len(current):
            raise IndexError(f"insert position {pos} outside 0..{len(current)}")
        self._store(current[:pos] + part + current[pos:])

    def remove_chars(self, pos: int, count: int = 1) -> None:
        current = self._data or ""
        if pos < 0 or pos >= len(current):
            raise IndexError(f"remove position {pos} outside text of size {len(current)}")
        self._store(current[:pos] + current[pos + count:])

    def remove_first_found_char(self, pos: int, ch: str) -> bool:
        """Remove the first ``ch`` at or after ``pos``; True if one was removed."""
        index = self.find(ch, pos)
        if index < 0:
            return False
        self.remove_chars(index)
        return True

    def remove_from_end_crlf(self) -> None:
        if self._data:
            self._store(self._data.rstrip("\r\n\0"))

    def fill_with_random_letters(self, count: int, rng: random.Random | None = None) -> None:
        source = rng if rng is not None else random
        self.write_text("".join(source.choice(string.ascii_uppercase) for _ in range(count)))

    def to_string(self) -> str:
        return self._data or ""

    def __getitem__(self, index: int) -> str:
        if self._data is None:
            raise IndexError("text buffer holds no text")
        if not 0 <= index < len(self._data):
            raise IndexError(f"index {index} >= size {len(self._data)}")
        return self._data[index]

    def __lshift__(self, value: object) -> TextBuffer:
        self.write(value)
        return self

    def __iadd__(self, other: TextLike) -> TextBuffer:
        self.append(_plain(other) or "")
        return self

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (str, AbstractText)):
            return self._data is not None and _plain(other) is not None and self.equals(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"


class FixedText(TextBuffer):
    """A text buffer of fixed capacity; one slot is kept for the terminator.

    Text beyond ``capacity - 1`` characters is dropped.
    """

    def __init__(self, text: str | None = None, capacity: int = 128) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        super().__init__()
        self._data = ""
        if text:
            self.write_text(text)

    def _store(self, text: str) -> None:
        self._data = text[: self.capacity - 1]

    def write_text(self, text: str) -> None:
        if text:
            self._store((self._data or "") + text)

    def reset(self) -> None:
        self._data = ""

    def clear(self) -> None:
        self.reset()