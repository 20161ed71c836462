"""Small containers: an insertion-ordered map, a stack and a bit-flag set."""

from __future__ import annotations

from typing import Any, Generic, Iterator, TypeVar

from .writer import Writer, get_log_writer

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")

_MISSING = object()


def _line(writer: Writer | None, space: int, fmt: str, *args: Any) -> None:
    target = writer if writer is not None else get_log_writer()
    target.write_trailer()
    target.write_spaces(space)
    target.sprintf(fmt, *args)
    target.write_lf()


class OrderedMap(Generic[K, V]):
    """A map that keeps insertion order and compares keys with ``==``.

    Lookups are linear, so keys need not be hashable; meant for small data.
    """

    def __init__(self) -> None:
        self._items: list[tuple[K, V]] = []

    def _index(self, key: K) -> int:
        return next((i for i, (k, _) in enumerate(self._items) if k == key), -1)

    def find(self, key: K) -> V | None:
        """The value stored under ``key``, or None."""
        index = self._index(key)
        return None if index < 0 else self._items[index][1]

    def contains(self, key: K) -> bool:
        return self._index(key) >= 0

    def get(self, key: K, default: V | None = None) -> V | None:
        index = self._index(key)
        return default if index < 0 else self._items[index][1]

    def at(self, key: K) -> V:
        """The value stored under ``key``; KeyError if there is none."""
        index = self._index(key)
        if index < 0:
            raise KeyError(key)
        return self._items[index][1]

    def replace(self, key: K, value: V) -> bool:
        """Replace the value of an existing key; False if the key is absent."""
        index = self._index(key)
        if index < 0:
            return False
        self._items[index] = (self._items[index][0], value)
        return True

    def insert(self, key: K, value: V) -> bool:
        """Append a new pair; an existing key is left untouched and False returned."""
        if self.contains(key):
            return False
        self._items.append((key, value))
        return True

    def add(self, key: K, value: V) -> None:
        """Insert ``key`` or replace its value if it is already present."""
        if not self.replace(key, value):
            self._items.append((key, value))

    def show(self, writer: Writer | None = None, space: int = 0) -> None:
        _line(writer, space, "PMap, size:$", len(self))
        for key, value in self._items:
            _line(writer, space + 4, "[$] = '$'", key, value)

    def items(self) -> Iterator[tuple[K, V]]:
        return iter(list(self._items))

    def keys(self) -> Iterator[K]:
        return (k for k, _ in list(self._items))

    def values(self) -> Iterator[V]:
        return (v for _, v in list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[tuple[K, V]]:
        return self.items()

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def __getitem__(self, key: K) -> V:
        return self.at(key)

    def __setitem__(self, key: K, value: V) -> None:
        self.add(key, value)

    def __repr__(self) -> str:
        return f"OrderedMap({self._items!r})"


class Stack(Generic[T]):
    """A last-in, first-out stack."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, value: T) -> None:
        self._items.append(value)

    def pop(self) -> bool:
        """Drop the top element; False if the stack was already empty."""
        if not self._items:
            return False
        self._items.pop()
        return True

    def top(self) -> T:
        """The top element; IndexError if the stack is empty."""
        if not self._items:
            raise IndexError("stack already empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def show(self, writer: Writer | None = None, space: int = 0) -> None:
        _line(writer, space, "Stack, count:$", len(self))
        for index, value in enumerate(self._items):
            _line(writer, space + 4, "[$]=$", index, value)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"


class Bits:
    """A set of bit flags held in an unsigned integer of fixed width."""

    __slots__ = ("_flags", "width")

    def __init__(self, value: int = 0, width: int = 32) -> None:
        if width < 1:
            raise ValueError("width must be at least 1")
        self.width = width
        self._flags = self._mask(value)

    def _mask(self, value: int) -> int:
        return value & ((1 << self.width) - 1)

    @property
    def flags(self) -> int:
        return self._flags

    @flags.setter
    def flags(self, value: int) -> None:
        self._flags = self._mask(value)

    def set_flag(self, bit: int, flag: bool = True) -> bool:
        """Set or clear ``bit``; True if the flags changed."""
        before = self._flags
        if flag:
            self._flags = self._mask(self._flags | bit)
        else:
            self._flags = self._mask(self._flags & ~bit)
        return before != self._flags

    def set_all_flags(self, bits: int) -> None:
        self._flags = self._mask(self._flags | bits)

    def reset_flags(self) -> None:
        self._flags = 0

    def toggle_flag(self, bit: int) -> bool:
        """Flip ``bit`` and return whether it is now set."""
        self._flags = self._mask(self._flags ^ bit)
        return self.is_flag(bit)

    def clear_bits(self, bits: int) -> None:
        self._flags = self._mask(self._flags & ~bits)

    def set_bit_number(self, number: int, flag: bool = True) -> None:
        if not 0 <= number < self.width:
            raise ValueError(f"bit number {number} outside 0..{self.width - 1}")
        self.set_flag(1 << number, flag)

    def is_flag(self, bit: int) -> bool:
        return bit != 0 and (self._flags & bit) == bit

    def and_flag(self, bit: int) -> int:
        return self._flags & bit

    def is_zero(self) -> bool:
        return self._flags == 0

    def __bool__(self) -> bool:
        return self._flags != 0

    def __int__(self) -> int:
        return self._flags

    def __contains__(self, bit: int) -> bool:
        return self.is_flag(bit)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Bits):
            return self._flags == other._flags
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._flags)

    def __repr__(self) -> str:
        return f"Bits({self._flags:#x}, width={self.width})"