"""Small text, number and time helpers shared by the rest of the package."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")

_MAC_LENGTH = 6
_TRUE_WORDS = frozenset({"true", "1", "yes", "on"})


@dataclass(frozen=True)
class PTime:
    """A millisecond count split into hours, minutes, seconds and milliseconds."""

    ms_absolute: int = 0
    sec_total: int = 0
    msec: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0


def split_time(ms: int) -> PTime:
    """Split an absolute millisecond count into its clock components."""
    if ms < 0:
        raise ValueError("milliseconds must not be negative")
    sec_total, msec = divmod(ms, 1000)
    hours, rest = divmod(sec_total, 3600)
    minutes, seconds = divmod(rest, 60)
    return PTime(
        ms_absolute=ms,
        sec_total=sec_total,
        msec=msec,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
    )


def format_float(value: float, decimals: int = 2) -> str:
    """Render a float with a fixed number of decimals."""
    if decimals < 0:
        raise ValueError("decimals must not be negative")
    return f"{value:.{decimals}f}"


def is_string(text: str | None, *args: str | None) -> bool:
    """Return True if ``text`` equals any of the candidates."""
    if text is None:
        return False
    return any(candidate is not None and candidate == text for candidate in args)


def is_flag(text: str | None) -> bool:
    """Return True if ``text`` spells a set flag such as ``true`` or ``1``."""
    if not text:
        return False
    return text.strip().lower() in _TRUE_WORDS


def compare_text(a: str, b: str) -> int:
    """Compare two strings: -1, 0 or 1, shorter prefix sorting first."""
    return (a > b) - (a < b)


def compare_text_ignore_case(a: str, b: str) -> int:
    """Compare two strings without regard to letter case."""
    return compare_text(a.lower(), b.lower())


def clamp(value: T, low: T, high: T) -> T:
    """Limit ``value`` to the closed range from ``low`` to ``high``."""
    if value < low:  # type: ignore[operator]
        return low
    if value > high:  # type: ignore[operator]
        return high
    return value


def mac_to_int(mac: bytes | bytearray | list[int] | tuple[int, ...]) -> int:
    """Pack six MAC address bytes into one integer, first byte highest."""
    data = bytes(mac)
    if len(data) != _MAC_LENGTH:
        raise ValueError(f"a MAC address has {_MAC_LENGTH} bytes, got {len(data)}")
    return int.from_bytes(data, "big")


def int_to_mac(value: int) -> bytes:
    """Unpack an integer into six MAC address bytes, first byte highest."""
    if value < 0 or value >= 1 << (8 * _MAC_LENGTH):
        raise ValueError("value does not fit into a MAC address")
    return value.to_bytes(_MAC_LENGTH, "big")