"""A small hierarchy of drawable shapes that render themselves to writers."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, ClassVar

from .writer import Writer, get_log_writer


def _line(writer: Writer | None, space: int, fmt: str, *args: Any) -> None:
    target = writer if writer is not None else get_log_writer()
    target.write_trailer()
    target.write_spaces(space)
    target.sprintf(fmt, *args)
    target.write_lf()


@dataclass
class Color:
    """An RGBA colour; each component lies in 0..255, alpha 255 is opaque."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"colour component {name}={value} outside 0..255")

    @classmethod
    def black(cls) -> Color:
        return cls(0, 0, 0, 255)

    @classmethod
    def white(cls) -> Color:
        return cls(255, 255, 255, 255)

    @classmethod
    def red(cls) -> Color:
        return cls(255, 0, 0, 255)

    @classmethod
    def green(cls) -> Color:
        return cls(0, 255, 0, 255)

    @classmethod
    def blue(cls) -> Color:
        return cls(0, 0, 255, 255)

    @classmethod
    def transparent(cls) -> Color:
        return cls(0, 0, 0, 0)

    def to_writer(self, writer: Writer) -> None:
        writer.sprintf("rgba{$,$,$,$}", self.r, self.g, self.b, self.a)


@dataclass
class Point:
    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)

    @classmethod
    def origin(cls) -> Point:
        return cls(0.0, 0.0)

    def to_writer(self, writer: Writer) -> None:
        writer.sprintf("xy{$,$}", self.x, self.y)


@dataclass
class Size:
    w: float = 0.0
    h: float = 0.0

    def __post_init__(self) -> None:
        self.w = float(self.w)
        self.h = float(self.h)

    def is_empty(self) -> bool:
        return self.w <= 0.0 or self.h <= 0.0

    @classmethod
    def zero(cls) -> Size:
        return cls(0.0, 0.0)

    def to_writer(self, writer: Writer) -> None:
        writer.sprintf("size{$,$}", self.w, self.h)


class GraphicType(IntEnum):
    NO_TYPE = 0
    CIRCLE = 1
    LINE = 2
    RECTANGLE = 3


@dataclass
class GraphicObject(ABC):
    """Base of all drawable objects."""

    kind: ClassVar[GraphicType] = GraphicType.NO_TYPE
    title: ClassVar[str] = ""

    position: Point = field(default_factory=Point, kw_only=True)
    color: Color = field(default_factory=Color, kw_only=True)
    visible: bool = field(default=True, kw_only=True)

    @property
    def type(self) -> GraphicType:
        return self.kind

    @abstractmethod
    def _fields(self) -> list[tuple[str, Any]]:
        """Labelled values that describe the object, in display order."""

    def draw(self, writer: Writer | None = None, space: int = 0) -> None:
        """Simulate drawing by logging each property on its own line."""
        _line(writer, space, self.title)
        for label, value in self._fields():
            _line(writer, space + 4, f"{label}:$", value)

    def to_writer(self, writer: Writer) -> None:
        labelled = self._fields()
        fmt = ", ".join(f"{label}:$" for label, _ in labelled)
        writer.sprintf(fmt, *(value for _, value in labelled))


@dataclass
class Circle(GraphicObject):
    kind: ClassVar[GraphicType] = GraphicType.CIRCLE
    title: ClassVar[str] = "Circle::draw"

    radius: float = 0.0

    def _fields(self) -> list[tuple[str, Any]]:
        return [("pos", self.position), ("radius", float(self.radius)), ("color", self.color)]


@dataclass
class Rectangle(GraphicObject):
    kind: ClassVar[GraphicType] = GraphicType.RECTANGLE
    title: ClassVar[str] = "Rectangle::draw - simulation"

    size: Size = field(default_factory=Size)

    def _fields(self) -> list[tuple[str, Any]]:
        return [("pos", self.position), ("size", self.size), ("color", self.color)]


@dataclass
class Line(GraphicObject):
    kind: ClassVar[GraphicType] = GraphicType.LINE
    title: ClassVar[str] = "Line::draw - simulation"

    start_point: Point = field(default_factory=Point)
    end_point: Point = field(default_factory=Point)
    thickness: float = 1.0

    def _fields(self) -> list[tuple[str, Any]]:
        return [
            ("startPoint", self.start_point),
            ("endPoint", self.end_point),
            ("thickness", float(self.thickness)),
            ("color", self.color),
        ]


_BY_TYPE: dict[GraphicType, type[GraphicObject]] = {
    GraphicType.CIRCLE: Circle,
    GraphicType.LINE: Line,
    GraphicType.RECTANGLE: Rectangle,
}


def create_random_object(rng: random.Random | None = None) -> GraphicObject:
    """A default circle, line or rectangle, chosen at random."""
    source = rng if rng is not None else random
    kind = GraphicType(source.randint(GraphicType.CIRCLE, GraphicType.RECTANGLE))
    return _BY_TYPE[kind]()