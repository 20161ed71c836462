import random

import pytest

from powertools.graphics import (
    Circle,
    Color,
    GraphicObject,
    GraphicType,
    Line,
    Point,
    Rectangle,
    Size,
    create_random_object,
)
from powertools.strings import TextBuffer


def render(obj):
    out = TextBuffer()
    out.write(obj)
    return str(out)


def test_color_to_writer():
    assert render(Color(122, 122, 34, 255)) == "rgba{122,122,34,255}"
    assert render(Color(32, 12, 44, 200)) == "rgba{32,12,44,200}"


def test_color_presets():
    assert Color.red() == Color(255, 0, 0, 255)
    assert Color.white() == Color(255, 255, 255, 255)
    assert Color.transparent().a == 0
    assert Color.black() == Color()


def test_color_rejects_out_of_range():
    with pytest.raises(ValueError):
        Color(256, 0, 0)


def test_point_and_size_to_writer():
    assert render(Point(1, 2)) == "xy{1.00,2.00}"
    assert render(Size(50.32, 49.87)) == "size{50.32,49.87}"
    assert Point.origin() == Point(0.0, 0.0)


def test_size_is_empty():
    assert Size.zero().is_empty()
    assert Size(3, 0).is_empty()
    assert not Size(3, 4).is_empty()


def test_rectangle_to_writer():
    r = Rectangle(Size(50.32, 49.87), position=Point(100, 200), color=Color.red())
    assert render(r) == "pos:xy{100.00,200.00}, size:size{50.32,49.87}, color:rgba{255,0,0,255}"


def test_circle_draw_lines():
    c = Circle(45.6, position=Point(200, 300), color=Color.red())
    out = TextBuffer()
    c.draw(out, 2)
    lines = str(out).splitlines()
    assert lines[0] == "  Circle::draw"
    assert lines[1:] == [
        "      pos:xy{200.00,300.00}",
        "      radius:45.60",
        "      color:rgba{255,0,0,255}",
    ]


def test_line_to_writer_and_defaults():
    line = Line(Point(100, 200), Point(230, 450), 1.2)
    text = render(line)
    assert text.startswith("startPoint:xy{100.00,200.00}, endPoint:xy{230.00,450.00}")
    assert text.endswith("color:rgba{0,0,0,255}")
    assert Line().thickness == 1.0


def test_types():
    assert Circle().type is GraphicType.CIRCLE
    assert Line().type is GraphicType.LINE
    assert Rectangle().type is GraphicType.RECTANGLE
    with pytest.raises(TypeError):
        GraphicObject()


def test_create_random_object_covers_all_kinds():
    rng = random.Random(7)
    kinds = {create_random_object(rng).type for _ in range(60)}
    assert kinds == {GraphicType.CIRCLE, GraphicType.LINE, GraphicType.RECTANGLE}


def test_random_objects_draw_their_title_first():
    rng = random.Random(1)
    for _ in range(10):
        obj = create_random_object(rng)
        out = TextBuffer()
        obj.draw(out)
        assert str(out).splitlines()[0] == obj.title