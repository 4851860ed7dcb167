import pytest

from adventsolver.y2022_day17_shapes import (
    Bitmap,
    Point,
    ShapeKind,
    Size,
    bounds_intersect,
    make_shape,
    parse_bitmap,
)


def test_parse_bitmap_rejects_unknown_characters():
    with pytest.raises(ValueError):
        parse_bitmap("1234\n1234\n1234")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("####\n####\n####", Bitmap(Size(4, 3), (0xF0, 0xF0, 0xF0))),
        ("....\n....\n....", Bitmap(Size(4, 3), (0x00, 0x00, 0x00))),
    ],
)
def test_parse_bitmap(text, expected):
    assert parse_bitmap(text) == expected


def test_parse_bitmap_stores_bottom_row_first():
    bitmap = parse_bitmap("..#\n..#\n###")
    assert bitmap.rows == (0xE0, 0x20, 0x20)
    assert bitmap.size == Size(3, 3)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("####\n####\n####", "####\n####\n####"),
        ("....\n....\n....", "....\n....\n...."),
    ],
)
def test_bitmap_describe(text, expected):
    assert parse_bitmap(text).describe() == expected


@pytest.mark.parametrize(
    "kind, expected",
    [
        (ShapeKind.HORIZONTAL_LINE, "####"),
        (ShapeKind.CROSS, ".#.\n###\n.#."),
        (ShapeKind.ANGLE, "..#\n..#\n###"),
        (ShapeKind.VERTICAL_LINE, "#\n#\n#\n#"),
        (ShapeKind.SQUARE, "##\n##"),
    ],
)
def test_shape_bitmap(kind, expected):
    assert make_shape(kind).bitmap.describe() == expected


@pytest.mark.parametrize(
    "kind, size",
    [
        (ShapeKind.HORIZONTAL_LINE, Size(4, 1)),
        (ShapeKind.CROSS, Size(3, 3)),
        (ShapeKind.ANGLE, Size(3, 3)),
        (ShapeKind.VERTICAL_LINE, Size(1, 4)),
        (ShapeKind.SQUARE, Size(2, 2)),
    ],
)
def test_shape_size_and_position(kind, size):
    shape = make_shape(kind)
    assert shape.size == size
    assert shape.position == Point(0, 0)
    assert shape.kind is kind


@pytest.mark.parametrize(
    "p1, s, p2, expected",
    [
        (Point(0, 0), Size(2, 2), Point(1, 1), True),
        (Point(0, 0), Size(2, 2), Point(0, 0), True),
        (Point(0, 0), Size(2, 2), Point(2, 2), True),
        (Point(-1, -1), Size(2, 2), Point(0, 0), True),
        (Point(-1, -1), Size(2, 2), Point(-1, -1), True),
        (Point(-1, -1), Size(2, 2), Point(-2, -2), False),
        (Point(-1, -1), Size(2, 2), Point(-2, -1), False),
    ],
)
def test_bounds_intersect(p1, s, p2, expected):
    assert bounds_intersect(p1, s, p2) is expected