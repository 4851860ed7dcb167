"""Falling rock shapes and the bitmaps that describe them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

_TOP_BIT = 0x80


@dataclass(frozen=True)
class Point:
    """A position in the tower; y grows upwards."""

    x: int
    y: int


@dataclass(frozen=True)
class Size:
    """Width and height of a bitmap."""

    width: int
    height: int


@dataclass(frozen=True)
class Bitmap:
    """A shape's cells, one byte per row, most significant bit leftmost.

    Rows are stored bottom first: rows[0] is the bottom of the shape.
    """

    size: Size
    rows: tuple[int, ...]

    def describe(self) -> str:
        """Render the bitmap top row first, '#' for set cells and '.' for clear."""
        lines = []
        for row in reversed(self.rows):
            lines.append(
                "".join(
                    "#" if row & (_TOP_BIT >> column) else "."
                    for column in range(self.size.width)
                )
            )
        return "\n".join(lines)


def parse_bitmap(text: str) -> Bitmap:
    """Build a bitmap from lines of '#' and '.', the first line being the top."""
    rows = []
    width = 0
    for line in reversed(text.split("\n")):
        row = 0
        for column, c in enumerate(line):
            if c == "#":
                row |= _TOP_BIT >> column
            elif c != ".":
                raise ValueError(f"unexpected character in bitmap: {c!r}")
        width = max(width, len(line))
        rows.append(row)
    return Bitmap(Size(width, len(rows)), tuple(rows))


def bounds_intersect(p1: Point, s: Size, p2: Point) -> bool:
    """True if ``p2`` lies in the rectangle with bottom-left ``p1`` and size ``s``."""
    return p1.x <= p2.x <= p1.x + s.width and p1.y <= p2.y <= p1.y + s.height


class ShapeKind(enum.Enum):
    """The five rock shapes, each valued by its picture."""

    HORIZONTAL_LINE = "####"
    CROSS = ".#.\n###\n.#."
    ANGLE = "..#\n..#\n###"
    VERTICAL_LINE = "#\n#\n#\n#"
    SQUARE = "##\n##"


@dataclass
class Shape:
    """A rock of some kind at a position in the tower."""

    kind: ShapeKind
    bitmap: Bitmap
    position: Point = field(default_factory=lambda: Point(0, 0))

    @property
    def size(self) -> Size:
        """The extent of the shape's bitmap."""
        return self.bitmap.size


def make_shape(kind: ShapeKind) -> Shape:
    """Create a shape of ``kind`` at the origin."""
    return Shape(kind=kind, bitmap=parse_bitmap(kind.value))