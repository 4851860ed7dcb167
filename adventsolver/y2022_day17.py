"""Pyroclastic Flow: rocks pushed by jets of gas fall into a narrow tower."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass, field

from adventsolver.y2022_day17_shapes import Point, Shape, ShapeKind, make_shape

_TOP_BIT = 0x80

_SHAPE_ORDER = (
    ShapeKind.HORIZONTAL_LINE,
    ShapeKind.CROSS,
    ShapeKind.ANGLE,
    ShapeKind.VERTICAL_LINE,
    ShapeKind.SQUARE,
)


class JetDirection(enum.Enum):
    """Which way a jet pushes a falling rock."""

    LEFT = "<"
    RIGHT = ">"


@dataclass
class Tower:
    """The settled rocks, one bit mask per row, bottom row first."""

    width: int
    rows: list[int] = field(default_factory=list)
    _heights: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._heights = [0] * self.width

    def heights(self) -> list[int]:
        """Return, per column, the height of its topmost settled cell."""
        return list(self._heights)

    def add_empty_rows(self, count: int) -> None:
        """Append ``count`` empty rows to the top."""
        self.rows.extend([0] * count)

    def _ensure_rows(self, shape: Shape, position: Point) -> None:
        missing = position.y + shape.size.height - len(self.rows)
        if missing > 0:
            self.add_empty_rows(missing)

    def can_shape_move_to_position(self, shape: Shape, position: Point) -> bool:
        """True if ``shape`` placed at ``position`` fits inside the tower."""
        self._ensure_rows(shape, position)
        size = shape.size
        if position.x < 0 or position.x + size.width > self.width:
            return False
        if position.y < 0:
            return False
        return not any(
            self.rows[position.y + offset] & (bits >> position.x)
            for offset, bits in enumerate(shape.bitmap.rows)
        )

    def lock_shape(self, shape: Shape) -> None:
        """Settle ``shape`` into the tower at its current position."""
        position = shape.position
        self._ensure_rows(shape, position)
        for offset, bits in enumerate(shape.bitmap.rows):
            y = position.y + offset
            shifted = bits >> position.x
            self.rows[y] |= shifted
            for column in range(self.width):
                if shifted & (_TOP_BIT >> column):
                    self._heights[column] = max(self._heights[column], y + 1)


@dataclass
class Room:
    """A tower together with the cycling rock and jet sequences."""

    width: int
    jet_directions: Sequence[JetDirection]
    tower: Tower = field(init=False)
    _next_shape: int = field(default=0, init=False, repr=False)
    _next_jet: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        self.jet_directions = list(self.jet_directions or ())
        self.tower = Tower(self.width)

    def make_next_shape(self) -> Shape:
        """Return the next rock in the repeating shape order."""
        kind = _SHAPE_ORDER[self._next_shape]
        self._next_shape = (self._next_shape + 1) % len(_SHAPE_ORDER)
        return make_shape(kind)

    def next_jet_direction(self) -> JetDirection:
        """Return the next jet push, cycling through the pattern."""
        if not self.jet_directions:
            raise ValueError("no jet directions")
        direction = self.jet_directions[self._next_jet]
        self._next_jet = (self._next_jet + 1) % len(self.jet_directions)
        return direction

    def tower_height(self) -> int:
        """Return the height of the tallest column."""
        return max(self.tower.heights(), default=0)

    def drop_shape(self) -> None:
        """Drop the next rock until it comes to rest."""
        shape = self.make_next_shape()
        shape.position = Point(2, self.tower_height() + 3)
        self.tower.add_empty_rows(3 + shape.size.height)

        while True:
            step = -1 if self.next_jet_direction() is JetDirection.LEFT else 1
            pushed = Point(shape.position.x + step, shape.position.y)
            if self.tower.can_shape_move_to_position(shape, pushed):
                shape.position = pushed

            fallen = Point(shape.position.x, shape.position.y - 1)
            if self.tower.can_shape_move_to_position(shape, fallen):
                shape.position = fallen
            else:
                self.tower.lock_shape(shape)
                return


def parse_jet_directions(line: str) -> list[JetDirection]:
    """Parse a string of '<' and '>' characters."""
    try:
        return [JetDirection(c) for c in line]
    except ValueError:
        raise ValueError("invalid jet direction") from None