"""Boiling Boulders: surface area of a lava droplet made of unit cubes."""

from __future__ import annotations

import enum
import re
from collections import deque
from dataclasses import dataclass, field

_CUBE_RE = re.compile(r"\s*([+-]?\d+),([+-]?\d+),([+-]?\d+)")


class Neighbor(enum.Enum):
    """The six faces of a cube, valued by the offset to the adjacent cell."""

    TOP = (0, 0, 1)
    BOTTOM = (0, 0, -1)
    LEFT = (-1, 0, 0)
    RIGHT = (1, 0, 0)
    FRONT = (0, 1, 0)
    BACK = (0, -1, 0)


@dataclass(frozen=True)
class Point:
    """A cell in three-dimensional space."""

    x: int
    y: int
    z: int

    def offset(self, dx: int, dy: int, dz: int) -> Point:
        """Return the point moved by the given deltas."""
        return Point(self.x + dx, self.y + dy, self.z + dz)


@dataclass
class Cube:
    """A cell of the grid, either lava or empty air."""

    position: Point
    empty: bool = False
    external_access: bool = False
    faces_exposed: int = 0
    external_faces_exposed: int = 0


@dataclass
class Grid:
    """Every cell within the droplet's bounding box, plus the lava cubes."""

    min_point: Point
    max_point: Point
    space: dict[Point, Cube] = field(default_factory=dict)
    cubes: list[Cube] = field(default_factory=list)

    @property
    def width(self) -> int:
        """Extent along x."""
        return self.max_point.x - self.min_point.x + 1

    @property
    def depth(self) -> int:
        """Extent along y."""
        return self.max_point.y - self.min_point.y + 1

    @property
    def height(self) -> int:
        """Extent along z."""
        return self.max_point.z - self.min_point.z + 1

    def contains(self, p: Point) -> bool:
        """True if ``p`` lies within the grid's bounds."""
        lo, hi = self.min_point, self.max_point
        return lo.x <= p.x <= hi.x and lo.y <= p.y <= hi.y and lo.z <= p.z <= hi.z

    def cube_at(self, p: Point) -> Cube:
        """Return the cell at ``p``."""
        if not self.contains(p):
            raise KeyError(f"point {p} outside grid")
        return self.space[p]

    def neighbor(self, point: Point, neighbor: Neighbor) -> Cube | None:
        """Return the cell beside ``point`` on face ``neighbor``, or None at the edge."""
        adjacent = point.offset(*neighbor.value)
        if not self.contains(adjacent):
            return None
        return self.cube_at(adjacent)

    def add_cube(self, cube: Cube) -> None:
        """Place a lava cube into the grid."""
        self.space[cube.position] = cube
        self.cubes.append(cube)

    def add_empty_cube(self, p: Point) -> None:
        """Fill the cell at ``p`` with air."""
        self.space[p] = Cube(position=p, empty=True)

    def surface_area(self) -> int:
        """Total number of lava faces not touching other lava."""
        return sum(cube.faces_exposed for cube in self.cubes)

    def external_surface_area(self) -> int:
        """Number of lava faces reachable from outside the droplet."""
        return sum(cube.external_faces_exposed for cube in self.cubes)

    def _border_points(self):
        lo, hi = self.min_point, self.max_point
        for z in range(lo.z, hi.z + 1):
            for x in range(lo.x, hi.x + 1):
                yield Point(x, lo.y, z)
                yield Point(x, hi.y, z)
            for y in range(lo.y + 1, hi.y):
                yield Point(lo.x, y, z)
                yield Point(hi.x, y, z)

    def fill_external_access(self) -> None:
        """Flood-fill external access from empty border cells through empty cells."""
        visited: set[Point] = set()
        queue: deque[Point] = deque()

        for p in self._border_points():
            cube = self.cube_at(p)
            if cube.empty and p not in visited:
                cube.external_access = True
                visited.add(p)
                queue.append(p)

        while queue:
            current = queue.popleft()
            for side in Neighbor:
                adjacent = self.neighbor(current, side)
                if adjacent is None or not adjacent.empty:
                    continue
                if adjacent.position in visited:
                    continue
                adjacent.external_access = True
                visited.add(adjacent.position)
                queue.append(adjacent.position)

    def _count_exposed_faces(self) -> None:
        for cube in self.cubes:
            for side in Neighbor:
                adjacent = self.neighbor(cube.position, side)
                if adjacent is None:
                    # A face on the edge of the grid is always external.
                    cube.faces_exposed += 1
                    cube.external_faces_exposed += 1
                elif adjacent.empty:
                    cube.faces_exposed += 1
                    if adjacent.external_access:
                        cube.external_faces_exposed += 1


def parse_cube(line: str) -> Cube:
    """Parse an 'x,y,z' line into a lava cube."""
    match = _CUBE_RE.match(line)
    if match is None:
        raise ValueError(f"invalid cube line: {line!r}")
    x, y, z = (int(g) for g in match.groups())
    return Cube(position=Point(x, y, z))


def parse_cubes(text: str) -> Grid:
    """Parse all cubes, build the grid and compute exposed faces."""
    cubes = [parse_cube(line) for line in text.split("\n")]
    positions = [c.position for c in cubes]
    grid = Grid(
        min_point=Point(
            min(p.x for p in positions),
            min(p.y for p in positions),
            min(p.z for p in positions),
        ),
        max_point=Point(
            max(p.x for p in positions),
            max(p.y for p in positions),
            max(p.z for p in positions),
        ),
    )

    lo, hi = grid.min_point, grid.max_point
    for z in range(lo.z, hi.z + 1):
        for y in range(lo.y, hi.y + 1):
            for x in range(lo.x, hi.x + 1):
                grid.add_empty_cube(Point(x, y, z))

    for cube in cubes:
        grid.add_cube(cube)

    grid.fill_external_access()
    grid._count_exposed_faces()
    return grid