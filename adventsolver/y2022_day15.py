"""Beacon Exclusion Zone: sensors, beacons and the cells they rule out."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_SENSOR_RE = re.compile(
    r"\s*Sensor at x=([+-]?\d+), y=([+-]?\d+): "
    r"closest beacon is at x=([+-]?\d+), y=([+-]?\d+)"
)


@dataclass(frozen=True, order=True)
class Point:
    """A grid position."""

    x: int
    y: int


def absolute_difference(a: int, b: int) -> int:
    """Return |a - b|."""
    return abs(a - b)


def manhattan_distance(p1: Point, p2: Point) -> int:
    """Return the taxicab distance between two points."""
    return absolute_difference(p1.x, p2.x) + absolute_difference(p1.y, p2.y)


@dataclass
class Sensor:
    """A sensor and the closest beacon it detected."""

    position: Point
    beacon: Point
    beacon_distance: int = field(init=False)

    def __post_init__(self) -> None:
        self.beacon_distance = manhattan_distance(self.position, self.beacon)

    def covers(self, p: Point) -> bool:
        """True if ``p`` is within this sensor's beacon distance."""
        return manhattan_distance(self.position, p) <= self.beacon_distance


@dataclass
class Network:
    """A set of sensors together with the bounding box to examine."""

    min_point: Point
    max_point: Point
    sensors: list[Sensor] = field(default_factory=list)

    def closest_sensor(self, p: Point) -> Sensor | None:
        """Return the first sensor nearest to ``p``, or None when there are none."""
        closest: Sensor | None = None
        closest_distance: int | None = None
        for sensor in self.sensors:
            d = manhattan_distance(sensor.position, p)
            if closest_distance is None or d < closest_distance:
                closest_distance = d
                closest = sensor
        return closest

    def sensor_intersection(self, p: Point) -> list[Sensor]:
        """Return every sensor whose coverage includes ``p``."""
        return [s for s in self.sensors if s.covers(p)]

    def invalid_beacon_locations(self, row: int) -> list[Point]:
        """Return the positions in ``row`` that cannot hold a beacon, sorted by x."""
        locations: set[Point] = set()
        for x in range(self.min_point.x, self.max_point.x + 1):
            p = Point(x, row)
            if any(p != s.beacon for s in self.sensor_intersection(p)):
                locations.add(p)
        return sorted(locations)

    def possible_beacon_locations(self) -> list[Point]:
        """Return every position in the bounds not covered by any sensor."""
        locations: list[Point] = []
        for y in range(self.min_point.y, self.max_point.y + 1):
            x = self.min_point.x
            while x <= self.max_point.x:
                p = Point(x, y)
                covering = next((s for s in self.sensors if s.covers(p)), None)
                if covering is not None:
                    # Skip to the right edge of this sensor's diamond on this row.
                    x = (
                        covering.position.x
                        + covering.beacon_distance
                        - absolute_difference(y, covering.position.y)
                    )
                else:
                    locations.append(p)
                x += 1
        return locations


def parse_sensor_line(line: str) -> Sensor:
    """Parse one 'Sensor at x=.., y=..: closest beacon is at x=.., y=..' line."""
    match = _SENSOR_RE.match(line)
    if match is None:
        raise ValueError(f"invalid sensor line: {line!r}")
    sx, sy, bx, by = (int(g) for g in match.groups())
    return Sensor(Point(sx, sy), Point(bx, by))


def parse_sensors(text: str) -> list[Sensor]:
    """Parse one sensor per line."""
    return [parse_sensor_line(line) for line in text.split("\n")]


def parse_network(text: str, tight_bounds: bool) -> Network:
    """Parse sensors and compute the bounds.

    With ``tight_bounds`` the bounds enclose only the sensor positions;
    otherwise they enclose each sensor's full coverage.
    """
    sensors = parse_sensors(text)
    if tight_bounds:
        xs_low = [s.position.x for s in sensors]
        xs_high = xs_low
        ys_low = [s.position.y for s in sensors]
        ys_high = ys_low
    else:
        xs_low = [s.position.x - s.beacon_distance for s in sensors]
        xs_high = [s.position.x + s.beacon_distance for s in sensors]
        ys_low = [s.position.y - s.beacon_distance for s in sensors]
        ys_high = [s.position.y + s.beacon_distance for s in sensors]
    return Network(
        min_point=Point(min(xs_low), min(ys_low)),
        max_point=Point(max(xs_high), max(ys_high)),
        sensors=sensors,
    )