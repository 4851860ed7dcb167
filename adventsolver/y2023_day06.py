"""Wait For It: boat races won by holding the button long enough."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from dataclasses import dataclass

_INT_RE = re.compile(r"-?\d+")


@dataclass
class Race:
    """A race's duration and the record distance to beat."""

    time: int = 0
    distance: int = 0


def speed_at_time(press_time: int, race_time: int) -> int:
    """Speed reached after holding the button for ``press_time``."""
    return press_time if press_time < race_time else 0


def distance_at_time(speed: int, time: int) -> int:
    """Distance covered at ``speed`` over ``time``."""
    return speed * time


def does_beat_record(press_time: int, race_time: int, record_distance: int) -> bool:
    """True if holding for ``press_time`` travels further than the record."""
    travelled = distance_at_time(
        speed_at_time(press_time, race_time), race_time - press_time
    )
    return travelled > record_distance


def _parse_numbers(text: str, part1: bool) -> list[int]:
    if part1:
        return [int(n) for n in _INT_RE.findall(text)]
    return [int(n) for n in _INT_RE.findall("".join(text.split()))]


def parse_races(text: str, part1: bool) -> list[Race]:
    """Parse the 'Time:' and 'Distance:' lines into races.

    In part one each column is a race; otherwise the digits on each line
    are joined into one number, giving a single race.
    """
    races: list[Race] = []

    def race_at(i: int) -> Race:
        while i >= len(races):
            races.append(Race())
        return races[i]

    for line in text.split("\n"):
        stripped = line.strip()
        if not stripped:
            continue
        if stripped.startswith("Time: "):
            for i, value in enumerate(_parse_numbers(stripped[len("Time: "):], part1)):
                race_at(i).time = value
        elif stripped.startswith("Distance: "):
            rest = stripped[len("Distance: "):]
            for i, value in enumerate(_parse_numbers(rest, part1)):
                race_at(i).distance = value
        else:
            raise ValueError(f"unexpected line {line!r}")
    return races


def winning_ways(race: Race) -> int:
    """Count the button hold times that beat the race's record."""
    return sum(
        1 for press in range(race.time) if does_beat_record(press, race.time, race.distance)
    )


def total_winning_ways(races: Iterable[Race]) -> int:
    """Multiply together the number of winning ways of every race."""
    return math.prod(winning_ways(race) for race in races)