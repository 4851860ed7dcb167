"""Gear Ratios: part numbers and symbols in an engine schematic."""

from __future__ import annotations

import math
import re
from collections.abc import Sequence
from dataclasses import dataclass, field

GEAR = "*"

_TOKEN_RE = re.compile(r"(?:[0-9]+)|(?:[^.])")


@dataclass(frozen=True)
class Location:
    """A column and row in the schematic."""

    x: int
    y: int


@dataclass
class Part:
    """A symbol and the indexes of the numbers adjacent to it."""

    name: str
    location: Location
    adjacent_number_indexes: set[int] = field(default_factory=set)


@dataclass
class Number:
    """A number and the first and last cells it occupies."""

    number: int
    start: Location
    end: Location


def is_adjacent(point: Location, line_start: Location, line_end: Location) -> bool:
    """True if ``point`` touches the horizontal run from start to end, diagonals included."""
    if point.y < line_start.y - 1 or point.y > line_start.y + 1:
        return False
    return line_start.x - 1 <= point.x <= line_end.x + 1


def parse_schematic_line(y: int, line: str) -> tuple[list[Part], list[Number]]:
    """Split one schematic row into its symbols and numbers."""
    matches = list(_TOKEN_RE.finditer(line))
    if not matches:
        raise ValueError(f"unexpected line {line!r}")

    parts: list[Part] = []
    numbers: list[Number] = []
    for match in matches:
        text = match.group()
        if "0" <= text[0] <= "9":
            numbers.append(
                Number(int(text), Location(match.start(), y), Location(match.end() - 1, y))
            )
        else:
            parts.append(Part(text, Location(match.start(), y)))
    return parts, numbers


def parse_schematic(text: str) -> tuple[list[Part], list[Number]]:
    """Parse every non-empty line, numbering rows from zero."""
    all_parts: list[Part] = []
    all_numbers: list[Number] = []
    y = 0
    for line in text.split("\n"):
        if line == "":
            continue
        parts, numbers = parse_schematic_line(y, line.strip())
        all_parts.extend(parts)
        all_numbers.extend(numbers)
        y += 1
    return all_parts, all_numbers


def link_adjacent(parts: Sequence[Part], numbers: Sequence[Number]) -> None:
    """Record on every part which numbers are adjacent to it."""
    for part in parts:
        for index, number in enumerate(numbers):
            if is_adjacent(part.location, number.start, number.end):
                part.adjacent_number_indexes.add(index)


def part_number_sum(parts: Sequence[Part], numbers: Sequence[Number]) -> int:
    """Sum the numbers adjacent to each part, counted once per part."""
    return sum(
        numbers[index].number
        for part in parts
        for index in part.adjacent_number_indexes
    )


def gear_ratio_sum(parts: Sequence[Part], numbers: Sequence[Number]) -> int:
    """Sum the products of the two numbers next to each gear with exactly two."""
    return sum(
        math.prod(numbers[i].number for i in part.adjacent_number_indexes)
        for part in parts
        if part.name == GEAR and len(part.adjacent_number_indexes) == 2
    )