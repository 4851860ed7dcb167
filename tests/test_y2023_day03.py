import pytest

from adventsolver.y2023_day03 import (
    Location,
    Number,
    Part,
    gear_ratio_sum,
    is_adjacent,
    link_adjacent,
    parse_schematic,
    parse_schematic_line,
    part_number_sum,
)

SCHEMATIC = """
\t467..114..
\t...*......
\t..35..633.
\t......#...
\t617*......
\t.....+.58.
\t..592.....
\t......755.
\t...$.*....
\t.664.598.."""

START = Location(0, 1)
END = Location(2, 1)


@pytest.mark.parametrize(
    "point, expected",
    [
        ((0, 0), True), ((0, 1), True), ((0, 2), True), ((0, 3), False), ((0, -1), False),
        ((-1, 0), True), ((-1, 1), True), ((-1, 2), True), ((-1, 3), False), ((-1, -1), False),
        ((-2, 0), False), ((-2, 1), False), ((-2, 2), False), ((-2, 3), False), ((-2, -1), False),
        ((1, 0), True), ((1, 2), True),
        ((2, 0), True), ((2, 1), True), ((2, 2), True), ((2, 3), False), ((2, -1), False),
        ((3, 0), True), ((3, 1), True), ((3, 2), True), ((3, 3), False), ((3, -1), False),
    ],
)
def test_is_adjacent(point, expected):
    assert is_adjacent(Location(*point), START, END) is expected


def _num(n, start, end):
    return Number(n, Location(start, 0), Location(end, 0))


@pytest.mark.parametrize(
    "line, parts, numbers",
    [
        ("467..114..", [], [_num(467, 0, 2), _num(114, 5, 7)]),
        ("...*......", [Part("*", Location(3, 0))], []),
        ("..35..633.", [], [_num(35, 2, 3), _num(633, 6, 8)]),
        ("......#...", [Part("#", Location(6, 0))], []),
        ("617*......", [Part("*", Location(3, 0))], [_num(617, 0, 2)]),
        (".....+.58.", [Part("+", Location(5, 0))], [_num(58, 7, 8)]),
        ("..592.....", [], [_num(592, 2, 4)]),
        ("......755.", [], [_num(755, 6, 8)]),
        ("...$.*....", [Part("$", Location(3, 0)), Part("*", Location(5, 0))], []),
        (".664.598..", [], [_num(664, 1, 3), _num(598, 5, 7)]),
    ],
)
def test_parse_schematic_line(line, parts, numbers):
    assert parse_schematic_line(0, line) == (parts, numbers)


def test_parse_schematic_line_without_tokens():
    with pytest.raises(ValueError):
        parse_schematic_line(0, "..........")


def test_parse_schematic_rows():
    parts, numbers = parse_schematic(SCHEMATIC)
    assert len(parts) == 6
    assert len(numbers) == 10
    assert numbers[-1] == Number(598, Location(5, 9), Location(7, 9))


def test_part_number_sum():
    parts, numbers = parse_schematic(SCHEMATIC)
    link_adjacent(parts, numbers)
    assert part_number_sum(parts, numbers) == 4361


def test_gear_ratio_sum():
    parts, numbers = parse_schematic(SCHEMATIC)
    link_adjacent(parts, numbers)
    assert gear_ratio_sum(parts, numbers) == 467835