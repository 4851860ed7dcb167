from itertools import islice

import pytest

from adventsolver.y2023_day05 import (
    Almanac,
    Map,
    Range,
    SeedRange,
    lowest_location,
    parse_almanac,
    parse_range,
    parse_seeds_part_one,
    parse_seeds_part_two,
)

CONTENT = """seeds: 79 14 55 13

\tseed-to-soil map:
\t50 98 2
\t52 50 48
\t
\tsoil-to-fertilizer map:
\t0 15 37
\t37 52 2
\t39 0 15
\t
\tfertilizer-to-water map:
\t49 53 8
\t0 11 42
\t42 0 7
\t57 7 4
\t
\twater-to-light map:
\t88 18 7
\t18 25 70
\t
\tlight-to-temperature map:
\t45 77 23
\t81 45 19
\t68 64 13
\t
\ttemperature-to-humidity map:
\t0 69 1
\t1 0 69
\t
\thumidity-to-location map:
\t60 56 37
\t56 93 4
\t"""


def _sorted(ranges):
    return sorted(ranges, key=lambda r: r.source_start)


@pytest.mark.parametrize(
    "source, expected",
    [
        (0, 0), (1, 1), (49, 49), (50, 52), (51, 53), (60, 62), (96, 98),
        (97, 99), (98, 50), (99, 51), (79, 81), (14, 14), (55, 57), (13, 13),
    ],
)
def test_map_lookup(source, expected):
    m = Map()
    m.add_range(Range(98, 50, 2))
    m.add_range(Range(50, 52, 48))
    assert m.lookup(source) == expected


def test_map_keeps_ranges_sorted():
    m = Map()
    m.add_range(Range(98, 50, 2))
    m.add_range(Range(50, 52, 48))
    assert m.ranges == [Range(50, 52, 48), Range(98, 50, 2)]


@pytest.mark.parametrize(
    "line, expected",
    [("50 98 2", Range(98, 50, 2)), ("52 50 48", Range(50, 52, 48))],
)
def test_parse_range(line, expected):
    assert parse_range(line) == expected


def test_parse_range_rejects_wrong_count():
    with pytest.raises(ValueError):
        parse_range("1 2")


def test_parse_seeds_part_one():
    a = Almanac()
    parse_seeds_part_one(a, "seeds: 79 14 55 13")
    assert a.seed_count() == 4
    assert list(a.seeds()) == [79, 14, 55, 13]


def test_parse_seeds_part_two():
    a = Almanac()
    parse_seeds_part_two(a, "seeds: 222541566 218404460 670428364 432472902")
    assert a.seed_ranges == [
        SeedRange(222541566, 218404460),
        SeedRange(670428364, 432472902),
    ]
    assert a.seed_count() == 218404460 + 432472902
    assert list(islice(a.seeds(), 3)) == [222541566, 222541567, 222541568]


def test_parse_seeds_part_two_crosses_ranges():
    a = Almanac()
    parse_seeds_part_two(a, "seeds: 10 2 50 3")
    assert list(a.seeds()) == [10, 11, 50, 51, 52]


def test_parse_seeds_part_two_rejects_odd():
    with pytest.raises(ValueError):
        parse_seeds_part_two(Almanac(), "seeds: 1 2 3")


@pytest.mark.parametrize("part_one", [True, False])
def test_parse_almanac_maps(part_one):
    almanac = parse_almanac(CONTENT, part_one)
    assert almanac.seed_soil_map.ranges == _sorted([Range(98, 50, 2), Range(50, 52, 48)])
    assert almanac.soil_fertilizer_map.ranges == _sorted(
        [Range(15, 0, 37), Range(52, 37, 2), Range(0, 39, 15)]
    )
    assert almanac.fertilizer_water_map.ranges == _sorted(
        [Range(53, 49, 8), Range(11, 0, 42), Range(0, 42, 7), Range(7, 57, 4)]
    )
    assert almanac.water_light_map.ranges == _sorted([Range(18, 88, 7), Range(25, 18, 70)])
    assert almanac.light_temperature_map.ranges == _sorted(
        [Range(77, 45, 23), Range(45, 81, 19), Range(64, 68, 13)]
    )
    assert almanac.temperature_humidity_map.ranges == _sorted(
        [Range(69, 0, 1), Range(0, 1, 69)]
    )
    assert almanac.humidity_location_map.ranges == _sorted(
        [Range(56, 60, 37), Range(93, 56, 4)]
    )


def test_parse_almanac_seeds_part_one():
    almanac = parse_almanac(CONTENT, True)
    assert list(almanac.seeds()) == [79, 14, 55, 13]


def test_parse_almanac_seeds_part_two():
    almanac = parse_almanac(CONTENT, False)
    assert list(almanac.seeds()) == list(range(79, 79 + 14)) + list(range(55, 55 + 13))


@pytest.mark.parametrize("seed, expected", [(79, 82), (14, 43), (55, 86), (13, 35)])
def test_get_location(seed, expected):
    almanac = parse_almanac(CONTENT, True)
    assert almanac.get_location(seed) == expected


def test_lowest_location_part_one():
    assert lowest_location(parse_almanac(CONTENT, True)) == 35


def test_lowest_location_part_two():
    assert lowest_location(parse_almanac(CONTENT, False)) == 46


def test_lowest_location_without_seeds():
    with pytest.raises(ValueError):
        lowest_location(Almanac())