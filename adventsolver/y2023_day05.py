"""If You Give A Seed A Fertilizer: following seeds through an almanac of maps."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field

_NUMBER_RE = re.compile(r"[0-9]+")

_SEEDS_PREFIX = "seeds: "

_MAP_HEADERS = {
    "seed-to-soil map:": "seed_soil_map",
    "soil-to-fertilizer map:": "soil_fertilizer_map",
    "fertilizer-to-water map:": "fertilizer_water_map",
    "water-to-light map:": "water_light_map",
    "light-to-temperature map:": "light_temperature_map",
    "temperature-to-humidity map:": "temperature_humidity_map",
    "humidity-to-location map:": "humidity_location_map",
}


@dataclass(frozen=True)
class Range:
    """A run of ``count`` source values mapped onto destination values."""

    source_start: int
    destination_start: int
    count: int

    def __contains__(self, source: int) -> bool:
        return self.source_start <= source < self.source_start + self.count


@dataclass
class Map:
    """Ranges kept sorted by source start; unmapped values map to themselves."""

    ranges: list[Range] = field(default_factory=list)

    def add_range(self, r: Range) -> None:
        """Add a range, keeping the ranges ordered by source start."""
        self.ranges.append(r)
        self.ranges.sort(key=lambda item: item.source_start)

    def lookup(self, source: int) -> int:
        """Return the destination for ``source``."""
        for r in self.ranges:
            if source in r:
                return r.destination_start + (source - r.source_start)
        return source


@dataclass(frozen=True)
class SeedRange:
    """``count`` consecutive seeds starting at ``start``."""

    start: int
    count: int


@dataclass
class Almanac:
    """The seeds to plant and the chain of maps from seed to location."""

    seed_ranges: list[SeedRange] = field(default_factory=list)
    seed_soil_map: Map = field(default_factory=Map)
    soil_fertilizer_map: Map = field(default_factory=Map)
    fertilizer_water_map: Map = field(default_factory=Map)
    water_light_map: Map = field(default_factory=Map)
    light_temperature_map: Map = field(default_factory=Map)
    temperature_humidity_map: Map = field(default_factory=Map)
    humidity_location_map: Map = field(default_factory=Map)

    def _maps(self) -> tuple[Map, ...]:
        return (
            self.seed_soil_map,
            self.soil_fertilizer_map,
            self.fertilizer_water_map,
            self.water_light_map,
            self.light_temperature_map,
            self.temperature_humidity_map,
            self.humidity_location_map,
        )

    def get_location(self, seed: int) -> int:
        """Follow ``seed`` through every map and return its location."""
        value = seed
        for m in self._maps():
            value = m.lookup(value)
        return value

    def add_seed_range(self, start: int, count: int) -> None:
        """Add ``count`` seeds starting at ``start``."""
        self.seed_ranges.append(SeedRange(start, count))

    def seed_count(self) -> int:
        """Total number of seeds."""
        return sum(r.count for r in self.seed_ranges)

    def seeds(self) -> Iterator[int]:
        """Yield every seed in the order added."""
        for r in self.seed_ranges:
            yield from range(r.start, r.start + r.count)


def parse_range(line: str) -> Range:
    """Parse a 'destination source count' line."""
    numbers = _NUMBER_RE.findall(line)
    if len(numbers) != 3:
        raise ValueError(f"invalid line {line!r}")
    destination, source, count = (int(n) for n in numbers)
    return Range(source_start=source, destination_start=destination, count=count)


def _seed_numbers(line: str) -> list[int]:
    return [int(n) for n in _NUMBER_RE.findall(line.removeprefix(_SEEDS_PREFIX))]


def parse_seeds_part_one(almanac: Almanac, line: str) -> None:
    """Add each number on a 'seeds:' line as a single seed."""
    for seed in _seed_numbers(line):
        almanac.add_seed_range(seed, 1)


def parse_seeds_part_two(almanac: Almanac, line: str) -> None:
    """Add the pairs of start and count on a 'seeds:' line as seed ranges."""
    numbers = _seed_numbers(line)
    if len(numbers) % 2:
        raise ValueError(f"unpaired seed range in {line!r}")
    for start, count in zip(numbers[::2], numbers[1::2]):
        almanac.add_seed_range(start, count)


def parse_almanac(text: str, part_one: bool) -> Almanac:
    """Parse seeds and maps; ``part_one`` reads seeds singly, otherwise as ranges."""
    almanac = Almanac()
    current = almanac.seed_soil_map
    for line in text.split("\n"):
        stripped = line.strip()
        if not stripped:
            continue
        if stripped.startswith(_SEEDS_PREFIX):
            if part_one:
                parse_seeds_part_one(almanac, stripped)
            else:
                parse_seeds_part_two(almanac, stripped)
            continue
        header = next((h for h in _MAP_HEADERS if stripped.startswith(h)), None)
        if header is not None:
            current = getattr(almanac, _MAP_HEADERS[header])
        else:
            current.add_range(parse_range(stripped))
    return almanac


def lowest_location(almanac: Almanac) -> int:
    """Return the lowest location of any of the almanac's seeds."""
    locations = (almanac.get_location(seed) for seed in almanac.seeds())
    result = min(locations, default=None)
    if result is None:
        raise ValueError("no seeds")
    return result