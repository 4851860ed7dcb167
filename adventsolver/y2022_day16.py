"""Proboscidea Volcanium: a labyrinth of valves joined by tunnels."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

STARTING_VALVE = "AA"

_SINGLE_RE = re.compile(
    r"\s*Valve\s+(\S+)\s+has flow rate=(-?\d+);\s*tunnel leads to valve\s+(\S+)"
)
_MULTIPLE_RE = re.compile(
    r"\s*Valve\s+(\S+)\s+has flow rate=(-?\d+);\s*tunnels lead to valves\s+(.*)"
)


@dataclass
class Tunnel:
    """A connection to another valve and the minutes it takes to walk."""

    valve_name: str
    cost: int = 1


@dataclass
class Valve:
    """A valve, how much pressure it relieves, and where its tunnels go."""

    name: str
    pressure_relief: int
    opened: bool = False
    tunnels: list[Tunnel] = field(default_factory=list)

    def open(self) -> None:
        """Mark the valve as opened."""
        self.opened = True


@dataclass
class Labyrinth:
    """All valves, looked up by name, and the running state of the eruption."""

    valves: dict[str, Valve] = field(default_factory=dict)
    time: int = 1
    open_valves: list[Valve] = field(default_factory=list)
    current_pressure_released_per_time: int = 0
    total_pressure_released: int = 0

    @property
    def valve_count(self) -> int:
        """Number of valves in the labyrinth."""
        return len(self.valves)

    def add_valve(self, valve: Valve) -> None:
        """Add ``valve``, replacing any valve of the same name."""
        self.valves[valve.name] = valve

    def delete_valve(self, valve_name: str) -> None:
        """Remove the valve called ``valve_name``."""
        self.valves.pop(valve_name, None)

    def find_valve(self, name: str) -> Valve:
        """Return the valve called ``name``."""
        try:
            return self.valves[name]
        except KeyError:
            raise KeyError(f"unknown valve {name!r}") from None

    def _simplify_from(self, valve_name: str, visited: set[str]) -> None:
        valve = self.find_valve(valve_name)
        visited.add(valve_name)

        if valve.pressure_relief == 0 and valve.name != STARTING_VALVE:
            # Bypass a useless valve: connect its neighbours directly.
            for st in valve.tunnels:
                sibling = self.find_valve(st.valve_name)
                new_tunnels = [t for t in sibling.tunnels if t.valve_name != valve_name]
                new_tunnels.extend(
                    Tunnel(st2.valve_name, st.cost + st2.cost)
                    for st2 in valve.tunnels
                    if st2.valve_name != st.valve_name
                )
                sibling.tunnels = new_tunnels
            self.delete_valve(valve_name)

        for tunnel in valve.tunnels:
            if tunnel.valve_name not in visited:
                self._simplify_from(tunnel.valve_name, visited)

    def simplify(self) -> None:
        """Remove valves that relieve no pressure, except the starting valve."""
        self._simplify_from(STARTING_VALVE, set())

    def tick(self) -> None:
        """Advance the clock by one minute."""
        self.time += 1


def parse_valve_definition(line: str) -> Valve:
    """Parse a 'Valve AA has flow rate=0; tunnels lead to valves DD, II' line."""
    match = _SINGLE_RE.match(line)
    if match is not None:
        name, rate, target = match.groups()
        return Valve(name, int(rate), tunnels=[Tunnel(target, 1)])

    match = _MULTIPLE_RE.match(line)
    if match is None:
        raise ValueError(f"invalid valve definition: {line!r}")
    name, rate, rest = match.groups()
    targets = rest.replace(",", " ").split()
    if not targets:
        raise ValueError("invalid connecting valves")
    return Valve(name, int(rate), tunnels=[Tunnel(t, 1) for t in targets])