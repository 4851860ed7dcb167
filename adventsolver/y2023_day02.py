"""Cube Conundrum: games of coloured cubes drawn from a bag."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

_GAME_RE = re.compile(r"\s*Game\s(\d+):(.*)")
_COUNT_COLOR_RE = re.compile(r"(\d+)\s(red|green|blue)")


@dataclass
class CubePull:
    """The cubes shown in one handful."""

    red: int = 0
    green: int = 0
    blue: int = 0


@dataclass
class Game:
    """A game's id and its handfuls."""

    id: int
    pulls: list[CubePull] = field(default_factory=list)


def _parse_pull(text: str) -> CubePull:
    pull = CubePull()
    for item in text.split(","):
        match = _COUNT_COLOR_RE.search(item)
        if match is None:
            raise ValueError(f"invalid cube count: {item!r}")
        count = int(match.group(1))
        if count <= 0:
            raise ValueError("invalid count")
        color = match.group(2)
        setattr(pull, color, getattr(pull, color) + count)
    return pull


def parse_game(line: str) -> Game:
    """Parse a 'Game N: 3 blue, 4 red; ...' line."""
    match = _GAME_RE.search(line)
    if match is None:
        raise ValueError(f"invalid game: {line!r}")
    game_id = int(match.group(1))
    if game_id <= 0:
        raise ValueError("invalid id")
    return Game(game_id, [_parse_pull(p) for p in match.group(2).split(";")])


def parse_games(text: str) -> list[Game]:
    """Parse every non-empty line as a game."""
    return [parse_game(line) for line in text.split("\n") if line != ""]


def is_game_possible(game: Game, max_red: int, max_green: int, max_blue: int) -> bool:
    """True if no handful exceeds the given cube limits."""
    return all(
        p.red <= max_red and p.green <= max_green and p.blue <= max_blue
        for p in game.pulls
    )


def possible_game_sum(
    games: Iterable[Game], max_red: int, max_green: int, max_blue: int
) -> int:
    """Sum the ids of the games possible under the given limits."""
    return sum(
        g.id for g in games if is_game_possible(g, max_red, max_green, max_blue)
    )


def game_minimum_cubes(game: Game) -> tuple[int, int, int]:
    """Return the fewest red, green and blue cubes the game needs."""
    return (
        max((p.red for p in game.pulls), default=0),
        max((p.green for p in game.pulls), default=0),
        max((p.blue for p in game.pulls), default=0),
    )


def game_power(game: Game) -> int:
    """Product of the minimum cube counts."""
    return math.prod(game_minimum_cubes(game))


def game_power_sum(games: Iterable[Game]) -> int:
    """Sum of the powers of all games."""
    return sum(game_power(g) for g in games)