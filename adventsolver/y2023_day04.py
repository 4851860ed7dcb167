"""Scratchcards: winning numbers and the copies they earn."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field

_CARD_RE = re.compile(r"Card\s+(\d+):(.*)")


@dataclass
class Card:
    """A scratchcard and how many copies of it are held."""

    number: int
    count: int = 1
    winning_numbers: list[int] = field(default_factory=list)
    my_numbers: list[int] = field(default_factory=list)

    def winning_matches(self) -> int:
        """Count the winning numbers that appear among my numbers."""
        mine = set(self.my_numbers)
        return sum(1 for n in self.winning_numbers if n in mine)

    def worth(self) -> int:
        """Points: 1 for the first match, doubled for each further match."""
        matches = self.winning_matches()
        return 0 if matches == 0 else 2 ** (matches - 1)


def parse_card(line: str) -> Card:
    """Parse a 'Card N: winning numbers | my numbers' line."""
    match = _CARD_RE.search(line)
    if match is None:
        raise ValueError(f"invalid card: {line!r}")
    halves = match.group(2).split("|")
    if len(halves) < 2:
        raise ValueError(f"invalid card: {line!r}")
    return Card(
        number=int(match.group(1)),
        count=1,
        winning_numbers=[int(n) for n in halves[0].split()],
        my_numbers=[int(n) for n in halves[1].split()],
    )


def total_cards_won(cards: Sequence[Card]) -> int:
    """Hand out copies for every win, updating counts, and return the card total."""
    for index, card in enumerate(cards):
        matches = card.winning_matches()
        for won in cards[index + 1 : index + 1 + matches]:
            won.count += card.count
    return sum(card.count for card in cards)