"""Camel Cards: ranking poker-like hands, optionally with jokers wild."""

from __future__ import annotations

import enum
import re
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

_CARD_RE = re.compile(r"[2-9TJQKA]")


class Card(enum.IntEnum):
    """Card ranks, weakest first; JOKER only appears when jokers are wild."""

    JOKER = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7
    NINE = 8
    TEN = 9
    JACK = 10
    QUEEN = 11
    KING = 12
    ACE = 13


class Strength(enum.IntEnum):
    """Hand types, weakest first."""

    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    FULL_HOUSE = 4
    FOUR_OF_A_KIND = 5
    FIVE_OF_A_KIND = 6


_CARD_LETTERS = {
    Card.JOKER: "J",
    Card.TWO: "2",
    Card.THREE: "3",
    Card.FOUR: "4",
    Card.FIVE: "5",
    Card.SIX: "6",
    Card.SEVEN: "7",
    Card.EIGHT: "8",
    Card.NINE: "9",
    Card.TEN: "T",
    Card.JACK: "J",
    Card.QUEEN: "Q",
    Card.KING: "K",
    Card.ACE: "A",
}

_LETTER_CARDS = {
    letter: card for card, letter in _CARD_LETTERS.items() if card is not Card.JOKER
}

_STRENGTH_NAMES = {
    Strength.HIGH_CARD: "high card",
    Strength.ONE_PAIR: "one pair",
    Strength.TWO_PAIR: "two pair",
    Strength.THREE_OF_A_KIND: "three of a kind",
    Strength.FULL_HOUSE: "full house",
    Strength.FOUR_OF_A_KIND: "four of a kind",
    Strength.FIVE_OF_A_KIND: "five of a kind",
}


def describe_cards(cards: Sequence[Card]) -> str:
    """Render cards as their letters."""
    return "".join(_CARD_LETTERS[c] for c in cards)


@dataclass(frozen=True, order=True)
class Hand:
    """Five cards and their type; ordering follows the game's ranking."""

    strength: Strength
    cards: tuple[Card, ...]

    def describe(self) -> str:
        """Return the cards followed by the hand type."""
        return f"{describe_cards(self.cards)} {_STRENGTH_NAMES[self.strength]}"


def calculate_cards_strength(cards: Sequence[Card]) -> Strength:
    """Classify a hand with every card taken at face value."""
    counts = Counter(cards)
    distinct = len(counts)
    three_seen = 3 in counts.values()
    if distinct == 5:
        return Strength.HIGH_CARD
    if distinct == 4:
        return Strength.ONE_PAIR
    if distinct == 3:
        return Strength.THREE_OF_A_KIND if three_seen else Strength.TWO_PAIR
    if distinct == 2:
        return Strength.FULL_HOUSE if three_seen else Strength.FOUR_OF_A_KIND
    if distinct == 1:
        return Strength.FIVE_OF_A_KIND
    return Strength.HIGH_CARD


def calculate_cards_strength_jokers(cards: Sequence[Card]) -> Strength:
    """Classify a hand with jokers standing in for whatever helps most."""
    joker_count = sum(1 for c in cards if c is Card.JOKER)
    if joker_count == 0:
        return calculate_cards_strength(cards)

    counts = Counter(c for c in cards if c is not Card.JOKER)
    distinct = len(counts)
    three_seen = 3 in counts.values()
    if distinct == 4:
        return Strength.ONE_PAIR
    if distinct == 3:
        return Strength.THREE_OF_A_KIND
    if distinct == 2:
        if joker_count == 1:
            return Strength.FOUR_OF_A_KIND if three_seen else Strength.FULL_HOUSE
        return Strength.FOUR_OF_A_KIND
    if distinct in (0, 1):
        return Strength.FIVE_OF_A_KIND
    return Strength.HIGH_CARD


def compare_hands(h1: Hand, h2: Hand) -> int:
    """Return -1, 0 or 1 as ``h1`` ranks below, equal to or above ``h2``."""
    return (h1 > h2) - (h1 < h2)


def parse_cards(text: str, jokers: bool) -> tuple[Card, ...]:
    """Parse five card letters; with ``jokers`` a 'J' is a joker."""
    letters = _CARD_RE.findall(text)
    if len(letters) != 5:
        raise ValueError(f"unexpected hand: {text!r}")
    return tuple(
        Card.JOKER if jokers and letter == "J" else _LETTER_CARDS[letter]
        for letter in letters
    )


def parse_hand(text: str, jokers: bool) -> Hand:
    """Parse cards and classify them."""
    cards = parse_cards(text, jokers)
    if jokers:
        strength = calculate_cards_strength_jokers(cards)
    else:
        strength = calculate_cards_strength(cards)
    return Hand(strength=strength, cards=cards)


def parse_bid(text: str) -> int:
    """Parse a bid amount."""
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"invalid bid: {text!r}") from None


def parse_hand_and_bid(line: str, jokers: bool) -> tuple[Hand, int]:
    """Parse a 'CARDS BID' line."""
    fields = line.split()
    if len(fields) < 2:
        raise ValueError(f"invalid hand line: {line!r}")
    return parse_hand(fields[0], jokers), parse_bid(fields[1])


def total_winnings(text: str, jokers: bool) -> int:
    """Rank every hand and sum each bid multiplied by its rank."""
    entries = [
        parse_hand_and_bid(line, jokers) for line in text.split("\n") if line.strip()
    ]
    ranked = sorted(entries, key=lambda entry: entry[0])
    return sum(rank * bid for rank, (_, bid) in enumerate(ranked, start=1))