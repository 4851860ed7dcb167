"""Trebuchet?!: calibration values hidden in lines of text."""

from __future__ import annotations

_DIGIT_WORDS = (
    ("one", 1),
    ("two", 2),
    ("three", 3),
    ("four", 4),
    ("five", 5),
    ("six", 6),
    ("seven", 7),
    ("eight", 8),
    ("nine", 9),
)


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def digit_from_string(text: str) -> tuple[int, int]:
    """Find the first spelled-out digit in ``text``.

    Returns the digit and the number of characters consumed up to the end
    of its word. Raises ValueError on reaching a numeric digit first or
    when no word is found.
    """
    for index in range(len(text)):
        rest = text[index:]
        if _is_digit(rest[0]):
            raise ValueError(f"unexpected character {rest!r}")
        for word, digit in _DIGIT_WORDS:
            if rest.startswith(word):
                return digit, index + len(word)
    raise ValueError(f"unknown string {text!r}")


def calculate_calibration_value(line: str) -> int:
    """Combine the first and last digits of ``line`` into a two-digit number."""
    digits = []
    for index, c in enumerate(line):
        if _is_digit(c):
            digits.append(int(c))
            continue
        try:
            digit, _ = digit_from_string(line[index:])
        except ValueError:
            continue
        digits.append(digit)
    if not digits:
        raise ValueError("no digits")
    return digits[0] * 10 + digits[-1]


def parse_calibration_values(text: str) -> int:
    """Return the sum of the calibration values of every line."""
    if text == "":
        return 0
    return sum(calculate_calibration_value(line) for line in text.split("\n"))