"""Mirage Maintenance: extrapolating sequences by repeated differences."""

from __future__ import annotations

from collections.abc import Sequence


def parse_line(line: str) -> list[int]:
    """Parse a whitespace-separated list of integers."""
    return [int(token) for token in line.split()]


def get_differences(numbers: Sequence[int]) -> list[int]:
    """Return the differences between consecutive numbers."""
    return [b - a for a, b in zip(numbers, numbers[1:])]


def is_zero_differences(differences: Sequence[int]) -> bool:
    """True when every difference is zero (or there are none)."""
    return all(d == 0 for d in differences)


def _difference_layers(numbers: Sequence[int]) -> list[list[int]]:
    layers = [list(numbers)]
    while True:
        differences = get_differences(layers[-1])
        if is_zero_differences(differences):
            return layers
        layers.append(differences)


def calculate_next_number_forward(numbers: Sequence[int]) -> int:
    """Extrapolate the value after the end of ``numbers``."""
    next_value = 0
    for layer in reversed(_difference_layers(numbers)):
        next_value = layer[-1] + next_value
    return next_value


def calculate_next_number_backward(numbers: Sequence[int]) -> int:
    """Extrapolate the value before the start of ``numbers``."""
    next_value = 0
    for layer in reversed(_difference_layers(numbers)):
        next_value = layer[0] - next_value
    return next_value