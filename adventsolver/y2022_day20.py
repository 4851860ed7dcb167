"""Grove Positioning System: mixing a circular list of numbers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_NUMBER_RE = re.compile(r"\s*([+-]?\d+)")


@dataclass
class WrappedList:
    """A list of numbers treated as circular while mixing."""

    values: list[int] = field(default_factory=list)

    def new_index(self, index: int, delta: int) -> int:
        """Return where the element at ``index`` lands when moved by ``delta``."""
        if delta == 0:
            return index
        size = len(self.values)
        new = (index + delta) % size
        if delta < 0:
            if new > index:
                new -= 1
            elif new == 0:
                new = size - 1
        else:
            if new < index:
                new += 1
            elif new == size - 1:
                new = 0
        return new

    def move(self, index: int, delta: int) -> int:
        """Move the element at ``index`` by ``delta`` and return its new index."""
        new = self.new_index(index, delta)
        if new != index:
            self.values.insert(new, self.values.pop(index))
        return new

    def mix(self) -> None:
        """Move every element once by its own value, in original order."""
        handled = [False] * len(self.values)
        index = 0
        while index < len(self.values):
            if handled[index]:
                index += 1
                continue
            new = self.move(index, self.values[index])
            handled.pop(index)
            handled.insert(new, True)

    def coordinates(self) -> tuple[int, int, int]:
        """Return the values 1000, 2000 and 3000 places after the zero."""
        try:
            zero = self.values.index(0)
        except ValueError:
            raise ValueError("no zero in list") from None
        size = len(self.values)
        return (
            self.values[(zero + 1000) % size],
            self.values[(zero + 2000) % size],
            self.values[(zero + 3000) % size],
        )

    def describe(self) -> str:
        """Return the values joined with ', '."""
        return ", ".join(str(n) for n in self.values)


def parse_wrapped_list(text: str) -> WrappedList:
    """Parse one integer per line."""
    values = []
    for line in text.split("\n"):
        match = _NUMBER_RE.match(line)
        if match is None:
            raise ValueError(f"invalid number line: {line!r}")
        values.append(int(match.group(1)))
    return WrappedList(values)