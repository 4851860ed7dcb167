"""Haunted Wasteland: walking a network of nodes by left/right instructions."""

from __future__ import annotations

import enum
import re
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, field

_DIRECTION_RE = re.compile(r"L|R")
_NODE_NAME_RE = re.compile(r"[0-9A-Z]{3}")


class Direction(enum.Enum):
    """Which branch to take at a node."""

    LEFT = "L"
    RIGHT = "R"


@dataclass(eq=False)
class Node:
    """A named node with links to its left and right successors."""

    name: str
    left: Node | None = field(default=None, repr=False)
    right: Node | None = field(default=None, repr=False)

    def describe(self) -> str:
        """Render as 'NAME = (LEFT, RIGHT)'."""
        left = self.left.name if self.left else ""
        right = self.right.name if self.right else ""
        return f"{self.name} = ({left}, {right})"

    def follow(self, direction: Direction) -> Node:
        """Return the successor in ``direction``."""
        target = self.left if direction is Direction.LEFT else self.right
        if target is None:
            raise ValueError(f"node {self.name} has no {direction.name.lower()} link")
        return target


@dataclass(frozen=True)
class NodeDescription:
    """A node's name and the names of its successors."""

    name: str
    left_name: str
    right_name: str


@dataclass
class Network:
    """All nodes, looked up by name."""

    nodes: dict[str, Node] = field(default_factory=dict)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes.values())

    def find(self, name: str) -> Node:
        """Return the node called ``name``."""
        try:
            return self.nodes[name]
        except KeyError:
            raise KeyError(f"unknown node {name!r}") from None

    def walk(self, start: Node, directions: Sequence[Direction], end: Node) -> int:
        """Count the steps from ``start`` to ``end``, repeating ``directions``."""
        return self.ghost_walk(
            [start], directions, lambda nodes: nodes[0].name == end.name
        )

    def ghost_walk(
        self,
        start: Iterable[Node],
        directions: Sequence[Direction],
        should_end: Callable[[list[Node]], bool],
    ) -> int:
        """Move all ``start`` nodes in step until ``should_end`` holds; return steps."""
        current = list(start)
        if not directions:
            if should_end(current):
                return 0
            raise ValueError("no directions to follow")
        steps = 0
        while True:
            for direction in directions:
                if should_end(current):
                    return steps
                steps += 1
                current = [node.follow(direction) for node in current]


def parse_directions(line: str) -> list[Direction]:
    """Parse a string of 'L' and 'R' instructions."""
    return [Direction(d) for d in _DIRECTION_RE.findall(line)]


def parse_node_description(line: str) -> NodeDescription:
    """Parse an 'AAA = (BBB, CCC)' line."""
    names = _NODE_NAME_RE.findall(line)
    if len(names) != 3:
        raise ValueError(f"unexpected node line {line!r}")
    return NodeDescription(*names)


def parse_network(lines: Iterable[str]) -> Network:
    """Build a network from node description lines."""
    descriptions = [parse_node_description(line) for line in lines]
    network = Network({d.name: Node(d.name) for d in descriptions})
    for d in descriptions:
        node = network.nodes[d.name]
        node.left = network.find(d.left_name)
        node.right = network.find(d.right_name)
    return network