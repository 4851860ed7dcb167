"""Monkey Math: a tree of shouting monkeys and the number you must yell."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

ROOT_MONKEY_NAME = "root"

_LEAF_RE = re.compile(r"\s*(\S+)\s+([+-]?\d+)")

Operation = Callable[[int, int], int]


def _div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


# For each operator: the operation, then the inverses used when the unknown
# is on the left or on the right. Inverses take (known operand, result).
_OPERATIONS: dict[str, tuple[Operation, Operation, Operation]] = {
    "+": (lambda a, b: a + b, lambda a, b: b - a, lambda a, b: b - a),
    "-": (lambda a, b: a - b, lambda a, b: b + a, lambda a, b: a - b),
    "*": (lambda a, b: a * b, lambda a, b: _div(b, a), lambda a, b: _div(b, a)),
    "/": (_div, lambda a, b: b * a, _div),
}


@dataclass
class TreeNode:
    """A monkey: either a leaf with a value or an operation on two others."""

    name: str
    leaf: bool = False
    value: int = 0
    poisoned: bool = False
    op: str = ""
    left: str = ""
    left_poisoned: bool = False
    left_value: int = 0
    right: str = ""
    right_poisoned: bool = False
    right_value: int = 0

    def apply(self, a: int, b: int) -> int:
        """Apply this node's operation to its operands."""
        return _OPERATIONS[self.op][0](a, b)


def new_leaf_node(name: str, value: int) -> TreeNode:
    """Create a leaf node holding ``value``."""
    return TreeNode(name=name, leaf=True, value=value)


def new_parent_node(name: str, operation: str) -> TreeNode:
    """Create an operation node; ``operation`` is one of '+', '-', '*', '/'."""
    if operation not in _OPERATIONS:
        raise ValueError(f"invalid operation {operation!r}")
    return TreeNode(name=name, leaf=False, op=operation)


def node_solve(node: TreeNode, a: int, result: int) -> int:
    """Return the unknown operand given the known operand ``a`` and the ``result``."""
    _, invert_left, invert_right = _OPERATIONS[node.op]
    if node.left_poisoned:
        return invert_left(a, result)
    return invert_right(a, result)


@dataclass
class TreeRoot:
    """All monkeys, looked up by name."""

    lookup: dict[str, TreeNode]

    def find_node(self, node_name: str) -> TreeNode:
        """Return the node called ``node_name``."""
        try:
            return self.lookup[node_name]
        except KeyError:
            raise KeyError(f"unknown monkey {node_name!r}") from None

    def evaluate(self, node_name: str) -> int:
        """Evaluate a node, recording child values; -1 if a child is poisoned."""
        node = self.find_node(node_name)
        if node.leaf:
            return node.value
        node.left_value = self.evaluate(node.left)
        node.right_value = self.evaluate(node.right)
        if node.left_poisoned or node.right_poisoned:
            return -1
        return node.apply(node.left_value, node.right_value)

    def solve(self, node_name: str, result: int) -> int:
        """Follow the poisoned path down, returning the poisoned leaf's needed value."""
        node = self.find_node(node_name)
        if node_name == ROOT_MONKEY_NAME:
            if node.left_poisoned:
                result = node.right_value
                node = self.find_node(node.left)
            else:
                result = node.left_value
                node = self.find_node(node.right)

        while not node.poisoned:
            if node.left_poisoned:
                result = node_solve(node, node.right_value, result)
                node = self.find_node(node.left)
            else:
                result = node_solve(node, node.left_value, result)
                node = self.find_node(node.right)
        return result

    def promote_poison(self, node_name: str) -> bool:
        """Mark which children lead to a poisoned leaf; True if this node does."""
        node = self.find_node(node_name)
        if node.leaf:
            return node.poisoned
        if self.promote_poison(node.left):
            node.left_poisoned = True
        if self.promote_poison(node.right):
            node.right_poisoned = True
        return node.left_poisoned or node.right_poisoned


def _parse_node(line: str, poison_name: str | None) -> TreeNode:
    fields = line.split()
    if len(fields) == 4 and len(fields[2]) == 1:
        node = new_parent_node(fields[0].removesuffix(":"), fields[2])
        node.left = fields[1]
        node.right = fields[3]
        return node
    match = _LEAF_RE.match(line)
    if match is None:
        raise ValueError(f"invalid monkey line {line!r}")
    node = new_leaf_node(match.group(1).removesuffix(":"), int(match.group(2)))
    if node.name == poison_name:
        node.poisoned = True
        node.value = -1
    return node


def create_tree(poison_name: str | None, text: str) -> TreeRoot:
    """Parse the monkeys, marking ``poison_name`` as the unknown leaf."""
    lookup: dict[str, TreeNode] = {}
    for line in text.split("\n"):
        node = _parse_node(line, poison_name)
        lookup[node.name] = node

    root = lookup.get(ROOT_MONKEY_NAME)
    if root is None:
        raise ValueError("missing root monkey")

    tree = TreeRoot(lookup)
    tree.promote_poison(ROOT_MONKEY_NAME)
    if root.left_poisoned and root.right_poisoned:
        raise ValueError("both sides of the root tree are poisoned")
    return tree


def yell_root(text: str) -> int:
    """Return the number the root monkey yells."""
    return create_tree(None, text).evaluate(ROOT_MONKEY_NAME)