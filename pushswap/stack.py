"""The numbered stacks the sorting puzzle is played on."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, Iterator, List, Optional


class PushSwapError(Exception):
    """Raised for invalid input or an impossible stack operation."""


@dataclass(eq=False)
class Node:
    """One element of a stack: its value and its rank among all values."""

    value: int
    index: int = 0


class Stack:
    """A stack of nodes, iterated from top to bottom."""

    def __init__(self, values: Optional[Iterable[int]] = None) -> None:
        self._nodes: Deque[Node] = deque()
        for value in values or ():
            self.push_bottom(value)

    def push_bottom(self, value: int) -> Node:
        """Add a new node holding *value* below all others and return it."""
        node = Node(value)
        self._nodes.append(node)
        return node

    def push_top(self, node: Node) -> None:
        """Put an existing *node* on top."""
        self._nodes.appendleft(node)

    def pop_node(self) -> Node:
        """Remove and return the top node."""
        if not self._nodes:
            raise PushSwapError("empty stack")
        return self._nodes.popleft()

    def pop(self) -> int:
        """Remove the top node and return its value."""
        return self.pop_node().value

    def values(self) -> List[int]:
        """The values from top to bottom."""
        return [node.value for node in self._nodes]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def swap(self) -> None:
        """Exchange the two top nodes."""
        if len(self._nodes) < 2:
            raise PushSwapError("swap needs at least two elements")
        first = self._nodes.popleft()
        second = self._nodes.popleft()
        self._nodes.appendleft(first)
        self._nodes.appendleft(second)

    def rotate(self) -> None:
        """Move the top node to the bottom; fewer than two nodes is a no-op."""
        if len(self._nodes) >= 2:
            self._nodes.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom node to the top; fewer than two nodes is a no-op."""
        if len(self._nodes) >= 2:
            self._nodes.rotate(1)

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"