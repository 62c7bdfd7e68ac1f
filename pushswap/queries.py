"""Questions asked of a stack: order, extremes, positions and ranks."""

from __future__ import annotations

from bisect import bisect_left
from typing import Optional

from pushswap.stack import PushSwapError, Stack


def _require_nodes(stack: Stack) -> None:
    if not len(stack):
        raise PushSwapError("empty stack")


def is_sorted(stack: Stack) -> bool:
    """True when the values ascend from top to bottom."""
    values = stack.values()
    return all(x <= y for x, y in zip(values, values[1:]))


def has_duplicates(stack: Stack) -> bool:
    """True when some value appears more than once."""
    values = stack.values()
    return len(set(values)) != len(values)


def find_max(stack: Stack) -> int:
    """The largest value; an empty stack is an error."""
    _require_nodes(stack)
    return max(stack.values())


def get_min(stack: Stack) -> int:
    """The smallest value; an empty stack is an error."""
    _require_nodes(stack)
    return min(stack.values())


def get_max(stack: Stack) -> int:
    """The largest value; an empty stack is an error."""
    _require_nodes(stack)
    return max(stack.values())


def min_element(stack: Stack) -> int:
    """The smallest value; an empty stack is an error."""
    return get_min(stack)


def max_index(stack: Stack) -> int:
    """The largest rank held by any node; an empty stack is an error."""
    _require_nodes(stack)
    return max(node.index for node in stack)


def position_of(value: int, stack: Stack) -> Optional[int]:
    """Distance from the top of the first node holding *value*, or None."""
    for position, node in enumerate(stack):
        if node.value == value:
            return position
    return None


def assign_indices(stack: Stack) -> None:
    """Give every node its rank: the number of values smaller than its own."""
    ordered = sorted(stack.values())
    for node in stack:
        node.index = bisect_left(ordered, node.value)


def format_stack(stack: Stack) -> str:
    """The values from top to bottom, one per line."""
    return "".join(f"{value}\n" for value in stack.values())