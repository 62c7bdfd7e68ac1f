"""The eleven puzzle moves, applied to a pair of stacks and written out by name."""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from pushswap.stack import Stack


def transfer(source: Stack, target: Stack) -> bool:
    """Move the top node of *source* onto *target*.

    Returns False, leaving both stacks as they were, when *source* is empty.
    """
    if not len(source):
        return False
    target.push_top(source.pop_node())
    return True


class Machine:
    """Stacks ``a`` and ``b`` together with the moves that act on them.

    Every move that takes effect is written to *out* (standard output by
    default), one name per line, and recorded in :attr:`history`.
    """

    def __init__(
        self,
        a: Stack,
        b: Optional[Stack] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        self.a = a
        self.b = Stack() if b is None else b
        self._out = out
        self.history: List[str] = []

    def _emit(self, move: str) -> None:
        self.history.append(move)
        stream = sys.stdout if self._out is None else self._out
        stream.write(move + "\n")

    def sa(self) -> None:
        """Swap the two top elements of a."""
        self.a.swap()
        self._emit("sa")

    def sb(self) -> None:
        """Swap the two top elements of b."""
        self.b.swap()
        self._emit("sb")

    def ss(self) -> None:
        """Swap the two top elements of both stacks."""
        self.a.swap()
        self.b.swap()
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of b onto a; nothing happens when b is empty."""
        if transfer(self.b, self.a):
            self._emit("pa")

    def pb(self) -> None:
        """Move the top of a onto b; nothing happens when a is empty."""
        if transfer(self.a, self.b):
            self._emit("pb")

    def ra(self) -> None:
        """Rotate a upwards; a stack of fewer than two is left alone."""
        if len(self.a) >= 2:
            self.a.rotate()
            self._emit("ra")

    def rb(self) -> None:
        """Rotate b upwards; a stack of fewer than two is left alone."""
        if len(self.b) >= 2:
            self.b.rotate()
            self._emit("rb")

    def rr(self) -> None:
        """Rotate both stacks upwards."""
        self.a.rotate()
        self.b.rotate()
        self._emit("rr")

    def rra(self) -> None:
        """Rotate a downwards; a stack of fewer than two is left alone."""
        if len(self.a) >= 2:
            self.a.reverse_rotate()
            self._emit("rra")

    def rrb(self) -> None:
        """Rotate b downwards; a stack of fewer than two is left alone."""
        if len(self.b) >= 2:
            self.b.reverse_rotate()
            self._emit("rrb")

    def rrr(self) -> None:
        """Rotate both stacks downwards."""
        self.a.reverse_rotate()
        self.b.reverse_rotate()
        self._emit("rrr")