"""Binary radix sort of stack a, using stack b as scratch space."""

from __future__ import annotations

from pushswap.moves import Machine
from pushswap.queries import assign_indices, is_sorted, max_index
from pushswap.stack import PushSwapError


def calculate_max_bits(max_num: int) -> int:
    """Number of bits needed to write the non-negative *max_num*."""
    if max_num < 0:
        raise ValueError(f"expected a non-negative number, got {max_num}")
    bits = 0
    while max_num >> bits:
        bits += 1
    return bits


def bit_pass(machine: Machine, bit: int) -> None:
    """Send nodes whose rank has *bit* clear to b, then bring them all back."""
    for _ in range(len(machine.a)):
        top = next(iter(machine.a))
        if (top.index >> bit) & 1 == 0:
            machine.pb()
        else:
            machine.ra()
    while len(machine.b):
        machine.pa()


def radix(machine: Machine) -> None:
    """Rank the nodes of a and sort them one bit of rank at a time."""
    assign_indices(machine.a)
    for bit in range(calculate_max_bits(max_index(machine.a))):
        bit_pass(machine, bit)


def sort_large_stack(machine: Machine) -> None:
    """Radix-sort a, raising if the result is not in order."""
    radix(machine)
    if not is_sorted(machine.a):
        raise PushSwapError("stack was not sorted")