# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a fixed
set of moves. The moves used are written to standard output, one per line.

## Moves

| Move  | Effect                                         |
|-------|------------------------------------------------|
| `sa`  | swap the top two values of `a`                 |
| `sb`  | swap the top two values of `b`                 |
| `ss`  | `sa` and `sb` together                         |
| `pa`  | move the top of `b` onto `a`                   |
| `pb`  | move the top of `a` onto `b`                   |
| `ra`  | rotate `a` up: the top goes to the bottom      |
| `rb`  | rotate `b` up                                  |
| `rr`  | `ra` and `rb` together                         |
| `rra` | rotate `a` down: the bottom comes to the top   |
| `rrb` | rotate `b` down                                |
| `rrr` | `rra` and `rrb` together                       |

`pa`, `pb`, `ra`, `rb`, `rra` and `rrb` do nothing, and print nothing, when
the stack they act on is too small. `sa`, `sb` and `ss` on a stack with
fewer than two values raise `pushswap.stack.PushSwapError`.

## Command line

```
pip install .
pushswap 3 1 2
pushswap "5 -4 12 0"
```

Numbers may be given as separate arguments or together in one
space-separated argument. The first number is the top of stack `a`.
Each number is optional leading whitespace, an optional `+` or `-`, then
decimal digits.

The input is rejected with `Error.` on standard error and exit status 1 when:

- no arguments are given,
- an argument is empty or holds only spaces,
- a value is not an integer,
- a value lies outside the 32-bit signed range,
- a value appears more than once.

## How it sorts

Every input is sorted the same way: each value is replaced by its rank
(the number of smaller values), and the ranks are radix-sorted one bit at a
time, sending values whose bit is 0 to `b` with `pb`, rotating the others
with `ra`, and bringing everything back with `pa`. Only `pa`, `pb` and `ra`
are ever printed.

## Library use

```python
import io

from pushswap.stack import Stack
from pushswap.moves import Machine
from pushswap.algorithm import radix
from pushswap.queries import is_sorted

out = io.StringIO()
machine = Machine(Stack([3, 1, 2]), Stack(), out)
radix(machine)
print(machine.a.values())   # [1, 2, 3]
print(is_sorted(machine.a)) # True
print(machine.history)      # the moves made, in order
print(out.getvalue())       # the same moves, one per line
```

- `pushswap.stack` — `Stack`, `Node` and `PushSwapError`.
- `pushswap.moves` — `Machine`, holding stacks `a` and `b` with one method
  per move, and `transfer`.
- `pushswap.queries` — `is_sorted`, `has_duplicates`, `get_min`, `get_max`,
  `find_max`, `min_element`, `max_index`, `position_of`, `assign_indices`
  and `format_stack`.
- `pushswap.parsing` — `parse_integer` and `parse_arguments`, which turns
  command-line style arguments into a stack, raising `PushSwapError` on bad
  input.
- `pushswap.algorithm` — `calculate_max_bits`, `bit_pass`, `radix` and
  `sort_large_stack`, which raises `PushSwapError` if the result is not in
  order.
- `pushswap.cli` — `main(argv=None)`, the `pushswap` command.

The package also carries small general-purpose helpers:
`pushswap.chars` (character classes and case), `pushswap.textsearch` and
`pushswap.textbuild` (searching, comparing, slicing, splitting and trimming
text), `pushswap.numeric` (`parse_int`, `parse_long`, `int_to_str`),
`pushswap.memory` (byte-buffer filling, copying and comparing),
`pushswap.linereader` (`LineReader`, reading a stream line by line through a
fixed-size buffer), `pushswap.lists` (`LinkedList` and `TaggedList`) and
`pushswap.printer` (`put_char`, `put_str`, `put_endl`, `put_nbr`,
`format_printf` and `printf`).

## What it does not do

- There is no separate strategy for short inputs: two or three numbers are
  radix-sorted like any other list, so the move count is not minimal, and an
  input that is already in order still produces moves when it has more than
  one value.
- There is no checker command that reads moves from standard input and
  verifies them.

## Tests

```
pip install ".[test]"
pytest
```