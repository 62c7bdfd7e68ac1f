"""Command-line entry: print the moves that sort the given integers."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushswap.algorithm import sort_large_stack
from pushswap.moves import Machine
from pushswap.parsing import parse_arguments
from pushswap.stack import PushSwapError, Stack

ERROR_TEXT = "Error.\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the integers in *argv* and write the sorting moves to stdout.

    Any error writes ``Error.`` to stderr and gives exit status 1.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if not args:
            raise PushSwapError("no arguments")
        machine = Machine(parse_arguments(args), Stack(), sys.stdout)
        sort_large_stack(machine)
    except PushSwapError:
        sys.stderr.write(ERROR_TEXT)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())