"""Command line entry: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import InputError, parse_arguments, split_words
from pushswap.sorter import sort_stacks
from pushswap.stack import Stacks


def main(argv: Sequence[str] | None = None) -> int:
    """Read the numbers, print the sorting operations, return the exit code.

    One argument is split on spaces; several are taken one number each.
    Invalid input prints ``Error`` and gives status 1.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or (len(args) == 1 and not args[0]):
        return 1
    if len(args) == 1:
        args = split_words(args[0], " ")
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stdout.write("Error\n")
        return 1
    sort_stacks(Stacks(values))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())