"""Command line entry: read numbers, print the moves that sort them."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import InputError, parse_int, split_words, validate_input
from pushswap.sorting import best_sort, sort_five, sort_three
from pushswap.stacks import build_stacks, is_sorted


def sort_moves(args: Sequence[str]) -> list[str]:
    """Moves that sort the given numbers; a single argument is split on blanks.

    Raises InputError when the arguments are not distinct 32-bit integers.
    """
    words = split_words(args[0]) if len(args) == 1 else list(args)
    validate_input(words)
    stacks = build_stacks(parse_int(word) for word in words)
    if is_sorted(stacks.values()):
        return []
    if len(words) == 3:
        return sort_three(stacks, 0)
    if len(words) == 5:
        return sort_five(stacks)
    return best_sort(stacks)


def main(argv: Sequence[str] | None = None) -> int:
    """Print one move per line; on bad input print Error to stderr and return 1."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        moves = sort_moves(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    for move in moves:
        print(move)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())