# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
set of stack moves. The `pushswap` command prints the moves that turn stack
`a` into ascending order, one per line.

## Moves

| Move  | Effect                                      |
|-------|---------------------------------------------|
| `sa`  | swap the top two elements of `a`            |
| `sb`  | swap the top two elements of `b`            |
| `ss`  | `sa` and `sb` together                      |
| `pa`  | move the top of `b` onto `a`                |
| `pb`  | move the top of `a` onto `b`                |
| `ra`  | rotate `a` up (top goes to the bottom)      |
| `rb`  | rotate `b` up                               |
| `rra` | rotate `a` down (bottom comes to the top)   |
| `rrb` | rotate `b` down                             |

A move on a stack with too few elements does nothing.

## Usage

Pass the numbers as separate arguments, or as one quoted string split on
spaces and tabs:

```
pushswap 3 2 1
pushswap "4 67 3 87 23"
```

The same entry point runs as `python -m pushswap.cli`.

The first number given is the top of stack `a`. With no arguments, or with
input that is already sorted, nothing is printed. Three and five elements use
dedicated short sequences; every other size uses whichever of a selection
sort or a binary radix sort on the elements' ranks needs fewer moves
(selection sort when they tie).

Each number must be an optional `+` or `-` followed by digits only, must lie
in the 32-bit signed range, and must not equal another number given (so `1`
and `+1` count as duplicates). Otherwise the command prints `Error` to
standard error and exits with status 1.

## Library use

```python
from pushswap.cli import sort_moves
from pushswap.stacks import build_stacks
from pushswap.sorting import best_sort

print(sort_moves(["3", "2", "1"]))

stacks = build_stacks([5, 1, 4, 2, 3, 0])
moves = best_sort(stacks)
print(stacks.values())  # [0, 1, 2, 3, 4, 5]
```

- `pushswap.parsing`: `parse_int`, `split_words`, `is_number`,
  `has_duplicates`, `check_input`, and `validate_input`, which raises
  `InputError` (a `ValueError`) on bad input.
- `pushswap.stacks`: `Node`, `Stacks` with one method per move plus
  `apply(move)`, `copy()`, `values()` and `indexes()`; `build_stacks`,
  `rank_indexes` and `is_sorted`.
- `pushswap.sorting`: `radix_sort`, `selection_sort`, `best_sort`,
  `sort_three(stacks, base)`, `sort_five` and `max_bits`. Each sorter changes
  the `Stacks` it is given and returns the list of moves it made.
- `pushswap.cli`: `sort_moves(args)` and `main(argv=None)`.

## What it does not do

There is no command that reads a list of moves and checks whether they sort
a given input. To replay moves yourself, build stacks with `build_stacks`
and call `Stacks.apply` for each move.

## Tests

```
pip install -e ".[test]"
pytest
```