"""Strategies that sort stack a and report the moves they used."""

from __future__ import annotations

from collections.abc import Iterable

from pushswap.stacks import Node, Stacks


def _perform(stacks: Stacks, moves: list[str], *names: str) -> None:
    for name in names:
        stacks.apply(name)
        moves.append(name)


def _drain_b(stacks: Stacks, moves: list[str]) -> None:
    while stacks.b:
        _perform(stacks, moves, "pa")


def max_bits(indexes: Iterable[int]) -> int:
    """Number of bits needed to write the largest index (0 when none is positive)."""
    largest = max(indexes, default=0)
    return max(largest, 0).bit_length()


def radix_sort(stacks: Stacks) -> list[str]:
    """Binary radix sort on the ranks, least significant bit first."""
    moves: list[str] = []
    bits = max_bits(node.index for node in stacks.a)
    for bit in range(bits):
        for _ in range(stacks.size):
            if (stacks.a[0].index >> bit) & 1 == 0:
                _perform(stacks, moves, "pb")
            else:
                _perform(stacks, moves, "ra")
        _drain_b(stacks, moves)
    return moves


def _min_position(stack: Iterable[Node]) -> int:
    best_pos = 0
    best_index = None
    for pos, node in enumerate(stack):
        if best_index is None or node.index < best_index:
            best_index = node.index
            best_pos = pos
    return best_pos


def selection_sort(stacks: Stacks) -> list[str]:
    """Rotate the smallest to the top and push it to b, then bring everything back."""
    moves: list[str] = []
    for _ in range(stacks.size):
        steps = _min_position(stacks.a)
        _perform(stacks, moves, *(["ra"] * steps))
        _perform(stacks, moves, "pb")
    _drain_b(stacks, moves)
    return moves


def best_sort(stacks: Stacks) -> list[str]:
    """Sort with whichever of selection and radix sort needs fewer moves."""
    selection_cost = len(selection_sort(stacks.copy()))
    radix_cost = len(radix_sort(stacks.copy()))
    if selection_cost <= radix_cost:
        return selection_sort(stacks)
    return radix_sort(stacks)


def _strictly_increasing(stack: Iterable[Node]) -> bool:
    values = [node.value for node in stack]
    return all(left < right for left, right in zip(values, values[1:]))


def sort_three(stacks: Stacks, base: int) -> list[str]:
    """Sort three elements of a whose ranks are base, base + 1 and base + 2."""
    moves: list[str] = []
    a = stacks.a
    if _strictly_increasing(a):
        return moves
    top = a[0].index
    if top == base:
        _perform(stacks, moves, "rra", "sa")
    elif top == base + 1:
        if a[1].index == base:
            _perform(stacks, moves, "sa")
        else:
            _perform(stacks, moves, "rra")
    elif top == base + 2:
        if a[1].index == base:
            _perform(stacks, moves, "ra")
        else:
            _perform(stacks, moves, "ra", "sa")
    return moves


def _position_of(stack: Iterable[Node], index: int) -> int:
    for pos, node in enumerate(stack):
        if node.index == index:
            return pos
    return -1


def _rotate_to_top(stacks: Stacks, moves: list[str], pos: int) -> None:
    length = len(stacks.a)
    if pos <= length // 2:
        _perform(stacks, moves, *(["ra"] * max(pos, 0)))
    else:
        _perform(stacks, moves, *(["rra"] * (length - pos)))


def sort_five(stacks: Stacks) -> list[str]:
    """Sort five elements: park the two smallest on b, sort three, bring them back."""
    moves: list[str] = []
    for rank in (0, 1):
        _rotate_to_top(stacks, moves, _position_of(stacks.a, rank))
        _perform(stacks, moves, "pb")
    moves.extend(sort_three(stacks, 2))
    b = stacks.b
    if len(b) >= 2 and b[0].index < b[1].index:
        _perform(stacks, moves, "sb")
    _perform(stacks, moves, "pa", "pa")
    return moves