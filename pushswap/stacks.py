"""The two stacks and the moves that act on them."""

from __future__ import annotations

from bisect import bisect_left
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


@dataclass
class Node:
    """One element: its value and its rank among all values."""

    value: int
    index: int = -1


@dataclass
class Stacks:
    """Stacks a and b, tops on the left, plus the number of elements sorted."""

    a: deque[Node] = field(default_factory=deque)
    b: deque[Node] = field(default_factory=deque)
    size: int = 0

    @staticmethod
    def _swap(stack: deque[Node]) -> None:
        if len(stack) >= 2:
            stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _rotate(stack: deque[Node], steps: int) -> None:
        if len(stack) >= 2:
            stack.rotate(steps)

    def sa(self) -> None:
        """Swap the top two elements of a."""
        self._swap(self.a)

    def sb(self) -> None:
        """Swap the top two elements of b."""
        self._swap(self.b)

    def ss(self) -> None:
        """Swap the top two of both stacks."""
        self._swap(self.a)
        self._swap(self.b)

    def pa(self) -> None:
        """Move the top of b onto a."""
        if self.b:
            self.a.appendleft(self.b.popleft())

    def pb(self) -> None:
        """Move the top of a onto b."""
        if self.a:
            self.b.appendleft(self.a.popleft())

    def ra(self) -> None:
        """Send the top of a to its bottom."""
        self._rotate(self.a, -1)

    def rb(self) -> None:
        """Send the top of b to its bottom."""
        self._rotate(self.b, -1)

    def rra(self) -> None:
        """Bring the bottom of a to its top."""
        self._rotate(self.a, 1)

    def rrb(self) -> None:
        """Bring the bottom of b to its top."""
        self._rotate(self.b, 1)

    def apply(self, move: str) -> None:
        """Perform a move given by its name."""
        moves = {
            "sa": self.sa,
            "sb": self.sb,
            "ss": self.ss,
            "pa": self.pa,
            "pb": self.pb,
            "ra": self.ra,
            "rb": self.rb,
            "rra": self.rra,
            "rrb": self.rrb,
        }
        try:
            action = moves[move]
        except KeyError:
            raise ValueError(f"unknown move: {move!r}") from None
        action()

    def copy(self) -> Stacks:
        """Copy stack a and the size; the copy's b starts empty."""
        return Stacks(
            a=deque(Node(node.value, node.index) for node in self.a),
            size=self.size,
        )

    def values(self) -> list[int]:
        """Values of a from top to bottom."""
        return [node.value for node in self.a]

    def indexes(self) -> list[int]:
        """Ranks of a from top to bottom."""
        return [node.index for node in self.a]


def rank_indexes(values: Sequence[int]) -> list[int]:
    """Rank of each value among all of them, 0 for the smallest."""
    ordered = sorted(values)
    return [bisect_left(ordered, value) for value in values]


def build_stacks(values: Iterable[int]) -> Stacks:
    """Put the values on a, top first, each ranked; b starts empty."""
    numbers = list(values)
    ranks = rank_indexes(numbers)
    return Stacks(
        a=deque(Node(value, rank) for value, rank in zip(numbers, ranks)),
        size=len(numbers),
    )


def is_sorted(values: Iterable[int]) -> bool:
    """True when the values never decrease."""
    numbers = list(values)
    return all(left <= right for left, right in zip(numbers, numbers[1:]))