"""The two stacks of the puzzle and the operations that move numbers between them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from itertools import pairwise
from typing import Deque, Iterable, List, Optional


@dataclass
class Node:
    """One number on a stack, with its rank among all the numbers (-1 if unranked)."""

    value: int
    index: int = -1


class Stacks:
    """Stack ``a`` holding the numbers, an empty stack ``b``, and the operations applied.

    The top of each stack is the left end of its deque. Every operation that
    changes something is appended by name to ``operations``; an operation
    that cannot apply (too few elements) does nothing and is not recorded.
    """

    def __init__(
        self, values: Iterable[int] = (), indices: Optional[Iterable[int]] = None
    ) -> None:
        numbers = list(values)
        ranks = [-1] * len(numbers) if indices is None else list(indices)
        if len(ranks) != len(numbers):
            raise ValueError("values and indices must have the same length")
        self.a: Deque[Node] = deque(Node(v, i) for v, i in zip(numbers, ranks))
        self.b: Deque[Node] = deque()
        self.operations: List[str] = []

    def _record(self, name: str) -> None:
        self.operations.append(name)

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        if len(self.a) < 2:
            return
        first = self.a.popleft()
        second = self.a.popleft()
        self.a.appendleft(first)
        self.a.appendleft(second)
        self._record("sa")

    def ra(self) -> None:
        """Move the top element of ``a`` to its bottom."""
        if len(self.a) < 2:
            return
        self.a.rotate(-1)
        self._record("ra")

    def rra(self) -> None:
        """Move the bottom element of ``a`` to its top."""
        if len(self.a) < 2:
            return
        self.a.rotate(1)
        self._record("rra")

    def pa(self) -> None:
        """Move the top element of ``b`` onto ``a``."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self._record("pa")

    def pb(self) -> None:
        """Move the top element of ``a`` onto ``b``."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self._record("pb")

    def is_sorted(self) -> bool:
        """True when the values of ``a`` never decrease from top to bottom."""
        return all(x.value <= y.value for x, y in pairwise(self.a))

    def values(self) -> List[int]:
        """Values of ``a`` from top to bottom."""
        return [node.value for node in self.a]

    def indices(self) -> List[int]:
        """Ranks of ``a`` from top to bottom."""
        return [node.index for node in self.a]