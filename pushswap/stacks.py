"""The two stacks of the puzzle and the eleven operations that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


class Stacks:
    """Stacks ``a`` and ``b``, with the top of each at index 0.

    Every operation appends its name to :attr:`moves`, so the list holds the
    instructions performed so far in order.
    """

    def __init__(self, numbers: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(numbers)
        self.b: deque[int] = deque()
        self.moves: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    @staticmethod
    def _swap(stack: deque[int]) -> None:
        if len(stack) >= 2:
            stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _rotate(stack: deque[int]) -> None:
        stack.rotate(-1)

    @staticmethod
    def _reverse_rotate(stack: deque[int]) -> None:
        stack.rotate(1)

    @staticmethod
    def _push(source: deque[int], target: deque[int], name: str) -> None:
        if not source:
            raise IndexError(f"{name}: the source stack is empty")
        target.appendleft(source.popleft())

    def sa(self) -> None:
        """Swap the top two elements of ``a``."""
        self._swap(self.a)
        self.moves.append("sa")

    def sb(self) -> None:
        """Swap the top two elements of ``b``."""
        self._swap(self.b)
        self.moves.append("sb")

    def ss(self) -> None:
        """Swap the top two elements of both stacks."""
        self._swap(self.a)
        self._swap(self.b)
        self.moves.append("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        self._push(self.b, self.a, "pa")
        self.moves.append("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        self._push(self.a, self.b, "pb")
        self.moves.append("pb")

    def ra(self) -> None:
        """Rotate ``a`` upwards: the top element becomes the bottom one."""
        self._rotate(self.a)
        self.moves.append("ra")

    def rb(self) -> None:
        """Rotate ``b`` upwards: the top element becomes the bottom one."""
        self._rotate(self.b)
        self.moves.append("rb")

    def rr(self) -> None:
        """Rotate both stacks upwards."""
        self._rotate(self.a)
        self._rotate(self.b)
        self.moves.append("rr")

    def rra(self) -> None:
        """Rotate ``a`` downwards: the bottom element becomes the top one."""
        self._reverse_rotate(self.a)
        self.moves.append("rra")

    def rrb(self) -> None:
        """Rotate ``b`` downwards: the bottom element becomes the top one."""
        self._reverse_rotate(self.b)
        self.moves.append("rrb")

    def rrr(self) -> None:
        """Rotate both stacks downwards."""
        self._reverse_rotate(self.a)
        self._reverse_rotate(self.b)
        self.moves.append("rrr")