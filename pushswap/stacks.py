"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable


@dataclass
class Element:
    """A value on a stack and its rank among all values."""

    value: int
    index: int = 0


class Stacks:
    """Stacks ``a`` and ``b``, top first, with a log of the operations performed.

    Every operation that takes effect and is asked to record itself appends
    its name to :attr:`operations`. The combined operations (``ss``, ``rr``,
    ``rrr``) are always recorded, even when neither stack changes.
    """

    def __init__(self, a: Iterable[Element] = (), b: Iterable[Element] = ()) -> None:
        self.a: deque[Element] = deque(a)
        self.b: deque[Element] = deque(b)
        self.operations: list[str] = []

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "Stacks":
        """Build stacks with ``values`` on ``a`` (first value on top) and ``b`` empty."""
        return cls(Element(value) for value in values)

    def a_values(self) -> list[int]:
        """Values on ``a``, top first."""
        return [element.value for element in self.a]

    def b_values(self) -> list[int]:
        """Values on ``b``, top first."""
        return [element.value for element in self.b]

    def _record(self, name: str) -> None:
        self.operations.append(name)

    @staticmethod
    def _swap(stack: deque[Element]) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _rotate(stack: deque[Element], steps: int) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(steps)
        return True

    def sa(self, record: bool = True) -> None:
        """Swap the two top elements of ``a``."""
        if self._swap(self.a) and record:
            self._record("sa")

    def sb(self, record: bool = True) -> None:
        """Swap the two top elements of ``b``."""
        if self._swap(self.b) and record:
            self._record("sb")

    def ss(self) -> None:
        """``sa`` and ``sb`` at once."""
        self.sa(False)
        self.sb(False)
        self._record("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self._record("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self._record("pb")

    def ra(self, record: bool = True) -> None:
        """Rotate ``a`` upwards: the top goes to the bottom."""
        if self._rotate(self.a, -1) and record:
            self._record("ra")

    def rb(self, record: bool = True) -> None:
        """Rotate ``b`` upwards: the top goes to the bottom."""
        if self._rotate(self.b, -1) and record:
            self._record("rb")

    def rr(self) -> None:
        """``ra`` and ``rb`` at once."""
        self.ra(False)
        self.rb(False)
        self._record("rr")

    def rra(self, record: bool = True) -> None:
        """Rotate ``a`` downwards: the bottom goes to the top."""
        if self._rotate(self.a, 1) and record:
            self._record("rra")

    def rrb(self, record: bool = True) -> None:
        """Rotate ``b`` downwards: the bottom goes to the top."""
        if self._rotate(self.b, 1) and record:
            self._record("rrb")

    def rrr(self) -> None:
        """``rra`` and ``rrb`` at once."""
        self.rra(False)
        self.rrb(False)
        self._record("rrr")