"""Ordering helpers over sequences of stack elements."""

from __future__ import annotations

from typing import Iterable, Sequence

from .stacks import Element


def is_sorted(elements: Iterable[Element]) -> bool:
    """True if the values never decrease from top to bottom."""
    previous = None
    for element in elements:
        if previous is not None and previous > element.value:
            return False
        previous = element.value
    return True


def assign_index(elements: Sequence[Element]) -> None:
    """Set each element's index to the number of values smaller than its own."""
    values = sorted(element.value for element in elements)
    rank: dict[int, int] = {}
    for position, value in enumerate(values):
        rank.setdefault(value, position)
    for element in elements:
        element.index = rank[element.value]


def get_min(elements: Iterable[Element]) -> int:
    """Smallest value; raises ValueError when there are no elements."""
    return min(element.value for element in elements)


def get_max(elements: Iterable[Element]) -> int:
    """Largest value; raises ValueError when there are no elements."""
    return max(element.value for element in elements)