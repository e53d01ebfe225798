"""Sorting strategies for the two-stack puzzle and the helpers they share."""

from __future__ import annotations

from itertools import islice
from typing import Sequence

from .parsing import INT_MAX, INT_MIN
from .stacks import Element, Stacks


def _half(number: int) -> int:
    """Integer half, truncated towards zero."""
    return int(number / 2)


def find_highest_index(stack: Sequence[Element]) -> int:
    """Largest index on ``stack``; INT_MIN when it is empty."""
    return max((element.index for element in stack), default=INT_MIN)


def get_position(stack: Sequence[Element], index: int) -> int:
    """Distance from the top of the element with ``index``, or -1 if absent."""
    for position, element in enumerate(stack):
        if element.index == index:
            return position
    return -1


def find_max_position(stack: Sequence[Element]) -> int:
    """Distance from the top of the first element with the largest index (0 if empty)."""
    best_position = 0
    best_index = None
    for position, element in enumerate(stack):
        if best_index is None or element.index > best_index:
            best_index = element.index
            best_position = position
    return best_position


def find_insert_position(stack: Sequence[Element], value: int) -> int:
    """Position of the smallest value above ``value``; 0 when there is none."""
    closest = INT_MAX
    target = 0
    for position, element in enumerate(stack):
        if value < element.value < closest:
            closest = element.value
            target = position
    return target


def smart_insert(stacks: Stacks) -> None:
    """Rotate ``a`` so the top of ``b`` lands in order, then push it across."""
    if not stacks.b:
        return
    if not stacks.a:
        stacks.pa()
        return
    target = find_insert_position(stacks.a, stacks.b[0].value)
    size = len(stacks.a)
    if target <= size // 2:
        for _ in range(target):
            stacks.ra()
    else:
        for _ in range(size - target):
            stacks.rra()
    stacks.pa()


def get_optimal_chunk_count(size: int) -> int:
    """Number of index chunks used by :func:`chunk_sort` for ``size`` elements."""
    if size <= 100:
        return 5
    if size <= 500:
        return 11
    return 15


def get_steps_to_top(stack: Sequence[Element], index: int) -> int:
    """Distance from the top of ``index``; the stack length when it is absent."""
    for position, element in enumerate(stack):
        if element.index == index:
            return position
    return len(stack)


def is_chunk_empty(stack: Sequence[Element], low: int, high: int) -> bool:
    """True if no element's index lies within ``low``..``high`` inclusive."""
    return not any(low <= element.index <= high for element in stack)


def should_rotate_b(stack: Sequence[Element], low: int, high: int) -> bool:
    """True if ``stack`` holds two or more and its top index is below the chunk's middle."""
    if len(stack) < 2:
        return False
    return stack[0].index < low + _half(high - low)


def sort_two(stacks: Stacks) -> None:
    """Order the two elements of ``a``."""
    if stacks.a[0].value > stacks.a[1].value:
        stacks.sa()


def sort_three(stacks: Stacks) -> None:
    """Order the three top elements of ``a`` by value in at most two operations."""
    values = [element.value for element in islice(stacks.a, 3)]
    if len(values) < 3:
        raise ValueError("sort_three needs three elements on stack a")
    first, second, third = values
    if first > second and second < third and first < third:
        stacks.sa()
    elif first > second and second > third:
        stacks.sa()
        stacks.rra()
    elif first > second and second < third:
        stacks.ra()
    elif first < second and second > third and first < third:
        stacks.sa()
        stacks.ra()
    elif first < second and second > third:
        stacks.rra()


def sort_five(stacks: Stacks) -> None:
    """Sort up to five elements on ``a`` by parking its two lowest ranks on ``b``."""
    lowest = min(element.index for element in stacks.a)
    pushed = 0
    while len(stacks.a) > 3:
        if stacks.a[0].index <= lowest + 1:
            stacks.pb()
            pushed += 1
        else:
            stacks.ra()

    sort_three(stacks)

    while pushed:
        if stacks.b[0].index == lowest or stacks.a[0].index > stacks.b[0].index:
            stacks.pa()
            pushed -= 1
        else:
            stacks.ra()

    while stacks.a[0].index != lowest:
        stacks.ra()


def sort_medium(stacks: Stacks) -> None:
    """Move minima to ``b`` until five remain, sort those, then insert the rest back."""
    while len(stacks.a) > 5:
        smallest = min(stacks.a, key=lambda element: element.value)
        position = get_position(stacks.a, smallest.index)
        rotate = stacks.ra if position <= len(stacks.a) // 2 else stacks.rra
        while stacks.a[0] is not smallest:
            rotate()
        stacks.pb()

    sort_five(stacks)

    while stacks.b:
        smart_insert(stacks)


def _push_back_to_a(stacks: Stacks) -> None:
    while stacks.b:
        max_position = find_max_position(stacks.b)
        size = len(stacks.b)
        if max_position <= size // 2:
            for _ in range(max_position):
                stacks.rb()
        else:
            for _ in range(size - max_position):
                stacks.rrb()
        stacks.pa()


def chunk_sort(stacks: Stacks) -> None:
    """Push ``a`` to ``b`` chunk by chunk of indices, then pull the maxima back."""
    size = len(stacks.a)
    chunk_count = get_optimal_chunk_count(size)
    chunk_size = size // chunk_count
    for chunk in range(1, chunk_count + 1):
        low = (chunk - 1) * chunk_size
        high = size - 1 if chunk == chunk_count else chunk * chunk_size - 1
        while not is_chunk_empty(stacks.a, low, high):
            if low <= stacks.a[0].index <= high:
                stacks.pb()
                if stacks.b[0].index < _half(low + high) and len(stacks.b) > 1:
                    stacks.rb()
            else:
                stacks.ra()
    _push_back_to_a(stacks)


def dispatch_sort(stacks: Stacks) -> None:
    """Choose a strategy by the size of ``a`` (indices must already be assigned)."""
    size = len(stacks.a)
    if size < 2:
        return
    if size == 2:
        sort_two(stacks)
    elif size == 3:
        sort_three(stacks)
    elif size <= 5:
        sort_five(stacks)
    elif size <= 20:
        sort_medium(stacks)
    else:
        chunk_sort(stacks)