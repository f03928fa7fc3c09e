"""Sorting stack ``a`` with the fewest practical instructions.

The values are first replaced by their ranks 1..n. A presort then pushes
everything but the three largest ranks to ``b`` in widening bands around
the median, and the final pass brings the ranks back to ``a`` from the
largest down.
"""

from __future__ import annotations

import io
import math
from bisect import bisect_left
from dataclasses import dataclass
from itertools import pairwise
from typing import Iterable, List, Sequence

from pushswap.stacks import Stacks


def rank(values: Iterable[int]) -> List[int]:
    """Replace each value with one plus the number of values smaller than it."""
    values = list(values)
    ordered = sorted(values)
    return [1 + bisect_left(ordered, value) for value in values]


def is_sorted(values: Iterable[int]) -> bool:
    """True when no value is greater than the one after it."""
    return all(first <= second for first, second in pairwise(values))


def best_part_size(size: int) -> int:
    """The smallest positive integer whose square is at least ``size``."""
    if size <= 1:
        return 1
    root = math.isqrt(size)
    return root if root * root >= size else root + 1


def choose_in_b(stacks: Stacks, value: int) -> bool:
    """True when ``value`` is somewhere in stack ``b``."""
    return value in stacks.b


def search_path(stack: Sequence[int], value: int) -> int:
    """Shortest rotation bringing ``value`` to the top.

    A positive result counts upward rotations, a negative one downward
    rotations. Raises ValueError when ``value`` is not in ``stack``.
    """
    items = list(stack)
    if value not in items:
        raise ValueError(f"{value} is not in the stack")
    forward = items.index(value)
    backward = (len(items) - forward) % len(items)
    if backward < forward:
        return -backward
    return forward


def _at(stack: Sequence[int], index: int) -> int:
    return stack[index % len(stack)]


def sort_three(stacks: Stacks) -> None:
    """Sort the top three elements of ``a`` when they are all it holds."""
    if not stacks.a:
        return
    first, second, third = (_at(stacks.a, index) for index in range(3))
    if first < third and second > third:
        stacks.sa()
        stacks.ra()
    elif first > second and first < third:
        stacks.sa()
    elif first < second and first > third:
        stacks.ra()
        stacks.ra()
    elif first > third and third > second:
        stacks.ra()
    elif first > second and second > third:
        stacks.sa()
        stacks.rra()


def decide_result(start_up: int, start_down: int, end_up: int, end_down: int) -> int:
    """Pick the cheapest of four rotation distances (downward ones are negative)."""
    if start_up <= end_up and start_up <= -start_down and start_up <= -end_down:
        return start_up
    if end_up <= start_up and end_up <= -start_down and end_up <= -end_down:
        return end_up
    if start_down >= end_down and -start_down <= start_up and -start_down <= end_up:
        return start_down
    return end_down


def _search(stack: Sequence[int], low: int, high: int, val_max: int, downward: bool) -> int:
    size = len(stack)
    if size <= 3:
        return 0
    for steps in range(size):
        value = stack[(-steps) % size] if downward else stack[steps]
        if low <= value <= high and value < val_max - 2:
            return -steps if downward else steps
    return -size if downward else size


def search_opti(stacks: Stacks, mid: int, val_max: int, part: int) -> int:
    """Rotation of ``a`` that brings the nearest element of the current band to the top.

    The band is the ranks from ``mid - part`` to ``mid + part``, leaving out
    the three largest ranks. Returns 0 when ``a`` holds three elements or fewer.
    """
    a = stacks.a
    start_up = _search(a, mid - part, mid, val_max, False)
    start_down = _search(a, mid - part, mid, val_max, True)
    end_up = _search(a, mid, mid + part, val_max, False)
    end_down = _search(a, mid, mid + part, val_max, True)
    return decide_result(start_up, start_down, end_up, end_down)


@dataclass
class _Parts:
    bot: int
    top: int


def _presort_step(stacks: Stacks, parts: _Parts, mid: int, val_max: int) -> None:
    top = stacks.a[0]
    if top >= mid:
        within = top <= mid + parts.top
        parts.top += 1
        if within and top < val_max - 2:
            stacks.pb()
    else:
        within = top >= mid - parts.bot
        parts.bot += 1
        if within and top < val_max - 2:
            stacks.pb()
            stacks.rb()
    while stacks.a:
        distance = search_opti(stacks, mid, val_max, parts.bot)
        if distance == 0:
            break
        if distance < 0:
            stacks.rra()
        else:
            stacks.ra()


def presort(stacks: Stacks) -> None:
    """Push all but the three largest ranks of ``a`` to ``b``, then sort the three left."""
    val_max = len(stacks.a)
    part = best_part_size(val_max)
    parts = _Parts(bot=part, top=part)
    mid = val_max // 2
    while stacks.a and len(stacks.a) > 3:
        _presort_step(stacks, parts, mid, val_max)
    sort_three(stacks)


def _manage_b(stacks: Stacks, target: int, val_mid: int) -> int:
    path = search_path(stacks.b, target)
    while stacks.b and path != 0:
        if val_mid < stacks.b[0] and val_mid != target:
            val_mid = stacks.b[0]
            stacks.pa()
            stacks.ra()
            if path > 0:
                path -= 1
        if stacks.b and path < 0:
            stacks.rrb()
            path += 1
        elif stacks.b and path > 0:
            stacks.rb()
            path -= 1
    return val_mid


def _manage_a(stacks: Stacks, maximum: int) -> int:
    stacks.rra()
    bottom = stacks.a[-1]
    return bottom if bottom != maximum else 0


def sort_stacks(stacks: Stacks) -> None:
    """Bring every rank back from ``b`` so that ``a`` ends sorted, smallest on top."""
    val_mid = 0
    target = len(stacks.a) + len(stacks.b)
    maximum = target
    while stacks.b and target != 0:
        if choose_in_b(stacks, target):
            val_mid = _manage_b(stacks, target, val_mid)
            stacks.pa()
        elif stacks.a and stacks.a[-1] != len(stacks.a) + len(stacks.b):
            val_mid = _manage_a(stacks, maximum)
        target -= 1
    while not is_sorted(stacks.a):
        val_mid = _manage_a(stacks, maximum)


def push_swap(values: Iterable[int]) -> List[str]:
    """Return the instructions that sort ``values`` on stack ``a``."""
    stacks = Stacks(rank(values), stream=io.StringIO())
    if not is_sorted(stacks.a):
        presort(stacks)
        sort_stacks(stacks)
    return list(stacks.history)