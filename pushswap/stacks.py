"""The two stacks of the sorting puzzle and the instructions that act on them."""

from __future__ import annotations

import sys
from collections import deque
from typing import Deque, Iterable, List, Optional, TextIO


class Stacks:
    """Stacks ``a`` and ``b``, each with its top at index 0.

    Every instruction that takes effect writes its name and a newline to
    ``stream`` (standard output by default). It is also appended to
    ``history``. An instruction that does not apply does nothing and
    writes nothing.
    """

    def __init__(
        self,
        a: Iterable[int] = (),
        b: Iterable[int] = (),
        stream: Optional[TextIO] = None,
    ) -> None:
        self.a: Deque[int] = deque(a)
        self.b: Deque[int] = deque(b)
        self.stream = stream
        self.history: List[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _emit(self, name: str) -> None:
        self.history.append(name)
        (sys.stdout if self.stream is None else self.stream).write(name + "\n")

    @staticmethod
    def _swap_top(stack: Deque[int]) -> None:
        if len(stack) >= 2:
            stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _push(source: Deque[int], target: Deque[int], name: str) -> None:
        if not source:
            raise IndexError(f"{name}: source stack is empty")
        target.appendleft(source.popleft())

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        if not self.a:
            return
        self._swap_top(self.a)
        self._emit("sa")

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        if not self.b:
            return
        self._swap_top(self.b)
        self._emit("sb")

    def ss(self) -> None:
        """Swap the tops of both stacks; needs both to be non-empty."""
        if not self.a or not self.b:
            return
        self._swap_top(self.a)
        self._swap_top(self.b)
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``; raises IndexError when ``b`` is empty."""
        self._push(self.b, self.a, "pa")
        self._emit("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``; raises IndexError when ``a`` is empty."""
        self._push(self.a, self.b, "pb")
        self._emit("pb")

    def ra(self) -> None:
        """Rotate ``a`` up: its top becomes its bottom. Needs two elements."""
        if len(self.a) < 2:
            return
        self.a.rotate(-1)
        self._emit("ra")

    def rb(self) -> None:
        """Rotate ``b`` up: its top becomes its bottom. Needs two elements."""
        if len(self.b) < 2:
            return
        self.b.rotate(-1)
        self._emit("rb")

    def rr(self) -> None:
        """Rotate both stacks up; needs both to be non-empty."""
        if not self.a or not self.b:
            return
        self.a.rotate(-1)
        self.b.rotate(-1)
        self._emit("rr")

    def rra(self) -> None:
        """Rotate ``a`` down: its bottom becomes its top."""
        if not self.a:
            return
        self.a.rotate(1)
        self._emit("rra")

    def rrb(self) -> None:
        """Rotate ``b`` down: its bottom becomes its top."""
        if not self.b:
            return
        self.b.rotate(1)
        self._emit("rrb")

    def rrr(self) -> None:
        """Rotate ``a`` down and ``b`` up; needs both to be non-empty."""
        if not self.a or not self.b:
            return
        self.a.rotate(1)
        self.b.rotate(-1)
        self._emit("rrr")

    def rotate_silent(self) -> None:
        """Rotate ``a`` up without emitting an instruction."""
        if self.a:
            self.a.rotate(-1)