"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass
class Node(Generic[T]):
    """One cell of a linked list."""

    content: T
    next: Optional["Node[T]"] = None


class LinkedList(Generic[T]):
    """A singly linked list that grows at either end."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self.head: Optional[Node[T]] = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node[T]]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: T) -> Node[T]:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: T) -> Node[T]:
        """Append ``content`` at the end and return its node."""
        node: Node[T] = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node[T]]:
        """The final node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[T], Any]] = None) -> None:
        """Remove every node, passing each content to ``delete`` when given."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following
        self.head = None

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on every content, front to back."""
        for node in self._nodes():
            func(node.content)

    def map(
        self,
        func: Callable[[T], U],
        delete: Optional[Callable[[U], Any]] = None,
    ) -> "LinkedList[U]":
        """Return a new list holding ``func`` applied to each content.

        If ``func`` raises, the contents mapped so far are passed to
        ``delete`` and the exception propagates.
        """
        result: LinkedList[U] = LinkedList()
        try:
            for node in self._nodes():
                result.push_back(func(node.content))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"