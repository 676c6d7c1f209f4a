"""A singly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(slots=True)
class Node:
    """One link of a :class:`LinkedList`."""

    value: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list with constant-time insertion at either end."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, value: Any) -> None:
        """Insert ``value`` at the start of the list."""
        node = Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Append ``value`` to the end of the list."""
        node = Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> Node | None:
        """Return the last node, or None when the list is empty."""
        return self._tail

    def pop_front(self, delete: Callable[[Any], None] | None = None) -> Any:
        """Remove and return the first value, passing it to ``delete`` if given."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        node.next = None
        if delete is not None:
            delete(node.value)
        return node.value

    def clear(self, delete: Callable[[Any], None] | None = None) -> None:
        """Empty the list, passing every value to ``delete`` in order if given."""
        while self._head is not None:
            self.pop_front(delete)

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every value in order."""
        for value in self:
            func(value)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], None] | None = None,
    ) -> "LinkedList":
        """Return a new list of ``func(value)`` for every value.

        If ``func`` raises, the values already produced are passed to
        ``delete`` and the exception propagates.
        """
        result = LinkedList()
        try:
            for value in self:
                result.push_back(func(value))
        except Exception:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"