"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Release = Optional[Callable[[Any], object]]


@dataclass
class _Node:
    content: Any
    next: Optional["_Node"] = None


class LinkedList:
    """Singly linked list with constant-time insertion at either end."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        if items is not None:
            for item in items:
                self.push_back(item)

    def push_front(self, content: Any) -> None:
        """Insert content before the first element."""
        node = _Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, content: Any) -> None:
        """Append content after the last element."""
        node = _Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> Any:
        """Return the content of the last element, or None when the list is empty."""
        return None if self._tail is None else self._tail.content

    def pop_front(self, release: Release = None) -> Any:
        """Remove and return the first element's content.

        When release is given it is called with the content before it is
        returned. Raises IndexError on an empty list.
        """
        if self._head is None:
            raise IndexError("pop from empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        if release is not None:
            release(node.content)
        return node.content

    def clear(self, release: Release = None) -> None:
        """Remove every element, calling release on each content in order."""
        while self._head is not None:
            self.pop_front(release)

    def for_each(self, func: Callable[[Any], object]) -> None:
        """Call func on every content, front to back."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list holding func applied to every content."""
        return LinkedList(func(content) for content in self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"