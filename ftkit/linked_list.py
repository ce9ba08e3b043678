"""A singly linked list with front and back insertion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass
class _Node(Generic[T]):
    content: T
    next: Optional["_Node[T]"] = None


class LinkedList(Generic[T]):
    """A singly linked list of arbitrary items."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    def push_front(self, item: T) -> None:
        """Insert ``item`` before the first element."""
        node = _Node(item, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, item: T) -> None:
        """Append ``item`` after the last element."""
        node = _Node(item)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> T:
        """The last item; raises IndexError when the list is empty."""
        if self._tail is None:
            raise IndexError("last() of an empty list")
        return self._tail.content

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def iterate(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on every item, front to back."""
        for item in self:
            func(item)

    def map(self, func: Callable[[T], U]) -> "LinkedList[U]":
        """A new list holding ``func`` applied to every item, in order."""
        return LinkedList(func(item) for item in self)

    def pop_front(self, delete: Optional[Callable[[T], Any]] = None) -> T:
        """Remove the first item, pass it to ``delete`` if given, and return it.

        Raises IndexError when the list is empty.
        """
        node = self._head
        if node is None:
            raise IndexError("pop_front() from an empty list")
        self._head = node.next
        if self._head is None:
            self._tail = None
        node.next = None
        self._size -= 1
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Optional[Callable[[T], Any]] = None) -> None:
        """Remove every item, front to back, passing each to ``delete`` if given."""
        while self._head is not None:
            self.pop_front(delete)