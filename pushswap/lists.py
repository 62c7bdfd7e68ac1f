"""Singly linked lists of arbitrary contents, and doubly linked tagged lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(eq=False)
class ListNode(Generic[T]):
    """One link of a :class:`LinkedList`."""

    content: T
    next: Optional["ListNode[T]"] = field(default=None, repr=False)


class LinkedList(Generic[T]):
    """A singly linked list of contents, front to back."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[ListNode[T]] = None
        self._tail: Optional[ListNode[T]] = None
        self._size = 0
        for item in items or ():
            self.add_back(item)

    def add_front(self, content: T) -> ListNode[T]:
        """Insert *content* at the front and return its node."""
        node = ListNode(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def add_back(self, content: T) -> ListNode[T]:
        """Append *content* at the back and return its node."""
        node = ListNode(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[ListNode[T]]:
        """The last node, or None for an empty list."""
        return self._tail

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[ListNode[T]]:
        node = self._head
        while node is not None:
            following = node.next
            yield node
            node = following

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.content

    def clear(self, delete: Optional[Callable[[T], Any]] = None) -> None:
        """Remove every node, front to back, passing each content to *delete*."""
        for node in self._nodes():
            if delete is not None:
                delete(node.content)
            node.next = None
        self._head = self._tail = None
        self._size = 0

    def apply(self, func: Callable[[T], Any]) -> None:
        """Call *func* on every content, front to back."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[T], U],
        delete: Optional[Callable[[U], Any]] = None,
    ) -> "LinkedList[U]":
        """A new list holding ``func(content)`` for every content.

        If *func* raises, the contents built so far are passed to *delete*
        and the exception propagates.
        """
        if func is None:
            raise TypeError("func must be callable")
        result: LinkedList[U] = LinkedList()
        try:
            for content in self:
                result.add_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


@dataclass(eq=False)
class TaggedNode:
    """A node carrying an identifier and a text, linked both ways."""

    ident: int
    text: Optional[str]
    prev: Optional["TaggedNode"] = field(default=None, repr=False)
    next: Optional["TaggedNode"] = field(default=None, repr=False)


class TaggedList:
    """A doubly linked list of :class:`TaggedNode` objects."""

    def __init__(self) -> None:
        self._head: Optional[TaggedNode] = None
        self._tail: Optional[TaggedNode] = None
        self._size = 0

    def append(self, ident: int, text: Optional[str]) -> TaggedNode:
        """Add a node at the back and return it."""
        node = TaggedNode(ident, text)
        if self._tail is None:
            self._head = node
        else:
            node.prev = self._tail
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[TaggedNode]:
        """The last node, or None for an empty list."""
        return self._tail

    def clear(self) -> None:
        """Unlink and drop every node."""
        node = self._head
        while node is not None:
            following = node.next
            node.prev = node.next = None
            node = following
        self._head = self._tail = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[TaggedNode]:
        node = self._head
        while node is not None:
            yield node
            node = node.next