"""Doubly linked lists, plain and circular, walkable in both directions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class DoubleNode:
    """A value with links to the nodes before and after it."""

    data: int
    prev: DoubleNode | None = None
    next: DoubleNode | None = None


def _format(label: str, values: Iterable[int]) -> str:
    items = list(values)
    if not items:
        return "List is empty"
    return f"print  ({label}): " + "".join(f"{value} " for value in items)


class DoublyLinkedList:
    """A list whose ends are open: the head has no ``prev``, the tail no ``next``."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: DoubleNode | None = None
        self.tail: DoubleNode | None = None
        self._length = 0
        for value in values:
            self.insert_tail(value)

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[int]:
        return self.forward()

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def insert_head(self, data: int) -> None:
        """Add ``data`` before the first node."""
        node = DoubleNode(data, None, self.head)
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node
        self._length += 1

    def insert_tail(self, data: int) -> None:
        """Add ``data`` after the last node."""
        node = DoubleNode(data, self.tail, None)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._length += 1

    def forward(self) -> Iterator[int]:
        """Yield the values from head to tail."""
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def backward(self) -> Iterator[int]:
        """Yield the values from tail to head."""
        node = self.tail
        while node is not None:
            yield node.data
            node = node.prev

    def format_forward(self) -> str:
        """The values from the head, each followed by a space."""
        return _format("head", self.forward())

    def format_backward(self) -> str:
        """The values from the tail, each followed by a space."""
        return _format("tail", self.backward())


class CircularDoublyLinkedList:
    """A list whose tail links forward to the head and head back to the tail."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: DoubleNode | None = None
        self.tail: DoubleNode | None = None
        self._length = 0
        for value in values:
            self.insert_tail(value)

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[int]:
        return self.forward()

    def __repr__(self) -> str:
        return f"CircularDoublyLinkedList({list(self)!r})"

    def _insert(self, data: int) -> DoubleNode:
        node = DoubleNode(data)
        if self.head is None or self.tail is None:
            node.prev = node.next = node
            self.head = self.tail = node
        else:
            node.prev = self.tail
            node.next = self.head
            self.tail.next = node
            self.head.prev = node
        self._length += 1
        return node

    def insert_head(self, data: int) -> None:
        """Add ``data`` before the head, which it then becomes."""
        self.head = self._insert(data)

    def insert_tail(self, data: int) -> None:
        """Add ``data`` after the tail, which it then becomes."""
        self.tail = self._insert(data)

    def forward(self) -> Iterator[int]:
        """Yield each value once, from head round to tail."""
        node = self.head
        while node is not None:
            yield node.data
            if node is self.tail:
                return
            node = node.next

    def backward(self) -> Iterator[int]:
        """Yield each value once, from tail back round to head."""
        node = self.tail
        while node is not None:
            yield node.data
            if node is self.head:
                return
            node = node.prev

    def format_forward(self) -> str:
        """The values from the head, each followed by a space."""
        return _format("head", self.forward())

    def format_backward(self) -> str:
        """The values from the tail, each followed by a space."""
        return _format("tail", self.backward())