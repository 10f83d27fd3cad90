"""A singly linked list with head and tail access."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class Node:
    """One link of a list: a value and the node after it."""

    data: int
    next: Node | None = None


class LinkedList:
    """A chain of :class:`Node` objects with references to both ends."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Node | None = None
        self.tail: Node | None = None
        self._length = 0
        for value in values:
            self.insert_tail(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def insert_head(self, data: int) -> None:
        """Add ``data`` in front of the first node."""
        node = Node(data, self.head)
        self.head = node
        if self.tail is None:
            self.tail = node
        self._length += 1

    def insert_tail(self, data: int) -> None:
        """Add ``data`` after the last node."""
        node = Node(data)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._length += 1

    def delete_head(self) -> int:
        """Remove the first node and return its value."""
        if self.head is None:
            raise IndexError("delete from empty list")
        node = self.head
        self.head = node.next
        if self.head is None:
            self.tail = None
        node.next = None
        self._length -= 1
        return node.data

    def delete_tail(self) -> int:
        """Remove the last node and return its value."""
        if self.head is None or self.tail is None:
            raise IndexError("delete from empty list")
        node = self.tail
        if self.head is node:
            self.head = self.tail = None
        else:
            prev = self.head
            while prev.next is not node:
                prev = prev.next
            prev.next = None
            self.tail = prev
        self._length -= 1
        return node.data

    def search(self, key: int) -> int | None:
        """Return the position of the first node holding ``key``, or ``None``."""
        for index, value in enumerate(self):
            if value == key:
                return index
        return None

    def find_node(self, data: int) -> Node | None:
        """Return the first node holding ``data``, or ``None``."""
        for node in self._nodes():
            if node.data == data:
                return node
        return None

    def delete_node(self, node: Node) -> None:
        """Unlink ``node`` from the list; it must belong to this list."""
        if node is self.head:
            self.delete_head()
            return
        prev = self.head
        while prev is not None and prev.next is not node:
            prev = prev.next
        if prev is None:
            raise ValueError("node is not in this list")
        prev.next = node.next
        if node is self.tail:
            self.tail = prev
        node.next = None
        self._length -= 1

    def clear(self) -> None:
        """Remove every node."""
        node = self.head
        while node is not None:
            following = node.next
            node.next = None
            node = following
        self.head = self.tail = None
        self._length = 0

    def format(self) -> str:
        """Show the values front to back as two-digit numbers in brackets."""
        body = "".join(f"{value:02d} " for value in self)
        return f"Linked_list [ {body}]"