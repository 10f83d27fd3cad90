"""A stack and a queue built from chains of linked nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from algocourse.fixedqueues import QueueEmptyError, StackEmptyError
from algocourse.linkedlist import Node


class LinkedStack:
    """A last-in first-out stack whose top is the first node of a chain."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._top: Node | None = None
        self._length = 0
        for value in values:
            self.push(value)

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[int]:
        node = self._top
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedStack(top first: {list(self)!r})"

    def push(self, data: int) -> None:
        """Put ``data`` on top of the stack."""
        self._top = Node(data, self._top)
        self._length += 1

    def pop(self) -> int:
        """Remove and return the top value."""
        node = self._top
        if node is None:
            raise StackEmptyError("stack underflow")
        self._top = node.next
        node.next = None
        self._length -= 1
        return node.data

    def format(self) -> str:
        """Show the values from the top down as two-digit numbers."""
        if self._top is None:
            return "stack is empty."
        body = "".join(f"{value:02d} " for value in self)
        return f"stack [ {body}]"


class LinkedQueue:
    """A first-in first-out queue with references to both ends of a chain."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._front: Node | None = None
        self._rear: Node | None = None
        self._length = 0
        for value in values:
            self.enqueue(value)

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[int]:
        node = self._front
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self)!r})"

    def enqueue(self, data: int) -> None:
        """Add ``data`` at the rear."""
        node = Node(data)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._length += 1

    def dequeue(self) -> int:
        """Remove and return the value at the front."""
        node = self._front
        if node is None:
            raise QueueEmptyError("queue empty")
        if node is self._rear:
            self._front = self._rear = None
        else:
            self._front = node.next
        node.next = None
        self._length -= 1
        return node.data

    def format(self) -> str:
        """Show the values front to back as two-digit numbers."""
        body = "".join(f"{value:02d} " for value in self)
        return f"queue [ {body}]"