"""A stack and two queues kept in bounded storage."""

from __future__ import annotations


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackEmptyError(IndexError):
    """Raised when popping from an empty stack."""


class QueueFullError(Exception):
    """Raised when a queue has no room for another element."""


class QueueEmptyError(IndexError):
    """Raised when dequeuing from an empty queue."""


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError("capacity must be positive")
    return capacity


class ArrayStack:
    """A last-in first-out stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = 128) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, data: int) -> None:
        """Put ``data`` on top of the stack."""
        if len(self._items) >= self.capacity:
            raise StackOverflowError("stack overflow")
        self._items.append(data)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise StackEmptyError("stack empty")
        return self._items.pop()

    def format(self) -> str:
        """Show the depth and contents, bottom first."""
        body = "".join(f"{value} " for value in self._items)
        return f"STACK({len(self._items)}): {body}"


class LinearQueue:
    """A first-in first-out queue whose slots are never reused.

    At most ``capacity`` values can be enqueued over the queue's whole life,
    however many have been dequeued in between.
    """

    def __init__(self, capacity: int = 128) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: list[int] = []
        self._front = 0

    def __len__(self) -> int:
        return len(self._items) - self._front

    def enqueue(self, data: int) -> None:
        """Add ``data`` at the rear."""
        if len(self._items) >= self.capacity:
            raise QueueFullError("queue full")
        self._items.append(data)

    def dequeue(self) -> int:
        """Remove and return the value at the front."""
        if self._front == len(self._items):
            raise QueueEmptyError("queue empty")
        data = self._items[self._front]
        self._front += 1
        return data


class RingQueue:
    """A first-in first-out ring buffer of ``capacity`` slots.

    One slot stays free to tell a full buffer from an empty one, so it holds
    at most ``capacity - 1`` values at a time.
    """

    def __init__(self, capacity: int = 128) -> None:
        self.capacity = _check_capacity(capacity)
        self._slots: list[int | None] = [None] * capacity
        self._front = 0
        self._rear = 0

    def __len__(self) -> int:
        return (self._rear - self._front) % self.capacity

    def enqueue(self, data: int) -> None:
        """Add ``data`` at the rear."""
        if (self._rear + 1) % self.capacity == self._front:
            raise QueueFullError("queue full")
        self._slots[self._rear] = data
        self._rear = (self._rear + 1) % self.capacity

    def dequeue(self) -> int:
        """Remove and return the value at the front."""
        if self._front == self._rear:
            raise QueueEmptyError("queue empty")
        data = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        return data