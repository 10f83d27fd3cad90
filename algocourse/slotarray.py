"""A fixed-length array with one free slot that values are shifted through."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class SlotArray:
    """Integer slots where :attr:`EMPTY` marks a vacant position."""

    EMPTY = -1

    def __init__(self, values: Iterable[int]) -> None:
        self._slots = list(values)

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[int]:
        return iter(self._slots)

    def __getitem__(self, index: int) -> int:
        return self._slots[index]

    def __repr__(self) -> str:
        return f"SlotArray({self._slots!r})"

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._slots):
            raise IndexError(f"slot index {index} out of range")

    def find_empty(self) -> int | None:
        """Return the index of the first vacant slot, or ``None``."""
        for index, value in enumerate(self._slots):
            if value == self.EMPTY:
                return index
        return None

    def insert(self, index: int, empty: int, data: int) -> None:
        """Place ``data`` at ``index``, shifting the values between it and the
        vacant slot ``empty`` one step towards the vacancy."""
        self._check(index)
        self._check(empty)
        slots = self._slots
        if empty > index:
            slots[index + 1 : empty + 1] = slots[index:empty]
        else:
            slots[empty:index] = slots[empty + 1 : index + 1]
        slots[index] = data

    def delete(self, index: int) -> int:
        """Vacate the slot at ``index`` and return what it held."""
        self._check(index)
        data = self._slots[index]
        self._slots[index] = self.EMPTY
        return data