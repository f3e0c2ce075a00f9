"""A last-in, first-out stack."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """Items come off in the reverse of the order they went on."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T | None:
        """Remove and return the top item, or None if the stack is empty."""
        return self._items.pop() if self._items else None

    def peek(self) -> T | None:
        """The top item without removing it, or None if the stack is empty."""
        return self._items[-1] if self._items else None

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)