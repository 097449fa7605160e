"""First-in-first-out queues and last-in-first-out stacks of integers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator


class QueueEmpty(IndexError):
    """Raised when taking an element from an empty queue or stack."""


class Queue:
    """A FIFO queue: elements leave in the order they arrived."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def enqueue(self, x: int) -> None:
        """Add ``x`` at the back of the queue."""
        self._items.append(x)

    def dequeue(self) -> int:
        """Remove and return the element at the front of the queue."""
        if not self._items:
            raise QueueEmpty("Fila vazia!")
        return self._items.popleft()

    def find(self, x: int) -> int | None:
        """Return the position of ``x`` counted from the front, or None."""
        for index, value in enumerate(self._items):
            if value == x:
                return index
        return None

    def __iter__(self) -> Iterator[int]:
        """Iterate from the front to the back."""
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class Stack:
    """A LIFO stack: the last element pushed is the first popped."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = list(values)

    def push(self, x: int) -> None:
        """Put ``x`` on top of the stack."""
        self._items.append(x)

    def pop(self) -> int:
        """Remove and return the element on top of the stack."""
        if not self._items:
            raise QueueEmpty("Pilha vazia!")
        return self._items.pop()

    def find(self, x: int) -> int | None:
        """Return the position of ``x`` counted from the top, or None."""
        for index, value in enumerate(self):
            if value == x:
                return index
        return None

    def __iter__(self) -> Iterator[int]:
        """Iterate from the top to the bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"