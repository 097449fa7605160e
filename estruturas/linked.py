"""Singly linked lists, plain and circular, built from explicit nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False, slots=True)
class _Node:
    value: int
    next: _Node | None = None


class SinglyLinkedList:
    """A singly linked list of integers with in-place, node-relinking sorts."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for value in reversed(list(values)):
            self.push_front(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _tail(self) -> _Node | None:
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def push_front(self, x: int) -> None:
        """Insert ``x`` at the beginning of the list."""
        self._head = _Node(x, self._head)
        self._size += 1

    def append(self, x: int) -> None:
        """Insert ``x`` at the end of the list."""
        node = _Node(x)
        tail = self._tail()
        if tail is None:
            self._head = node
        else:
            tail.next = node
        self._size += 1

    def find(self, x: int) -> int | None:
        """Return the position of the first ``x``, or None if absent."""
        for index, value in enumerate(self):
            if value == x:
                return index
        return None

    def find_recursive(self, x: int) -> int | None:
        """Recursive variant of :meth:`find`."""

        def search(node: _Node | None, index: int) -> int | None:
            if node is None:
                return None
            if node.value == x:
                return index
            return search(node.next, index + 1)

        return search(self._head, 0)

    def remove(self, x: int) -> bool:
        """Remove the first ``x``; return whether anything was removed."""
        previous: _Node | None = None
        node = self._head
        while node is not None and node.value != x:
            previous, node = node, node.next
        if node is None:
            return False
        if previous is None:
            self._head = node.next
        else:
            previous.next = node.next
        self._size -= 1
        return True

    def concatenate(self, other: Iterable[int]) -> None:
        """Append every value of ``other`` to the end of this list."""
        values = list(other)
        tail = self._tail()
        for value in values:
            node = _Node(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
        self._size += len(values)

    def bubble_sort(self) -> None:
        """Sort ascending by swapping adjacent nodes until a pass makes no swap."""
        swapped = True
        while swapped:
            swapped = False
            previous: _Node | None = None
            node = self._head
            while node is not None and node.next is not None:
                following = node.next
                if node.value > following.value:
                    node.next = following.next
                    following.next = node
                    if previous is None:
                        self._head = following
                    else:
                        previous.next = following
                    previous = following
                    swapped = True
                else:
                    previous, node = node, following

    def selection_sort(self) -> None:
        """Sort ascending by repeatedly unlinking the smallest node."""
        sorted_head: _Node | None = None
        sorted_tail: _Node | None = None
        while self._head is not None:
            before_min: _Node | None = None
            smallest = self._head
            previous, node = self._head, self._head.next
            while node is not None:
                if node.value < smallest.value:
                    before_min, smallest = previous, node
                previous, node = node, node.next
            if before_min is None:
                self._head = smallest.next
            else:
                before_min.next = smallest.next
            smallest.next = None
            if sorted_tail is None:
                sorted_head = smallest
            else:
                sorted_tail.next = smallest
            sorted_tail = smallest
        self._head = sorted_head

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class CircularLinkedList:
    """A circular singly linked list whose insertions become the new head."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for value in reversed(list(values)):
            self.insert(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        for _ in range(self._size):
            assert node is not None
            yield node
            node = node.next

    def _last(self) -> _Node | None:
        last = None
        for last in self._nodes():
            pass
        return last

    def insert(self, x: int) -> None:
        """Insert ``x`` in front of the current head; it becomes the head."""
        node = _Node(x)
        last = self._last()
        if last is None:
            node.next = node
        else:
            node.next = self._head
            last.next = node
        self._head = node
        self._size += 1

    def find(self, x: int) -> int | None:
        """Return the position of the first ``x`` counted from the head, or None."""
        for index, value in enumerate(self):
            if value == x:
                return index
        return None

    def remove(self, x: int) -> bool:
        """Remove the first ``x``; return whether anything was removed."""
        previous = self._last()
        for node in self._nodes():
            if node.value == x:
                break
            previous = node
        else:
            return False
        assert previous is not None
        if self._size == 1:
            self._head = None
        else:
            previous.next = node.next
            if node is self._head:
                self._head = node.next
        self._size -= 1
        return True

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"