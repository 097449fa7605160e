"""Doubly linked lists: linear, circular and circular kept in ascending order."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False, slots=True)
class _Node:
    value: int
    prev: _Node | None = None
    next: _Node | None = None


class DoublyLinkedList:
    """A linear doubly linked list of integers; insertions go to the front."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in reversed(list(values)):
            self.push_front(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, x: int) -> None:
        """Insert ``x`` at the beginning of the list."""
        node = _Node(x, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def _push_back(self, x: int) -> None:
        node = _Node(x, self._tail, None)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
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
        for node in self._nodes():
            if node.value == x:
                break
        else:
            return False
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return True

    def insert_before(self, x: int, y: int) -> None:
        """Insert ``x`` before the first ``y``; append it when ``y`` is absent."""
        for target in self._nodes():
            if target.value == y:
                break
        else:
            self._push_back(x)
            return
        node = _Node(x, target.prev, target)
        if target.prev is None:
            self._head = node
        else:
            target.prev.next = node
        target.prev = node
        self._size += 1

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class CircularDoublyLinkedList:
    """A circular doubly linked list whose insertions become the new head."""

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

    def _link_first(self, node: _Node) -> None:
        node.prev = node.next = node
        self._head = node
        self._size = 1

    def _link_before(self, target: _Node, node: _Node) -> None:
        before = target.prev
        assert before is not None
        node.prev = before
        node.next = target
        before.next = node
        target.prev = node
        self._size += 1

    def insert(self, x: int) -> None:
        """Insert ``x`` in front of the current head; it becomes the head."""
        node = _Node(x)
        if self._head is None:
            self._link_first(node)
            return
        self._link_before(self._head, node)
        self._head = node

    def find(self, x: int) -> int | None:
        """Return the position of the first ``x`` counted from the head, or None."""
        for index, value in enumerate(self):
            if value == x:
                return index
        return None

    def remove(self, x: int) -> bool:
        """Remove the first ``x``; return whether anything was removed."""
        for node in self._nodes():
            if node.value == x:
                break
        else:
            return False
        if self._size == 1:
            self._head = None
        else:
            assert node.prev is not None and node.next is not None
            node.prev.next = node.next
            node.next.prev = node.prev
            if node is self._head:
                self._head = node.next
        self._size -= 1
        return True

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator[int]:
        if self._head is None:
            return
        node = self._head.prev
        for _ in range(self._size):
            assert node is not None
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class SortedCircularDoublyLinkedList(CircularDoublyLinkedList):
    """A circular doubly linked list that keeps its elements in ascending order."""

    def insert(self, x: int) -> None:
        """Insert ``x`` after every element not greater than it."""
        node = _Node(x)
        if self._head is None:
            self._link_first(node)
            return
        for target in self._nodes():
            if target.value > x:
                break
        else:
            self._link_before(self._head, node)
            return
        self._link_before(target, node)
        if target is self._head:
            self._head = node