"""Ordered binary trees: a self-balancing AVL tree and a plain binary search tree.

Keys may be any mutually comparable values, such as integers or names.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


class DuplicateKey(KeyError):
    """Raised when inserting a key that the AVL tree already holds."""


@dataclass(eq=False, slots=True)
class _Node:
    key: Any
    left: _Node | None = None
    right: _Node | None = None
    height: int = 0


def _height(node: _Node | None) -> int:
    return -1 if node is None else node.height


def _update(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance_factor(node: _Node | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_left(root: _Node) -> _Node:
    pivot = root.right
    assert pivot is not None
    root.right = pivot.left
    pivot.left = root
    _update(root)
    _update(pivot)
    return pivot


def _rotate_right(root: _Node) -> _Node:
    pivot = root.left
    assert pivot is not None
    root.left = pivot.right
    pivot.right = root
    _update(root)
    _update(pivot)
    return pivot


def _rebalance(node: _Node) -> _Node:
    factor = _balance_factor(node)
    if factor < -1:
        assert node.right is not None
        if _balance_factor(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    if factor > 1:
        assert node.left is not None
        if _balance_factor(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    return node


def _in_order(node: _Node | None) -> Iterator[Any]:
    if node is not None:
        yield from _in_order(node.left)
        yield node.key
        yield from _in_order(node.right)


def _pre_order(node: _Node | None) -> Iterator[Any]:
    if node is not None:
        yield node.key
        yield from _pre_order(node.left)
        yield from _pre_order(node.right)


def _post_order(node: _Node | None) -> Iterator[Any]:
    if node is not None:
        yield from _post_order(node.left)
        yield from _post_order(node.right)
        yield node.key


def _sideways(node: _Node | None, level: int = 0) -> Iterator[tuple[int, Any]]:
    """Yield (level, key) from the rightmost node to the leftmost."""
    if node is not None:
        yield from _sideways(node.right, level + 1)
        yield level, node.key
        yield from _sideways(node.left, level + 1)


def _find(node: _Node | None, key: Any) -> Any | None:
    while node is not None:
        if key < node.key:
            node = node.left
        elif key > node.key:
            node = node.right
        else:
            return node.key
    return None


class AVLTree:
    """A binary search tree kept height-balanced by rotations; keys are unique."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> None:
        """Insert ``key`` and rebalance; raise DuplicateKey if it is present."""

        def insert_at(node: _Node | None) -> _Node:
            if node is None:
                return _Node(key)
            if key < node.key:
                node.left = insert_at(node.left)
            elif key > node.key:
                node.right = insert_at(node.right)
            else:
                raise DuplicateKey(key)
            _update(node)
            return _rebalance(node)

        self._root = insert_at(self._root)
        self._size += 1

    def remove(self, key: Any) -> bool:
        """Remove ``key`` and rebalance; return whether it was present."""
        removed = False

        def remove_at(node: _Node | None, target: Any) -> _Node | None:
            nonlocal removed
            if node is None:
                return None
            if target < node.key:
                node.left = remove_at(node.left, target)
            elif target > node.key:
                node.right = remove_at(node.right, target)
            elif node.left is None or node.right is None:
                removed = True
                return node.left if node.left is not None else node.right
            else:
                successor = node.right
                while successor.left is not None:
                    successor = successor.left
                node.key = successor.key
                node.right = remove_at(node.right, successor.key)
            _update(node)
            return _rebalance(node)

        self._root = remove_at(self._root, key)
        if removed:
            self._size -= 1
        return removed

    def find(self, key: Any) -> Any | None:
        """Return the stored key equal to ``key``, or None if absent."""
        return _find(self._root, key)

    def __contains__(self, key: object) -> bool:
        return _find(self._root, key) is not None

    def __len__(self) -> int:
        return self._size

    def height(self) -> int:
        """Height of the tree: -1 when empty, 0 for a single node."""
        return _height(self._root)

    def in_order(self) -> list[Any]:
        """Keys in ascending order."""
        return list(_in_order(self._root))

    def pre_order(self) -> list[Any]:
        """Keys with each node before its left and right subtrees."""
        return list(_pre_order(self._root))

    def post_order(self) -> list[Any]:
        """Keys with each node after its left and right subtrees."""
        return list(_post_order(self._root))

    def draw(self) -> str:
        """Draw the tree lying on its side, root at the left, one tab per level."""
        return "".join(
            "\n\n" + "\t" * level + str(key) for level, key in _sideways(self._root)
        )

    def clear(self) -> None:
        """Remove every key."""
        self._root = None
        self._size = 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.in_order()!r})"


class BinarySearchTree:
    """An unbalanced binary search tree; equal keys go to the right subtree."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> None:
        """Insert ``key``, duplicates included."""
        node = _Node(key)
        if self._root is None:
            self._root = node
        else:
            parent = self._root
            while True:
                if parent.key > key:
                    if parent.left is None:
                        parent.left = node
                        break
                    parent = parent.left
                else:
                    if parent.right is None:
                        parent.right = node
                        break
                    parent = parent.right
        self._size += 1

    def remove(self, key: Any) -> bool:
        """Remove one occurrence of ``key``; return whether it was present.

        A node with two children takes the largest key of its left subtree.
        """
        removed = False

        def remove_max(node: _Node) -> _Node | None:
            if node.right is None:
                return node.left
            node.right = remove_max(node.right)
            return node

        def remove_at(node: _Node | None) -> _Node | None:
            nonlocal removed
            if node is None:
                return None
            if node.key == key:
                removed = True
                if node.right is None:
                    return node.left
                if node.left is None:
                    return node.right
                rightmost = node.left
                while rightmost.right is not None:
                    rightmost = rightmost.right
                node.key = rightmost.key
                node.left = remove_max(node.left)
            elif node.key > key:
                node.left = remove_at(node.left)
            else:
                node.right = remove_at(node.right)
            return node

        self._root = remove_at(self._root)
        if removed:
            self._size -= 1
        return removed

    def find(self, key: Any) -> Any | None:
        """Return the stored key equal to ``key``, or None if absent."""
        return _find(self._root, key)

    def __contains__(self, key: object) -> bool:
        return _find(self._root, key) is not None

    def __len__(self) -> int:
        return self._size

    def in_order(self) -> list[Any]:
        """Keys in ascending order."""
        return list(_in_order(self._root))

    def pre_order(self) -> list[Any]:
        """Keys with each node before its left and right subtrees."""
        return list(_pre_order(self._root))

    def post_order(self) -> list[Any]:
        """Keys with each node after its left and right subtrees."""
        return list(_post_order(self._root))

    def draw(self) -> str:
        """Draw the tree lying on its side, one ``+--`` line per node."""
        return "".join(
            "  " * level + "+--" + str(key) + "\n" for level, key in _sideways(self._root)
        )

    def clear(self) -> None:
        """Remove every key."""
        self._root = None
        self._size = 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.in_order()!r})"