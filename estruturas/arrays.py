"""Searching, inserting and removing elements in plain integer sequences."""

from __future__ import annotations

from collections.abc import Sequence


def find_last(values: Sequence[int], x: int) -> int | None:
    """Return the index of the last occurrence of ``x``, or None if absent."""
    for index, value in reversed(list(enumerate(values))):
        if value == x:
            return index
    return None


def find_last_recursive(values: Sequence[int], x: int) -> int | None:
    """Recursive variant of :func:`find_last`."""

    def search(n: int) -> int | None:
        if n == 0:
            return None
        if values[n - 1] == x:
            return n - 1
        return search(n - 1)

    return search(len(values))


def invert_permutation(values: Sequence[int]) -> list[int]:
    """Invert a permutation of 0..n-1: if values[i] == j, the result has result[j] == i."""
    if sorted(values) != list(range(len(values))):
        raise ValueError("values must be a permutation of 0..n-1")
    inverted = [0] * len(values)
    for index, value in enumerate(values):
        inverted[value] = index
    return inverted


def _check_position(k: int, upper: int) -> None:
    if not 0 <= k <= upper:
        raise IndexError(f"position {k} out of range 0..{upper}")


def remove_at(values: Sequence[int], k: int) -> tuple[int, list[int]]:
    """Remove the element at position ``k``; return it and the remaining elements."""
    _check_position(k, len(values) - 1)
    items = list(values)
    removed = items[k]
    items[k:-1] = items[k + 1:]
    items.pop()
    return removed, items


def remove_at_recursive(values: Sequence[int], k: int) -> tuple[int, list[int]]:
    """Recursive variant of :func:`remove_at`, shifting the tail one step left."""
    _check_position(k, len(values) - 1)
    items = list(values)
    last = len(items) - 1

    def shift(i: int) -> int:
        current = items[i]
        if i < last:
            items[i] = shift(i + 1)
        return current

    removed = shift(k)
    items.pop()
    return removed, items


def insert_at(values: Sequence[int], k: int, x: int) -> list[int]:
    """Insert ``x`` between positions k-1 and k, requiring 0 <= k <= len(values)."""
    _check_position(k, len(values))
    items = list(values)
    items.append(x)
    items[k + 1:] = items[k:-1]
    items[k] = x
    return items


def insert_at_recursive(values: Sequence[int], k: int, x: int) -> list[int]:
    """Recursive variant of :func:`insert_at`."""
    _check_position(k, len(values))
    items: list[int] = list(values)
    items.append(x)

    def place(n: int) -> None:
        if n == k:
            items[n] = x
        else:
            items[n] = items[n - 1]
            place(n - 1)

    place(len(values))
    return items


def remove_all(values: Sequence[int], x: int) -> list[int]:
    """Return the elements that differ from ``x``, in their original order."""
    return [value for value in values if value != x]


def remove_all_recursive(values: Sequence[int], x: int) -> list[int]:
    """Recursive variant of :func:`remove_all`."""

    def keep(n: int) -> list[int]:
        if n == 0:
            return []
        kept = keep(n - 1)
        if values[n - 1] != x:
            kept.append(values[n - 1])
        return kept

    return keep(len(values))


def remove_zeros(values: Sequence[int]) -> list[int]:
    """Return the non-zero elements, in their original order."""
    return remove_all(values, 0)


def max_recursive(values: Sequence[int]) -> int:
    """Return the largest element, computed recursively."""
    if not values:
        raise ValueError("max_recursive() of an empty sequence")

    def largest(n: int) -> int:
        if n == 1:
            return values[0]
        best = largest(n - 1)
        return values[n - 1] if values[n - 1] > best else best

    return largest(len(values))


def find_pivot_value(values: Sequence[int]) -> int | None:
    """Return the first inner element with only smaller values before it and only
    larger values after it, or None when no such element exists."""
    for j, pivot in enumerate(values[1:-1], start=1):
        if all(v < pivot for v in values[:j]) and all(v > pivot for v in values[j + 1:]):
            return pivot
    return None


def count_even(values: Sequence[int]) -> int:
    """Count the even elements."""
    return sum(1 for value in values if value % 2 == 0)