"""In-place sorting algorithms over mutable lists of integers.

Every sort rearranges the list it is given and returns None, like ``list.sort``.
"""

from __future__ import annotations

import random


def insertion_sort(values: list[int]) -> None:
    """Sort by moving each element left past every larger neighbour."""
    for i in range(1, len(values)):
        j = i
        while j > 0 and values[j] < values[j - 1]:
            values[j], values[j - 1] = values[j - 1], values[j]
            j -= 1


def bubble_sort(values: list[int]) -> None:
    """Sort with n-1 full passes of adjacent swaps."""
    n = len(values)
    for _ in range(1, n):
        for i in range(1, n):
            if values[i - 1] > values[i]:
                values[i - 1], values[i] = values[i], values[i - 1]


def bubble_sort_flag(values: list[int]) -> None:
    """Sort with passes of adjacent swaps until a pass makes no swap."""
    swapped = True
    while swapped:
        swapped = False
        for i in range(1, len(values)):
            if values[i - 1] > values[i]:
                values[i - 1], values[i] = values[i], values[i - 1]
                swapped = True


def selection_sort(values: list[int]) -> None:
    """Sort by repeatedly swapping the smallest remaining element into place."""
    n = len(values)
    for i in range(n):
        smallest = min(range(i, n), key=values.__getitem__)
        values[i], values[smallest] = values[smallest], values[i]


def merge(values: list[int], left: int, middle: int, right: int) -> None:
    """Merge the sorted runs values[left..middle] and values[middle+1..right]."""
    left_run = values[left:middle + 1]
    right_run = values[middle + 1:right + 1]
    i = j = 0
    k = left
    while i < len(left_run) and j < len(right_run):
        if left_run[i] <= right_run[j]:
            values[k] = left_run[i]
            i += 1
        else:
            values[k] = right_run[j]
            j += 1
        k += 1
    rest = left_run[i:] + right_run[j:]
    values[k:k + len(rest)] = rest


def merge_sort(values: list[int]) -> None:
    """Sort by recursively sorting both halves and merging them."""

    def sort(left: int, right: int) -> None:
        if left < right:
            middle = (left + right) // 2
            sort(left, middle)
            sort(middle + 1, right)
            merge(values, left, middle, right)

    sort(0, len(values) - 1)


def shift_quick_sort(values: list[int]) -> None:
    """Quicksort that takes the first element as pivot and shifts every smaller
    element in front of it."""

    def sort(left: int, right: int) -> None:
        pivot = left
        for i in range(left + 1, right + 1):
            if values[i] < values[pivot]:
                moved = values[i]
                values[pivot + 1:i + 1] = values[pivot:i]
                values[pivot] = moved
                pivot += 1
        if pivot - 1 >= left:
            sort(left, pivot - 1)
        if pivot + 1 <= right:
            sort(pivot + 1, right)

    if values:
        sort(0, len(values) - 1)


def partition(values: list[int], start: int, end: int) -> int:
    """Partition values[start..end] around values[end]; return the pivot's final index."""
    pivot = values[end]
    pivot_index = start
    for i in range(start, end):
        if values[i] <= pivot:
            values[i], values[pivot_index] = values[pivot_index], values[i]
            pivot_index += 1
    values[pivot_index], values[end] = values[end], values[pivot_index]
    return pivot_index


def random_partition(
    values: list[int], start: int, end: int, rng: random.Random | None = None
) -> int:
    """Partition around a randomly chosen pivot; return the pivot's final index."""
    rng = rng or random.Random()
    chosen = rng.randint(start, end)
    values[chosen], values[end] = values[end], values[chosen]
    return partition(values, start, end)


def quick_sort(values: list[int], rng: random.Random | None = None) -> None:
    """Quicksort with random pivots."""
    rng = rng or random.Random()

    def sort(start: int, end: int) -> None:
        if start < end:
            pivot_index = random_partition(values, start, end, rng)
            sort(start, pivot_index - 1)
            sort(pivot_index + 1, end)

    sort(0, len(values) - 1)


def shell_sort(values: list[int]) -> None:
    """Shell sort with the gap sequence 1, 4, 13, 40, ..."""
    n = len(values)
    gap = 1
    while gap < n:
        gap = 3 * gap + 1
    while gap > 1:
        gap //= 3
        for i in range(gap, n):
            current = values[i]
            j = i - gap
            while j >= 0 and current < values[j]:
                values[j + gap] = values[j]
                j -= gap
            values[j + gap] = current


def sift_down(values: list[int], root: int, bottom: int) -> None:
    """Sink values[root] within values[..bottom], children of k being 2k and 2k+1."""
    while root * 2 <= bottom:
        child = root * 2
        if child != bottom and values[child] <= values[child + 1]:
            child += 1
        if values[root] < values[child]:
            values[root], values[child] = values[child], values[root]
            root = child
        else:
            return


def heap_sort(values: list[int]) -> None:
    """Sort by building a max-heap and repeatedly moving its top to the end."""
    n = len(values)
    for i in range(n // 2, -1, -1):
        sift_down(values, i, n - 1)
    for i in range(n - 1, 0, -1):
        values[0], values[i] = values[i], values[0]
        sift_down(values, 0, i - 1)