import pytest

from estruturas.linked import CircularLinkedList, SinglyLinkedList

SAMPLE = [16, 8, 0, 3, 4, 7, 13, 22, 6, 5, 1, 24, 12, 9, 77, 34]


def test_init_keeps_order_and_length():
    lst = SinglyLinkedList(SAMPLE)
    assert list(lst) == SAMPLE
    assert len(lst) == len(SAMPLE)


def test_push_front_and_append():
    lst = SinglyLinkedList([2, 3])
    lst.push_front(1)
    lst.append(4)
    assert list(lst) == [1, 2, 3, 4]
    assert len(lst) == 4


def test_append_to_empty():
    lst = SinglyLinkedList()
    lst.append(5)
    assert list(lst) == [5]


@pytest.mark.parametrize("x", [16, 0, 34, 7])
def test_find_matches_first_index(x):
    lst = SinglyLinkedList(SAMPLE)
    assert lst.find(x) == SAMPLE.index(x)
    assert lst.find_recursive(x) == SAMPLE.index(x)


def test_find_first_of_duplicates():
    values = [5, 7, 5]
    lst = SinglyLinkedList(values)
    assert lst.find(5) == values.index(5)
    assert lst.find_recursive(5) == values.index(5)


def test_find_missing():
    lst = SinglyLinkedList(SAMPLE)
    assert lst.find(999) is None
    assert lst.find_recursive(999) is None
    assert SinglyLinkedList().find(1) is None


@pytest.mark.parametrize("x", [16, 22, 34])
def test_remove_existing(x):
    lst = SinglyLinkedList(SAMPLE)
    assert lst.remove(x) is True
    expected = list(SAMPLE)
    expected.remove(x)
    assert list(lst) == expected
    assert len(lst) == len(expected)


def test_remove_missing_and_empty():
    lst = SinglyLinkedList(SAMPLE)
    assert lst.remove(999) is False
    assert list(lst) == SAMPLE
    assert SinglyLinkedList().remove(1) is False


def test_concatenate_leaves_other_unchanged():
    first, second = [3, 1, 2], [9, 8]
    a, b = SinglyLinkedList(first), SinglyLinkedList(second)
    a.concatenate(b)
    assert list(a) == first + second
    assert len(a) == len(first) + len(second)
    assert list(b) == second


def test_concatenate_onto_empty():
    a = SinglyLinkedList()
    a.concatenate([4, 5])
    assert list(a) == [4, 5]


@pytest.mark.parametrize("method", ["bubble_sort", "selection_sort"])
@pytest.mark.parametrize(
    "values", [SAMPLE, [], [1], [2, 2, 1, 1], [5, 4, 3, 2, 1], [1, 2, 3]]
)
def test_sorts(method, values):
    lst = SinglyLinkedList(values)
    getattr(lst, method)()
    assert list(lst) == sorted(values)
    assert len(lst) == len(values)


def test_sort_then_find_and_remove_still_work():
    lst = SinglyLinkedList(SAMPLE)
    lst.bubble_sort()
    assert lst.remove(min(SAMPLE))
    lst.append(100)
    assert list(lst) == sorted(SAMPLE)[1:] + [100]


def test_circular_init_and_iteration():
    c = CircularLinkedList(SAMPLE)
    assert list(c) == SAMPLE
    assert len(c) == len(SAMPLE)


def test_circular_insert_becomes_head():
    c = CircularLinkedList([2, 3])
    c.insert(1)
    assert list(c) == [1, 2, 3]
    c2 = CircularLinkedList()
    c2.insert(7)
    assert list(c2) == [7]


def test_circular_find():
    c = CircularLinkedList(SAMPLE)
    assert c.find(77) == SAMPLE.index(77)
    assert c.find(16) == 0
    assert c.find(999) is None
    assert CircularLinkedList().find(1) is None


@pytest.mark.parametrize("x", [16, 13, 34])
def test_circular_remove(x):
    c = CircularLinkedList(SAMPLE)
    assert c.remove(x) is True
    expected = list(SAMPLE)
    expected.remove(x)
    assert list(c) == expected
    assert len(c) == len(expected)


def test_circular_remove_only_and_missing():
    c = CircularLinkedList([5])
    assert c.remove(6) is False
    assert c.remove(5) is True
    assert list(c) == []
    assert len(c) == 0
    assert c.remove(5) is False
    c.insert(9)
    assert list(c) == [9]