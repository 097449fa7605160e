import math
import random

import pytest

from estruturas.trees import AVLTree, BinarySearchTree, DuplicateKey


def _check_bst_order(tree):
    keys = tree.in_order()
    assert keys == sorted(keys)


def test_avl_in_order_is_sorted():
    values = [16, 8, 0, 3, 4, 7, 13, 22, 6, 5, 1, 24, 12, 9, 77, 34]
    tree = AVLTree(values)
    assert tree.in_order() == sorted(values)
    assert len(tree) == len(values)


def test_avl_sequential_inserts_are_balanced():
    tree = AVLTree(range(1, 8))
    assert tree.pre_order() == [4, 2, 1, 3, 6, 5, 7]
    assert tree.height() == 2


def test_avl_height_stays_logarithmic():
    n = 1000
    tree = AVLTree(range(n))
    assert tree.height() <= 1.45 * math.log2(n + 2)
    assert tree.in_order() == list(range(n))


def test_avl_empty_height():
    tree = AVLTree()
    assert tree.height() == -1
    assert tree.in_order() == []
    assert tree.draw() == ""


def test_avl_duplicate_raises_and_keeps_tree():
    tree = AVLTree([5, 3, 8])
    before = tree.pre_order()
    with pytest.raises(DuplicateKey):
        tree.insert(3)
    assert tree.pre_order() == before
    assert len(tree) == 3


def test_avl_find_and_contains():
    tree = AVLTree([10, 20, 30, 40])
    assert tree.find(30) == 30
    assert tree.find(99) is None
    assert 20 in tree
    assert 25 not in tree


def test_avl_remove_keeps_balance_and_order():
    rng = random.Random(7)
    values = list(range(200))
    rng.shuffle(values)
    tree = AVLTree(values)
    removed = values[:120]
    for value in removed:
        assert tree.remove(value) is True
    remaining = sorted(values[120:])
    assert tree.in_order() == remaining
    assert len(tree) == len(remaining)
    assert tree.height() <= 1.45 * math.log2(len(remaining) + 2)


def test_avl_remove_missing_returns_false():
    tree = AVLTree([1, 2, 3])
    assert tree.remove(9) is False
    assert len(tree) == 3


def test_avl_remove_until_empty():
    tree = AVLTree([2, 1, 3])
    for key in (2, 1, 3):
        assert tree.remove(key)
    assert len(tree) == 0
    assert tree.height() == -1


def test_avl_names():
    names = ["maria", "ana", "joao", "pedro", "bruno"]
    tree = AVLTree(names)
    assert tree.in_order() == sorted(names)
    assert "joao" in tree
    assert tree.remove("ana")
    assert "ana" not in tree
    with pytest.raises(DuplicateKey):
        tree.insert("maria")


def test_avl_traversals_cover_same_keys():
    values = [50, 30, 70, 20, 40, 60, 80]
    tree = AVLTree(values)
    assert sorted(tree.pre_order()) == sorted(values)
    assert sorted(tree.post_order()) == sorted(values)
    assert tree.pre_order()[0] == tree.post_order()[-1]


def test_avl_draw():
    tree = AVLTree([2, 1, 3])
    assert tree.draw() == "\n\n\t3\n\n2\n\n\t1"


def test_avl_clear():
    tree = AVLTree([1, 2, 3])
    tree.clear()
    assert len(tree) == 0
    assert tree.in_order() == []


def test_bst_in_order_sorted_with_duplicates():
    values = [5, 3, 8, 3, 1, 8, 4]
    tree = BinarySearchTree(values)
    assert tree.in_order() == sorted(values)
    assert len(tree) == len(values)


def test_bst_keeps_insertion_shape():
    values = [5, 3, 8, 1, 4]
    tree = BinarySearchTree(values)
    assert tree.pre_order()[0] == 5
    rebuilt = BinarySearchTree(tree.pre_order())
    assert rebuilt.pre_order() == tree.pre_order()
    assert rebuilt.post_order() == tree.post_order()


def test_bst_remove_leaf_and_single_child():
    tree = BinarySearchTree([5, 3, 8, 1])
    assert tree.remove(1)
    assert tree.in_order() == [3, 5, 8]
    tree.insert(1)
    assert tree.remove(3)
    assert tree.in_order() == [1, 5, 8]
    _check_bst_order(tree)


def test_bst_remove_two_children_uses_left_maximum():
    tree = BinarySearchTree([5, 3, 8, 1, 4])
    assert tree.remove(5)
    assert tree.pre_order()[0] == 4
    assert tree.in_order() == [1, 3, 4, 8]


def test_bst_remove_missing():
    tree = BinarySearchTree([2, 1])
    assert tree.remove(7) is False
    assert BinarySearchTree().remove(1) is False
    assert len(tree) == 2


def test_bst_remove_random_keeps_order():
    rng = random.Random(3)
    values = [rng.randint(0, 50) for _ in range(100)]
    tree = BinarySearchTree(values)
    remaining = sorted(values)
    for value in values[:60]:
        assert tree.remove(value)
        remaining.remove(value)
        assert tree.in_order() == remaining
    assert len(tree) == len(remaining)


def test_bst_find_and_contains():
    tree = BinarySearchTree([10, 5, 15])
    assert tree.find(15) == 15
    assert tree.find(11) is None
    assert 5 in tree
    assert 6 not in tree


def test_bst_draw():
    tree = BinarySearchTree([2, 1, 3])
    assert tree.draw() == "  +--3\n+--2\n  +--1\n"


def test_bst_clear():
    tree = BinarySearchTree([4, 2, 6])
    tree.clear()
    assert len(tree) == 0
    assert tree.draw() == ""