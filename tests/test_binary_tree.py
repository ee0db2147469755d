import pytest
from hypothesis import given, strategies as st

from containerkit.binary_tree import BinaryTree, TreeNode


def _check_links(tree):
    def walk(node, parent):
        if node is None:
            return
        assert node.parent is parent
        walk(node.left, node)
        walk(node.right, node)

    walk(tree.root, None)


def _build(values, cmp=None):
    tree = BinaryTree(cmp)
    for value in values:
        tree.insert(value)
    return tree


def test_empty_tree():
    tree = BinaryTree()
    assert list(tree) == []
    assert tree.search(1) is None


def test_insert_and_inorder():
    values = [10, 5, 15, 7, 20, 3]
    tree = _build(values)
    assert list(tree) == sorted(values)
    _check_links(tree)


def test_search_finds_node():
    tree = _build([10, 5, 15])
    node = tree.search(5)
    assert isinstance(node, TreeNode) and node.data == 5
    assert node.parent is tree.root
    assert tree.search(42) is None


def test_structure_smaller_left_larger_right():
    tree = _build([10, 5, 15])
    assert tree.root.data == 10
    assert tree.root.left.data == 5
    assert tree.root.right.data == 15


def test_duplicates_go_right():
    tree = _build([10, 10])
    assert tree.root.right.data == 10
    assert tree.root.left is None


@pytest.mark.parametrize("victim", [3, 5, 10, 15, 20, 7])
def test_delete_each_shape(victim):
    values = [10, 5, 15, 7, 20, 3]
    tree = _build(values)
    tree.delete(victim)
    expected = sorted(values)
    expected.remove(victim)
    assert list(tree) == expected
    assert tree.search(victim) is None
    _check_links(tree)


def test_delete_missing_is_noop():
    tree = _build([2, 1, 3])
    tree.delete(99)
    assert list(tree) == [1, 2, 3]


def test_delete_only_node():
    tree = _build([1])
    tree.delete(1)
    assert tree.root is None


def test_custom_comparator_reverses_order():
    values = [4, 1, 3, 2]
    tree = _build(values, cmp=lambda a, b: (b > a) - (b < a))
    assert list(tree) == sorted(values, reverse=True)


def test_clear():
    tree = _build([1, 2, 3])
    tree.clear()
    assert list(tree) == []
    assert tree.root is None


@given(st.lists(st.integers(-50, 50)), st.lists(st.integers(-50, 50)))
def test_insert_delete_matches_multiset(inserts, deletes):
    tree = _build(inserts)
    expected = list(inserts)
    for value in deletes:
        tree.delete(value)
        if value in expected:
            expected.remove(value)
    assert list(tree) == sorted(expected)
    _check_links(tree)