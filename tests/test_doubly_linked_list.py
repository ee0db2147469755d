import pytest
from hypothesis import given, strategies as st

from containerkit.doubly_linked_list import DoublyLinkedList


def make(items):
    lst = DoublyLinkedList()
    for item in items:
        lst.append(item)
    return lst


def test_append_and_get():
    lst = make(["x", "y", "z"])
    assert lst.get(0) == "x"
    assert lst.get(2) == "z"
    assert len(lst) == 3


def test_get_out_of_bounds():
    lst = make([1, 2])
    with pytest.raises(IndexError):
        lst.get(2)
    with pytest.raises(IndexError):
        lst.get(-1)


def test_pop_returns_tail():
    lst = make([1, 2, 3])
    assert lst.pop() == 3
    assert list(lst) == [1, 2]
    assert list(reversed(lst)) == [2, 1]


def test_pop_last_then_empty():
    lst = make([7])
    assert lst.pop() == 7
    assert len(lst) == 0
    assert list(lst) == []
    with pytest.raises(IndexError):
        lst.pop()


def test_append_after_emptying():
    lst = make([1])
    lst.pop()
    lst.append(9)
    assert list(lst) == [9]
    assert list(reversed(lst)) == [9]


def test_clear():
    lst = make([1, 2, 3])
    lst.clear()
    assert len(lst) == 0
    assert list(reversed(lst)) == []


@given(st.lists(st.integers()), st.integers(min_value=0, max_value=20))
def test_matches_list(items, pops):
    lst = make(items)
    model = list(items)
    for _ in range(min(pops, len(model))):
        assert lst.pop() == model.pop()
    assert list(lst) == model
    assert list(reversed(lst)) == model[::-1]
    assert len(lst) == len(model)