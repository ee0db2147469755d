import pytest
from hypothesis import given, strategies as st

from containerkit.hash_map import HashMap, simple_hash


def test_empty_key_hashes_to_seed():
    assert simple_hash("", 1_000_000) == 5381


def test_hash_stops_at_nul():
    assert simple_hash("ab\0cd", 97) == simple_hash("ab", 97)


def test_hash_accepts_bytes_like_str():
    assert simple_hash(b"hello", 31) == simple_hash("hello", 31)


@given(st.text(), st.integers(min_value=1, max_value=10_000))
def test_hash_in_range(key, capacity):
    assert 0 <= simple_hash(key, capacity) < capacity


def test_hash_rejects_bad_input():
    with pytest.raises(ValueError):
        simple_hash("a", 0)
    with pytest.raises(TypeError):
        simple_hash(12, 5)


def test_init_rejects_zero_capacity():
    with pytest.raises(ValueError):
        HashMap(0)


def test_insert_and_get():
    hm = HashMap(8)
    hm.insert("one", 1)
    hm.insert("two", 2)
    assert hm.get("one") == 1
    assert hm.get("two") == 2
    assert hm.get("three") is None
    assert len(hm) == 2


def test_insert_replaces_value():
    hm = HashMap(8)
    hm.insert("k", 1)
    hm.insert("k", 5)
    assert hm.get("k") == 5
    assert len(hm) == 1


def test_delete():
    hm = HashMap(8)
    hm.insert("a", 1)
    hm.insert("b", 2)
    hm.delete("a")
    assert hm.get("a") is None
    assert hm.get("b") == 2
    assert len(hm) == 1
    assert "a" not in hm
    assert "b" in hm


def test_delete_missing_is_noop():
    hm = HashMap(4)
    hm.insert("a", 1)
    hm.delete("zzz")
    assert len(hm) == 1


def test_resize_doubles_capacity():
    hm = HashMap(2)
    for key in ("a", "b", "c"):
        hm.insert(key, key.upper())
    assert hm.capacity == 4
    assert [hm.get(k) for k in ("a", "b", "c")] == ["A", "B", "C"]


def test_probing_past_deleted_slot():
    hm = HashMap(100)
    keys = [f"key{i}" for i in range(50)]
    for i, key in enumerate(keys):
        hm.insert(key, i)
    for key in keys[::2]:
        hm.delete(key)
    for i, key in enumerate(keys):
        expected = None if i % 2 == 0 else i
        assert hm.get(key) == expected


def test_custom_cmp_case_insensitive():
    hm = HashMap(16, cmp=lambda a, b: 0 if a.lower() == b.lower() else 1)
    hm.insert("x", 1)
    hm.insert("x", 2)
    assert hm.get("x") == 2
    assert len(hm) == 1


def test_insert_rejects_none():
    hm = HashMap(4)
    with pytest.raises(ValueError):
        hm.insert("a", None)
    with pytest.raises(ValueError):
        hm.insert(None, 1)


def test_clear():
    hm = HashMap(4)
    hm.insert("a", 1)
    hm.insert("b", 2)
    hm.clear()
    assert len(hm) == 0
    assert hm.get("a") is None
    assert list(hm) == []