import pytest

from minilisp.hashmap import U32HashMap, hash_fnv1a_32


def _colliding_keys(capacity, n):
    groups = {}
    i = 0
    while True:
        key = f"k{i}"
        bucket = groups.setdefault(hash_fnv1a_32(key) % capacity, [])
        bucket.append(key)
        if len(bucket) == n:
            return bucket
        i += 1


def test_hash_of_empty_string_is_offset_basis():
    assert hash_fnv1a_32("") == 2166136261


def test_hash_known_vector():
    assert hash_fnv1a_32("a") == 0xE40C292C


def test_hash_str_and_bytes_agree():
    assert hash_fnv1a_32("lambda") == hash_fnv1a_32(b"lambda")


def test_hash_is_32_bit():
    for word in ["defun", "x" * 100, "ünïcode"]:
        assert 0 <= hash_fnv1a_32(word) < 2**32


def test_insert_and_lookup():
    table = U32HashMap(8)
    table.insert("car", 1)
    table.insert("cdr", 2)
    assert table["car"] == 1
    assert table["cdr"] == 2
    assert len(table) == 2


def test_overwrite_keeps_count():
    table = U32HashMap(8)
    table.insert("x", 5)
    table.insert("x", 9)
    assert table["x"] == 9
    assert len(table) == 1


def test_delete_removes_key():
    table = U32HashMap(8)
    table.insert("x", 5)
    table.delete("x")
    assert "x" not in table
    assert len(table) == 0
    with pytest.raises(KeyError):
        table["x"]


def test_delete_missing_raises():
    table = U32HashMap(8)
    with pytest.raises(KeyError):
        table.delete("nothing")


def test_tombstone_keeps_probe_chain():
    first, second = _colliding_keys(16, 2)
    table = U32HashMap(16)
    table.insert(first, 1)
    table.insert(second, 2)
    table.delete(first)
    assert table[second] == 2
    table.insert(second, 3)
    assert len(table) == 1
    assert table[second] == 3


def test_reinsert_after_delete():
    table = U32HashMap(4)
    table.insert("a", 1)
    table.delete("a")
    table.insert("a", 7)
    assert table["a"] == 7
    assert len(table) == 1


def test_resize_doubles_and_keeps_entries():
    table = U32HashMap(4)
    table.insert("a", 1)
    table.insert("b", 2)
    table.delete("b")
    table.resize()
    assert table.capacity == 8
    assert table["a"] == 1
    assert "b" not in table
    assert len(table) == 1


def test_growth_keeps_everything_reachable():
    table = U32HashMap(2)
    for i in range(200):
        table.insert(f"sym{i}", i)
        assert (len(table) - 1) / table.capacity < 0.7
    assert len(table) == 200
    assert all(table[f"sym{i}"] == i for i in range(200))


def test_value_bounds():
    table = U32HashMap(4)
    table.insert("max", 2**32 - 1)
    assert table["max"] == 2**32 - 1
    with pytest.raises(ValueError):
        table.insert("big", 2**32)
    with pytest.raises(ValueError):
        table.insert("neg", -1)


def test_bad_key_type():
    table = U32HashMap(4)
    with pytest.raises(TypeError):
        table.insert(3, 1)
    assert 3 not in table


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        U32HashMap(0)