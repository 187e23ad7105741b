import io

import pytest

from passvault.hashtable import (
    DEFAULT_CAPACITY,
    MAX_PRIME,
    HashTable,
    prime_below,
    string_hash,
)


def test_prime_below_values():
    assert prime_below(2) == 2
    assert prime_below(100) == 97
    assert prime_below(101) == 101
    assert prime_below(MAX_PRIME) == 1301081


@pytest.mark.parametrize("n", [0, 1, MAX_PRIME + 1])
def test_prime_below_out_of_range(n):
    with pytest.raises(ValueError):
        prime_below(n)


def test_capacity_is_prime_below():
    assert HashTable(101).bucket_count() == 101
    assert HashTable(100).bucket_count() == prime_below(100)


@pytest.mark.parametrize("capacity", [0, 1, MAX_PRIME + 5])
def test_capacity_falls_back_to_default(capacity):
    assert HashTable(capacity).bucket_count() == DEFAULT_CAPACITY == 11


def test_string_hash_deterministic_and_bounded():
    for key in ["", "a", "alice", "abcdefgh", "abcdefghijklmnopq"]:
        value = string_hash(key)
        assert value == string_hash(key)
        assert 0 <= value < 2**64


def test_string_hash_distinguishes():
    keys = ["a", "b", "ab", "ba", "abcdefghijklmnop", "abcdefghijklmnoq"]
    assert len({string_hash(k) for k in keys}) == len(keys)


def test_insert_update_and_duplicate():
    table = HashTable(11)
    assert table.insert("alice", "one") is True
    assert len(table) == 1
    assert table.insert("alice", "one") is False
    assert table.insert("alice", "two") is True
    assert len(table) == 1
    assert table.match("alice", "two")
    assert not table.match("alice", "one")


def test_contains_and_in():
    table = HashTable(11)
    table.insert("bob", "v")
    assert table.contains("bob")
    assert "bob" in table
    assert "carol" not in table
    assert 5 not in table


def test_remove():
    table = HashTable(11)
    table.insert("a", "1")
    table.insert("b", "2")
    assert table.remove("a") is True
    assert table.remove("a") is False
    assert len(table) == 1
    assert "a" not in table and "b" in table


def test_clear_keeps_buckets():
    table = HashTable(11)
    table.insert("a", "1")
    table.clear()
    assert len(table) == 0
    assert "a" not in table
    assert table.bucket_count() == 11


def test_rehash_keeps_entries():
    table = HashTable(2)
    assert table.bucket_count() == 2
    items = {f"user{i}": f"value{i}" for i in range(20)}
    for key, value in items.items():
        table.insert(key, value)
    assert len(table) == 20
    assert table.bucket_count() >= len(table)
    assert dict(table) == items


def test_iteration_yields_pairs():
    table = HashTable(11)
    table.insert("a", "1")
    table.insert("b", "2")
    assert set(table) == {("a", "1"), ("b", "2")}


def test_load_pairs_and_duplicates(tmp_path, capsys):
    path = tmp_path / "pw.txt"
    path.write_text("a 1\nb 2\na 3\nc\n")
    table = HashTable(11)
    assert table.load(str(path)) == 2
    assert dict(table) == {"a": "1", "b": "2"}
    assert "Error: This key already exists" in capsys.readouterr().out


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        HashTable(11).load(str(tmp_path / "missing.txt"))


def test_dump_format():
    table = HashTable(5)
    table.insert("alice", "x")
    out = io.StringIO()
    table.dump(out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "In dump, in total there are 5 rows in the vector."
    assert len(lines) == 6
    for index, line in enumerate(lines[1:]):
        assert line.startswith(f"v[{index}]: ")
    assert sum(line.endswith("alice x") for line in lines[1:]) == 1


def test_write_to_file_round_trip(tmp_path):
    table = HashTable(3)
    table.insert("a", "1")
    table.insert("b", "2")
    path = tmp_path / "out.txt"
    table.write_to_file(str(path))
    lines = path.read_text().splitlines()
    assert len(lines) == table.bucket_count()
    entries = [entry for line in lines if line for entry in line.split(": ")]
    assert dict(entry.split(" ") for entry in entries) == {"a": "1", "b": "2"}