"""A separate-chaining hash table with string keys and string values."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass
from math import isqrt
from typing import TextIO

MAX_PRIME = 1301081
DEFAULT_CAPACITY = 11

_MASK = (1 << 64) - 1
_MUL = (0xC6A4A793 << 32) + 0x5BD1E995
_SEED = 0xC70F6907


def _shift_mix(value: int) -> int:
    return value ^ (value >> 47)


def string_hash(key: str) -> int:
    """Return a 64-bit hash of ``key`` (murmur-style, seeded)."""
    data = key.encode("utf-8")
    length = len(data)
    aligned = length & ~7
    result = (_SEED ^ (length * _MUL)) & _MASK
    for start in range(0, aligned, 8):
        block = int.from_bytes(data[start:start + 8], "little")
        mixed = (_shift_mix((block * _MUL) & _MASK) * _MUL) & _MASK
        result = ((result ^ mixed) * _MUL) & _MASK
    if length & 7:
        tail = int.from_bytes(data[aligned:], "little")
        result = ((result ^ tail) * _MUL) & _MASK
    result = (_shift_mix(result) * _MUL) & _MASK
    return _shift_mix(result)


def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    return all(n % d for d in range(3, isqrt(n) + 1, 2))


def prime_below(n: int) -> int:
    """Return the largest prime not greater than ``n``.

    Raises ValueError when ``n`` is above MAX_PRIME or below 2.
    """
    if n > MAX_PRIME:
        raise ValueError("input too large for prime_below()")
    if n == MAX_PRIME:
        return MAX_PRIME
    if n <= 1:
        raise ValueError("input too small")
    return next(candidate for candidate in range(n, 1, -1) if _is_prime(candidate))


@dataclass
class _Entry:
    key: str
    value: str


class HashTable:
    """Maps string keys to string values using chained buckets."""

    def __init__(self, capacity: int = 101) -> None:
        try:
            count = prime_below(capacity)
        except ValueError as exc:
            print(f"** {exc}", file=sys.stderr)
            count = DEFAULT_CAPACITY
        self._buckets: list[list[_Entry]] = [[] for _ in range(count)]
        self._size = 0

    def _bucket(self, key: str) -> list[_Entry]:
        return self._buckets[string_hash(key) % len(self._buckets)]

    def contains(self, key: str) -> bool:
        """Return whether ``key`` is stored."""
        return any(entry.key == key for entry in self._bucket(key))

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains(key)

    def match(self, key: str, value: str) -> bool:
        """Return whether ``key`` is stored with exactly ``value``."""
        return any(
            entry.key == key and entry.value == value for entry in self._bucket(key)
        )

    def insert(self, key: str, value: str) -> bool:
        """Store ``value`` under ``key``.

        Returns False if the same pair is already present; an existing key
        with a different value is updated.
        """
        bucket = self._bucket(key)
        for entry in bucket:
            if entry.key == key:
                if entry.value == value:
                    return False
                entry.value = value
                return True
        bucket.append(_Entry(key, value))
        self._size += 1
        if self._size > len(self._buckets):
            self._rehash()
        return True

    def remove(self, key: str) -> bool:
        """Delete ``key``; return whether it was present."""
        bucket = self._bucket(key)
        found = next((entry for entry in bucket if entry.key == key), None)
        if found is None:
            return False
        bucket.remove(found)
        self._size -= 1
        return True

    def clear(self) -> None:
        """Remove every entry, keeping the bucket count."""
        for bucket in self._buckets:
            bucket.clear()
        self._size = 0

    def load(self, filename: str) -> int:
        """Read whitespace-separated key/value pairs from ``filename``.

        Keys already present are reported and skipped. Returns the number
        of pairs added. Raises OSError if the file cannot be opened.
        """
        with open(filename, encoding="utf-8") as fh:
            tokens = fh.read().split()
        loaded = 0
        for key, value in zip(tokens[::2], tokens[1::2]):
            if self.contains(key):
                print("Error: This key already exists")
            else:
                self.insert(key, value)
                loaded += 1
        return loaded

    def dump(self, out: TextIO | None = None) -> None:
        """Write every bucket and its entries to ``out``."""
        stream = sys.stdout if out is None else out
        stream.write(
            f"In dump, in total there are {len(self._buckets)} rows in the vector.\n"
        )
        for index, bucket in enumerate(self._buckets):
            entries = ":".join(f"{entry.key} {entry.value}" for entry in bucket)
            stream.write(f"v[{index}]: {entries}\n")

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[tuple[str, str]]:
        for bucket in self._buckets:
            for entry in bucket:
                yield entry.key, entry.value

    def write_to_file(self, filename: str) -> None:
        """Write one line per bucket to ``filename``, entries joined by ': '."""
        with open(filename, "w", encoding="utf-8") as fh:
            for bucket in self._buckets:
                fh.write(": ".join(f"{entry.key} {entry.value}" for entry in bucket))
                fh.write("\n")

    def bucket_count(self) -> int:
        """Return the number of buckets."""
        return len(self._buckets)

    def _rehash(self) -> None:
        try:
            new_count = prime_below(2 * len(self._buckets))
        except ValueError:
            return
        old = list(self)
        self._buckets = [[] for _ in range(new_count)]
        self._size = 0
        for key, value in old:
            self.insert(key, value)