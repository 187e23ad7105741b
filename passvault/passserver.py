"""A user/password store that keeps hashed passwords in a HashTable."""

from __future__ import annotations

import sys
from typing import TextIO

from passvault.hashtable import HashTable, string_hash
from passvault.md5crypt import md5_crypt

_SALT = "$1$########"


def encrypt(password: str) -> str:
    """Return the 22-character MD5-crypt hash of ``password``."""
    return md5_crypt(password, _SALT).split("$", 3)[3]


class PassServer:
    """Stores users with hashed passwords and reports on changes."""

    def __init__(self, capacity: int = 101, out: TextIO | None = None) -> None:
        self._table = HashTable(capacity)
        self._out = out

    @property
    def _stream(self) -> TextIO:
        return sys.stdout if self._out is None else self._out

    def load(self, filename: str) -> int:
        """Load stored (already hashed) pairs from ``filename``."""
        return self._table.load(filename)

    def add_user(self, username: str, password: str) -> bool:
        """Store ``username`` with the hash of ``password``."""
        if self._table.insert(username, encrypt(password)):
            self._stream.write(
                f"hashed position of {username} is {string_hash(username)}\n"
            )
            self._stream.write(f"User {username} added.\n")
            return True
        self._stream.write("*****Error: User already exists. Could not add user.\n")
        return False

    def remove_user(self, username: str) -> bool:
        """Delete ``username``; return whether it existed."""
        return self._table.remove(username)

    def change_password(self, username: str, password: str, new_password: str) -> bool:
        """Store the hash of ``new_password`` for ``username``.

        Returns False when the stored hash is already that of ``new_password``.
        """
        return self._table.insert(username, encrypt(new_password))

    def find(self, username: str) -> bool:
        """Return whether ``username`` is stored."""
        return self._table.contains(username)

    def dump(self) -> None:
        """Print the table's buckets."""
        self._table.dump(self._stream)

    def __len__(self) -> int:
        return len(self._table)

    def write_to_file(self, filename: str) -> None:
        """Write the stored pairs to ``filename``."""
        self._table.write_to_file(filename)