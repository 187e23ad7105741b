# passvault

passvault is a small password store that runs in a terminal. It keeps user
names and hashed passwords in a hash table that uses separate chaining. When
the number of entries exceeds the number of buckets, the table grows to the
largest prime not above twice its bucket count. Passwords are hashed with the
MD5-crypt scheme (`$1$`) and a fixed salt. Only the 22-character hash part is
stored, not the salt prefix.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Interactive use

```
passvault
```

You can also start it with `python -m passvault.cli`. The command takes no
options other than `--help`.

First the program asks for a hash table capacity. It reads the leading integer
of that line. The bucket count becomes the largest prime not above it. If the
value is below 2, or the line holds no number, a warning goes to standard error
and 11 buckets are used. It then shows a menu:

```
l - Load From File
a - Add User
r - Remove User
c - Change User Password
f - Find User
d - Dump HashTable
s - HashTable Size
w - Write to Password File
x - Exit program
```

Type a letter and press Enter to run that command. Any other input prints an
error and shows the menu again. The program ends on `x` or at the end of input.

- **Load** reads pairs of `username hash` separated by whitespace. The hashes
  must already be hashed, because they are stored as they are. A user who is
  already present is reported and skipped. A file that cannot be opened is
  reported.
- **Add** hashes the password and stores the user. It prints the user's hash
  value and a confirmation, or an error if the same user with the same hash
  already exists.
- **Change** stores the hash of the new password. It fails only when the stored
  hash already equals the new one.
- **Write** creates or overwrites the named file. It writes one line per bucket,
  with the entries in a bucket joined by `: `.
- **Dump** prints every bucket and the entries in it.

## Library use

```python
import io

from passvault.hashtable import HashTable, prime_below
from passvault.md5crypt import md5_crypt
from passvault.passserver import PassServer, encrypt

password = "password"

server = PassServer(101, io.StringIO())   # messages go to the given stream
server.add_user("alice", password)
assert server.find("alice")
assert len(server) == 1

server.change_password("alice", password, "secret")
assert server.remove_user("alice")

table = HashTable(20)          # bucket count becomes prime_below(20) == 19
assert table.bucket_count() == 19
table.insert("key", "value")
assert "key" in table
assert table.match("key", "value")
assert list(table) == [("key", "value")]
```

- `passvault.hashtable.HashTable` provides `contains`, `match`, `insert`,
  `remove`, `clear`, `load`, `dump`, `write_to_file`, `bucket_count`, `len()`
  and iteration over `(key, value)` pairs. `insert` returns `False` only when
  the same pair is already present. An existing key with a different value is
  updated. `load` returns the number of pairs it added and raises `OSError` if
  the file cannot be opened.
- `prime_below(n)` returns the largest prime not above `n`. It raises
  `ValueError` when `n` is below 2 or above 1301081.
- `string_hash(key)` is the 64-bit string hash the table uses.
- `encrypt(password)` returns the MD5-crypt hash of the password with the
  fixed salt `########`.
- `md5_crypt(password, salt)` returns the full `$1$salt$hash` string.

## What it does not do

- `change_password` does not check the current password. It takes one for the
  sake of the call's shape, then stores the new hash for the user whether or
  not the user existed.
- Passwords are never verified against a stored hash by any command. The store
  only adds, removes, finds and lists users.
- Files are plain text. There is no locking, no encryption at rest, and no
  choice of salt or hashing scheme.