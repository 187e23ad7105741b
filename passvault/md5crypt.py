"""The MD5-based password hashing scheme with the "$1$" prefix."""

from __future__ import annotations

import hashlib

_MAGIC = b"$1$"
_ITOA64 = "./0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
_GROUPS = ((0, 6, 12), (1, 7, 13), (2, 8, 14), (3, 9, 15), (4, 10, 5))


def _to64(value: int, count: int) -> str:
    return "".join(_ITOA64[(value >> (6 * k)) & 0x3F] for k in range(count))


def _as_bytes(text: str | bytes) -> bytes:
    return text.encode("utf-8") if isinstance(text, str) else bytes(text)


def md5_crypt(password: str | bytes, salt: str | bytes) -> str:
    """Hash ``password`` with ``salt``; return "$1$<salt>$<22 chars>".

    A leading "$1$" on the salt is ignored, and the salt ends at the first
    "$" or after eight characters.
    """
    pw = _as_bytes(password)
    raw_salt = _as_bytes(salt)
    if raw_salt.startswith(_MAGIC):
        raw_salt = raw_salt[len(_MAGIC):]
    raw_salt = raw_salt.split(b"$", 1)[0][:8]

    ctx = hashlib.md5(pw + _MAGIC + raw_salt)
    alternate = hashlib.md5(pw + raw_salt + pw).digest()
    for remaining in range(len(pw), 0, -16):
        ctx.update(alternate[:min(remaining, 16)])
    bits = len(pw)
    while bits:
        ctx.update(b"\0" if bits & 1 else pw[:1])
        bits >>= 1
    final = ctx.digest()

    for round_no in range(1000):
        step = hashlib.md5()
        step.update(pw if round_no & 1 else final)
        if round_no % 3:
            step.update(raw_salt)
        if round_no % 7:
            step.update(pw)
        step.update(final if round_no & 1 else pw)
        final = step.digest()

    encoded = "".join(
        _to64((final[a] << 16) | (final[b] << 8) | final[c], 4) for a, b, c in _GROUPS
    )
    encoded += _to64(final[11], 2)
    return f"$1${raw_salt.decode('latin-1')}${encoded}"