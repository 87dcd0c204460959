"""Keyed SHA-1 digest over salt and text."""

import hashlib
from typing import Union


def _to_bytes(value: Union[str, bytes]) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def keyed_digest(salt: Union[str, bytes], text: Union[str, bytes]) -> str:
    """
    Compute SHA-1 over ``salt + text`` as 40 lowercase hex digits.

    Salt and text are concatenated without a separator. Identifiers issued
    by other implementations of the scheme depend on that exact layout.
    """
    return hashlib.sha1(_to_bytes(salt) + _to_bytes(text)).hexdigest()
