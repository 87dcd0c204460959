"""
Interleaving Assembler

A hex ID alternates token and digest digits: even positions (0-indexed)
come from the token, odd positions from the digest.

    token   a b c d
    digest   1 2 3
    hex id  a1b2c3d
"""

from typing import Tuple


def interleave(token: str, digest: str, hex_length: int) -> str:
    """
    Weave ``token`` and ``digest`` into a hex ID of ``hex_length`` digits.

    The caller sizes the inputs: ``token`` needs ``(hex_length + 1) // 2``
    digits and ``digest`` needs ``hex_length // 2``.
    """
    if len(token) < (hex_length + 1) // 2 or len(digest) < hex_length // 2:
        raise ValueError(
            f"Inputs too short for hex length {hex_length}: "
            f"token={len(token)} digest={len(digest)}"
        )

    chars = []
    for i in range(hex_length):
        if i % 2:
            chars.append(digest[i // 2])
        else:
            chars.append(token[i // 2])
    return "".join(chars)


def split(hex_id: str) -> Tuple[str, str]:
    """Split a hex ID into its token and digest prefix."""
    return hex_id[0::2], hex_id[1::2]
