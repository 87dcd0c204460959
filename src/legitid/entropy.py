"""Cryptographically secure random hex tokens."""

import secrets


def random_hex_token(length: int) -> str:
    """
    Generate a random lowercase hex token of exactly ``length`` digits.

    The whole buffer is re-rolled while its first byte is below 16, so the
    token never starts with ``0`` and survives base conversion intact.

    Args:
        length: Number of hex digits wanted

    Returns:
        Hex string that does not start with ``0``
    """
    if length <= 0:
        raise ValueError("Token length must be positive")

    byte_count = (length + 1) // 2
    buffer = secrets.token_bytes(byte_count)
    while buffer[0] < 16:
        buffer = secrets.token_bytes(byte_count)

    return buffer.hex()[:length]
