"""
Base Conversion Codec

Converts big unsigned integers written as hexadecimal digit strings into
strings over the 62-symbol alphabet and back. Conversion works on the
integer value, so leading zero hex digits are not preserved: callers that
need a stable round trip must make sure the hex string starts with a
non-zero digit.
"""

import string

from .config import ALPHABET
from .errors import InvalidCharacterError


def hex_to_alphabet(hex_string: str, alphabet: str = ALPHABET) -> str:
    """
    Convert a hex string to the custom alphabet.

    Args:
        hex_string: Hexadecimal digits, any case
        alphabet: Ordered symbols, index is the digit value

    Returns:
        Minimal-length alphabet string, empty for empty input
    """
    if not hex_string:
        return ""
    if not all(c in string.hexdigits for c in hex_string):
        raise ValueError(f"Not a hex digit string: {hex_string!r}")

    value = int(hex_string, 16)
    base = len(alphabet)

    digits = []
    while True:
        value, remainder = divmod(value, base)
        digits.append(alphabet[remainder])
        if value == 0:
            break

    return "".join(reversed(digits))


def alphabet_to_hex(text: str, alphabet: str = ALPHABET) -> str:
    """
    Convert a custom alphabet string back to lowercase hex.

    Args:
        text: Symbols from ``alphabet``
        alphabet: Ordered symbols, index is the digit value

    Returns:
        Lowercase hex without padding, empty for empty input

    Raises:
        InvalidCharacterError: If a symbol is not part of the alphabet
    """
    if not text:
        return ""

    base = len(alphabet)
    value = 0
    for position, char in enumerate(text):
        index = alphabet.find(char)
        if index == -1:
            raise InvalidCharacterError(char, position)
        value = value * base + index

    return format(value, "x")
