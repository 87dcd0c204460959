"""
Identifier Security Analysis

Describes what an identifier of a given length actually carries: how many
hex digits of random token and how many of digest survive the length
budget, and what that means for guessing.

Security Model:
    token_bits  = log2(15) + 4 * (token_digits - 1)   # leading digit is never 0
    digest_bits = 4 * digest_digits                    # authenticator strength
    forgery     = 16 ** -digest_digits                 # blind guess without the salt

Collisions between identifiers are not defended against, so token_bits is
only relevant for the birthday bound, roughly 2 ** (token_bits / 2) ids.
"""

import math
from typing import Any, Dict, Tuple

from .codec import hex_to_alphabet
from .config import MAX_ID_LENGTH, validate_length
from .ids import calculate_hex_length


def split_digit_budget(approximate_length: int) -> Tuple[int, int]:
    """Return ``(token_digits, digest_digits)`` inside the hex ID."""
    validate_length(approximate_length)
    hex_length = calculate_hex_length(approximate_length)
    return (hex_length + 1) // 2, hex_length // 2


def calculate_security_bits(approximate_length: int) -> Tuple[float, float]:
    """
    Calculate entropy and authenticator bits for an identifier length.

    Args:
        approximate_length: Target identifier length, 1 to 54

    Returns:
        Tuple of (token_bits, digest_bits)
    """
    token_digits, digest_digits = split_digit_budget(approximate_length)
    token_bits = math.log2(15) + 4 * (token_digits - 1)
    digest_bits = 4.0 * digest_digits
    return token_bits, digest_bits


def expected_length_range(approximate_length: int) -> Tuple[int, int]:
    """Shortest and longest identifier the length can produce."""
    validate_length(approximate_length)
    hex_length = calculate_hex_length(approximate_length)
    shortest = hex_to_alphabet("1" + "0" * (hex_length - 1))
    longest = hex_to_alphabet("f" * hex_length)
    return len(shortest), len(longest)


def get_length_info(approximate_length: int) -> Dict[str, Any]:
    """
    Get comprehensive information about an identifier length.

    Args:
        approximate_length: Target identifier length, 1 to 54

    Returns:
        Dictionary with digit budget, security bits and expected lengths
    """
    token_digits, digest_digits = split_digit_budget(approximate_length)
    token_bits, digest_bits = calculate_security_bits(approximate_length)
    shortest, longest = expected_length_range(approximate_length)

    return {
        "approximate_length": approximate_length,
        "hex_length": token_digits + digest_digits,
        "token_digits": token_digits,
        "digest_digits": digest_digits,
        "token_bits": token_bits,
        "digest_bits": digest_bits,
        "forgery_probability": 16.0**-digest_digits,
        "min_length": shortest,
        "max_length": longest,
        # Without a digest digit there is nothing to check.
        "verifiable": digest_digits > 0,
    }


def get_available_lengths() -> Dict[int, Dict[str, Any]]:
    """Get information for every supported length."""
    return {
        length: get_length_info(length) for length in range(1, MAX_ID_LENGTH + 1)
    }
