"""legitid - short, URL-safe identifiers that verify themselves with a shared salt."""

__version__ = "0.1.0"
__description__ = "Self-authenticating short identifiers"

from .codec import alphabet_to_hex, hex_to_alphabet
from .config import (
    ALPHABET,
    DEFAULT_ID_LENGTH,
    DEFAULT_SALT,
    MAX_ID_LENGTH,
    IdConfig,
)
from .digest import keyed_digest
from .entropy import random_hex_token
from .errors import InvalidCharacterError, InvalidLengthError, LegitIdError
from .ids import (
    IdGenerator,
    calculate_hex_length,
    check_id,
    create_id,
    generate_id,
    verify_id,
)
from .interleave import interleave, split

__all__ = [
    # Public operations
    "create_id",
    "verify_id",
    "generate_id",
    "check_id",
    "IdGenerator",
    "IdConfig",
    # Building blocks
    "hex_to_alphabet",
    "alphabet_to_hex",
    "random_hex_token",
    "keyed_digest",
    "interleave",
    "split",
    "calculate_hex_length",
    # Errors
    "LegitIdError",
    "InvalidLengthError",
    "InvalidCharacterError",
    # Constants
    "ALPHABET",
    "DEFAULT_SALT",
    "DEFAULT_ID_LENGTH",
    "MAX_ID_LENGTH",
]
