"""
Generate/Verify Facade

Creates self-authenticating identifiers and checks them again without any
stored state.

Algorithm Overview:
1. Convert the requested alphabet length into a hex digit budget
2. Draw a random hex token that does not start with ``0``
3. Digest ``salt + token`` with SHA-1
4. Interleave token digits (even positions) with digest digits (odd positions)
5. Re-encode the resulting hex ID in the 62-symbol alphabet

Verification runs the steps backwards: decode to hex, split the token from
the digest prefix, recompute the digest and require that it starts with the
recovered prefix. Every failure is reported as ``False``.
"""

import math
from typing import Optional, Union

from .codec import alphabet_to_hex, hex_to_alphabet
from .config import (
    DEFAULT_ID_LENGTH,
    DEFAULT_SALT,
    HEX_TO_ALPHABET_RATIO,
    MAX_ID_LENGTH,
    IdConfig,
    validate_length,
)
from .digest import keyed_digest
from .entropy import random_hex_token
from .errors import InvalidCharacterError
from .interleave import interleave, split
from .log import get_logger, log

_logger = get_logger(__name__)


def calculate_hex_length(approximate_length: int) -> int:
    """Hex digits needed to fill roughly ``approximate_length`` alphabet digits."""
    return math.floor(approximate_length * HEX_TO_ALPHABET_RATIO)


def generate_id(
    approximate_length: int = DEFAULT_ID_LENGTH,
    salt: Union[str, bytes] = DEFAULT_SALT,
) -> str:
    """
    Create an identifier of about ``approximate_length`` characters.

    Args:
        approximate_length: Target identifier length, 1 to 54
        salt: Shared secret the verifier must also hold

    Returns:
        Identifier over the 62-symbol alphabet

    Raises:
        InvalidLengthError: If the length is outside [1, 54]
    """
    validate_length(approximate_length)

    hex_length = calculate_hex_length(approximate_length)
    token = random_hex_token((hex_length + 1) // 2)
    digest = keyed_digest(salt, token)
    hex_id = interleave(token, digest, hex_length)
    identifier = hex_to_alphabet(hex_id)

    log(
        _logger,
        "debug",
        "Created identifier",
        approximate_length=approximate_length,
        hex_length=hex_length,
        length=len(identifier),
    )
    return identifier


def check_id(identifier: str, salt: Union[str, bytes] = DEFAULT_SALT) -> bool:
    """
    Verify that ``identifier`` was created with ``salt``.

    Never raises. Malformed and forged identifiers both give ``False``.
    """
    if not isinstance(identifier, str) or not identifier:
        log(_logger, "debug", "Rejected identifier", reason="empty")
        return False
    if len(identifier) > MAX_ID_LENGTH:
        log(_logger, "debug", "Rejected identifier", reason="too_long")
        return False

    try:
        hex_id = alphabet_to_hex(identifier)
    except InvalidCharacterError as e:
        log(
            _logger,
            "debug",
            "Rejected identifier",
            reason="invalid_character",
            position=e.position,
        )
        return False

    token, digest_prefix = split(hex_id)
    if not digest_prefix:
        log(_logger, "debug", "Rejected identifier", reason="no_digest")
        return False

    try:
        expected = keyed_digest(salt, token)
    except UnicodeEncodeError:
        log(_logger, "debug", "Rejected identifier", reason="bad_salt")
        return False

    # Prefix match: a short identifier only carries the head of the digest.
    valid = expected.startswith(digest_prefix)
    if not valid:
        log(_logger, "debug", "Rejected identifier", reason="digest_mismatch")
    return valid


async def create_id(
    approximate_length: int = DEFAULT_ID_LENGTH,
    salt: Union[str, bytes] = DEFAULT_SALT,
) -> str:
    """Asynchronous form of :func:`generate_id`."""
    return generate_id(approximate_length, salt)


async def verify_id(identifier: str, salt: Union[str, bytes] = DEFAULT_SALT) -> bool:
    """Asynchronous form of :func:`check_id`."""
    return check_id(identifier, salt)


class IdGenerator:
    """
    Creates and verifies identifiers with an explicit configuration.

    Arguments passed to a call win over the configuration values.
    """

    def __init__(self, config: Optional[IdConfig] = None):
        self.config = config if config is not None else IdConfig()

    @classmethod
    def from_env(cls) -> "IdGenerator":
        return cls(IdConfig.from_env())

    def generate(
        self,
        approximate_length: Optional[int] = None,
        salt: Optional[Union[str, bytes]] = None,
    ) -> str:
        if approximate_length is None:
            approximate_length = self.config.approximate_length
        if salt is None:
            salt = self.config.salt
        return generate_id(approximate_length, salt)

    def check(self, identifier: str, salt: Optional[Union[str, bytes]] = None) -> bool:
        if salt is None:
            salt = self.config.salt
        return check_id(identifier, salt)

    async def create_id(
        self,
        approximate_length: Optional[int] = None,
        salt: Optional[Union[str, bytes]] = None,
    ) -> str:
        return self.generate(approximate_length, salt)

    async def verify_id(
        self, identifier: str, salt: Optional[Union[str, bytes]] = None
    ) -> bool:
        return self.check(identifier, salt)
