"""
Shared configuration for legitid.

The module-level constants are the compiled-in defaults. Deployments are
expected to override the salt, either by passing an explicit ``IdConfig``
to an ``IdGenerator`` or through the ``LEGITID_SALT`` environment variable.
"""

import os
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidLengthError

# Change this per deployment. It is never transmitted with an identifier.
DEFAULT_SALT = "legitid:"

DEFAULT_ID_LENGTH = 10

ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"

# log(62) / log(16): hex digits needed per alphabet digit
HEX_TO_ALPHABET_RATIO = 1.48855

# SHA-1 is 160 bits, 40 hex digits. The hex ID holds at most 80 digits
# (40 token + 40 digest) and 80 / 1.48855 = 54 alphabet characters.
DIGEST_HEX_LENGTH = 40
MAX_ID_LENGTH = 54

SALT_ENV_VAR = "LEGITID_SALT"
LENGTH_ENV_VAR = "LEGITID_ID_LENGTH"


def validate_length(approximate_length) -> int:
    """
    Check that a requested identifier length is usable.

    Raises:
        InvalidLengthError: If the length is not an integer in [1, MAX_ID_LENGTH]
    """
    if isinstance(approximate_length, bool) or not isinstance(approximate_length, int):
        raise InvalidLengthError(approximate_length, MAX_ID_LENGTH)
    if approximate_length <= 0 or approximate_length > MAX_ID_LENGTH:
        raise InvalidLengthError(approximate_length, MAX_ID_LENGTH)
    return approximate_length


@dataclass(frozen=True)
class IdConfig:
    """Salt and default length used by an ``IdGenerator``."""

    salt: str = DEFAULT_SALT
    approximate_length: int = DEFAULT_ID_LENGTH

    def __post_init__(self):
        validate_length(self.approximate_length)

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "IdConfig":
        """
        Build a configuration from ``LEGITID_SALT`` and ``LEGITID_ID_LENGTH``.

        Unset variables fall back to the compiled-in defaults.
        """
        env = os.environ if environ is None else environ
        # Empty means unset, matching how click reads the same variable.
        salt = env.get(SALT_ENV_VAR) or DEFAULT_SALT
        raw_length = env.get(LENGTH_ENV_VAR)
        if raw_length is None or raw_length.strip() == "":
            return cls(salt=salt)
        try:
            length = int(raw_length)
        except ValueError:
            raise InvalidLengthError(raw_length, MAX_ID_LENGTH)
        return cls(salt=salt, approximate_length=length)
