"""Exception types raised by legitid."""


class LegitIdError(Exception):
    """Base class for all legitid errors."""


class InvalidLengthError(LegitIdError, ValueError):
    """Requested identifier length is outside the supported range."""

    def __init__(self, length, maximum: int):
        self.length = length
        self.maximum = maximum
        super().__init__(
            f"ID length must be an integer between 1 and {maximum}, got {length!r}"
        )


class InvalidCharacterError(LegitIdError, ValueError):
    """A symbol outside the alphabet was found while decoding."""

    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(f"Invalid character {character!r} at position {position}")
