"""
Error types for the CSD package.

Every failure raised by this package derives from CsdError, so callers
(the CLI in particular) can catch a single type.

The concrete errors also derive from ValueError: each one reports a bad
input value.
"""

from typing import Optional


class CsdError(Exception):
    """Base class for all CSD errors."""
    pass


class InvalidDigit(CsdError, ValueError):
    """
    Raised when a decoder meets a character outside the CSD alphabet.

    Properties:
        digit: The offending character
        position: Its index in the decoded string (None if unknown)
    """

    def __init__(self, digit: str, position: Optional[int] = None):
        self.digit = digit
        self.position = position
        if position is None:
            msg = f"Invalid CSD digit {digit!r}"
        else:
            msg = f"Invalid CSD digit {digit!r} at position {position}"
        super().__init__(msg)


class InvalidArgument(CsdError, ValueError):
    """Raised when an argument is outside its valid range."""
    pass
