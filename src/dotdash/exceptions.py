"""Exception hierarchy for dotdash.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from DotdashError for easy catching of any
dotdash-specific error.
"""

from __future__ import annotations

from typing import Union


class DotdashError(Exception):
    """Base exception for all dotdash errors."""

    pass


class SchemaError(DotdashError):
    """Raised when the code table fails validation.

    Examples:
        - An entry's code contains marks other than '.' and '-'
        - Two symbols share the same code
        - Two codes collide on the same flat-array slot
    """

    pass


class EncodeError(DotdashError):
    """Raised when encoding plaintext fails."""

    pass


class UnsupportedSymbol(EncodeError):
    """Raised when a character has no code in the table.

    Examples:
        - Punctuation such as '!' or ','
        - Non-ASCII letters such as 'é'
        - Control characters
        - Byte values outside ASCII
    """

    def __init__(self, symbol: Union[str, int]) -> None:
        self.symbol = symbol
        super().__init__(f"unable to encode value: {symbol!r}")


class DecodeError(DotdashError):
    """Raised when decoding a dot/dash sequence fails."""

    pass


class InvalidCode(DecodeError):
    """Raised when a token is not one of the valid codes.

    Examples:
        - Empty token
        - More than five marks
        - Characters other than '.' and '-'
        - Well-formed sequence with no assigned symbol (e.g. '..--')
    """

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"unable to decode sequence: {code!r}")
