"""Per-symbol Morse encoder.

This module provides encode_symbol(), the strict encoding layer: every
character it is given must be an ASCII letter or digit.
"""

from __future__ import annotations

from typing import Union

from ..exceptions import UnsupportedSymbol
from .table import CODES, symbol_index


def encode_symbol(char: Union[str, int]) -> str:
    """Encode one ASCII letter or digit to its dot/dash code.

    Letters are case-insensitive.

    Args:
        char: Single-character string, or an ASCII byte value

    Returns:
        Code string of 1-5 marks

    Raises:
        UnsupportedSymbol: If char is not an ASCII letter or digit

    Examples:
        ```python
        from dotdash import encode_symbol

        encode_symbol("a")     # '.-'
        encode_symbol(ord("7"))  # '--...'
        encode_symbol("!")     # raises UnsupportedSymbol
        ```
    """
    if isinstance(char, int):
        if not 0 <= char < 0x80:
            raise UnsupportedSymbol(char)
        char = chr(char)

    if len(char) != 1 or not char.isascii():
        raise UnsupportedSymbol(char)

    try:
        return CODES[symbol_index(char.upper())]
    except ValueError as err:
        raise UnsupportedSymbol(char) from err
