"""Code table entry model.

This module provides the CodeEntry model used to validate every
(symbol, code) pair of the Morse table when the table is loaded.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..exceptions import SchemaError

MAX_MARKS = 5


class CodeEntry(BaseModel):
    """One row of the code table.

    Example:
        >>> CodeEntry(symbol="A", code=".-")
        CodeEntry(symbol='A', code='.-')

    Attributes:
        symbol: Uppercase ASCII letter or digit
        code: Sequence of 1-5 marks ('.' or '-')
    """

    model_config = ConfigDict(
        # Entries are shared read-only data
        frozen=True,
        strict=True,
        extra="forbid",
    )

    symbol: str = Field(pattern=r"^[A-Z0-9]$", description="Plaintext symbol")
    code: str = Field(
        min_length=1,
        max_length=MAX_MARKS,
        pattern=r"^[.-]+$",
        description="Dot/dash sequence",
    )


def load_entries(symbols: str, codes: tuple[str, ...]) -> tuple[CodeEntry, ...]:
    """Validate a table literal and return it as entries.

    Args:
        symbols: Symbols in table order
        codes: Codes in the same order

    Returns:
        Tuple of validated entries

    Raises:
        SchemaError: If the lengths differ or any entry is malformed
    """
    if len(symbols) != len(codes):
        raise SchemaError(f"Table has {len(symbols)} symbols but {len(codes)} codes")

    try:
        return tuple(
            CodeEntry(symbol=symbol, code=code) for symbol, code in zip(symbols, codes)
        )
    except ValidationError as e:
        raise SchemaError(f"Invalid code table entry: {e}") from e
