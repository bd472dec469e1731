"""Morse code table and the lookup structures derived from it.

The table is a fixed tuple of 36 codes: positions 0-25 hold A-Z and
positions 26-35 hold 0-9. Every encode and decode structure in the package
is built from this tuple once, at import time, and never mutated.

Two integer addressings are defined over dot/dash sequences:

- Tree index: the sequence is a path through a complete binary tree stored
  as an array (root 0, '.' -> left child 2i+1, '-' -> right child 2i+2).
  Sequences of up to five marks land in [0, 62].
- Offset index: starting from 0 with an increment of 32, each '.' adds the
  increment and each '-' subtracts it, halving the increment after every
  mark. Sequences of up to five marks land in [-62, 62]; adding 62 shifts
  them into [0, 124].
"""

from __future__ import annotations

from typing import Callable, Optional

from ..exceptions import InvalidCode, SchemaError
from ..models.entry import MAX_MARKS, CodeEntry, load_entries
from ..utils.logging import get_logger

logger = get_logger(__name__)

DOT = "."
DASH = "-"

LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"
SYMBOLS = LETTERS + DIGITS

# Indices 0-25 are A-Z, 26-35 are 0-9
CODES: tuple[str, ...] = (
    ".-", "-...", "-.-.", "-..", ".", "..-.", "--.", "....", "..", ".---",
    "-.-", ".-..", "--", "-.", "---", ".--.", "--.-", ".-.", "...", "-",
    "..-", "...-", ".--", "-..-", "-.--", "--..",
    "-----", ".----", "..---", "...--", "....-",
    ".....", "-....", "--...", "---..", "----.",
)  # fmt: skip

DIGIT_OFFSET = len(LETTERS)

# Complete binary tree of depth MAX_MARKS, root included
TREE_SIZE = (1 << (MAX_MARKS + 1)) - 1

OFFSET_START = 1 << MAX_MARKS
OFFSET_SHIFT = (1 << (MAX_MARKS + 1)) - 2
OFFSET_SIZE = 2 * OFFSET_SHIFT + 1


def symbol_index(symbol: str) -> int:
    """Return the table position of an uppercase letter or digit.

    Args:
        symbol: Single uppercase ASCII letter or ASCII digit

    Returns:
        Index into CODES

    Raises:
        ValueError: If symbol is not in the table
    """
    if len(symbol) == 1:
        if "A" <= symbol <= "Z":
            return ord(symbol) - ord("A")
        if "0" <= symbol <= "9":
            return ord(symbol) - ord("0") + DIGIT_OFFSET
    raise ValueError(f"{symbol!r} is not a table symbol")


def tree_index(code: str) -> int:
    """Compute the binary-tree array index of a dot/dash sequence.

    The result is unbounded; callers bounds-check against TREE_SIZE.

    Args:
        code: Sequence of marks

    Returns:
        Heap-style array index (0 is the empty root)

    Raises:
        InvalidCode: If code is empty or contains anything besides '.' and '-'
    """
    if not code:
        raise InvalidCode(code)

    index = 0
    for mark in code:
        if mark == DOT:
            index = index * 2 + 1
        elif mark == DASH:
            index = index * 2 + 2
        else:
            raise InvalidCode(code)
    return index


def offset_index(code: str) -> int:
    """Compute the shifted signed-offset index of a dot/dash sequence.

    Args:
        code: Sequence of at most MAX_MARKS marks

    Returns:
        Index in [0, OFFSET_SIZE)

    Raises:
        InvalidCode: If code is empty, too long, or contains anything besides '.' and '-'
    """
    if not code or len(code) > MAX_MARKS:
        raise InvalidCode(code)

    offset = 0
    increment = OFFSET_START
    for mark in code:
        if mark == DOT:
            offset += increment
        elif mark == DASH:
            offset -= increment
        else:
            raise InvalidCode(code)
        increment >>= 1
    return offset + OFFSET_SHIFT


def build_code_map(entries: tuple[CodeEntry, ...]) -> dict[str, str]:
    """Build the code -> symbol mapping."""
    return {entry.code: entry.symbol for entry in entries}


def _build_array(
    entries: tuple[CodeEntry, ...],
    size: int,
    compute: Callable[[str], int],
    index_of: str,
) -> tuple[Optional[str], ...]:
    slots: list[Optional[str]] = [None] * size

    for entry in entries:
        index = compute(entry.code)
        if not 0 <= index < size:
            raise SchemaError(
                f"Code {entry.code!r} for {entry.symbol} has {index_of} index {index} "
                f"outside [0, {size - 1}]"
            )
        if slots[index] is not None:
            raise SchemaError(
                f"Codes for {slots[index]} and {entry.symbol} collide on "
                f"{index_of} index {index}"
            )
        slots[index] = entry.symbol

    return tuple(slots)


def build_tree_array(entries: tuple[CodeEntry, ...]) -> tuple[Optional[str], ...]:
    """Build the flat binary-tree array, one slot per tree index.

    Raises:
        SchemaError: If two codes share an index or an index is out of range
    """
    return _build_array(entries, TREE_SIZE, tree_index, "tree")


def build_offset_array(entries: tuple[CodeEntry, ...]) -> tuple[Optional[str], ...]:
    """Build the flat signed-offset array, one slot per shifted offset.

    Raises:
        SchemaError: If two codes share an index or an index is out of range
    """
    return _build_array(entries, OFFSET_SIZE, offset_index, "offset")


def check_table(entries: tuple[CodeEntry, ...]) -> None:
    """Verify that symbols and codes are pairwise distinct.

    Raises:
        SchemaError: If a symbol or a code appears twice
    """
    seen_symbols: set[str] = set()
    seen_codes: dict[str, str] = {}

    for entry in entries:
        if entry.symbol in seen_symbols:
            raise SchemaError(f"Symbol {entry.symbol} appears twice")
        if entry.code in seen_codes:
            raise SchemaError(
                f"Symbols {seen_codes[entry.code]} and {entry.symbol} "
                f"share code {entry.code!r}"
            )
        seen_symbols.add(entry.symbol)
        seen_codes[entry.code] = entry.symbol


ENTRIES = load_entries(SYMBOLS, CODES)
check_table(ENTRIES)

CODE_MAP = build_code_map(ENTRIES)
TREE_ARRAY = build_tree_array(ENTRIES)
OFFSET_ARRAY = build_offset_array(ENTRIES)

logger.debug(
    "Loaded %d codes (tree slots: %d, offset slots: %d)",
    len(ENTRIES),
    len(TREE_ARRAY),
    len(OFFSET_ARRAY),
)
