"""Per-code Morse decoders.

This module provides three interchangeable lookup strategies for turning a
single dot/dash sequence back into its symbol:

- ``map``: dictionary keyed by code string
- ``tree``: flat array addressed by binary-tree index (default)
- ``offset``: flat array addressed by shifted signed offset

All three accept exactly the 36 table codes and reject everything else with
InvalidCode. Decoder instances hold only read-only tables and can be shared.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..exceptions import InvalidCode
from ..models.entry import MAX_MARKS
from ..utils.logging import get_logger
from .table import CODE_MAP, OFFSET_ARRAY, TREE_ARRAY, offset_index, tree_index

logger = get_logger(__name__)

DEFAULT_STRATEGY = "tree"


class CodeDecoder(ABC):
    """Abstract single-code decoder."""

    name: str

    @abstractmethod
    def decode(self, code: str) -> str:
        """Decode one dot/dash sequence.

        Args:
            code: Sequence of marks

        Returns:
            Uppercase letter or digit

        Raises:
            InvalidCode: If code is not one of the table codes
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class MapDecoder(CodeDecoder):
    """Associative lookup: code string -> symbol."""

    name = "map"

    def __init__(self, code_map: Optional[dict[str, str]] = None) -> None:
        self._map = dict(CODE_MAP if code_map is None else code_map)

    def decode(self, code: str) -> str:
        symbol = self._map.get(code)
        if symbol is None:
            raise InvalidCode(code)
        return symbol


class TreeDecoder(CodeDecoder):
    """Flat-array lookup addressed by binary-tree index.

    A code is a path from the root of a complete binary tree ('.' goes left,
    '-' goes right). Storing the tree breadth-first in an array makes the
    path's end position directly computable, so lookup is one index.
    """

    name = "tree"

    def __init__(self, slots: Optional[tuple[Optional[str], ...]] = None) -> None:
        self._slots = TREE_ARRAY if slots is None else slots

    def decode(self, code: str) -> str:
        # Each mark doubles the index, so stop before walking a long token
        if len(code) > MAX_MARKS:
            raise InvalidCode(code)

        index = tree_index(code)

        # Smaller slot tables end before the deepest level
        if index >= len(self._slots):
            raise InvalidCode(code)

        symbol = self._slots[index]
        if symbol is None:
            raise InvalidCode(code)
        return symbol


class OffsetDecoder(CodeDecoder):
    """Flat-array lookup addressed by shifted signed offset.

    Each mark moves the offset by a power of two that halves per position, so
    every code of up to five marks lands on its own even-spaced slot.
    """

    name = "offset"

    def __init__(self, slots: Optional[tuple[Optional[str], ...]] = None) -> None:
        self._slots = OFFSET_ARRAY if slots is None else slots

    def decode(self, code: str) -> str:
        symbol = self._slots[offset_index(code)]
        if symbol is None:
            raise InvalidCode(code)
        return symbol


DECODERS: dict[str, CodeDecoder] = {
    decoder.name: decoder for decoder in (MapDecoder(), TreeDecoder(), OffsetDecoder())
}

STRATEGIES = tuple(DECODERS)


def get_decoder(strategy: str = DEFAULT_STRATEGY) -> CodeDecoder:
    """Return the shared decoder for a strategy name.

    Args:
        strategy: One of STRATEGIES

    Returns:
        Decoder instance

    Raises:
        ValueError: If strategy is unknown
    """
    try:
        return DECODERS[strategy]
    except KeyError as err:
        raise ValueError(
            f"Unknown decode strategy: {strategy!r} (expected one of {', '.join(STRATEGIES)})"
        ) from err


def decode_code(code: str, strategy: str = DEFAULT_STRATEGY) -> str:
    """Decode one dot/dash sequence to its symbol.

    Args:
        code: Sequence of 1-5 marks
        strategy: Lookup strategy name (default "tree")

    Returns:
        Uppercase letter or digit

    Raises:
        InvalidCode: If code is not one of the table codes
        ValueError: If strategy is unknown

    Examples:
        ```python
        from dotdash import decode_code

        decode_code("...")                 # 'S'
        decode_code("-----", "map")        # '0'
        decode_code("......")              # raises InvalidCode
        ```
    """
    return get_decoder(strategy).decode(code)
