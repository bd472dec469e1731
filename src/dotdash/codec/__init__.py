"""Per-symbol Morse codec for dotdash.

This module provides the code table, the strict symbol encoder, and the
interchangeable single-code decoders.
"""

from __future__ import annotations

from .decoder import (
    DEFAULT_STRATEGY,
    STRATEGIES,
    CodeDecoder,
    MapDecoder,
    OffsetDecoder,
    TreeDecoder,
    decode_code,
    get_decoder,
)
from .encoder import encode_symbol
from .table import CODES, SYMBOLS, offset_index, tree_index

__all__ = [
    "encode_symbol",
    "decode_code",
    "get_decoder",
    "CodeDecoder",
    "MapDecoder",
    "TreeDecoder",
    "OffsetDecoder",
    "DEFAULT_STRATEGY",
    "STRATEGIES",
    "CODES",
    "SYMBOLS",
    "tree_index",
    "offset_index",
]
