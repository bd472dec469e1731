"""dotdash: Morse code transcoder

A Python library for converting plaintext (ASCII letters, digits, spaces) to
and from International Morse code written as dots and dashes.

Key Features:
- Strict per-symbol encoder and permissive whole-message encoder
- Three interchangeable decode strategies (dictionary, binary-tree array,
  signed-offset array)
- Immutable, import-time code table validated with Pydantic
- Small CLI for stdin/stdout use

Quick Start:
    >>> from dotdash import decode_message, encode_message
    >>>
    >>> encode_message("Hello World")
    '.... . .-.. .-.. --- / .-- --- .-. .-.. -..'
    >>> decode_message(".... . .-.. .-.. --- / .-- --- .-. .-.. -..")
    'HELLO WORLD'
"""

from __future__ import annotations

__version__ = "0.1.0"

from .codec import (
    CODES,
    DEFAULT_STRATEGY,
    STRATEGIES,
    SYMBOLS,
    CodeDecoder,
    MapDecoder,
    OffsetDecoder,
    TreeDecoder,
    decode_code,
    encode_symbol,
    get_decoder,
    offset_index,
    tree_index,
)
from .config import TranscoderConfig
from .exceptions import (
    DecodeError,
    DotdashError,
    EncodeError,
    InvalidCode,
    SchemaError,
    UnsupportedSymbol,
)
from .models import CodeEntry
from .transcoder import decode_message, encode_message, filter_plaintext

__all__ = [
    # Core API
    "encode_message",
    "decode_message",
    "filter_plaintext",
    "encode_symbol",
    "decode_code",
    # Decoders
    "get_decoder",
    "CodeDecoder",
    "MapDecoder",
    "TreeDecoder",
    "OffsetDecoder",
    "DEFAULT_STRATEGY",
    "STRATEGIES",
    # Table
    "CODES",
    "SYMBOLS",
    "CodeEntry",
    "tree_index",
    "offset_index",
    # Configuration
    "TranscoderConfig",
    # Exceptions
    "DotdashError",
    "SchemaError",
    "EncodeError",
    "UnsupportedSymbol",
    "DecodeError",
    "InvalidCode",
    # Version
    "__version__",
]
