"""Message-level Morse transcoding.

This module composes the per-symbol codec into whole-message encode and
decode. In encoded text, codes within a word are separated by single spaces
and words are separated by a "/" token:

    HELLO WORLD  <->  .... . .-.. .-.. --- / .-- --- .-. .-.. -..
"""

from __future__ import annotations

from typing import Optional

from .codec.decoder import get_decoder
from .codec.encoder import encode_symbol
from .config import DEFAULT_CONFIG, TranscoderConfig
from .utils.logging import get_logger

logger = get_logger(__name__)

WORD_SEPARATOR = "/"


def is_encodable(char: str) -> bool:
    """Return True for a space or an ASCII letter or digit."""
    return char == " " or (char.isascii() and char.isalnum())


def filter_plaintext(text: str) -> str:
    """Drop every character the encoder cannot represent.

    Surrounding whitespace is trimmed before filtering, and any spaces left
    at the ends after filtering are trimmed as well.

    Args:
        text: Raw plaintext

    Returns:
        Text containing only spaces and ASCII letters/digits

    Example:
        >>> filter_plaintext("  abc, 123! ")
        'abc 123'
    """
    trimmed = text.strip()
    kept = "".join(char for char in trimmed if is_encodable(char))

    if len(kept) != len(trimmed):
        logger.debug("Dropped %d unencodable character(s)", len(trimmed) - len(kept))

    return kept.strip(" ")


def encode_message(text: str, config: Optional[TranscoderConfig] = None) -> str:
    """Encode plaintext to a Morse message.

    Each character's code is separated from the previous one by a space; each
    plaintext space appends " /". Consecutive spaces give consecutive "/"
    tokens.

    Args:
        text: Plaintext (letters, digits, spaces)
        config: Transcoder configuration (default: permissive filtering)

    Returns:
        Encoded message ("" for empty input)

    Raises:
        UnsupportedSymbol: If config.strict is set and text contains a
            character other than a space or an ASCII letter/digit

    Examples:
        ```python
        from dotdash import encode_message

        encode_message("Hello World")
        # '.... . .-.. .-.. --- / .-- --- .-. .-.. -..'

        encode_message("abc, 123!") == encode_message("abc 123")  # True
        ```
    """
    config = config or DEFAULT_CONFIG
    message = text.strip() if config.strict else filter_plaintext(text)

    parts: list[str] = []
    for char in message:
        if char == " " and parts:
            parts.append(" " + WORD_SEPARATOR)
        elif parts:
            parts.append(" " + encode_symbol(char))
        else:
            parts.append(encode_symbol(char))

    return "".join(parts)


def decode_message(code_text: str, config: Optional[TranscoderConfig] = None) -> str:
    """Decode a Morse message to uppercase plaintext.

    The input is split on "/" into words and each word on runs of whitespace
    into codes. Decoded words are joined with a single space.

    Args:
        code_text: Encoded message
        config: Transcoder configuration (selects the decode strategy)

    Returns:
        Decoded plaintext

    Raises:
        InvalidCode: On the first token that is not a valid code

    Examples:
        ```python
        from dotdash import decode_message

        decode_message(".... . .-.. .-.. --- / .-- --- .-. .-.. -..")
        # 'HELLO WORLD'
        ```
    """
    config = config or DEFAULT_CONFIG
    decoder = get_decoder(config.strategy)

    words = []
    for word in code_text.strip().split(WORD_SEPARATOR):
        words.append("".join(decoder.decode(code) for code in word.split()))

    return " ".join(words)
