"""Configuration for message transcoding.

This module provides the TranscoderConfig dataclass that selects the decode
strategy and the plaintext filtering policy used by the message transcoder.
"""

from __future__ import annotations

from dataclasses import dataclass

from .codec.decoder import DEFAULT_STRATEGY, STRATEGIES


@dataclass(frozen=True)
class TranscoderConfig:
    """Configuration for encode_message() and decode_message().

    Attributes:
        strategy: Single-code decode strategy (default "tree").
            - "map": dictionary lookup
            - "tree": flat array addressed by binary-tree index
            - "offset": flat array addressed by signed offset

        strict: Plaintext policy for encode_message() (default False).
            - False: characters other than spaces and ASCII letters/digits
              are dropped before encoding
            - True: the first such character raises UnsupportedSymbol

    Examples:
        ```python
        from dotdash import TranscoderConfig, decode_message, encode_message

        config = TranscoderConfig(strategy="map", strict=True)
        encode_message("SOS", config)       # '... --- ...'
        encode_message("SOS!", config)      # raises UnsupportedSymbol
        decode_message("... --- ...", config)
        ```
    """

    strategy: str = DEFAULT_STRATEGY
    strict: bool = False

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.strategy not in STRATEGIES:
            raise ValueError(
                f"strategy must be one of {', '.join(STRATEGIES)}, got {self.strategy!r}"
            )

        if not isinstance(self.strict, bool):
            raise ValueError(f"strict must be a bool, got {type(self.strict).__name__}")


DEFAULT_CONFIG = TranscoderConfig()
