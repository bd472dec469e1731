"""End-to-end integration tests."""

from __future__ import annotations

import threading

import pytest

from dotdash import (
    STRATEGIES,
    DotdashError,
    InvalidCode,
    TranscoderConfig,
    decode_message,
    encode_message,
)

PANGRAM = "The quick brown fox jumps over the lazy dog 1234567890"
PANGRAM_CODE = (
    "- .... . / --.- ..- .. -.-. -.- / -... .-. --- .-- -. / ..-. --- -..- / "
    ".--- ..- -- .--. ... / --- ...- . .-. / - .... . / .-.. .- --.. -.-- / "
    "-.. --- --. / .---- ..--- ...-- ....- ..... -.... --... ---.. ----. -----"
)


class TestEndToEndWorkflow:
    """Test complete encode/decode workflows."""

    def test_pangram(self) -> None:
        """Test every letter and digit in one message."""
        assert encode_message(PANGRAM) == PANGRAM_CODE

        for strategy in STRATEGIES:
            config = TranscoderConfig(strategy=strategy)
            assert decode_message(PANGRAM_CODE, config) == PANGRAM.upper()

    def test_noisy_input_workflow(self) -> None:
        """Test punctuation-heavy text survives as its alphanumeric content."""
        text = '  "Mayday, mayday!" -- vessel #42 taking on water...  '
        encoded = encode_message(text)
        assert decode_message(encoded) == "MAYDAY MAYDAY  VESSEL 42 TAKING ON WATER"

    def test_stdin_style_input(self) -> None:
        """Test trailing newlines as read from a pipe."""
        encoded = encode_message("cq cq de w1aw\n")
        assert encoded == "-.-. --.- / -.-. --.- / -.. . / .-- .---- .- .--"
        assert decode_message(encoded + "\n") == "CQ CQ DE W1AW"

    def test_error_aborts_whole_message(self) -> None:
        """Test a corrupted message yields no partial output."""
        encoded = encode_message("good data then bad")
        corrupted = encoded.replace("-..", "-..x", 1)

        with pytest.raises(InvalidCode) as exc_info:
            decode_message(corrupted)
        assert exc_info.value.code == "-..x"

    def test_errors_share_base_class(self) -> None:
        """Test callers can catch every failure with one base class."""
        failures = 0
        for call in (
            lambda: encode_message("SOS?", TranscoderConfig(strict=True)),
            lambda: decode_message("... ---- ..."),
        ):
            try:
                call()
            except DotdashError:
                failures += 1
        assert failures == 2

    def test_concurrent_callers(self) -> None:
        """Test shared tables give consistent results across threads."""
        errors: list[str] = []

        def worker(strategy: str) -> None:
            config = TranscoderConfig(strategy=strategy)
            for _ in range(200):
                if decode_message(PANGRAM_CODE, config) != PANGRAM.upper():
                    errors.append(strategy)

        threads = [threading.Thread(target=worker, args=(s,)) for s in STRATEGIES * 3]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
