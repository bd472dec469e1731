"""Tests for CLI tool."""

from __future__ import annotations

import io
import os
import subprocess
import sys
from pathlib import Path

import pytest

from dotdash.cli.main import main

SRC_DIR = Path(__file__).resolve().parents[2] / "src"


def _run(*args: str, stdin: str = "") -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, "-m", "dotdash.cli.main", *args],
        input=stdin,
        capture_output=True,
        text=True,
        env={**os.environ, "PYTHONPATH": str(SRC_DIR)},
    )


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = _run("--help")
    assert result.returncode == 0
    assert "dotdash: Morse code transcoder" in result.stdout
    assert "encode" in result.stdout
    assert "decode" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = _run("--version")
    assert result.returncode == 0
    assert "dotdash 0.1.0" in result.stdout


def test_cli_no_args() -> None:
    """Test CLI with no arguments (should show help)."""
    result = _run()
    assert result.returncode == 0
    assert "dotdash: Morse code transcoder" in result.stdout


def test_cli_encode() -> None:
    """Test encoding stdin."""
    result = _run("encode", stdin="Hello, World!\n")
    assert result.returncode == 0
    assert result.stdout == ".... . .-.. .-.. --- / .-- --- .-. .-.. -..\n"


def test_cli_decode() -> None:
    """Test decoding stdin."""
    result = _run("decode", stdin=".... . .-.. .-.. --- / .-- --- .-. .-.. -..\n")
    assert result.returncode == 0
    assert result.stdout == "HELLO WORLD\n"


def test_cli_decode_invalid() -> None:
    """Test a bad token exits 1 and names the token on stderr."""
    result = _run("decode", stdin="... x ...")
    assert result.returncode == 1
    assert result.stdout == ""
    assert "unable to decode sequence: 'x'" in result.stderr


def test_cli_encode_strict_invalid() -> None:
    """Test strict encoding exits 1 on punctuation."""
    result = _run("encode", "--strict", stdin="SOS!")
    assert result.returncode == 1
    assert "unable to encode value: '!'" in result.stderr


def test_cli_unknown_strategy() -> None:
    """Test argparse rejects unknown strategies."""
    result = _run("decode", "--strategy", "hash", stdin="...")
    assert result.returncode == 2
    assert "invalid choice" in result.stderr


class TestMainInProcess:
    """Run main() directly with patched stdin."""

    @pytest.mark.parametrize("strategy", ["map", "tree", "offset"])
    def test_decode_strategies(
        self, strategy: str, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test every strategy through the CLI."""
        monkeypatch.setattr(sys, "stdin", io.StringIO("... --- ..."))
        assert main(["decode", "--strategy", strategy]) == 0
        assert capsys.readouterr().out == "SOS\n"

    def test_encode(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test encoding through main()."""
        monkeypatch.setattr(sys, "stdin", io.StringIO("sos"))
        assert main(["encode"]) == 0
        assert capsys.readouterr().out == "... --- ...\n"

    def test_decode_error(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test errors go to stderr with exit code 1."""
        monkeypatch.setattr(sys, "stdin", io.StringIO("......"))
        assert main(["decode"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "unable to decode sequence: '......'" in captured.err

    def test_bench(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test the benchmark prints one line per strategy."""
        assert main(["bench", "--iterations", "1"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert [line.split()[0] for line in lines] == ["map", "tree", "offset"]

    def test_bench_invalid_iterations(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a non-positive iteration count fails cleanly."""
        assert main(["bench", "--iterations", "0"]) == 1
        assert "iterations must be >= 1" in capsys.readouterr().err

    def test_invalid_log_level(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test an unknown log level is reported."""
        assert main(["--log-level", "LOUD", "encode"]) == 2
        assert "Invalid log level" in capsys.readouterr().err
