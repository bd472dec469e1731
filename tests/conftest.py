"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from dotdash import STRATEGIES


@pytest.fixture
def hello_world_text() -> str:
    """Sample plaintext message."""
    return "Hello World"


@pytest.fixture
def hello_world_code() -> str:
    """Encoded form of the sample message."""
    return ".... . .-.. .-.. --- / .-- --- .-. .-.. -.."


@pytest.fixture(params=STRATEGIES)
def strategy(request: pytest.FixtureRequest) -> str:
    """Each decode strategy name in turn."""
    return request.param
