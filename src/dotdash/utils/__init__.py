"""Utility functions for dotdash.

This module provides logging helpers shared by the library and the CLI.
"""

from __future__ import annotations

from .logging import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
]
