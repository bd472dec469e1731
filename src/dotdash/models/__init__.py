"""Pydantic models for dotdash.

This module provides the CodeEntry model that validates the code table.
"""

from __future__ import annotations

from .entry import MAX_MARKS, CodeEntry, load_entries

__all__ = [
    "CodeEntry",
    "MAX_MARKS",
    "load_entries",
]
