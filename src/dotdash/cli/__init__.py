"""Command-line interface for dotdash."""
