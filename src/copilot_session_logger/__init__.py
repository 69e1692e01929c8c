"""Copilot Session Logger - save chat transcripts as templated Markdown files."""

__version__ = "0.1.0"
