"""Styled terminal output: colors, styles, headers, paragraphs and panels."""

__version__ = "0.1.0"