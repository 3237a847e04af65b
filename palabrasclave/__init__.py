"""Keyword dictionary editor and word-by-word code translator for learning C++ terms in Spanish."""

__version__ = "0.1.0"
__all__ = ["cli", "dictionary", "translator"]