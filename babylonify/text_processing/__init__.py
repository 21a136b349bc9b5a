"""Text processing utilities for normalizing transcriptions."""

from .normalizer import clean_text

__all__ = [
    "clean_text",
]
