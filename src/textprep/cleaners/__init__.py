"""Text cleaning pipeline.

This package exposes the cleaning steps and the configurable ``TextCleaner``.
"""

from textprep.cleaners.text_cleaner import (
    TextCleaner,
    clean_text_simple,
    collapse_whitespace,
    compress_repeats,
    mask_numbers,
    remove_hashtags,
    remove_mentions,
    remove_punctuation,
    remove_urls,
)

__all__ = [
    "TextCleaner",
    "clean_text_simple",
    "collapse_whitespace",
    "compress_repeats",
    "mask_numbers",
    "remove_hashtags",
    "remove_mentions",
    "remove_punctuation",
    "remove_urls",
]
