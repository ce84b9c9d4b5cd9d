"""Unicode normalization, translation tables, emoji handling and encoding policies."""

from textprep.normalization.unicode_utils import (
    DEFAULT_TRANSLATION_TABLES,
    PUNCTUATION_TABLE,
    WHITESPACE_TABLE,
    convert_chinese_script,
    decode_bytes,
    encode_text,
    is_emoji,
    normalize_unicode,
    remove_control_characters,
    remove_emoji,
    strip_accents,
    translate_characters,
)

__all__ = [
    "DEFAULT_TRANSLATION_TABLES",
    "PUNCTUATION_TABLE",
    "WHITESPACE_TABLE",
    "convert_chinese_script",
    "decode_bytes",
    "encode_text",
    "is_emoji",
    "normalize_unicode",
    "remove_control_characters",
    "remove_emoji",
    "strip_accents",
    "translate_characters",
]
