"""Regex tokenizers."""

from textprep.tokenizers.tokenizer import (
    RegexTokenizer,
    ngrams,
    sentence_split,
    simple_tokenize,
    social_tokenize,
    whitespace_tokenize,
)

__all__ = [
    "RegexTokenizer",
    "ngrams",
    "sentence_split",
    "simple_tokenize",
    "social_tokenize",
    "whitespace_tokenize",
]
