"""
Text Preprocessing Toolkit

This package contains the string-handling building blocks used to prepare short
user-generated text (tweets, reviews, comments) for NLP work: Unicode
normalization, encoding policies, cleaning pipelines and tokenizers.

**Version**: 0.1.0
**Python**: >=3.11
**Key Dependencies**: pydantic, loguru, python-dotenv, opencc, tqdm
"""

from textprep.cleaners.text_cleaner import TextCleaner, clean_text_simple
from textprep.models.cleaning import CleaningConfig, CleaningResult
from textprep.tokenizers.tokenizer import (
    sentence_split,
    simple_tokenize,
    social_tokenize,
    whitespace_tokenize,
)

__version__ = "0.1.0"
__author__ = "Textprep"

# Unicode normalization forms accepted by the pipeline
NORMALIZATION_FORMS = ["NFC", "NFD", "NFKC", "NFKD"]

__all__ = [
    "__version__",
    "__author__",
    "NORMALIZATION_FORMS",
    "CleaningConfig",
    "CleaningResult",
    "TextCleaner",
    "clean_text_simple",
    "sentence_split",
    "simple_tokenize",
    "social_tokenize",
    "whitespace_tokenize",
]
