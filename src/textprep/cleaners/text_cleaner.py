"""Text cleaning pipeline for short user-generated text.

The pipeline is a fixed sequence of string transformations. Each step is a
plain ``str -> str`` function, and ``TextCleaner`` assembles the enabled ones
from a ``CleaningConfig``:

1. Unicode normalization
2. Character translation (punctuation table, whitespace table)
3. URL removal
4. Mention removal
5. Hashtag removal (optional)
6. Run-length compression of repeated characters
7. Emoji removal (optional)
8. Whitespace collapse
9. Case folding (optional)

Optional extra steps (accent stripping, control character removal, Chinese
script conversion, number masking, punctuation removal) slot in between.

Case folding and the removal steps after compression can produce new runs
("SSs" -> "sss", "a😂aa" -> "aaa"). When any of them is enabled, a final
``recompress_repeats`` pass keeps the pipeline idempotent:
``clean(clean(text)) == clean(text)``.
"""

import logging
import re
import unicodedata
from typing import Callable, Iterable, Iterator, List, Optional, Tuple, Union

from textprep.models.cleaning import CleaningConfig, CleaningResult, NormalizationForm
from textprep.normalization.unicode_utils import (
    convert_chinese_script,
    is_emoji,
    normalize_unicode,
    remove_control_characters,
    remove_emoji,
    strip_accents,
    translate_characters,
)

logger = logging.getLogger(__name__)

# Stretched schemes ("htttps://", "wwww.") match too; compression would otherwise turn them into URLs
URL_PATTERN = re.compile(r"(?:h+t+p+s*://|w{3,}\.)\S+", re.IGNORECASE)
MENTION_PATTERN = re.compile(r"(?<!\w)@\w+")
HASHTAG_PATTERN = re.compile(r"(?<!\w)#\w+")
NUMBER_PATTERN = re.compile(r"\d+(?:[.,]\d+)*")
WHITESPACE_PATTERN = re.compile(r"\s+")

# Characters kept by remove_punctuation even though they are punctuation
PUNCTUATION_KEEP = {"#", "@"}

Step = Tuple[str, Callable[[str], str]]


# ============================================================================
# STEP FUNCTIONS
# ============================================================================


def remove_urls(text: str) -> str:
    return URL_PATTERN.sub(" ", text)


def remove_mentions(text: str) -> str:
    return MENTION_PATTERN.sub(" ", text)


def remove_hashtags(text: str) -> str:
    return HASHTAG_PATTERN.sub(" ", text)


def compress_repeats(text: str, max_repeat: int = 2) -> str:
    """Shorten runs of one repeated character to at most ``max_repeat`` copies.

    Digits and whitespace are left alone, so "1000" stays intact; whitespace
    is handled by collapse_whitespace().

    Example:
        >>> compress_repeats("Sooooo cooool!!!")
        'Soo cool!!'
    """
    if max_repeat < 1:
        raise ValueError(f"max_repeat must be >= 1, got {max_repeat}")

    pattern = re.compile(r"([^\d\s])\1{%d,}" % max_repeat)
    return pattern.sub(lambda match: match.group(1) * max_repeat, text)


def collapse_whitespace(text: str) -> str:
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def mask_numbers(text: str, token: str = "<num>") -> str:
    return NUMBER_PATTERN.sub(token, text)


def remove_punctuation(text: str) -> str:
    """Drop Unicode punctuation (categories P*), keeping '#' and '@'."""
    return "".join(
        char
        for char in text
        if char in PUNCTUATION_KEEP or not unicodedata.category(char).startswith("P")
    )


# ============================================================================
# PIPELINE
# ============================================================================


class TextCleaner:
    """Configurable cleaning pipeline.

    Example:
        >>> cleaner = TextCleaner(CleaningConfig(remove_hashtags=True))
        >>> cleaner.clean("Sooooo good!!! @bob #yum https://x.co")
        'soo good!!'
    """

    def __init__(self, config: Optional[CleaningConfig] = None):
        self.config = config or CleaningConfig()
        self._steps = self._build_steps(self.config)

    @staticmethod
    def _build_steps(config: CleaningConfig) -> List[Step]:
        steps: List[Step] = [
            ("normalize", lambda t: normalize_unicode(t, config.normalization_form)),
        ]

        if config.remove_control_characters:
            steps.append(("remove_control_characters", remove_control_characters))
        if config.translate_characters:
            steps.append(("translate_characters", translate_characters))
        if config.chinese_conversion:
            steps.append(
                ("chinese_conversion", lambda t: convert_chinese_script(t, config.chinese_conversion))
            )
        if config.strip_accents:
            steps.append(("strip_accents", strip_accents))
        if config.remove_urls:
            steps.append(("remove_urls", remove_urls))
        if config.remove_mentions:
            steps.append(("remove_mentions", remove_mentions))
        if config.remove_hashtags:
            steps.append(("remove_hashtags", remove_hashtags))
        if config.mask_numbers:
            steps.append(("mask_numbers", lambda t: mask_numbers(t, config.number_token)))
        if config.max_repeat is not None:
            steps.append(("compress_repeats", lambda t: compress_repeats(t, config.max_repeat)))
        if config.remove_emoji:
            steps.append(("remove_emoji", remove_emoji))
        if config.remove_punctuation:
            steps.append(("remove_punctuation", remove_punctuation))

        steps.append(("collapse_whitespace", collapse_whitespace))

        if config.lowercase:
            steps.append(("lowercase", str.casefold))

        creates_runs = config.lowercase or config.remove_emoji or config.remove_punctuation
        if config.max_repeat is not None and creates_runs:
            steps.append(
                ("recompress_repeats", lambda t: compress_repeats(t, config.max_repeat))
            )

        return steps

    @property
    def steps(self) -> List[str]:
        """Names of the enabled steps, in execution order."""
        return [name for name, _ in self._steps]

    def clean(self, text: str) -> str:
        """Run every enabled step over text.

        Raises:
            TypeError: If text is not a string
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")

        for _, step in self._steps:
            text = step(text)
        return text

    def clean_with_report(self, text: str) -> CleaningResult:
        """Clean text and record which steps changed it and what was removed."""
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")

        original = text
        applied = []
        removed = {"urls": 0, "mentions": 0, "hashtags": 0, "emoji": 0}

        for name, step in self._steps:
            if name == "remove_urls":
                removed["urls"] = len(URL_PATTERN.findall(text))
            elif name == "remove_mentions":
                removed["mentions"] = len(MENTION_PATTERN.findall(text))
            elif name == "remove_hashtags":
                removed["hashtags"] = len(HASHTAG_PATTERN.findall(text))
            elif name == "remove_emoji":
                removed["emoji"] = sum(1 for char in text if is_emoji(char))

            updated = step(text)
            if updated != text:
                applied.append(name)
            text = updated

        return CleaningResult(
            original=original,
            cleaned=text,
            applied_steps=applied,
            removed=removed,
        )

    def clean_many(self, texts: Iterable[str]) -> Iterator[str]:
        """Lazily clean an iterable of texts."""
        for text in texts:
            yield self.clean(text)


def clean_text_simple(
    text: str,
    *,
    remove_hashtags: bool = False,
    remove_emoji: bool = False,
    lowercase: bool = True,
    max_repeat: int = 2,
    normalization_form: Union[str, NormalizationForm] = NormalizationForm.NFKC,
) -> str:
    """Clean a short social-media text with the default pipeline.

    Args:
        text: Text to clean
        remove_hashtags: Drop #hashtags entirely (default: False)
        remove_emoji: Drop emoji (default: False)
        lowercase: Casefold the result (default: True)
        max_repeat: Longest allowed run of one character (default: 2)
        normalization_form: Unicode normalization form (default: NFKC)

    Returns:
        Cleaned text

    Raises:
        TypeError: If text is not a string
        ValueError: If max_repeat < 1 or the normalization form is unknown

    Example:
        >>> clean_text_simple("Sooooo cooool!!! visit https://x.co @aa #fun 😂")
        'soo cool!! visit #fun 😂'
    """
    if max_repeat < 1:
        raise ValueError(f"max_repeat must be >= 1, got {max_repeat}")

    config = CleaningConfig(
        normalization_form=normalization_form,
        remove_hashtags=remove_hashtags,
        remove_emoji=remove_emoji,
        lowercase=lowercase,
        max_repeat=max_repeat,
    )
    return TextCleaner(config).clean(text)
