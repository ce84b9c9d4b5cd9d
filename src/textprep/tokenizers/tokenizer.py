"""Regex tokenizers for plain and social-media text.

- whitespace_tokenize: str.split()
- simple_tokenize: words (with inner apostrophes/hyphens), one token per CJK character
- social_tokenize: keeps URLs, @mentions, #hashtags, emoticons and emoji whole
- sentence_split: sentence boundaries after . ! ? (and 。！？)
- ngrams: contiguous n-grams over a token list
"""

import logging
import re
from typing import List, Sequence, Tuple

logger = logging.getLogger(__name__)


class RegexTokenizer:
    """Tokenizer that returns every non-overlapping match of a pattern.

    Example:
        >>> RegexTokenizer(r"\\d+").tokenize("call 555 0100")
        ['555', '0100']
    """

    def __init__(self, pattern: str, flags: int = 0):
        self.pattern = re.compile(pattern, flags)

    def tokenize(self, text: str) -> List[str]:
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")
        return [match.group(0) for match in self.pattern.finditer(text)]

    def __call__(self, text: str) -> List[str]:
        return self.tokenize(text)

    def __repr__(self) -> str:
        return f"RegexTokenizer({self.pattern.pattern!r})"


# ============================================================================
# PATTERNS
# ============================================================================

# CJK ideographs and kana are tokenized one character at a time
CJK_CHAR = r"[\u3040-\u30ff\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff]"
WORD_CHARS = r"[^\W\u3040-\u30ff\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff]+"
WORD = rf"{WORD_CHARS}(?:['’\-]{WORD_CHARS})*"

URL = r"(?i:https?://|www\.)\S+"
MENTION = r"@\w+"
HASHTAG = r"#\w+"
# Emoticons only stand alone; "key:data" is not ":d"
EMOTICON = r"(?<!\w)(?:[<>]?[:;=][\-o\*']?[\)\]\(\[dDpP/\\:\}\{@\|]|<3)(?!\w)"
EMOJI_CHAR = r"[\U0001F000-\U0001FAFF\u2600-\u27BF\u2300-\u23FF\u2B00-\u2BFF]"
# Emoji with optional skin tone and variation selector
EMOJI_UNIT = rf"{EMOJI_CHAR}[\U0001F3FB-\U0001F3FF]?[\uFE0E\uFE0F]?"
FLAG = r"[\U0001F1E6-\U0001F1FF]{2}"
KEYCAP = r"[0-9#*]\uFE0F?\u20E3"
EMOJI_SEQUENCE = rf"(?:{FLAG}|{KEYCAP}|{EMOJI_UNIT}(?:\u200D{EMOJI_UNIT})*)"
PUNCTUATION_RUN = r"([^\w\s])\1*"

_simple_tokenizer = RegexTokenizer(rf"{CJK_CHAR}|{WORD}")
_social_tokenizer = RegexTokenizer(
    rf"{URL}|{MENTION}|{HASHTAG}|{EMOTICON}|{EMOJI_SEQUENCE}|{CJK_CHAR}|{WORD}|{PUNCTUATION_RUN}"
)


# ============================================================================
# TOKENIZERS
# ============================================================================


def whitespace_tokenize(text: str) -> List[str]:
    """Split on runs of whitespace.

    Example:
        >>> whitespace_tokenize("  hello   world\\n")
        ['hello', 'world']
    """
    return text.split()


def simple_tokenize(text: str, lowercase: bool = False) -> List[str]:
    """Extract word tokens, dropping punctuation and emoji.

    Apostrophes and hyphens inside a word are kept ("don't", "state-of-the-art").
    Each CJK ideograph or kana character becomes its own token.

    Args:
        text: Text to tokenize
        lowercase: Casefold tokens (default: False)

    Returns:
        List of tokens

    Example:
        >>> simple_tokenize("Don't panic, it's state-of-the-art! 我爱你")
        ["Don't", 'panic', "it's", 'state-of-the-art', '我', '爱', '你']
    """
    tokens = _simple_tokenizer.tokenize(text)
    if lowercase:
        tokens = [token.casefold() for token in tokens]
    return tokens


def social_tokenize(text: str) -> List[str]:
    """Tokenize tweet-like text without breaking social-media entities.

    Example:
        >>> social_tokenize("@aa loved it!!! #fun 😂 :) https://x.co")
        ['@aa', 'loved', 'it', '!!!', '#fun', '😂', ':)', 'https://x.co']
    """
    return _social_tokenizer.tokenize(text)


# Lowercased abbreviations that end with a period but do not end a sentence
ABBREVIATIONS = {
    "e.g.",
    "i.e.",
    "mr.",
    "mrs.",
    "ms.",
    "dr.",
    "prof.",
    "vs.",
    "st.",
    "jr.",
    "sr.",
    "no.",
    "approx.",
}

SENTENCE_END_PATTERN = re.compile(r"[.!?]+[\"')\]]*(?=\s|$)|[。！？]+")


def sentence_split(text: str) -> List[str]:
    """Split text into sentences.

    A sentence ends at ., ! or ? followed by whitespace or the end of text,
    or at the CJK terminators 。！？ regardless of what follows. Periods that
    close a known abbreviation (e.g., Mr.) do not end a sentence.

    Example:
        >>> sentence_split("Hi Mr. Smith! How are you? Fine.")
        ['Hi Mr. Smith!', 'How are you?', 'Fine.']
    """
    sentences = []
    start = 0

    for match in SENTENCE_END_PATTERN.finditer(text):
        candidate = text[start:match.end()]
        words = candidate.split()
        if words and words[-1].lower() in ABBREVIATIONS:
            continue

        sentence = candidate.strip()
        if sentence:
            sentences.append(sentence)
        start = match.end()

    tail = text[start:].strip()
    if tail:
        sentences.append(tail)

    return sentences


def ngrams(tokens: Sequence[str], n: int) -> List[Tuple[str, ...]]:
    """Return contiguous n-grams.

    Raises:
        ValueError: If n < 1

    Example:
        >>> ngrams(["a", "b", "c"], 2)
        [('a', 'b'), ('b', 'c')]
    """
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    return list(zip(*(tokens[i:] for i in range(n))))
