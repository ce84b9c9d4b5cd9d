"""Script detection utilities."""

import unicodedata
from collections import Counter

# Prefix of the Unicode character name -> script label
SCRIPT_NAME_PREFIXES = {
    "CJK": "han",
    "HIRAGANA": "kana",
    "KATAKANA": "kana",
    "HANGUL": "hangul",
    "LATIN": "latin",
    "CYRILLIC": "cyrillic",
    "ARABIC": "arabic",
}


def char_script(char: str) -> str:
    """Return the script label of a single letter, or 'other'."""
    name = unicodedata.name(char, "")
    for prefix, script in SCRIPT_NAME_PREFIXES.items():
        if name.startswith(prefix):
            return script
    return "other"


def detect_script(text: str) -> str:
    """Detect the dominant writing system among the letters of text.

    Japanese text mixing kanji and kana is reported as 'kana' as soon as any
    kana is present, since kanji alone cannot tell Chinese from Japanese.

    Args:
        text: Text to inspect

    Returns:
        One of 'han', 'kana', 'hangul', 'latin', 'cyrillic', 'arabic', 'other',
        or 'unknown' when the text contains no letters

    Example:
        >>> detect_script("学校に行きます")
        'kana'
        >>> detect_script("Bonjour à tous")
        'latin'
    """
    counts = Counter(
        char_script(char) for char in text if unicodedata.category(char).startswith("L")
    )

    if not counts:
        return "unknown"

    if counts.get("kana"):
        return "kana"

    return counts.most_common(1)[0][0]
