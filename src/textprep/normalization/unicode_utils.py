"""Unicode normalization and character translation utilities.

Provides the low-level string operations the cleaning pipeline is built from:
- Normalization forms (NFC/NFD/NFKC/NFKD) and accent stripping
- Fixed translation tables for typographic punctuation and exotic whitespace
- Emoji detection based on Unicode category and block ranges
- Encoding/decoding under an explicit error policy
- Traditional/Simplified Chinese conversion (OpenCC)
"""

import logging
import unicodedata
from functools import lru_cache
from typing import Dict, List, Optional, Union

import opencc

from textprep.exceptions import UnsupportedNormalizationError
from textprep.models.cleaning import ErrorPolicy, NormalizationForm

logger = logging.getLogger(__name__)


# ============================================================================
# NORMALIZATION
# ============================================================================


def normalize_unicode(
    text: str, form: Union[str, NormalizationForm] = NormalizationForm.NFKC
) -> str:
    """Apply a Unicode normalization form to text.

    NFKC is the usual choice for NLP: it folds compatibility characters
    (full-width letters, ligatures, superscripts) into their plain forms.

    Args:
        text: Text to normalize
        form: One of NFC, NFD, NFKC, NFKD (default: NFKC)

    Returns:
        Normalized text

    Raises:
        UnsupportedNormalizationError: If form is not a known normalization form

    Example:
        >>> normalize_unicode("ｆｕｌｌ ｗｉｄｔｈ ﬁ")
        'full width fi'
    """
    if not isinstance(form, NormalizationForm):
        try:
            form = NormalizationForm(str(form).upper())
        except ValueError:
            raise UnsupportedNormalizationError(
                f"Unsupported normalization form: '{form}'. "
                f"Supported: {', '.join(f.value for f in NormalizationForm)}"
            ) from None

    return unicodedata.normalize(form.value, text)


def strip_accents(text: str) -> str:
    """Remove combining marks (accents) from text.

    Example:
        >>> strip_accents("café crème brûlée")
        'cafe creme brulee'
    """
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(char for char in decomposed if unicodedata.category(char) != "Mn")
    return unicodedata.normalize("NFC", stripped)


# ============================================================================
# TRANSLATION TABLES
# ============================================================================

# Typographic punctuation -> ASCII
PUNCTUATION_TABLE: Dict[int, Optional[str]] = str.maketrans(
    {
        "‘": "'",  # left single quote
        "’": "'",  # right single quote / apostrophe
        "‚": "'",
        "‛": "'",
        "′": "'",  # prime
        "“": '"',  # left double quote
        "”": '"',  # right double quote
        "„": '"',
        "‟": '"',
        "″": '"',  # double prime
        "«": '"',  # guillemets
        "»": '"',
        "‐": "-",  # hyphen
        "‑": "-",  # non-breaking hyphen
        "‒": "-",  # figure dash
        "–": "-",  # en dash
        "—": "-",  # em dash
        "−": "-",  # minus sign
        "…": "...",  # ellipsis
    }
)

ZERO_WIDTH_JOINER = chr(0x200D)

# Exotic spaces -> " ", invisible separators -> removed.
# U+200D (zero-width joiner) is left alone, emoji sequences depend on it.
WHITESPACE_TABLE: Dict[int, Optional[str]] = str.maketrans(
    {
        chr(0x00A0): " ",  # no-break space
        chr(0x1680): " ",  # ogham space mark
        **{chr(code_point): " " for code_point in range(0x2000, 0x200B)},  # en quad .. hair space
        chr(0x202F): " ",  # narrow no-break space
        chr(0x205F): " ",  # medium mathematical space
        chr(0x3000): " ",  # ideographic space
        chr(0x200B): None,  # zero-width space
        chr(0x200C): None,  # zero-width non-joiner
        chr(0x2060): None,  # word joiner
        chr(0xFEFF): None,  # BOM / zero-width no-break space
    }
)

DEFAULT_TRANSLATION_TABLES: List[Dict[int, Optional[str]]] = [
    PUNCTUATION_TABLE,
    WHITESPACE_TABLE,
]


def translate_characters(
    text: str,
    tables: Optional[List[Dict[int, Optional[str]]]] = None,
) -> str:
    """Apply character translation tables in order.

    Args:
        text: Text to translate
        tables: Tables built with str.maketrans (default: punctuation then whitespace)

    Returns:
        Translated text

    Example:
        >>> translate_characters("“Hi” — it’s fine…")
        '"Hi" - it\\'s fine...'
    """
    if tables is None:
        tables = DEFAULT_TRANSLATION_TABLES

    for table in tables:
        text = text.translate(table)
    return text


def remove_control_characters(text: str) -> str:
    """Drop control (Cc) and format (Cf) characters.

    Newlines, carriage returns, tabs and the zero-width joiner are kept.
    """
    keep = {"\n", "\r", "\t", ZERO_WIDTH_JOINER}
    return "".join(
        char
        for char in text
        if char in keep or unicodedata.category(char) not in ("Cc", "Cf")
    )


# ============================================================================
# EMOJI
# ============================================================================


# Characters that only glue emoji together; removed together with their emoji
EMOJI_COMPONENTS = {
    ZERO_WIDTH_JOINER,
    chr(0xFE0E),  # text presentation selector
    chr(0xFE0F),  # emoji presentation selector
    chr(0x20E3),  # combining enclosing keycap
}

# Blocks holding pictographic emoji
EMOJI_RANGES = [
    (0x1F000, 0x1FAFF),  # mahjong .. symbols and pictographs extended-A
    (0x2600, 0x27BF),  # misc symbols, dingbats
    (0x2300, 0x23FF),  # misc technical (watch, hourglass)
    (0x2B00, 0x2BFF),  # misc symbols and arrows (star, circles)
    (0x2190, 0x21FF),  # arrows
    (0x3030, 0x303D),  # wavy dash, part alternation mark
    (0x3297, 0x3299),  # circled ideographs
]


def is_emoji(char: str) -> bool:
    """Check whether a single character is a pictographic emoji.

    A character counts when it is a symbol (category So, or Sk for the skin
    tone modifiers) inside one of the emoji blocks. Letters and digits in
    those blocks are never emoji.

    Example:
        >>> is_emoji("😂"), is_emoji("a"), is_emoji("™")
        (True, False, False)
    """
    if len(char) != 1:
        return False

    code_point = ord(char)
    if not any(start <= code_point <= end for start, end in EMOJI_RANGES):
        return False

    return unicodedata.category(char) in ("So", "Sk")


def remove_emoji(text: str) -> str:
    """Remove emoji and the joiners/selectors that belong to them.

    Joiners and variation selectors are only removed when they touch an emoji
    or another emoji component, so a zero-width joiner inside Indic script
    survives.

    Example:
        >>> remove_emoji("so funny 😂😂 👍🏽 done")
        'so funny   done'
    """
    chars = list(text)
    kept = []

    def _is_emoji_part(index: int) -> bool:
        if index < 0 or index >= len(chars):
            return False
        return is_emoji(chars[index]) or chars[index] in EMOJI_COMPONENTS

    for i, char in enumerate(chars):
        if is_emoji(char):
            continue
        if char in EMOJI_COMPONENTS and (_is_emoji_part(i - 1) or _is_emoji_part(i + 1)):
            continue
        kept.append(char)

    return "".join(kept)


# ============================================================================
# ENCODING
# ============================================================================


def _resolve_error_policy(errors: Union[str, ErrorPolicy]) -> ErrorPolicy:
    try:
        return ErrorPolicy(errors.value if isinstance(errors, ErrorPolicy) else errors)
    except ValueError:
        raise ValueError(
            f"Unsupported error policy: '{errors}'. "
            f"Supported: {', '.join(p.value for p in ErrorPolicy)}"
        ) from None


def encode_text(
    text: str,
    encoding: str = "utf-8",
    errors: Union[str, ErrorPolicy] = ErrorPolicy.STRICT,
) -> bytes:
    """Encode text to bytes under an explicit error policy.

    Args:
        text: Text to encode
        encoding: Target codec (default: utf-8)
        errors: Error policy (strict, ignore, replace, backslashreplace,
            xmlcharrefreplace, surrogateescape)

    Returns:
        Encoded bytes

    Raises:
        ValueError: If the error policy is unknown
        UnicodeEncodeError: If errors is strict and a character is unmappable

    Example:
        >>> encode_text("naïve ☕", "ascii", errors="replace")
        b'na?ve ?'
    """
    policy = _resolve_error_policy(errors)
    return text.encode(encoding, errors=policy.value)


def decode_bytes(
    data: bytes,
    encoding: str = "utf-8",
    errors: Union[str, ErrorPolicy] = ErrorPolicy.STRICT,
) -> str:
    """Decode bytes to text under an explicit error policy.

    Raises:
        ValueError: If the error policy is unknown or only valid for encoding
        UnicodeDecodeError: If errors is strict and the bytes are invalid
    """
    policy = _resolve_error_policy(errors)
    if policy is ErrorPolicy.XMLCHARREFREPLACE:
        raise ValueError("xmlcharrefreplace is only supported when encoding")
    return data.decode(encoding, errors=policy.value)


# ============================================================================
# CHINESE SCRIPT CONVERSION
# ============================================================================

CHINESE_CONVERSIONS = {
    "t2s": "Traditional to Simplified",
    "s2t": "Simplified to Traditional",
}


@lru_cache(maxsize=None)
def _get_converter(conversion: str) -> opencc.OpenCC:
    return opencc.OpenCC(f"{conversion}.json")


def convert_chinese_script(text: str, conversion: str = "t2s") -> str:
    """Convert between Traditional and Simplified Chinese using OpenCC.

    Args:
        text: Chinese text
        conversion: 't2s' (Traditional to Simplified) or 's2t'

    Returns:
        Converted text

    Raises:
        UnsupportedNormalizationError: If conversion is not 't2s' or 's2t'

    Example:
        >>> convert_chinese_script("學習漢語")
        '学习汉语'
    """
    if conversion not in CHINESE_CONVERSIONS:
        raise UnsupportedNormalizationError(
            f"Unsupported Chinese conversion: '{conversion}'. "
            f"Supported: {', '.join(CHINESE_CONVERSIONS)}"
        )

    if not text:
        return text

    return _get_converter(conversion).convert(text)
