"""Character inventory validation.

Checks that a text only uses an allowed character inventory, e.g. the
characters of a learner's vocabulary list or a model's input alphabet.
"""

import logging
from typing import Iterable, List, Tuple

logger = logging.getLogger(__name__)


def validate_allowed_characters(
    text: str,
    allowed: Iterable[str],
    ignore_whitespace: bool = True,
) -> Tuple[bool, List[str]]:
    """Validate that text only contains characters from an allowed set.

    Args:
        text: Text to validate
        allowed: Allowed characters (any iterable of strings; multi-character
            strings contribute each of their characters)
        ignore_whitespace: Do not report whitespace (default: True)

    Returns:
        Tuple of (is_valid, offending_characters)
        - offending_characters is sorted

    Example:
        >>> validate_allowed_characters("abc!", "abc")
        (False, ['!'])
    """
    allowed_chars = set()
    for item in allowed:
        allowed_chars.update(item)

    offending = {
        char
        for char in text
        if char not in allowed_chars and not (ignore_whitespace and char.isspace())
    }

    if offending:
        logger.debug(f"Found {len(offending)} characters outside the allowed set: {sorted(offending)}")
        return False, sorted(offending)

    return True, []
