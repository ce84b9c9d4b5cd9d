"""Exceptions raised by textprep."""


class TextPrepError(Exception):
    """Base class for textprep errors."""
    pass


class UnsupportedNormalizationError(TextPrepError, ValueError):
    """Raised when a Unicode normalization form or script conversion is unknown."""
    pass


class CurriculumTableError(TextPrepError, ValueError):
    """Raised when a curriculum Markdown table is missing or malformed."""
    pass
