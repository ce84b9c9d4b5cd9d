"""Character inventory validation."""

from textprep.validators.character_validator import validate_allowed_characters

__all__ = [
    "validate_allowed_characters",
]
