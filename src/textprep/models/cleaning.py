"""Pydantic models for the cleaning pipeline configuration and results."""

import os
from enum import Enum
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator


# ============================================================================
# Enums
# ============================================================================


class NormalizationForm(str, Enum):
    """Unicode normalization form."""

    NFC = "NFC"
    NFD = "NFD"
    NFKC = "NFKC"
    NFKD = "NFKD"


class ErrorPolicy(str, Enum):
    """Codec error handler passed to str.encode / bytes.decode."""

    STRICT = "strict"
    IGNORE = "ignore"
    REPLACE = "replace"
    BACKSLASHREPLACE = "backslashreplace"
    XMLCHARREFREPLACE = "xmlcharrefreplace"
    SURROGATEESCAPE = "surrogateescape"

    @classmethod
    def file_policies(cls) -> List[str]:
        """Policies valid for both reading and writing a text file."""
        return [policy.value for policy in cls if policy is not cls.XMLCHARREFREPLACE]


# ============================================================================
# Models
# ============================================================================


class CleaningConfig(BaseModel):
    """Toggles for the text cleaning pipeline.

    The defaults reproduce clean_text_simple(): normalize, translate, drop URLs
    and mentions, compress character runs, collapse whitespace, casefold.
    """

    normalization_form: NormalizationForm = Field(
        default=NormalizationForm.NFKC, description="Unicode normalization form"
    )
    translate_characters: bool = Field(
        default=True, description="Apply the punctuation and whitespace translation tables"
    )
    remove_urls: bool = Field(default=True, description="Remove http(s):// and www. links")
    remove_mentions: bool = Field(default=True, description="Remove @mentions")
    remove_hashtags: bool = Field(default=False, description="Remove #hashtags entirely")
    max_repeat: Optional[int] = Field(
        default=2,
        ge=1,
        description="Compress runs of one character to at most this many (None disables)",
    )
    remove_emoji: bool = Field(default=False, description="Remove emoji characters")
    lowercase: bool = Field(default=True, description="Casefold the result")

    # Extra steps, off by default
    strip_accents: bool = Field(default=False, description="Remove combining accents")
    remove_control_characters: bool = Field(
        default=False, description="Remove control and format characters"
    )
    chinese_conversion: Optional[Literal["t2s", "s2t"]] = Field(
        default=None, description="Traditional/Simplified Chinese conversion"
    )
    mask_numbers: bool = Field(default=False, description="Replace digit runs with number_token")
    number_token: str = Field(default="<num>", description="Placeholder used by mask_numbers")
    remove_punctuation: bool = Field(
        default=False, description="Remove punctuation (hashtag and mention markers excepted)"
    )

    @field_validator("normalization_form", mode="before")
    @classmethod
    def upper_normalization_form(cls, value):
        if isinstance(value, str):
            return value.upper()
        return value

    @classmethod
    def from_env(cls, **overrides) -> "CleaningConfig":
        """Build a config from TEXTPREP_* environment defaults plus overrides."""
        from textprep import constants

        values = {
            "normalization_form": constants.DEFAULT_NORMALIZATION_FORM,
            "max_repeat": constants.DEFAULT_MAX_REPEAT,
            "number_token": constants.DEFAULT_NUMBER_TOKEN,
        }
        if os.getenv("TEXTPREP_REMOVE_EMOJI"):
            values["remove_emoji"] = os.getenv("TEXTPREP_REMOVE_EMOJI").lower() in ("1", "true", "yes")
        values.update(overrides)
        return cls(**values)


class CleaningResult(BaseModel):
    """Outcome of cleaning one text, with what each step removed."""

    original: str = Field(..., description="Input text")
    cleaned: str = Field(..., description="Output text")
    applied_steps: List[str] = Field(
        default_factory=list, description="Steps that changed the text, in order"
    )
    removed: Dict[str, int] = Field(
        default_factory=dict, description="Counts of removed urls, mentions, hashtags, emoji"
    )

    @property
    def changed(self) -> bool:
        return self.original != self.cleaned
