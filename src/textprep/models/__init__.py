"""Pydantic models shared across textprep."""

from textprep.models.cleaning import (
    CleaningConfig,
    CleaningResult,
    ErrorPolicy,
    NormalizationForm,
)
from textprep.models.curriculum import Curriculum, CurriculumTopic

__all__ = [
    "CleaningConfig",
    "CleaningResult",
    "Curriculum",
    "CurriculumTopic",
    "ErrorPolicy",
    "NormalizationForm",
]
