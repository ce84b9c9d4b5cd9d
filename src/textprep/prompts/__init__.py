"""Static prompt text.

- curriculum_prompts.py: request for a Python/NLP curriculum table
"""

from textprep.prompts.curriculum_prompts import (
    CURRICULUM_COLUMNS,
    SYSTEM_PROMPT,
    USER_PROMPT_TEMPLATE,
    build_curriculum_prompt,
)

__all__ = [
    "CURRICULUM_COLUMNS",
    "SYSTEM_PROMPT",
    "USER_PROMPT_TEMPLATE",
    "build_curriculum_prompt",
]
