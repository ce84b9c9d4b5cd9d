"""Prompts for requesting a Python/NLP learning curriculum from a chat model."""

CURRICULUM_COLUMNS = [
    "Topic",
    "Why it matters",
    "Key sub-skills/APIs",
    "Mini exercise",
    "Estimated study time",
]

LEVELS = ["beginner", "intermediate", "advanced"]

SYSTEM_PROMPT = """You are an experienced Python instructor who teaches practical NLP.
Your task is to design a focused, hands-on study plan for a learner.

Key requirements:
1. **Ordering**: Topics build on each other; never use a concept before it is introduced
2. **Practicality**: Every topic names the concrete standard-library or package APIs to learn
3. **Exercises**: Each topic ends with a mini exercise that takes under 30 minutes
4. **Honest estimates**: Study time is realistic for the stated level (use hours, e.g. "2-3 hours")

Output format: A single Markdown table and nothing else.
"""

USER_PROMPT_TEMPLATE = """Create a learning curriculum for: **{focus}**

**Learner level**: {level}
**Number of topics**: {num_topics}

**Instructions**:
1. Return exactly one Markdown table with these columns, in this order:
   {columns}
2. One row per topic, {num_topics} rows in total
3. "Key sub-skills/APIs" is a comma-separated list (e.g. "str.translate, unicodedata.normalize, re.sub")
4. "Estimated study time" is a number of hours or a range (e.g. "1.5 hours", "2-3 hours")
5. Cover string handling before regular expressions, and both before tokenization and cleaning pipelines

**Example Row**:
| Unicode normalization | Visually identical strings can differ in bytes | unicodedata.normalize, str.casefold | Normalize a list of tweets and count duplicates | 1-2 hours |
"""


def build_curriculum_prompt(
    focus: str,
    level: str = "beginner",
    num_topics: int = 10,
) -> str:
    """Fill the curriculum request template.

    Args:
        focus: Subject of the curriculum (e.g., "Python strings and regex for NLP")
        level: beginner, intermediate or advanced (default: beginner)
        num_topics: Number of table rows to request, 1-50 (default: 10)

    Returns:
        User prompt text

    Raises:
        ValueError: If focus is blank, level is unknown, or num_topics is out of range
    """
    if not focus or not focus.strip():
        raise ValueError("focus must not be empty")
    if level not in LEVELS:
        raise ValueError(f"Unsupported level: '{level}'. Supported: {', '.join(LEVELS)}")
    if not 1 <= num_topics <= 50:
        raise ValueError(f"num_topics must be between 1 and 50, got {num_topics}")

    return USER_PROMPT_TEMPLATE.format(
        focus=focus.strip(),
        level=level,
        num_topics=num_topics,
        columns=" | ".join(CURRICULUM_COLUMNS),
    )
