"""Parser for Markdown curriculum tables.

A chat model answering the curriculum prompt returns a pipe table:

    | Topic | Why it matters | Key sub-skills/APIs | Mini exercise | Estimated study time |
    |-------|----------------|---------------------|---------------|----------------------|
    | Unicode normalization | ... | unicodedata.normalize, str.casefold | ... | 1-2 hours |

This module locates that table in the surrounding prose and turns each row
into a CurriculumTopic.
"""

import logging
import re
from typing import List, Optional

from textprep.exceptions import CurriculumTableError
from textprep.models.curriculum import Curriculum, CurriculumTopic
from textprep.prompts.curriculum_prompts import CURRICULUM_COLUMNS

logger = logging.getLogger(__name__)

CELL_SPLIT_PATTERN = re.compile(r"(?<!\\)\|")
SEPARATOR_CELL_PATTERN = re.compile(r"^:?-+:?$")
SKILL_SPLIT_PATTERN = re.compile(r"[,;]")

STUDY_TIME_PATTERN = re.compile(
    r"(\d+(?:\.\d+)?)"
    r"(?:\s*(?:-|–|to)\s*(\d+(?:\.\d+)?))?"
    r"\s*(hours?|hrs?|h|minutes?|mins?|m|days?|d|weeks?|wks?|w)\b",
    re.IGNORECASE,
)

# Hours per unit; a study day is 5 hours, a study week is 7 such days
UNIT_HOURS = {
    "h": 1.0,
    "m": 1.0 / 60,
    "d": 5.0,
    "w": 35.0,
}


# ============================================================================
# CELL HELPERS
# ============================================================================


def split_table_row(line: str) -> List[str]:
    """Split a Markdown table row into stripped cells.

    Escaped pipes stay inside their cell.

    Example:
        >>> split_table_row("| Regex | re.sub, re.findall |")
        ['Regex', 're.sub, re.findall']
    """
    inner = line.strip()
    if inner.startswith("|"):
        inner = inner[1:]
    if inner.endswith("|") and not inner.endswith("\\|"):
        inner = inner[:-1]

    return [cell.strip().replace("\\|", "|") for cell in CELL_SPLIT_PATTERN.split(inner)]


def _normalize_header(cell: str) -> str:
    return re.sub(r"[\s*_`]", "", cell.lower())


def _strip_markup(cell: str) -> str:
    """Remove bold/italic/code markers around a cell value."""
    return re.sub(r"(\*\*|__|`)", "", cell).strip()


def _is_separator_row(cells: List[str]) -> bool:
    return bool(cells) and all(SEPARATOR_CELL_PATTERN.match(cell.replace(" ", "")) for cell in cells)


def parse_study_time(text: str) -> Optional[float]:
    """Convert a study-time estimate to hours.

    Ranges resolve to their midpoint. Days count as 5 study hours and weeks
    as 7 study days.

    Args:
        text: Estimate as written (e.g., "2-3 hours", "45 min", "1 week")

    Returns:
        Hours rounded to 2 decimals, or None if the text has no number with a unit

    Example:
        >>> parse_study_time("2-3 hours")
        2.5
        >>> parse_study_time("45 min")
        0.75
        >>> parse_study_time("a while") is None
        True
    """
    if not text:
        return None

    match = STUDY_TIME_PATTERN.search(text)
    if not match:
        return None

    low = float(match.group(1))
    high = float(match.group(2)) if match.group(2) else low
    unit = match.group(3).lower()[0]

    return round((low + high) / 2 * UNIT_HOURS[unit], 2)


# ============================================================================
# TABLE PARSER
# ============================================================================


def _find_table_start(lines: List[str]) -> int:
    expected = [_normalize_header(column) for column in CURRICULUM_COLUMNS]

    for i, line in enumerate(lines[:-1]):
        if not line.strip().startswith("|"):
            continue
        header = [_normalize_header(_strip_markup(cell)) for cell in split_table_row(line)]
        if header == expected and _is_separator_row(split_table_row(lines[i + 1])):
            return i

    raise CurriculumTableError(
        f"No curriculum table found. Expected columns: {' | '.join(CURRICULUM_COLUMNS)}"
    )


def parse_curriculum_table(markdown: str) -> Curriculum:
    """Parse the first curriculum table found in Markdown text.

    Args:
        markdown: Markdown text containing a curriculum table

    Returns:
        Curriculum with one topic per data row

    Raises:
        CurriculumTableError: If no matching table exists or a row has the
            wrong number of cells
    """
    lines = markdown.splitlines()
    start = _find_table_start(lines)

    topics = []
    for row_number, line in enumerate(lines[start + 2:], start=1):
        if not line.strip().startswith("|"):
            break

        cells = [_strip_markup(cell) for cell in split_table_row(line)]

        if not any(cells):
            logger.warning(f"Row {row_number} is empty, skipping")
            continue

        if len(cells) != len(CURRICULUM_COLUMNS):
            raise CurriculumTableError(
                f"Row {row_number} has {len(cells)} cells, expected {len(CURRICULUM_COLUMNS)}: {line.strip()}"
            )

        topic, why, skills, exercise, study_time = cells
        if not topic:
            raise CurriculumTableError(f"Row {row_number} has an empty Topic cell")

        study_hours = parse_study_time(study_time)
        if study_time and study_hours is None:
            logger.warning(f"Row {row_number}: could not parse study time '{study_time}'")

        topics.append(
            CurriculumTopic(
                topic=topic,
                why_it_matters=why,
                key_skills=[s.strip() for s in SKILL_SPLIT_PATTERN.split(skills) if s.strip()],
                mini_exercise=exercise,
                estimated_study_time=study_time,
                study_hours=study_hours,
            )
        )

    logger.info(f"Parsed {len(topics)} curriculum topics")

    return Curriculum(topics=topics)
