"""Unit tests for the curriculum table parser."""

import logging
from pathlib import Path

import pytest

from textprep.exceptions import CurriculumTableError
from textprep.parsers.curriculum_table import (
    parse_curriculum_table,
    parse_study_time,
    split_table_row,
)

FIXTURE = Path(__file__).parent.parent / "fixtures" / "curriculum_answer.md"

HEADER = "| Topic | Why it matters | Key sub-skills/APIs | Mini exercise | Estimated study time |"
SEPARATOR = "|---|---|---|---|---|"


class TestSplitTableRow:
    """Tests for row splitting."""

    def test_basic_row(self):
        assert split_table_row("| Regex | re.sub, re.findall |") == ["Regex", "re.sub, re.findall"]

    def test_row_without_outer_pipes(self):
        assert split_table_row("a | b") == ["a", "b"]

    def test_escaped_pipe_stays_in_cell(self):
        assert split_table_row(r"| a \| b | c |") == ["a | b", "c"]

    def test_empty_cells(self):
        assert split_table_row("| a |  | c |") == ["a", "", "c"]


class TestParseStudyTime:
    """Tests for study time conversion."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("2 hours", 2.0),
            ("1 hr", 1.0),
            ("1.5 hours", 1.5),
            ("2-3 hours", 2.5),
            ("2 to 4 h", 3.0),
            (f"1{chr(0x2013)}2 hours", 1.5),
            ("45 min", 0.75),
            ("90 minutes", 1.5),
            ("1 day", 5.0),
            ("2 days", 10.0),
            ("1 week", 35.0),
            ("About 3 Hours", 3.0),
        ],
    )
    def test_parse(self, text, expected):
        assert parse_study_time(text) == expected

    @pytest.mark.parametrize("text", ["", "a while", "3", "a few sessions"])
    def test_unparseable(self, text):
        assert parse_study_time(text) is None


class TestParseCurriculumTable:
    """Tests for table parsing."""

    def test_logs_topic_count(self, caplog):
        """Test the topic count is part of the log message itself."""
        with caplog.at_level(logging.INFO, logger="textprep.parsers.curriculum_table"):
            parse_curriculum_table(FIXTURE.read_text(encoding="utf-8"))

        assert "Parsed 5 curriculum topics" in caplog.messages

    def test_parse_fixture(self):
        """Test the sample chat answer is parsed row by row."""
        curriculum = parse_curriculum_table(FIXTURE.read_text(encoding="utf-8"))

        assert [t.topic for t in curriculum.topics] == [
            "Python strings",
            "Unicode normalization",
            "Regular expressions",
            "Tokenization",
            "Cleaning pipelines",
        ]
        first = curriculum.topics[0]
        assert first.key_skills == ["str.split", "str.join", "f-strings", "slicing"]
        assert first.estimated_study_time == "1-2 hours"
        assert first.study_hours == 1.5

    def test_escaped_pipe_in_skills(self):
        curriculum = parse_curriculum_table(FIXTURE.read_text(encoding="utf-8"))
        assert curriculum.topics[3].key_skills == ["str.split", "re.findall", "| alternation"]

    def test_unparseable_study_time_kept_as_text(self):
        curriculum = parse_curriculum_table(FIXTURE.read_text(encoding="utf-8"))
        last = curriculum.topics[-1]
        assert last.estimated_study_time == "a few sessions"
        assert last.study_hours is None

    def test_total_study_hours(self):
        curriculum = parse_curriculum_table(FIXTURE.read_text(encoding="utf-8"))
        assert curriculum.total_study_hours() == 8.75

    def test_table_ends_at_first_non_row(self):
        markdown = "\n".join(
            [HEADER, SEPARATOR, "| A | b | c | d | 1 hour |", "", "| B | b | c | d | 1 hour |"]
        )
        assert len(parse_curriculum_table(markdown).topics) == 1

    def test_empty_row_skipped(self):
        markdown = "\n".join([HEADER, SEPARATOR, "| | | | | |", "| A | b | c | d | 1 hour |"])
        assert [t.topic for t in parse_curriculum_table(markdown).topics] == ["A"]

    def test_header_case_and_markup_ignored(self):
        header = "| **topic** | why IT matters | key sub-skills/apis | Mini Exercise | estimated study time |"
        markdown = "\n".join([header, SEPARATOR, "| A | b | c | d | 2 hours |"])
        assert parse_curriculum_table(markdown).topics[0].study_hours == 2.0

    def test_no_table_raises(self):
        with pytest.raises(CurriculumTableError, match="No curriculum table found"):
            parse_curriculum_table("Sorry, I cannot help with that.")

    def test_other_table_is_ignored(self):
        """Test a table with different columns does not match."""
        markdown = "| Name | Age |\n|---|---|\n| Bob | 3 |"
        with pytest.raises(CurriculumTableError):
            parse_curriculum_table(markdown)

    def test_header_without_separator_raises(self):
        with pytest.raises(CurriculumTableError):
            parse_curriculum_table(f"{HEADER}\n| A | b | c | d | 1 hour |")

    def test_wrong_cell_count_raises(self):
        markdown = "\n".join([HEADER, SEPARATOR, "| A | b | c |"])
        with pytest.raises(CurriculumTableError, match="Row 1 has 3 cells"):
            parse_curriculum_table(markdown)

    def test_empty_topic_raises(self):
        markdown = "\n".join([HEADER, SEPARATOR, "|  | b | c | d | 1 hour |"])
        with pytest.raises(CurriculumTableError, match="empty Topic"):
            parse_curriculum_table(markdown)

    def test_header_only(self):
        """Test a table with no data rows yields an empty curriculum."""
        curriculum = parse_curriculum_table(f"{HEADER}\n{SEPARATOR}")
        assert curriculum.topics == []
        assert curriculum.total_study_hours() == 0
