"""Unit tests for the curriculum prompt templates."""

import pytest

from textprep.prompts.curriculum_prompts import (
    CURRICULUM_COLUMNS,
    SYSTEM_PROMPT,
    build_curriculum_prompt,
)


class TestBuildCurriculumPrompt:
    """Tests for prompt construction."""

    def test_fills_template(self):
        prompt = build_curriculum_prompt("Python regex for NLP", level="intermediate", num_topics=8)

        assert "**Python regex for NLP**" in prompt
        assert "**Learner level**: intermediate" in prompt
        assert "**Number of topics**: 8" in prompt
        assert "8 rows in total" in prompt

    def test_lists_columns_in_order(self):
        prompt = build_curriculum_prompt("text cleaning")
        assert " | ".join(CURRICULUM_COLUMNS) in prompt

    def test_focus_is_stripped(self):
        assert "**text cleaning**" in build_curriculum_prompt("  text cleaning  ")

    def test_defaults(self):
        prompt = build_curriculum_prompt("text cleaning")
        assert "**Learner level**: beginner" in prompt
        assert "**Number of topics**: 10" in prompt

    def test_no_unfilled_placeholders(self):
        prompt = build_curriculum_prompt("text cleaning")
        assert "{" not in prompt
        assert "}" not in prompt

    @pytest.mark.parametrize("num_topics", [0, 51, -1])
    def test_num_topics_out_of_range(self, num_topics):
        with pytest.raises(ValueError, match="num_topics"):
            build_curriculum_prompt("text cleaning", num_topics=num_topics)

    @pytest.mark.parametrize("num_topics", [1, 50])
    def test_num_topics_bounds(self, num_topics):
        assert f"**Number of topics**: {num_topics}" in build_curriculum_prompt(
            "text cleaning", num_topics=num_topics
        )

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="Unsupported level"):
            build_curriculum_prompt("text cleaning", level="expert")

    @pytest.mark.parametrize("focus", ["", "   "])
    def test_blank_focus(self, focus):
        with pytest.raises(ValueError, match="focus"):
            build_curriculum_prompt(focus)


class TestSystemPrompt:
    """Tests for the system prompt."""

    def test_requests_markdown_table(self):
        assert "Markdown table" in SYSTEM_PROMPT
