"""Parsers for model-generated Markdown.

This module provides the curriculum table parser, which turns the Markdown
table returned for the curriculum prompt into typed records.
"""

from textprep.parsers.curriculum_table import (
    parse_curriculum_table,
    parse_study_time,
    split_table_row,
)

__all__ = [
    "parse_curriculum_table",
    "parse_study_time",
    "split_table_row",
]
