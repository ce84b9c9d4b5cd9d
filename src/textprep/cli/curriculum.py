"""CLI for the Python/NLP curriculum prompt and its Markdown answer.

Subcommands:
    prompt  Print the system and user prompt to paste into a chat model
    parse   Convert a Markdown answer containing the curriculum table to JSON

Usage:
    python -m textprep.cli.curriculum prompt \\
        --focus "Python strings and regex for NLP" --level beginner --topics 8

    python -m textprep.cli.curriculum parse \\
        --input answer.md --output curriculum.json
"""

import argparse
import logging
import sys
from pathlib import Path

from textprep.exceptions import CurriculumTableError
from textprep.parsers.curriculum_table import parse_curriculum_table
from textprep.prompts.curriculum_prompts import LEVELS, SYSTEM_PROMPT, build_curriculum_prompt
from textprep.utils.file_io import read_markdown, write_csv, write_json
from textprep.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Curriculum prompt and table tools")
    parser.add_argument("--log-level", default="INFO", help="Log level (default: INFO)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    prompt_parser = subparsers.add_parser("prompt", help="Print the curriculum prompt")
    prompt_parser.add_argument(
        "--focus",
        default="Python strings, regular expressions and text cleaning for NLP",
        help="Subject of the curriculum",
    )
    prompt_parser.add_argument("--level", default="beginner", choices=LEVELS, help="Learner level")
    prompt_parser.add_argument("--topics", type=int, default=10, help="Number of topics (1-50)")
    prompt_parser.add_argument(
        "--no-system", action="store_true", help="Print only the user prompt"
    )

    parse_parser = subparsers.add_parser("parse", help="Parse a Markdown curriculum table")
    parse_parser.add_argument("--input", required=True, help="Markdown file with the table")
    parse_parser.add_argument(
        "--output", help="Output .json or .csv (default: <input>.json)"
    )

    return parser.parse_args(argv)


def run_prompt(args) -> None:
    prompt = build_curriculum_prompt(args.focus, level=args.level, num_topics=args.topics)
    if not args.no_system:
        print(SYSTEM_PROMPT)
    print(prompt)


def run_parse(args) -> Path:
    input_path = Path(args.input)
    output_path = Path(args.output) if args.output else input_path.with_suffix(".json")

    curriculum = parse_curriculum_table(read_markdown(input_path))

    if output_path.suffix.lower() == ".csv":
        write_csv(curriculum.to_rows(), output_path)
    else:
        write_json(curriculum.model_dump(mode="json"), output_path)

    logger.info(
        f"✓ {len(curriculum.topics)} topics, "
        f"{curriculum.total_study_hours()} estimated study hours -> {output_path}"
    )
    return output_path


def main(argv=None):
    """Main entry point for the curriculum CLI."""
    args = parse_args(argv)

    setup_logging(log_level=args.log_level.upper())

    try:
        if args.command == "prompt":
            run_prompt(args)
        else:
            run_parse(args)
    except (FileNotFoundError, CurriculumTableError, ValueError) as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
