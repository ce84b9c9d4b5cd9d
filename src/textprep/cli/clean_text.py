"""CLI for cleaning a text corpus with the textprep pipeline.

Reads a corpus, runs every record through ``TextCleaner`` and writes the result
in the same format as the input:

- ``.txt``: one record per line
- ``.jsonl``: one JSON object per line, the text is taken from ``--field``
- ``.csv`` / ``.tsv``: the text is taken from ``--column``

Usage:
    python -m textprep.cli.clean_text \\
        --input data/tweets.jsonl \\
        --output output/tweets_clean.jsonl \\
        --remove-emoji --report

Args:
    --input: Input corpus (.txt, .jsonl, .csv, .tsv)
    --output: Output path (default: <input>_clean<suffix>)
    --field / --column: Text field for JSONL / CSV input (default: text)
    --normalization-form: NFC, NFD, NFKC, NFKD (default: TEXTPREP_NORMALIZATION_FORM or NFKC)
    --max-repeat: Longest allowed run of one character (default: 2)
    --no-compress: Disable run-length compression
    --remove-hashtags / --remove-emoji / --remove-punctuation / --mask-numbers
    --keep-urls / --keep-mentions / --keep-case
    --strip-accents / --remove-control / --chinese t2s|s2t
    --encoding / --errors: Codec and error policy for .txt input and output
        (default: TEXTPREP_ENCODING / TEXTPREP_ENCODING_ERRORS, else utf-8 / strict)
    --allowed-chars: Character inventory file; records using other characters are reported
    --report: Add applied steps, removal counts and detected script to JSONL/CSV output
    --quiet: Disable the progress bar

Examples:
    # Clean one tweet per line, keep case
    python -m textprep.cli.clean_text --input tweets.txt --keep-case

    # Clean the "review" column of a TSV file and report what was removed
    python -m textprep.cli.clean_text --input reviews.tsv --column review --report
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Set

from pydantic import ValidationError
from tqdm import tqdm

from textprep.cleaners.text_cleaner import TextCleaner
from textprep.constants import DEFAULT_ENCODING, DEFAULT_ENCODING_ERRORS
from textprep.models.cleaning import CleaningConfig, ErrorPolicy
from textprep.utils.file_io import (
    read_csv,
    read_jsonl,
    read_text_lines,
    write_csv,
    write_jsonl,
    write_text_lines,
)
from textprep.utils.language_utils import detect_script
from textprep.utils.logging_config import setup_logging, stage_logger
from textprep.validators.character_validator import validate_allowed_characters

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = {".txt", ".jsonl", ".csv", ".tsv"}


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Clean a text corpus (normalize, strip URLs/mentions, compress repeats, ...)"
    )

    parser.add_argument("--input", required=True, help="Input corpus (.txt, .jsonl, .csv, .tsv)")
    parser.add_argument("--output", help="Output path (default: <input>_clean<suffix>)")
    parser.add_argument("--field", default="text", help="Text field for JSONL input (default: text)")
    parser.add_argument("--column", default="text", help="Text column for CSV/TSV input (default: text)")

    parser.add_argument(
        "--normalization-form",
        choices=["NFC", "NFD", "NFKC", "NFKD"],
        help="Unicode normalization form",
    )
    parser.add_argument("--max-repeat", type=int, help="Longest allowed run of one character")
    parser.add_argument("--no-compress", action="store_true", help="Disable run-length compression")
    parser.add_argument("--remove-hashtags", action="store_true", help="Remove #hashtags")
    parser.add_argument("--remove-emoji", action="store_true", help="Remove emoji")
    parser.add_argument("--remove-punctuation", action="store_true", help="Remove punctuation")
    parser.add_argument("--mask-numbers", action="store_true", help="Replace numbers with a placeholder")
    parser.add_argument("--keep-urls", action="store_true", help="Do not remove URLs")
    parser.add_argument("--keep-mentions", action="store_true", help="Do not remove @mentions")
    parser.add_argument("--keep-case", action="store_true", help="Do not casefold")
    parser.add_argument("--strip-accents", action="store_true", help="Remove accents")
    parser.add_argument("--remove-control", action="store_true", help="Remove control characters")
    parser.add_argument("--chinese", choices=["t2s", "s2t"], help="Convert Chinese script")

    parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help=f"Encoding of .txt input and output (default: {DEFAULT_ENCODING})",
    )
    parser.add_argument(
        "--errors",
        default=DEFAULT_ENCODING_ERRORS,
        choices=ErrorPolicy.file_policies(),
        help=f"Error policy for reading and writing .txt files (default: {DEFAULT_ENCODING_ERRORS})",
    )
    parser.add_argument(
        "--allowed-chars",
        help="File listing the allowed character inventory; report characters outside it",
    )
    parser.add_argument("--report", action="store_true", help="Include cleaning report in output")
    parser.add_argument("--quiet", action="store_true", help="Disable progress bar")
    parser.add_argument("--log-level", default="INFO", help="Log level (default: INFO)")
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON log records")

    return parser.parse_args(argv)


def build_config(args) -> CleaningConfig:
    """Translate CLI flags into a CleaningConfig (environment defaults first)."""
    flag_overrides = {
        "remove_hashtags": (args.remove_hashtags, True),
        "remove_emoji": (args.remove_emoji, True),
        "remove_punctuation": (args.remove_punctuation, True),
        "mask_numbers": (args.mask_numbers, True),
        "remove_urls": (args.keep_urls, False),
        "remove_mentions": (args.keep_mentions, False),
        "lowercase": (args.keep_case, False),
        "strip_accents": (args.strip_accents, True),
        "remove_control_characters": (args.remove_control, True),
    }
    # Only flags given on the command line override the environment defaults
    overrides: Dict[str, Any] = {
        name: value for name, (given, value) in flag_overrides.items() if given
    }
    if args.chinese:
        overrides["chinese_conversion"] = args.chinese
    if args.normalization_form:
        overrides["normalization_form"] = args.normalization_form
    if args.no_compress:
        overrides["max_repeat"] = None
    elif args.max_repeat is not None:
        overrides["max_repeat"] = args.max_repeat

    return CleaningConfig.from_env(**overrides)


def default_output_path(input_path: Path) -> Path:
    return input_path.with_name(f"{input_path.stem}_clean{input_path.suffix}")


def load_allowed_characters(path, encoding: str = DEFAULT_ENCODING) -> Set[str]:
    """Read a character inventory file (any layout, whitespace ignored)."""
    chars = set("".join(read_text_lines(path, encoding=encoding)))
    chars = {char for char in chars if not char.isspace()}
    if not chars:
        raise ValueError(f"Allowed character file is empty: {path}")
    logger.info(f"Loaded {len(chars)} allowed characters from {path}")
    return chars


def check_lines(lines: List[str], allowed: Set[str]) -> int:
    """Log the lines that use characters outside the inventory; return how many."""
    failed = [
        i for i, line in enumerate(lines, 1) if not validate_allowed_characters(line, allowed)[0]
    ]
    if failed:
        preview = ", ".join(str(i) for i in failed[:10])
        logger.warning(
            f"{len(failed)} of {len(lines)} lines use characters outside the allowed set "
            f"(lines {preview}{', ...' if len(failed) > 10 else ''})"
        )
    return len(failed)


def clean_records(
    records: List[Dict[str, Any]],
    key: str,
    cleaner: TextCleaner,
    report: bool = False,
    flat_report: bool = False,
    show_progress: bool = True,
    allowed: Optional[Set[str]] = None,
) -> List[Dict[str, Any]]:
    """Clean the ``key`` value of every record.

    Records whose value is missing or not a string are passed through
    unchanged and logged.

    Args:
        records: Parsed JSONL objects or CSV rows
        key: Field/column holding the text
        cleaner: Configured cleaner
        report: Attach applied steps, removal counts and the detected script
        flat_report: Report as flat columns (for CSV) instead of a nested object
        show_progress: Show a tqdm progress bar
        allowed: Character inventory; characters outside it are reported

    Returns:
        New list of records
    """
    cleaned_records = []
    skipped = 0
    failed = 0

    for i, record in enumerate(
        tqdm(records, desc="Cleaning", unit="record", disable=not show_progress), 1
    ):
        value = record.get(key)
        if not isinstance(value, str):
            logger.warning(f"Record {i} has no text in '{key}', passing through unchanged")
            skipped += 1
            cleaned_records.append(dict(record))
            continue

        result = cleaner.clean_with_report(value)
        updated = dict(record)
        updated[key] = result.cleaned

        disallowed = None
        if allowed is not None:
            _, disallowed = validate_allowed_characters(result.cleaned, allowed)
            failed += bool(disallowed)

        if report and flat_report:
            updated["applied_steps"] = ";".join(result.applied_steps)
            for name, count in result.removed.items():
                updated[f"removed_{name}"] = count
            updated["script"] = detect_script(result.cleaned)
            if disallowed is not None:
                updated["disallowed_chars"] = "".join(disallowed)
        elif report:
            updated["cleaning"] = {
                "applied_steps": result.applied_steps,
                "removed": result.removed,
                "script": detect_script(result.cleaned),
            }
            if disallowed is not None:
                updated["cleaning"]["disallowed_chars"] = disallowed

        cleaned_records.append(updated)

    if skipped:
        logger.warning(f"Passed through {skipped} of {len(records)} records without text")
    if failed:
        logger.warning(f"{failed} of {len(records)} records use characters outside the allowed set")

    return cleaned_records


def run(args) -> Path:
    """Clean the input corpus described by parsed args and return the output path.

    Raises:
        FileNotFoundError: If the input does not exist
        ValueError: If the format is unsupported or the CSV column is missing
    """
    input_path = Path(args.input)
    output_path = Path(args.output) if args.output else default_output_path(input_path)
    suffix = input_path.suffix.lower()

    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(
            f"Unsupported input format: '{suffix}'. Supported: {', '.join(sorted(SUPPORTED_SUFFIXES))}"
        )

    config = build_config(args)
    cleaner = TextCleaner(config)
    logger.info(f"Pipeline steps: {', '.join(cleaner.steps)}")

    allowed = None
    if args.allowed_chars:
        allowed = load_allowed_characters(args.allowed_chars, encoding=args.encoding)

    with stage_logger("clean", source=str(input_path), format=suffix) as log:
        if suffix == ".txt":
            if args.report:
                log.warning("--report is ignored for .txt input")
            lines = read_text_lines(input_path, encoding=args.encoding, errors=args.errors)
            cleaned = [
                cleaner.clean(line)
                for line in tqdm(lines, desc="Cleaning", unit="line", disable=args.quiet)
            ]
            if allowed is not None:
                check_lines(cleaned, allowed)
            # Same policy as the read, so surrogateescape restores undecodable bytes
            write_text_lines(cleaned, output_path, encoding=args.encoding, errors=args.errors)

        elif suffix == ".jsonl":
            records = read_jsonl(input_path)
            cleaned = clean_records(
                records,
                args.field,
                cleaner,
                report=args.report,
                show_progress=not args.quiet,
                allowed=allowed,
            )
            write_jsonl(cleaned, output_path)

        else:
            delimiter = "\t" if suffix == ".tsv" else ","
            rows = read_csv(input_path, delimiter=delimiter)
            if rows and args.column not in rows[0]:
                raise ValueError(
                    f"Column '{args.column}' not found. Available: {', '.join(rows[0].keys())}"
                )
            cleaned = clean_records(
                rows,
                args.column,
                cleaner,
                report=args.report,
                flat_report=True,
                show_progress=not args.quiet,
                allowed=allowed,
            )
            if not cleaned:
                raise ValueError(f"No rows found in {input_path}")
            write_csv(cleaned, output_path, delimiter=delimiter)

        log.info(f"Cleaned {len(cleaned)} records -> {output_path}")

    return output_path


def main(argv=None):
    """Main entry point for the cleaning CLI."""
    args = parse_args(argv)

    setup_logging(log_level=args.log_level.upper(), json_format=args.json_logs or None)

    logger.info("=" * 80)
    logger.info("Text Cleaning CLI")
    logger.info("=" * 80)

    try:
        output_path = run(args)
    except ValidationError as e:
        logger.error(f"Invalid cleaning configuration: {e}")
        sys.exit(1)
    except (FileNotFoundError, LookupError, ValueError) as e:
        logger.error(str(e))
        sys.exit(1)

    logger.info(f"✓ Output written: {output_path}")
    logger.info("=" * 80)


if __name__ == "__main__":
    main()
