"""CLI for tokenizing a text file line by line.

Writes JSONL with one object per input line: {"text": ..., "tokens": [...]}.

Usage:
    python -m textprep.cli.tokenize_text \\
        --input data/tweets.txt \\
        --output output/tweets_tokens.jsonl \\
        --mode social

Args:
    --input: Text file, one record per line
    --output: JSONL output (default: <input>_tokens.jsonl)
    --mode: whitespace, simple, social or sentences (default: simple)
    --clean: Run the default cleaning pipeline before tokenizing
    --lowercase: Casefold tokens (simple mode only)
    --ngrams: Also emit n-grams of this size
    --encoding / --errors: Input codec and error policy (the policy also applies to the output)
"""

import argparse
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from textprep.cleaners.text_cleaner import TextCleaner
from textprep.constants import DEFAULT_ENCODING, DEFAULT_ENCODING_ERRORS
from textprep.models.cleaning import CleaningConfig, ErrorPolicy
from textprep.tokenizers.tokenizer import (
    ngrams,
    sentence_split,
    simple_tokenize,
    social_tokenize,
    whitespace_tokenize,
)
from textprep.utils.file_io import read_text_lines, write_jsonl
from textprep.utils.logging_config import setup_logging, stage_logger

logger = logging.getLogger(__name__)

TOKENIZERS = {
    "whitespace": whitespace_tokenize,
    "simple": simple_tokenize,
    "social": social_tokenize,
    "sentences": sentence_split,
}


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Tokenize a text file line by line")

    parser.add_argument("--input", required=True, help="Text file, one record per line")
    parser.add_argument("--output", help="JSONL output (default: <input>_tokens.jsonl)")
    parser.add_argument(
        "--mode",
        default="simple",
        choices=sorted(TOKENIZERS),
        help="Tokenizer to use (default: simple)",
    )
    parser.add_argument("--clean", action="store_true", help="Clean each line before tokenizing")
    parser.add_argument("--lowercase", action="store_true", help="Casefold tokens (simple mode)")
    parser.add_argument("--ngrams", type=int, help="Also emit n-grams of this size")
    parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help=f"Input encoding (default: {DEFAULT_ENCODING})",
    )
    parser.add_argument(
        "--errors",
        default=DEFAULT_ENCODING_ERRORS,
        choices=ErrorPolicy.file_policies(),
        help=f"Error policy for reading the input and writing the JSONL (default: {DEFAULT_ENCODING_ERRORS})",
    )
    parser.add_argument("--quiet", action="store_true", help="Disable progress bar")
    parser.add_argument("--log-level", default="INFO", help="Log level (default: INFO)")

    return parser.parse_args(argv)


def tokenize_line(text: str, mode: str, lowercase: bool = False):
    if mode == "simple":
        return simple_tokenize(text, lowercase=lowercase)
    return TOKENIZERS[mode](text)


def main(argv=None):
    """Main entry point for the tokenizer CLI."""
    args = parse_args(argv)

    setup_logging(log_level=args.log_level.upper())

    if args.ngrams is not None and args.ngrams < 1:
        logger.error(f"--ngrams must be >= 1, got {args.ngrams}")
        sys.exit(1)

    input_path = Path(args.input)
    output_path = Path(args.output) if args.output else input_path.with_name(f"{input_path.stem}_tokens.jsonl")

    cleaner = TextCleaner(CleaningConfig.from_env()) if args.clean else None

    try:
        with stage_logger("tokenize", source=str(input_path), mode=args.mode):
            lines = read_text_lines(input_path, encoding=args.encoding, errors=args.errors)

            records = []
            for line in tqdm(lines, desc="Tokenizing", unit="line", disable=args.quiet):
                text = cleaner.clean(line) if cleaner else line
                record = {"text": text, "tokens": tokenize_line(text, args.mode, args.lowercase)}
                if args.ngrams:
                    record["ngrams"] = [" ".join(gram) for gram in ngrams(record["tokens"], args.ngrams)]
                records.append(record)

            write_jsonl(records, output_path, errors=args.errors)
    except (FileNotFoundError, LookupError, ValueError) as e:
        logger.error(str(e))
        sys.exit(1)

    logger.info(f"✓ Tokenized {len(records)} lines -> {output_path}")


if __name__ == "__main__":
    main()
