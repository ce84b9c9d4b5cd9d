"""File I/O utilities for reading/writing text corpora.

Supports plain text (one record per line), JSON, JSONL, CSV/TSV and markdown.
Text reads and writes go through an explicit encoding and error policy.

Writers never leave a partial output behind: data goes to ``<name>.tmp`` next
to the target and is moved into place with ``os.replace`` once complete.
"""

import csv
import json
import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

from textprep.constants import DEFAULT_ENCODING, DEFAULT_ENCODING_ERRORS

logger = logging.getLogger(__name__)

BOM = chr(0xFEFF)


@contextmanager
def atomic_open(
    file_path: Union[str, Path],
    encoding: str = "utf-8",
    errors: str = "strict",
    newline: Optional[str] = None,
):
    """Open a temp file for writing and replace ``file_path`` with it on success.

    Creates parent directories if they don't exist. On any error the temp
    file is removed and an existing ``file_path`` is left untouched.
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = file_path.with_name(f"{file_path.name}.tmp")

    try:
        with open(temp_path, "w", encoding=encoding, errors=errors, newline=newline) as f:
            yield f
        os.replace(temp_path, file_path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise


# ============================================================================
# Plain Text Functions
# ============================================================================


def read_text_lines(
    file_path: Union[str, Path],
    encoding: str = DEFAULT_ENCODING,
    errors: str = DEFAULT_ENCODING_ERRORS,
    skip_blank: bool = False,
) -> List[str]:
    """Read a text file and return its lines without trailing newlines.

    A leading UTF-8 BOM is dropped.

    Args:
        file_path: Path to text file
        encoding: Codec used to decode the file (default: utf-8)
        errors: Decoding error policy (default: strict)
        skip_blank: Drop lines that are empty after stripping (default: False)

    Returns:
        List of lines

    Raises:
        FileNotFoundError: If file doesn't exist
        UnicodeDecodeError: If errors is 'strict' and the file is not valid in encoding
    """
    file_path = Path(file_path)
    logger.debug(f"Reading text from {file_path} (encoding={encoding}, errors={errors})")

    with open(file_path, "r", encoding=encoding, errors=errors) as f:
        lines = f.read().splitlines()

    if lines and lines[0].startswith(BOM):
        lines[0] = lines[0][1:]

    if skip_blank:
        lines = [line for line in lines if line.strip()]

    logger.info(f"Read {len(lines)} lines from {file_path}")
    return lines


def write_text_lines(
    lines: Iterable[str],
    file_path: Union[str, Path],
    encoding: str = DEFAULT_ENCODING,
    errors: str = DEFAULT_ENCODING_ERRORS,
) -> None:
    """Write lines to a text file, one per line.

    Use the same ``errors`` policy the text was read with so that
    ``surrogateescape`` restores undecodable bytes unchanged.

    Raises:
        UnicodeEncodeError: If errors is 'strict' and a line cannot be encoded
    """
    file_path = Path(file_path)

    count = 0
    with atomic_open(file_path, encoding=encoding, errors=errors, newline="\n") as f:
        for line in lines:
            f.write(f"{line}\n")
            count += 1

    logger.info(f"Wrote {count} lines to {file_path}")


# ============================================================================
# JSON Functions
# ============================================================================


def write_json(
    data: Union[Dict[str, Any], List[Any]],
    file_path: Union[str, Path],
    indent: int = 2,
    ensure_ascii: bool = False,
) -> None:
    """Write data to JSON file with pretty printing.

    Args:
        data: Data to write (dict or list)
        file_path: Path to output JSON file
        indent: Number of spaces for indentation (default: 2)
        ensure_ascii: If False, non-ASCII characters are preserved (default: False)
    """
    file_path = Path(file_path)
    logger.debug(f"Writing JSON to {file_path}")

    with atomic_open(file_path) as f:
        json.dump(data, f, indent=indent, ensure_ascii=ensure_ascii)

    logger.info(f"Wrote JSON to {file_path}")


def iter_jsonl(file_path: Union[str, Path]) -> Iterator[Dict[str, Any]]:
    """Yield one parsed object per non-blank line of a JSONL file.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If a line is not valid JSON (message includes the line number)
    """
    file_path = Path(file_path)

    with open(file_path, "r", encoding="utf-8") as f:
        for line_number, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                yield json.loads(line)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON on line {line_number} of {file_path}: {e}") from e


def read_jsonl(file_path: Union[str, Path]) -> List[Dict[str, Any]]:
    """Read a JSONL file into a list of objects."""
    records = list(iter_jsonl(file_path))
    logger.info(f"Read {len(records)} records from {file_path}")
    return records


def write_jsonl(
    records: Iterable[Dict[str, Any]],
    file_path: Union[str, Path],
    errors: str = "strict",
) -> None:
    """Write objects to a JSONL file, one per line.

    ``errors`` applies when encoding the UTF-8 output, e.g. ``surrogateescape``
    for text that was decoded with that policy.
    """
    file_path = Path(file_path)

    count = 0
    with atomic_open(file_path, errors=errors) as f:
        for record in records:
            f.write(json.dumps(record, ensure_ascii=False) + "\n")
            count += 1

    logger.info(f"Wrote {count} records to {file_path}")


# ============================================================================
# CSV/TSV Functions
# ============================================================================


def read_csv(
    file_path: Union[str, Path], delimiter: str = ","
) -> List[Dict[str, str]]:
    """Read CSV file and return list of dictionaries.

    Short rows get ``None`` for their missing columns.

    Args:
        file_path: Path to CSV file
        delimiter: Field delimiter (default: ',', use '\\t' for TSV)

    Returns:
        List of dictionaries, one per row (header as keys)

    Raises:
        FileNotFoundError: If file doesn't exist
    """
    file_path = Path(file_path)
    logger.debug(f"Reading CSV from {file_path} (delimiter={repr(delimiter)})")

    # utf-8-sig drops a BOM that would otherwise end up in the first header
    with open(file_path, "r", encoding="utf-8-sig", newline="") as f:
        rows = list(csv.DictReader(f, delimiter=delimiter))

    logger.info(f"Read {len(rows)} rows from {file_path}")
    return rows


def write_csv(
    data: List[Dict[str, Any]],
    file_path: Union[str, Path],
    delimiter: str = ",",
) -> None:
    """Write list of dictionaries to CSV file.

    The header is the union of all row keys in first-seen order; rows
    without a column get an empty cell.

    Args:
        data: List of dictionaries to write
        file_path: Path to output CSV file
        delimiter: Field delimiter (default: ',')

    Raises:
        ValueError: If data is empty
    """
    if not data:
        raise ValueError("Cannot write empty data to CSV")

    file_path = Path(file_path)
    logger.debug(f"Writing CSV to {file_path} (delimiter={repr(delimiter)})")

    fieldnames = list(dict.fromkeys(key for row in data for key in row))

    with atomic_open(file_path, newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames, delimiter=delimiter, restval="")
        writer.writeheader()
        writer.writerows(data)

    logger.info(f"Wrote {len(data)} rows to {file_path}")


# ============================================================================
# Markdown Functions
# ============================================================================


def read_markdown(file_path: Union[str, Path]) -> str:
    """Read markdown file and return content as string.

    Raises:
        FileNotFoundError: If file doesn't exist
    """
    file_path = Path(file_path)
    logger.debug(f"Reading markdown from {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        content = f.read()

    logger.info(f"Read {len(content)} characters from {file_path}")
    return content
