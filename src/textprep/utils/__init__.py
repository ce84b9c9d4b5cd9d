"""
Shared utilities for textprep.

This package contains reusable components used by the library and the CLIs:
- file_io.py: text/JSON/JSONL/TSV/CSV/Markdown reading and writing
- language_utils.py: script detection
- logging_config.py: loguru sinks, stdlib interception, stage timing
"""

__all__ = [
    "file_io",
    "language_utils",
    "logging_config",
]
