"""Command-line entry points (textprep-clean, textprep-tokenize, textprep-curriculum)."""
