"""Utility functions for EchoListen."""

from .file_utils import ensure_directory, safe_filename
from .text_utils import clean_word, split_tokens, word_key
from .time_utils import DAY_MS, days_to_ms, format_clock, now_ms

__all__ = [
    "ensure_directory",
    "safe_filename",
    "clean_word",
    "split_tokens",
    "word_key",
    "DAY_MS",
    "days_to_ms",
    "format_clock",
    "now_ms",
]
