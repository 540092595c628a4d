"""Text processing utilities for transcript tokens."""

import re

# Punctuation stripped from a clicked token before lookup or comparison
_PUNCTUATION_PATTERN = re.compile(r"[.,/#!$%^&*;:{}=\-_`~()?\"'“”‘’…]")


def clean_word(token: str) -> str:
    """Strip punctuation and lowercase a transcript token.

    Args:
        token: Raw token as it appears in segment text

    Returns:
        Normalized word, or empty string if nothing remains

    Example:
        >>> clean_word("Exactly.")
        'exactly'
    """
    return _PUNCTUATION_PATTERN.sub("", token).strip().lower()


def split_tokens(text: str) -> list[str]:
    """Split segment text into whitespace-delimited tokens."""
    return text.split()


def word_key(word: str) -> str:
    """Return the case-insensitive key used for saved vocabulary."""
    return word.lower()
