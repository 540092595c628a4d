"""Tests for text, time and file utilities."""

import pytest

from echo_listen.utils import clean_word, format_clock, safe_filename, split_tokens, word_key
from echo_listen.utils.time_utils import days_to_ms


class TestCleanWord:
    """Tests for clean_word."""

    @pytest.mark.parametrize(
        "token,expected",
        [
            ("Exactly.", "exactly"),
            ("isn't", "isnt"),
            ("“Hello,”", "hello"),
            ("(kernel)", "kernel"),
            ("...", ""),
            ("  Word  ", "word"),
        ],
    )
    def test_strips_punctuation_and_lowercases(self, token, expected):
        assert clean_word(token) == expected


class TestTokens:
    """Tests for token helpers."""

    def test_split_tokens(self):
        assert split_tokens("  In today's   session ") == ["In", "today's", "session"]

    def test_word_key(self):
        assert word_key("Kernel") == "kernel"


class TestTimeUtils:
    """Tests for time helpers."""

    @pytest.mark.parametrize(
        "seconds,expected",
        [(0, "0:00"), (5.4, "0:05"), (65, "1:05"), (600, "10:00"), (-3, "0:00")],
    )
    def test_format_clock(self, seconds, expected):
        assert format_clock(seconds) == expected

    def test_days_to_ms(self, day_ms):
        assert days_to_ms(7) == 7 * day_ms


class TestSafeFilename:
    """Tests for safe_filename."""

    def test_replaces_forbidden_characters(self):
        result = safe_filename('a/b:c*d?"e')
        assert "/" not in result
        assert ":" not in result
        assert "*" not in result

    def test_empty_name_falls_back(self):
        assert safe_filename("") == "untitled"

    def test_truncates_long_names(self):
        assert len(safe_filename("x" * 500)) <= 200
