"""
Tests for guess parsing and comparison.
"""

import pytest

from ..session import Outcome, compare_guess, parse_guess


class TestParseGuess:
    """Tests for parse_guess."""

    @pytest.mark.parametrize(
        "line, expected",
        [
            ("42", 42),
            ("42\n", 42),
            ("  7\t\r\n", 7),
            ("+5", 5),
            ("007", 7),
            ("0", 0),
            ("4294967296", 4294967296),
        ],
    )
    def test_unsigned_integers_parse(self, line, expected):
        assert parse_guess(line) == expected

    @pytest.mark.parametrize(
        "line",
        ["", "\n", "   ", "abc", "3.5", "-4", "1 2", "q", "Q", "1e3", "0x10", "٣"],
    )
    def test_everything_else_is_rejected(self, line):
        """Non-numbers, signs, decimals and non-ASCII digits are not guesses."""
        assert parse_guess(line) is None

    def test_end_of_input_is_rejected(self):
        assert parse_guess(None) is None

    def test_overlong_digit_string_is_rejected(self):
        """Numbers past the int conversion limit count as quitting."""
        assert parse_guess("1" * 5000) is None

    def test_long_number_within_limit_parses(self):
        assert parse_guess("9" * 100) == int("9" * 100)


class TestCompareGuess:
    """Tests for compare_guess."""

    def test_all_orderings(self):
        secret = 37
        for guess in range(0, 101):
            outcome = compare_guess(guess, secret)
            if guess < secret:
                assert outcome == Outcome.TOO_SMALL
            elif guess > secret:
                assert outcome == Outcome.TOO_LARGE
            else:
                assert outcome == Outcome.CORRECT
