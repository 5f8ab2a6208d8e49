"""Tests for printed card number parsing."""

import pytest

from pokido.resolve.numbers import CARD_NUMBER_PATTERN, local_number, parse_card_number


class TestParseCardNumber:
    """Test local/total extraction."""

    def test_local_and_total(self):
        """Test the plain local/total form."""
        assert parse_card_number("132/214") == (132, 214)

    def test_leading_zeros_tolerated(self):
        """Test that zero padding is stripped from both parts."""
        assert parse_card_number("099/214") == (99, 214)
        assert parse_card_number("004/102") == (4, 102)

    def test_valid_patterns(self):
        """Test formats seen on cards and from the vision model."""
        test_cases = [
            ("25/102", 25, 102),
            ("  25 / 102  ", 25, 102),
            ("Card 25/102 Rare", 25, 102),
            ("1/1", 1, 1),
            ("#58/102", 58, 102),
        ]

        for text, expected_local, expected_total in test_cases:
            assert parse_card_number(text) == (expected_local, expected_total), text

    def test_number_without_total(self):
        """Test that a bare number yields no set size."""
        assert parse_card_number("25") == (25, None)
        assert parse_card_number("025") == (25, None)
        assert parse_card_number("SV025") == (25, None)

    @pytest.mark.parametrize("text", [None, "", "n/a", "unknown"])
    def test_unreadable(self, text):
        """Test inputs with no digits at all."""
        assert parse_card_number(text) == (None, None)

    def test_pattern_groups(self):
        """Test the compiled pattern exposes both groups."""
        match = CARD_NUMBER_PATTERN.search("number 12 / 159")
        assert match.group(1) == "12"
        assert match.group(2) == "159"


class TestLocalNumber:
    """Test numeric value of catalog local ids."""

    def test_numeric_ids(self):
        assert local_number("25") == 25
        assert local_number("025") == 25
        assert local_number(" 7 ") == 7

    def test_non_numeric_ids(self):
        """Test sub-set ids never get a number."""
        assert local_number("TG05") is None
        assert local_number("SV001") is None
        assert local_number(None) is None
        assert local_number("") is None
