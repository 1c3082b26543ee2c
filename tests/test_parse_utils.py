"""
Tests for parsing helpers: amounts, cards, timestamps and positions.
"""

import pytest

from handreplay.parse.positions import assign_positions
from handreplay.parse.schemas import Card
from handreplay.parse.utils import (
    clean_amount, clean_european_amount, extract_timestamp, normalize_player_name, parse_cards,
)


class TestAmounts:

    def test_clean_amount(self):
        assert clean_amount("$1,234.56") == 1234.56
        assert clean_amount("1,500") == 1500
        assert clean_amount("1234,56") == 1234.56
        assert clean_amount("€10 EUR") == 10
        assert clean_amount("(6100)") == 6100
        assert clean_amount("2500 chips") == 2500
        assert clean_amount("abc") is None
        assert clean_amount("") is None

    def test_clean_european_amount(self):
        assert clean_european_amount("10.000") == 10000
        assert clean_european_amount("1.234,56") == 1234.56
        assert clean_european_amount("$0.02") == 0.02
        assert clean_european_amount("1.000.000") == 1000000


class TestCards:

    def test_parse_cards(self):
        expected = [Card(rank='A', suit='h'), Card(rank='K', suit='d')]
        assert parse_cards("Ah Kd") == expected
        assert parse_cards("[ Ah, Kd ]") == expected
        assert parse_cards("A♥ K♦") == expected
        assert parse_cards("10h Kd")[0] == Card(rank='T', suit='h')
        assert parse_cards("") == []

    def test_bad_token(self):
        with pytest.raises(ValueError):
            parse_cards("Ah Zz")

    def test_card_str(self):
        assert str(Card.from_str("qs")) == "Qs"


class TestMisc:

    def test_timestamps(self):
        assert extract_timestamp("... - 2025/09/24 17:30:00 ET") == "2025/09/24 17:30:00"
        assert extract_timestamp("HOLDEM No Limit - 2025-01-13 10:00:00") == "2025-01-13 10:00:00"
        assert extract_timestamp("*** 13 01 2025 10:00:00") == "13 01 2025 10:00:00"
        assert extract_timestamp("no date") is None

    def test_player_names(self):
        assert normalize_player_name("  Dealer [ME] ") == "Dealer"
        assert normalize_player_name("Player   5") == "Player 5"


class TestPositions:

    def test_six_handed(self):
        assert assign_positions([1, 2, 3, 4, 5, 6], 1) == {
            1: 'BTN', 2: 'SB', 3: 'BB', 4: 'UTG', 5: 'MP', 6: 'CO',
        }

    def test_wraps_around_the_table(self):
        assert assign_positions([2, 4, 7], 7) == {7: 'BTN', 2: 'SB', 4: 'BB'}

    def test_heads_up(self):
        assert assign_positions([3, 7], 7) == {7: 'BTN', 3: 'BB'}

    def test_unknown_button(self):
        assert assign_positions([1, 2, 3], None) == {}
        assert assign_positions([1, 2, 3], 5) == {}
