"""
Tests for splitting pasted text into individual hands.
"""

import pytest

from handreplay.errors import ErrorCode
from handreplay.parse.hand_splitter import (
    count_hand_headers, extract_hand_id, is_hand_start, split_hands,
)
from handreplay.parse.runner import parse_hand
from sample_hands import (
    GG_CASH_FEES, GG_TOURNAMENT, IGNITION_CASH, PARTY_TOURNAMENT, POKER888_CASH,
    POKER888_TOURNAMENT, STARS_CASH_RAKE, STARS_DEAD_BLIND, STARS_EXAMPLE, STARS_SIDE_POTS,
)

ALL_ROOMS = [
    STARS_EXAMPLE, STARS_CASH_RAKE, STARS_DEAD_BLIND, STARS_SIDE_POTS, GG_TOURNAMENT, GG_CASH_FEES,
    PARTY_TOURNAMENT, IGNITION_CASH, POKER888_CASH, POKER888_TOURNAMENT,
]


class TestSplitHands:
    """Boundary detection across rooms."""

    def test_single_hand(self):
        result = split_hands(STARS_EXAMPLE)
        assert result.ok
        assert len(result.value) == 1
        assert result.value[0].startswith("PokerStars Hand #2310810117")
        assert result.warnings == []

    def test_copies_split_in_order(self):
        text = "\n\n\n".join([STARS_EXAMPLE, GG_TOURNAMENT, STARS_EXAMPLE])
        result = split_hands(text)
        assert result.ok
        assert [extract_hand_id(h) for h in result.value] == ['2310810117', 'TM5148170724', '2310810117']

    @pytest.mark.parametrize("hand", ALL_ROOMS)
    def test_repeated_hand_splits_into_equal_hands(self, hand):
        expected = parse_hand(hand).value
        assert expected is not None

        result = split_hands("\n\n".join([hand] * 4))
        assert len(result.value) == 4
        for chunk in result.value:
            assert parse_hand(chunk).value == expected

    def test_back_to_back_without_blank_lines(self):
        result = split_hands(STARS_EXAMPLE + "\n" + STARS_EXAMPLE)
        assert len(result.value) == 2

    def test_preamble_is_reported(self):
        result = split_hands("Exported by some tracker\nversion 2\n\n" + STARS_EXAMPLE)
        assert len(result.value) == 1
        assert len(result.warnings) == 1
        assert result.warnings[0].code == ErrorCode.PARSE_MALFORMED_LINE
        assert result.warnings[0].details['lines'] == 2

    def test_truncated_trailing_hand_is_discarded(self):
        text = STARS_EXAMPLE + "\n\nPokerStars Hand #999: Tournament"
        result = split_hands(text)
        assert result.ok
        assert len(result.value) == 1
        assert result.warnings[0].details['hand_id'] == '999'
        assert result.warnings[0].is_recoverable

    def test_888_two_line_header_is_one_hand(self):
        result = split_hands(POKER888_CASH + "\n\n" + POKER888_TOURNAMENT)
        assert result.ok
        assert len(result.value) == 2
        assert result.value[0].startswith("#Game No : 1234567890")
        assert "888poker Hand History for Game 1234567890" in result.value[0]

    def test_bom_is_stripped(self):
        result = split_hands("\ufeff" + STARS_EXAMPLE)
        assert result.value[0].startswith("PokerStars")

    def test_empty_input(self):
        for text in ("", "   \n\n  "):
            result = split_hands(text)
            assert not result.ok
            assert result.error.code == ErrorCode.VALIDATION_EMPTY_INPUT

    def test_no_hands_found(self):
        result = split_hands("hello world\nnothing to see here")
        assert not result.ok
        assert result.error.code == ErrorCode.VALIDATION_INVALID_FORMAT


class TestHeaderHelpers:

    def test_is_hand_start(self):
        assert is_hand_start("PokerStars Hand #1: Hold'em No Limit")
        assert is_hand_start("Poker Hand #TM1: Tournament #2")
        assert is_hand_start("***** Hand History for Game 123 *****")
        assert is_hand_start("Ignition Hand #55 TBL#1 HOLDEM No Limit")
        assert not is_hand_start("Seat 1: Hero (100 in chips)")

    def test_count_headers(self):
        assert count_hand_headers(STARS_EXAMPLE) == 1
        assert count_hand_headers(POKER888_CASH) == 1
        assert count_hand_headers(STARS_EXAMPLE + "\n\n" + POKER888_CASH) == 2

    def test_extract_hand_id(self):
        assert extract_hand_id(GG_TOURNAMENT) == 'TM5148170724'
        assert extract_hand_id("no header here") is None
