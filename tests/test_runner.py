"""
Tests for the parse runner: single-hand validation, batches and files.
"""

from handreplay.errors import ErrorCode
from handreplay.parse.runner import (
    parse_directory, parse_file, parse_hand, parse_multiple_hands, validate_single_hand,
)
from sample_hands import GG_TOURNAMENT, IGNITION_CASH, STARS_CASH_RAKE, STARS_EXAMPLE

NO_BLINDS = """PokerStars Hand #111: Hold'em No Limit ($0.01/$0.02 USD) - 2025/01/01 10:00:00 ET
Table 'Nowhere' 6-max Seat #1 is the button
Seat 1: Ann ($2 in chips)
Seat 2: Ben ($2 in chips)
*** HOLE CARDS ***
Ann: folds"""


class TestValidateSingleHand:

    def test_single_hand_passes(self):
        result = validate_single_hand("\n\n" + STARS_EXAMPLE + "\n")
        assert result.ok
        assert result.value == STARS_EXAMPLE

    def test_multiple_hands_rejected(self):
        result = validate_single_hand(STARS_EXAMPLE + "\n\n" + STARS_CASH_RAKE)
        assert not result.ok
        assert result.error.code == ErrorCode.VALIDATION_MULTIPLE_HANDS
        assert result.error.details['count'] == 2

    def test_empty_rejected(self):
        assert validate_single_hand("").error.code == ErrorCode.VALIDATION_EMPTY_INPUT
        assert validate_single_hand(" \n ").error.code == ErrorCode.VALIDATION_EMPTY_INPUT


class TestParseHand:

    def test_parse_hand(self):
        result = parse_hand(GG_TOURNAMENT)
        assert result.ok
        assert result.value.hand_id == 'TM5148170724'

    def test_parse_hand_rejects_batches(self):
        result = parse_hand(STARS_EXAMPLE + "\n\n" + GG_TOURNAMENT)
        assert result.error.code == ErrorCode.VALIDATION_MULTIPLE_HANDS


class TestParseMultipleHands:

    def test_mixed_rooms(self):
        text = "\n\n".join([STARS_EXAMPLE, GG_TOURNAMENT, IGNITION_CASH])
        result = parse_multiple_hands(text)
        assert result.ok
        assert [h.site for h in result.value] == ['pokerstars', 'ggpoker', 'ignition']

    def test_failed_hand_becomes_a_warning(self):
        text = "\n\n".join([STARS_EXAMPLE, NO_BLINDS, STARS_CASH_RAKE])
        result = parse_multiple_hands(text)
        assert result.ok
        assert [h.hand_id for h in result.value] == ['2310810117', '245000000001']

        failures = [w for w in result.warnings if w.code == ErrorCode.PARSE_MISSING_BLINDS]
        assert len(failures) == 1
        assert failures[0].details['index'] == 1
        assert failures[0].details['hand_id'] == '111'

    def test_split_failure_fails_the_batch(self):
        result = parse_multiple_hands("")
        assert not result.ok
        assert result.error.code == ErrorCode.VALIDATION_EMPTY_INPUT

    def test_to_dict(self):
        data = parse_multiple_hands(STARS_EXAMPLE).to_dict()
        assert data['success'] is True
        assert data['error'] is None
        assert data['value'][0]['hand_id'] == '2310810117'
        assert data['value'][0]['board'][0] == {'rank': 'A', 'suit': 'h'}


class TestFiles:

    def test_parse_file(self, hand_file):
        path = hand_file(STARS_EXAMPLE + "\n\n" + GG_TOURNAMENT)
        result = parse_file(path)
        assert result.ok
        assert len(result.value) == 2

    def test_missing_file(self, tmp_path):
        result = parse_file(tmp_path / "nope.txt")
        assert not result.ok
        assert result.error.code == ErrorCode.VALIDATION_MISSING_REQUIRED

    def test_parse_directory(self, hand_file, tmp_path):
        hand_file(STARS_EXAMPLE, "a.txt")
        hand_file(IGNITION_CASH, "b.txt")
        hand_file("not a hand", "notes.md")
        results = parse_directory(tmp_path)
        assert sorted(results) == ['a.txt', 'b.txt']
        assert all(r.ok for r in results.values())
        assert parse_directory(tmp_path / "missing") == {}

    def test_parse_directory_extensions(self, hand_file, tmp_path):
        hand_file(STARS_EXAMPLE, "a.txt")
        hand_file(GG_TOURNAMENT, "b.log")
        results = parse_directory(tmp_path, extensions=('.txt', '.log'))
        assert sorted(results) == ['a.txt', 'b.log']
        assert results['b.log'].value[0].site == 'ggpoker'
        assert parse_directory.__defaults__ == (('.txt',),)
        assert sorted(parse_directory(tmp_path)) == ['a.txt']
