"""
Smoke tests for the handreplay command line.
"""

import json

from handreplay.cli import main
from sample_hands import GG_TOURNAMENT, STARS_EXAMPLE


class TestCli:

    def test_parse(self, hand_file, capsys):
        path = hand_file(STARS_EXAMPLE + "\n\n" + GG_TOURNAMENT)
        assert main(['parse', str(path)]) == 0
        out = capsys.readouterr().out
        assert "Parsed 2 hands" in out
        assert "#2310810117" in out
        assert "winners: b33072e1" in out

    def test_parse_json(self, hand_file, capsys):
        path = hand_file(STARS_EXAMPLE)
        assert main(['parse', str(path), '--json']) == 0
        data = json.loads(capsys.readouterr().out)
        assert data['success'] is True
        assert data['value'][0]['site'] == 'pokerstars'

    def test_parse_missing_file(self, tmp_path, capsys):
        assert main(['parse', str(tmp_path / "missing.txt")]) == 1
        assert "VAL_004" in capsys.readouterr().out

    def test_replay(self, hand_file, capsys):
        path = hand_file(STARS_EXAMPLE)
        assert main(['replay', str(path)]) == 0
        out = capsys.readouterr().out
        assert "Showdown: Hero wins 6100" in out
        assert "Hero 8100" in out

    def test_replay_hand_out_of_range(self, hand_file, capsys):
        path = hand_file(STARS_EXAMPLE)
        assert main(['replay', str(path), '--hand', '3']) == 1
        assert "out of range" in capsys.readouterr().out

    def test_equity(self, capsys):
        assert main(['equity', 'AhKh', '2c3d', '--board', 'QhJhTh4s5s', '--iterations', '100']) == 0
        out = capsys.readouterr().out
        assert "Street: river" in out
        assert "Ah Kh: 100.00%" in out

    def test_equity_invalid_cards(self, capsys):
        assert main(['equity', 'AhAh', 'KdKc']) == 1
        assert "invalid cards" in capsys.readouterr().out

    def test_config_option(self, tmp_path, hand_file, monkeypatch, capsys):
        # main() exports the path; setenv makes sure it is restored afterwards
        monkeypatch.setenv("HANDREPLAY_CONFIG", "")
        cfg = tmp_path / "cfg.yml"
        cfg.write_text("logging:\n  level: WARNING\n")
        path = hand_file(STARS_EXAMPLE)
        assert main(['-c', str(cfg), 'parse', str(path)]) == 0
        assert main(['-c', str(tmp_path / "nope.yml"), 'parse', str(path)]) == 1
