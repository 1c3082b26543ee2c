"""
Ignition / Bovada hand history grammar.

Ignition anonymises players: seats are named by their position ("Dealer",
"Small Blind", "UTG+1") and the hero is tagged with "[ME]". Every line after
the seat list has the form ``Name : verb amount``.
"""
import re
import logging
from typing import Dict, Optional

from ...errors import ErrorCode
from ..schemas import GameContext
from .base_parser import BaseParser, ParseState, first_line, sum_amounts
from .pokerstars_parser import STREET_MARKERS

logger = logging.getLogger(__name__)

AMT = r'[$€£]?\d[\d,.]*'

HEADER = re.compile(
    r'^(?:Ignition|Bovada)\s+Hand\s+#(\d+):?\s*(?:TBL#(\d+))?\s*([A-Z]+)?\s*(No\s+Limit|Pot\s+Limit|Limit)?'
    r'(?:.*?-\s*(.*))?$',
    re.IGNORECASE,
)
SEAT = re.compile(rf'^Seat\s+(\d+):\s+(.+?)\s+\(({AMT})\s+in\s+chips\)')
ACTOR = re.compile(r'^(.+?)\s+:\s+(.*)$')

# Ignition seat names map onto the common position labels
POSITION_NAMES = {
    'Dealer': 'BTN',
    'Small Blind': 'SB',
    'Big Blind': 'BB',
}

VERBS = [
    (re.compile(r'^Set\s+dealer\s+\[(\d+)\]', re.IGNORECASE), 'button'),
    (re.compile(rf'^Small\s+Blind\s+({AMT})', re.IGNORECASE), 'post-small'),
    (re.compile(rf'^Big\s+blind\s+({AMT})', re.IGNORECASE), 'post-big'),
    (re.compile(rf'^Posts\s+(?:dead\s+)?chip\s+({AMT})', re.IGNORECASE), 'post-chip'),
    (re.compile(rf'^Ante\s+chip\s+({AMT})', re.IGNORECASE), 'post-ante'),
    (re.compile(r'^Card\s+dealt\s+to\s+a\s+spot\s+\[([^\]]+)\]', re.IGNORECASE), 'dealt'),
    (re.compile(r'^Folds?', re.IGNORECASE), 'fold'),
    (re.compile(r'^Checks?', re.IGNORECASE), 'check'),
    (re.compile(rf'^Calls?\s+({AMT})', re.IGNORECASE), 'call'),
    (re.compile(rf'^Bets?\s+({AMT})', re.IGNORECASE), 'bet'),
    (re.compile(rf'^Raises?\s+({AMT})\s+to\s+({AMT})', re.IGNORECASE), 'raise'),
    (re.compile(rf'^All-in\(raise\)\s+({AMT})\s+to\s+({AMT})', re.IGNORECASE), 'all-in-raise'),
    (re.compile(rf'^All-in\s+({AMT})', re.IGNORECASE), 'all-in'),
    (re.compile(rf'^Return\s+uncalled\s+portion\s+of\s+bet\s+({AMT})', re.IGNORECASE), 'uncalled-return'),
    (re.compile(rf'^Hand\s+result(?:-Side\s+pot)?\s+({AMT})', re.IGNORECASE), 'result'),
    (re.compile(r'^Showdown\b', re.IGNORECASE), 'showdown'),
    (re.compile(r'^(?:Mucks|Does\s+not\s+show)\b', re.IGNORECASE), 'muck'),
]

TOTAL_POT = re.compile(rf'^Total\s+Pot\s*\(\s*({AMT})\s*\)', re.IGNORECASE)
SUMMARY_SEAT = re.compile(r'^Seat\+(\d+):\s+(.*)$')
SUMMARY_CARDS = re.compile(r'\b(?:Mucked|Showdown)\]?\s*\[([^\]]+)\]', re.IGNORECASE)

CHATTER = re.compile(
    r'^(?:Table\s+(?:enter|leave)\s+user|Table\s+deposit|Seat\s+(?:sit\s+down|sit\s+out|stand|re-join)|'
    r'Sitout|Sit\s+out|Enter\(Auto\)|Leave\(Auto\)|Re-join|Chat|Stands\s+up|Table\s+Closed)',
    re.IGNORECASE,
)


class IgnitionParser(BaseParser):
    """Parser for Ignition and Bovada hand histories (cash games)."""

    site_name = "ignition"

    def game_context(self, header_line: str) -> GameContext:
        return GameContext(is_tournament=False, currency_unit='dollars', conversion_needed=True)

    def _parse_header(self, state: ParseState) -> None:
        header = first_line(state.text)
        match = HEADER.match(header)
        if not match:
            raise self.fail(ErrorCode.PARSE_INVALID_HEADER, f"Unrecognised header: {header[:80]!r}", state)

        info = state.header
        info['hand_id'] = match.group(1)
        info['game_context'] = self.game_context(header)
        info['currency'] = 'USD'
        if match.group(2):
            info['table_name'] = match.group(2)
        if match.group(3) and match.group(3).upper().startswith('OMAHA'):
            info['game_type'] = 'Omaha'
        if match.group(4):
            info['limit_type'] = ' '.join(w.capitalize() for w in match.group(4).split())
        if match.group(5):
            info['timestamp'] = match.group(5).strip()

    def _parse_body(self, state: ParseState) -> None:
        section = 'seats'
        results: Dict[str, float] = {}

        for state.line_no, raw in enumerate(state.lines):
            line = raw.strip()
            if not line or state.line_no == 0:
                continue

            marker = self._street_marker(state, line)
            if marker:
                section = marker
                continue

            if section == 'seats':
                seat = SEAT.match(line)
                if seat:
                    name = self.clean_player_name(seat.group(2))
                    if '[ME]' in seat.group(2):
                        state.hero = name
                    self.add_seat(
                        state, int(seat.group(1)), seat.group(2), seat.group(3),
                        position=POSITION_NAMES.get(name, name),
                    )
                    continue

            if section == 'summary':
                self._parse_summary_line(state, line)
                continue

            self._parse_actor_line(state, line, results)

        if results:
            state.winnings.update(results)
        if state.total_pot is not None and state.winnings:
            # Ignition never prints the rake; it is whatever the winners did not receive
            rake = round(state.total_pot - sum_amounts(state.winnings.values()), 2)
            if rake > 0:
                state.rake = rake

    def _street_marker(self, state: ParseState, line: str) -> Optional[str]:
        for pattern, name in STREET_MARKERS:
            match = pattern.match(line)
            if not match:
                continue
            if name in ('flop', 'turn', 'river'):
                self.set_board(state, name, match.group(1))
            elif name == 'preflop':
                state.street = 'preflop'
            return name
        return None

    def _parse_actor_line(self, state: ParseState, line: str, results: Dict[str, float]) -> None:
        actor = ACTOR.match(line)
        if not actor:
            if not CHATTER.match(line):
                self.warn(state, ErrorCode.PARSE_MALFORMED_LINE, f"Unrecognised line: {line[:80]!r}")
            return

        raw_name, rest = actor.groups()
        name = self.clean_player_name(raw_name)
        if CHATTER.match(rest):
            return

        for pattern, kind in VERBS:
            match = pattern.match(rest)
            if match:
                self._apply(state, name, kind, match, results)
                return

        self.warn(state, ErrorCode.PARSE_MALFORMED_LINE, f"Unrecognised action for {name}: {rest[:60]!r}")

    def _apply(self, state: ParseState, name: str, kind: str, match: re.Match, results: Dict[str, float]) -> None:
        if kind == 'button':
            state.button_seat = int(match.group(1))
        elif kind == 'post-small':
            self.add_action(state, name, 'post-blind', match.group(1), blind='small', street='preflop')
        elif kind == 'post-big':
            self.add_action(state, name, 'post-blind', match.group(1), blind='big', street='preflop')
        elif kind == 'post-chip':
            self.add_action(state, name, 'post-blind', match.group(1), street='preflop')
        elif kind == 'post-ante':
            self.add_action(state, name, 'post-ante', match.group(1))
        elif kind == 'dealt':
            self.attach_cards(state, name, match.group(1), shown=False)
        elif kind in ('fold', 'check'):
            self.add_action(state, name, kind)
        elif kind == 'raise':
            self.add_action(state, name, 'raise', match.group(1), match.group(2))
        elif kind == 'all-in-raise':
            self.add_action(state, name, 'all-in', match.group(1), match.group(2), all_in=True)
        elif kind == 'all-in':
            self.add_action(state, name, 'all-in', match.group(1), all_in=True)
        elif kind == 'result':
            player = self.known_player(state, name)
            amount = self.parse_amount(match.group(1))
            if player is not None and amount is not None:
                results[player] = round(results.get(player, 0.0) + amount, 2)
        elif kind == 'showdown':
            # The bracket holds the best five; the hole cards came with the deal
            if name in state.hole_cards:
                state.shown[name] = state.hole_cards[name]
        elif kind == 'muck':
            if name not in state.mucked:
                state.mucked.append(name)
        else:
            self.add_action(state, name, kind, match.group(1))

    def _parse_summary_line(self, state: ParseState, line: str) -> None:
        total = TOTAL_POT.match(line)
        if total:
            state.total_pot = self.parse_amount(total.group(1))
            return

        seat = SUMMARY_SEAT.match(line)
        if not seat:
            return

        seat_no = int(seat.group(1))
        name = next((s['name'] for s in state.seats if s['seat'] == seat_no), None)
        if name is None:
            self.warn(state, ErrorCode.PARSE_MISSING_PLAYER, f"Summary for empty seat {seat_no}")
            return

        cards = SUMMARY_CARDS.search(seat.group(2))
        if cards:
            self.attach_cards(state, name, cards.group(1))
            if name in state.mucked:
                state.mucked.remove(name)
