"""Party Poker specific grammar.

Party lines have no colon after the player name ("Hero raises [$0.30 USD]"),
so actors are resolved against the seat list. Bracketed amounts are the chips
added by that action.
"""
import re
import logging
from typing import Dict, Optional, Tuple

from ...errors import ErrorCode
from ..schemas import GameContext
from .base_parser import BaseParser, ParseState, first_line

logger = logging.getLogger(__name__)

AMT = r'[$€£]?\s*\d[\d,.]*(?:\s*(?:USD|EUR|GBP))?'

HEADER = re.compile(
    r'^(?:\*{5}\s*Hand\s+History\s+for\s+Game\s+(\d+)|PartyPoker\s+Hand\s+#(\d+))',
    re.IGNORECASE,
)
STAKES = re.compile(r'^([$€£]?[\d,.]+)/([$€£]?[\d,.]+)\s*(USD|EUR|GBP)?\s+(.*)$')
TABLE = re.compile(r'^Table\s+(.+?)\s*\((?:Real|Play)\s+Money\)', re.IGNORECASE)
BUTTON = re.compile(r'^Seat\s+(\d+)\s+is\s+the\s+button', re.IGNORECASE)
PLAYER_COUNT = re.compile(r'^Total\s+number\s+of\s+players\s*:\s*\d+(?:/(\d+))?', re.IGNORECASE)
SEAT = re.compile(rf'^Seat\s+(\d+):\s+(.+?)\s+\(\s*({AMT})\s*\)')

DEALING = re.compile(r'^\*\*\s*Dealing\s+(down\s+cards|flop|turn|river)\s*\*\*\s*:?\s*(?:\[([^\]]*)\])?', re.IGNORECASE)
SUMMARY = re.compile(r'^\*\*\s*Summary\s*\*\*', re.IGNORECASE)
DEALT = re.compile(r'^Dealt\s+to\s+(.+?)\s+\[([^\]]+)\]')

# Patterns applied to the remainder of a line after the player's name
VERBS = [
    (re.compile(rf'^posts\s+small\s+blind\s+\[({AMT})\]', re.IGNORECASE), 'post-small'),
    (re.compile(rf'^posts\s+big\s+blind\s+\[({AMT})\]', re.IGNORECASE), 'post-big'),
    (re.compile(rf'^posts\s+(?:the\s+)?ante\s+\[({AMT})\]', re.IGNORECASE), 'post-ante'),
    (re.compile(r'^folds', re.IGNORECASE), 'fold'),
    (re.compile(r'^checks', re.IGNORECASE), 'check'),
    (re.compile(rf'^calls\s+\[({AMT})\]', re.IGNORECASE), 'call'),
    (re.compile(rf'^bets\s+\[({AMT})\]', re.IGNORECASE), 'bet'),
    (re.compile(rf'^raises\s+\[({AMT})\]', re.IGNORECASE), 'raise'),
    (re.compile(rf'^is\s+all-in\s*\[({AMT})\]', re.IGNORECASE), 'all-in'),
    (re.compile(rf'^(?:is\s+)?returned\s+\[({AMT})\]', re.IGNORECASE), 'uncalled-return'),
]
SHOWS = re.compile(r'^shows\s+\[([^\]]+)\]', re.IGNORECASE)
NO_SHOW = re.compile(r"^(?:doesn't\s+show|does\s+not\s+show|did\s+not\s+show|mucks)", re.IGNORECASE)
WINS = re.compile(rf'^(?:wins|collected)\s+\[?\s*({AMT})\s*\]?(?:\s+chips)?(?:\s+from\s+the\s+(main\s+pot|side\s+pot(?:\s*-?\s*\d+)?))?', re.IGNORECASE)
CHATTER = re.compile(
    r'^(?:has\s+joined|has\s+left|is\s+sitting\s+out|sits\s+out|is\s+disconnected|'
    r'has\s+been\s+reconnected|will\s+be\s+using|has\s+timed\s+out|is\s+connected|:)',
    re.IGNORECASE,
)


class PartyPokerParser(BaseParser):
    """Parser for Party Poker hand histories."""

    site_name = "partypoker"

    def game_context(self, header_line: str) -> GameContext:
        if re.search(r'Tourney|Tournament', header_line, re.IGNORECASE):
            return GameContext(is_tournament=True, currency_unit='chips', conversion_needed=False)
        return GameContext(is_tournament=False, currency_unit='dollars', conversion_needed=True)

    def header_match(self, line: str) -> Optional[str]:
        match = HEADER.match(line)
        if not match:
            return None
        return match.group(1) or match.group(2)

    def _parse_header(self, state: ParseState) -> None:
        header = first_line(state.text)
        hand_id = self.header_match(header)
        if not hand_id:
            raise self.fail(ErrorCode.PARSE_INVALID_HEADER, f"Unrecognised header: {header[:80]!r}", state)

        info = state.header
        info['hand_id'] = hand_id

        # The stakes line follows the banner and decides tournament vs cash
        descriptor = ' '.join(state.lines[1:4])
        info['game_context'] = self.game_context(descriptor)

        for line in state.lines[1:4]:
            stakes = STAKES.match(line.strip())
            if stakes:
                info['small_blind'] = self.parse_amount(stakes.group(1))
                info['big_blind'] = self.parse_amount(stakes.group(2))
                info['stakes'] = f"{stakes.group(1)}/{stakes.group(2)}"
                info['currency'] = stakes.group(3) or ('USD' if '$' in stakes.group(1) else None)
                if ' - ' in line:
                    info['timestamp'] = line.split(' - ', 1)[1].strip()
                break

        if re.search(r'\bNL\b|No\s+Limit', descriptor):
            info['limit_type'] = 'No Limit'
        elif re.search(r'\bPL\b|Pot\s+Limit', descriptor):
            info['limit_type'] = 'Pot Limit'

        tourn = re.search(r'Tournament\s+#(\d+)', descriptor)
        if tourn:
            info['tournament_id'] = tourn.group(1)
        buy_in = re.search(r'Buy-in:?\s*([$€£][\d.,]+(?:\s*\+\s*[$€£][\d.,]+)?)', descriptor, re.IGNORECASE)
        if buy_in:
            info['buy_in'] = buy_in.group(1)
        level = re.search(r'Level:?\s*(\d+)', descriptor, re.IGNORECASE)
        if level:
            info['level'] = level.group(1)

    def split_actor(self, state: ParseState, line: str) -> Tuple[Optional[str], str]:
        """Split "Name rest of line" using the seat list, longest name first."""
        for name in sorted(state.names, key=len, reverse=True):
            if line.startswith(name + ' ') or line.startswith(name + ':'):
                return name, line[len(name):].strip()
        return None, line

    def _parse_body(self, state: ParseState) -> None:
        section = 'seats'
        pots: Dict[str, float] = {}

        for state.line_no, raw in enumerate(state.lines):
            line = raw.strip()
            if state.line_no == 0 or not line or self.header_match(line):
                continue

            dealing = DEALING.match(line)
            if dealing:
                stage = dealing.group(1).lower()
                if stage == 'down cards':
                    state.street = 'preflop'
                else:
                    self.set_board(state, stage, dealing.group(2) or '')
                section = 'streets'
                continue

            if SUMMARY.match(line):
                section = 'summary'
                continue

            if section == 'seats' and self._parse_table_line(state, line):
                continue

            dealt = DEALT.match(line)
            if dealt:
                name = self.clean_player_name(dealt.group(1))
                state.hero = name
                self.attach_cards(state, name, dealt.group(2), shown=False)
                continue

            self._parse_actor_line(state, line, section, pots)

        if pots:
            main = pots.pop('main', None)
            state.side_pots = ([main] if main is not None else []) + [pots[k] for k in sorted(pots)]

    def _parse_table_line(self, state: ParseState, line: str) -> bool:
        table = TABLE.match(line)
        if table:
            state.header['table_name'] = re.sub(r'\s+\d+\s*Max$', '', table.group(1), flags=re.IGNORECASE)
            max_seats = re.search(r'(\d+)\s*Max', line, re.IGNORECASE)
            if max_seats:
                state.max_players = int(max_seats.group(1))
            return True

        button = BUTTON.match(line)
        if button:
            state.button_seat = int(button.group(1))
            return True

        count = PLAYER_COUNT.match(line)
        if count:
            if count.group(1):
                state.max_players = int(count.group(1))
            return True

        seat = SEAT.match(line)
        if seat:
            self.add_seat(state, int(seat.group(1)), seat.group(2), seat.group(3))
            return True

        if STAKES.match(line) or re.match(r'^Tournament\s+#', line, re.IGNORECASE):
            return True

        return False

    def _parse_actor_line(self, state: ParseState, line: str, section: str, pots: Dict[str, float]) -> None:
        name, rest = self.split_actor(state, line)
        if name is None:
            if section != 'seats':
                self.warn(state, ErrorCode.PARSE_MALFORMED_LINE, f"Unrecognised line: {line[:80]!r}")
            return

        for pattern, kind in VERBS:
            match = pattern.match(rest)
            if not match:
                continue
            amount = match.group(1) if match.groups() else None
            if kind == 'post-small':
                self.add_action(state, name, 'post-blind', amount, blind='small', street='preflop')
            elif kind == 'post-big':
                self.add_action(state, name, 'post-blind', amount, blind='big', street='preflop')
            else:
                self.add_action(state, name, kind, amount, all_in=kind == 'all-in')
            return

        shows = SHOWS.match(rest)
        if shows:
            self.attach_cards(state, name, shows.group(1))
            return

        if NO_SHOW.match(rest):
            self._record_muck(state, name, rest, section)
            return

        wins = WINS.match(rest)
        if wins:
            self.add_winnings(state, name, wins.group(1))
            amount = self.parse_amount(wins.group(1))
            if amount is not None:
                label = self._pot_label(wins.group(2))
                pots[label] = round(pots.get(label, 0.0) + amount, 2)
            return

        if CHATTER.match(rest):
            return

        self.warn(state, ErrorCode.PARSE_MALFORMED_LINE, f"Unrecognised action for {name}: {rest[:60]!r}")

    def _record_muck(self, state: ParseState, name: str, rest: str, section: str) -> None:
        if name not in state.mucked:
            state.mucked.append(name)

    @staticmethod
    def _pot_label(text: Optional[str]) -> str:
        if not text or text.lower().startswith('main'):
            return 'main'
        number = re.search(r'(\d+)', text)
        return f"side{int(number.group(1)):02d}" if number else 'side01'
