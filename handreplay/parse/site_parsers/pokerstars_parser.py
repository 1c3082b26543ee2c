"""
PokerStars hand history grammar.
Handles tournament and cash headers, bounties, side pots and summary reveals.
"""
import re
import logging

from ...errors import ErrorCode
from ..schemas import GameContext
from ..utils import extract_timestamp
from .base_parser import BaseParser, FEE_PATTERN, ParseState, first_line, sum_amounts

logger = logging.getLogger(__name__)

AMT = r'[$€£]?\d[\d,.]*'

HEADER = re.compile(r'^PokerStars\s+(?:Zoom\s+|Home\s+Game\s+)?(?:Hand|Game)\s+#(\d+):\s*(.*)$')
TABLE = re.compile(r"^Table\s+'([^']+)'\s+(\d+)-max.*?(?:Seat\s+#(\d+)\s+is\s+the\s+button)?$")
SEAT = re.compile(
    rf'^Seat\s+(\d+):\s+(.+?)\s+\(({AMT})\s+in\s+chips(?:,\s+({AMT})\s+bounty)?\)'
    r'(\s+is\s+sitting\s+out|\s+out\s+of\s+hand)?'
)

STREET_MARKERS = [
    (re.compile(r'^\*\*\*\s*HOLE\s+CARDS\s*\*\*\*'), 'preflop'),
    (re.compile(r'^\*\*\*\s*FLOP\s*\*\*\*\s*\[([^\]]+)\]'), 'flop'),
    (re.compile(r'^\*\*\*\s*TURN\s*\*\*\*\s*\[[^\]]*\]\s*\[([^\]]+)\]'), 'turn'),
    (re.compile(r'^\*\*\*\s*RIVER\s*\*\*\*\s*\[[^\]]*\]\s*\[([^\]]+)\]'), 'river'),
    (re.compile(r'^\*\*\*\s*SHOW\s*DOWN\s*\*\*\*'), 'showdown'),
    (re.compile(r'^\*\*\*\s*SUMMARY\s*\*\*\*'), 'summary'),
]

POST_ANTE = re.compile(rf'^(.+?):\s+posts\s+(?:the\s+)?ante\s+({AMT})(\s+and\s+is\s+all-in)?$')
POST_BLIND = re.compile(
    rf'^(.+?):\s+posts\s+(small\s+blind|big\s+blind|small\s+&\s+big\s+blinds)\s+({AMT})(\s+and\s+is\s+all-in)?$'
)
DEALT = re.compile(r'^Dealt\s+to\s+(.+?)\s+\[([^\]]+)\]')
ACTION = re.compile(
    rf'^(.+?):\s+(folds|checks|calls|bets|raises)(?:\s+({AMT}))?(?:\s+to\s+({AMT}))?(\s+and\s+is\s+all-in)?'
)
SHOWS = re.compile(r'^(.+?):\s+shows\s+\[([^\]]+)\]')
MUCKS = re.compile(r'^(.+?):\s+mucks\s+(?:hand|\[([^\]]+)\])')
UNCALLED = re.compile(rf'^Uncalled\s+bet\s+\(({AMT})\)\s+returned\s+to\s+(.+)$')
COLLECTED = re.compile(rf'^(.+?)\s+collected\s+({AMT})\s+from\s+(?:the\s+)?(?:main\s+|side\s+)?pot')
REBUY = re.compile(rf'^(.+?)\s+re-buys\s+and\s+receives\s+({AMT})\s+chips')
ADDON = re.compile(rf'^(.+?)\s+takes\s+the\s+add-on\s+and\s+receives\s+({AMT})\s+chips')
BOUNTY = re.compile(rf'^(.+?)\s+wins\s+(?:the\s+)?({AMT})\s+(?:bounty\s+)?for\s+eliminating')

TOTAL_POT = re.compile(rf'^Total\s+pot\s+({AMT})')
SUB_POT = re.compile(rf'(Main\s+pot|Side\s+pot(?:-\d+)?)\s+({AMT})')
SUMMARY_SEAT = re.compile(r'^Seat\s+(\d+):\s+(.*)$')
SUMMARY_CARDS = re.compile(r'\b(showed|mucked)\s+\[([^\]]+)\]')
SUMMARY_WON = re.compile(rf'\b(?:won|collected)\s+\(({AMT})\)')

# Table chatter and status lines that carry no chips
IGNORED = re.compile(
    r'(?::\s+(?:is\s+sitting\s+out|sits\s+out|has\s+timed\s+out|is\s+disconnected|is\s+connected|'
    r"has\s+returned|doesn't\s+show\s+hand|said,|Pays\s+Cashout)|"
    r'\s+(?:joins|leaves)\s+the\s+table|\s+has\s+returned$|\s+will\s+be\s+allowed\s+to\s+play|'
    r'\s+finished\s+the\s+tournament|\s+wins\s+the\s+tournament|\s+wins\s+an\s+entry|'
    r'\s+is\s+sitting\s+out$|\s+was\s+removed\s+from\s+the\s+table|^Dealt\s+to\s+[^\[]+$|^Board\s+\[)',
    re.IGNORECASE,
)


class PokerStarsParser(BaseParser):
    """Parser for PokerStars hand histories."""

    site_name = "pokerstars"
    header_pattern = HEADER

    def game_context(self, header_line: str) -> GameContext:
        if re.search(r'Tournament\s+#', header_line):
            return GameContext(is_tournament=True, currency_unit='chips', conversion_needed=False)
        return GameContext(is_tournament=False, currency_unit='dollars', conversion_needed=True)

    def _parse_header(self, state: ParseState) -> None:
        header = first_line(state.text)
        match = self.header_pattern.match(header)
        if not match:
            raise self.fail(ErrorCode.PARSE_INVALID_HEADER, f"Unrecognised header: {header[:80]!r}", state)

        info = state.header
        info['hand_id'] = match.group(1)
        info['game_context'] = self.game_context(header)

        tourn = re.search(r'Tournament\s+#(\w+)', header)
        if tourn:
            info['tournament_id'] = tourn.group(1)
            buy_in = re.search(r'Tournament\s+#\w+,\s*(.*?)\s+(?:[A-Z]{3}\s+)?Hold\'em', header)
            if buy_in and buy_in.group(1):
                info['buy_in'] = buy_in.group(1)

        game = re.search(r"(Hold'em|Omaha)\s+(No\s+Limit|Pot\s+Limit|Limit)", header)
        if game:
            info['game_type'] = game.group(1)
            info['limit_type'] = game.group(2)

        level = re.search(r'Level\s*([IVXLCDM\d]+)', header)
        if level:
            info['level'] = level.group(1)

        blinds = re.search(rf'\(({AMT})/({AMT})(?:/({AMT}))?(?:\s+([A-Z]{{3}}))?\)', header)
        if blinds:
            info['small_blind'] = self.parse_amount(blinds.group(1))
            info['big_blind'] = self.parse_amount(blinds.group(2))
            if blinds.group(3):
                info['ante'] = self.parse_amount(blinds.group(3))
            info['stakes'] = f"{blinds.group(1)}/{blinds.group(2)}"
            if blinds.group(4):
                info['currency'] = blinds.group(4)
            elif '$' in blinds.group(0):
                info['currency'] = 'USD'
            elif '€' in blinds.group(0):
                info['currency'] = 'EUR'

        info['timestamp'] = extract_timestamp(header)

    def _parse_body(self, state: ParseState) -> None:
        section = 'seats'
        summary_wins = {}

        for state.line_no, raw in enumerate(state.lines):
            line = raw.strip()
            if not line or state.line_no == 0:
                continue

            marker = self._street_marker(state, line)
            if marker:
                section = marker
                continue

            if section == 'seats':
                self._parse_seat_section(state, line)
            elif section == 'summary':
                self._parse_summary_line(state, line, summary_wins)
            else:
                self._parse_action_line(state, line)

        if not state.winnings and summary_wins:
            state.winnings.update(summary_wins)

    def _street_marker(self, state: ParseState, line: str):
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

    def _parse_seat_section(self, state: ParseState, line: str) -> None:
        table = TABLE.match(line)
        if table:
            state.header['table_name'] = table.group(1)
            state.max_players = int(table.group(2))
            if table.group(3):
                state.button_seat = int(table.group(3))
            return

        seat = SEAT.match(line)
        if seat:
            self.add_seat(
                state,
                int(seat.group(1)),
                seat.group(2),
                seat.group(3),
                bounty_text=seat.group(4),
                sitting_out=bool(seat.group(5)),
            )
            return

        # Antes and blinds are posted before the hole cards
        self._parse_action_line(state, line)

    def _parse_action_line(self, state: ParseState, line: str) -> None:
        ante = POST_ANTE.match(line)
        if ante:
            self.add_action(state, ante.group(1), 'post-ante', ante.group(2), all_in=bool(ante.group(3)))
            return

        blind = POST_BLIND.match(line)
        if blind:
            if blind.group(2).startswith('small &'):
                self._post_small_and_big(state, blind.group(1), blind.group(3), bool(blind.group(4)))
                return
            kind = 'small' if blind.group(2).startswith('small blind') else 'big'
            self.add_action(
                state, blind.group(1), 'post-blind', blind.group(3),
                all_in=bool(blind.group(4)), blind=kind, street='preflop',
            )
            return

        dealt = DEALT.match(line)
        if dealt:
            name = self.clean_player_name(dealt.group(1))
            state.hero = name
            self.attach_cards(state, name, dealt.group(2), shown=False)
            return

        uncalled = UNCALLED.match(line)
        if uncalled:
            self.add_action(state, uncalled.group(2), 'uncalled-return', uncalled.group(1))
            return

        collected = COLLECTED.match(line)
        if collected:
            self.add_winnings(state, collected.group(1), collected.group(2))
            return

        shows = SHOWS.match(line)
        if shows:
            self.attach_cards(state, shows.group(1), shows.group(2))
            return

        mucks = MUCKS.match(line)
        if mucks:
            name = self.clean_player_name(mucks.group(1))
            if mucks.group(2):
                self.attach_cards(state, name, mucks.group(2))
            elif name not in state.mucked:
                state.mucked.append(name)
            return

        action = ACTION.match(line)
        if action:
            self._add_betting_action(state, action)
            return

        if self._parse_tournament_event(state, line):
            return

        if IGNORED.search(line):
            return

        self.warn(state, ErrorCode.PARSE_MALFORMED_LINE, f"Unrecognised line: {line[:80]!r}")

    def _add_betting_action(self, state: ParseState, match: re.Match) -> None:
        player, verb, amount, to_amount, all_in = match.groups()
        kind = {'folds': 'fold', 'checks': 'check', 'calls': 'call', 'bets': 'bet', 'raises': 'raise'}[verb]

        if kind in ('call', 'bet', 'raise') and amount is None:
            self.warn(state, ErrorCode.PARSE_INVALID_ACTION, f"{verb} without amount for {player}")
            return

        if kind == 'raise' and to_amount is None:
            self.warn(state, ErrorCode.PARSE_INVALID_ACTION, f"raise without target for {player}")
            return

        self.add_action(
            state, player, kind,
            amount if kind != 'fold' and kind != 'check' else None,
            to_amount if kind == 'raise' else None,
            all_in=bool(all_in),
        )

    def _parse_tournament_event(self, state: ParseState, line: str) -> bool:
        for pattern, kind in ((REBUY, 'rebuy'), (ADDON, 'addon'), (BOUNTY, 'bounty')):
            match = pattern.match(line)
            if match:
                self.add_event(state, match.group(1), kind, match.group(2))
                return True
        return False

    def _post_small_and_big(self, state: ParseState, player: str, amount_text: str, all_in: bool) -> None:
        """
        Split a combined post into a dead small blind and a live big blind.

        Only the big blind part counts towards the player's street total, so
        a later "raises X to Y" is measured against it alone.
        """
        total = self.parse_amount(amount_text)
        live = state.header.get('big_blind')
        if total is None or not live or live >= total:
            self.add_action(state, player, 'post-blind', amount_text, all_in=all_in, blind='big', street='preflop')
            return
        if self.known_player(state, player) is None:
            return
        self.add_action(state, player, 'post-blind', round(total - live, 2), blind='dead', street='preflop')
        self.add_action(state, player, 'post-blind', live, all_in=all_in, blind='big', street='preflop')

    def _parse_summary_line(self, state: ParseState, line: str, summary_wins: dict) -> None:
        total = TOTAL_POT.match(line)
        if total:
            state.total_pot = self.parse_amount(total.group(1))
            state.side_pots = [self.parse_amount(m.group(2)) for m in SUB_POT.finditer(line)]
            fees = [self.parse_amount(m.group(2)) for m in FEE_PATTERN.finditer(line)]
            state.rake = sum_amounts(fees) if fees else None
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
            self.attach_cards(state, name, cards.group(2))

        won = SUMMARY_WON.search(seat.group(2))
        if won:
            amount = self.parse_amount(won.group(1))
            if amount is not None:
                summary_wins[name] = summary_wins.get(name, 0.0) + amount
