"""888poker specific grammar.

888 shares Party's bracketed layout but opens with a two-line header
("#Game No : N" then the banner), writes chip counts with a European
thousands dot ("10.000") and reports winners as "collected [ X ]".
"""
import re
import logging
from typing import Optional

from ..utils import clean_european_amount, extract_timestamp
from .base_parser import ParseState
from .party_parser import PartyPokerParser

logger = logging.getLogger(__name__)

HEADER = re.compile(
    r'^(?:#Game\s+No\s*:\s*(\d+)|\*{5}\s*888poker\s+Hand\s+History\s+for\s+Game\s+(\d+))',
    re.IGNORECASE,
)
TOURNAMENT = re.compile(r'^Tournament\s+#(\d+)\s*([$€£][\d.,]+\s*\+\s*[$€£][\d.,]+)?', re.IGNORECASE)
TABLE_MAX = re.compile(r'Table\s+#?(\S+)\s+(\d+)\s+Max', re.IGNORECASE)
CARDS_IN_BRACKETS = re.compile(r'\[([^\]]+)\]')


class Poker888Parser(PartyPokerParser):
    """Parser for 888poker hand histories."""

    site_name = "888poker"

    def header_match(self, line: str) -> Optional[str]:
        match = HEADER.match(line)
        if not match:
            return None
        return match.group(1) or match.group(2)

    def parse_amount(self, text: Optional[str]) -> Optional[float]:
        if text is None:
            return None
        text = re.sub(r'\b(?:USD|EUR|GBP)\b', '', text)
        return clean_european_amount(text)

    def _parse_header(self, state: ParseState) -> None:
        super()._parse_header(state)

        info = state.header
        for line in state.lines[1:5]:
            line = line.strip()
            stamp = extract_timestamp(line)
            if stamp:
                info['timestamp'] = stamp
            tourn = TOURNAMENT.match(line)
            if tourn:
                info['tournament_id'] = tourn.group(1)
                if tourn.group(2):
                    info['buy_in'] = tourn.group(2)
                table = TABLE_MAX.search(line)
                if table:
                    info['table_name'] = table.group(1)
                    state.max_players = int(table.group(2))

    def _record_muck(self, state: ParseState, name: str, rest: str, section: str) -> None:
        # A muck in the summary still prints the cards, so they count as revealed
        cards = CARDS_IN_BRACKETS.search(rest)
        if cards and rest.lower().startswith('mucks'):
            self.attach_cards(state, name, cards.group(1))
            if name in state.mucked:
                state.mucked.remove(name)
            return
        super()._record_muck(state, name, rest, section)
