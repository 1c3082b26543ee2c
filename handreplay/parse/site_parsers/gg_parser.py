"""GGPoker specific grammar.

GG exports follow the PokerStars layout closely; the differences are the
header line, the extra house fees in the summary (Jackpot, Bingo, Fortune, Tax)
and hands whose table line omits the button.
"""
import re
import logging

from ..schemas import GameContext
from .pokerstars_parser import PokerStarsParser

logger = logging.getLogger(__name__)

HEADER = re.compile(
    r'^(?:GGPoker\s+Hand|Poker\s+Hand|Game\s+ID:)\s*#?([A-Za-z0-9]+):?\s*(.*)$'
)


class GGPokerParser(PokerStarsParser):
    """Parser for GGPoker hand histories."""

    site_name = "ggpoker"
    header_pattern = HEADER

    def game_context(self, header_line: str) -> GameContext:
        if re.search(r'Tournament|T\$', header_line):
            return GameContext(is_tournament=True, currency_unit='chips', conversion_needed=False)
        return GameContext(is_tournament=False, currency_unit='dollars', conversion_needed=True)
