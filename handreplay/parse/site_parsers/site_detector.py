"""Automatic detection of poker site from hand history text."""
import re
import logging
from enum import Enum
from typing import Optional

from ...errors import ErrorCode, ParseError, Result
from ..schemas import HandHistory
from .base_parser import BaseParser, first_line
from .eight88_parser import Poker888Parser
from .gg_parser import GGPokerParser
from .ignition_parser import IgnitionParser
from .party_parser import PartyPokerParser
from .pokerstars_parser import PokerStarsParser

logger = logging.getLogger(__name__)


class SiteGrammar(Enum):
    """One member per supported room; the value is the canonical site name."""

    POKERSTARS = "pokerstars"
    GGPOKER = "ggpoker"
    PARTYPOKER = "partypoker"
    IGNITION = "ignition"
    POKER888 = "888poker"

    @property
    def parser_class(self):
        return _PARSERS[self]

    def parser(self) -> BaseParser:
        return self.parser_class()

    def parse(self, hand_text: str) -> Result[HandHistory]:
        return self.parser().parse(hand_text)


_PARSERS = {
    SiteGrammar.POKERSTARS: PokerStarsParser,
    SiteGrammar.GGPOKER: GGPokerParser,
    SiteGrammar.PARTYPOKER: PartyPokerParser,
    SiteGrammar.IGNITION: IgnitionParser,
    SiteGrammar.POKER888: Poker888Parser,
}

# First-line signatures, checked in order
SIGNATURES = [
    (re.compile(r'^PokerStars\s+(?:Zoom\s+|Home\s+Game\s+)?(?:Hand|Game)\s+#', re.IGNORECASE), SiteGrammar.POKERSTARS),
    (re.compile(r'^(?:GGPoker\s+Hand\s+#|Poker\s+Hand\s+#|Game\s+ID:)', re.IGNORECASE), SiteGrammar.GGPOKER),
    (re.compile(r'^(?:#Game\s+No\s*:|\*{5}\s*888poker\s+Hand\s+History)', re.IGNORECASE), SiteGrammar.POKER888),
    (re.compile(r'^(?:PartyPoker\s+Hand\s+#|\*{5}\s*Hand\s+History\s+for\s+Game)', re.IGNORECASE), SiteGrammar.PARTYPOKER),
    (re.compile(r'^(?:Ignition|Bovada)\s+Hand\s+#', re.IGNORECASE), SiteGrammar.IGNITION),
]


def detect_site(text: str) -> Optional[SiteGrammar]:
    """Detect which poker site the hand history is from.

    Only the first non-blank line is inspected.

    Returns:
        The matching grammar or None if not detected
    """
    header = first_line(text or '')
    for pattern, grammar in SIGNATURES:
        if pattern.match(header):
            return grammar
    return None


def get_parser(site_name: str) -> Optional[BaseParser]:
    """Get the grammar for a canonical site name ('pokerstars', '888poker', ...)."""
    try:
        return SiteGrammar(site_name).parser()
    except ValueError:
        return None


def parse_hand_text(hand_text: str) -> Result[HandHistory]:
    """Detect the room once and run only that grammar."""
    grammar = detect_site(hand_text)
    if grammar is None:
        header = first_line(hand_text or '')
        logger.warning(f"Unknown site for header {header[:60]!r}")
        return Result.failure(ParseError(
            ErrorCode.PARSE_UNKNOWN_SITE,
            "Could not detect poker site from hand header",
            details={'header': header[:120]},
        ))

    logger.debug(f"Detected {grammar.value}")
    return grammar.parse(hand_text)
