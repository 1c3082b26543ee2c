# Site-specific grammars for different poker rooms
from .base_parser import BaseParser
from .site_detector import SiteGrammar, detect_site, get_parser, parse_hand_text
from .gg_parser import GGPokerParser
from .pokerstars_parser import PokerStarsParser
from .party_parser import PartyPokerParser
from .ignition_parser import IgnitionParser
from .eight88_parser import Poker888Parser

__all__ = [
    'BaseParser',
    'SiteGrammar',
    'detect_site',
    'get_parser',
    'parse_hand_text',
    'GGPokerParser',
    'PokerStarsParser',
    'PartyPokerParser',
    'IgnitionParser',
    'Poker888Parser'
]
