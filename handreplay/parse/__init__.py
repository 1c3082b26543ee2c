"""
Poker hand history parsing module.
Provides a unified interface for parsing multiple poker site formats.
"""

from .schemas import Action, Card, GameContext, HandHistory, Player, ShowdownSummary, StreetInfo
from .hand_splitter import extract_hand_id, split_hands
from .runner import parse_directory, parse_file, parse_hand, parse_multiple_hands, validate_single_hand
from .site_parsers import SiteGrammar, detect_site, parse_hand_text

__all__ = [
    'Action',
    'Card',
    'GameContext',
    'HandHistory',
    'Player',
    'ShowdownSummary',
    'StreetInfo',
    'extract_hand_id',
    'split_hands',
    'parse_directory',
    'parse_file',
    'parse_hand',
    'parse_multiple_hands',
    'validate_single_hand',
    'SiteGrammar',
    'detect_site',
    'parse_hand_text',
]
