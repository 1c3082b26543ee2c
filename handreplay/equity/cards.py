"""Card strings and decks for the equity engine."""
import logging
import re
from typing import Iterable, List, Optional

from ..parse.schemas import RANKS, SUITS, Card

logger = logging.getLogger(__name__)

VALID_BOARD_SIZES = (0, 3, 4, 5)
STREET_BY_BOARD = {0: 'preflop', 3: 'flop', 4: 'turn', 5: 'river'}


def parse_card_string(text: str) -> Optional[List[Card]]:
    """
    Parse "AhKd", "Ah Kd" or "Ah,Kd" into cards.

    The rank is case-insensitive; the suit must be lowercase. Returns None
    when any token is not a card.
    """
    if text is None:
        return None
    compact = re.sub(r'[\s,]+', '', text)
    if len(compact) % 2:
        return None

    cards = []
    for i in range(0, len(compact), 2):
        rank, suit = compact[i].upper(), compact[i + 1]
        if rank not in RANKS or suit not in SUITS:
            logger.debug(f"Invalid card {compact[i:i + 2]!r} in {text!r}")
            return None
        cards.append(Card(rank=rank, suit=suit))
    return cards


def has_duplicates(cards: Iterable[Card]) -> bool:
    cards = list(cards)
    return len(set(cards)) != len(cards)


def is_valid_hand(text: str) -> bool:
    """Exactly two distinct cards."""
    cards = parse_card_string(text)
    return cards is not None and len(cards) == 2 and not has_duplicates(cards)


def is_valid_board(text: str) -> bool:
    """Zero, three, four or five distinct cards."""
    cards = parse_card_string(text or '')
    return cards is not None and len(cards) in VALID_BOARD_SIZES and not has_duplicates(cards)


def make_deck(exclude: Iterable[Card] = ()) -> List[Card]:
    dead = set(exclude)
    return [Card(rank=r, suit=s) for r in RANKS for s in SUITS if Card(rank=r, suit=s) not in dead]
