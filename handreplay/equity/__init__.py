# Monte Carlo equity engine
from .calculator import EquityResult, calculate_equity
from .cards import is_valid_board, is_valid_hand, make_deck, parse_card_string
from .evaluator import best_hand_score, evaluate_5, hand_category

__all__ = [
    'EquityResult',
    'calculate_equity',
    'is_valid_board',
    'is_valid_hand',
    'make_deck',
    'parse_card_string',
    'best_hand_score',
    'evaluate_5',
    'hand_category',
]
