"""
Hold'em hand evaluator.

Every 5-card hand maps to one integer: the category times 15**5 plus the
tie-break ranks packed base 15, most significant first. Larger is better,
so hands compare with plain integer comparison.
"""
from itertools import combinations
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from ..parse.schemas import Card

CATEGORY = {
    "high_card": 0,
    "pair": 1,
    "two_pair": 2,
    "trips": 3,
    "straight": 4,
    "flush": 5,
    "full_house": 6,
    "quads": 7,
    "straight_flush": 8,
}
CATEGORY_NAMES = {v: k for k, v in CATEGORY.items()}

BASE = 15
CATEGORY_UNIT = BASE ** 5

# (value 2..14, suit) pairs keep the inner loop free of model objects
RawCard = Tuple[int, str]


def to_raw(cards: Iterable[Union[Card, RawCard]]) -> List[RawCard]:
    return [c if isinstance(c, tuple) else (c.value, c.suit) for c in cards]


def _pack(category: int, ranks: Sequence[int]) -> int:
    score = 0
    for i in range(5):
        score = score * BASE + (ranks[i] if i < len(ranks) else 0)
    return category * CATEGORY_UNIT + score


def straight_high(values: Iterable[int]) -> Optional[int]:
    """High card of a 5-card straight, 5 for the wheel, else None."""
    uniq = set(values)
    if len(uniq) != 5:
        return None
    high, low = max(uniq), min(uniq)
    if high - low == 4:
        return high
    if uniq == {14, 2, 3, 4, 5}:
        return 5
    return None


def _score5(cards: Sequence[RawCard]) -> int:
    values = sorted((v for v, _ in cards), reverse=True)
    is_flush = len({s for _, s in cards}) == 1

    counts: Dict[int, int] = {}
    for v in values:
        counts[v] = counts.get(v, 0) + 1
    groups = sorted(counts.items(), key=lambda kv: (kv[1], kv[0]), reverse=True)
    pattern = [count for _, count in groups]
    ordered = [v for v, _ in groups]

    high = straight_high(values)

    if high is not None and is_flush:
        return _pack(CATEGORY["straight_flush"], (high,))
    if pattern == [4, 1]:
        return _pack(CATEGORY["quads"], ordered)
    if pattern == [3, 2]:
        return _pack(CATEGORY["full_house"], ordered)
    if is_flush:
        return _pack(CATEGORY["flush"], values)
    if high is not None:
        return _pack(CATEGORY["straight"], (high,))
    if pattern == [3, 1, 1]:
        return _pack(CATEGORY["trips"], ordered)
    if pattern == [2, 2, 1]:
        return _pack(CATEGORY["two_pair"], ordered)
    if pattern == [2, 1, 1, 1]:
        return _pack(CATEGORY["pair"], ordered)
    return _pack(CATEGORY["high_card"], values)


def evaluate_5(cards: Iterable[Union[Card, RawCard]]) -> int:
    raw = to_raw(cards)
    if len(raw) != 5:
        raise ValueError("evaluate_5 expects exactly 5 cards")
    return _score5(raw)


def best_hand_score(cards: Iterable[Union[Card, RawCard]]) -> int:
    """Best 5-card score out of 5 to 7 cards (21 combinations for 7)."""
    raw = to_raw(cards)
    if not 5 <= len(raw) <= 7:
        raise ValueError("best_hand_score expects 5 to 7 cards")
    return max(_score5(combo) for combo in combinations(raw, 5))


def hand_category(score: int) -> str:
    return CATEGORY_NAMES[score // CATEGORY_UNIT]


def compare_hands(hand1, hand2, board) -> int:
    """1 if hand1 wins on this board, -1 if hand2 wins, 0 on a split."""
    s1 = best_hand_score(list(hand1) + list(board))
    s2 = best_hand_score(list(hand2) + list(board))
    return 1 if s1 > s2 else (-1 if s2 > s1 else 0)
