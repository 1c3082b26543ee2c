"""
Monte Carlo equity for one hand against another.

Trials are split into batches, each with its own seed drawn from a master
RNG, and run on a concurrent.futures pool. The totals are summed at the end,
so a given seed always gives the same answer whatever the worker count.
"""
from __future__ import annotations

import logging
import random
import time
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor, wait
from typing import List, Optional, Tuple

from pydantic import BaseModel

from ..config import get_config
from .cards import STREET_BY_BOARD, VALID_BOARD_SIZES, has_duplicates, make_deck, parse_card_string
from .evaluator import RawCard, best_hand_score, to_raw

logger = logging.getLogger(__name__)


class EquityResult(BaseModel):
    """
    Outcome percentages.

    Each side's equity counts a tie as half a win, so hero + villain is 100
    within rounding. tie_equity is the share of trials that split the pot.
    """
    hero_equity: float
    villain_equity: float
    tie_equity: float
    street: str
    hero_hand: List[str]
    villain_hand: List[str]
    board: List[str]
    iterations: int
    truncated: bool = False


def run_batch(
    hero: List[RawCard],
    villain: List[RawCard],
    board: List[RawCard],
    deck: List[RawCard],
    trials: int,
    seed: int,
    stop_at: Optional[float] = None,
) -> Tuple[int, int, int]:
    """Play out trials random runouts. Returns (wins, ties, losses) for hero."""
    rng = random.Random(seed)
    need = 5 - len(board)
    wins = ties = losses = 0

    for _ in range(trials):
        if stop_at is not None and time.time() >= stop_at:
            break
        runout = board + rng.sample(deck, need)
        hero_score = best_hand_score(hero + runout)
        villain_score = best_hand_score(villain + runout)
        if hero_score > villain_score:
            wins += 1
        elif hero_score == villain_score:
            ties += 1
        else:
            losses += 1

    return wins, ties, losses


def _batches(total: int, size: int) -> List[int]:
    full, rest = divmod(total, size)
    return [size] * full + ([rest] if rest else [])


def calculate_equity(
    hero: str,
    villain: str,
    board: str = "",
    iterations: Optional[int] = None,
    *,
    seed: Optional[int] = None,
    deadline: Optional[float] = None,
    workers: Optional[int] = None,
) -> Optional[EquityResult]:
    """
    Estimate hero's equity against villain.

    Args:
        hero: Hero's hole cards, e.g. "AhKd"
        villain: Villain's hole cards
        board: 0, 3, 4 or 5 community cards
        iterations: Number of trials; defaults to equity.default_iterations
        seed: Master seed for reproducible results
        deadline: Wall-clock budget in seconds; defaults to equity.deadline_seconds
        workers: Pool size; defaults to equity.workers

    Returns:
        EquityResult, or None when the input is invalid
    """
    cfg = get_config()['equity']

    hero_cards = parse_card_string(hero)
    villain_cards = parse_card_string(villain)
    board_cards = parse_card_string(board or '')

    if hero_cards is None or villain_cards is None or board_cards is None:
        logger.debug(f"Unparseable cards: {hero!r} vs {villain!r} on {board!r}")
        return None
    if len(hero_cards) != 2 or len(villain_cards) != 2:
        return None
    if len(board_cards) not in VALID_BOARD_SIZES:
        return None
    if has_duplicates(hero_cards + villain_cards + board_cards):
        return None

    if iterations is None:
        iterations = cfg['default_iterations']
    if iterations <= 0:
        return None
    if iterations > cfg['max_iterations']:
        logger.warning(f"Capping {iterations} iterations at {cfg['max_iterations']}")
        iterations = cfg['max_iterations']

    raw_hero, raw_villain, raw_board = to_raw(hero_cards), to_raw(villain_cards), to_raw(board_cards)
    deck = to_raw(make_deck(hero_cards + villain_cards + board_cards))
    truncated = False

    if len(board_cards) == 5:
        # Nothing left to deal; one evaluation stands for every trial
        w, t, l = run_batch(raw_hero, raw_villain, raw_board, deck, 1, 0)
        wins, ties, losses = w * iterations, t * iterations, l * iterations
    else:
        wins, ties, losses, truncated = _simulate(
            raw_hero, raw_villain, raw_board, deck, iterations, seed,
            deadline if deadline is not None else cfg['deadline_seconds'],
            workers or cfg['workers'],
            cfg['batch_size'],
            cfg['executor'],
        )

    n = wins + ties + losses
    if n == 0:
        logger.warning("Equity deadline passed before any trial completed")
        return None

    result = EquityResult(
        hero_equity=round((wins + ties / 2) / n * 100, 2),
        villain_equity=round((losses + ties / 2) / n * 100, 2),
        tie_equity=round(ties / n * 100, 2),
        street=STREET_BY_BOARD[len(board_cards)],
        hero_hand=[str(c) for c in hero_cards],
        villain_hand=[str(c) for c in villain_cards],
        board=[str(c) for c in board_cards],
        iterations=n,
        truncated=truncated,
    )
    logger.debug(f"{hero} vs {villain} [{board}]: {result.hero_equity}/{result.villain_equity}/{result.tie_equity}")
    return result


def _simulate(hero, villain, board, deck, iterations, seed, deadline, workers, batch_size, executor):
    master = random.Random(seed)
    sizes = _batches(iterations, batch_size)
    seeds = [master.randrange(2 ** 32) for _ in sizes]
    stop_at = time.time() + deadline if deadline else None

    pool_cls = ProcessPoolExecutor if executor == 'process' else ThreadPoolExecutor
    wins = ties = losses = 0
    truncated = False

    with pool_cls(max_workers=workers) as pool:
        futures = [
            pool.submit(run_batch, hero, villain, board, deck, size, batch_seed, stop_at)
            for size, batch_seed in zip(sizes, seeds)
        ]
        _, pending = wait(futures, timeout=deadline or None)
        for future in pending:
            if future.cancel():
                truncated = True

        for future in futures:
            if future.cancelled():
                continue
            w, t, l = future.result()
            wins, ties, losses = wins + w, ties + t, losses + l

    if wins + ties + losses < iterations:
        truncated = True
        logger.warning(f"Equity deadline hit after {wins + ties + losses}/{iterations} trials")

    return wins, ties, losses, truncated
