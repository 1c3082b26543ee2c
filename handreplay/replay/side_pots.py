"""
Side pot construction and rake split.

Pots are rebuilt from each player's total swept contribution rather than
patched incrementally, so a returned uncalled bet or a late all-in simply
produces a new set of levels.
"""
import logging
from typing import Collection, Dict, List

from .schemas import Pot

logger = logging.getLogger(__name__)


def contribution_levels(contributions: Dict[str, int], folded: Collection[str]) -> List[int]:
    """Distinct positive contributions of players still in the hand, ascending."""
    return sorted({c for p, c in contributions.items() if p not in folded and c > 0})


def build_pots(
    contributions: Dict[str, int],
    folded: Collection[str],
    order: List[str],
    antes: int = 0,
) -> List[Pot]:
    """
    Split swept contributions into a main pot and side pots.

    Args:
        contributions: Chips each player has put in over all swept streets,
            antes excluded
        folded: Players who have folded; their chips stay in as dead money
        order: Seat order, used to order eligible players
        antes: Total ante and dead blind money, always added to the main pot

    Returns:
        Pots ordered main first. Each pot's eligible players are the live
        players whose contribution reaches that pot's level.
    """
    levels = contribution_levels(contributions, folded)
    live = [p for p in order if p not in folded]

    pots: List[Pot] = []
    previous = 0
    for level in levels:
        amount = sum(min(c, level) - min(c, previous) for c in contributions.values())
        eligible = [p for p in live if contributions.get(p, 0) >= level]
        pots.append(Pot(amount=amount, eligible_players=eligible, is_main=not pots))
        previous = level

    # Folded chips above the highest live level
    excess = sum(max(c - previous, 0) for p, c in contributions.items() if p in folded)

    if not pots and (antes or excess):
        return [Pot(amount=antes + excess, eligible_players=live, is_main=True)]

    if excess:
        last = pots[-1]
        pots[-1] = Pot(amount=last.amount + excess, eligible_players=last.eligible_players, is_main=last.is_main)

    if antes and pots:
        main = pots[0]
        pots[0] = Pot(amount=main.amount + antes, eligible_players=main.eligible_players, is_main=True)

    return pots


def distribute_rake(amounts: List[int], rake: int) -> List[int]:
    """
    Share of the rake taken from each pot, proportional to pot size.

    Each share is floored; whatever is left over comes out of the last pot.
    """
    if rake <= 0 or not amounts:
        return [0] * len(amounts)

    total = sum(amounts)
    if total <= 0:
        return [0] * len(amounts)

    shares = [rake * a // total for a in amounts]
    shares[-1] += rake - sum(shares)
    return shares


def apply_rake(pots: List[Pot], rake: int) -> List[Pot]:
    """Return pots with the rake taken out."""
    shares = distribute_rake([p.amount for p in pots], rake)
    return [
        Pot(amount=p.amount - share, eligible_players=p.eligible_players, is_main=p.is_main)
        for p, share in zip(pots, shares)
    ]
