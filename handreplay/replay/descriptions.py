"""Human-readable text for replay frames."""
from typing import Dict, List, Optional

from ..parse.schemas import Action, Card
from .schemas import ReplayUnit


def format_amount(units: int, unit: ReplayUnit) -> str:
    """Chips print as integers, cents print as dollars."""
    if unit == "cents":
        return f"${units / 100:.2f}"
    return str(units)


def describe_start(hand_id: str, players: int) -> str:
    return f"Hand #{hand_id}: {players} players"


def describe_street(street: str, cards: List[Card]) -> str:
    return f"{street.capitalize()}: {' '.join(str(c) for c in cards)}".rstrip()


def describe_action(
    action: Action,
    delta: int,
    unit: ReplayUnit,
    printed: Optional[int] = None,
    target: Optional[int] = None,
) -> str:
    """
    Describe one action.

    Args:
        action: The parsed action
        delta: Chips actually moved by the action
        unit: Replay unit used for formatting
        printed: The amount printed on the line, converted
        target: The "raised to" total, converted
    """
    name = action.player
    amount = format_amount(delta, unit)

    if action.kind == 'fold':
        return f"{name} folds"
    if action.kind == 'check':
        return f"{name} checks"
    if action.kind == 'call':
        return f"{name} calls {amount}"
    if action.kind == 'bet':
        return f"{name} bets {amount}"
    if action.kind == 'raise':
        if target is not None:
            return f"{name} raises {format_amount(printed if printed is not None else delta, unit)} to {format_amount(target, unit)}"
        return f"{name} raises {amount}"
    if action.kind == 'all-in':
        return f"{name} goes all-in for {amount}"
    if action.kind == 'post-blind':
        label = f"{action.blind} blind " if action.blind else ""
        return f"{name} posts {label}{amount}"
    if action.kind == 'post-ante':
        return f"{name} posts ante {amount}"
    if action.kind == 'uncalled-return':
        return f"Uncalled bet ({amount}) returned to {name}"
    return f"{name} {action.kind}"


def describe_showdown(payouts: Dict[str, int], unit: ReplayUnit) -> str:
    wins = ', '.join(f"{name} wins {format_amount(amount, unit)}" for name, amount in payouts.items())
    return f"Showdown: {wins}" if wins else "Showdown"
