"""
Snapshot builder - replays a parsed hand into ordered frames.

The builder walks antes, blinds and each street's actions in file order,
emitting one frame per event plus a frame when a new street's cards appear
and a final showdown frame. Every frame is checked for pot conservation and
stack consistency; any bookkeeping problem aborts the whole replay.
"""
import logging
from typing import Dict, List, Optional, Tuple

from ..errors import ErrorCode, ErrorSeverity, HandReplayError, Result, SnapshotBuildError
from ..parse.schemas import CHIP_ACTIONS, Action, Card, HandHistory
from . import descriptions
from .schemas import Pot, ReplayResult, Snapshot
from .side_pots import apply_rake, build_pots

logger = logging.getLogger(__name__)

LATER_STREETS = ('flop', 'turn', 'river')

# (street, kind, payload) where kind is action | street | showdown
Event = Tuple[str, str, object]


def hand_events(hand: HandHistory) -> List[Event]:
    """Flatten a hand into the ordered event stream the builder replays."""
    events: List[Event] = [('preflop', 'action', a) for a in hand.antes]
    events.extend(('preflop', 'action', a) for a in hand.street('preflop').actions)

    for name in LATER_STREETS:
        info = hand.street(name)
        if not info.cards and not info.actions:
            continue
        events.append((name, 'street', info.cards))
        events.extend((name, 'action', a) for a in info.actions)

    if hand.showdown and hand.showdown.winnings:
        events.append(('showdown', 'showdown', None))
    return events


class SnapshotBuilder:
    """Replay state for one hand. Create one per hand."""

    def __init__(self, hand: HandHistory):
        self.hand = hand
        self.unit = 'cents' if hand.game_context.conversion_needed else 'chips'
        self.order = [p.name for p in sorted(hand.players, key=lambda p: p.seat)]

        self.starting = {p.name: self.to_units(p.stack) for p in hand.players}
        self.stacks = dict(self.starting)
        self.pending = {name: 0 for name in self.order}
        self.swept = {name: 0 for name in self.order}
        # Antes and dead blinds, paid straight into the main pot
        self.dead = {name: 0 for name in self.order}
        self.folded: List[str] = []
        self.pots: List[Pot] = []

        self.street = 'preflop'
        self.board: List[Card] = []
        self.last_aggressor: Optional[str] = None

        self.snapshots: List[Snapshot] = []
        self.bookmarks: Dict[str, int] = {}
        self.warnings: List[HandReplayError] = []

    def to_units(self, value: Optional[float]) -> int:
        if value is None:
            return 0
        if self.unit == 'cents':
            return int(round(value * 100))
        return int(round(value))

    def error(self, code: ErrorCode, message: str, **details) -> SnapshotBuildError:
        details.setdefault('hand_id', self.hand.hand_id)
        details.setdefault('frame', len(self.snapshots))
        return SnapshotBuildError(code, message, details=details, context='replay')

    # ------------------------------------------------------------------

    def build(self) -> ReplayResult:
        self.emit(-1, descriptions.describe_start(self.hand.hand_id, len(self.order)))

        for index, (street, kind, payload) in enumerate(hand_events(self.hand)):
            if kind == 'street':
                self.begin_street(index, street, payload)
            elif kind == 'showdown':
                self.showdown(index)
            else:
                self.apply_action(index, payload)

        if not self.hand.showdown or not self.hand.showdown.winnings:
            self.warnings.append(HandReplayError(
                ErrorCode.VALIDATION_MISSING_REQUIRED,
                "Hand has no showdown winnings; replay ends without a showdown frame",
                severity=ErrorSeverity.WARNING,
                is_recoverable=True,
                details={'hand_id': self.hand.hand_id},
                context='replay',
            ))

        return ReplayResult(
            snapshots=self.snapshots,
            warnings=[str(w) for w in self.warnings],
            unit=self.unit,
            bookmarks=self.bookmarks,
        )

    def apply_action(self, index: int, action: Action) -> None:
        name = action.player
        if name not in self.stacks:
            raise self.error(ErrorCode.SNAPSHOT_MISSING_PLAYER, f"{name} is not seated", player=name)
        if name in self.folded:
            raise self.error(ErrorCode.SNAPSHOT_INVALID_ACTION, f"{name} acts after folding", player=name)

        printed = self.to_units(action.amount) if action.amount is not None else None
        target = self.to_units(action.to_amount) if action.to_amount is not None else None
        delta = 0

        if action.kind == 'post-ante' or action.blind == 'dead':
            delta = printed or 0
            if action.kind == 'post-ante' and delta > self.starting[name]:
                raise self.error(
                    ErrorCode.SNAPSHOT_INCONSISTENT_STACKS,
                    f"Ante {delta} exceeds {name}'s starting stack {self.starting[name]}",
                    player=name,
                )
            self.take_chips(name, delta)
            self.dead[name] += delta
            self.rebuild_pots()

        elif action.kind in CHIP_ACTIONS:
            delta = self.chip_delta(action, printed, target)
            previous_high = max(self.pending.values(), default=0)
            self.take_chips(name, delta)
            self.pending[name] += delta
            if action.kind in ('bet', 'raise') or (
                action.kind == 'all-in' and self.pending[name] > previous_high
            ):
                self.last_aggressor = name

        elif action.kind == 'fold':
            self.folded.append(name)

        elif action.kind == 'uncalled-return':
            delta = printed or 0
            self.return_uncalled(name, delta)

        text = descriptions.describe_action(action, delta, self.unit, printed, target)
        self.emit(index, text, active=name)

    def chip_delta(self, action: Action, printed: Optional[int], target: Optional[int]) -> int:
        name = action.player
        if action.kind in ('raise', 'all-in') and target is not None:
            delta = target - self.pending[name]
        elif printed is not None:
            delta = printed
        elif action.kind == 'all-in':
            delta = self.stacks[name]
        else:
            raise self.error(ErrorCode.SNAPSHOT_INVALID_ACTION, f"{action.kind} by {name} has no amount", player=name)

        if delta < 0:
            raise self.error(
                ErrorCode.SNAPSHOT_INVALID_ACTION,
                f"{action.kind} by {name} would move {delta} chips",
                player=name,
            )
        return delta

    def take_chips(self, name: str, amount: int) -> None:
        self.stacks[name] -= amount
        if self.stacks[name] < 0:
            raise self.error(
                ErrorCode.SNAPSHOT_NEGATIVE_STACK,
                f"{name}'s stack would drop to {self.stacks[name]}",
                player=name,
            )

    def return_uncalled(self, name: str, amount: int) -> None:
        committed = self.pending[name] + self.swept[name]
        if amount > committed:
            raise self.error(
                ErrorCode.SNAPSHOT_INVALID_ACTION,
                f"Returning {amount} to {name} who only committed {committed}",
                player=name,
            )
        from_pending = min(amount, self.pending[name])
        self.pending[name] -= from_pending
        from_swept = amount - from_pending
        if from_swept:
            self.swept[name] -= from_swept
            self.rebuild_pots()
        self.stacks[name] += amount

    def sweep(self) -> None:
        for name, amount in self.pending.items():
            self.swept[name] += amount
            self.pending[name] = 0
        self.rebuild_pots()

    def rebuild_pots(self) -> None:
        self.pots = build_pots(self.swept, self.folded, self.order, antes=sum(self.dead.values()))

    def begin_street(self, index: int, street: str, cards: List[Card]) -> None:
        self.sweep()
        self.street = street
        self.board.extend(cards)
        self.last_aggressor = None
        self.emit(index, descriptions.describe_street(street, cards))

    def showdown(self, index: int) -> None:
        self.sweep()
        self.street = 'showdown'
        summary = self.hand.showdown

        committed = sum(self.swept.values()) + sum(self.dead.values())
        rake = self.to_units(self.hand.rake or summary.rake)
        if rake > committed:
            raise self.error(ErrorCode.SNAPSHOT_POT_MISMATCH, f"Rake {rake} exceeds pot {committed}")
        pots = apply_rake(self.pots, rake)
        if any(p.amount < 0 for p in pots):
            raise self.error(
                ErrorCode.SNAPSHOT_INVALID_POT,
                f"Rake {rake} does not fit pots {[p.amount for p in self.pots]}",
            )

        payouts: Dict[str, int] = {}
        for name in summary.winners or list(summary.winnings):
            if name not in self.stacks:
                raise self.error(ErrorCode.SNAPSHOT_MISSING_PLAYER, f"Winner {name} is not seated", player=name)
            payouts[name] = self.to_units(summary.winnings.get(name, 0.0))

        distributable = committed - rake
        if sum(payouts.values()) != distributable:
            raise self.error(
                ErrorCode.SNAPSHOT_POT_MISMATCH,
                f"Payouts {sum(payouts.values())} do not match pot {committed} minus rake {rake}",
                payouts=payouts,
                distributable=distributable,
            )

        for name, amount in payouts.items():
            self.stacks[name] += amount

        revealed: Dict[str, List[Card]] = {}
        for name in self.order:
            player = self.hand.player(name)
            if name in summary.shown_hands:
                revealed[name] = list(summary.shown_hands[name])
            elif name not in self.folded and player.hole_cards:
                revealed[name] = list(player.hole_cards)

        # Winners have been paid, so every pot is listed empty
        paid = [Pot(amount=0, eligible_players=p.eligible_players, is_main=p.is_main) for p in pots]
        self.emit(
            index,
            descriptions.describe_showdown(payouts, self.unit),
            pots=paid,
            rake=rake,
            payouts=payouts,
            winners=list(payouts),
            revealed_hands=revealed,
        )

    # ------------------------------------------------------------------

    def check(self, pots: List[Pot], rake: int, payouts: Optional[Dict[str, int]]) -> None:
        expected = sum(self.swept.values()) + sum(self.dead.values()) - rake - sum((payouts or {}).values())
        pot_total = sum(p.amount for p in pots)
        if pot_total != expected or any(p.amount < 0 for p in pots):
            raise self.error(
                ErrorCode.SNAPSHOT_INVALID_POT,
                f"Pots hold {pot_total} but {expected} should remain",
            )

        for name in self.order:
            if self.stacks[name] < 0:
                raise self.error(ErrorCode.SNAPSHOT_NEGATIVE_STACK, f"{name} has a negative stack", player=name)
            accounted = self.stacks[name] + self.pending[name] + self.swept[name] + self.dead[name]
            accounted -= (payouts or {}).get(name, 0)
            if accounted != self.starting[name]:
                raise self.error(
                    ErrorCode.SNAPSHOT_INCONSISTENT_STACKS,
                    f"{name}: stack and commitments total {accounted}, started with {self.starting[name]}",
                    player=name,
                )

    def emit(self, action_index: int, description: str, active: Optional[str] = None, **showdown) -> None:
        pots = showdown.pop('pots', self.pots)
        rake = showdown.pop('rake', 0)
        self.check(pots, rake, showdown.get('payouts'))

        snapshot = Snapshot(
            id=len(self.snapshots),
            street=self.street,
            action_index=action_index,
            description=description,
            pots=list(pots),
            pending_contribs=dict(self.pending),
            total_displayed_pot=sum(p.amount for p in pots) + sum(self.pending.values()),
            player_stacks=dict(self.stacks),
            players_order=list(self.order),
            folded=[name for name in self.order if name in self.folded],
            active_player=active,
            last_aggressor=self.last_aggressor,
            community_cards=list(self.board),
            rake=rake,
            **showdown,
        )
        self.bookmarks.setdefault(self.street, snapshot.id)
        self.snapshots.append(snapshot)
        logger.debug(f"#{snapshot.id} [{snapshot.street}] {description}")


def build_snapshots(hand: HandHistory) -> Result[ReplayResult]:
    """
    Replay a parsed hand into snapshots.

    Returns:
        Result with the ReplayResult, or the SnapshotBuildError that stopped
        the replay. A failed replay carries no snapshots.
    """
    builder = SnapshotBuilder(hand)
    try:
        replay = builder.build()
    except SnapshotBuildError as e:
        logger.error(f"Replay of hand {hand.hand_id} aborted: {e}")
        return Result.failure(e, builder.warnings)
    return Result.success(replay, builder.warnings)
