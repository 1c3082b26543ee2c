"""Base parser class for all poker site grammars."""
import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from ...errors import ErrorCode, HandReplayError, ParseError, Result
from ..positions import assign_positions
from ..schemas import (
    BETTING_STREETS, Action, Card, GameContext, HandHistory, Player,
    ShowdownSummary, StreetInfo, TournamentEvent,
)
from ..utils import clean_amount, normalize_player_name, parse_cards

logger = logging.getLogger(__name__)


@dataclass
class ParseState:
    """Everything collected while reading one hand. Created per parse call."""
    text: str
    lines: List[str]
    header: Dict[str, object] = field(default_factory=dict)
    seats: List[Dict[str, object]] = field(default_factory=list)
    button_seat: Optional[int] = None
    max_players: Optional[int] = None
    hero: Optional[str] = None
    hole_cards: Dict[str, List[Card]] = field(default_factory=dict)
    antes: List[Action] = field(default_factory=list)
    streets: Dict[str, StreetInfo] = field(
        default_factory=lambda: {name: StreetInfo() for name in BETTING_STREETS}
    )
    street: Optional[str] = None
    winnings: Dict[str, float] = field(default_factory=dict)
    shown: Dict[str, List[Card]] = field(default_factory=dict)
    mucked: List[str] = field(default_factory=list)
    side_pots: List[float] = field(default_factory=list)
    total_pot: Optional[float] = None
    rake: Optional[float] = None
    events: List[TournamentEvent] = field(default_factory=list)
    warnings: List[HandReplayError] = field(default_factory=list)
    line_no: int = 0

    @property
    def names(self) -> List[str]:
        return [s['name'] for s in self.seats]


class BaseParser(ABC):
    """
    Abstract base class for site-specific grammars.

    Subclasses implement :meth:`_parse_header`, :meth:`_parse_body` and
    :meth:`game_context`; the shared helpers here turn matched lines into
    canonical actions and collect recoverable warnings. Instances carry no
    per-hand state, so one parser can be reused across threads.
    """

    site_name = "unknown"
    currency_symbols = ['$', '€', '£']

    def parse(self, hand_text: str) -> Result[HandHistory]:
        """Parse one hand's raw text into a HandHistory."""
        lines = [line.rstrip() for line in hand_text.strip().splitlines()]
        state = ParseState(text=hand_text, lines=lines)
        try:
            self._parse_header(state)
            self._parse_body(state)
            hand = self._finalize(state)
        except ParseError as e:
            logger.warning(f"{self.site_name}: {e}")
            return Result.failure(e, state.warnings)
        return Result.success(hand, state.warnings)

    @abstractmethod
    def _parse_header(self, state: ParseState) -> None:
        """Fill state.header with hand id, stakes, timestamp and level."""

    @abstractmethod
    def _parse_body(self, state: ParseState) -> None:
        """Read seats, posts, streets and summary lines."""

    @abstractmethod
    def game_context(self, header_line: str) -> GameContext:
        """Detect tournament vs cash from the header line."""

    # ------------------------------------------------------------------
    # Shared helpers

    def fail(self, code: ErrorCode, message: str, state: ParseState, **details) -> ParseError:
        details.setdefault('line', state.line_no + 1)
        return ParseError(code, message, details=details, context=self.site_name)

    def warn(self, state: ParseState, code: ErrorCode, message: str, **details) -> None:
        details.setdefault('line', state.line_no + 1)
        logger.debug(f"{self.site_name} line {details['line']}: {message}")
        state.warnings.append(ParseError.warning(code, message, details=details, context=self.site_name))

    def parse_amount(self, text: Optional[Union[str, float]]) -> Optional[float]:
        """Parse monetary amount from text, removing currency symbols."""
        if text is None:
            return None
        if isinstance(text, (int, float)):
            return float(text)
        return clean_amount(text)

    def clean_player_name(self, name: str) -> str:
        return normalize_player_name(name)

    def add_seat(
        self,
        state: ParseState,
        seat: int,
        name: str,
        stack_text: str,
        bounty_text: Optional[str] = None,
        sitting_out: bool = False,
        position: Optional[str] = None,
    ) -> None:
        stack = self.parse_amount(stack_text)
        if stack is None:
            self.warn(state, ErrorCode.PARSE_INVALID_AMOUNT, f"Bad stack for seat {seat}: {stack_text!r}")
            return
        state.seats.append({
            'seat': seat,
            'name': self.clean_player_name(name),
            'stack': stack,
            'bounty': self.parse_amount(bounty_text) if bounty_text else None,
            'sitting_out': sitting_out,
            'position': position,
        })

    def known_player(self, state: ParseState, name: str) -> Optional[str]:
        """Resolve name against the seat list, warning when it is absent."""
        name = self.clean_player_name(name)
        if name in state.names:
            return name
        self.warn(state, ErrorCode.PARSE_MISSING_PLAYER, f"Action by unknown player {name!r}", player=name)
        return None

    def add_action(
        self,
        state: ParseState,
        player: str,
        kind: str,
        amount: Optional[Union[str, float]] = None,
        to_amount: Optional[Union[str, float]] = None,
        all_in: bool = False,
        blind: Optional[str] = None,
        street: Optional[str] = None,
    ) -> None:
        name = self.known_player(state, player)
        if name is None:
            return

        value = None
        if amount is not None:
            value = self.parse_amount(amount)
            if value is None:
                self.warn(state, ErrorCode.PARSE_INVALID_AMOUNT, f"Bad amount {amount!r} for {name}")
                return
        target = None
        if to_amount is not None:
            target = self.parse_amount(to_amount)
            if target is None:
                self.warn(state, ErrorCode.PARSE_INVALID_AMOUNT, f"Bad amount {to_amount!r} for {name}")
                return

        action = Action(player=name, kind=kind, amount=value, to_amount=target, all_in=all_in, blind=blind)

        if kind == 'post-ante':
            state.antes.append(action)
            return

        street = street or state.street or 'preflop'
        state.streets[street].actions.append(action)

    def set_board(self, state: ParseState, street: str, cards_text: str) -> None:
        try:
            state.streets[street].cards = parse_cards(cards_text)
        except ValueError as e:
            self.warn(state, ErrorCode.PARSE_INVALID_CARD, str(e), street=street)
        state.street = street

    def attach_cards(self, state: ParseState, player: str, cards_text: str, shown: bool = True) -> None:
        """Record hole cards; shown cards also go into the showdown summary."""
        name = self.clean_player_name(player)
        if name not in state.names:
            self.warn(state, ErrorCode.PARSE_MISSING_PLAYER, f"Cards for unknown player {name!r}", player=name)
            return
        try:
            cards = parse_cards(cards_text)
        except ValueError as e:
            self.warn(state, ErrorCode.PARSE_INVALID_CARD, str(e), player=name)
            return
        if not cards:
            return
        state.hole_cards[name] = cards
        if shown:
            state.shown[name] = cards

    def add_winnings(self, state: ParseState, player: str, amount_text: str) -> None:
        name = self.known_player(state, player)
        amount = self.parse_amount(amount_text)
        if name is None:
            return
        if amount is None:
            self.warn(state, ErrorCode.PARSE_INVALID_AMOUNT, f"Bad collected amount {amount_text!r}")
            return
        state.winnings[name] = state.winnings.get(name, 0.0) + amount

    def add_event(self, state: ParseState, player: str, kind: str, amount_text: Optional[str] = None) -> None:
        amount = self.parse_amount(amount_text) if amount_text else None
        state.events.append(TournamentEvent(player=self.clean_player_name(player), kind=kind, amount=amount))

    def infer_button_from_small_blind(self, state: ParseState) -> Optional[int]:
        """Button sits immediately before the small blind among occupied seats."""
        for action in state.streets['preflop'].actions:
            if action.kind == 'post-blind' and action.blind == 'small':
                seats = sorted(s['seat'] for s in state.seats)
                sb_seat = next(s['seat'] for s in state.seats if s['name'] == action.player)
                idx = seats.index(sb_seat)
                if len(seats) == 2:
                    return sb_seat
                return seats[idx - 1]
        return None

    def _check_unique_cards(self, state: ParseState, board: List[Card]) -> None:
        """A card may appear once across the board and all hole cards."""
        seen: Dict[Card, str] = {}
        owners = [('board', board)] + list(state.hole_cards.items())
        for owner, cards in owners:
            for card in cards:
                if card in seen:
                    raise self.fail(
                        ErrorCode.PARSE_INVALID_CARD,
                        f"Card {card} dealt to both {seen[card]} and {owner}",
                        state,
                        card=str(card),
                    )
                seen[card] = owner

    # ------------------------------------------------------------------

    def _finalize(self, state: ParseState) -> HandHistory:
        header = state.header
        if not header.get('hand_id'):
            raise self.fail(ErrorCode.PARSE_INVALID_HEADER, "Missing hand id in header", state)
        if not state.seats:
            raise self.fail(ErrorCode.PARSE_MISSING_PLAYER, "No seats found", state)

        blinds = [a for a in state.streets['preflop'].actions if a.kind == 'post-blind']
        if not blinds:
            raise self.fail(ErrorCode.PARSE_MISSING_BLINDS, "No blinds posted", state)

        small_blind = header.get('small_blind') or next(
            (a.amount for a in blinds if a.blind == 'small'), 0.0)
        big_blind = header.get('big_blind') or next(
            (a.amount for a in blinds if a.blind == 'big'), 0.0)
        ante = header.get('ante') or max((a.amount or 0.0 for a in state.antes), default=0.0)

        if state.button_seat is None:
            state.button_seat = self.infer_button_from_small_blind(state)

        positions = assign_positions([s['seat'] for s in state.seats], state.button_seat)
        players = [
            Player(
                seat=s['seat'],
                name=s['name'],
                stack=s['stack'],
                position=s['position'] or positions.get(s['seat']),
                is_hero=s['name'] == state.hero,
                hole_cards=state.hole_cards.get(s['name']),
                bounty=s['bounty'],
                sitting_out=s['sitting_out'],
            )
            for s in state.seats
        ]

        board: List[Card] = []
        for name in ('flop', 'turn', 'river'):
            board.extend(state.streets[name].cards)
        self._check_unique_cards(state, board)

        showdown = None
        rake = state.rake or 0.0
        if state.winnings or state.shown:
            showdown = ShowdownSummary(
                winners=list(state.winnings),
                winnings=dict(state.winnings),
                pot_won=round(sum(state.winnings.values()), 2),
                side_pots=list(state.side_pots),
                shown_hands=dict(state.shown),
                mucked=list(state.mucked),
                rake=rake,
            )

        return HandHistory(
            hand_id=str(header['hand_id']),
            site=self.site_name,
            game_type=header.get('game_type') or "Hold'em",
            limit_type=header.get('limit_type') or "No Limit",
            stakes=header.get('stakes'),
            currency=header.get('currency'),
            tournament_id=header.get('tournament_id'),
            buy_in=header.get('buy_in'),
            tournament_level=header.get('level'),
            timestamp=header.get('timestamp'),
            table_name=header.get('table_name'),
            max_players=state.max_players or len(players),
            button_seat=state.button_seat,
            small_blind=small_blind or 0.0,
            big_blind=big_blind or 0.0,
            ante=ante or 0.0,
            players=players,
            hero=state.hero,
            antes=state.antes,
            streets=state.streets,
            board=board,
            total_pot=state.total_pot,
            rake=rake,
            showdown=showdown,
            game_context=header.get('game_context') or GameContext(),
            tournament_events=state.events,
        )


def first_line(text: str) -> str:
    for line in text.splitlines():
        if line.strip():
            return line.strip().lstrip('\ufeff')
    return ''


def sum_amounts(values) -> float:
    return round(sum(v for v in values if v is not None), 2)


FEE_PATTERN = re.compile(r'\|\s*(Rake|Jackpot|Bingo|Fortune|Tax)\s+([$€£]?[0-9][0-9,. ]*)', re.IGNORECASE)
