"""
Pydantic schemas for poker hand history parsing.
Defines the canonical, site-agnostic hand: cards, players, actions, streets.
"""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

RANKS = "23456789TJQKA"
SUITS = "shdc"
RANK_VALUES = {r: i + 2 for i, r in enumerate(RANKS)}  # 2..14

# Type definitions
Rank = Literal["2", "3", "4", "5", "6", "7", "8", "9", "T", "J", "Q", "K", "A"]
Suit = Literal["s", "h", "d", "c"]

ActionKind = Literal[
    "fold", "check", "call", "bet", "raise", "all-in",
    "post-blind", "post-ante", "uncalled-return",
]

# Actions that move chips from a stack towards the pot
CHIP_ACTIONS = ("call", "bet", "raise", "all-in", "post-blind", "post-ante")

Street = Literal["preflop", "flop", "turn", "river", "showdown"]
BETTING_STREETS = ("preflop", "flop", "turn", "river")

Site = Literal["pokerstars", "ggpoker", "partypoker", "ignition", "888poker"]

CurrencyUnit = Literal["chips", "dollars"]


class Card(BaseModel):
    """A single playing card. Equality is structural."""
    model_config = ConfigDict(frozen=True)

    rank: Rank
    suit: Suit

    @property
    def value(self) -> int:
        return RANK_VALUES[self.rank]

    @classmethod
    def from_str(cls, s: str) -> "Card":
        s = s.strip()
        if len(s) != 2:
            raise ValueError(f"Bad card string: {s!r}")
        return cls(rank=s[0].upper(), suit=s[1])

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"


class Player(BaseModel):
    """Static description of a seat, fixed once the hand is parsed."""
    model_config = ConfigDict(frozen=True)

    seat: int
    name: str
    stack: float
    position: Optional[str] = None
    is_hero: bool = False
    hole_cards: Optional[List[Card]] = None
    bounty: Optional[float] = None
    sitting_out: bool = False


class Action(BaseModel):
    """Represents a single player decision or forced post."""
    model_config = ConfigDict(frozen=True)

    player: str
    kind: ActionKind
    amount: Optional[float] = None       # Chips printed on the line
    to_amount: Optional[float] = None    # "raises X to Y" street total
    all_in: bool = False
    blind: Optional[Literal["small", "big", "dead"]] = None    # dead: goes to the main pot, not the street total


class StreetInfo(BaseModel):
    """Cards revealed on a street and the actions taken on it."""
    cards: List[Card] = []
    actions: List[Action] = []


class GameContext(BaseModel):
    is_tournament: bool = False
    currency_unit: CurrencyUnit = "chips"
    conversion_needed: bool = False


class TournamentEvent(BaseModel):
    player: str
    kind: Literal["rebuy", "addon", "bounty"]
    amount: Optional[float] = None


class ShowdownSummary(BaseModel):
    """Who won what, as reported by the room."""
    winners: List[str] = []
    winnings: Dict[str, float] = {}
    pot_won: float = 0.0
    side_pots: List[float] = []          # Main pot first, then side pots in order
    shown_hands: Dict[str, List[Card]] = {}
    mucked: List[str] = []
    rake: float = 0.0


class HandHistory(BaseModel):
    """Complete canonical hand. Built once by a site grammar, read-only afterwards."""
    model_config = ConfigDict(frozen=True)

    # Metadata
    hand_id: str
    site: Site
    game_type: str = "Hold'em"
    limit_type: str = "No Limit"
    stakes: Optional[str] = None
    currency: Optional[str] = None
    tournament_id: Optional[str] = None
    buy_in: Optional[str] = None
    tournament_level: Optional[str] = None
    timestamp: Optional[str] = None

    # Table info
    table_name: Optional[str] = None
    max_players: int
    button_seat: Optional[int] = None
    small_blind: float = 0.0
    big_blind: float = 0.0
    ante: float = 0.0

    # Players
    players: List[Player]
    hero: Optional[str] = None

    # Action
    antes: List[Action] = []
    streets: Dict[Street, StreetInfo]
    board: List[Card] = []

    # Summary
    total_pot: Optional[float] = None
    rake: float = 0.0
    showdown: Optional[ShowdownSummary] = None
    game_context: GameContext = Field(default_factory=GameContext)
    tournament_events: List[TournamentEvent] = []

    def player(self, name: str) -> Optional[Player]:
        for p in self.players:
            if p.name == name:
                return p
        return None

    def street(self, name: Street) -> StreetInfo:
        return self.streets.get(name) or StreetInfo()

    def all_actions(self) -> List[Action]:
        """Antes first, then every street's actions in order."""
        actions = list(self.antes)
        for name in BETTING_STREETS:
            actions.extend(self.street(name).actions)
        return actions

    @property
    def winners(self) -> List[str]:
        return list(self.showdown.winners) if self.showdown else []
