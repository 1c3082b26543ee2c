"""
Pydantic schemas for hand replay frames.
All amounts are integers in the replay unit (chips, or cents for cash games).
"""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict

from ..parse.schemas import Card, Street

ReplayUnit = Literal["chips", "cents"]


class Pot(BaseModel):
    """A pot and the players who can still win it."""
    model_config = ConfigDict(frozen=True)

    amount: int
    eligible_players: List[str]
    is_main: bool = False


class Snapshot(BaseModel):
    """One replay frame. Never mutated once built."""
    model_config = ConfigDict(frozen=True)

    id: int
    street: Street
    action_index: int
    description: str

    pots: List[Pot] = []
    pending_contribs: Dict[str, int] = {}
    total_displayed_pot: int = 0

    player_stacks: Dict[str, int]
    players_order: List[str]
    folded: List[str] = []
    active_player: Optional[str] = None
    last_aggressor: Optional[str] = None
    community_cards: List[Card] = []

    # Only on the showdown frame
    revealed_hands: Optional[Dict[str, List[Card]]] = None
    winners: Optional[List[str]] = None
    payouts: Optional[Dict[str, int]] = None
    rake: int = 0

    @property
    def pot_total(self) -> int:
        return sum(p.amount for p in self.pots)


class ReplayResult(BaseModel):
    """Ordered frames for one hand plus replay metadata."""
    snapshots: List[Snapshot]
    warnings: List[str] = []
    unit: ReplayUnit = "chips"
    bookmarks: Dict[str, int] = {}

    def __len__(self) -> int:
        return len(self.snapshots)

    @property
    def final(self) -> Snapshot:
        return self.snapshots[-1]
