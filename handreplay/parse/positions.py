"""Seat position labels relative to the button."""
from typing import Dict, List, Optional

# Labels clockwise from the button, by number of players dealt in
POSITION_TABLES = {
    2: ['BTN', 'BB'],
    3: ['BTN', 'SB', 'BB'],
    4: ['BTN', 'SB', 'BB', 'UTG'],
    5: ['BTN', 'SB', 'BB', 'UTG', 'CO'],
    6: ['BTN', 'SB', 'BB', 'UTG', 'MP', 'CO'],
    7: ['BTN', 'SB', 'BB', 'UTG', 'MP', 'HJ', 'CO'],
    8: ['BTN', 'SB', 'BB', 'UTG', 'UTG+1', 'MP', 'HJ', 'CO'],
    9: ['BTN', 'SB', 'BB', 'UTG', 'UTG+1', 'MP', 'MP+1', 'HJ', 'CO'],
    10: ['BTN', 'SB', 'BB', 'UTG', 'UTG+1', 'UTG+2', 'MP', 'MP+1', 'HJ', 'CO'],
}


def assign_positions(seats: List[int], button_seat: Optional[int]) -> Dict[int, str]:
    """
    Map occupied seat numbers to position labels.

    Seats are walked clockwise starting at the button. Returns an empty mapping
    when the button is unknown or not among the occupied seats.
    """
    ordered = sorted(seats)
    table = POSITION_TABLES.get(len(ordered))
    if not table or button_seat not in ordered:
        return {}

    start = ordered.index(button_seat)
    rotated = ordered[start:] + ordered[:start]
    return {seat: table[i] for i, seat in enumerate(rotated)}
