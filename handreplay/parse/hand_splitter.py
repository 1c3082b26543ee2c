"""
Hand splitter module - splits a pasted blob into individual poker hands.

Boundaries come from recognising each room's header line, so hands pasted back
to back without blank lines still split correctly.
"""
import re
import logging
from typing import List, Optional

from ..config import get_config
from ..errors import ErrorCode, ParseError, Result, ValidationError

logger = logging.getLogger(__name__)

# Header signatures, each capturing the hand id
HEADER_PATTERNS = [
    r'^PokerStars\s+(?:Zoom\s+|Home\s+Game\s+)?(?:Hand|Game)\s+#(\d+)',
    r'^(?:GGPoker\s+Hand|Poker\s+Hand)\s+#([A-Za-z0-9]+)',
    r'^Game\s+ID:\s*#?([A-Za-z0-9]+)',
    r'^PartyPoker\s+Hand\s+#(\d+)',
    r'^\*{5}\s*Hand\s+History\s+for\s+Game\s+(\d+)',
    r'^(?:Ignition|Bovada)\s+Hand\s+#(\d+)',
    r'^#Game\s+No\s*:\s*(\d+)',
    r'^\*{5}\s*888poker\s+Hand\s+History\s+for\s+Game\s+(\d+)',
]

HAND_HEADER = re.compile('|'.join(f'(?:{p})' for p in HEADER_PATTERNS), re.IGNORECASE)

# 888poker prints "#Game No : N" followed by its banner line
_888_FIRST = re.compile(r'^#Game\s+No\s*:', re.IGNORECASE)
_888_BANNER = re.compile(r'^\*{5}\s*888poker\s+Hand\s+History', re.IGNORECASE)

_SEAT_LINE = re.compile(r'^Seat\s*\+?\s*\d+\s*:', re.MULTILINE | re.IGNORECASE)


def _clean_line(line: str) -> str:
    return line.lstrip('\ufeff').strip()


def is_hand_start(line: str) -> bool:
    """Check if a line is the header line of a new hand."""
    return bool(HAND_HEADER.match(_clean_line(line)))


def extract_hand_id(text: str) -> Optional[str]:
    """Return the hand id from the first header line found in text."""
    for line in text.splitlines():
        match = HAND_HEADER.match(_clean_line(line))
        if match:
            return next(g for g in match.groups() if g is not None)
    return None


def count_hand_headers(text: str) -> int:
    """Number of distinct hands announced by header lines."""
    count = 0
    previous = ''
    for line in text.splitlines():
        line = _clean_line(line)
        if not line:
            continue
        if HAND_HEADER.match(line) and not (_888_BANNER.match(line) and _888_FIRST.match(previous)):
            count += 1
        previous = line
    return count


def _continues_header(current: List[str], line: str) -> bool:
    content = [l for l in current if l.strip()]
    return (
        len(content) == 1
        and bool(_888_FIRST.match(_clean_line(content[0])))
        and bool(_888_BANNER.match(_clean_line(line)))
    )


def has_essential_elements(hand_text: str) -> bool:
    """A complete hand has a header and at least one seat line."""
    return bool(_SEAT_LINE.search(hand_text))


def split_hands(content: str, min_hand_length: Optional[int] = None) -> Result[List[str]]:
    """
    Split text into individual hand histories.

    Args:
        content: Raw text holding 0..N concatenated hands
        min_hand_length: Chunks shorter than this are discarded as garbled

    Returns:
        Result with the ordered hand texts and discard warnings, or a
        validation failure when nothing hand-like was found
    """
    if not content or not content.strip():
        return Result.failure(ValidationError(
            ErrorCode.VALIDATION_EMPTY_INPUT,
            "No hand history text provided",
        ))

    if min_hand_length is None:
        min_hand_length = get_config()['splitter']['min_hand_length']

    chunks: List[List[str]] = []
    current: Optional[List[str]] = None
    preamble = 0

    for line in content.splitlines():
        if is_hand_start(line):
            if current is not None and _continues_header(current, line):
                current.append(line)
                continue
            if current is not None:
                chunks.append(current)
            current = [line]
        elif current is None:
            if line.strip():
                preamble += 1
        else:
            current.append(line)

    if current is not None:
        chunks.append(current)

    warnings = []
    if preamble:
        warnings.append(ParseError.warning(
            ErrorCode.PARSE_MALFORMED_LINE,
            f"Ignored {preamble} line(s) before the first hand header",
            details={'lines': preamble},
            context='splitter',
        ))

    hands = []
    for index, chunk in enumerate(chunks):
        hand_text = '\n'.join(l.rstrip() for l in chunk).strip().lstrip('\ufeff')
        hand_id = extract_hand_id(hand_text)

        if len(hand_text) < min_hand_length or not has_essential_elements(hand_text):
            logger.debug(f"Discarding partial hand #{index} (id={hand_id}, {len(hand_text)} chars)")
            warnings.append(ParseError.warning(
                ErrorCode.PARSE_MALFORMED_LINE,
                f"Discarded incomplete hand {hand_id or index}",
                details={'index': index, 'hand_id': hand_id, 'length': len(hand_text)},
                context='splitter',
            ))
            continue

        hands.append(hand_text)

    logger.info(f"Split content into {len(hands)} hands ({len(chunks) - len(hands)} discarded)")

    if not hands:
        return Result.failure(ValidationError(
            ErrorCode.VALIDATION_INVALID_FORMAT,
            "No recognisable hand histories found",
            details={'chunks': len(chunks)},
            context='splitter',
        ), warnings)

    return Result.success(hands, warnings)
