"""
Utility functions for hand history parsing.
Provides amount cleaning, card tokens, timestamps and name normalisation.
"""

import re
import logging
from typing import List, Optional

from .schemas import Card

logger = logging.getLogger(__name__)

SUIT_GLYPHS = {
    '♠': 's', '♣': 'c', '♥': 'h', '♦': 'd',
    '♤': 's', '♧': 'c', '♡': 'h', '♢': 'd'
}

CARD_TOKEN = re.compile(r'^(10|[2-9TJQKA])([shdc])$', re.IGNORECASE)


def clean_amount(s: str) -> Optional[float]:
    """
    Clean and normalize monetary amounts from various formats.

    Handles:
    - Comma as thousands separator: "1,234.56" -> 1234.56
    - Comma as decimal separator: "1234,56" -> 1234.56
    - Currency symbols and codes: "$100", "€100", "10 USD"
    - Parentheses and brackets: "(1234)", "[1234]" -> 1234
    """
    if not s:
        return None

    s = re.sub(r'[$€£¥₹¢]', '', s)
    s = re.sub(r'\b(?:USD|EUR|GBP|CAD|chips?)\b', '', s, flags=re.IGNORECASE)
    s = s.strip().strip('()[]').strip()

    if not s:
        return None

    try:
        if ',' in s and '.' not in s:
            parts = s.split(',')
            if len(parts) == 2 and len(parts[1]) <= 2:
                s = s.replace(',', '.')
            else:
                s = s.replace(',', '')
        elif ',' in s and '.' in s:
            s = s.replace(',', '')

        s = s.replace(' ', '')
        return float(s)
    except ValueError:
        logger.debug(f"Could not parse amount: {s}")
        return None


def clean_european_amount(s: str) -> Optional[float]:
    """
    Parse amounts written with a dot as thousands separator.

    "10.000" -> 10000, "1.234,56" -> 1234.56, "0.02" -> 0.02
    """
    if not s:
        return None

    clean = re.sub(r'[$€£¥]', '', s).strip().strip('()[]').strip()
    if ',' in clean:
        clean = clean.replace('.', '').replace(',', '.')
    elif '.' in clean:
        parts = clean.split('.')
        if len(parts) > 1 and len(parts[-1]) == 3:
            clean = clean.replace('.', '')

    try:
        return float(clean)
    except ValueError:
        logger.debug(f"Could not parse amount: {s}")
        return None
