"""
Main orchestrator for parsing poker hand histories.
Coordinates validation, splitting and site detection across formats.
"""

import logging
from pathlib import Path
from typing import Dict, List, Sequence, Union

from ..errors import ErrorCode, HandReplayError, Result, ValidationError
from .hand_splitter import count_hand_headers, extract_hand_id, split_hands
from .schemas import HandHistory
from .site_parsers.site_detector import parse_hand_text

logger = logging.getLogger(__name__)


def validate_single_hand(text: str) -> Result[str]:
    """
    Check that text holds exactly one hand before handing it to a grammar.

    Returns:
        Result with the stripped text, or VALIDATION_EMPTY_INPUT /
        VALIDATION_MULTIPLE_HANDS
    """
    if not text or not text.strip():
        return Result.failure(ValidationError(
            ErrorCode.VALIDATION_EMPTY_INPUT,
            "No hand history text provided",
        ))

    headers = count_hand_headers(text)
    if headers > 1:
        return Result.failure(ValidationError(
            ErrorCode.VALIDATION_MULTIPLE_HANDS,
            f"Expected a single hand but found {headers} hand headers",
            details={'count': headers},
        ))

    return Result.success(text.strip().lstrip('\ufeff'))


def parse_hand(text: str) -> Result[HandHistory]:
    """Validate and parse a single hand history."""
    validated = validate_single_hand(text)
    if not validated.ok:
        return Result.failure(validated.error)
    return parse_hand_text(validated.value)


def parse_multiple_hands(text: str) -> Result[List[HandHistory]]:
    """
    Split a blob into hands and parse each one.

    A hand that fails to parse does not fail the batch: its error is kept in
    the warnings, tagged with the hand's index and id. The batch fails only
    when splitting fails.
    """
    split = split_hands(text)
    if not split.ok:
        return Result.failure(split.error, split.warnings)

    hands: List[HandHistory] = []
    warnings: List[HandReplayError] = list(split.warnings)

    for index, hand_text in enumerate(split.value):
        result = parse_hand_text(hand_text)
        warnings.extend(result.warnings)
        if result.ok:
            hands.append(result.value)
            continue
        error = result.error
        error.details.setdefault('index', index)
        error.details.setdefault('hand_id', extract_hand_id(hand_text))
        warnings.append(error)

    failed = len(split.value) - len(hands)
    logger.info(f"Parsed {len(hands)} hands ({failed} failed)")
    return Result.success(hands, warnings)


def read_hand_file(file_path: Union[str, Path]) -> Result[str]:
    """Read a hand history file, tolerating bad bytes."""
    file_path = Path(file_path)
    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        return Result.failure(ValidationError(
            ErrorCode.VALIDATION_MISSING_REQUIRED,
            f"File not found: {file_path}",
            details={'path': str(file_path)},
        ))

    with open(file_path, 'r', encoding='utf-8', errors='replace') as f:
        return Result.success(f.read())


def parse_file(file_path: Union[str, Path]) -> Result[List[HandHistory]]:
    """
    Parse every hand in a single file.

    Args:
        file_path: Path to the file to parse

    Returns:
        Result with the parsed hands, as :func:`parse_multiple_hands`
    """
    content = read_hand_file(file_path)
    if not content.ok:
        return Result.failure(content.error)
    logger.info(f"Processing {file_path}")
    return parse_multiple_hands(content.value)


def parse_directory(
    directory: Union[str, Path],
    extensions: Sequence[str] = ('.txt',),
) -> Dict[str, Result[List[HandHistory]]]:
    """
    Parse all files in a directory.

    Returns:
        Dictionary mapping file names to their parse results
    """
    directory = Path(directory)
    if not directory.exists():
        logger.error(f"Directory not found: {directory}")
        return {}

    results = {}
    for ext in extensions:
        for file_path in sorted(directory.glob(f'*{ext}')):
            if file_path.is_file():
                results[file_path.name] = parse_file(file_path)

    logger.info(f"Parsed {len(results)} files from {directory}")
    return results
