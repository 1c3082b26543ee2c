"""
handreplay - poker hand history parsing, replay and equity.
"""

from .errors import ErrorCode, ErrorSeverity, HandReplayError, ParseError, Result, SnapshotBuildError, ValidationError

__version__ = "0.1.0"

__all__ = [
    'ErrorCode',
    'ErrorSeverity',
    'HandReplayError',
    'ParseError',
    'Result',
    'SnapshotBuildError',
    'ValidationError',
]
