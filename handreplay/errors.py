"""
Typed errors and result containers shared by every component.

Parse, snapshot and validation errors carry a stable code, a severity and an
``is_recoverable`` flag. Component boundaries never raise them to the caller;
they return a :class:`Result` holding either a value or the fatal error, plus
any recoverable warnings collected along the way.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


class ErrorCode(str, Enum):
    # Parsing
    PARSE_INVALID_HEADER = "PARSE_001"
    PARSE_MISSING_PLAYER = "PARSE_002"
    PARSE_INVALID_TABLE = "PARSE_003"
    PARSE_INVALID_ACTION = "PARSE_004"
    PARSE_INVALID_CARD = "PARSE_005"
    PARSE_MULTIPLE_HANDS = "PARSE_006"
    PARSE_UNKNOWN_SITE = "PARSE_007"
    PARSE_MALFORMED_LINE = "PARSE_008"
    PARSE_MISSING_BLINDS = "PARSE_009"
    PARSE_INVALID_AMOUNT = "PARSE_010"

    # Snapshot building
    SNAPSHOT_INCONSISTENT_STACKS = "SNAP_001"
    SNAPSHOT_INVALID_POT = "SNAP_002"
    SNAPSHOT_MISSING_PLAYER = "SNAP_003"
    SNAPSHOT_NEGATIVE_STACK = "SNAP_004"
    SNAPSHOT_POT_MISMATCH = "SNAP_005"
    SNAPSHOT_INVALID_ACTION = "SNAP_006"

    # Caller-facing validation
    VALIDATION_MULTIPLE_HANDS = "VAL_001"
    VALIDATION_EMPTY_INPUT = "VAL_002"
    VALIDATION_INVALID_FORMAT = "VAL_003"
    VALIDATION_MISSING_REQUIRED = "VAL_004"


class ErrorSeverity(str, Enum):
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class HandReplayError(Exception):
    """Base class for all typed errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        is_recoverable: bool = False,
        context: Optional[str] = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.severity = severity
        self.is_recoverable = is_recoverable
        self.context = context
        self.timestamp = datetime.now(timezone.utc)

    @property
    def is_warning(self) -> bool:
        return self.severity == ErrorSeverity.WARNING

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.__class__.__name__,
            "code": self.code.value,
            "name": self.code.name,
            "message": self.message,
            "details": self.details,
            "severity": self.severity.value,
            "is_recoverable": self.is_recoverable,
            "timestamp": self.timestamp.isoformat(),
            "context": self.context,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"


class ParseError(HandReplayError):
    """Raised by site grammars; fatal unless built with :meth:`warning`."""

    @classmethod
    def warning(cls, code: ErrorCode, message: str, **kwargs) -> "ParseError":
        return cls(
            code,
            message,
            severity=ErrorSeverity.WARNING,
            is_recoverable=True,
            **kwargs,
        )


class SnapshotBuildError(HandReplayError):
    """Bookkeeping inconsistency while replaying a hand. Always fatal."""

    def __init__(self, code: ErrorCode, message: str, **kwargs):
        kwargs.pop("severity", None)
        kwargs.pop("is_recoverable", None)
        super().__init__(
            code,
            message,
            severity=ErrorSeverity.ERROR,
            is_recoverable=False,
            **kwargs,
        )


class ValidationError(HandReplayError):
    """Caller-facing input problem reported before any parsing."""


@dataclass
class Result(Generic[T]):
    """Success value or fatal error, plus collected warnings."""

    value: Optional[T] = None
    error: Optional[HandReplayError] = None
    warnings: List[HandReplayError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T, warnings: Optional[List[HandReplayError]] = None) -> "Result[T]":
        return cls(value=value, warnings=list(warnings or []))

    @classmethod
    def failure(
        cls,
        error: HandReplayError,
        warnings: Optional[List[HandReplayError]] = None,
    ) -> "Result[T]":
        return cls(error=error, warnings=list(warnings or []))

    def unwrap(self) -> T:
        """Return the value or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value

    def to_dict(self) -> Dict[str, Any]:
        value = self.value
        if hasattr(value, "model_dump"):
            value = value.model_dump(mode="json")
        elif isinstance(value, list):
            value = [v.model_dump(mode="json") if hasattr(v, "model_dump") else v for v in value]

        return {
            "success": self.ok,
            "value": value,
            "error": self.error.to_dict() if self.error else None,
            "warnings": [w.to_dict() for w in self.warnings],
        }
