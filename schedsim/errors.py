from __future__ import annotations

from enum import Enum
from typing import Optional


class ValidationErrorKind(str, Enum):
    """
    Structured reasons for rejecting input. Callers that need a localized
    message switch on these rather than on the exception text.
    """

    EMPTY_INPUT = "empty_input"
    LENGTH_MISMATCH = "length_mismatch"
    NEGATIVE_ARRIVAL = "negative_arrival"
    NON_POSITIVE_BURST = "non_positive_burst"
    NOT_AN_INTEGER = "not_an_integer"
    INVALID_QUANTUM = "invalid_quantum"
    INVALID_CAPACITY = "invalid_capacity"
    INVALID_TIER_THRESHOLD = "invalid_tier_threshold"
    UNKNOWN_ALGORITHM = "unknown_algorithm"
    WHITESPACE = "whitespace"
    LETTERS = "letters"
    MALFORMED_TEXT = "malformed_text"


class SchedulerError(Exception):
    """Base class for every error raised by the simulator."""


class InputValidationError(SchedulerError, ValueError):
    def __init__(self, kind: ValidationErrorKind, message: str, index: Optional[int] = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.index = index


class CapacityExceededError(SchedulerError):
    def __init__(self, capacity: int) -> None:
        super().__init__(f"Queue has reached max capacity ({capacity}), you cannot add more items")
        self.capacity = capacity
