from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from .errors import InputValidationError, ValidationErrorKind
from .models import Process


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_inputs(arrival_times: Sequence[int], burst_times: Sequence[int]) -> Tuple[Process, ...]:
    """
    Check the two parallel input sequences and freeze them into Process
    records. Raises InputValidationError before any simulation state exists.
    """
    if len(arrival_times) != len(burst_times):
        raise InputValidationError(
            ValidationErrorKind.LENGTH_MISMATCH,
            f"Got {len(arrival_times)} arrival times but {len(burst_times)} burst times",
        )
    if not arrival_times:
        raise InputValidationError(ValidationErrorKind.EMPTY_INPUT, "At least one process is required")

    processes: List[Process] = []
    for index, (arrival, burst) in enumerate(zip(arrival_times, burst_times)):
        if not _is_int(arrival) or not _is_int(burst):
            raise InputValidationError(
                ValidationErrorKind.NOT_AN_INTEGER,
                f"Process {index}: arrival and burst times must be integers, got {arrival!r}, {burst!r}",
                index=index,
            )
        if arrival < 0:
            raise InputValidationError(
                ValidationErrorKind.NEGATIVE_ARRIVAL,
                f"Process {index}: arrival time must be non-negative, got {arrival}",
                index=index,
            )
        if burst <= 0:
            raise InputValidationError(
                ValidationErrorKind.NON_POSITIVE_BURST,
                f"Process {index}: burst time must be positive, got {burst}",
                index=index,
            )
        processes.append(Process(index=index, arrival_time=arrival, burst_time=burst))

    return tuple(processes)


def validate_quantum(quantum) -> int:
    if not _is_int(quantum) or quantum <= 0:
        raise InputValidationError(
            ValidationErrorKind.INVALID_QUANTUM,
            f"Round Robin requires a positive integer quantum, got {quantum!r}",
        )
    return quantum


def validate_tier_threshold(threshold) -> float:
    if isinstance(threshold, bool) or not isinstance(threshold, (int, float)) or not math.isfinite(threshold):
        raise InputValidationError(
            ValidationErrorKind.INVALID_TIER_THRESHOLD,
            f"Tier threshold must be a finite number, got {threshold!r}",
        )
    return threshold
