"""
CPU scheduling simulator.

Computes execution timelines and average waiting times for FCFS, SJF,
Round Robin and two-level FCFS, with a small command-line front end.
"""

from .algorithms import (
    DEFAULT_QUANTUM,
    Algorithm,
    SimulationConfig,
    first_come_first_serve,
    round_robin,
    run_algorithm,
    shortest_job_first,
    two_level_first_come_first_serve,
)
from .errors import CapacityExceededError, InputValidationError, SchedulerError, ValidationErrorKind
from .models import NOT_COMPUTED, ExecutionSegment, ProcessReport
from .queue import BoundedQueue

__all__ = [
    "Algorithm",
    "BoundedQueue",
    "CapacityExceededError",
    "DEFAULT_QUANTUM",
    "ExecutionSegment",
    "InputValidationError",
    "NOT_COMPUTED",
    "ProcessReport",
    "SchedulerError",
    "SimulationConfig",
    "ValidationErrorKind",
    "first_come_first_serve",
    "round_robin",
    "run_algorithm",
    "shortest_job_first",
    "two_level_first_come_first_serve",
]
