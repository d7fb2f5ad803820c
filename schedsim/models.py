from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

# Average wait time of a report that was never computed.
NOT_COMPUTED = -1.0


@dataclass(frozen=True)
class Process:
    index: int
    arrival_time: int
    burst_time: int

    @property
    def label(self) -> str:
        return f"P{self.index}"


@dataclass(frozen=True)
class ExecutionSegment:
    """
    One uninterrupted slice of the timeline. ``process_index`` is None for
    an idle gap where no process was ready.
    """

    process_index: Optional[int]
    start_time: int
    end_time: int

    @property
    def duration(self) -> int:
        return self.end_time - self.start_time

    @property
    def is_idle(self) -> bool:
        return self.process_index is None

    @property
    def label(self) -> str:
        return "idle" if self.process_index is None else f"P{self.process_index}"


@dataclass
class ProcessMetrics:
    index: int
    arrival_time: int
    burst_time: int
    start_time: int
    completion_time: int
    waiting_time: int
    turnaround_time: int
    response_time: int

    @property
    def label(self) -> str:
        return f"P{self.index}"


@dataclass
class SystemMetrics:
    cpu_busy_time: int
    idle_time: int
    makespan: int
    throughput: float
    cpu_utilization: float
    starvation_count: int = 0


@dataclass
class ProcessReport:
    algorithm: str
    quantum: Optional[int] = None
    average_wait_time: float = NOT_COMPUTED
    history: Optional[List[ExecutionSegment]] = None
    processes: List[ProcessMetrics] = field(default_factory=list)
    system: Optional[SystemMetrics] = None

    @classmethod
    def not_run(cls, algorithm: str = "") -> "ProcessReport":
        return cls(algorithm=algorithm)

    @property
    def has_run(self) -> bool:
        return self.history is not None

    @property
    def busy_segments(self) -> List[ExecutionSegment]:
        return [s for s in self.history or [] if not s.is_idle]
