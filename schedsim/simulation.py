from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .metrics import compute_system_metrics
from .models import ExecutionSegment, Process, ProcessMetrics, ProcessReport

logger = logging.getLogger(__name__)


class Simulation:
    """
    Timeline bookkeeping shared by every scheduling algorithm.

    Tracks the simulated clock, each process's remaining burst, first start
    and completion times, and the segment history. Algorithms only decide
    *which* process runs next and for how long; everything else lives here.
    The clock starts at the earliest arrival, so the history never begins
    with an idle segment.
    """

    def __init__(self, processes: Sequence[Process]) -> None:
        self.processes = tuple(processes)
        self.remaining: List[int] = [p.burst_time for p in self.processes]
        self.start_times: List[Optional[int]] = [None] * len(self.processes)
        self.completion_times: List[Optional[int]] = [None] * len(self.processes)
        self.history: List[ExecutionSegment] = []
        self.time = min(p.arrival_time for p in self.processes)
        self._finished = 0

    def arrival_order(self) -> List[int]:
        """Process indices by arrival time, input order breaking ties."""
        return [p.index for p in sorted(self.processes, key=lambda p: (p.arrival_time, p.index))]

    def has_arrived(self, index: int) -> bool:
        return self.processes[index].arrival_time <= self.time

    def is_done(self, index: int) -> bool:
        return self.remaining[index] == 0

    @property
    def all_done(self) -> bool:
        return self._finished == len(self.processes)

    def idle_until(self, time: int) -> None:
        if time <= self.time:
            return
        logger.debug("t=%d: CPU idle until t=%d", self.time, time)
        self.history.append(ExecutionSegment(process_index=None, start_time=self.time, end_time=time))
        self.time = time

    def run(self, index: int, duration: Optional[int] = None) -> bool:
        """
        Give the CPU to ``index`` for ``duration`` units (its whole remaining
        burst when omitted). Returns True when the process has finished.
        """
        remaining = self.remaining[index]
        if duration is None or duration > remaining:
            duration = remaining

        if self.start_times[index] is None:
            self.start_times[index] = self.time

        end_time = self.time + duration
        logger.debug("t=%d: P%d runs until t=%d", self.time, index, end_time)
        self.history.append(ExecutionSegment(process_index=index, start_time=self.time, end_time=end_time))
        self.time = end_time
        self.remaining[index] = remaining - duration

        if self.remaining[index] == 0:
            self.completion_times[index] = end_time
            self._finished += 1
            return True
        return False

    def report(self, algorithm: str, quantum: Optional[int] = None) -> ProcessReport:
        metrics: List[ProcessMetrics] = []
        for p in self.processes:
            completion_time = self.completion_times[p.index]
            start_time = self.start_times[p.index]
            turnaround_time = completion_time - p.arrival_time
            metrics.append(
                ProcessMetrics(
                    index=p.index,
                    arrival_time=p.arrival_time,
                    burst_time=p.burst_time,
                    start_time=start_time,
                    completion_time=completion_time,
                    # Total waiting = turnaround - burst
                    waiting_time=turnaround_time - p.burst_time,
                    turnaround_time=turnaround_time,
                    response_time=start_time - p.arrival_time,
                )
            )

        average_wait_time = sum(m.waiting_time for m in metrics) / len(metrics)
        report = ProcessReport(
            algorithm=algorithm,
            quantum=quantum,
            average_wait_time=average_wait_time,
            history=list(self.history),
            processes=metrics,
        )
        compute_system_metrics(report)
        logger.info("%s finished %d processes at t=%d, average wait %.2f",
                    algorithm, len(metrics), self.time, average_wait_time)
        return report
