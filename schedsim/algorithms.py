from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence

from .errors import InputValidationError, ValidationErrorKind
from .models import ProcessReport
from .queue import BoundedQueue
from .simulation import Simulation
from .validation import validate_inputs, validate_quantum, validate_tier_threshold

logger = logging.getLogger(__name__)

DEFAULT_QUANTUM = 2


def _admit_arrivals(sim: Simulation, order: List[int], next_pos: int, route: Callable[[int], None]) -> int:
    """
    Hand every process in ``order[next_pos:]`` that has arrived by now to
    ``route``, in arrival order. Returns the position of the first process
    still pending.
    """
    while next_pos < len(order) and sim.has_arrived(order[next_pos]):
        route(order[next_pos])
        next_pos += 1
    return next_pos


def first_come_first_serve(
    arrival_times: Sequence[int],
    burst_times: Sequence[int],
    queue_capacity: Optional[int] = None,
) -> ProcessReport:
    """
    First-Come First-Serve (non-preemptive) scheduling.

    Processes are served strictly in arrival order; equal arrivals keep
    their input order.
    """
    processes = validate_inputs(arrival_times, burst_times)
    sim = Simulation(processes)
    order = sim.arrival_order()
    ready: BoundedQueue[int] = BoundedQueue(queue_capacity)

    next_pos = 0
    while not sim.all_done:
        next_pos = _admit_arrivals(sim, order, next_pos, ready.enqueue)
        index = ready.dequeue()
        if index is None:
            sim.idle_until(processes[order[next_pos]].arrival_time)
            continue
        sim.run(index)

    return sim.report("FCFS")


def shortest_job_first(arrival_times: Sequence[int], burst_times: Sequence[int]) -> ProcessReport:
    """
    Shortest Job First (non-preemptive).

    At each decision point, among processes that have arrived and are not yet
    completed, choose the one with the smallest remaining burst time. Ties go
    to the earlier arrival, then the lower index. A running process is never
    interrupted by a shorter arrival.
    """
    processes = validate_inputs(arrival_times, burst_times)
    sim = Simulation(processes)

    while not sim.all_done:
        ready = [p for p in processes if sim.has_arrived(p.index) and not sim.is_done(p.index)]

        if not ready:
            # If nothing is ready, jump time to the next arrival.
            next_arrival = min(p.arrival_time for p in processes if not sim.is_done(p.index))
            sim.idle_until(next_arrival)
            continue

        p = min(ready, key=lambda x: (sim.remaining[x.index], x.arrival_time, x.index))
        sim.run(p.index)

    return sim.report("SJF (non-preemptive)")


def round_robin(
    arrival_times: Sequence[int],
    burst_times: Sequence[int],
    quantum: int = DEFAULT_QUANTUM,
    queue_capacity: Optional[int] = None,
) -> ProcessReport:
    """
    Round Robin scheduling with a fixed time quantum.

    Processes that arrive while a slice is running join the ready queue
    before the preempted process is put back at its tail.
    """
    quantum = validate_quantum(quantum)
    processes = validate_inputs(arrival_times, burst_times)
    sim = Simulation(processes)
    order = sim.arrival_order()
    ready: BoundedQueue[int] = BoundedQueue(queue_capacity)

    next_pos = _admit_arrivals(sim, order, 0, ready.enqueue)
    while not sim.all_done:
        index = ready.dequeue()
        if index is None:
            # Jump to next arrival if CPU is idle
            sim.idle_until(processes[order[next_pos]].arrival_time)
            next_pos = _admit_arrivals(sim, order, next_pos, ready.enqueue)
            continue

        finished = sim.run(index, quantum)

        # Enqueue any new arrivals that appeared during this slice
        next_pos = _admit_arrivals(sim, order, next_pos, ready.enqueue)

        if not finished:
            ready.enqueue(index)

    return sim.report("Round Robin", quantum=quantum)


def two_level_first_come_first_serve(
    arrival_times: Sequence[int],
    burst_times: Sequence[int],
    tier_threshold: Optional[float] = None,
    queue_capacity: Optional[int] = None,
) -> ProcessReport:
    """
    Two-level First-Come First-Serve.

    Processes whose burst time is at most ``tier_threshold`` go to the
    foreground queue, the rest to the background queue. The threshold
    defaults to the mean burst time. Both queues are FCFS; the background
    queue only gets the CPU when no foreground process is ready. Scheduling
    is non-preemptive, so a started background process runs to completion.
    """
    processes = validate_inputs(arrival_times, burst_times)
    if tier_threshold is None:
        tier_threshold = sum(p.burst_time for p in processes) / len(processes)
    else:
        tier_threshold = validate_tier_threshold(tier_threshold)

    sim = Simulation(processes)
    order = sim.arrival_order()
    foreground: BoundedQueue[int] = BoundedQueue(queue_capacity)
    background: BoundedQueue[int] = BoundedQueue(queue_capacity)

    def route(index: int) -> None:
        if processes[index].burst_time <= tier_threshold:
            foreground.enqueue(index)
        else:
            background.enqueue(index)

    next_pos = 0
    while not sim.all_done:
        next_pos = _admit_arrivals(sim, order, next_pos, route)
        index = foreground.dequeue()
        if index is None:
            index = background.dequeue()
        if index is None:
            sim.idle_until(processes[order[next_pos]].arrival_time)
            continue
        sim.run(index)

    return sim.report("Two-level FCFS")


class Algorithm(str, Enum):
    FCFS = "fcfs"
    SJF = "sjf"
    RR = "rr"
    TWO_LEVEL_FCFS = "2xfcfs"

    @classmethod
    def parse(cls, name: str) -> "Algorithm":
        key = "".join(str(name).split()).lower()
        for algorithm in cls:
            if algorithm.value == key:
                return algorithm
        choices = ", ".join(a.value for a in cls)
        raise InputValidationError(
            ValidationErrorKind.UNKNOWN_ALGORITHM,
            f"Unknown algorithm '{name}' (choose from {choices})",
        )


@dataclass(frozen=True)
class SimulationConfig:
    quantum: int = DEFAULT_QUANTUM
    queue_capacity: Optional[int] = None
    tier_threshold: Optional[float] = None


def run_algorithm(
    algorithm: Algorithm | str,
    arrival_times: Sequence[int],
    burst_times: Sequence[int],
    config: Optional[SimulationConfig] = None,
) -> ProcessReport:
    """
    Dispatch to the requested algorithm. Settings in ``config`` that an
    algorithm has no use for are ignored.
    """
    if not isinstance(algorithm, Algorithm):
        algorithm = Algorithm.parse(algorithm)
    config = config or SimulationConfig()
    logger.debug("Running %s on %d processes", algorithm.value, len(arrival_times))

    if algorithm is Algorithm.FCFS:
        return first_come_first_serve(arrival_times, burst_times, queue_capacity=config.queue_capacity)
    if algorithm is Algorithm.SJF:
        return shortest_job_first(arrival_times, burst_times)
    if algorithm is Algorithm.RR:
        return round_robin(
            arrival_times,
            burst_times,
            quantum=config.quantum,
            queue_capacity=config.queue_capacity,
        )
    return two_level_first_come_first_serve(
        arrival_times,
        burst_times,
        tier_threshold=config.tier_threshold,
        queue_capacity=config.queue_capacity,
    )
