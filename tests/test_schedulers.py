import pytest

from schedsim.algorithms import (
    first_come_first_serve,
    round_robin,
    shortest_job_first,
    two_level_first_come_first_serve,
)
from schedsim.errors import CapacityExceededError, InputValidationError, ValidationErrorKind
from schedsim.models import ExecutionSegment


def _spans(report):
    return [(s.process_index, s.start_time, s.end_time) for s in report.history]


def test_fcfs_scenario_with_idle_gap():
    res = first_come_first_serve([0, 1, 3, 4, 8, 14, 25], [1, 11, 3, 1, 6, 2, 1])
    assert _spans(res) == [
        (0, 0, 1),
        (1, 1, 12),
        (2, 12, 15),
        (3, 15, 16),
        (4, 16, 22),
        (5, 22, 24),
        (None, 24, 25),
        (6, 25, 26),
    ]
    assert [p.waiting_time for p in res.processes] == [0, 0, 9, 11, 8, 8, 0]
    assert res.average_wait_time == pytest.approx(36 / 7)


def test_fcfs_stable_on_equal_arrivals():
    res = first_come_first_serve([2, 0, 2], [1, 1, 1])
    assert [s.process_index for s in res.busy_segments] == [1, 0, 2]
    assert [s.process_index for s in res.history] == [1, None, 0, 2]


def test_fcfs_clock_starts_at_first_arrival():
    res = first_come_first_serve([5], [2])
    assert res.history == [ExecutionSegment(process_index=0, start_time=5, end_time=7)]
    assert res.average_wait_time == 0


def test_fcfs_order_ignores_burst_times():
    arrivals = [0, 2, 2, 7]
    a = first_come_first_serve(arrivals, [9, 1, 4, 2])
    b = first_come_first_serve(arrivals, [1, 8, 1, 3])
    assert [s.process_index for s in a.busy_segments] == [s.process_index for s in b.busy_segments]


def test_sjf_is_non_preemptive():
    res = shortest_job_first([0, 1, 2, 3, 4, 5], [7, 5, 3, 1, 2, 1])
    assert _spans(res) == [
        (0, 0, 7),
        (3, 7, 8),
        (5, 8, 9),
        (4, 9, 11),
        (2, 11, 14),
        (1, 14, 19),
    ]
    assert res.average_wait_time == pytest.approx(34 / 6)


def test_sjf_simultaneous_arrivals():
    res = shortest_job_first([0, 0, 0], [3, 1, 1])
    assert [s.process_index for s in res.history] == [1, 2, 0]


def test_sjf_equal_bursts_earlier_arrival_wins():
    res = shortest_job_first([0, 2, 1], [5, 2, 2])
    assert [s.process_index for s in res.history] == [0, 2, 1]


def test_sjf_idles_until_next_arrival():
    res = shortest_job_first([0, 10, 10], [2, 5, 3])
    assert _spans(res) == [(0, 0, 2), (None, 2, 10), (2, 10, 13), (1, 13, 18)]


def test_rr_quantum_2():
    res = round_robin([0, 2], [4, 3], quantum=2)
    assert _spans(res) == [(0, 0, 2), (1, 2, 4), (0, 4, 6), (1, 6, 7)]
    assert [p.completion_time for p in res.processes] == [6, 7]
    assert res.average_wait_time == 2.0
    assert res.quantum == 2


def test_rr_admits_arrivals_before_requeue():
    res = round_robin([0, 1], [3, 2], quantum=2)
    assert _spans(res) == [(0, 0, 2), (1, 2, 4), (0, 4, 5)]


def test_rr_idle_gap():
    res = round_robin([0, 10], [3, 2], quantum=2)
    assert _spans(res) == [(0, 0, 2), (0, 2, 3), (None, 3, 10), (1, 10, 12)]


def test_rr_large_quantum_matches_fcfs():
    arrivals = [0, 1, 3, 4, 8, 14, 25]
    bursts = [1, 11, 3, 1, 6, 2, 1]
    rr = round_robin(arrivals, bursts, quantum=max(bursts))
    fcfs = first_come_first_serve(arrivals, bursts)
    assert rr.history == fcfs.history
    assert rr.average_wait_time == fcfs.average_wait_time


def test_rr_default_quantum():
    res = round_robin([0], [5])
    assert [s.duration for s in res.history] == [2, 2, 1]


def test_two_level_serves_short_jobs_first():
    # Mean burst is 4.25: P1 and P3 are foreground, P0 and P2 background.
    res = two_level_first_come_first_serve([0, 1, 2, 3], [6, 2, 8, 1])
    assert _spans(res) == [(0, 0, 6), (1, 6, 8), (3, 8, 9), (2, 9, 17)]
    assert res.average_wait_time == pytest.approx(17 / 4)


def test_two_level_single_tier_is_fcfs():
    arrivals = [0, 1, 2, 3]
    bursts = [6, 2, 8, 1]
    res = two_level_first_come_first_serve(arrivals, bursts, tier_threshold=100)
    assert res.history == first_come_first_serve(arrivals, bursts).history


def test_two_level_background_not_preempted():
    res = two_level_first_come_first_serve([0, 1], [10, 1], tier_threshold=5)
    assert _spans(res) == [(0, 0, 10), (1, 10, 11)]


def test_capacity_exceeded_when_too_many_ready():
    with pytest.raises(CapacityExceededError):
        round_robin([0, 0, 0], [1, 1, 1], queue_capacity=2)


def test_capacity_large_enough_for_ready_set():
    res = first_come_first_serve([0, 5, 10], [1, 1, 1], queue_capacity=1)
    assert [s.process_index for s in res.busy_segments] == [0, 1, 2]


def test_inputs_not_mutated():
    arrivals = [0, 2]
    bursts = [4, 3]
    round_robin(arrivals, bursts, quantum=1)
    assert arrivals == [0, 2]
    assert bursts == [4, 3]


@pytest.mark.parametrize("threshold", [float("nan"), float("inf"), "5", True])
def test_two_level_rejects_bad_threshold(threshold):
    with pytest.raises(InputValidationError) as excinfo:
        two_level_first_come_first_serve([0, 1], [3, 1], tier_threshold=threshold)
    assert excinfo.value.kind is ValidationErrorKind.INVALID_TIER_THRESHOLD
