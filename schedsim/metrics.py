from __future__ import annotations

from typing import Dict, List

from .models import ProcessMetrics, ProcessReport, SystemMetrics


def compute_system_metrics(report: ProcessReport) -> SystemMetrics:
    """
    Compute throughput and CPU utilization given populated per-process metrics
    and the segment history. The result is also stored on ``report.system``.
    """
    if not report.processes or not report.history:
        system = SystemMetrics(cpu_busy_time=0, idle_time=0, makespan=0, throughput=0.0, cpu_utilization=0.0)
        report.system = system
        return system

    cpu_busy_time = sum(s.duration for s in report.history if not s.is_idle)
    idle_time = sum(s.duration for s in report.history if s.is_idle)
    makespan = report.history[-1].end_time - report.history[0].start_time

    throughput = len(report.processes) / makespan if makespan > 0 else 0.0
    cpu_utilization = cpu_busy_time / makespan if makespan > 0 else 0.0

    # Count processes whose waiting time is more than 2x the average waiting time.
    avg_wait = sum(p.waiting_time for p in report.processes) / len(report.processes)
    starvation_count = sum(1 for p in report.processes if p.waiting_time > 2 * avg_wait)

    system = SystemMetrics(
        cpu_busy_time=cpu_busy_time,
        idle_time=idle_time,
        makespan=makespan,
        throughput=throughput,
        cpu_utilization=cpu_utilization,
        starvation_count=starvation_count,
    )
    report.system = system
    return system


def summarize_process_metrics(processes: List[ProcessMetrics]) -> Dict[str, float]:
    """
    Return averages of the key per-process metrics for quick comparison.
    """
    if not processes:
        return {"avg_waiting": 0.0, "avg_turnaround": 0.0, "avg_response": 0.0}

    n = len(processes)
    return {
        "avg_waiting": sum(p.waiting_time for p in processes) / n,
        "avg_turnaround": sum(p.turnaround_time for p in processes) / n,
        "avg_response": sum(p.response_time for p in processes) / n,
    }
