from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .algorithms import DEFAULT_QUANTUM, Algorithm, SimulationConfig, run_algorithm
from .errors import SchedulerError
from .gantt import build_rich_gantt
from .metrics import summarize_process_metrics
from .models import ProcessReport
from .workload_io import (
    PRESET_WORKLOADS,
    Workload,
    format_process_string,
    load_workload,
    parse_process_string,
    preset_workload,
)

logger = logging.getLogger(__name__)


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--sequence",
        "-s",
        help="Processes as 'arrival,burst;arrival,burst', e.g. 0,1;1,11;3,3.",
    )
    source.add_argument(
        "--preset",
        "-p",
        type=int,
        choices=sorted(PRESET_WORKLOADS),
        help="Use one of the built-in sample workloads (default: 1).",
    )
    source.add_argument(
        "--workload",
        "-w",
        help="Path to JSON or CSV workload file.",
    )
    parser.add_argument(
        "--quantum",
        "-q",
        type=int,
        default=DEFAULT_QUANTUM,
        help=f"Time quantum for round-robin (default: {DEFAULT_QUANTUM}).",
    )
    parser.add_argument(
        "--capacity",
        type=int,
        default=None,
        help="Maximum number of processes a ready queue may hold (default: unbounded).",
    )
    parser.add_argument(
        "--tier-threshold",
        type=float,
        default=None,
        help="Burst time at or below which 2xfcfs puts a process in the foreground queue "
        "(default: mean burst time).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every scheduling decision.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schedsim",
        description="CPU scheduling simulator (FCFS, SJF, RR, two-level FCFS).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Run a scheduling algorithm on a workload.")
    run_parser.add_argument(
        "--algorithm",
        "-a",
        required=True,
        help="Algorithm to use (fcfs, sjf, rr, 2xfcfs).",
    )
    _add_common_arguments(run_parser)

    compare_parser = subparsers.add_parser(
        "compare",
        help="Run multiple algorithms on the same workload and compare average metrics.",
    )
    compare_parser.add_argument(
        "--algorithms",
        "-a",
        nargs="+",
        default=[a.value for a in Algorithm],
        help="Algorithms to compare (default: fcfs sjf rr 2xfcfs).",
    )
    _add_common_arguments(compare_parser)

    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
    )


def _read_workload(args: argparse.Namespace) -> Workload:
    if args.sequence is not None:
        return parse_process_string(args.sequence)
    if args.workload is not None:
        return load_workload(args.workload)
    return preset_workload(args.preset or 1)


def _print_result(result: ProcessReport, console: Console) -> None:
    console.print(f"[bold]Algorithm:[/bold] {result.algorithm}")
    if result.quantum is not None:
        console.print(f"[bold]Quantum:[/bold] {result.quantum}")

    console.print()

    panel, time_marks = build_rich_gantt(result.history or [])
    console.print(panel)
    if time_marks:
        console.print(time_marks)

    console.print()

    headers = [
        "PID",
        "Arrive",
        "Burst",
        "Start",
        "Complete",
        "Wait",
        "Turnaround",
        "Response",
    ]

    proc_table = Table(title="Per-process metrics", box=box.SIMPLE_HEAVY)
    for h in headers:
        justify = "center" if h == "PID" else "right"
        proc_table.add_column(h, justify=justify)

    for p in result.processes:
        proc_table.add_row(
            p.label,
            str(p.arrival_time),
            str(p.burst_time),
            str(p.start_time),
            str(p.completion_time),
            str(p.waiting_time),
            str(p.turnaround_time),
            str(p.response_time),
        )

    console.print(proc_table)
    console.print()

    summary = summarize_process_metrics(result.processes)
    if result.system:
        sys = result.system
        sys_table = Table(title="System metrics", box=box.SIMPLE_HEAVY)
        sys_table.add_column("Metric")
        sys_table.add_column("Value", justify="right")

        sys_table.add_row("Avg waiting", f"{result.average_wait_time:.2f}")
        sys_table.add_row("Avg turnaround", f"{summary['avg_turnaround']:.2f}")
        sys_table.add_row("Avg response", f"{summary['avg_response']:.2f}")
        sys_table.add_row("Idle time", str(sys.idle_time))
        sys_table.add_row("Throughput (proc/time)", f"{sys.throughput:.3f}")
        sys_table.add_row("CPU utilization", f"{sys.cpu_utilization*100:.1f}%")
        sys_table.add_row("Starvation count", str(sys.starvation_count))

        console.print(sys_table)


def _run_compare(workload: Workload, algorithms: List[str], config: SimulationConfig, console: Console) -> None:
    arrival_times, burst_times = workload

    summary_table = Table(
        title=f"Algorithm comparison: {format_process_string(arrival_times, burst_times)}",
        box=box.SIMPLE_HEAVY,
    )
    summary_table.add_column("Algorithm")
    summary_table.add_column("Quantum", justify="right")
    summary_table.add_column("Avg waiting", justify="right")
    summary_table.add_column("Avg turnaround", justify="right")
    summary_table.add_column("Avg response", justify="right")

    for alg in algorithms:
        result = run_algorithm(alg, arrival_times, burst_times, config)
        summary = summarize_process_metrics(result.processes)
        summary_table.add_row(
            result.algorithm,
            "" if result.quantum is None else str(result.quantum),
            f"{result.average_wait_time:.2f}",
            f"{summary['avg_turnaround']:.2f}",
            f"{summary['avg_response']:.2f}",
        )

    console.print(summary_table)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    console = Console()
    config = SimulationConfig(
        quantum=args.quantum,
        queue_capacity=args.capacity,
        tier_threshold=args.tier_threshold,
    )

    try:
        workload = _read_workload(args)
        if args.command == "run":
            arrival_times, burst_times = workload
            result = run_algorithm(args.algorithm, arrival_times, burst_times, config)
            _print_result(result, console)
            return 0

        if args.command == "compare":
            _run_compare(workload, args.algorithms, config, console)
            return 0
    except SchedulerError as exc:
        logger.debug("Simulation aborted", exc_info=True)
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        return 2

    parser.error(f"Unknown command: {args.command}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
