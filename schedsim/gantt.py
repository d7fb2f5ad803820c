from __future__ import annotations

from typing import Dict, List, Tuple

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import ExecutionSegment


def render_gantt(history: List[ExecutionSegment]) -> str:
    """
    Plain-text Gantt chart: ``=`` for execution, ``.`` for idle time.
    """
    if not history:
        return "(no execution)"

    line = "|"
    labels = " "
    time_marks = f"{history[0].start_time}"

    for seg in history:
        width = max(1, seg.duration)
        if seg.is_idle:
            line += "." * width
            labels += " " * width
        else:
            line += "=" * width
            labels += seg.label[:width].ljust(width)
        time_marks += f"{seg.end_time:>3}"

    line += "|"

    return "\n".join(
        [
            "Gantt Chart:",
            line,
            labels.rstrip(),
            time_marks,
        ]
    )


def build_rich_gantt(history: List[ExecutionSegment]) -> Tuple[Panel, str]:
    """
    Build a Rich Panel containing a colored Gantt chart and a string with time marks.
    """
    if not history:
        panel = Panel("No execution", title="Gantt Chart")
        return panel, ""

    colors = ["red", "green", "yellow", "blue", "magenta", "cyan"]
    index_to_color: Dict[int, str] = {}

    def process_color(index: int) -> str:
        if index not in index_to_color:
            index_to_color[index] = colors[len(index_to_color) % len(colors)]
        return index_to_color[index]

    timeline = Text()
    labels = Text()
    time_marks = f"{history[0].start_time}"

    for seg in history:
        width = max(1, seg.duration)
        if seg.is_idle:
            timeline.append("." * width, style="dim")
            labels.append(" " * width)
        else:
            timeline.append(" " * width, style=f"on {process_color(seg.process_index)}")
            labels.append(seg.label[:width].ljust(width), style="bold")
        time_marks += f"{seg.end_time:>3}"

    table = Table.grid(padding=(0, 0))
    table.add_row(timeline)
    table.add_row(labels)

    panel = Panel.fit(table, title="Gantt Chart")
    return panel, time_marks
