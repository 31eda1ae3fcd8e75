from __future__ import annotations

from typing import Dict, List

from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from .models import ExecutionLog


def render_order_strip(logs: List[ExecutionLog]) -> str:
    """
    Plain-text execution order, with back-to-back slices of the same
    process collapsed into ``PID*N``.
    """
    if not logs:
        return "(no execution)"

    runs: List[List] = []
    for log in logs:
        if runs and runs[-1][0] == log.pid:
            runs[-1][1] += 1
        else:
            runs.append([log.pid, 1])

    parts = [pid if count == 1 else f"{pid}*{count}" for pid, count in runs]
    return "\n".join(["Execution order:", " ".join(parts)])


def build_rich_timeline(logs: List[ExecutionLog], unit_ns: int) -> Panel:
    """
    Build a Rich Panel with one coloured block per slice, as wide as the
    slice lasted in time units, followed by a colour legend.
    """
    if not logs:
        return Panel("No execution", title="Timeline")

    colors = ["red", "green", "yellow", "blue", "magenta", "cyan"]
    pid_to_color: Dict[str, str] = {}

    def pid_color(pid: str) -> str:
        if pid not in pid_to_color:
            idx = len(pid_to_color) % len(colors)
            pid_to_color[pid] = colors[idx]
        return pid_to_color[pid]

    timeline = Text()
    for log in logs:
        width = max(1, log.duration // unit_ns) if unit_ns > 0 else 1
        timeline.append(" " * width, style=f"on {pid_color(log.pid)}")

    legend = Text()
    for pid, color in pid_to_color.items():
        legend.append("  ", style=f"on {color}")
        legend.append(f" {pid}  ", style="bold")

    return Panel(Group(timeline, legend), title="Timeline")
